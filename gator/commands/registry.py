"""Command registry and router."""

from typing import Dict, List

from ..errors import UnknownCommand
from .state import Handler, State


class CommandRegistry:
    """Map command names to handlers and dispatch to them."""

    def __init__(self) -> None:
        self._handlers: Dict[str, Handler] = {}

    def register(self, name: str, handler: Handler) -> None:
        """Store ``handler`` under ``name``.

        Registering a name twice replaces the earlier handler; handlers are
        never chained.
        """
        self._handlers[name] = handler

    def names(self) -> List[str]:
        """Registered command names, sorted."""
        return sorted(self._handlers)

    def __contains__(self, name: object) -> bool:
        return name in self._handlers

    def dispatch(self, state: State, name: str, args: List[str]) -> None:
        """Run the handler registered under ``name`` with ``args``."""
        handler = self._handlers.get(name)
        if handler is None:
            raise UnknownCommand(name)
        return handler(state, args)
