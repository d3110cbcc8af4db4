"""Handler middleware."""

import functools
from typing import Callable, List

from ..errors import NotAuthenticated, NotFound
from ..models import User
from .state import Handler, State

AuthedHandler = Callable[[State, List[str], User], None]


def current_user(state: State) -> User:
    """Resolve the configured active user or raise ``NotAuthenticated``."""
    name = state.config.current_user_name
    if not name:
        raise NotAuthenticated()
    try:
        return state.db.get_user_by_name(name)
    except NotFound as e:
        raise NotAuthenticated(name) from e


def logged_in(handler: AuthedHandler) -> Handler:
    """Wrap a handler that needs the active user into a plain handler."""

    @functools.wraps(handler)
    def wrapper(state: State, args: List[str]) -> None:
        user = current_user(state)
        return handler(state, args, user)

    return wrapper
