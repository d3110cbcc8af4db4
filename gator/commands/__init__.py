"""Command registry, middleware and handlers."""

from .agg import agg_handler
from .browse import browse_handler
from .feeds import addfeed_handler, feeds_handler
from .follows import follow_handler, following_handler, unfollow_handler
from .middleware import current_user, logged_in
from .registry import CommandRegistry
from .state import Handler, State
from .users import login_handler, register_handler, reset_handler, users_handler


def build_registry() -> CommandRegistry:
    """Registry holding every CLI command."""
    registry = CommandRegistry()
    registry.register("login", login_handler)
    registry.register("register", register_handler)
    registry.register("reset", reset_handler)
    registry.register("users", users_handler)
    registry.register("agg", agg_handler)
    registry.register("addfeed", logged_in(addfeed_handler))
    registry.register("feeds", feeds_handler)
    registry.register("follow", logged_in(follow_handler))
    registry.register("following", logged_in(following_handler))
    registry.register("unfollow", logged_in(unfollow_handler))
    registry.register("browse", logged_in(browse_handler))
    return registry


__all__ = [
    "CommandRegistry",
    "Handler",
    "State",
    "build_registry",
    "current_user",
    "logged_in",
]
