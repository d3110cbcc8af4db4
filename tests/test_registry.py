"""Tests for the command registry and router."""

import pytest

from gator.commands import CommandRegistry, build_registry
from gator.errors import UnknownCommand, ValidationError


def test_dispatch_calls_handler_with_state_and_args(state):
    calls = []
    registry = CommandRegistry()
    registry.register("echo", lambda s, args: calls.append((s, args)))

    registry.dispatch(state, "echo", ["a", "b"])

    assert calls == [(state, ["a", "b"])]


def test_unknown_command_leaves_state_untouched(state, gateway, config_path):
    before = config_path.read_text()
    registry = build_registry()

    with pytest.raises(UnknownCommand) as exc_info:
        registry.dispatch(state, "frobnicate", ["x"])

    assert exc_info.value.name == "frobnicate"
    assert gateway.users == {} and gateway.feeds == {}
    assert config_path.read_text() == before


def test_later_registration_replaces_earlier(state):
    calls = []
    registry = CommandRegistry()
    registry.register("cmd", lambda s, args: calls.append("first"))
    registry.register("cmd", lambda s, args: calls.append("second"))

    registry.dispatch(state, "cmd", [])

    assert calls == ["second"]


def test_handler_errors_propagate_unchanged(state):
    error = ValidationError("bad input")

    def handler(s, args):
        raise error

    registry = CommandRegistry()
    registry.register("boom", handler)

    with pytest.raises(ValidationError) as exc_info:
        registry.dispatch(state, "boom", [])
    assert exc_info.value is error


def test_build_registry_registers_every_command():
    registry = build_registry()

    assert registry.names() == [
        "addfeed",
        "agg",
        "browse",
        "feeds",
        "follow",
        "following",
        "login",
        "register",
        "reset",
        "unfollow",
        "users",
    ]
    assert "login" in registry
    assert "nope" not in registry
