"""Positional argument helpers."""

from typing import List

from ..errors import ValidationError


def require_arg(args: List[str], index: int, usage: str) -> str:
    """Return ``args[index]`` or fail with the command's usage line."""
    if len(args) <= index or not args[index].strip():
        raise ValidationError(f"Missing argument. Usage: gator {usage}")
    return args[index]
