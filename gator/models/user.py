"""User model."""

from pydantic import Field

from .base import DBModel


class User(DBModel):
    """Registered user."""

    name: str = Field(..., description="Unique display name")
