"""Error types raised across the aggregator."""

from typing import Optional


class GatorError(Exception):
    """Base class for all handled errors."""


class ConfigIOError(GatorError):
    """Configuration file could not be read or written."""


class DatabaseConnectionError(GatorError):
    """Storage is unreachable."""


class StorageError(GatorError):
    """Any other database failure."""


class UnknownCommand(GatorError):
    """No handler is registered under the requested name."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Unknown command: '{name}'")


class NotAuthenticated(GatorError):
    """No active user is configured, or it does not exist."""

    def __init__(self, username: Optional[str] = None) -> None:
        self.username = username
        if username:
            message = f"Active user '{username}' does not exist. Run 'gator register <name>' or 'gator login <name>'."
        else:
            message = "No user is logged in. Run 'gator login <name>' first."
        super().__init__(message)


class ValidationError(GatorError):
    """Missing or malformed command arguments."""


class NotFound(GatorError):
    """A lookup missed."""

    def __init__(self, entity: str, key: str) -> None:
        self.entity = entity
        self.key = key
        super().__init__(f"{entity.capitalize()} not found: {key}")


class Conflict(GatorError):
    """A uniqueness constraint was violated."""

    def __init__(self, entity: str, field: str, value: Optional[str] = None) -> None:
        self.entity = entity
        self.field = field
        self.value = value
        detail = f" '{value}'" if value is not None else ""
        super().__init__(f"{entity.capitalize()} with this {field}{detail} already exists")


class FetchError(GatorError):
    """A feed could not be fetched or parsed."""

    def __init__(self, url: str, cause: str) -> None:
        self.url = url
        self.cause = cause
        super().__init__(f"Failed to fetch {url}: {cause}")


class DateParseError(GatorError):
    """A publish date did not match the expected format."""

    def __init__(self, text: str) -> None:
        self.text = text
        super().__init__(f"Could not parse publish date: {text!r}")
