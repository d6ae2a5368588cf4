"""
Protocol Command and Response Definitions

This module defines the data structures for shell commands and responses.
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional


class CommandType(Enum):
    """Enumeration of supported command types."""
    INSERT = auto()
    GET = auto()
    INVALIDATE = auto()
    STATS = auto()
    QUIT = auto()
    UNKNOWN = auto()


class ResponseStatus(Enum):
    """Enumeration of response statuses."""
    OK = "ok"
    NOT_FOUND = "not found"
    ERROR = "error"


@dataclass
class Command:
    """
    Represents a parsed command.

    Attributes:
        type: The type of command
        key: The key for the operation (empty for STATS and QUIT)
        value: The value for INSERT operations (may be empty)
        ttl: Time-to-live in seconds for INSERT (None = cache default)
        raw: The original raw command string
        error: Why the command was rejected (UNKNOWN commands only)
    """
    type: CommandType
    key: str = ""
    value: str = ""
    ttl: Optional[float] = None
    raw: str = ""
    error: str = ""

    @property
    def is_valid(self) -> bool:
        """Check if the command is valid for its type."""
        if self.type == CommandType.UNKNOWN:
            return False
        if self.type in (CommandType.STATS, CommandType.QUIT):
            return True
        return bool(self.key)


@dataclass
class Response:
    """
    Represents a command response.

    Attributes:
        status: OK, NOT_FOUND or ERROR
        message: Response message or error description
        value: The value returned (for GET operations)
    """
    status: ResponseStatus
    message: str = ""
    value: Optional[str] = None

    @classmethod
    def ok(cls, message: str = "", value: Optional[str] = None) -> "Response":
        """Create a successful response."""
        return cls(status=ResponseStatus.OK, message=message, value=value)

    @classmethod
    def error(cls, message: str) -> "Response":
        """Create an error response."""
        return cls(status=ResponseStatus.ERROR, message=message)

    @classmethod
    def not_found(cls) -> "Response":
        """Create a 'not found' response for GET misses."""
        return cls(status=ResponseStatus.NOT_FOUND)

    @classmethod
    def value_response(cls, value: str) -> "Response":
        """Create a GET response with a value."""
        return cls.ok(value=value)

    @classmethod
    def stats_response(cls, stats: dict) -> "Response":
        """Create a STATS response listing each counter as name=count."""
        return cls.ok(message=" ".join(
            f"{name}={stats[name]}" for name in ("total_keys", "active_keys", "expired_keys")
        ))
