"""
Protocol Parser Module

This module handles parsing of shell command lines and formatting of
responses. The key and ttl validators are shared with the command-line
interface so both surfaces reject the same input.
"""

import math
import shlex

from .commands import Command, CommandType, Response, ResponseStatus
from ..config.settings import settings


def validate_key(key: str, max_length: int = None) -> str:
    """
    Check a key supplied by a user.

    Raises:
        ValueError: if the key is empty or too long
    """
    max_length = max_length if max_length is not None else settings.MAX_KEY_LENGTH
    if not key:
        raise ValueError("key must not be empty")
    if len(key) > max_length:
        raise ValueError(f"key longer than {max_length} characters")
    return key


def parse_ttl(text: str) -> float:
    """
    Parse a time-to-live given in seconds.

    Raises:
        ValueError: if the ttl is not a finite, non-negative number
    """
    try:
        ttl = float(text)
    except ValueError:
        raise ValueError(f"invalid ttl {text!r}: not a number")
    if not math.isfinite(ttl):
        raise ValueError(f"invalid ttl {text!r}: not a finite number")
    if ttl < 0:
        raise ValueError(f"invalid ttl {text!r}: must not be negative")
    return ttl


class ProtocolParser:
    """
    Parser for the Memory Cache shell protocol.

    Protocol Format:
        Request:  <COMMAND> [ARGS...]\n
        Response: <RESULT>\n

    Commands:
        INSERT <key> <value> [ttl]  -> ok
        GET <key>                   -> <value> | not found
        INVALIDATE <key>            -> ok
        STATS                       -> total_keys=N active_keys=N expired_keys=N
        QUIT                        -> (session ends)

    Arguments are split with shell quoting rules, so a value holding
    spaces or an empty value can be given as "a b" or "".

    Constraints:
        - Keys: non-empty, max 256 characters
        - TTL: non-negative number of seconds (omitted = cache default)
    """

    def __init__(self):
        """Initialize the parser with constraints from settings."""
        self.max_key_length = settings.MAX_KEY_LENGTH

    def parse_request(self, data: str) -> Command:
        """
        Parse a raw request string into a Command object.

        Args:
            data: Raw request string (may include trailing newline)

        Returns:
            Command object representing the parsed request.
            Returns Command with type=UNKNOWN and an error message for
            invalid/malformed requests.

        Examples:
            >>> parser = ProtocolParser()
            >>> cmd = parser.parse_request("INSERT mykey myvalue 60")
            >>> cmd.type == CommandType.INSERT
            True
            >>> cmd.key
            'mykey'
            >>> cmd.ttl
            60.0
        """
        raw = data.strip()
        if not raw:
            return self._unknown(raw, "empty command")

        try:
            parts = shlex.split(raw)
        except ValueError as exc:
            return self._unknown(raw, str(exc).lower())
        if not parts:
            return self._unknown(raw, "empty command")

        command_name = parts[0].upper()

        if command_name == "INSERT":
            return self._parse_insert(parts, raw)
        if command_name in ("GET", "INVALIDATE"):
            return self._parse_key_command(CommandType[command_name], parts, raw)
        if command_name in ("STATS", "QUIT"):
            if len(parts) == 1:
                return Command(type=CommandType[command_name], raw=raw)
            return self._unknown(raw, f"{command_name} takes no arguments")

        return self._unknown(raw, f"unknown command {parts[0]!r}")

    def _unknown(self, raw: str, reason: str) -> Command:
        return Command(type=CommandType.UNKNOWN, raw=raw, error=reason)

    def _parse_insert(self, parts: list, raw: str) -> Command:
        """
        Parse an INSERT command.

        Format: INSERT <key> <value> [ttl]
        """
        if len(parts) < 3 or len(parts) > 4:
            return self._unknown(raw, "usage: INSERT <key> <value> [ttl]")

        key, value = parts[1], parts[2]
        try:
            validate_key(key, self.max_key_length)
            ttl = parse_ttl(parts[3]) if len(parts) == 4 else None
        except ValueError as exc:
            return self._unknown(raw, str(exc))

        return Command(
            type=CommandType.INSERT,
            key=key,
            value=value,
            ttl=ttl,
            raw=raw,
        )

    def _parse_key_command(self, command_type: CommandType, parts: list, raw: str) -> Command:
        """
        Parse a command taking a single key (GET, INVALIDATE).

        Format: <COMMAND> <key>
        """
        if len(parts) != 2:
            return self._unknown(raw, f"usage: {command_type.name} <key>")

        key = parts[1]
        try:
            validate_key(key, self.max_key_length)
        except ValueError as exc:
            return self._unknown(raw, str(exc))

        return Command(type=command_type, key=key, raw=raw)

    def format_response(self, response: Response) -> str:
        """
        Format a Response object into a protocol string.

        Args:
            response: Response object to format

        Returns:
            Formatted response string WITH trailing newline.

        Examples:
            >>> parser = ProtocolParser()
            >>> parser.format_response(Response.ok())
            'ok\\n'
            >>> parser.format_response(Response.value_response("hello"))
            'hello\\n'
            >>> parser.format_response(Response.not_found())
            'not found\\n'
            >>> parser.format_response(Response.error("key must not be empty"))
            'error: key must not be empty\\n'
        """
        if response.status == ResponseStatus.ERROR:
            return f"{response.status.value}: {response.message}\n"

        # A GET hit prints the bare value, even when it is empty
        if response.value is not None:
            return f"{response.value}\n"

        return f"{response.message or response.status.value}\n"
