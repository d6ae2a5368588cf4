"""
Interactive Shell Module

This module serves the line protocol over a pair of text streams
(normally stdin/stdout), executing every command against one cache
owned for the lifetime of the session.

Without persistence, a one-shot command only ever sees an empty cache;
the shell is how a single process keeps entries around across commands.
"""

import logging
from typing import Optional, TextIO

from .cache.store import Cache
from .protocol.commands import Command, CommandType, Response
from .protocol.parser import ProtocolParser

logger = logging.getLogger(__name__)


class CacheShell:
    """
    Line-oriented command loop over a Cache.

    Usage:
        shell = CacheShell(Cache())
        shell.run(sys.stdin, sys.stdout)

    Attributes:
        cache: The Cache every command is executed against
        parser: The ProtocolParser for parsing commands
        prompt: Text written before each read (empty = no prompt)
    """

    def __init__(
        self,
        cache: Cache,
        parser: Optional[ProtocolParser] = None,
        prompt: str = "",
    ):
        self.cache = cache
        self.parser = parser if parser is not None else ProtocolParser()
        self.prompt = prompt

    def run(self, stdin: TextIO, stdout: TextIO) -> int:
        """
        Read and execute commands until QUIT or end of input.

        Args:
            stdin: Stream to read command lines from
            stdout: Stream to write responses to

        Returns:
            Number of commands executed (rejected lines are not counted)
        """
        executed = 0
        logger.debug("Shell session started")

        try:
            while True:
                if self.prompt:
                    stdout.write(self.prompt)
                    stdout.flush()

                line = stdin.readline()
                if not line:
                    logger.debug("End of input")
                    break
                if not line.strip():
                    continue

                command = self.parser.parse_request(line)

                if command.type == CommandType.QUIT:
                    logger.debug("Quit requested")
                    break

                if not command.is_valid:
                    logger.debug(f"Rejected line {command.raw!r}: {command.error}")
                    response = Response.error(command.error or "invalid command")
                else:
                    response = self.execute(command)
                    executed += 1

                stdout.write(self.parser.format_response(response))
                stdout.flush()
        except Exception as exc:
            logger.exception(f"Error serving shell session: {exc}")
            raise

        logger.debug(f"Shell session ended after {executed} commands")
        return executed

    def execute(self, command: Command) -> Response:
        """Execute a parsed command against the cache."""
        if command.type == CommandType.INSERT:
            self.cache.insert(command.key, command.value, command.ttl)
            return Response.ok()

        if command.type == CommandType.GET:
            value = self.cache.get(command.key)
            return Response.value_response(value) if value is not None else Response.not_found()

        if command.type == CommandType.INVALIDATE:
            self.cache.invalidate(command.key)
            return Response.ok()

        if command.type == CommandType.STATS:
            return Response.stats_response(self.cache.get_stats())

        return Response.error("invalid command")
