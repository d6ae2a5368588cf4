#!/usr/bin/env python3
"""
Memory Cache Command-Line Entry Point

Translates command-line arguments into calls against a Cache and prints
the result.

Usage:
    memory-cache insert -k KEY -v VALUE [-t SECONDS]   # prints "ok"
    memory-cache get -k KEY                            # prints value or "not found"
    memory-cache invalidate -k KEY                     # prints "ok"
    memory-cache shell                                 # read commands from stdin
    memory-cache --debug ...                           # Enable debug logging

    python -m memory_cache.cli ...                     # without installing

Environment Variables:
    MEMORY_CACHE_DEFAULT_TTL   - TTL used when -t is omitted
    MEMORY_CACHE_DEBUG         - Enable debug mode (true/false)
    MEMORY_CACHE_LOG_LEVEL     - Log level when not in debug mode
"""

import argparse
import logging
import sys
from typing import List, Optional

from .cache.store import Cache
from .config.settings import settings
from .protocol.parser import parse_ttl, validate_key
from .shell import CacheShell

logger = logging.getLogger(__name__)


def key_argument(text: str) -> str:
    """argparse type for -k/--key."""
    try:
        return validate_key(text)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc))


def ttl_argument(text: str) -> float:
    """argparse type for -t/--ttl."""
    try:
        return parse_ttl(text)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc))


def build_parser() -> argparse.ArgumentParser:
    """Build the command line parser."""
    parser = argparse.ArgumentParser(
        prog="memory-cache",
        description="Memory Cache: In-Process TTL Key-Value Cache",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )

    parser.add_argument(
        "--debug",
        action="store_true",
        default=settings.DEBUG,
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")
    subparsers.required = True

    insert = subparsers.add_parser(
        "insert",
        help="Insert a value into the cache",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    insert.add_argument("-k", "--key", type=key_argument, required=True, help="Key to store")
    insert.add_argument("-v", "--value", type=str, required=True, help="Value to store")
    insert.add_argument(
        "-t",
        "--ttl",
        type=ttl_argument,
        default=settings.DEFAULT_TTL,
        help="Time-to-live in seconds",
    )

    get = subparsers.add_parser("get", help="Look up a key")
    get.add_argument("-k", "--key", type=key_argument, required=True, help="Key to look up")

    invalidate = subparsers.add_parser("invalidate", help="Remove a key")
    invalidate.add_argument("-k", "--key", type=key_argument, required=True, help="Key to remove")

    shell = subparsers.add_parser(
        "shell",
        help="Read commands from standard input against one cache",
    )
    shell.add_argument(
        "--prompt",
        type=str,
        default=None,
        help=f"Prompt printed before each command (default: {settings.PROMPT!r} "
             "when stdin is a terminal, otherwise none)",
    )

    return parser


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    return build_parser().parse_args(argv)


def setup_logging(debug: bool = False) -> None:
    """Configure logging based on debug flag."""
    level = logging.DEBUG if debug else settings.LOG_LEVEL.upper()

    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            # stdout carries command results
            logging.StreamHandler(sys.stderr),
        ]
    )


def run_command(args: argparse.Namespace, cache: Cache) -> int:
    """
    Execute one parsed subcommand against the cache.

    Returns:
        Process exit code
    """
    if args.command == "insert":
        cache.insert(args.key, args.value, args.ttl)
        print("ok")
    elif args.command == "get":
        value = cache.get(args.key)
        print(value if value is not None else "not found")
    elif args.command == "invalidate":
        cache.invalidate(args.key)
        print("ok")
    elif args.command == "shell":
        prompt = args.prompt
        if prompt is None:
            prompt = settings.PROMPT if sys.stdin.isatty() else ""
        CacheShell(cache, prompt=prompt).run(sys.stdin, sys.stdout)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point: owns the one Cache used for this process."""
    args = parse_args(argv)

    setup_logging(debug=args.debug)
    logger.debug(f"Running {args.command!r} command")

    cache = Cache()
    return run_command(args, cache)


if __name__ == "__main__":
    sys.exit(main())
