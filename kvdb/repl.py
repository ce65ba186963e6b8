#!/usr/bin/env python3
"""
KVDB Shell Entry Point

Interactive shell for the KVDB key-value store.

Usage:
    kvdb                          # Start the shell
    python -m kvdb.repl           # Same, without installing
    kvdb --prompt "db> "          # Custom prompt
    kvdb --debug                  # Enable debug logging

Environment Variables:
    KVDB_PROMPT      - Shell prompt
    KVDB_DEBUG       - Enable debug mode (true/false)
    KVDB_LOG_LEVEL   - Log level for diagnostics (default WARNING)
"""

import argparse
import logging
import sys
from typing import Optional, TextIO

from .config.settings import settings
from .session import Session, format_reply

# Enable command history with arrow keys (works on Unix systems)
try:
    import readline  # noqa: F401
except ImportError:
    pass  # readline not available on Windows by default

logger = logging.getLogger(__name__)

EXIT_COMMANDS = ("exit", "quit", ".exit")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")

HELP_TEXT = """
KVDB Statements:
----------------
  SET <key> <value>   Store a value under a new key
                      (synonyms: put, insert, in, i)
  GET <key>           Show the value for a key
                      (synonyms: select, output, out, o)
  DEL <key>           Delete a key
                      (synonyms: delete, rem, remove, rm, d)

Keys are never overwritten: DEL a key before setting it again.

Shell Commands:
---------------
  help                Show this help message
  exit                Exit the shell
"""


def parse_args(argv: Optional[list] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="KVDB: Interactive Key-Value Store",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )

    parser.add_argument(
        "--prompt",
        type=str,
        default=settings.PROMPT,
        help="Prompt shown before each statement",
    )

    parser.add_argument(
        "--log-level",
        type=str.upper,
        default=settings.LOG_LEVEL,
        choices=LOG_LEVELS,
        help="Lowest diagnostic level to show (INFO shows confirmations)",
    )

    parser.add_argument(
        "--debug",
        action="store_true",
        default=settings.DEBUG,
        help="Enable debug logging",
    )

    args = parser.parse_args(argv)

    # choices are not checked against the default taken from KVDB_LOG_LEVEL
    if args.log_level not in LOG_LEVELS:
        parser.error(
            f"invalid log level {args.log_level!r} (choose from {', '.join(LOG_LEVELS)})"
        )

    return args


def setup_logging(level: str = "WARNING", debug: bool = False) -> None:
    """Configure logging. Diagnostics go to stderr, replies to stdout."""
    logging.basicConfig(
        level=logging.DEBUG if debug else getattr(logging, level.upper()),
        format=settings.DEBUG_LOG_FORMAT if debug else settings.LOG_FORMAT,
        handlers=[
            logging.StreamHandler(sys.stderr),
        ]
    )


def run_repl(
        session: Session,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
        prompt: str = None,
) -> int:
    """
    Run the read-eval-print loop until exit or end of input.

    Args:
        session: Session that executes each statement
        stdin: Stream to read lines from (default: interactive input())
        stdout: Stream to write replies to (default: sys.stdout)
        prompt: Prompt string (default from settings)

    Returns:
        Number of statements executed
    """
    stdout = stdout if stdout is not None else sys.stdout
    prompt = prompt if prompt is not None else settings.PROMPT
    executed = 0

    def read_line() -> str:
        if stdin is None:
            return input(prompt)
        stdout.write(prompt)
        stdout.flush()
        line = stdin.readline()
        if not line:
            raise EOFError
        return line

    try:
        while True:
            try:
                line = read_line().strip()
            except EOFError:
                stdout.write("\n")
                break

            if not line:
                continue

            lower = line.lower()
            if lower == "help":
                stdout.write(HELP_TEXT)
                continue
            if lower in EXIT_COMMANDS:
                break

            reply = session.run(line)
            executed += 1
            stdout.write(format_reply(reply) + "\n")
            stdout.flush()

    except KeyboardInterrupt:
        stdout.write("\n\nInterrupted.\n")

    logger.debug(f"Session ended after {executed} statements")
    return executed


def main(argv: Optional[list] = None) -> None:
    """Main entry point for the shell."""
    args = parse_args(argv)
    setup_logging(level=args.log_level, debug=args.debug)

    session = Session()
    if sys.stdin.isatty():
        print("KVDB shell. Type 'help' for statements, 'exit' to leave.")
    run_repl(session, prompt=args.prompt)
    print("Goodbye!")


if __name__ == "__main__":
    main()
