"""
Session Module

A Session ties a parser and a store together: it parses a line, routes
the resulting statement to the matching store operation, and turns the
outcome into a Reply the shell can print.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .diagnostics import Reporter
from .protocol.parser import StatementParser
from .protocol.statement import Statement, StatementType
from .storage.store import ExecResult, Store

logger = logging.getLogger(__name__)


class ReplyStatus(Enum):
    """Enumeration of reply statuses."""
    OK = "OK"
    ERROR = "ERROR"


@dataclass
class Reply:
    """
    Represents the outcome of one statement, as shown to the user.

    Attributes:
        status: OK or ERROR
        message: Reply message or error description
        value: The value returned (for GET statements)
    """
    status: ReplyStatus
    message: str = ""
    value: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status == ReplyStatus.OK

    @classmethod
    def success(cls, message: str = "", value: Optional[str] = None) -> "Reply":
        """Create a successful reply."""
        return cls(status=ReplyStatus.OK, message=message, value=value)

    @classmethod
    def error(cls, message: str) -> "Reply":
        """Create an error reply."""
        return cls(status=ReplyStatus.ERROR, message=message)

    @classmethod
    def stored(cls) -> "Reply":
        return cls.success(message="stored")

    @classmethod
    def deleted(cls) -> "Reply":
        return cls.success(message="deleted")

    @classmethod
    def value_response(cls, value: str) -> "Reply":
        return cls.success(value=value)

    @classmethod
    def key_exists(cls) -> "Reply":
        return cls.error("key already exists")

    @classmethod
    def key_not_found(cls) -> "Reply":
        return cls.error("key not found")

    @classmethod
    def unknown_statement(cls, word: str = "") -> "Reply":
        if not word:
            return cls.error("unrecognized statement")
        return cls.error(f"unrecognized statement `{word}`")

    @classmethod
    def parse_failed(cls) -> "Reply":
        return cls.error("statement could not be parsed")


class Session:
    """
    One interactive session against a store.

    The parser and the store share a single reporter, so every diagnostic
    of the session goes through one place.

    Usage:
        session = Session()
        session.run("SET greeting hello world").message   # "stored"
        session.run("GET greeting").value                 # "hello world"
    """

    def __init__(
            self,
            store: Optional[Store] = None,
            parser: Optional[StatementParser] = None,
            reporter: Optional[Reporter] = None,
    ):
        self.reporter = reporter if reporter is not None else Reporter()
        self.store = store if store is not None else Store(reporter=self.reporter)
        self.parser = parser if parser is not None else StatementParser(reporter=self.reporter)

    def run(self, line: str) -> Reply:
        """Parse and execute a single input line."""
        statement = self.parser.prep(line)
        reply = self.execute(statement, line)
        logger.debug(f"{statement.type.name} -> {reply.status.value} {reply.message}")
        return reply

    def execute(self, statement: Statement, line: str = "") -> Reply:
        """
        Execute a parsed statement on the store.

        Args:
            statement: The statement to execute
            line: The raw line it came from, used to name unknown keywords

        Returns:
            Reply describing the outcome
        """
        if not statement.is_valid:
            if statement.type == StatementType.UNKNOWN:
                words = StatementParser.split(line)
                return Reply.unknown_statement(words[0] if words else "")
            return Reply.parse_failed()

        if statement.type == StatementType.SET:
            result = self.store.set(statement.key, statement.value)
            return Reply.stored() if result == ExecResult.SUCCESS else Reply.key_exists()

        if statement.type == StatementType.GET:
            lookup = self.store.get(statement.key)
            return Reply.value_response(lookup.value) if lookup.ok else Reply.key_not_found()

        if statement.type == StatementType.DEL:
            result = self.store.delete(statement.key)
            return Reply.deleted() if result == ExecResult.SUCCESS else Reply.key_not_found()

        return Reply.parse_failed()


def format_reply(reply: Reply) -> str:
    """
    Format a Reply for display.

    Examples:
        >>> format_reply(Reply.value_response("hello"))
        'hello'
        >>> format_reply(Reply.key_not_found())
        'Error: key not found'
    """
    body = reply.value if reply.value is not None else reply.message
    if reply.status == ReplyStatus.ERROR:
        return f"Error: {body}"
    return body
