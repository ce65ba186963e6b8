"""
Statement Definitions

This module defines the data structures produced by the statement parser:
the statement type, the parsed statement itself, and the synonym table
that maps operation keywords onto statement types.
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Dict, Optional


class StatementType(Enum):
    """Enumeration of statement types."""
    SET = auto()
    GET = auto()
    DEL = auto()
    UNKNOWN = auto()
    FAIL = auto()

    @property
    def word(self) -> str:
        """Canonical command word, used in diagnostics."""
        if self in (StatementType.SET, StatementType.GET, StatementType.DEL):
            return self.name
        return "Unknown"

    @classmethod
    def from_keyword(cls, word: str) -> "StatementType":
        """Look up an operation keyword, case-insensitively."""
        return KEYWORDS.get(word.lower(), cls.UNKNOWN)


KEYWORDS: Dict[str, StatementType] = {
    **dict.fromkeys(("set", "put", "insert", "in", "i"), StatementType.SET),
    **dict.fromkeys(("get", "select", "output", "out", "o"), StatementType.GET),
    **dict.fromkeys(("del", "delete", "rem", "remove", "rm", "d"), StatementType.DEL),
}


@dataclass(frozen=True)
class Statement:
    """
    Represents one parsed command line.

    Attributes:
        type: The kind of operation (SET, GET, DEL, UNKNOWN, FAIL)
        key: The key, for successfully parsed SET/GET/DEL statements
        value: The value, for successfully parsed SET statements
    """
    type: StatementType
    key: Optional[str] = None
    value: Optional[str] = None

    @classmethod
    def fail(cls) -> "Statement":
        """Create a failed statement."""
        return cls(type=StatementType.FAIL)

    @classmethod
    def unknown(cls) -> "Statement":
        """Create an unrecognized statement."""
        return cls(type=StatementType.UNKNOWN)

    @property
    def is_valid(self) -> bool:
        """Check if the statement can be executed against a store."""
        if self.type == StatementType.SET:
            return self.key is not None and self.value is not None
        if self.type in (StatementType.GET, StatementType.DEL):
            return self.key is not None
        return False
