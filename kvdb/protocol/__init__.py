"""Protocol module for KVDB."""

from .parser import StatementParser
from .statement import KEYWORDS, Statement, StatementType

__all__ = [
    "KEYWORDS",
    "Statement",
    "StatementParser",
    "StatementType",
]
