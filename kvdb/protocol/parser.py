"""
Statement Parser Module

This module turns one line of user input into a Statement.

Statement Format:
    <OPERATION> [KEY] [VALUE...]

Operations (case-insensitive, with synonyms):
    SET  | put | insert | in | i      SET <key> <value...>
    GET  | select | output | out | o  GET <key>
    DEL  | delete | rem | remove | rm | d   DEL <key>

Anything else parses as an UNKNOWN statement. A recognized operation with
missing arguments parses as a FAIL statement.
"""

import logging
import re
from typing import List, Optional

from ..diagnostics import DiagnosticKind, Reporter
from .statement import Statement, StatementType

logger = logging.getLogger(__name__)

_WORD_SEPARATOR = re.compile(r"[ \t]+")


class StatementParser:
    """
    Parser for KVDB command lines.

    The parser never raises on user input: every malformed line resolves
    to a FAIL or UNKNOWN statement, with at most one diagnostic sent to
    the reporter.

    Attributes:
        reporter: Where parse diagnostics are sent
    """

    def __init__(self, reporter: Optional[Reporter] = None):
        self.reporter = reporter if reporter is not None else Reporter()

    def prep(self, raw: str) -> Statement:
        """
        Parse a raw command line into a Statement.

        Args:
            raw: Raw input line (may include trailing newline)

        Returns:
            The parsed Statement. Returns an UNKNOWN statement for an
            empty line or an unrecognized keyword, and a FAIL statement
            when a recognized operation lacks its key or value.

        Examples:
            >>> parser = StatementParser()
            >>> parser.prep("SET KEY1 VALUE1 VALUE2")
            Statement(type=<StatementType.SET: 1>, key='KEY1', value='VALUE1 VALUE2')
            >>> parser.prep("get").type
            <StatementType.FAIL: 5>
        """
        words = self.split(raw)
        if not words:
            return Statement.unknown()

        stype = StatementType.from_keyword(words[0])
        key = words[1] if len(words) > 1 else None
        rest = " ".join(words[2:]).strip() if len(words) > 2 else None

        if stype == StatementType.SET:
            value = self._require_value(stype, key, rest)
        elif stype in (StatementType.GET, StatementType.DEL):
            self._require_key(stype, key)
            if rest is not None:
                self.reporter.warning(
                    DiagnosticKind.EXTRA_INPUT_IGNORED,
                    f"Warning: Too many inputs, `{rest}` was ignored.",
                )
            value = None
        else:
            return Statement.unknown()

        return self._validate(stype, key, value)

    @staticmethod
    def split(raw: str) -> List[str]:
        """Split a line into words on runs of spaces and tabs."""
        return [word for word in _WORD_SEPARATOR.split(raw.rstrip("\r\n")) if word]

    def _require_key(self, stype: StatementType, key: Optional[str]) -> None:
        if key is None:
            self.reporter.error(
                DiagnosticKind.KEY_NOT_PROVIDED,
                f"Error: `{stype.word}` operation ignored, KEY not provided.",
            )

    def _require_value(
            self,
            stype: StatementType,
            key: Optional[str],
            value: Optional[str],
    ) -> Optional[str]:
        """SET needs both a key and a value; either missing is a missing value."""
        if key is None or value is None:
            self.reporter.error(
                DiagnosticKind.VALUE_NOT_PROVIDED,
                f"Error: `{stype.word}` operation ignored, VALUE not provided.",
            )
            return None
        return value

    @staticmethod
    def _validate(
            stype: StatementType,
            key: Optional[str],
            value: Optional[str],
    ) -> Statement:
        """
        Promote an incomplete statement to FAIL.

        A SET without a value, or any recognized operation without a key,
        loses its key and value and becomes FAIL.
        """
        if (stype == StatementType.SET and value is None) or key is None:
            logger.debug(f"Failing incomplete {stype.word} statement")
            return Statement.fail()
        return Statement(type=stype, key=key, value=value)
