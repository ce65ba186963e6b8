"""
Diagnostics Reporting

The parser and the store never print directly. Every condition worth
telling the user about is handed to a Reporter, which routes it to one of
two logging channels:

    kvdb.diagnostics  - errors and warnings (malformed input, failed ops)
    kvdb.notices      - confirmations (successful deletion)

The class of each diagnostic travels with it as a DiagnosticKind, so
callers and tests can tell *which* condition fired without matching on
message text.
"""

import logging
from dataclasses import dataclass
from enum import Enum, auto
from typing import List, Optional

ERROR_CHANNEL = "kvdb.diagnostics"
NOTICE_CHANNEL = "kvdb.notices"


class DiagnosticKind(Enum):
    """Enumeration of reportable conditions."""
    KEY_NOT_PROVIDED = auto()
    VALUE_NOT_PROVIDED = auto()
    EXTRA_INPUT_IGNORED = auto()
    DUPLICATE_KEY = auto()
    KEY_NOT_FOUND = auto()
    KEY_DELETED = auto()


@dataclass(frozen=True)
class Diagnostic:
    """
    A single reported condition.

    Attributes:
        kind: Which condition fired
        level: Logging level it was reported at
        message: Human readable text
    """
    kind: DiagnosticKind
    level: int
    message: str


class Reporter:
    """
    Routes diagnostics to the error and notice logging channels.

    Usage:
        reporter = Reporter()
        reporter.error(DiagnosticKind.KEY_NOT_FOUND, "no such key")
    """

    def __init__(
            self,
            error_logger: Optional[logging.Logger] = None,
            notice_logger: Optional[logging.Logger] = None,
    ):
        self.error_logger = error_logger or logging.getLogger(ERROR_CHANNEL)
        self.notice_logger = notice_logger or logging.getLogger(NOTICE_CHANNEL)

    def error(self, kind: DiagnosticKind, message: str) -> Diagnostic:
        """Report an error on the error channel."""
        return self._emit(self.error_logger, kind, logging.ERROR, message)

    def warning(self, kind: DiagnosticKind, message: str) -> Diagnostic:
        """Report a warning on the error channel."""
        return self._emit(self.error_logger, kind, logging.WARNING, message)

    def notice(self, kind: DiagnosticKind, message: str) -> Diagnostic:
        """Report a confirmation on the notice channel."""
        return self._emit(self.notice_logger, kind, logging.INFO, message)

    def record(self, diagnostic: Diagnostic) -> None:
        """Hook called for every emitted diagnostic. No-op by default."""

    def _emit(
            self,
            channel: logging.Logger,
            kind: DiagnosticKind,
            level: int,
            message: str,
    ) -> Diagnostic:
        diagnostic = Diagnostic(kind=kind, level=level, message=message)
        channel.log(level, message, extra={"diagnostic": kind})
        self.record(diagnostic)
        return diagnostic


class RecordingReporter(Reporter):
    """Reporter that also remembers every diagnostic it emitted."""

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.diagnostics: List[Diagnostic] = []

    def record(self, diagnostic: Diagnostic) -> None:
        self.diagnostics.append(diagnostic)

    def kinds(self) -> List[DiagnosticKind]:
        """Kinds of all recorded diagnostics, oldest first."""
        return [d.kind for d in self.diagnostics]

    def clear(self) -> None:
        self.diagnostics.clear()
