"""
Tests for the Session and the interactive shell

These tests drive whole lines through Session.run() and the REPL loop
using in-memory streams.

Run with: python -m pytest tests/test_session.py -v
"""

import io
import logging

import pytest

from kvdb.config.settings import settings
from kvdb.diagnostics import DiagnosticKind, RecordingReporter
from kvdb.protocol.statement import Statement, StatementType
from kvdb.repl import HELP_TEXT, parse_args, run_repl
from kvdb.session import Reply, ReplyStatus, Session, format_reply


class TestSessionExecute:
    """Test routing statements to the store."""

    def test_set_then_get(self, session: Session):
        assert session.run("SET greeting hello world") == Reply.stored()
        assert session.run("GET greeting") == Reply.value_response("hello world")

    def test_synonyms_route_to_same_store(self, session: Session):
        session.run("put k v")
        assert session.run("o k").value == "v"
        assert session.run("rm k") == Reply.deleted()
        assert session.run("select k") == Reply.key_not_found()

    def test_duplicate_set(self, session: Session, reporter: RecordingReporter):
        session.run("SET k first")
        reply = session.run("SET k second")

        assert reply == Reply.key_exists()
        assert session.run("GET k").value == "first"
        assert reporter.kinds() == [DiagnosticKind.DUPLICATE_KEY]

    def test_delete_missing(self, session: Session, reporter: RecordingReporter):
        assert session.run("DEL nothing") == Reply.key_not_found()
        assert reporter.kinds() == [DiagnosticKind.KEY_NOT_FOUND]

    def test_unknown_statement(self, session: Session):
        reply = session.run("FROB k v")

        assert reply.status == ReplyStatus.ERROR
        assert "FROB" in reply.message
        assert session.store.size() == 0

    def test_failed_statement_does_not_touch_store(self, session: Session):
        assert session.run("SET only_key") == Reply.parse_failed()
        assert session.store.size() == 0

    def test_execute_unknown_without_line(self, session: Session):
        """With no source line there is no word to name."""
        reply = session.execute(Statement.unknown())

        assert reply == Reply.error("unrecognized statement")
        assert format_reply(reply) == "Error: unrecognized statement"

    def test_execute_incomplete_statement(self, session: Session, reporter: RecordingReporter):
        """A hand-built statement missing its key never reaches the store."""
        reply = session.execute(Statement(type=StatementType.GET))

        assert reply == Reply.parse_failed()
        assert reporter.kinds() == []

    def test_execute_parsed_statement(self, session: Session):
        reply = session.execute(Statement(type=StatementType.SET, key="a", value="b"))

        assert reply.ok
        assert "a" in session.store

    def test_shared_reporter(self, session: Session, reporter: RecordingReporter):
        assert session.parser.reporter is reporter
        assert session.store.reporter is reporter


class TestFormatReply:
    """Test formatting replies for display."""

    def test_value(self):
        assert format_reply(Reply.value_response("hello")) == "hello"

    def test_message(self):
        assert format_reply(Reply.stored()) == "stored"

    def test_error(self):
        assert format_reply(Reply.key_not_found()) == "Error: key not found"

    def test_empty_value_is_shown_as_value(self):
        assert format_reply(Reply.value_response("")) == ""


@pytest.mark.integration
class TestRepl:
    """Test the read-eval-print loop."""

    def run(self, session: Session, text: str):
        stdout = io.StringIO()
        executed = run_repl(session, stdin=io.StringIO(text), stdout=stdout, prompt="> ")
        return executed, stdout.getvalue()

    def test_full_session(self, session: Session):
        executed, output = self.run(
            session,
            "SET a 1\nGET a\nDEL a\nGET a\n",
        )

        assert executed == 4
        lines = [line.removeprefix("> ") for line in output.splitlines()]
        assert lines[:4] == ["stored", "1", "deleted", "Error: key not found"]

    def test_blank_lines_skipped(self, session: Session):
        executed, _ = self.run(session, "\n   \nSET a 1\n")
        assert executed == 1

    def test_exit_stops_loop(self, session: Session):
        executed, _ = self.run(session, "SET a 1\nexit\nSET b 2\n")

        assert executed == 1
        assert "b" not in session.store

    def test_help(self, session: Session):
        executed, output = self.run(session, "help\n")

        assert executed == 0
        assert HELP_TEXT in output

    def test_eof_ends_session(self, session: Session):
        executed, output = self.run(session, "")

        assert executed == 0
        assert output == "> \n"


class TestArguments:
    """Test command line parsing."""

    def test_defaults(self):
        args = parse_args([])
        assert args.prompt
        assert args.debug in (True, False)

    def test_overrides(self):
        args = parse_args(["--prompt", "db> ", "--log-level", "INFO", "--debug"])

        assert args.prompt == "db> "
        assert args.log_level == "INFO"
        assert args.debug is True

    def test_log_level_case_insensitive(self):
        assert parse_args(["--log-level", "info"]).log_level == "INFO"

    def test_invalid_log_level_from_environment(self, monkeypatch, capsys):
        """A bad KVDB_LOG_LEVEL is a usage error, not a crash."""
        monkeypatch.setattr(settings, "LOG_LEVEL", "verbose")

        with pytest.raises(SystemExit) as exc_info:
            parse_args([])

        assert exc_info.value.code == 2
        assert "invalid log level 'VERBOSE'" in capsys.readouterr().err

    def test_lowercase_log_level_from_environment(self, monkeypatch):
        monkeypatch.setattr(settings, "LOG_LEVEL", "error")
        assert parse_args([]).log_level == "ERROR"


class TestLogFormat:
    """Test how diagnostics render on stderr."""

    def test_message_prefix_not_repeated(self):
        record = logging.LogRecord(
            "kvdb.diagnostics", logging.ERROR, __file__, 0,
            "Error: Key already associated with another value.", None, None,
        )
        formatted = logging.Formatter(settings.LOG_FORMAT).format(record)

        assert formatted == "Error: Key already associated with another value."
