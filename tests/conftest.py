"""
Pytest Configuration and Fixtures

This module provides shared fixtures and configuration for all tests.
"""

import pytest

from kvdb.diagnostics import RecordingReporter
from kvdb.protocol.parser import StatementParser
from kvdb.session import Session
from kvdb.storage.store import Store


# ============================================================================
# Reporter Fixtures
# ============================================================================

@pytest.fixture
def reporter() -> RecordingReporter:
    """Create a reporter that remembers every diagnostic."""
    return RecordingReporter()


# ============================================================================
# Parser Fixtures
# ============================================================================

@pytest.fixture
def parser(reporter: RecordingReporter) -> StatementParser:
    """Create a StatementParser reporting to the recording reporter."""
    return StatementParser(reporter=reporter)


# ============================================================================
# Store Fixtures
# ============================================================================

@pytest.fixture
def store(reporter: RecordingReporter) -> Store:
    """Create a fresh, empty Store reporting to the recording reporter."""
    return Store(reporter=reporter)


# ============================================================================
# Session Fixtures
# ============================================================================

@pytest.fixture
def session(reporter: RecordingReporter) -> Session:
    """Create a Session whose parser and store share the recording reporter."""
    return Session(reporter=reporter)


# ============================================================================
# Pytest Configuration
# ============================================================================

def pytest_configure(config):
    """Configure custom pytest markers."""
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests"
    )
