"""
KVDB Configuration Settings

This module contains the configuration constants for the interactive shell.
Values can be overridden through environment variables.
"""

import os
from dataclasses import dataclass


@dataclass
class Settings:
    """Shell configuration settings."""

    # REPL settings
    PROMPT: str = os.environ.get("KVDB_PROMPT", "kvdb> ")

    # Logging settings
    DEBUG: bool = os.environ.get("KVDB_DEBUG", "false").lower() == "true"
    LOG_LEVEL: str = os.environ.get("KVDB_LOG_LEVEL", "WARNING")
    LOG_FORMAT: str = "%(message)s"
    DEBUG_LOG_FORMAT: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


# Global settings instance
settings = Settings()
