"""
KVDB: Interactive Key-Value Store

A small, line-oriented key-value database. Commands typed at the prompt
are parsed into statements and executed against an in-memory store.
"""

__version__ = "1.0.0"
