"""Storage module for KVDB."""

from .store import ExecResult, Lookup, Store

__all__ = ["ExecResult", "Lookup", "Store"]
