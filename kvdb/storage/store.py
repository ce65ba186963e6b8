"""
Storage Engine Module

This module implements the in-memory key-value storage engine.

The engine enforces one rule above all: a key maps to exactly one value
and is never silently overwritten. To change a value, delete the key
first and set it again.
"""

import copy
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Generic, Hashable, List, Optional, TypeVar

from ..diagnostics import DiagnosticKind, Reporter

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


class ExecResult(Enum):
    """Whether an operation was successfully executed or not."""
    SUCCESS = "SUCCESS"
    FAILED = "FAILED"


@dataclass(frozen=True)
class Lookup(Generic[V]):
    """
    Outcome of a get() call.

    Attributes:
        result: SUCCESS if the key was found, FAILED otherwise
        value: A copy of the stored value (None when not found)
    """
    result: ExecResult
    value: Optional[V] = None

    @classmethod
    def found(cls, value: V) -> "Lookup[V]":
        return cls(result=ExecResult.SUCCESS, value=value)

    @classmethod
    def missing(cls) -> "Lookup[V]":
        return cls(result=ExecResult.FAILED)

    @property
    def ok(self) -> bool:
        return self.result == ExecResult.SUCCESS


class Store(Generic[K, V]):
    """
    In-memory key-value storage engine.

    This class provides O(1) average-case time complexity for:
    - set: Insert a new key-value pair (never overwrites)
    - get: Retrieve a copy of the value for a key
    - delete: Remove a key-value pair

    Misuse (duplicate set, missing key) is reported through the reporter
    and returned as ExecResult.FAILED; it never raises.

    Usage:
        store = Store()
        store.set("key1", "value1")       # ExecResult.SUCCESS
        store.get("key1").value           # "value1"
        store.delete("key1")              # ExecResult.SUCCESS

    Attributes:
        reporter: Where failures and confirmations are reported
    """

    def __init__(self, reporter: Optional[Reporter] = None):
        self.reporter = reporter if reporter is not None else Reporter()
        self._storage: Dict[K, V] = {}

    def set(self, key: K, value: V) -> ExecResult:
        """
        Insert a key-value pair.

        Args:
            key: The key to store
            value: The value to associate with the key

        Returns:
            SUCCESS if inserted, FAILED if the key already has a value
            (the existing value is left untouched)
        """
        if key in self._storage:
            self.reporter.error(
                DiagnosticKind.DUPLICATE_KEY,
                "Error: Key already associated with another value.",
            )
            return ExecResult.FAILED

        self._storage[key] = value
        return ExecResult.SUCCESS

    def get(self, key: K) -> Lookup[V]:
        """
        Retrieve the value for a given key.

        The returned value is a deep copy, so mutating it does not affect
        what is stored.

        Args:
            key: The key to look up

        Returns:
            Lookup.found(copy of value), or Lookup.missing() if absent
        """
        if key not in self._storage:
            return Lookup.missing()
        return Lookup.found(copy.deepcopy(self._storage[key]))

    def delete(self, key: K) -> ExecResult:
        """
        Delete a key-value pair. The removed value is discarded.

        Args:
            key: The key to delete

        Returns:
            SUCCESS if the key was removed, FAILED if it didn't exist
        """
        if key not in self._storage:
            self.reporter.error(
                DiagnosticKind.KEY_NOT_FOUND,
                "Error: Can't remove, as no value associated with key.",
            )
            return ExecResult.FAILED

        del self._storage[key]
        self.reporter.notice(DiagnosticKind.KEY_DELETED, "Deleted: Key -> Value mapping.")
        return ExecResult.SUCCESS

    def size(self) -> int:
        """Get the current number of keys in the store."""
        return len(self._storage)

    def keys(self) -> List[K]:
        return list(self._storage)

    def clear(self) -> None:
        """Remove all keys from the store."""
        self._storage.clear()

    def __len__(self) -> int:
        return self.size()

    def __contains__(self, key: object) -> bool:
        return key in self._storage
