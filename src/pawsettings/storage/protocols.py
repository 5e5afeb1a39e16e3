# src/pawsettings/storage/protocols.py
from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class KeyValueStore(Protocol):
    """Protocol defining the interface for persistent string stores.

    Implementations are synchronous: a write is visible to the next read as
    soon as the call returns. The settings service keeps its whole record
    under a single namespace key.
    """

    def get(self, key: str) -> str | None:
        """Return the stored string, or None if the key is absent."""
        ...

    def set(self, key: str, value: str) -> None:
        """Store a string under a key, replacing any previous value."""
        ...

    def remove(self, key: str) -> None:
        """Delete a key; removing an absent key is not an error."""
        ...


class MemoryStore:
    """In-process implementation of KeyValueStore.

    Useful for tests and for ephemeral sessions; calls are recorded so that
    callers can assert on write behaviour.
    """

    def __init__(self, initial: dict[str, str] | None = None):
        self.data: dict[str, str] = dict(initial or {})
        self.set_calls: list[dict[str, str]] = []
        self.remove_calls: list[str] = []

    def get(self, key: str) -> str | None:
        return self.data.get(key)

    def set(self, key: str, value: str) -> None:
        self.set_calls.append({"key": key, "value": value})
        self.data[key] = value

    def remove(self, key: str) -> None:
        self.remove_calls.append(key)
        self.data.pop(key, None)

    def reset_call_history(self) -> None:
        """Reset the call history for testing."""
        self.set_calls = []
        self.remove_calls = []
