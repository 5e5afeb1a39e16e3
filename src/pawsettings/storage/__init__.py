"""Key-value storage backends for the settings record."""

from pawsettings.storage.file import JsonFileStore
from pawsettings.storage.protocols import KeyValueStore, MemoryStore

__all__ = ["JsonFileStore", "KeyValueStore", "MemoryStore"]
