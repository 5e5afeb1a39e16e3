"""Durable key-value store backed by a single JSON file."""

from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Final


logger: Final = logging.getLogger(__name__)


class JsonFileStore:
    """KeyValueStore implementation persisting a JSON object of strings.

    Every write rewrites the whole file through a temporary file and an
    atomic rename, so a crash never leaves a half-written store behind.
    """

    def __init__(self, path: Path) -> None:
        """Initialize the store.

        Args:
            path: Location of the JSON file (created on first write)
        """
        self.path = path

    def _read(self) -> dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            logger.warning("Store %s is unreadable, treating as empty: %s", self.path, exc)
            return {}
        if not isinstance(data, dict):
            logger.warning("Store %s does not hold a JSON object, treating as empty", self.path)
            return {}
        dropped = sorted(str(k) for k, v in data.items() if not isinstance(v, str))
        if dropped:
            logger.warning(
                "Store %s has non-string values, ignoring keys: %s",
                self.path,
                ", ".join(dropped),
            )
        return {str(k): v for k, v in data.items() if isinstance(v, str)}

    def _write(self, data: dict[str, str]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(dir=self.path.parent, prefix=f".{self.path.name}.")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2)
            os.replace(tmp_name, self.path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise
        logger.debug("Store written to %s", self.path)

    def get(self, key: str) -> str | None:
        return self._read().get(key)

    def set(self, key: str, value: str) -> None:
        data = self._read()
        data[key] = value
        self._write(data)

    def remove(self, key: str) -> None:
        data = self._read()
        if data.pop(key, None) is not None:
            self._write(data)
