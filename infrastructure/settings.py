"""Settings access helpers for JSON-based configuration."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any


class JsonSettings:
    """JSON settings reader with dotted-key access.

    Known keys: `library.path`, `library.check_integrity`,
    `export.destination`, `export.replace_existing`, `logging.level`.
    """

    def __init__(self, settings_path: str | Path) -> None:
        self._path = Path(settings_path)
        if not self._path.exists():
            raise FileNotFoundError(f"settings.json not found: {self._path}")
        with self._path.open("r", encoding="utf-8") as f:
            self._data = json.load(f)

    @property
    def path(self) -> Path:
        return self._path

    def get(self, key: str, default: Any | None = None) -> Any:
        """Return value for dotted `key`, or `default` if not present."""
        node: Any = self._data
        for part in key.split("."):
            if not isinstance(node, dict) or part not in node:
                return default
            node = node[part]
        return node

    def get_path(self, key: str) -> Path | None:
        """Return dotted `key` as a user-expanded `Path`; None when unset or blank."""
        value = self.get(key)
        if not isinstance(value, str) or not value.strip():
            return None
        return Path(value.strip()).expanduser()

    def get_bool(self, key: str, default: bool = False) -> bool:
        value = self.get(key, default)
        return value if isinstance(value, bool) else default
