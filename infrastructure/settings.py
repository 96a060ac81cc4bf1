"""Settings access helpers for JSON-based configuration."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any


class JsonSettings:
    """Lightweight JSON settings reader with dotted-key access."""

    def __init__(self, settings_path: str | Path) -> None:
        self._path = Path(settings_path)
        if not self._path.exists():
            raise FileNotFoundError(f"settings.json not found: {self._path}")
        with self._path.open("r", encoding="utf-8") as f:
            self._data = json.load(f)

    def get(self, key: str, default: Any | None = None) -> Any:
        """Return value for dotted `key`, or `default` if not present."""
        node: Any = self._data
        for part in key.split("."):
            if isinstance(node, dict) and part in node:
                node = node[part]
            else:
                return default
        return node

    def get_bool(self, key: str, default: bool = False) -> bool:
        """Return `key` as a bool; strings like "true"/"1" count as True."""
        value = self.get(key, default)
        if isinstance(value, str):
            return value.strip().lower() in ("1", "true", "yes", "on")
        return bool(value)

    def get_sort_keys(self, key: str = "sorting.defaults") -> list[tuple[str, bool]]:
        """Parse a list like ``[{"field": "capture_time", "asc": false}]``."""
        raw = self.get(key, [])
        result: list[tuple[str, bool]] = []
        if isinstance(raw, list):
            for item in raw:
                if isinstance(item, dict) and "field" in item:
                    result.append((str(item.get("field")), bool(item.get("asc", True))))
        return result
