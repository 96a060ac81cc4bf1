"""Sorting service for `MediaGroup` lists.

Group lists are built in first-seen order; this service is the optional
post-processing step that orders them, handling multiple keys with
per-key ascending/descending ordering.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from loguru import logger

from core.models import MediaGroup

SORTABLE_FIELDS = ("capture_time", "total_size_bytes", "timestamp_key", "file_count")


class SortService:
    """Provides sorting utilities for `MediaGroup` lists."""

    def sort(
        self, groups: Iterable[MediaGroup], sort_keys: list[tuple[str, bool]]
    ) -> list[MediaGroup]:
        """Return `groups` sorted by the provided keys.

        Args:
            groups: Groups to sort; the input is not modified.
            sort_keys: List of tuples (field_name, ascending). Unknown fields
                are ignored.
        """
        items = list(groups)
        keys = [(f, asc) for f, asc in sort_keys if f in SORTABLE_FIELDS]
        for field_name, _ in sort_keys:
            if field_name not in SORTABLE_FIELDS:
                logger.warning("Ignoring unknown sort field: {}", field_name)
        if not keys:
            return items

        # Stable sorts applied from the least significant key up
        for field_name, ascending in reversed(keys):
            items.sort(key=lambda g, f=field_name: _sort_value(g, f), reverse=not ascending)
        return items


def _sort_value(group: MediaGroup, field_name: str) -> Any:
    value = getattr(group, field_name, None)
    return "" if value is None else value
