"""Grouping of capture files into `MediaGroup` entities by timestamp key."""

from __future__ import annotations

from collections.abc import Iterable

from loguru import logger

from core.filename_parser import extract_position, extract_timestamp_key
from core.models import MediaFile, MediaGroup, MediaKind


class MediaGroupBuilder:
    """Builds an ordered group list from a flat collection of files."""

    def __init__(self, kind: MediaKind = MediaKind.VIDEO) -> None:
        self._kind = kind

    @property
    def kind(self) -> MediaKind:
        return self._kind

    def build(self, files: Iterable[MediaFile]) -> list[MediaGroup]:
        """Group `files` by timestamp key.

        Groups appear in the order their key is first seen. Files whose name
        has no position are skipped. A later file at an occupied position of
        the same group replaces the earlier one.
        """
        by_key: dict[str, MediaGroup] = {}
        skipped = 0
        for file in files:
            name = file.name
            if extract_position(name) is None:
                logger.debug("Skipping file without position: {}", name)
                skipped += 1
                continue
            key = extract_timestamp_key(name)
            group = by_key.get(key)
            if group is None:
                group = MediaGroup(key, self._kind)
                by_key[key] = group
            group.add_file(file)

        groups = list(by_key.values())
        logger.info(
            "Built {} {} groups ({} files skipped)", len(groups), self._kind.label, skipped
        )
        return groups
