"""Core domain models for capture files and capture groups."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
import os
from pathlib import Path

from loguru import logger

from core.filename_parser import extract_position, parse_capture_time
from core.services.interfaces import IFileDeleter

# Fallback capture time for keys that do not parse.
EPOCH = datetime(1970, 1, 1)

_KB = 1024
_MB = 1024 * 1024
_GB = 1024 * 1024 * 1024


class Position(Enum):
    """Camera position parsed from a filename suffix."""

    FRONT = "front"
    BACK = "back"
    LEFT = "left"
    RIGHT = "right"
    UNKNOWN = "unknown"

    @classmethod
    def from_tag(cls, tag: str | None) -> Position:
        """Map a parsed tag to a Position; unrecognized tags map to UNKNOWN."""
        if tag:
            for member in DISPLAY_ORDER:
                if member.value == tag:
                    return member
        return cls.UNKNOWN


# Thumbnail priority and on-screen slot order.
DISPLAY_ORDER: tuple[Position, ...] = (
    Position.FRONT,
    Position.BACK,
    Position.LEFT,
    Position.RIGHT,
)


class MediaKind(Enum):
    """Kind of media a group holds, with its kind-specific presentation."""

    PHOTO = ("photo", "张", (".jpg", ".jpeg"))
    VIDEO = ("video", "路", (".mp4",))

    def __init__(self, label: str, count_suffix: str, extensions: tuple[str, ...]) -> None:
        self.label = label
        self.count_suffix = count_suffix
        self.extensions = extensions

    @classmethod
    def from_label(cls, label: str) -> MediaKind:
        """Return the kind whose label is `label` (case-insensitive)."""
        wanted = str(label).strip().lower()
        for kind in cls:
            if kind.label == wanted:
                return kind
        raise ValueError(f"Unknown media kind: {label!r}")


@dataclass
class MediaFile:
    """A borrowed reference to one capture file on storage."""

    path: str
    size_bytes: int
    modified_time: float = 0.0

    @classmethod
    def from_path(cls, path: str | Path) -> MediaFile:
        """Create a reference from the current filesystem state of `path`."""
        st = os.stat(path)
        return cls(path=str(path), size_bytes=int(st.st_size), modified_time=float(st.st_mtime))

    @property
    def name(self) -> str:
        """Base name of the file path."""
        return Path(self.path).name

    @property
    def signature(self) -> str:
        """Cache key that changes whenever the file is modified."""
        return f"{self.modified_time:.6f}"

    def exists(self) -> bool:
        """True if the file is still present on storage."""
        return os.path.isfile(self.path)


def format_size(size_bytes: int) -> str:
    """Format a byte count as B, KB, MB or GB with two decimals from KB up."""
    if size_bytes < _KB:
        return f"{size_bytes} B"
    if size_bytes < _MB:
        return f"{size_bytes / _KB:.2f} KB"
    if size_bytes < _GB:
        return f"{size_bytes / _MB:.2f} MB"
    return f"{size_bytes / _GB:.2f} GB"


class MediaGroup:
    """All files of one capture event, keyed by camera position.

    Files are stored under their raw position tag, so a file with an
    unrecognized suffix still occupies its own slot without being displayed.
    `total_size_bytes` always equals the sum of the sizes of the held files.
    """

    def __init__(self, timestamp_key: str, kind: MediaKind = MediaKind.VIDEO) -> None:
        self._timestamp_key = timestamp_key
        self._kind = kind
        self._files: dict[str, MediaFile] = {}
        self._total_size = 0
        parsed = parse_capture_time(timestamp_key)
        self._has_valid_time = parsed is not None
        self._capture_time = parsed if parsed is not None else EPOCH

    def __repr__(self) -> str:
        return (
            f"MediaGroup({self._timestamp_key!r}, kind={self._kind.label}, "
            f"positions={sorted(self._files)}, size={self._total_size})"
        )

    @property
    def timestamp_key(self) -> str:
        return self._timestamp_key

    @property
    def kind(self) -> MediaKind:
        return self._kind

    @property
    def capture_time(self) -> datetime:
        """Capture time parsed from the key, or EPOCH when the key is malformed."""
        return self._capture_time

    @property
    def has_valid_time(self) -> bool:
        """False when `capture_time` is the EPOCH fallback for a malformed key."""
        return self._has_valid_time

    @property
    def total_size_bytes(self) -> int:
        return self._total_size

    @property
    def file_count(self) -> int:
        return len(self._files)

    @property
    def positions(self) -> list[str]:
        """Position tags currently held, in insertion order."""
        return list(self._files)

    @property
    def files(self) -> dict[str, MediaFile]:
        """Copy of the position tag -> file mapping."""
        return dict(self._files)

    def add_file(self, file: MediaFile) -> bool:
        """Add `file` at the position parsed from its name.

        Replacing an occupied position adjusts the total size by the net delta.

        Returns:
            False when the name carries no position and the file was skipped.
        """
        tag = extract_position(file.name)
        if tag is None:
            return False
        previous = self._files.get(tag)
        if previous is not None:
            self._total_size -= previous.size_bytes
        self._files[tag] = file
        self._total_size += file.size_bytes
        return True

    def file_at(self, position: Position | str) -> MediaFile | None:
        """Return the file at `position`, or None."""
        tag = position.value if isinstance(position, Position) else str(position).lower()
        return self._files.get(tag)

    def has_position(self, position: Position | str) -> bool:
        return self.file_at(position) is not None

    def thumbnail_file(self) -> MediaFile | None:
        """First available file in front, back, left, right order."""
        for position in DISPLAY_ORDER:
            file = self._files.get(position.value)
            if file is not None:
                return file
        return None

    def delete_all(self, deleter: IFileDeleter, keep_failed: bool = False) -> int:
        """Delete every held file from storage.

        When nothing was deleted the group is left untouched. Otherwise, by
        default, every entry is dropped and the size reset, including entries
        whose deletion failed; those files may still exist on disk. With
        `keep_failed` only deleted entries are dropped and the size is
        recomputed from what remains.

        Returns:
            Number of files deleted.
        """
        if not self._files:
            return 0
        result = deleter.delete_files([f.path for f in self._files.values()])
        deleted = set(result.success_paths)
        if not deleted:
            logger.warning("No files deleted for group {}", self._timestamp_key)
            return 0

        if keep_failed:
            self._files = {t: f for t, f in self._files.items() if f.path not in deleted}
            self._total_size = sum(f.size_bytes for f in self._files.values())
        else:
            if result.failed:
                logger.warning(
                    "Group {}: dropping {} entries whose delete failed",
                    self._timestamp_key,
                    len(result.failed),
                )
            self._files = {}
            self._total_size = 0
        logger.info("Deleted {} files of group {}", len(deleted), self._timestamp_key)
        return len(deleted)

    @property
    def formatted_size(self) -> str:
        return format_size(self._total_size)

    @property
    def formatted_date(self) -> str:
        return self._capture_time.strftime("%Y-%m-%d")

    @property
    def formatted_time(self) -> str:
        return self._capture_time.strftime("%H:%M")

    @property
    def formatted_datetime(self) -> str:
        return self._capture_time.strftime("%Y-%m-%d %H:%M:%S")

    @property
    def count_label(self) -> str:
        """File count with the kind's unit, e.g. ``3路``."""
        return f"{len(self._files)}{self._kind.count_suffix}"
