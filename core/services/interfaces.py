"""Core service interfaces and shared data structures.

This module defines the delete result shared by the infrastructure and
domain layers, and the collaborator interfaces the domain calls out to
(file deletion, thumbnail loading).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol


@dataclass
class DeleteResult:
    """Outcome of a delete operation.

    Attributes:
        success_paths: Paths successfully deleted.
        failed: Tuples of (path, reason) for failures.
        log_path: Optional path to a detailed log file.
    """

    success_paths: list[str] = field(default_factory=list)
    failed: list[tuple[str, str]] = field(default_factory=list)
    log_path: str | None = None

    @property
    def deleted_count(self) -> int:
        """Number of paths deleted."""
        return len(self.success_paths)


class IFileDeleter(Protocol):
    """Removes files from storage and reports per-path outcomes."""

    def delete_files(self, paths: list[str]) -> DeleteResult:
        """Delete `paths`; failures are reported in the result, never raised."""
        raise NotImplementedError


class IImageLoader(Protocol):
    """External thumbnail loader.

    Implementations decode and cache the image; `signature` changes whenever
    the file changes on disk and must invalidate any cached thumbnail.
    """

    def load(self, path: str, signature: str, slot: object) -> None:
        """Load the thumbnail of `path` into `slot`, a view-provided target."""
        raise NotImplementedError
