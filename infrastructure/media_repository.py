"""Directory scanning for capture files."""

from __future__ import annotations

from pathlib import Path

from loguru import logger

from core.models import MediaFile, MediaKind


class DirectoryMediaRepository:
    """Lists the capture files of one media kind in a directory."""

    def scan(self, directory: str | Path, kind: MediaKind) -> list[MediaFile]:
        """Return references to the files in `directory` matching `kind`.

        The scan is not recursive. A missing directory yields an empty list.
        """
        root = Path(directory)
        if not root.is_dir():
            logger.warning("Media directory not found: {}", root)
            return []

        files: list[MediaFile] = []
        try:
            entries = sorted(root.iterdir())
        except OSError as ex:
            logger.error("Listing {} failed: {}", root, ex)
            return []
        for entry in entries:
            if entry.suffix.lower() not in kind.extensions:
                continue
            try:
                if not entry.is_file():
                    continue
                files.append(MediaFile.from_path(entry))
            except OSError as ex:
                logger.warning("Skipping unreadable file {}: {}", entry, ex)
        logger.info("Scanned {}: {} {} files", root, len(files), kind.label)
        return files
