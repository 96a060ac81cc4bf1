"""Deletion service for capture files and groups.

Deletes files either by moving them to the recycle bin or permanently, and
writes an audit CSV log for group deletions. Per-file failures are collected
in the result; nothing is raised to the caller.
"""

from __future__ import annotations

from collections.abc import Iterable
import csv
from datetime import datetime
import os
from pathlib import Path

from loguru import logger
from send2trash import send2trash

from core.models import MediaGroup
from core.services.interfaces import DeleteResult
from infrastructure.logging import get_delete_log_directory


class DeleteService:
    """Coordinates file deletion and audit logging."""

    def __init__(self, use_recycle_bin: bool = True, log_dir: str | None = None) -> None:
        """Create a DeleteService.

        Args:
            use_recycle_bin: Move files to the recycle bin instead of removing them.
            log_dir: Directory for audit logs; defaults to the app delete-log directory.
        """
        self._use_recycle_bin = use_recycle_bin
        self._log_dir = log_dir

    def delete_files(self, paths: list[str]) -> DeleteResult:
        """Delete `paths` and report per-path results."""
        success: list[str] = []
        failed: list[tuple[str, str]] = []
        for p in paths:
            normalized_path = os.path.normpath(p)
            if not os.path.exists(normalized_path):
                logger.error("File does not exist: {}", normalized_path)
                failed.append((p, "File does not exist"))
                continue
            try:
                if self._use_recycle_bin:
                    send2trash(normalized_path)
                else:
                    os.remove(normalized_path)
                success.append(p)
            except (UnicodeEncodeError, OSError) as ex:
                logger.error("Delete failed for {}: {}", p, ex)
                failed.append((p, str(ex)))
            except RuntimeError as ex:
                logger.error("Unexpected error deleting {}: {}", p, ex)
                failed.append((p, f"Unexpected error: {str(ex)}"))
        return DeleteResult(success_paths=success, failed=failed)

    def delete_groups(
        self, groups: Iterable[MediaGroup], keep_failed: bool = False
    ) -> DeleteResult:
        """Delete every file of `groups` and write an audit CSV log.

        Each group applies its own bookkeeping through `MediaGroup.delete_all`.

        Args:
            groups: Groups whose files should be deleted.
            keep_failed: Keep entries whose deletion failed in their group.
        """
        recorder = _RecordingDeleter(self)
        rows: list[tuple[str, str, int, str]] = []
        for g in groups:
            recorder.reset()
            g.delete_all(recorder, keep_failed=keep_failed)
            for p in recorder.last.success_paths:
                rows.append((g.timestamp_key, p, 1, ""))
            for p, reason in recorder.last.failed:
                rows.append((g.timestamp_key, p, 0, reason))

        result = DeleteResult(
            success_paths=[r[1] for r in rows if r[2]],
            failed=[(r[1], r[3]) for r in rows if not r[2]],
        )
        result.log_path = self._write_log(rows)
        return result

    def _write_log(self, rows: list[tuple[str, str, int, str]]) -> str | None:
        try:
            base_dir = os.path.expandvars(self._log_dir) if self._log_dir else get_delete_log_directory()
            Path(base_dir).mkdir(parents=True, exist_ok=True)
            ts = datetime.now().strftime("%Y%m%d_%H%M%S")
            log_path = os.path.join(base_dir, f"delete_{ts}.csv")
            with open(log_path, "w", encoding="utf-8", newline="") as f:
                writer = csv.writer(f)
                writer.writerow(["TimestampKey", "FilePath", "Success", "Reason"])
                writer.writerows(rows)
        except (OSError, ValueError) as ex:
            logger.error("Write delete log failed: {}", ex)
            return None
        logger.info(
            "Delete log written: {} ({} success, {} failed)",
            log_path,
            sum(1 for r in rows if r[2]),
            sum(1 for r in rows if not r[2]),
        )
        return log_path


class _RecordingDeleter:
    """Forwards to a DeleteService and keeps the last result for logging."""

    def __init__(self, service: DeleteService) -> None:
        self._service = service
        self.last = DeleteResult()

    def reset(self) -> None:
        self.last = DeleteResult()

    def delete_files(self, paths: list[str]) -> DeleteResult:
        self.last = self._service.delete_files(paths)
        return self.last
