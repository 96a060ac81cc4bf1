"""Logging initialization utilities using loguru."""

from __future__ import annotations

from datetime import datetime
import os
from pathlib import Path
import shutil

from loguru import logger

APP_DIR_NAME = "MultiCamBrowser"

_file_sink_id: int | None = None
_file_sink_dir: Path | None = None


def _app_data_root() -> Path:
    local = os.environ.get("LOCALAPPDATA")
    if local:
        return Path(local) / APP_DIR_NAME
    return Path.home() / ".local" / "share" / APP_DIR_NAME


def get_log_directory() -> str:
    """Get the main log directory path."""
    return str(_app_data_root() / "logs")


def get_delete_log_directory() -> str:
    """Get the delete log directory path."""
    return str(_app_data_root() / "delete_logs")


def init_logging(log_dir: str | None = None, debug: bool = False) -> None:
    """Initialize rotating file logging under the given directory."""
    global _file_sink_id, _file_sink_dir  # pylint: disable=global-statement

    log_path = Path(log_dir or get_log_directory())
    log_path.mkdir(parents=True, exist_ok=True)

    logger.remove()
    _file_sink_id = logger.add(
        str(log_path / "app_{time:YYYYMMDD}.log"),
        rotation="10 MB",
        retention="10 days",
        compression="zip",
        enqueue=True,
        backtrace=False,
        diagnose=False,
        level="DEBUG" if debug else "INFO",
    )
    _file_sink_dir = log_path


def set_debug_logging(enabled: bool) -> None:
    """Re-open the file sink at DEBUG level when `enabled`, INFO otherwise."""
    target = str(_file_sink_dir) if _file_sink_dir is not None else None
    init_logging(target, debug=enabled)
    logger.info("Debug logging {}", "enabled" if enabled else "disabled")


def find_latest_log_file(log_dir: str | None = None) -> Path | None:
    """Find the latest log file in the specified directory."""
    if log_dir is None:
        log_dir = str(_file_sink_dir) if _file_sink_dir is not None else get_log_directory()

    try:
        log_path = Path(log_dir)
        if not log_path.exists():
            return None

        log_files = list(log_path.glob("app_*.log"))
        if not log_files:
            return None

        return max(log_files, key=lambda p: p.stat().st_mtime)
    except (OSError, ValueError):
        return None


def export_latest_log(dest_dir: str, log_dir: str | None = None) -> Path | None:
    """Copy the latest log file into `dest_dir`; return the copy or None."""
    latest = find_latest_log_file(log_dir)
    if latest is None:
        logger.warning("No log file to export")
        return None
    try:
        dest = Path(dest_dir)
        dest.mkdir(parents=True, exist_ok=True)
        ts = datetime.now().strftime("%Y%m%d_%H%M%S")
        target = dest / f"logs_{ts}.log"
        shutil.copyfile(latest, target)
    except OSError as ex:
        logger.error("Export log failed: {}", ex)
        return None
    logger.info("Log exported to {}", target)
    return target
