"""Filename parsing for multi-camera capture files.

Capture files follow ``<timestamp-key>_<position>.<ext>``, for example
``20260131_125430_front.mp4``. Parsing is total: every input maps to some
key, and a missing position is reported as ``None`` rather than raised.
"""

from __future__ import annotations

from datetime import datetime

TIMESTAMP_FMT = "%Y%m%d_%H%M%S"
TIMESTAMP_LEN = len("20260131_125430")


def _strip_extension(file_name: str) -> str:
    dot = file_name.rfind(".")
    if dot > 0:
        return file_name[:dot]
    return file_name


def extract_timestamp_key(file_name: str) -> str:
    """Return the timestamp key of `file_name`.

    ``"20260131_125430_front.mp4"`` -> ``"20260131_125430"``. Names with no
    usable underscore return the extension-stripped name unchanged.
    """
    stem = _strip_extension(file_name)
    underscore = stem.rfind("_")
    if underscore > 0:
        return stem[:underscore]
    return stem


def extract_position(file_name: str) -> str | None:
    """Return the lower-cased position tag of `file_name`, or None."""
    stem = _strip_extension(file_name)
    underscore = stem.rfind("_")
    if 0 < underscore < len(stem) - 1:
        return stem[underscore + 1 :].lower()
    return None


def parse_capture_time(timestamp_key: str) -> datetime | None:
    """Parse the leading `yyyyMMdd_HHmmss` of `timestamp_key`; None on failure.

    Text after the timestamp is ignored, so ``20260131_125430_cam1`` parses.
    """
    try:
        return datetime.strptime(timestamp_key[:TIMESTAMP_LEN], TIMESTAMP_FMT)
    except (ValueError, TypeError):
        return None
