from __future__ import annotations

from pathlib import Path

import pytest

from core.models import MediaFile, Position
from core.services.interfaces import DeleteResult


def mf(name: str, size: int = 0, folder: str = "/cam", mtime: float = 0.0) -> MediaFile:
    """Shorthand for a MediaFile that need not exist on disk."""
    return MediaFile(path=f"{folder}/{name}", size_bytes=size, modified_time=mtime)


class FakeDeleter:
    """Deleter that succeeds for every path except those in `fail`."""

    def __init__(self, fail: set[str] | None = None) -> None:
        self.fail = set(fail or ())
        self.calls: list[list[str]] = []

    def delete_files(self, paths: list[str]) -> DeleteResult:
        self.calls.append(list(paths))
        ok = [p for p in paths if p not in self.fail]
        bad = [(p, "denied") for p in paths if p in self.fail]
        return DeleteResult(success_paths=ok, failed=bad)


class FakeItemView:
    """Records what the presenter binds."""

    def __init__(self) -> None:
        self.texts: tuple[str, str, str, str] | None = None
        self.highlighted: bool | None = None
        self.check_visible: bool | None = None
        self.placeholders: list[Position] = []

    def set_texts(self, date: str, time: str, size: str, count: str) -> None:
        self.texts = (date, time, size, count)

    def set_highlighted(self, highlighted: bool) -> None:
        self.highlighted = highlighted

    def set_check_visible(self, visible: bool) -> None:
        self.check_visible = visible

    def thumbnail_slot(self, position: Position) -> object:
        return position

    def show_placeholder(self, position: Position) -> None:
        self.placeholders.append(position)


class FakeImageLoader:
    def __init__(self) -> None:
        self.loaded: list[tuple[str, str, object]] = []

    def load(self, path: str, signature: str, slot: object) -> None:
        self.loaded.append((path, signature, slot))


@pytest.fixture
def capture_dir(tmp_path: Path) -> Path:
    """A directory with two complete-ish capture events and some noise."""
    contents = {
        "20260131_125430_front.mp4": b"f" * 100,
        "20260131_125430_back.mp4": b"b" * 200,
        "20260131_130000_front.mp4": b"x" * 50,
        "20260131_130000_left.jpg": b"p" * 10,
        "notes.txt": b"hello",
        "video.mp4": b"v" * 7,
    }
    for name, data in contents.items():
        (tmp_path / name).write_bytes(data)
    return tmp_path
