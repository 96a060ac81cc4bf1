"""Aspect-ratio box sizing for the preview area."""

from __future__ import annotations

WIDTH_RATIO = 16.0
HEIGHT_RATIO = 10.0


def fit_aspect_ratio(
    width: int,
    height: int,
    width_exact: bool = True,
    height_exact: bool = True,
    width_ratio: float = WIDTH_RATIO,
    height_ratio: float = HEIGHT_RATIO,
) -> tuple[int, int] | None:
    """Return the (width, height) box keeping the aspect ratio.

    When both dimensions are fixed the largest box that fits inside them is
    returned. When only one is fixed the other is derived from it. With
    neither fixed, None tells the caller to keep its default sizing.
    """
    if width_exact and height_exact:
        width_based_height = width * height_ratio / width_ratio
        if width_based_height <= height:
            return width, int(width_based_height)
        return int(height * width_ratio / height_ratio), height
    if width_exact:
        return width, int(width * height_ratio / width_ratio)
    if height_exact:
        return int(height * width_ratio / height_ratio), height
    return None
