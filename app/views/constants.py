"""
UI/view constants centralized for reuse across view modules.
"""

from __future__ import annotations

from PySide6.QtCore import Qt

# Data roles
GROUP_ROLE: int = Qt.UserRole  # MediaGroup of the row
THUMBNAILS_ROLE: int = Qt.UserRole + 1  # {position: (path, signature) | None}

# Colors
SELECTED_BACKGROUND: str = "#33507A"
PLACEHOLDER_BACKGROUND: str = "#1A1A1A"
