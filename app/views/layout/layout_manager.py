"""LayoutManager: Manages main window layout and splitter behavior."""

from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QApplication,
    QHBoxLayout,
    QMainWindow,
    QSplitter,
    QWidget,
)

from app.views.layout.aspect_ratio import fit_aspect_ratio


class LayoutManager:
    """Manages main window layout and splitter behavior.

    The window shows the group list on the left and the 16:10 preview box
    on the right.
    """

    # Layout constants
    LIST_STRETCH_FACTOR = 3
    PREVIEW_STRETCH_FACTOR = 7
    WINDOW_SIZE_RATIO = 0.5

    def __init__(self, main_window: QMainWindow) -> None:
        """Initialize with main window reference.

        Args:
            main_window: The QMainWindow to manage layout for
        """
        self.window = main_window
        self.splitter: QSplitter | None = None

    def setup_main_layout(self, list_widget: QWidget, preview_widget: QWidget) -> QWidget:
        """Create the main horizontal splitter layout.

        Args:
            list_widget: Widget containing the group list
            preview_widget: Widget containing the preview box

        Returns:
            Central widget configured with the layout
        """
        central = QWidget(self.window)
        root = QHBoxLayout(central)

        self.splitter = QSplitter(Qt.Horizontal)
        self.splitter.addWidget(list_widget)
        self.splitter.addWidget(preview_widget)
        self.splitter.setStretchFactor(0, self.LIST_STRETCH_FACTOR)
        self.splitter.setStretchFactor(1, self.PREVIEW_STRETCH_FACTOR)

        root.addWidget(self.splitter)
        return central

    def setup_initial_window_size(self) -> None:
        """Setup initial window size based on screen dimensions."""
        screen = QApplication.primaryScreen()
        if screen is not None:
            rect = screen.availableGeometry()
            width = int(rect.width() * self.WINDOW_SIZE_RATIO)
            height = int(rect.height() * self.WINDOW_SIZE_RATIO)
            self.window.resize(width, height)


class AspectRatioBox(QWidget):
    """Container keeping its single child at 16:10 inside the available area."""

    def __init__(self, child: QWidget, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._child = child
        self._child.setParent(self)

    def resizeEvent(self, event) -> None:  # noqa: N802 (Qt override)
        size = fit_aspect_ratio(self.width(), self.height())
        if size is not None:
            w, h = size
            self._child.setGeometry((self.width() - w) // 2, (self.height() - h) // 2, w, h)
        super().resizeEvent(event)
