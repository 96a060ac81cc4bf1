"""MainWindow: group list, preview box and toolbar actions."""

from __future__ import annotations

from typing import Any

from PySide6.QtCore import QModelIndex, Qt
from PySide6.QtGui import QAction
from PySide6.QtWidgets import (
    QFileDialog,
    QLabel,
    QListView,
    QMainWindow,
    QMessageBox,
    QToolBar,
)
from loguru import logger

from app.viewmodels.main_vm import MainVM
from app.views.constants import PLACEHOLDER_BACKGROUND
from app.views.group_list_model import GroupListModel
from app.views.layout.layout_manager import AspectRatioBox, LayoutManager
from core.models import MediaGroup, MediaKind
from infrastructure.logging import export_latest_log, set_debug_logging


class MainWindow(QMainWindow):
    """Main application window."""

    def __init__(self, vm: MainVM, settings: Any | None = None) -> None:
        """Initialize MainWindow.

        Args:
            vm: ViewModel instance for data operations
            settings: Settings instance for configuration
        """
        super().__init__()
        self.vm = vm
        self.settings = settings

        self.model = GroupListModel(vm.presenter, self)
        self.list_view = QListView(self)
        self.list_view.setModel(self.model)
        self.list_view.setUniformItemSizes(True)

        self.preview_label = QLabel("", self)
        self.preview_label.setAlignment(Qt.AlignCenter)
        self.preview_label.setStyleSheet(f"background-color: {PLACEHOLDER_BACKGROUND}; color: white;")
        self.preview = AspectRatioBox(self.preview_label)

        self.layout_manager = LayoutManager(self)
        self.setCentralWidget(self.layout_manager.setup_main_layout(self.list_view, self.preview))
        self.layout_manager.setup_initial_window_size()

        self._setup_toolbar()
        self._connect_signals()
        self._update_title()

    def _setup_toolbar(self) -> None:
        bar = QToolBar("Main", self)
        self.addToolBar(bar)

        self.act_open = QAction("Open Folder…", self)
        self.act_videos = QAction("Videos", self, checkable=True)
        self.act_photos = QAction("Photos", self, checkable=True)
        self.act_multi = QAction("Multi-select", self, checkable=True)
        self.act_delete = QAction("Delete", self)
        self.act_debug = QAction("Debug Logs", self, checkable=True)
        self.act_export_logs = QAction("Save Logs…", self)

        self.act_videos.setChecked(self.vm.kind is MediaKind.VIDEO)
        self.act_photos.setChecked(self.vm.kind is MediaKind.PHOTO)
        if self.settings is not None:
            self.act_debug.setChecked(self.settings.get_bool("logging.debug", False))

        for act in (
            self.act_open,
            self.act_videos,
            self.act_photos,
            self.act_multi,
            self.act_delete,
            self.act_debug,
            self.act_export_logs,
        ):
            bar.addAction(act)

    def _connect_signals(self) -> None:
        presenter = self.vm.presenter
        presenter.set_on_item_click(self._on_item_click)
        presenter.set_on_item_selected(presenter.toggle_selected)
        self.list_view.clicked.connect(self._on_clicked)

        self.act_open.triggered.connect(self._on_open_folder)
        self.act_videos.triggered.connect(lambda: self._switch_kind(MediaKind.VIDEO))
        self.act_photos.triggered.connect(lambda: self._switch_kind(MediaKind.PHOTO))
        self.act_multi.toggled.connect(presenter.set_multi_select_mode)
        self.act_delete.triggered.connect(self._on_delete)
        self.act_debug.toggled.connect(self._on_debug_toggled)
        self.act_export_logs.triggered.connect(self._on_export_logs)

    def load_directory(self, path: str) -> None:
        """Scan `path` and show its groups."""
        self.vm.load_directory(path)
        self._after_rebuild()

    def _after_rebuild(self) -> None:
        self.model.reset()
        self.act_multi.setChecked(False)
        self.preview_label.setText("")
        self._update_title()

    def _update_title(self) -> None:
        directory = self.vm.get_directory() or "(no folder)"
        self.setWindowTitle(f"{directory} - {self.vm.group_count} {self.vm.kind.label} groups")

    def _on_clicked(self, index: QModelIndex) -> None:
        self.vm.presenter.on_item_interact(index.row())

    def _on_item_click(self, group: MediaGroup, index: int) -> None:
        lines = [group.formatted_datetime, group.formatted_size, group.count_label]
        lines.extend(f"{tag}: {f.name}" for tag, f in group.files.items())
        self.preview_label.setText("\n".join(lines))
        logger.info("Selected group {} at {}", group.timestamp_key, index)

    def _on_open_folder(self) -> None:
        path = QFileDialog.getExistingDirectory(self, "Open Folder", self.vm.get_directory() or "")
        if path:
            self.load_directory(path)

    def _switch_kind(self, kind: MediaKind) -> None:
        self.act_videos.setChecked(kind is MediaKind.VIDEO)
        self.act_photos.setChecked(kind is MediaKind.PHOTO)
        if kind is not self.vm.kind:
            self.vm.set_kind(kind)
            self._after_rebuild()

    def _on_delete(self) -> None:
        targets = self.vm.groups_to_delete()
        if not targets:
            self.statusBar().showMessage("Nothing selected", 3000)
            return
        file_count = sum(g.file_count for g in targets)
        answer = QMessageBox.question(
            self,
            "Delete",
            f"Delete {file_count} file(s) in {len(targets)} group(s)?",
            QMessageBox.Yes | QMessageBox.No,
        )
        if answer != QMessageBox.Yes:
            return
        deleted = self.vm.delete_selected()
        self._after_rebuild()
        if deleted < file_count:
            QMessageBox.warning(
                self, "Delete", f"Deleted {deleted} of {file_count} file(s). See log for details."
            )
        else:
            self.statusBar().showMessage(f"Deleted {deleted} file(s)", 3000)

    def _on_debug_toggled(self, enabled: bool) -> None:
        set_debug_logging(enabled)
        self.statusBar().showMessage(
            "Debug logs enabled" if enabled else "Debug logs disabled", 2000
        )

    def _on_export_logs(self) -> None:
        dest = QFileDialog.getExistingDirectory(self, "Save Logs To")
        if not dest:
            return
        target = export_latest_log(dest)
        if target is not None:
            self.statusBar().showMessage(f"Logs saved to: {target}", 5000)
        else:
            QMessageBox.warning(self, "Save Logs", "Failed to save logs")
