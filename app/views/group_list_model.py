"""Qt list model adapting `GroupListPresenter` to item views."""

from __future__ import annotations

from typing import Any

from PySide6.QtCore import QAbstractListModel, QModelIndex, Qt
from PySide6.QtGui import QColor

from app.viewmodels.group_list_presenter import GroupListPresenter
from app.views.constants import GROUP_ROLE, SELECTED_BACKGROUND, THUMBNAILS_ROLE
from core.models import DISPLAY_ORDER, Position


class _RowState:
    """Rendered state of one row, filled by `GroupListPresenter.bind_item`."""

    def __init__(self) -> None:
        self.text = ""
        self.highlighted = False
        self.check_visible = False
        self.thumbnails: dict[str, tuple[str, str] | None] = {p.value: None for p in DISPLAY_ORDER}

    def set_texts(self, date: str, time: str, size: str, count: str) -> None:
        self.text = f"{date} {time}    {size}    {count}"

    def set_highlighted(self, highlighted: bool) -> None:
        self.highlighted = highlighted

    def set_check_visible(self, visible: bool) -> None:
        self.check_visible = visible

    def thumbnail_slot(self, position: Position) -> object:
        return (self, position)

    def show_placeholder(self, position: Position) -> None:
        self.thumbnails[position.value] = None


class ThumbnailRecorder:
    """Image loader recording (path, signature) per slot.

    Decoding is left to whichever delegate paints THUMBNAILS_ROLE; the
    signature is its cache key.
    """

    def load(self, path: str, signature: str, slot: object) -> None:
        row, position = slot  # type: ignore[misc]
        row.thumbnails[position.value] = (path, signature)


class GroupListModel(QAbstractListModel):
    """Exposes the presenter's groups and selection state to Qt views."""

    def __init__(self, presenter: GroupListPresenter, parent=None) -> None:
        super().__init__(parent)
        self._presenter = presenter
        self._rows: dict[int, _RowState] = {}
        presenter.set_on_item_changed(self._on_item_changed)

    def reset(self) -> None:
        """Drop cached rows after the presenter was rebound to a new list."""
        self.beginResetModel()
        self._rows.clear()
        self.endResetModel()

    def rowCount(self, parent: QModelIndex = QModelIndex()) -> int:  # noqa: N802
        if parent.isValid():
            return 0
        return self._presenter.item_count()

    def data(self, index: QModelIndex, role: int = Qt.DisplayRole) -> Any:
        if not index.isValid() or not 0 <= index.row() < self._presenter.item_count():
            return None
        row = self._row(index.row())
        if role == Qt.DisplayRole:
            return row.text
        if role == Qt.BackgroundRole:
            return QColor(SELECTED_BACKGROUND) if row.highlighted else None
        if role == Qt.CheckStateRole:
            # Only set members show an indicator
            return Qt.Checked if row.check_visible else None
        if role == GROUP_ROLE:
            return self._presenter.group_at(index.row())
        if role == THUMBNAILS_ROLE:
            return dict(row.thumbnails)
        return None

    def _row(self, index: int) -> _RowState:
        row = self._rows.get(index)
        if row is None:
            row = _RowState()
            self._presenter.bind_item(index, row)
            self._rows[index] = row
        return row

    def _on_item_changed(self, index: int) -> None:
        self._rows.pop(index, None)
        model_index = self.index(index, 0)
        self.dataChanged.emit(model_index, model_index)
