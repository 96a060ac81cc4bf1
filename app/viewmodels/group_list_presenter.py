"""Presenter binding a `MediaGroup` list and its selection to a list view.

The presenter is toolkit-free: views implement `ItemView` and receive
redraw requests through the item-changed callback.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Protocol

from loguru import logger

from core.models import DISPLAY_ORDER, MediaFile, MediaGroup, Position
from core.services.interfaces import IImageLoader
from core.services.selection_service import SelectionModel

ItemClickListener = Callable[[MediaGroup, int], None]
ItemSelectedListener = Callable[[int], None]
ItemChangedListener = Callable[[int], None]


class ItemView(Protocol):
    """One rendered row of the group list."""

    def set_texts(self, date: str, time: str, size: str, count: str) -> None:
        """Show the date, time, size and file-count labels."""
        ...

    def set_highlighted(self, highlighted: bool) -> None:
        """Show or hide the selected background."""
        ...

    def set_check_visible(self, visible: bool) -> None:
        """Show or hide the multi-select check indicator."""
        ...

    def thumbnail_slot(self, position: Position) -> object:
        """Return the target the image loader draws `position` into."""
        ...

    def show_placeholder(self, position: Position) -> None:
        """Show the blank thumbnail for `position`."""
        ...


class GroupListPresenter:
    """Owns the selection state of one rendered group list."""

    def __init__(
        self, groups: list[MediaGroup] | None = None, image_loader: IImageLoader | None = None
    ) -> None:
        self._groups: list[MediaGroup] = list(groups or [])
        self._image_loader = image_loader
        self._selection = SelectionModel()
        self._on_item_click: ItemClickListener | None = None
        self._on_item_selected: ItemSelectedListener | None = None
        self._on_item_changed: ItemChangedListener | None = None

    # Listeners -----------------------------------------------------------
    def set_on_item_click(self, listener: ItemClickListener | None) -> None:
        self._on_item_click = listener

    def set_on_item_selected(self, listener: ItemSelectedListener | None) -> None:
        self._on_item_selected = listener

    def set_on_item_changed(self, listener: ItemChangedListener | None) -> None:
        """Register the redraw callback invoked with each stale index."""
        self._on_item_changed = listener

    # Data ----------------------------------------------------------------
    def set_groups(self, groups: list[MediaGroup]) -> None:
        """Bind a rebuilt group list; the selection starts over."""
        self._groups = list(groups)
        self._selection.reset()

    def item_count(self) -> int:
        return len(self._groups)

    def group_at(self, index: int) -> MediaGroup:
        if not 0 <= index < len(self._groups):
            raise IndexError(f"group index out of range: {index}")
        return self._groups[index]

    @property
    def groups(self) -> list[MediaGroup]:
        return list(self._groups)

    # Selection -----------------------------------------------------------
    @property
    def selection(self) -> SelectionModel:
        """The selection model; mutate it through the presenter's commands."""
        return self._selection

    @property
    def multi_select_mode(self) -> bool:
        return self._selection.multi_select_mode

    @property
    def single_selected(self) -> int | None:
        return self._selection.single_selected

    def selected_indices(self) -> list[int]:
        """Multi-selected indices in list order."""
        return sorted(i for i in self._selection.multi_selected if 0 <= i < len(self._groups))

    def selected_groups(self) -> list[MediaGroup]:
        return [self._groups[i] for i in self.selected_indices()]

    def set_multi_select_mode(self, enabled: bool) -> None:
        """Enter or leave multi-select mode and redraw every item."""
        if enabled:
            self._selection.enter_multi_select()
        else:
            self._selection.exit_multi_select()
        for index in range(len(self._groups)):
            self._notify_changed(index)

    def set_selected_position(self, index: int) -> None:
        """Make `index` the single selection and redraw the affected items."""
        for changed in sorted(self._selection.select_single(index)):
            self._notify_changed(changed)

    def toggle_selected(self, index: int) -> bool:
        """Flip multi-selection of `index` and redraw only that item."""
        selected = self._selection.toggle_multi(index)
        self._notify_changed(index)
        return selected

    def on_item_interact(self, index: int) -> None:
        """Handle a tap on the item at `index`.

        In multi-select mode the item-selected listener decides what to do
        (usually `toggle_selected`). Otherwise the item becomes the single
        selection and the item-click listener receives its group.
        """
        if not 0 <= index < len(self._groups):
            logger.warning("Ignoring interaction on out-of-range index {}", index)
            return
        if self._selection.multi_select_mode:
            if self._on_item_selected is not None:
                self._on_item_selected(index)
            return
        self.set_selected_position(index)
        if self._on_item_click is not None:
            self._on_item_click(self._groups[index], index)

    # Rendering -----------------------------------------------------------
    def bind_item(self, index: int, view: ItemView) -> None:
        """Fill `view` with the group at `index` and its selection state."""
        group = self.group_at(index)
        view.set_texts(
            group.formatted_date, group.formatted_time, group.formatted_size, group.count_label
        )
        for position in DISPLAY_ORDER:
            file = group.file_at(position)
            if self._image_loader is not None and self._is_loadable(file):
                self._image_loader.load(file.path, file.signature, view.thumbnail_slot(position))
            else:
                view.show_placeholder(position)

        view.set_highlighted(self._selection.is_highlighted(index))
        view.set_check_visible(self._selection.is_checked(index))

    @staticmethod
    def _is_loadable(file: MediaFile | None) -> bool:
        return file is not None and file.size_bytes > 0 and file.exists()

    def _notify_changed(self, index: int) -> None:
        if self._on_item_changed is not None and 0 <= index < len(self._groups):
            self._on_item_changed(index)
