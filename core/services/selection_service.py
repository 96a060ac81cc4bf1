"""List selection state decoupled from any UI toolkit.

The model tracks one single-selected index and, separately, a multi-select
mode with its set of selected indices. Both can coexist; which one drives
highlighting depends on the current mode.
"""

from __future__ import annotations

from collections.abc import Iterable


class SelectionModel:
    """Single and multi selection over an index-addressed list.

    Mutations happen serially from user interaction; instances are not
    shared across threads.
    """

    def __init__(self) -> None:
        self._single: int | None = None
        self._multi_mode = False
        self._multi: set[int] = set()

    @property
    def single_selected(self) -> int | None:
        return self._single

    @property
    def multi_select_mode(self) -> bool:
        return self._multi_mode

    @property
    def multi_selected(self) -> frozenset[int]:
        """Read-only view of the multi-selected indices."""
        return frozenset(self._multi)

    def enter_multi_select(self) -> None:
        """Turn multi-select mode on, keeping any previous multi selection."""
        self._multi_mode = True

    def exit_multi_select(self) -> None:
        """Turn multi-select mode off and clear the multi selection."""
        self._multi_mode = False
        self._multi.clear()

    def select_single(self, index: int) -> set[int]:
        """Make `index` the single selection.

        Returns:
            Indices whose rendering is now stale: the previous selection
            (when there was one) and `index`.
        """
        previous = self._single
        self._single = index
        changed = {index}
        if previous is not None:
            changed.add(previous)
        return changed

    def clear_single(self) -> int | None:
        """Drop the single selection and return the index it pointed at."""
        previous = self._single
        self._single = None
        return previous

    def toggle_multi(self, index: int) -> bool:
        """Flip membership of `index` in the multi selection.

        Returns:
            True if `index` is selected afterwards.
        """
        if index in self._multi:
            self._multi.discard(index)
            return False
        self._multi.add(index)
        return True

    def set_multi_selected(self, indices: Iterable[int]) -> None:
        """Replace the multi selection with `indices`."""
        self._multi = set(indices)

    def reset(self) -> None:
        """Return to the initial state: nothing selected, single mode."""
        self._single = None
        self.exit_multi_select()

    def is_highlighted(self, index: int) -> bool:
        """Whether the item at `index` should render as selected."""
        if self._multi_mode:
            return index in self._multi
        return index == self._single

    def is_checked(self, index: int) -> bool:
        """Whether the multi-select check indicator is visible at `index`."""
        return self._multi_mode and index in self._multi
