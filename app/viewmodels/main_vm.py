"""ViewModel orchestrating directory scans, grouping, sorting and deletion."""

from __future__ import annotations

from loguru import logger

from app.viewmodels.group_list_presenter import GroupListPresenter
from core.models import MediaGroup, MediaKind
from core.services.group_builder import MediaGroupBuilder
from core.services.interfaces import IImageLoader
from core.services.sort_service import SortService


class MainVM:
    """Main application view-model.

    Mediates between a repository providing `MediaFile` references and the
    group list presenter.
    """

    def __init__(
        self,
        repo,
        kind: MediaKind = MediaKind.VIDEO,
        sorter: SortService | None = None,
        default_sort: list[tuple[str, bool]] | None = None,
        delete_service=None,
        keep_failed: bool = False,
        image_loader: IImageLoader | None = None,
    ) -> None:
        """Create a MainVM.

        Args:
            repo: Repository with a `scan(directory, kind)` method.
            kind: Media kind listed by this view-model.
            sorter: Sorting service (defaults to `SortService`).
            default_sort: List of (field_name, ascending) applied after each scan.
            delete_service: Service with `delete_groups(groups, keep_failed)`, used by
                `delete_selected`.
            keep_failed: Keep group entries whose deletion failed.
            image_loader: Thumbnail loader handed to the presenter.
        """
        self._repo = repo
        self._builder = MediaGroupBuilder(kind)
        self._sorter = sorter or SortService()
        self._default_sort = default_sort or []
        self._delete_service = delete_service
        self._keep_failed = keep_failed
        self.presenter = GroupListPresenter(image_loader=image_loader)
        self._directory: str | None = None

    @property
    def kind(self) -> MediaKind:
        return self._builder.kind

    @property
    def groups(self) -> list[MediaGroup]:
        return self.presenter.groups

    @property
    def group_count(self) -> int:
        """Number of groups currently listed."""
        return self.presenter.item_count()

    @property
    def total_size_bytes(self) -> int:
        return sum(g.total_size_bytes for g in self.presenter.groups)

    def get_directory(self) -> str | None:
        """Return the last-scanned directory, if any."""
        return self._directory

    def load_directory(self, path: str) -> None:
        """Scan `path`, rebuild the group list and reset the selection."""
        files = self._repo.scan(path, self.kind)
        groups = self._builder.build(files)
        if self._default_sort:
            groups = self._sorter.sort(groups, self._default_sort)
        self._directory = path
        self.presenter.set_groups(groups)

    def reload(self) -> None:
        """Rescan the last directory."""
        if self._directory is not None:
            self.load_directory(self._directory)

    def set_kind(self, kind: MediaKind) -> None:
        """Switch the listed media kind and rescan."""
        self._builder = MediaGroupBuilder(kind)
        self.reload()

    def groups_to_delete(self) -> list[MediaGroup]:
        """Multi-selected groups in multi-select mode, else the single selection."""
        if self.presenter.multi_select_mode:
            return self.presenter.selected_groups()
        index = self.presenter.single_selected
        if index is None or not 0 <= index < self.presenter.item_count():
            return []
        return [self.presenter.group_at(index)]

    def delete_selected(self) -> int:
        """Delete the files of the selected groups.

        Groups left without files are dropped from the list; the selection is
        reset.

        Returns:
            Total number of files deleted.
        """
        if self._delete_service is None:
            raise RuntimeError("No delete service configured")
        targets = self.groups_to_delete()
        if not targets:
            return 0

        result = self._delete_service.delete_groups(targets, keep_failed=self._keep_failed)
        deleted = result.deleted_count
        remaining = [g for g in self.presenter.groups if g.file_count > 0]
        logger.info(
            "Deleted {} files from {} groups; {} groups remain",
            deleted,
            len(targets),
            len(remaining),
        )
        self.presenter.set_groups(remaining)
        return deleted
