import pytest

pytest.importorskip("PySide6")

from PySide6.QtCore import Qt  # noqa: E402

from app.viewmodels.group_list_presenter import GroupListPresenter  # noqa: E402
from app.views.constants import THUMBNAILS_ROLE  # noqa: E402
from app.views.group_list_model import GroupListModel, ThumbnailRecorder  # noqa: E402
from conftest import mf  # noqa: E402
from core.services.group_builder import MediaGroupBuilder  # noqa: E402


@pytest.fixture
def bound_model():
    groups = MediaGroupBuilder().build([mf(f"2026013{i}_120000_front.mp4", 1) for i in range(3)])
    presenter = GroupListPresenter(groups, image_loader=ThumbnailRecorder())
    presenter.set_on_item_selected(presenter.toggle_selected)
    return GroupListModel(presenter), presenter


def _check_states(model):
    return [model.data(model.index(r, 0), Qt.CheckStateRole) for r in range(model.rowCount())]


def test_check_indicator_only_on_selected_rows(bound_model):
    model, presenter = bound_model
    assert _check_states(model) == [None, None, None]

    presenter.set_multi_select_mode(True)
    assert _check_states(model) == [None, None, None]

    presenter.on_item_interact(1)
    assert _check_states(model) == [None, Qt.Checked, None]

    presenter.set_multi_select_mode(False)
    assert _check_states(model) == [None, None, None]


def test_display_text_and_missing_thumbnails(bound_model):
    model, _ = bound_model
    index = model.index(0, 0)
    assert model.data(index, Qt.DisplayRole).endswith("1路")
    assert model.rowCount() == 3
    assert set(model.data(index, THUMBNAILS_ROLE).values()) == {None}
