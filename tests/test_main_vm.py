import pytest

from app.viewmodels.main_vm import MainVM
from core.models import MediaKind
from infrastructure.delete_service import DeleteService
from infrastructure.media_repository import DirectoryMediaRepository


@pytest.fixture
def vm(capture_dir, tmp_path_factory):
    log_dir = tmp_path_factory.mktemp("delete_logs")
    return MainVM(
        DirectoryMediaRepository(),
        kind=MediaKind.VIDEO,
        delete_service=DeleteService(use_recycle_bin=False, log_dir=str(log_dir)),
    )


def test_load_directory_builds_groups(vm, capture_dir):
    vm.load_directory(str(capture_dir))
    assert vm.get_directory() == str(capture_dir)
    assert [g.timestamp_key for g in vm.groups] == ["20260131_125430", "20260131_130000"]
    assert vm.group_count == 2
    assert vm.total_size_bytes == 350


def test_default_sort_is_applied(capture_dir):
    vm = MainVM(DirectoryMediaRepository(), default_sort=[("capture_time", False)])
    vm.load_directory(str(capture_dir))
    assert [g.timestamp_key for g in vm.groups] == ["20260131_130000", "20260131_125430"]


def test_switching_kind_rescans(vm, capture_dir):
    vm.load_directory(str(capture_dir))
    vm.set_kind(MediaKind.PHOTO)
    assert vm.kind is MediaKind.PHOTO
    assert [g.timestamp_key for g in vm.groups] == ["20260131_130000"]
    assert vm.groups[0].count_label == "1张"


def test_reload_resets_selection(vm, capture_dir):
    vm.load_directory(str(capture_dir))
    vm.presenter.on_item_interact(1)
    vm.reload()
    assert vm.presenter.single_selected is None


def test_delete_single_selected(vm, capture_dir):
    vm.load_directory(str(capture_dir))
    vm.presenter.on_item_interact(0)
    assert vm.delete_selected() == 2
    assert not (capture_dir / "20260131_125430_front.mp4").exists()
    assert [g.timestamp_key for g in vm.groups] == ["20260131_130000"]
    assert vm.presenter.single_selected is None


def test_delete_multi_selected(vm, capture_dir):
    vm.load_directory(str(capture_dir))
    presenter = vm.presenter
    presenter.set_on_item_selected(presenter.toggle_selected)
    presenter.set_multi_select_mode(True)
    presenter.on_item_interact(0)
    presenter.on_item_interact(1)
    assert vm.delete_selected() == 3
    assert vm.groups == []
    assert not presenter.multi_select_mode


def test_delete_with_nothing_selected(vm, capture_dir):
    vm.load_directory(str(capture_dir))
    assert vm.delete_selected() == 0
    assert vm.group_count == 2


def test_delete_without_service_raises(capture_dir):
    vm = MainVM(DirectoryMediaRepository())
    vm.load_directory(str(capture_dir))
    vm.presenter.on_item_interact(0)
    with pytest.raises(RuntimeError):
        vm.delete_selected()
