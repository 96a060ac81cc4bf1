from conftest import mf
from core.services.group_builder import MediaGroupBuilder
from core.services.sort_service import SortService


def _groups():
    return MediaGroupBuilder().build(
        [
            mf("20260131_130000_front.mp4", 10),
            mf("20260131_125430_front.mp4", 30),
            mf("badkey_front.mp4", 20),
            mf("20260131_125430_back.mp4", 5),
        ]
    )


def test_sort_by_capture_time():
    groups = _groups()
    result = SortService().sort(groups, [("capture_time", True)])
    assert [g.timestamp_key for g in result] == ["badkey", "20260131_125430", "20260131_130000"]
    # Input untouched
    assert [g.timestamp_key for g in groups] == ["20260131_130000", "20260131_125430", "badkey"]


def test_multi_key_sort():
    result = SortService().sort(_groups(), [("file_count", False), ("total_size_bytes", True)])
    assert [g.timestamp_key for g in result] == ["20260131_125430", "20260131_130000", "badkey"]


def test_unknown_and_empty_keys_keep_order():
    groups = _groups()
    assert SortService().sort(groups, []) == groups
    assert SortService().sort(groups, [("nope", True)]) == groups
