from core.services.selection_service import SelectionModel


def test_initial_state():
    sel = SelectionModel()
    assert sel.single_selected is None
    assert not sel.multi_select_mode
    assert sel.multi_selected == frozenset()


def test_select_single_reports_old_and_new():
    sel = SelectionModel()
    assert sel.select_single(3) == {3}
    assert sel.select_single(5) == {3, 5}
    assert sel.single_selected == 5


def test_select_same_index_twice_is_idempotent():
    sel = SelectionModel()
    sel.select_single(3)
    assert sel.select_single(3) == {3}
    assert sel.single_selected == 3


def test_exit_multi_select_clears_set():
    sel = SelectionModel()
    sel.enter_multi_select()
    sel.toggle_multi(1)
    sel.toggle_multi(4)
    sel.exit_multi_select()
    assert not sel.multi_select_mode
    assert sel.multi_selected == frozenset()


def test_enter_multi_select_keeps_existing_set():
    sel = SelectionModel()
    sel.set_multi_selected({2, 7})
    sel.enter_multi_select()
    assert sel.multi_selected == {2, 7}
    sel.enter_multi_select()
    assert sel.multi_selected == {2, 7}


def test_toggle_multi():
    sel = SelectionModel()
    assert sel.toggle_multi(2) is True
    assert sel.toggle_multi(2) is False
    assert sel.multi_selected == frozenset()


def test_multi_selected_is_read_only_view():
    sel = SelectionModel()
    sel.toggle_multi(1)
    view = sel.multi_selected
    sel.toggle_multi(2)
    assert view == {1}


def test_highlight_depends_on_mode():
    sel = SelectionModel()
    sel.select_single(1)
    sel.set_multi_selected({2})
    assert sel.is_highlighted(1)
    assert not sel.is_highlighted(2)
    assert not sel.is_checked(2)

    sel.enter_multi_select()
    assert not sel.is_highlighted(1)
    assert sel.is_highlighted(2)
    assert sel.is_checked(2)
    assert not sel.is_checked(1)


def test_single_selection_survives_multi_mode():
    sel = SelectionModel()
    sel.select_single(4)
    sel.enter_multi_select()
    sel.exit_multi_select()
    assert sel.single_selected == 4


def test_reset():
    sel = SelectionModel()
    sel.select_single(1)
    sel.enter_multi_select()
    sel.toggle_multi(3)
    sel.reset()
    assert sel.single_selected is None
    assert not sel.multi_select_mode
    assert sel.multi_selected == frozenset()
    assert sel.clear_single() is None
