from viewer.columns import ColumnWidths
from viewer.resize import ResizeController


def make_controller():
    widths = ColumnWidths()
    widths.seed(["name", "score"])
    return widths, ResizeController(widths)


def test_drag_right_grows_only_the_active_column():
    widths, ctl = make_controller()
    ctl.pointer_down("name", 100)
    assert ctl.pointer_move(160) == 210
    assert widths.get("name") == 210
    assert widths.get("score") == 120


def test_moves_are_measured_from_the_anchor():
    widths, ctl = make_controller()
    ctl.pointer_down("score", 0)
    ctl.pointer_move(10)
    ctl.pointer_move(25)
    assert widths.get("score") == 145


def test_dragging_far_left_stops_at_floor():
    widths, ctl = make_controller()
    assert ctl.drag("name", 500, -100000) == 50
    assert widths.get("name") == 50


def test_idle_moves_are_ignored():
    widths, ctl = make_controller()
    assert ctl.pointer_move(999) is None
    assert widths.get("name") == 150


def test_document_style_and_listeners_follow_state():
    _, ctl = make_controller()
    assert not ctl.is_resizing
    ctl.pointer_down("name", 0)
    assert ctl.is_resizing
    assert ctl.active_column == "name"
    assert ctl.document_style == {"cursor": "col-resize", "user-select": "none"}
    assert ctl.listeners_attached
    ctl.pointer_up()
    assert ctl.state is None
    assert ctl.document_style == {"cursor": "", "user-select": ""}
    assert not ctl.listeners_attached


def test_unknown_column_anchors_at_fallback_width():
    widths, ctl = make_controller()
    assert ctl.drag("extra", 0, 5) == 125
    assert widths.get("extra") == 125
