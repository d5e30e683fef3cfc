from autodialog.core import build_dialog
from autodialog.interactive.dialog_gui.layout import (
    BUTTON_ROW_HEIGHT,
    WINDOW_MARGIN,
    cell_rect,
    grid_extent,
    window_size_for,
)


def _control(**fields):
    record = {"class": "edit", "name": "v"}
    record.update(fields)
    return build_dialog([record]).controls[0]


def test_cell_rect_scales_grid_to_pixels():
    control = _control(x=2, y=1, width=3, height=2)
    assert cell_rect(control, (100, 30), padding=5.0) == (205.0, 35.0, 290.0, 50.0)


def test_cell_rect_keeps_one_cell_for_zero_span():
    control = _control(x=0, y=0, width=0, height=-3)
    assert cell_rect(control, (100, 30), padding=0.0) == (0.0, 0.0, 100.0, 30.0)


def test_cell_rect_never_returns_negative_size():
    control = _control(width=1, height=1)
    _x, _y, w, h = cell_rect(control, (4, 4), padding=10.0)
    assert (w, h) == (0.0, 0.0)


def test_grid_extent_covers_all_controls():
    dialog = build_dialog(
        [
            {"class": "label", "name": "a", "x": 0, "y": 0, "width": 2},
            {"class": "edit", "name": "b", "x": 3, "y": 1, "height": 3},
        ]
    )
    assert grid_extent(dialog.controls) == (4, 4)
    assert grid_extent([]) == (0, 0)


def test_window_size_for_adds_margin_and_button_row():
    controls = [_control(x=1, y=1, width=1, height=1)]
    w, h = window_size_for(controls, (100, 30))
    assert w == int(2 * 100 + 2 * WINDOW_MARGIN)
    assert h == int(2 * 30 + 2 * WINDOW_MARGIN + BUTTON_ROW_HEIGHT)

    _w, h_plain = window_size_for(controls, (100, 30), with_buttons=False)
    assert h_plain == int(2 * 30 + 2 * WINDOW_MARGIN)


def test_window_size_for_respects_min_size():
    assert window_size_for([], (100, 30), min_size=(560, 360)) == (560, 360)
