import logging

import pytest

from autodialog.core import Button, ButtonId, DialogBuildError, build_dialog


def _controls():
    return [
        {"class": "label", "name": "title", "label": "Settings"},
        {"class": "edit", "name": "text", "value": "hello"},
        {"class": "intedit", "name": "count", "value": 3},
        {"class": "checkbox", "name": "enabled", "value": True},
    ]


@pytest.mark.parametrize("root", [None, "controls", 3, {"class": "edit"}])
def test_non_list_root_is_fatal(root):
    with pytest.raises(DialogBuildError):
        build_dialog(root)


def test_bad_control_entry_aborts_whole_build():
    with pytest.raises(DialogBuildError):
        build_dialog([{"class": "edit"}, "not-a-record"])
    with pytest.raises(DialogBuildError):
        build_dialog([{"class": "edit"}, {"class": "unknown"}])


def test_oversized_numbers_fall_back_to_defaults():
    dialog = build_dialog(
        [
            {"class": "floatedit", "name": "f", "value": 10**400},
            {"class": "intedit", "name": 10**400, "value": 10**400},
        ],
        include_buttons=False,
    )
    assert dialog.read_back() == ({"f": 0.0, "": 0},)


def test_controls_keep_declaration_order():
    dialog = build_dialog(_controls())
    assert [c.name for c in dialog.controls] == ["title", "text", "count", "enabled"]


def test_no_declared_buttons_synthesizes_ok_cancel():
    dialog = build_dialog([])
    assert dialog.buttons == [Button(ButtonId.OK, "OK"), Button(ButtonId.CANCEL, "Cancel")]


def test_declared_labels_and_id_map():
    dialog = build_dialog([], ["Go", "Stop"], {"cancel": "Stop"})
    assert dialog.buttons == [Button(None, "Go"), Button(ButtonId.CANCEL, "Stop")]


def test_id_map_accepts_list_of_pairs_and_any_case():
    dialog = build_dialog([], ["Go", "Stop"], [("OK", "Go"), ("cancel", "Stop")])
    assert dialog.buttons == [Button(ButtonId.OK, "Go"), Button(ButtonId.CANCEL, "Stop")]


def test_id_map_for_undeclared_label_is_fatal():
    with pytest.raises(DialogBuildError, match="Invalid button for id"):
        build_dialog([], ["Go", "Stop"], {"ok": "Run"})


def test_id_map_without_labels_is_fatal():
    with pytest.raises(DialogBuildError):
        build_dialog([], None, {"ok": "OK"})


def test_id_map_unknown_name_assigns_no_id():
    dialog = build_dialog([], ["Go"], {"frobnicate": "Go"})
    assert dialog.buttons == [Button(None, "Go")]


def test_id_map_assigns_first_button_with_label():
    dialog = build_dialog([], ["Dup", "Dup"], {"yes": "Dup"})
    assert dialog.buttons == [Button(ButtonId.YES, "Dup"), Button(None, "Dup")]


def test_non_string_button_label_is_fatal():
    with pytest.raises(DialogBuildError):
        build_dialog([], ["Go", None])
    with pytest.raises(DialogBuildError):
        build_dialog([], ["Go"], {"ok": ["Go"]})


def test_numeric_button_label_is_converted():
    dialog = build_dialog([], [1, 2.5])
    assert [b.label for b in dialog.buttons] == ["1", "2.5"]


def test_control_only_dialog_ignores_button_inputs():
    dialog = build_dialog([], ["Go"], {"ok": "Missing"}, include_buttons=False)
    assert dialog.use_buttons is False
    assert [b.label for b in dialog.buttons] == ["OK", "Cancel"]


def test_read_back_without_press_is_false():
    dialog = build_dialog(_controls(), ["Go", "Stop"])
    pressed, values = dialog.read_back()
    assert pressed is False
    assert values == {"title": None, "text": "hello", "count": 3, "enabled": True}
    assert list(values) == ["title", "text", "count", "enabled"]


def test_read_back_pressed_label():
    dialog = build_dialog(_controls(), ["Go", "Stop"], {"cancel": "Stop"})
    dialog.push_button(0)
    pressed, _values = dialog.read_back()
    assert pressed == "Go"
    assert dialog.pressed_button == Button(None, "Go")


def test_read_back_cancel_id_is_false_regardless_of_label():
    dialog = build_dialog(_controls(), ["Go", "Stop"], {"cancel": "Stop"})
    dialog.push_button(1)
    pressed, _values = dialog.read_back()
    assert pressed is False


def test_read_back_default_cancel_is_false():
    dialog = build_dialog(_controls())
    dialog.push_button(1)
    assert dialog.read_back()[0] is False
    dialog.push_button(0)
    assert dialog.read_back()[0] == "OK"


def test_read_back_without_buttons_has_arity_one():
    dialog = build_dialog(_controls(), include_buttons=False)
    dialog.push_button(0)
    result = dialog.read_back()
    assert len(result) == 1
    assert result[0]["text"] == "hello"


@pytest.mark.parametrize("index", [2, -1, 100, 0.5, 1.0, True, "0"])
def test_push_button_invalid_index_is_coerced_and_logged(index, caplog):
    dialog = build_dialog([], ["Go", "Stop"])
    dialog.push_button(0)
    with caplog.at_level(logging.ERROR, logger="autodialog.core.dialog"):
        dialog.push_button(index)
    assert dialog.pressed is None
    assert dialog.pressed_button is None
    assert any(rec.levelno == logging.ERROR for rec in caplog.records)
    assert dialog.read_back()[0] is False


def test_push_button_none_clears_without_logging(caplog):
    dialog = build_dialog([])
    dialog.push_button(0)
    with caplog.at_level(logging.ERROR, logger="autodialog.core.dialog"):
        dialog.push_button(None)
    assert dialog.pressed is None
    assert not [rec for rec in caplog.records if rec.levelno >= logging.ERROR]


def test_duplicate_names_read_back_last_value():
    dialog = build_dialog(
        [
            {"class": "edit", "name": "v", "value": "first"},
            {"class": "edit", "name": "v", "value": "second"},
        ],
        include_buttons=False,
    )
    (values,) = dialog.read_back()
    assert values == {"v": "second"}


def test_end_to_end_checkbox():
    dialog = build_dialog(
        [{"class": "checkbox", "name": "c", "label": "Go?", "value": True}],
        include_buttons=False,
    )
    assert dialog.read_back() == ({"c": True},)
    assert dialog.serialize() == "c:1"
    dialog.deserialize("c:0")
    assert dialog.read_back() == ({"c": False},)
