import pytest

from autodialog.core.buttons import BUTTON_IDS, Button, ButtonId, button_id_from_name, default_buttons


def test_catalog_names_map_to_distinct_ids():
    assert set(BUTTON_IDS) == {
        "ok",
        "yes",
        "save",
        "apply",
        "close",
        "no",
        "cancel",
        "help",
        "context_help",
    }
    assert len(set(BUTTON_IDS.values())) == len(BUTTON_IDS)


def test_catalog_is_immutable():
    with pytest.raises(TypeError):
        BUTTON_IDS["ok"] = ButtonId.CANCEL  # type: ignore[index]


def test_button_id_from_name_is_case_insensitive():
    assert button_id_from_name("cancel") is ButtonId.CANCEL
    assert button_id_from_name("Context_Help") is ButtonId.CONTEXT_HELP


def test_unknown_name_yields_no_id():
    assert button_id_from_name("frobnicate") is None
    assert button_id_from_name("") is None


def test_default_buttons_are_ok_then_cancel():
    assert default_buttons() == [Button(ButtonId.OK, "OK"), Button(ButtonId.CANCEL, "Cancel")]
