# どこで: `src/autodialog/interactive/dialog_gui/widgets.py`。
# 何を: DialogControl.control_class を pyimgui の値ウィジェットへ対応付けて描画する。
# なぜ: コントロール種類ごとの UI 実装を閉じ込め、ダイアログ全体の描画から分離するため。

from __future__ import annotations

import math
from collections.abc import Callable, Sequence
from typing import Any

from autodialog.core.color import Color
from autodialog.core.controls import (
    CheckboxControl,
    ColorControl,
    DialogControl,
    DropdownControl,
    EditControl,
    FloatEditControl,
    IntEditControl,
    LabelControl,
)

WidgetFn = Callable[[Any, tuple[float, float]], tuple[bool, Any]]

# ImGui の input_int は C の int を受け取る。
_IMGUI_INT_MIN = -(2**31)
_IMGUI_INT_MAX = 2**31 - 1


def _clamp_int(value: int, lo: int, hi: int) -> int:
    """value を [lo, hi] に収めて返す。"""

    return max(int(lo), min(int(hi), int(value)))


def _clamp_float(value: float, lo: float, hi: float) -> float:
    """value を [lo, hi] に収めて返す。NaN は lo に寄せる。"""

    v = float(value)
    if math.isnan(v):
        return float(lo)
    return max(float(lo), min(float(hi), v))


def _dropdown_index(control: DropdownControl) -> int:
    """現在値の items 内 index を返す。items が空なら -1。"""

    if not control.items:
        return -1
    try:
        return control.items.index(control.value)
    except ValueError:
        return 0


def _color_to_floats(color: Color, alpha: bool) -> tuple[float, ...]:
    """Color を ImGui の 0..1 float 列へ変換する（alpha は不透明度に反転）。"""

    rgb = (color.r / 255.0, color.g / 255.0, color.b / 255.0)
    if not alpha:
        return rgb
    return rgb + (1.0 - color.a / 255.0,)


def _color_from_floats(values: Sequence[float], base: Color) -> Color:
    """ImGui の 0..1 float 列から Color を返す。alpha が無ければ base の透明度を保つ。"""

    def to_byte(v: float) -> int:
        return max(0, min(255, int(round(float(v) * 255.0))))

    r, g, b = (to_byte(v) for v in values[:3])
    a = base.a
    if len(values) >= 4:
        a = 255 - to_byte(values[3])
    return Color(r, g, b, a)


def widget_label(control: LabelControl, size: tuple[float, float]) -> tuple[bool, None]:
    """label を描画する。値は持たないので常に (False, None)。"""

    import imgui  # type: ignore[import-untyped]

    imgui.text_wrapped(str(control.label))
    return False, None


def widget_edit(control: EditControl, size: tuple[float, float]) -> tuple[bool, str]:
    """edit の 1 行テキスト入力を描画し、(changed, value) を返す。"""

    import imgui  # type: ignore[import-untyped]

    return imgui.input_text("##value", str(control.value), -1)


def widget_textbox(control: EditControl, size: tuple[float, float]) -> tuple[bool, str]:
    """textbox の複数行テキスト入力を描画し、(changed, value) を返す。"""

    import imgui  # type: ignore[import-untyped]

    w, h = size
    return imgui.input_text_multiline("##value", str(control.value), -1, float(w), float(h))


def widget_intedit(control: IntEditControl, size: tuple[float, float]) -> tuple[bool, int]:
    """intedit を描画し、[min, max] に収めた (changed, value) を返す。"""

    import imgui  # type: ignore[import-untyped]

    current = _clamp_int(control.value, _IMGUI_INT_MIN, _IMGUI_INT_MAX)
    changed, value = imgui.input_int("##value", current)
    if not changed:
        return False, control.value
    return True, _clamp_int(value, control.min, control.max)


def widget_floatedit(control: FloatEditControl, size: tuple[float, float]) -> tuple[bool, float]:
    """floatedit を描画し、[min, max] に収めた (changed, value) を返す。

    step > 0 のときだけ +/- ボタンを出す。
    """

    import imgui  # type: ignore[import-untyped]

    step = float(control.step) if control.step > 0 else 0.0
    changed, value = imgui.input_float("##value", float(control.value), step, step * 10.0, "%g")
    if not changed:
        return False, control.value
    return True, _clamp_float(value, control.min, control.max)


def widget_dropdown(control: DropdownControl, size: tuple[float, float]) -> tuple[bool, str]:
    """dropdown のコンボボックスを描画し、(changed, value) を返す。"""

    import imgui  # type: ignore[import-untyped]

    index = _dropdown_index(control)
    if index < 0:
        imgui.text_disabled(str(control.value))
        return False, control.value
    changed, new_index = imgui.combo("##value", index, list(control.items))
    if not changed:
        return False, control.value
    return True, control.items[int(new_index)]


def widget_checkbox(control: CheckboxControl, size: tuple[float, float]) -> tuple[bool, bool]:
    """checkbox を描画し、(clicked, value) を返す。"""

    import imgui  # type: ignore[import-untyped]

    clicked, state = imgui.checkbox(f"{control.label}##value", bool(control.value))
    return clicked, bool(state)


def widget_color(control: ColorControl, size: tuple[float, float]) -> tuple[bool, Color]:
    """color / coloralpha のカラーピッカーを描画し、(changed, value) を返す。"""

    import imgui  # type: ignore[import-untyped]

    flags = imgui.COLOR_EDIT_UINT8 | imgui.COLOR_EDIT_DISPLAY_HEX
    floats = _color_to_floats(control.value, control.alpha)
    if control.alpha:
        changed, out = imgui.color_edit4("##value", *floats, flags=flags)
    else:
        changed, out = imgui.color_edit3("##value", *floats, flags=flags)
    if not changed:
        return False, control.value
    return True, _color_from_floats(tuple(out), control.value)


_WIDGETS: dict[str, WidgetFn] = {
    "label": widget_label,
    "edit": widget_edit,
    "textbox": widget_textbox,
    "intedit": widget_intedit,
    "floatedit": widget_floatedit,
    "dropdown": widget_dropdown,
    "checkbox": widget_checkbox,
    "color": widget_color,
    "coloralpha": widget_color,
}


def widget_for(control: DialogControl) -> WidgetFn:
    """control_class に対応するウィジェット関数を返す。"""

    try:
        return _WIDGETS[control.control_class]
    except KeyError:
        raise ValueError(f"未対応のコントロールです: {control.control_class!r}") from None


__all__ = [
    "WidgetFn",
    "widget_for",
    "widget_label",
    "widget_edit",
    "widget_textbox",
    "widget_intedit",
    "widget_floatedit",
    "widget_dropdown",
    "widget_checkbox",
    "widget_color",
]
