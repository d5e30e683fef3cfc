# どこで: `src/autodialog/interactive/dialog_gui/panel.py`。
# 何を: DialogModel のコントロール群をグリッド位置に描画し、ボタン行のクリックを検出する。
# なぜ: ImGui ライフサイクル（gui.py）から 1 フレーム分の描画手順を分離するため。

from __future__ import annotations

from autodialog.core.dialog import DialogModel

from .layout import cell_rect, grid_extent
from .widgets import widget_for


def render_dialog_controls(dialog: DialogModel, *, cell_size: tuple[float, float]) -> bool:
    """全コントロールを描画し、ユーザー編集があれば control.value へ反映する。

    Returns
    -------
    bool
        いずれかの値が変更された場合 True。
    """

    import imgui  # type: ignore[import-untyped]

    origin_x, origin_y = imgui.get_cursor_pos()
    any_changed = False
    for index, control in enumerate(dialog.controls):
        x, y, w, h = cell_rect(control, cell_size)
        # name は一意とは限らないので index で ImGui の ID を分ける。
        imgui.push_id(str(index))
        try:
            imgui.set_cursor_pos((origin_x + x, origin_y + y))
            imgui.push_item_width(w)
            try:
                changed, value = widget_for(control)(control, (w, h))
            finally:
                imgui.pop_item_width()
            if control.hint and imgui.is_item_hovered():
                imgui.set_tooltip(control.hint)
        finally:
            imgui.pop_id()
        if changed:
            control.value = value  # type: ignore[attr-defined]
            any_changed = True

    # 後続（ボタン行）をグリッドの下端から描画する。
    _cols, rows = grid_extent(dialog.controls)
    imgui.set_cursor_pos((origin_x, origin_y + rows * float(cell_size[1])))
    return any_changed


def render_button_row(dialog: DialogModel) -> int | None:
    """ボタン行を描画し、クリックされたボタンの index を返す。無ければ None。"""

    import imgui  # type: ignore[import-untyped]

    clicked: int | None = None
    imgui.separator()
    for index, button in enumerate(dialog.buttons):
        if index > 0:
            imgui.same_line()
        if imgui.button(f"{button.label}##button{index}"):
            clicked = index
    return clicked


__all__ = ["render_dialog_controls", "render_button_row"]
