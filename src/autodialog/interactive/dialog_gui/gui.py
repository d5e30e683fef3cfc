# どこで: `src/autodialog/interactive/dialog_gui/gui.py`。
# 何を: DialogModel を pyimgui で編集するためのダイアログ GUI（初期化/1フレーム描画/破棄）を提供する。
# なぜ: ImGui コンテキストとウィンドウの寿命管理を 1 箇所に閉じ込め、描画手順（panel）を純粋に保つため。

from __future__ import annotations

import time
from typing import Any

from autodialog.core.dialog import DialogModel

from .panel import render_button_row, render_dialog_controls
from .pyglet_backend import ImguiPygletBackend

_CLEAR_COLOR = (0.12, 0.12, 0.12, 1.0)


class DialogGUI:
    """pyimgui で DialogModel を表示・編集するダイアログ。

    `draw_frame()` を呼ぶたびに 1 フレーム分を描画する。
    ボタンが押されたフレームで DialogModel.push_button() を呼び、finished を True にする。
    """

    def __init__(
        self,
        gui_window: Any,
        *,
        dialog: DialogModel,
        cell_size: tuple[int, int],
        title: str = "Dialog",
    ) -> None:
        import imgui  # type: ignore[import-untyped]

        self._imgui = imgui
        self._window = gui_window
        self._dialog = dialog
        self._cell_size = (float(cell_size[0]), float(cell_size[1]))
        self._title = str(title)

        # current context はグローバルなので、描画のたびに自前のものへ切り替える。
        self._context = imgui.create_context()
        imgui.set_current_context(self._context)
        imgui.style_colors_dark()
        self._backend = ImguiPygletBackend(gui_window)

        self._last_frame = time.monotonic()
        self._closed = False
        self.finished = False

    def _layout_window(self) -> None:
        imgui = self._imgui
        imgui.set_next_window_position(0, 0)
        imgui.set_next_window_size(self._window.width, self._window.height)
        imgui.begin(
            self._title,
            flags=imgui.WINDOW_NO_RESIZE | imgui.WINDOW_NO_COLLAPSE | imgui.WINDOW_NO_TITLE_BAR,
        )

    def draw_frame(self) -> bool:
        """1 フレーム分を描画し、ボタンが押されたフレームなら True を返す。

        `flip()` は呼び出し側（pyglet の on_draw 後処理）が行う。
        """

        if self._closed:
            return False

        imgui = self._imgui
        imgui.set_current_context(self._context)

        now = time.monotonic()
        self._backend.sync_io(imgui, dt=now - self._last_frame)
        self._last_frame = now
        imgui.new_frame()

        self._layout_window()
        clicked: int | None = None
        try:
            render_dialog_controls(self._dialog, cell_size=self._cell_size)
            if self._dialog.use_buttons:
                clicked = render_button_row(self._dialog)
        finally:
            imgui.end()
        imgui.render()

        import pyglet

        pyglet.gl.glClearColor(*_CLEAR_COLOR)
        self._window.clear()
        self._backend.render(imgui.get_draw_data())

        if clicked is None:
            return False
        self._dialog.push_button(clicked)
        self.finished = True
        return True

    def close(self) -> None:
        """renderer / コンテキスト / ウィンドウを破棄する。2 回目以降は何もしない。"""

        if self._closed:
            return
        self._closed = True
        self._backend.shutdown()
        self._imgui.destroy_context(self._context)
        self._window.close()


__all__ = ["DialogGUI"]
