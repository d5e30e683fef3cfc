# どこで: `src/autodialog/interactive/runtime/dialog_loop.py`。
# 何を: DialogModel をモーダルなウィンドウとして表示し、閉じた後に読み戻し結果を返すランナーを提供する。
# なぜ: ホスト側の「表示 → 操作 → ボタン押下 → 読み戻し」の一連を 1 呼び出しにまとめるため。

from __future__ import annotations

import logging

import pyglet

from autodialog.core.dialog import DialogModel, ReadbackResult
from autodialog.core.runtime_config import runtime_config
from autodialog.interactive.dialog_gui import DialogGUI, create_dialog_window, window_size_for

_logger = logging.getLogger(__name__)


def run_dialog(dialog: DialogModel, *, title: str = "Dialog", fps: float = 60.0) -> ReadbackResult:
    """dialog を表示し、ボタン押下またはウィンドウを閉じるまで待ってから read_back() を返す。

    ボタンを押さずに閉じた場合は「押されていない」（キャンセル扱い）になる。
    """

    cfg = runtime_config()
    width, height = window_size_for(
        dialog.controls,
        cfg.dialog_cell_size,
        min_size=cfg.dialog_window_size,
        with_buttons=dialog.use_buttons,
    )
    window = create_dialog_window(
        width=width,
        height=height,
        caption=title,
        position=cfg.dialog_window_pos,
    )
    gui = DialogGUI(window, dialog=dialog, cell_size=cfg.dialog_cell_size, title=title)

    def request_exit(*_: object) -> None:
        # pyglet の on_close から呼ばれるコールバックは引数が来る場合があるため *args を受ける。
        pyglet.app.exit()

    def on_draw() -> None:
        if gui.draw_frame():
            request_exit()

    window.push_handlers(on_close=request_exit, on_draw=on_draw)

    def draw(dt: float) -> None:
        if window in pyglet.app.windows:
            window.draw(dt)

    if fps <= 0:
        pyglet.clock.schedule(draw)
    else:
        pyglet.clock.schedule_interval(draw, 1.0 / float(fps))

    try:
        pyglet.app.run(interval=None)
    finally:
        pyglet.clock.unschedule(draw)
        if not gui.finished:
            _logger.info("ボタンが押されずにダイアログが閉じられました")
            dialog.push_button(None)
        gui.close()

    return dialog.read_back()


__all__ = ["run_dialog"]
