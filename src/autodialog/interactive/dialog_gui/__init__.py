# どこで: `src/autodialog/interactive/dialog_gui/__init__.py`。
# 何を: ダイアログ GUI の公開 API を集約する。
# なぜ: 実装を責務ごとに分割しつつ、利用側の import パスを安定させるため。

from __future__ import annotations

from .gui import DialogGUI
from .layout import cell_rect, grid_extent, window_size_for
from .panel import render_button_row, render_dialog_controls
from .pyglet_backend import ImguiPygletBackend, create_dialog_window

__all__ = [
    "DialogGUI",
    "cell_rect",
    "grid_extent",
    "window_size_for",
    "render_button_row",
    "render_dialog_controls",
    "create_dialog_window",
    "ImguiPygletBackend",
]
