# どこで: `src/autodialog/interactive/dialog_gui/pyglet_backend.py`。
# 何を: ダイアログ用 pyglet ウィンドウの生成と、ImGui renderer / IO 同期をまとめた backend を提供する。
# なぜ: DialogGUI から pyglet + pyimgui 統合の差異（renderer の生成方法や Retina スケール）を隠すため。

from __future__ import annotations

from typing import Any

# 1 フレームの Δt がこれ未満だと ImGui がアサートする。
_MIN_DELTA_TIME = 1e-4


class ImguiPygletBackend:
    """1 つの pyglet ウィンドウに紐づく ImGui renderer。"""

    def __init__(self, gui_window: Any) -> None:
        try:
            from imgui.integrations import (
                pyglet as imgui_pyglet,  # type: ignore[import-untyped]
            )
        except Exception as exc:
            raise RuntimeError(f"imgui.integrations.pyglet を import できない: {exc}") from exc

        self._window = gui_window
        # pyimgui のバージョンにより create_renderer が無い場合がある。
        factory = getattr(imgui_pyglet, "create_renderer", None) or getattr(
            imgui_pyglet, "PygletRenderer", None
        )
        if factory is None:
            raise RuntimeError("imgui.integrations.pyglet に renderer がありません")
        self._renderer = factory(gui_window)

        refresh_font = getattr(self._renderer, "refresh_font_texture", None)
        if callable(refresh_font):
            refresh_font()

    def sync_io(self, imgui_mod: Any, *, dt: float) -> None:
        """ImGui IO の Δt / 表示サイズ / framebuffer スケールをウィンドウに合わせる。"""

        io = imgui_mod.get_io()
        io.delta_time = max(float(dt), _MIN_DELTA_TIME)

        win_w = max(1, int(self._window.width))
        win_h = max(1, int(self._window.height))
        fb_w, fb_h = self._window.get_framebuffer_size()
        io.display_size = (float(win_w), float(win_h))
        io.display_fb_scale = (float(fb_w) / win_w, float(fb_h) / win_h)

    def render(self, draw_data: Any) -> None:
        self._renderer.render(draw_data)

    def shutdown(self) -> None:
        shutdown = getattr(self._renderer, "shutdown", None)
        if callable(shutdown):
            shutdown()


def create_dialog_window(
    *,
    width: int,
    height: int,
    caption: str = "Dialog",
    position: tuple[int, int] | None = None,
    vsync: bool = True,
) -> Any:
    """固定サイズのダイアログ用 pyglet ウィンドウを生成し、position があれば移動する。"""

    import pyglet

    window = pyglet.window.Window(  # type: ignore[abstract]
        width=int(width),
        height=int(height),
        caption=str(caption),
        resizable=False,
        vsync=bool(vsync),
        config=pyglet.gl.Config(double_buffer=True, sample_buffers=1, samples=4),  # type: ignore[abstract]
    )
    if position is not None:
        window.set_location(int(position[0]), int(position[1]))
    return window


__all__ = ["ImguiPygletBackend", "create_dialog_window"]
