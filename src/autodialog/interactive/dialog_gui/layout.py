# どこで: `src/autodialog/interactive/dialog_gui/layout.py`。
# 何を: コントロールのグリッド配置（x/y/width/height）をピクセル矩形へ変換する純粋関数群を提供する。
# なぜ: imgui 依存の描画から座標計算を切り離し、単体テスト可能に保つため。

from __future__ import annotations

from collections.abc import Sequence

from autodialog.core.controls import DialogControl

DEFAULT_PADDING = 4.0
BUTTON_ROW_HEIGHT = 40.0
WINDOW_MARGIN = 16.0


def _span(value: int) -> int:
    # width/height が 0 以下でも 1 セルは確保する（描画上の都合のみ、モデルは変えない）。
    return max(1, int(value))


def cell_rect(
    control: DialogControl,
    cell_size: tuple[float, float],
    *,
    padding: float = DEFAULT_PADDING,
) -> tuple[float, float, float, float]:
    """control の描画矩形 `(x, y, w, h)` をピクセル単位で返す。"""

    cw, ch = float(cell_size[0]), float(cell_size[1])
    x = float(control.x) * cw + padding
    y = float(control.y) * ch + padding
    w = max(0.0, _span(control.width) * cw - 2.0 * padding)
    h = max(0.0, _span(control.height) * ch - 2.0 * padding)
    return x, y, w, h


def grid_extent(controls: Sequence[DialogControl]) -> tuple[int, int]:
    """全コントロールが占めるグリッドの `(列数, 行数)` を返す。"""

    cols = 0
    rows = 0
    for control in controls:
        cols = max(cols, int(control.x) + _span(control.width))
        rows = max(rows, int(control.y) + _span(control.height))
    return cols, rows


def window_size_for(
    controls: Sequence[DialogControl],
    cell_size: tuple[int, int],
    *,
    min_size: tuple[int, int] = (0, 0),
    with_buttons: bool = True,
) -> tuple[int, int]:
    """コントロール群とボタン行が収まるウィンドウサイズを返す（min_size 以上）。"""

    cols, rows = grid_extent(controls)
    width = cols * cell_size[0] + 2.0 * WINDOW_MARGIN
    height = rows * cell_size[1] + 2.0 * WINDOW_MARGIN
    if with_buttons:
        height += BUTTON_ROW_HEIGHT
    return max(int(min_size[0]), int(width)), max(int(min_size[1]), int(height))


__all__ = ["cell_rect", "grid_extent", "window_size_for"]
