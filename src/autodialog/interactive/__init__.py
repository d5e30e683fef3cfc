# どこで: `src/autodialog/interactive/__init__.py`。
# 何を: ホスト側 GUI（pyglet + pyimgui）関連のパッケージ定義。
# なぜ: 重い GUI 依存を core から隔離するため。

from __future__ import annotations

__all__ = []
