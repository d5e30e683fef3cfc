# どこで: `src/autodialog/interactive/runtime/__init__.py`。
# 何を: interactive 実行時の「ループ」実装をまとめるパッケージ定義。
# なぜ: ウィンドウループを GUI 描画から分離し、ホストごとの差し替えを容易にするため。

from __future__ import annotations

__all__ = []
