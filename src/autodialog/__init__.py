# どこで: `src/autodialog/__init__.py`。
# 何を: ルート `autodialog` パッケージを定義する。
# なぜ: import 起点を `autodialog` に統一するため。

from __future__ import annotations

from autodialog.core import Button, ButtonId, DialogBuildError, DialogModel, build_dialog

__all__ = ["Button", "ButtonId", "DialogBuildError", "DialogModel", "build_dialog"]
