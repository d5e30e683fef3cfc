# どこで: `src/autodialog/core/errors.py`。
# 何を: ダイアログ構築の致命的エラー型を定義する。
# なぜ: 「構築全体を中断するエラー」と「黙って補正する異常」を型で区別するため。

from __future__ import annotations


class DialogBuildError(ValueError):
    """ダイアログ定義が不正で、構築を中断したことを表す。

    部分的に構築された DialogModel は返さない。
    """


__all__ = ["DialogBuildError"]
