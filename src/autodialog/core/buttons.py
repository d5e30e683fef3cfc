# どこで: `src/autodialog/core/buttons.py`。
# 何を: ダイアログボタンの正規 ID（ok/cancel/...）と、名前 → ID の固定テーブルを提供する。
# なぜ: スクリプトが付けた任意ラベルのボタンへ「Cancel として扱う」などの意味を与えるため。

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from types import MappingProxyType
from typing import Mapping


class ButtonId(IntEnum):
    """正規ボタン ID。"""

    OK = 0
    YES = 1
    SAVE = 2
    APPLY = 3
    CLOSE = 4
    NO = 5
    CANCEL = 6
    HELP = 7
    CONTEXT_HELP = 8


BUTTON_IDS: Mapping[str, ButtonId] = MappingProxyType(
    {
        "ok": ButtonId.OK,
        "yes": ButtonId.YES,
        "save": ButtonId.SAVE,
        "apply": ButtonId.APPLY,
        "close": ButtonId.CLOSE,
        "no": ButtonId.NO,
        "cancel": ButtonId.CANCEL,
        "help": ButtonId.HELP,
        "context_help": ButtonId.CONTEXT_HELP,
    }
)


def button_id_from_name(name: str) -> ButtonId | None:
    """正規名から ButtonId を返す。未知の名前なら None（エラーにはしない）。"""

    return BUTTON_IDS.get(str(name).lower())


@dataclass(slots=True)
class Button:
    """ダイアログ下部のボタン。id=None は「正規 ID なし」。"""

    id: ButtonId | None
    label: str


def default_buttons() -> list[Button]:
    """ボタン宣言が無い場合の既定ボタン（OK, Cancel の順）を返す。"""

    return [Button(ButtonId.OK, "OK"), Button(ButtonId.CANCEL, "Cancel")]


__all__ = ["ButtonId", "BUTTON_IDS", "Button", "button_id_from_name", "default_buttons"]
