# どこで: `src/autodialog/core/__init__.py`。
# 何を: ダイアログモデル（コントロール/ボタン/直列化）の公開エイリアスをまとめる。
# なぜ: ホスト側から最小インポートで使えるようにするため。

from .buttons import BUTTON_IDS, Button, ButtonId, button_id_from_name
from .color import Color
from .controls import (
    CheckboxControl,
    ColorAlphaControl,
    ColorControl,
    DialogControl,
    DropdownControl,
    EditControl,
    FloatEditControl,
    IntEditControl,
    LabelControl,
    PersistableControl,
    TextboxControl,
    control_from_record,
)
from .dialog import DialogModel, build_dialog
from .errors import DialogBuildError
from .fields import get_field, get_string_list
from .string_codec import inline_string_decode, inline_string_encode

__all__ = [
    "BUTTON_IDS",
    "Button",
    "ButtonId",
    "button_id_from_name",
    "Color",
    "CheckboxControl",
    "ColorAlphaControl",
    "ColorControl",
    "DialogControl",
    "DropdownControl",
    "EditControl",
    "FloatEditControl",
    "IntEditControl",
    "LabelControl",
    "PersistableControl",
    "TextboxControl",
    "control_from_record",
    "DialogModel",
    "build_dialog",
    "DialogBuildError",
    "get_field",
    "get_string_list",
    "inline_string_decode",
    "inline_string_encode",
]
