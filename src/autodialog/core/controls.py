# どこで: `src/autodialog/core/controls.py`。
# 何を: ダイアログのコントロール記述子（label/edit/.../color）と、レコードからの構築ファクトリを提供する。
# なぜ: 動的レコード → 型付きコントロールの変換（既定値/範囲補正/永続化表現）を種類ごとに閉じ込めるため。

from __future__ import annotations

import logging
import re
import sys
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any, ClassVar, Literal, Union

from .color import Color
from .errors import DialogBuildError
from .fields import INT_MAX, INT_MIN, get_field, get_string_list
from .string_codec import inline_string_decode, inline_string_encode

_logger = logging.getLogger(__name__)

ControlClass = Literal[
    "label",
    "edit",
    "textbox",
    "intedit",
    "floatedit",
    "dropdown",
    "checkbox",
    "color",
    "coloralpha",
]
ReadbackValue = Union[str, int, float, bool, None]

DBL_MAX = sys.float_info.max

_INT_PREFIX_RE = re.compile(r"\s*([-+]?)0*(\d+)")
_FLOAT_PREFIX_RE = re.compile(
    r"\s*[-+]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?|inf(?:inity)?|nan)",
    re.IGNORECASE,
)


def _parse_int_prefix(text: str) -> int:
    """先頭の整数部分だけを読む。読めなければ 0。"""

    m = _INT_PREFIX_RE.match(text)
    if m is None:
        return 0
    sign, digits = m.groups()
    # int32 を超える桁数は変換せずに飽和させる。
    if len(digits) > 10:
        return INT_MIN if sign == "-" else INT_MAX
    return max(INT_MIN, min(INT_MAX, int(sign + digits)))


def _parse_float_prefix(text: str) -> float:
    """先頭の浮動小数部分だけを読む。読めなければ 0.0。"""

    m = _FLOAT_PREFIX_RE.match(text)
    if m is None:
        return 0.0
    return float(m.group(0))


def _common_fields(record: Mapping[str, Any]) -> dict[str, Any]:
    return {
        "name": get_field(record, "name"),
        "hint": get_field(record, "hint"),
        "x": get_field(record, "x", 0),
        "y": get_field(record, "y", 0),
        "width": get_field(record, "width", 1),
        "height": get_field(record, "height", 1),
    }


@dataclass(slots=True)
class DialogControl:
    """全コントロール共通の識別情報とグリッド配置。

    name は読み戻し・永続化のキー（一意でなくてよい）。
    x/y/width/height はグリッドセル単位で、ここでは検証しない。
    """

    control_class: ClassVar[str] = ""

    name: str = ""
    hint: str = ""
    x: int = 0
    y: int = 0
    width: int = 1
    height: int = 1

    @property
    def can_persist_value(self) -> bool:
        return False

    def read_back(self) -> ReadbackValue:
        """スクリプトへ返す現在値を返す。

        Notes
        -----
        具象コントロールはすべて上書きする（CONTROL_FACTORIES の全クラス）。
        """

        raise NotImplementedError

    def serialize_value(self) -> str:
        raise TypeError(f"{self.control_class} control has no persistable value")

    def deserialize_value(self, token: str) -> None:
        raise TypeError(f"{self.control_class} control has no persistable value")


@dataclass(slots=True)
class PersistableControl(DialogControl):
    """値を永続化トークンとして書き出し/復元できるコントロール。

    serialize_value / deserialize_value はサブクラスが必ず上書きするフック。
    """

    @property
    def can_persist_value(self) -> bool:
        return True

    def serialize_value(self) -> str:
        raise NotImplementedError

    def deserialize_value(self, token: str) -> None:
        raise NotImplementedError


@dataclass(slots=True)
class LabelControl(DialogControl):
    """静的テキスト。値を持たないので読み戻しは常に None。"""

    control_class: ClassVar[str] = "label"

    label: str = ""

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> LabelControl:
        return cls(**_common_fields(record), label=get_field(record, "label"))

    def read_back(self) -> ReadbackValue:
        return None


@dataclass(slots=True)
class EditControl(PersistableControl):
    """1 行テキスト入力。"""

    control_class: ClassVar[str] = "edit"

    value: str = ""

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> EditControl:
        text = get_field(record, "value")
        # "text" があれば優先する（他の種類の代役として使われる場合の別名）。
        text = get_field(record, "text", text)
        return cls(**_common_fields(record), value=text)

    def read_back(self) -> ReadbackValue:
        return self.value

    def serialize_value(self) -> str:
        return inline_string_encode(self.value)

    def deserialize_value(self, token: str) -> None:
        self.value = inline_string_decode(token)


@dataclass(slots=True)
class TextboxControl(EditControl):
    """複数行テキスト入力。値の扱いは edit と同じ。"""

    control_class: ClassVar[str] = "textbox"


@dataclass(slots=True)
class IntEditControl(PersistableControl):
    """整数入力。min >= max の場合は int32 の全範囲に戻す（値自体はクランプしない）。"""

    control_class: ClassVar[str] = "intedit"

    value: int = 0
    min: int = INT_MIN
    max: int = INT_MAX

    def __post_init__(self) -> None:
        if self.min >= self.max:
            self.min = INT_MIN
            self.max = INT_MAX

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> IntEditControl:
        return cls(
            **_common_fields(record),
            value=get_field(record, "value", 0),
            min=get_field(record, "min", INT_MIN),
            max=get_field(record, "max", INT_MAX),
        )

    def read_back(self) -> ReadbackValue:
        return self.value

    def serialize_value(self) -> str:
        return str(self.value)

    def deserialize_value(self, token: str) -> None:
        self.value = _parse_int_prefix(token)


@dataclass(slots=True)
class FloatEditControl(PersistableControl):
    """浮動小数入力。step はホスト側のスピン幅（0 なら未指定）。"""

    control_class: ClassVar[str] = "floatedit"

    value: float = 0.0
    min: float = -DBL_MAX
    max: float = DBL_MAX
    step: float = 0.0

    def __post_init__(self) -> None:
        if not self.min < self.max:
            self.min = -DBL_MAX
            self.max = DBL_MAX

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> FloatEditControl:
        return cls(
            **_common_fields(record),
            value=get_field(record, "value", 0.0),
            min=get_field(record, "min", -DBL_MAX),
            max=get_field(record, "max", DBL_MAX),
            step=get_field(record, "step", 0.0),
        )

    def read_back(self) -> ReadbackValue:
        return self.value

    def serialize_value(self) -> str:
        # repr は最短で往復できる 10 進表記（ロケール非依存）。
        return repr(float(self.value))

    def deserialize_value(self, token: str) -> None:
        self.value = _parse_float_prefix(token)


@dataclass(slots=True)
class DropdownControl(PersistableControl):
    """選択肢リスト。items が空でなければ value は常に items のどれか。"""

    control_class: ClassVar[str] = "dropdown"

    value: str = ""
    items: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        self.items = tuple(self.items)
        if self.items and self.value not in self.items:
            self.value = self.items[0]

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> DropdownControl:
        return cls(
            **_common_fields(record),
            value=get_field(record, "value"),
            items=tuple(get_string_list(record, "items")),
        )

    def read_back(self) -> ReadbackValue:
        return self.value

    def serialize_value(self) -> str:
        return inline_string_encode(self.value)

    def deserialize_value(self, token: str) -> None:
        self.value = inline_string_decode(token)


@dataclass(slots=True)
class CheckboxControl(PersistableControl):
    """チェックボックス。永続化は "1"/"0"。"""

    control_class: ClassVar[str] = "checkbox"

    label: str = ""
    value: bool = False

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> CheckboxControl:
        return cls(
            **_common_fields(record),
            label=get_field(record, "label"),
            value=get_field(record, "value", False),
        )

    def read_back(self) -> ReadbackValue:
        return bool(self.value)

    def serialize_value(self) -> str:
        return "1" if self.value else "0"

    def deserialize_value(self, token: str) -> None:
        self.value = token != "0"


@dataclass(slots=True)
class ColorControl(PersistableControl):
    """カラーピッカー。alpha=True なら正規表記に透明度を含める。"""

    control_class: ClassVar[str] = "color"
    with_alpha: ClassVar[bool] = False

    value: Color = field(default_factory=Color)
    alpha: bool = False

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> ColorControl:
        return cls(
            **_common_fields(record),
            value=Color.parse(get_field(record, "value")),
            alpha=cls.with_alpha,
        )

    def read_back(self) -> ReadbackValue:
        return self.value.hex_formatted(self.alpha)

    def serialize_value(self) -> str:
        return inline_string_encode(self.value.hex_formatted(self.alpha))

    def deserialize_value(self, token: str) -> None:
        self.value = Color.parse(inline_string_decode(token))


@dataclass(slots=True)
class ColorAlphaControl(ColorControl):
    """透明度付きカラーピッカー。"""

    control_class: ClassVar[str] = "coloralpha"
    with_alpha: ClassVar[bool] = True

    alpha: bool = True


ControlFactory = Callable[[Mapping[str, Any]], DialogControl]

CONTROL_FACTORIES: Mapping[str, ControlFactory] = {
    "label": LabelControl.from_record,
    "edit": EditControl.from_record,
    "textbox": TextboxControl.from_record,
    "intedit": IntEditControl.from_record,
    "floatedit": FloatEditControl.from_record,
    "dropdown": DropdownControl.from_record,
    "checkbox": CheckboxControl.from_record,
    "color": ColorControl.from_record,
    "coloralpha": ColorAlphaControl.from_record,
}


def control_from_record(record: Any) -> DialogControl:
    """コントロール定義レコードから DialogControl を構築して返す。

    Raises
    ------
    DialogBuildError
        record が mapping でない、または class が未知/欠落の場合。
    """

    if not isinstance(record, Mapping):
        raise DialogBuildError(f"bad control table entry: {record!r}")

    control_class = get_field(record, "class").lower()
    factory = CONTROL_FACTORIES.get(control_class)
    if factory is None:
        raise DialogBuildError(f"bad control table entry: class={control_class!r}")

    control = factory(record)
    _logger.debug(
        "コントロールを作成しました: %r (%d,%d)(%d,%d) hint=%r",
        control.name,
        control.x,
        control.y,
        control.width,
        control.height,
        control.hint,
    )
    return control


__all__ = [
    "ControlClass",
    "ReadbackValue",
    "DBL_MAX",
    "DialogControl",
    "PersistableControl",
    "LabelControl",
    "EditControl",
    "TextboxControl",
    "IntEditControl",
    "FloatEditControl",
    "DropdownControl",
    "CheckboxControl",
    "ColorControl",
    "ColorAlphaControl",
    "CONTROL_FACTORIES",
    "control_from_record",
]
