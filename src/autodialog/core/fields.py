# どこで: `src/autodialog/core/fields.py`。
# 何を: スクリプト由来の動的レコードから、型付きの値を「取れなければ既定値」で読む関数群を提供する。
# なぜ: 信頼できない入力の型不一致・欠落を検証エラーにせず、一箇所の規則で既定値へ寄せるため。

from __future__ import annotations

import math
import re
from collections.abc import Mapping, Sequence
from typing import Any, TypeVar

T = TypeVar("T", str, int, float, bool)

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_DECIMAL_RE = re.compile(r"\s*[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?\s*")
_HEX_RE = re.compile(r"\s*0[xX][0-9a-fA-F]+\s*")


def _is_number(value: Any) -> bool:
    # bool は int のサブクラスだが、スクリプト側では別の型なので数値扱いしない。
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def number_to_text(value: int | float) -> str:
    """数値をスクリプト側の数値→文字列変換と同じ書式（%.14g）で返す。"""

    return "%.14g" % value


def text_to_number(text: str) -> float | None:
    """数値として解釈できる文字列なら float を返す。できなければ None。

    前後の空白は許容する。`0x` 始まりは 16 進として読む。
    """

    if _DECIMAL_RE.fullmatch(text):
        return float(text)
    if _HEX_RE.fullmatch(text):
        try:
            return float(int(text.strip(), 16))
        except OverflowError:
            return None
    return None


def _as_string(value: Any) -> str | None:
    if isinstance(value, str):
        return value
    if _is_number(value):
        try:
            return number_to_text(value)
        except OverflowError:
            # float に収まらない int は文字列として読めない扱い。
            return None
    return None


def _as_float(value: Any) -> float | None:
    if _is_number(value):
        try:
            return float(value)
        except OverflowError:
            return None
    if isinstance(value, str):
        return text_to_number(value)
    return None


def _as_int(value: Any) -> int | None:
    number = _as_float(value)
    if number is None or not math.isfinite(number):
        return None
    out = int(number)  # 0 方向へ切り捨て
    if out < INT_MIN or out > INT_MAX:
        return None
    return out


def _extract(value: Any, default: T) -> T | None:
    if isinstance(default, bool):
        return value if isinstance(value, bool) else None
    if isinstance(default, int):
        return _as_int(value)
    if isinstance(default, float):
        return _as_float(value)
    return _as_string(value)


def get_field(record: Any, key: str, default: T = "") -> T:  # type: ignore[assignment]
    """record[key] が default と同じ型として読めればその値を、読めなければ default を返す。

    Parameters
    ----------
    record : Any
        スクリプトが渡した動的レコード。Mapping 以外は「全キー欠落」と同じ扱い。
    key : str
        読み出すフィールド名。
    default : str | int | float | bool
        型の指定を兼ねる既定値。省略時は空文字列。

    Notes
    -----
    型不一致・欠落で例外は投げない（寛容な既定値ポリシー）。
    """

    if not isinstance(record, Mapping):
        return default
    value = record.get(key)
    if value is None:
        return default
    extracted = _extract(value, default)
    if extracted is None:
        return default
    return extracted


def get_string_list(record: Any, key: str) -> list[str]:
    """record[key] を文字列のリストとして読み、順序を保って返す。

    文字列（または数値）以外の要素は読み飛ばす。リストでなければ空リスト。
    """

    if not isinstance(record, Mapping):
        return []
    raw = record.get(key)
    if isinstance(raw, (str, bytes)) or not isinstance(raw, Sequence):
        return []
    out: list[str] = []
    for item in raw:
        text = _as_string(item)
        if text is not None:
            out.append(text)
    return out


__all__ = [
    "INT_MIN",
    "INT_MAX",
    "get_field",
    "get_string_list",
    "number_to_text",
    "text_to_number",
]
