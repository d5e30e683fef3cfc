# どこで: `src/autodialog/core/dialog.py`。
# 何を: 宣言的なダイアログ定義から DialogModel を構築し、読み戻し/ボタン押下/値の直列化を提供する。
# なぜ: スクリプト境界の手続き（構築 → 操作 → 読み戻し → 永続化）を GUI 実装から独立させ、単体テスト可能に保つため。

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from .buttons import Button, ButtonId, button_id_from_name, default_buttons
from .controls import DialogControl, ReadbackValue, control_from_record
from .errors import DialogBuildError
from .fields import number_to_text
from .string_codec import inline_string_decode, inline_string_encode

_logger = logging.getLogger(__name__)

ReadbackResult = (
    tuple[str | bool, dict[str, ReadbackValue]] | tuple[dict[str, ReadbackValue]]
)


def _is_list(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes))


def _check_string(value: Any, *, what: str) -> str:
    """文字列（または数値）を要求する。それ以外は構築エラー。"""

    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return number_to_text(value)
    raise DialogBuildError(f"{what} must be a string: got={value!r}")


def _id_pairs(button_ids: Any) -> list[tuple[Any, Any]] | None:
    if isinstance(button_ids, Mapping):
        return list(button_ids.items())
    if not _is_list(button_ids):
        return None
    pairs: list[tuple[Any, Any]] = []
    for item in button_ids:
        if not _is_list(item) or len(item) != 2:
            raise DialogBuildError(f"button id entry must be a (name, label) pair: got={item!r}")
        pairs.append((item[0], item[1]))
    return pairs


class DialogModel:
    """構築済みのダイアログ（コントロール列 + ボタン列 + 押下状態）。

    Notes
    -----
    - controls / buttons は宣言順を保つ。
    - pressed は押されたボタンの index。None は「押されていない」。
    """

    def __init__(
        self,
        controls: Sequence[DialogControl],
        buttons: Sequence[Button],
        *,
        use_buttons: bool = True,
    ) -> None:
        self.controls: list[DialogControl] = list(controls)
        self.buttons: list[Button] = list(buttons)
        self.use_buttons = bool(use_buttons)
        self.pressed: int | None = None

    @property
    def pressed_button(self) -> Button | None:
        """押されたボタンを返す。押されていなければ None。"""

        if self.pressed is None:
            return None
        return self.buttons[self.pressed]

    def push_button(self, index: int | None) -> None:
        """押されたボタンの index を記録する。

        整数でない、または範囲外の index は「押されていない」に丸める（エラーログのみ）。
        """

        valid = (
            isinstance(index, int)
            and not isinstance(index, bool)
            and 0 <= index < len(self.buttons)
        )
        if index is not None and not valid:
            _logger.error("ボタン %r は範囲外です。キャンセル扱いにします", index)
            index = None
        self.pressed = index

    def read_back(self) -> ReadbackResult:
        """スクリプトへ返す値を返す。

        Returns
        -------
        tuple
            ボタン有りなら `(押されたラベル or False, {name: 値})`、
            ボタン無しなら `({name: 値},)`。
        """

        values: dict[str, ReadbackValue] = {}
        for control in self.controls:
            values[control.name] = control.read_back()

        if not self.use_buttons:
            return (values,)

        button = self.pressed_button
        if button is None or button.id == ButtonId.CANCEL:
            _logger.info("キャンセルを返します")
            return (False, values)
        _logger.info("ボタン %r を返します", button.label)
        return (button.label, values)

    def serialize(self) -> str:
        """永続化可能なコントロールの値を `name:token|name:token` 形式で返す。"""

        parts = [
            f"{inline_string_encode(control.name)}:{control.serialize_value()}"
            for control in self.controls
            if control.can_persist_value
        ]
        return "|".join(parts)

    def deserialize(self, text: str) -> None:
        """`serialize()` 形式の文字列から値を復元する。

        同名の永続化可能コントロールすべてへ値を渡す。未知の名前は無視する。
        """

        for piece in str(text).split("|"):
            name_part, sep, token = piece.partition(":")
            if not sep:
                continue
            name = inline_string_decode(name_part)
            for control in self.controls:
                if control.name == name and control.can_persist_value:
                    control.deserialize_value(token)


def build_dialog(
    controls: Any,
    button_labels: Any = None,
    button_ids: Any = None,
    *,
    include_buttons: bool = True,
) -> DialogModel:
    """宣言的な定義から DialogModel を構築して返す。

    Parameters
    ----------
    controls : Any
        コントロール定義レコードのリスト。
    button_labels : Any
        ボタンラベル（文字列）のリスト。省略可。
    button_ids : Any
        `{正規名: ラベル}` の mapping、または `(正規名, ラベル)` のリスト。省略可。
    include_buttons : bool
        False ならボタンを一切扱わない（コントロールのみのダイアログ）。

    Raises
    ------
    DialogBuildError
        controls がリストでない、コントロール定義が不正、
        あるいは ID 割り当て先のラベルが宣言されていない場合。
    """

    if not _is_list(controls):
        raise DialogBuildError("Cannot create config dialog from something non-table")

    built = [control_from_record(record) for record in controls]

    buttons: list[Button] = []
    if include_buttons and _is_list(button_labels):
        for label in button_labels:
            buttons.append(Button(None, _check_string(label, what="button label")))

    pairs = _id_pairs(button_ids) if include_buttons else None
    for raw_name, raw_label in pairs or ():
        name = _check_string(raw_name, what="button id name")
        label = _check_string(raw_label, what="button label")
        target = next((b for b in buttons if b.label == label), None)
        if target is None:
            raise DialogBuildError(f"Invalid button for id {name}")
        target.id = button_id_from_name(name)

    if not buttons:
        buttons = default_buttons()

    for i, button in enumerate(buttons):
        _logger.debug("ボタンを作成しました: %s (%d)", button.label, i)

    return DialogModel(built, buttons, use_buttons=include_buttons)


__all__ = ["DialogModel", "ReadbackResult", "build_dialog"]
