# どこで: `src/autodialog/core/persistence.py`。
# 何を: DialogModel の直列化文字列を JSON ファイルへ保存/復元する（path 算出 / load / save）。
# なぜ: スクリプトが前回ダイアログで入力した値を、次回起動時の初期値として復元できるようにするため。

from __future__ import annotations

import json
import logging
import re
from pathlib import Path

from .dialog import DialogModel
from .runtime_config import state_root_dir

_logger = logging.getLogger(__name__)

_STATE_FILE_VERSION = 1


def _sanitize_filename_fragment(text: str) -> str:
    """ファイル名に埋め込めるように text を正規化して返す。"""

    normalized = re.sub(r"[^A-Za-z0-9._-]+", "_", str(text))
    normalized = normalized.strip("._-")
    return normalized or "unknown"


def default_dialog_state_path(script_name: str) -> Path:
    """スクリプト名に基づくダイアログ値の既定保存パスを返す。

    Notes
    -----
    パスは `{state_dir}/{script_name}.json`。
    """

    return state_root_dir() / f"{_sanitize_filename_fragment(script_name)}.json"


def load_dialog_states(path: Path) -> dict[str, str]:
    """JSON ファイルから `{dialog_key: 直列化文字列}` を読んで返す。無ければ空 dict。"""

    try:
        payload = path.read_text(encoding="utf-8")
    except OSError:
        return {}

    try:
        obj = json.loads(payload)
    except json.JSONDecodeError:
        # 破損したファイルは利便性のため無視する（次回保存で上書きされる）。
        _logger.warning("ダイアログ値ファイルが壊れているため無視します: %s", path)
        return {}

    dialogs = obj.get("dialogs") if isinstance(obj, dict) else None
    if not isinstance(dialogs, dict):
        return {}
    return {
        str(key): value for key, value in dialogs.items() if isinstance(value, str)
    }


def save_dialog_states(states: dict[str, str], path: Path) -> None:
    """`{dialog_key: 直列化文字列}` を JSON として path に保存する（親ディレクトリは作成する）。"""

    payload = {"version": _STATE_FILE_VERSION, "dialogs": dict(sorted(states.items()))}
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(payload, ensure_ascii=False) + "\n", encoding="utf-8")


def restore_dialog_state(dialog: DialogModel, path: Path, key: str) -> bool:
    """保存済みの値があれば dialog へ復元し、復元したかどうかを返す。"""

    serialized = load_dialog_states(path).get(str(key))
    if serialized is None:
        return False
    dialog.deserialize(serialized)
    return True


def store_dialog_state(dialog: DialogModel, path: Path, key: str) -> None:
    """dialog の現在値を直列化し、既存ファイルへマージして保存する。"""

    states = load_dialog_states(path)
    states[str(key)] = dialog.serialize()
    save_dialog_states(states, path)


__all__ = [
    "default_dialog_state_path",
    "load_dialog_states",
    "save_dialog_states",
    "restore_dialog_state",
    "store_dialog_state",
]
