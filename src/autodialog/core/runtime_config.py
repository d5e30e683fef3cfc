# どこで: `src/autodialog/core/runtime_config.py`。
# 何を: config.yaml による実行時設定（探索・ロード・キャッシュ）を提供する。
# なぜ: 値の保存先やダイアログウィンドウの寸法を、ホスト側でユーザーが指定できるようにするため。

from __future__ import annotations

import os
from dataclasses import dataclass
from importlib import resources
from pathlib import Path
from typing import Any

_CONFIG_VERSION = 1
_PACKAGED_SOURCE = "autodialog/resource/default_config.yaml"


@dataclass(frozen=True, slots=True)
class RuntimeConfig:
    """autodialog の実行時設定。"""

    config_path: Path | None
    state_dir: Path
    dialog_window_size: tuple[int, int]
    dialog_window_pos: tuple[int, int]
    dialog_cell_size: tuple[int, int]


_EXPLICIT_CONFIG_PATH: Path | None = None
_CONFIG_CACHE: RuntimeConfig | None = None


def set_config_path(path: str | Path | None) -> None:
    """明示 config パスを設定し、キャッシュを捨てる。None で既定の探索へ戻す。"""

    global _EXPLICIT_CONFIG_PATH, _CONFIG_CACHE
    _EXPLICIT_CONFIG_PATH = None if path is None else Path(str(path)).expanduser()
    _CONFIG_CACHE = None


def _discover_user_config() -> Path | None:
    """カレント → ホームの順に config.yaml を探し、最初に見つかったものを返す。"""

    for candidate in (
        Path.cwd() / ".autodialog" / "config.yaml",
        Path.home() / ".config" / "autodialog" / "config.yaml",
    ):
        if candidate.is_file():
            return candidate
    return None


def _parse_yaml(text: str, *, source: str) -> dict[str, Any]:
    import yaml

    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise RuntimeError(f"config.yaml を解釈できません: source={source}") from exc
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise RuntimeError(f"config.yaml の最上位は mapping である必要があります: source={source}")
    return data


def _packaged_defaults() -> dict[str, Any]:
    try:
        text = (
            resources.files("autodialog")
            .joinpath("resource", "default_config.yaml")
            .read_text(encoding="utf-8")
        )
    except OSError as exc:  # pragma: no cover
        raise RuntimeError(
            f"同梱の {_PACKAGED_SOURCE} を読めません（package-data を確認してください）"
        ) from exc
    return _parse_yaml(text, source=_PACKAGED_SOURCE)


def _merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """入れ子の mapping を再帰的に後勝ちでマージする。"""

    out = dict(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(out.get(key), dict):
            out[key] = _merge(out[key], value)
        else:
            out[key] = value
    return out


def _section(parent: dict[str, Any], name: str, *, dotted: str) -> dict[str, Any]:
    value = parent.get(name)
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise RuntimeError(f"{dotted} は mapping である必要があります: got={value!r}")
    return value


def _int_pair(section: dict[str, Any], name: str, *, dotted: str) -> tuple[int, int]:
    value = section.get(name)
    if not isinstance(value, (list, tuple)) or len(value) != 2:
        raise RuntimeError(f"{dotted} は [a, b] の配列である必要があります: got={value!r}")
    try:
        return int(value[0]), int(value[1])
    except (TypeError, ValueError) as exc:
        raise RuntimeError(f"{dotted} の要素は整数である必要があります: got={value!r}") from exc


def _path(section: dict[str, Any], name: str, *, dotted: str) -> Path:
    text = str(section.get(name) or "").strip()
    if not text:
        raise RuntimeError(f"{dotted} が空です（同梱 default_config.yaml を確認してください）")
    return Path(os.path.expandvars(os.path.expanduser(text)))


def _build(payload: dict[str, Any], config_path: Path | None) -> RuntimeConfig:
    version = payload.get("version")
    try:
        version_i = int(version)  # type: ignore[arg-type]
    except (TypeError, ValueError) as exc:
        raise RuntimeError(f"config.yaml の version は整数である必要があります: got={version!r}") from exc
    if version_i != _CONFIG_VERSION:
        raise RuntimeError(f"未対応の config.yaml version です: got={version_i}")

    paths = _section(payload, "paths", dotted="paths")
    dialog = _section(_section(payload, "ui", dotted="ui"), "dialog", dotted="ui.dialog")

    cell_size = _int_pair(dialog, "cell_size", dotted="ui.dialog.cell_size")
    if min(cell_size) <= 0:
        raise ValueError(f"ui.dialog.cell_size は正の値である必要があります: got={cell_size}")

    return RuntimeConfig(
        config_path=config_path,
        state_dir=_path(paths, "state_dir", dotted="paths.state_dir"),
        dialog_window_size=_int_pair(dialog, "window_size", dotted="ui.dialog.window_size"),
        dialog_window_pos=_int_pair(dialog, "window_pos", dotted="ui.dialog.window_pos"),
        dialog_cell_size=cell_size,
    )


def runtime_config() -> RuntimeConfig:
    """実行時設定をロードして返す（キャッシュ）。

    上書き順（後勝ち）:
    1) 同梱 default_config.yaml
    2) `./.autodialog/config.yaml` / `~/.config/autodialog/config.yaml`
    3) `set_config_path(...)` で指定した config
    """

    global _CONFIG_CACHE
    if _CONFIG_CACHE is not None:
        return _CONFIG_CACHE

    explicit = _EXPLICIT_CONFIG_PATH
    if explicit is not None and not explicit.is_file():
        raise FileNotFoundError(f"config.yaml が見つかりません: {explicit}")
    discovered = _discover_user_config()

    payload = _packaged_defaults()
    for layer in (discovered, explicit):
        if layer is not None:
            text = layer.read_text(encoding="utf-8")
            payload = _merge(payload, _parse_yaml(text, source=str(layer)))

    _CONFIG_CACHE = _build(payload, explicit or discovered)
    return _CONFIG_CACHE


def state_root_dir() -> Path:
    """ダイアログ値を保存する既定ディレクトリを返す。"""

    return runtime_config().state_dir


__all__ = ["RuntimeConfig", "runtime_config", "set_config_path", "state_root_dir"]
