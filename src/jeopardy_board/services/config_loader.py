from __future__ import annotations

import logging
import tomllib
from typing import TYPE_CHECKING, Any

logger = logging.getLogger(__name__)


class _RuntimeStore:
    config: dict[str, Any] | None = None


_RUNTIME_STORE = _RuntimeStore()


def set_runtime_config(cfg: dict[str, Any] | None) -> None:
    """実行時（アップロード）で与えられた設定を保持する。None で解除。"""
    _RUNTIME_STORE.config = cfg if isinstance(cfg, dict) else None


def set_runtime_toml_bytes(data: bytes) -> bool:
    """アップロードされた TOML バイト列から実行時設定を反映する。

    解釈できなければ設定を解除して False を返す。
    """
    try:
        cfg = tomllib.loads(data.decode("utf-8"))
    except (UnicodeDecodeError, tomllib.TOMLDecodeError) as e:
        logger.warning("config.toml を解釈できません: %s", e)
        set_runtime_config(None)
        return False
    set_runtime_config(cfg)
    return True


def _get_config() -> dict[str, Any]:
    """現在有効な設定を返す。

    方針: ローカルの TOML や環境変数は読み込まない。
    - アップロード等で与えられたランタイム設定があればそれを返す。
    - それ以外は空辞書を返し、各呼び出し側で default 値にフォールバックさせる。
    """
    if isinstance(_RUNTIME_STORE.config, dict):
        return _RUNTIME_STORE.config
    return {}


def _section(name: str) -> dict[str, Any]:
    v = _get_config().get(name)
    return v if isinstance(v, dict) else {}


def get_app_title(default: str = "ジェパディ") -> str:
    title = _get_config().get("title")
    if isinstance(title, str) and title.strip():
        return title.strip()
    return default


def load_default_settings_values() -> dict[str, float | str]:
    """TOML の [api] から有効な値だけを取り出す。

    不正な型や範囲外の値は含めず、呼び出し側でコード既定値へフォールバックさせる。
    """
    result: dict[str, float | str] = {}
    api = _section("api")
    base_url = api.get("base_url")
    if isinstance(base_url, str) and base_url.strip():
        result["api_base_url"] = base_url.strip()
    timeout = api.get("timeout")
    # bool は int のサブクラスなので除外する
    if isinstance(timeout, (int, float)) and not isinstance(timeout, bool) and timeout > 0:
        result["api_timeout"] = float(timeout)
    return result


if TYPE_CHECKING:
    from src.jeopardy_board.app.state import Settings as _SettingsType


def load_default_settings() -> _SettingsType:
    from src.jeopardy_board.app.state import Settings  # 局所インポートで循環回避

    values = load_default_settings_values()
    return Settings(
        api_base_url=str(values.get("api_base_url", Settings.api_base_url)),
        api_timeout=float(values.get("api_timeout", Settings.api_timeout)),
    )
