from __future__ import annotations

from src.jeopardy_board.app.ports.session_store import SessionStore
from src.jeopardy_board.app.state import Settings
from src.jeopardy_board.domain import Board


def get_board(store: SessionStore) -> Board | None:
    """セッションの盤面を返す。構築中・未開始なら None。"""
    return store.get("board")


def get_settings(store: SessionStore) -> Settings:
    """セッションの設定を返す（未設定時はコード既定値）。"""
    settings = store.get("settings")
    return settings if isinstance(settings, Settings) else Settings()


def set_settings(store: SessionStore, settings: Settings) -> None:
    """設定を保存する。反映は次のスタート/リスタートから。"""
    store.set("settings", settings)


def is_loading(store: SessionStore) -> bool:
    return bool(store.get("loading", False))


def get_generation(store: SessionStore) -> int:
    return int(store.get("generation", 0))


def get_last_error(store: SessionStore) -> str | None:
    return store.get("last_error")
