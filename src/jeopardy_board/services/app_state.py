from __future__ import annotations

import logging

from src.jeopardy_board.app.ports.session_store import SessionStore
from src.jeopardy_board.app.state import AppState
from src.jeopardy_board.domain import Board
from src.jeopardy_board.services import data_access
from src.jeopardy_board.services.config_loader import load_default_settings

logger = logging.getLogger(__name__)


def initialize_state(store: SessionStore) -> None:
    """アプリ起動時に必要なセッション状態を初期化する。

    既に存在するキーは上書きせず、未定義のときのみ初期値を設定する。
    盤面は None（未開始）から始める。
    """
    store.setdefault("board", None)
    store.setdefault("loading", False)
    store.setdefault("generation", 0)
    store.setdefault("started", False)
    store.setdefault("last_error", None)
    if store.get("settings") is None:
        data_access.set_settings(store, load_default_settings())


def begin_setup(store: SessionStore) -> int:
    """盤面構築を開始し、この構築の世代番号を返す。

    以前の盤面はこの時点で破棄し、読込中フラグを立てる。
    """
    token = data_access.get_generation(store) + 1
    store.set("generation", token)
    store.set("board", None)
    store.set("loading", True)
    store.set("started", True)
    store.set("last_error", None)
    logger.debug("setup generation %d を開始", token)
    return token


def apply_board(store: SessionStore, token: int, board: Board) -> bool:
    """構築結果を反映する。token が現在の世代と一致しなければ何もしない。"""
    if token != data_access.get_generation(store):
        logger.info("古い世代 %d の盤面を破棄しました", token)
        return False
    store.set("board", board)
    store.set("loading", False)
    return True


def fail_setup(store: SessionStore, token: int, error: Exception | str) -> bool:
    """構築失敗を記録する。盤面は None のままにしてリトライを待つ。

    token が現在の世代と一致しなければ何もしない。
    """
    if token != data_access.get_generation(store):
        return False
    store.set("board", None)
    store.set("loading", False)
    store.set("last_error", str(error))
    return True


def load_app_state(store: SessionStore) -> AppState:
    """セッションから AppState のスナップショットを作る（盤面は共有参照）。"""
    return AppState(
        board=data_access.get_board(store),
        loading=data_access.is_loading(store),
        generation=data_access.get_generation(store),
        started=bool(store.get("started", False)),
        last_error=data_access.get_last_error(store),
        settings=data_access.get_settings(store),
    )
