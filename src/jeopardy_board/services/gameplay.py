from __future__ import annotations

import logging
import random

from src.jeopardy_board.app.ports.session_store import SessionStore
from src.jeopardy_board.app.ports.trivia_api import TriviaApi
from src.jeopardy_board.domain import NetworkError, reveal
from src.jeopardy_board.services import app_state, data_access
from src.jeopardy_board.services.board_builder import build_board

# UI コンポーネントからのイベント（スタート/リスタート、セルクリック）を受け取り、
# セッション状態の更新とドメイン操作を一箇所に集約する。
# 本モジュールは UI フレームワークに依存しない。状態アクセスは SessionStore 経由で行う。

logger = logging.getLogger(__name__)


def setup_and_start(
    store: SessionStore,
    api: TriviaApi,
    rng: random.Random | None = None,
) -> bool:
    """盤面を一から構築してゲームを開始する。成功したら True。

    振る舞い:
    - 構築前に世代を進め、以前の盤面を破棄する。
    - NetworkError は記録して False を返す（自動リトライはしない）。
    - それ以外の例外も失敗として記録し読込中を解除してから再送出する。
    - 構築中に新しい世代が始まっていた場合、結果は反映せず False を返す。
    """
    token = app_state.begin_setup(store)
    try:
        board = build_board(api, rng=rng)
    except NetworkError as e:
        logger.warning("盤面の構築に失敗しました (generation=%d): %s", token, e)
        app_state.fail_setup(store, token, e)
        return False
    except Exception as e:
        logger.exception("盤面の構築中に予期しないエラー (generation=%d)", token)
        app_state.fail_setup(store, token, e)
        raise
    return app_state.apply_board(store, token, board)


def handle_cell_click(store: SessionStore, column: int, row: int) -> str | None:
    """盤面セルクリック時の処理を行い、新たに表示するテキストを返す。

    - 盤面が無い（構築中・未開始）ときは何もしない。
    - 答え表示済みのセルは変化しない（None）。
    - 範囲外の座標は IndexError。
    """
    board = data_access.get_board(store)
    if board is None:
        return None
    return reveal(board, column, row)
