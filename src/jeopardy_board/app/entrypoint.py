import logging

import streamlit as st

from src.jeopardy_board.adapters.session_store_streamlit import StSessionStore
from src.jeopardy_board.adapters.trivia_api_requests import RequestsTriviaApi
from src.jeopardy_board.services import app_state, data_access, gameplay
from src.jeopardy_board.services.config_loader import get_app_title
from src.jeopardy_board.ui.board import handle_click, render_board
from src.jeopardy_board.ui.header import render_header
from src.jeopardy_board.ui.sidebar import render_sidebar
from src.jeopardy_board.ui.status import render_status

logger = logging.getLogger(__name__)


def _configure_logging() -> None:
    # Streamlit はリランごとにスクリプトを実行するため、ハンドラの重複登録を避ける
    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(
            level=logging.INFO,
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        )


def main():
    # set_page_config は最初に 1 度だけ呼ぶ必要があるため固定タイトルを使い、
    # 設定由来の見出しは st.title で別途描画する。
    default_title = "ジェパディ"
    st.set_page_config(page_title=default_title, layout="wide")
    _configure_logging()

    store = StSessionStore()
    app_state.initialize_state(store)

    st.title(get_app_title(default_title))

    # サイドバー: 設定 UI
    render_sidebar(store)

    def _start_game() -> bool:
        settings = data_access.get_settings(store)
        api = RequestsTriviaApi(settings.api_base_url, settings.api_timeout)
        return gameplay.setup_and_start(store, api)

    # ヘッダー操作（スタート/リスタート）
    render_header(store, start_game=_start_game)

    # 読み込み状況・失敗・公開状況
    state = app_state.load_app_state(store)
    render_status(state)

    # 盤面
    if state.board is not None:
        st.divider()
        render_board(state.board, state.generation, lambda c, r: handle_click(store, c, r))
