from __future__ import annotations

import streamlit as st

from src.jeopardy_board.app.state import AppState
from src.jeopardy_board.domain import Showing, count_by_showing


def render_status(state: AppState) -> None:
    """読み込み状況・失敗メッセージ・公開状況を描画する。

    - 構築失敗時はエラーを表示し、リスタートでの再試行を促す。
    - 盤面があるときは未公開/問題/答えのセル数を表示する。
    """
    if state.last_error:
        st.error(f"問題の取得に失敗しました: {state.last_error}")
        st.caption("ボタンを押して再試行してください。")
        return

    if state.board is None:
        if state.loading:
            st.info("問題を読み込んでいます…")
        elif not state.started:
            st.info("「スタート」を押すとゲームが始まります。")
        return

    counts = count_by_showing(state.board)
    c1, c2, c3 = st.columns(3)
    with c1:
        st.metric("未公開", counts[Showing.HIDDEN])
    with c2:
        st.metric("問題", counts[Showing.QUESTION])
    with c3:
        st.metric("答え", counts[Showing.ANSWER])
