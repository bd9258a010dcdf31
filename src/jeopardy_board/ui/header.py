from __future__ import annotations

from collections.abc import Callable

import streamlit as st

from src.jeopardy_board.adapters.session_store_streamlit import StSessionStore


def render_header(store: StSessionStore, start_game: Callable[[], bool]) -> None:
    """メインヘッダー（スタート/リスタートボタン）を描画する。

    押下時は読み込み中スピナーを表示しながら start_game を呼び出し、完了後に再描画する。
    一度でも開始していればラベルを「リスタート」に切り替える。

    Args:
        start_game: 盤面を一から構築するコールバック（成功で True）。
    """
    started = bool(store.get("started", False))
    label = "リスタート" if started else "スタート"
    button_type = "secondary" if started else "primary"
    if st.button(label, type=button_type, key="btn_start"):
        with st.spinner("問題を読み込んでいます…"):
            start_game()
        st.rerun()
