"""
問題一覧ページ
- 現在の盤面で公開済みの問題・答えを表にまとめて表示します。
- 未公開のセルは内容を伏せたまま表示します。
"""

import streamlit as st

from src.jeopardy_board.services.clue_table import board_to_frame

# ページ設定
st.set_page_config(page_title="問題一覧", layout="wide")
st.title("問題一覧")

board = st.session_state.get("board")

if board is None:
    st.info("トップページで「スタート」を押してゲームを開始してください。")
    st.stop()

only_revealed = st.toggle("公開済みのみ表示", value=True)
df = board_to_frame(board, only_revealed=only_revealed)

if df.empty:
    st.caption("まだ公開された問題はありません。")
    st.stop()

st.dataframe(df, hide_index=True, use_container_width=True)
