from __future__ import annotations

from collections.abc import Callable

import streamlit as st

from src.jeopardy_board.adapters.session_store_streamlit import StSessionStore
from src.jeopardy_board.domain import Board, Showing, cell_text
from src.jeopardy_board.services.gameplay import handle_cell_click as _svc_handle_cell_click
from src.jeopardy_board.ui.text import escape_markdown

# 問題表示中と答え表示中を見分けるためのボタン種別
_BUTTON_TYPE: dict[Showing, str] = {
    Showing.HIDDEN: "secondary",
    Showing.QUESTION: "secondary",
    Showing.ANSWER: "primary",
}


def render_board(board: Board, generation: int, on_click: Callable[[int, int], None]) -> None:
    """盤面を描画し、クリックで on_click(column, row) を呼び出す。

    1 行目にカテゴリ名、その下に各カテゴリの問題を行として並べる。
    表示テキストは Markdown として解釈されないようエスケープする。
    ウィジェットキーに世代番号を含め、リスタート前の状態を引き継がないようにする。
    """
    n_cols = len(board)
    if n_cols == 0:
        return
    n_rows = max(len(category.clues) for category in board)

    header = st.columns(n_cols)
    for c, category in enumerate(board):
        header[c].markdown(f"**{escape_markdown(category.title.upper())}**")

    for r in range(n_rows):
        cols = st.columns(n_cols)
        for c, category in enumerate(board):
            if r >= len(category.clues):
                continue
            clue = category.clues[r]
            label = escape_markdown(cell_text(clue))
            if clue.showing is Showing.QUESTION:
                label = f"Q: {label}"
            elif clue.showing is Showing.ANSWER:
                label = f"A: {label}"
            if cols[c].button(
                label,
                key=f"cell-{generation}-{c}-{r}",
                type=_BUTTON_TYPE[clue.showing],
                use_container_width=True,
            ):
                on_click(c, r)
                st.rerun()


def handle_click(store: StSessionStore, column: int, row: int) -> None:
    """盤面セルクリック時の処理をサービスに委譲する。"""
    _svc_handle_cell_click(store, column, row)
