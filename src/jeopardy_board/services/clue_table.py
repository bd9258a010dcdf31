from __future__ import annotations

import pandas as pd

from src.jeopardy_board.domain import Board, Showing, board_positions

COLUMNS = ["カテゴリ", "行", "状態", "問題", "答え"]

_STATE_LABEL: dict[Showing, str] = {
    Showing.HIDDEN: "未公開",
    Showing.QUESTION: "問題",
    Showing.ANSWER: "答え",
}


def board_to_frame(board: Board, only_revealed: bool = False) -> pd.DataFrame:
    """盤面を 1 セル 1 行の DataFrame にする。

    - 未公開セルの問題と、答え未公開セルの答えは空文字で伏せる。
    - only_revealed=True なら未公開セルを除く。
    - 並び順はカテゴリ順 → 行順（行は 1 始まり）。
    """
    records: list[dict[str, object]] = []
    for c, r in board_positions(board):
        category = board[c]
        clue = category.clues[r]
        if only_revealed and clue.showing is Showing.HIDDEN:
            continue
        records.append(
            {
                "カテゴリ": category.title,
                "行": r + 1,
                "状態": _STATE_LABEL[clue.showing],
                "問題": clue.question if clue.showing >= Showing.QUESTION else "",
                "答え": clue.answer if clue.showing is Showing.ANSWER else "",
            }
        )
    return pd.DataFrame.from_records(records, columns=COLUMNS)
