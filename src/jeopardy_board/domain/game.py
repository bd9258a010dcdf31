from __future__ import annotations

import random
from typing import Iterator, Tuple

from src.jeopardy_board.domain.constants import (
    HIDDEN_LABEL,
    NUM_CATEGORIES,
    NUM_CLUES_PER_CATEGORY,
)
from src.jeopardy_board.domain.data import Category, Clue, Showing

# Board はカテゴリ（列）の並び。各カテゴリの clues が行になる
Board = list[Category]


def select_clues(clues: list[Clue], k: int, rng: random.Random | None = None) -> list[Clue]:
    """clues を一様にシャッフルして先頭 k 件を返す。足りなければ ValueError。

    元リストは変更しない。
    """
    if len(clues) < k:
        raise ValueError(f"問題数が不足しています: {len(clues)}/{k}")
    pool = list(clues)
    (rng or random).shuffle(pool)
    return pool[:k]


def board_positions(board: Board) -> Iterator[Tuple[int, int]]:
    """board の実サイズに基づく (column, row) の走査位置を返す。"""
    for c, category in enumerate(board):
        for r, _ in enumerate(category.clues):
            yield c, r


def get_clue(board: Board, column: int, row: int) -> Clue:
    """(column, row) のセルを返す。範囲外（負値を含む）は IndexError。"""
    if not 0 <= column < len(board):
        raise IndexError(f"column out of range: {column}")
    clues = board[column].clues
    if not 0 <= row < len(clues):
        raise IndexError(f"row out of range: {row}")
    return clues[row]


def reveal(board: Board, column: int, row: int) -> str | None:
    """セルの公開状態を 1 段進め、表示すべきテキストを返す。

    - HIDDEN → QUESTION: 問題文を返す
    - QUESTION → ANSWER: 答えを返す
    - ANSWER: 変化なし（None）
    """
    clue = get_clue(board, column, row)
    if clue.showing is Showing.HIDDEN:
        clue.showing = Showing.QUESTION
        return clue.question
    if clue.showing is Showing.QUESTION:
        clue.showing = Showing.ANSWER
        return clue.answer
    return None


def cell_text(clue: Clue) -> str:
    """セルに表示するテキスト。"""
    if clue.showing is Showing.QUESTION:
        return clue.question
    if clue.showing is Showing.ANSWER:
        return clue.answer
    return HIDDEN_LABEL


def count_by_showing(board: Board) -> dict[Showing, int]:
    """公開状態ごとのセル数を返す。"""
    counts = {s: 0 for s in Showing}
    for c, r in board_positions(board):
        counts[board[c].clues[r].showing] += 1
    return counts


def validate_board(
    board: Board,
    num_categories: int = NUM_CATEGORIES,
    clues_per_category: int = NUM_CLUES_PER_CATEGORY,
) -> None:
    """盤面が num_categories × clues_per_category であることを確認する（違えば ValueError）。"""
    if len(board) != num_categories:
        raise ValueError(f"カテゴリ数が不正です: {len(board)}/{num_categories}")
    for category in board:
        if len(category.clues) != clues_per_category:
            raise ValueError(
                f"『{category.title}』の問題数が不正です: "
                f"{len(category.clues)}/{clues_per_category}"
            )
