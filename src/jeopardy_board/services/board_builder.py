"""
盤面構築サービス（Streamlit 非依存）
- ランダム問題から category_id を集める
- カテゴリごとに詳細を取得し、問題を一様シャッフルして必要数だけ選ぶ

戻り値の契約:
    Board（6 列 × 5 行、全セル HIDDEN）

失敗時は NetworkError を送出し、途中までの結果は返さない。
問題数が足りないカテゴリは埋め合わせせず失敗とする。
"""

from __future__ import annotations

import logging
import random

from src.jeopardy_board.app.ports.trivia_api import TriviaApi
from src.jeopardy_board.domain import (
    NUM_CATEGORIES,
    NUM_CLUES_PER_CATEGORY,
    Board,
    Category,
    NetworkError,
    extract_category_ids,
    parse_category_payload,
    select_clues,
    validate_board,
)

logger = logging.getLogger(__name__)


def get_category_ids(api: TriviaApi, count: int = NUM_CATEGORIES) -> list[int]:
    """ランダム問題 count 件から category_id を取り出す（重複可）。"""
    return extract_category_ids(api.get_random(count), count)


def get_category(
    api: TriviaApi,
    category_id: int,
    rng: random.Random | None = None,
) -> Category:
    """カテゴリを取得し、表示用の問題を NUM_CLUES_PER_CATEGORY 件選んで返す。"""
    title, clues = parse_category_payload(api.get_category(category_id))
    try:
        selected = select_clues(clues, NUM_CLUES_PER_CATEGORY, rng)
    except ValueError as e:
        raise NetworkError(f"カテゴリ {category_id}『{title}』: {e}") from e
    return Category(title=title, clues=selected)


def build_board(
    api: TriviaApi,
    rng: random.Random | None = None,
) -> Board:
    """盤面を構築して返す。

    カテゴリ詳細は要求順に逐次取得する。
    盤面は常に NUM_CATEGORIES 列 × NUM_CLUES_PER_CATEGORY 行で、違えば NetworkError。
    """
    category_ids = get_category_ids(api, NUM_CATEGORIES)
    logger.debug("category ids: %s", category_ids)
    board: Board = []
    for category_id in category_ids:
        board.append(get_category(api, category_id, rng))
    try:
        validate_board(board, NUM_CATEGORIES, NUM_CLUES_PER_CATEGORY)
    except ValueError as e:
        raise NetworkError(str(e)) from e
    logger.info("盤面を構築しました: %s", [c.title for c in board])
    return board
