"""ドメイン層（純粋ロジック/データモデル）。

提供物:
"""

from src.jeopardy_board.domain.constants import (
    DEFAULT_API_BASE_URL,
    DEFAULT_API_TIMEOUT,
    HIDDEN_LABEL,
    NUM_CATEGORIES,
    NUM_CLUES_PER_CATEGORY,
)
from src.jeopardy_board.domain.data import (
    Category,
    Clue,
    Showing,
    extract_category_ids,
    parse_category_payload,
)
from src.jeopardy_board.domain.errors import NetworkError
from src.jeopardy_board.domain.game import (
    Board,
    board_positions,
    cell_text,
    count_by_showing,
    get_clue,
    reveal,
    select_clues,
    validate_board,
)

__all__ = [
    # data
    "Showing",
    "Clue",
    "Category",
    "extract_category_ids",
    "parse_category_payload",
    # errors
    "NetworkError",
    # game
    "Board",
    "select_clues",
    "board_positions",
    "get_clue",
    "reveal",
    "cell_text",
    "count_by_showing",
    "validate_board",
    # constants
    "NUM_CATEGORIES",
    "NUM_CLUES_PER_CATEGORY",
    "DEFAULT_API_BASE_URL",
    "DEFAULT_API_TIMEOUT",
    "HIDDEN_LABEL",
]
