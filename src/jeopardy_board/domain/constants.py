"""
共通定数
- コメントは現状の目的・契約・使い方のみを記載する。
"""

# 盤面の既定サイズ（列 = カテゴリ、行 = カテゴリ内の問題）
NUM_CATEGORIES: int = 6
NUM_CLUES_PER_CATEGORY: int = 5

# 問題取得 API（jService 互換）の既定値
DEFAULT_API_BASE_URL: str = "https://jservice.io"
DEFAULT_API_TIMEOUT: float = 10.0

# 未公開セルに表示する文字
HIDDEN_LABEL: str = "?"
