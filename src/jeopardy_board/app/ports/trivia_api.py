"""
アプリケーション層のポート: 問題取得 API

目的:
- 盤面構築（board_builder）を HTTP クライアントの具体実装から切り離す。
- 本番は requests 実装、テストはメモリ上の偽実装を差し込む。
"""

from __future__ import annotations

from typing import Any, Protocol


class TriviaApi(Protocol):
    """jService 互換 API の読み取り専用クライアント。

    契約:
    - 戻り値はデコード済み JSON（検証は呼び出し側で行う）。
    - 通信失敗・JSON 以外の応答は NetworkError を送出する。
    """

    def get_random(self, count: int) -> Any:  # noqa: ANN401 - 未検証の JSON
        """`GET /api/random?count={count}` の応答を返す。"""

    def get_category(self, category_id: int) -> Any:  # noqa: ANN401 - 未検証の JSON
        """`GET /api/category?id={category_id}` の応答を返す。"""
