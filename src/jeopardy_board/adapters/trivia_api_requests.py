"""requests による問題取得 API アダプタ。

目的:
- アプリ層ポート `TriviaApi` の HTTP 実装を提供する。
- requests の例外・不正な URL（urllib3 の LocationParseError）・JSON デコード失敗を NetworkError に揃える。
"""

from __future__ import annotations

import logging
from typing import Any

import requests
from urllib3.exceptions import LocationParseError

from src.jeopardy_board.app.ports.trivia_api import TriviaApi
from src.jeopardy_board.domain import DEFAULT_API_BASE_URL, DEFAULT_API_TIMEOUT, NetworkError

logger = logging.getLogger(__name__)


class RequestsTriviaApi(TriviaApi):
    """requests 実装の TriviaApi。

    Args:
        base_url: API のベース URL（末尾の / は無視）
        timeout: 1 リクエストあたりのタイムアウト秒
        session: 差し替え用のセッション（未指定なら requests.Session を生成）
    """

    def __init__(
        self,
        base_url: str = DEFAULT_API_BASE_URL,
        timeout: float = DEFAULT_API_TIMEOUT,
        session: requests.Session | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    def _get_json(self, path: str, params: dict[str, Any]) -> Any:  # noqa: ANN401 - 未検証の JSON
        url = f"{self.base_url}{path}"
        logger.debug("GET %s params=%s", url, params)
        try:
            response = self.session.get(url, params=params, timeout=self.timeout)
            response.raise_for_status()
        except (requests.exceptions.RequestException, LocationParseError) as e:
            raise NetworkError(f"{url} の取得に失敗しました: {e}") from e
        try:
            return response.json()
        except ValueError as e:
            raise NetworkError(f"{url} の応答が JSON ではありません。") from e

    def get_random(self, count: int) -> Any:  # noqa: ANN401 - 未検証の JSON
        return self._get_json("/api/random", {"count": int(count)})

    def get_category(self, category_id: int) -> Any:  # noqa: ANN401 - 未検証の JSON
        return self._get_json("/api/category", {"id": int(category_id)})
