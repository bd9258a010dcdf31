"""アプリケーションの状態モデル定義。

目的:
- UI とドメインの境界で用いる明示的な状態構造を提供する。
- グローバル変数ではなく、SessionStore 上のキー群として保持する。

使い方:
- サービス層の `load_app_state()` でセッションから AppState を復元し描画やテストに使う。
- 更新は services.app_state の関数（begin_setup/apply_board など）経由で行う。
"""

from __future__ import annotations

from dataclasses import dataclass, field

from src.jeopardy_board.domain import (
    DEFAULT_API_BASE_URL,
    DEFAULT_API_TIMEOUT,
    Board,
)


@dataclass
class Settings:
    """問題の取得先に関する設定。盤面サイズは固定（6 × 5）で設定対象外。

    現状の契約:
    - api_base_url/api_timeout は問題取得 API の接続先とタイムアウト（秒）。
    """

    api_base_url: str = DEFAULT_API_BASE_URL
    api_timeout: float = DEFAULT_API_TIMEOUT


@dataclass
class AppState:
    """アプリケーション全体の状態。

    現状の契約:
    - board は構築済みの盤面。構築中・未開始・失敗時は None。
    - loading は盤面構築中を示す（UI はスピナーを表示する）。
    - generation は構築の世代番号。古い世代の結果は反映しない。
    - started は一度でもスタートしたか（ボタン表記の切替に使う）。
    - last_error は直近の構築失敗メッセージ。
    """

    board: Board | None = None
    loading: bool = False
    generation: int = 0
    started: bool = False
    last_error: str | None = None
    settings: Settings = field(default_factory=Settings)
