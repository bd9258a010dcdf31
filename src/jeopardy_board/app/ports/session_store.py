"""
アプリケーション層のポート: セッションストア

目的:
- 盤面・読込中フラグ・世代番号などの状態を、Streamlit の session_state から切り離して扱う。
- サービス層は本ポート（Protocol）にのみ依存し、テストでは dict 実装を差し込む。
"""

from __future__ import annotations

from typing import Any, Protocol


class SessionStore(Protocol):
    """ゲーム状態の保存先。

    契約:
    - get は未設定キーに対して default を返す。
    - set は値をそのまま保持する（コピーしない）。盤面はミュータブルなまま共有される。
    - setdefault は未設定のときのみ値を設定し、現在値を返す。
    """

    def get(self, key: str, default: Any = None) -> Any:  # noqa: ANN401 - 状態値は型を問わない
        """キーに対応する値を取得する。"""

    def set(self, key: str, value: Any) -> None:  # noqa: ANN401 - 状態値は型を問わない
        """キーに値を設定する。"""

    def setdefault(self, key: str, value: Any) -> Any:  # noqa: ANN401 - 状態値は型を問わない
        """未設定なら value を設定し、現在値を返す。"""
