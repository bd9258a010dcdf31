"""Streamlit セッション状態アダプタ。

目的:
- `st.session_state` を扱うのは本モジュールと UI 層に限定する。
- アプリ層ポート `SessionStore` の実装を提供する。
"""

from __future__ import annotations

from typing import Any

from src.jeopardy_board.app.ports.session_store import SessionStore


class StSessionStore(SessionStore):
    """Streamlit 実装の SessionStore。リラン間で盤面を保持する。"""

    def get(self, key: str, default: Any = None) -> Any:  # noqa: ANN401 - 状態値は型を問わない
        import streamlit as st

        return st.session_state.get(key, default)

    def set(self, key: str, value: Any) -> None:  # noqa: ANN401 - 状態値は型を問わない
        import streamlit as st

        st.session_state[key] = value

    def setdefault(self, key: str, value: Any) -> Any:  # noqa: ANN401 - 状態値は型を問わない
        import streamlit as st

        if key not in st.session_state:
            st.session_state[key] = value
        return st.session_state[key]
