from __future__ import annotations

import dataclasses

import streamlit as st

from src.jeopardy_board.adapters.session_store_streamlit import StSessionStore
from src.jeopardy_board.services import data_access
from src.jeopardy_board.services.config_loader import load_default_settings, set_runtime_toml_bytes


def render_sidebar(store: StSessionStore) -> None:
    """サイドバーの設定 UI を描画する。

    - config.toml をアップロードすると設定既定値を置き換える。
    - 変更は次のスタート/リスタートから反映する（プレイ中の盤面は変えない）。
    - 読み込み中は入力を無効化する。
    """
    with st.sidebar:
        st.subheader("ゲーム設定")
        disabled = data_access.is_loading(store)

        up = st.file_uploader("設定（config.toml）", type=["toml"], accept_multiple_files=False)
        # 同じファイルを毎リランで再適用しないよう、名前とサイズで識別する
        if up is not None:
            marker = f"{up.name}:{up.size}"
            if store.get("applied_config") != marker:
                if set_runtime_toml_bytes(up.getvalue()):
                    data_access.set_settings(store, load_default_settings())
                    st.success("設定を読み込みました。")
                else:
                    st.error("config.toml を解釈できませんでした。")
                store.set("applied_config", marker)

        current = data_access.get_settings(store)
        base_url = st.text_input("API URL", value=current.api_base_url, disabled=disabled)

        if not disabled:
            updated = dataclasses.replace(
                current,
                api_base_url=base_url.strip() or current.api_base_url,
            )
            if updated != current:
                data_access.set_settings(store, updated)
                st.caption("次のゲームから反映されます。")

        st.divider()
        st.page_link("pages/clue_list.py", label="問題一覧")
