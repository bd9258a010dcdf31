from __future__ import annotations

import re

# Streamlit のボタンラベルと st.markdown は Markdown（$…$ の LaTeX を含む）として解釈される。
# CommonMark はすべての ASCII 記号のバックスラッシュエスケープを受け付ける。
_MARKDOWN_SPECIAL = re.compile(r"([\\`*_{}\[\]()<>#+\-.!|~$:])")


def escape_markdown(text: str) -> str:
    """テキストが Markdown/LaTeX として解釈されず、そのまま表示されるようにエスケープする。"""
    return _MARKDOWN_SPECIAL.sub(r"\\\1", text)
