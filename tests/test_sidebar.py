"""
Tests for ui.sidebar module, with streamlit replaced by a recording stand-in.
"""

import contextlib

import pytest

from src.jeopardy_board.app.state import Settings
from src.jeopardy_board.services import data_access
from src.jeopardy_board.ui import sidebar


class RecordingSt:
    def __init__(self, text_value=None):
        self.text_value = text_value
        self.calls = []

    @property
    def sidebar(self):
        return contextlib.nullcontext()

    def file_uploader(self, *args, **kwargs):
        return None

    def text_input(self, label, value="", **kwargs):
        return value if self.text_value is None else self.text_value

    def page_link(self, page, label=None, **kwargs):
        self.calls.append(("page_link", page, label))

    def __getattr__(self, name):
        def record(*args, **kwargs):
            self.calls.append((name,) + args)

        return record


@pytest.fixture
def fake_st(monkeypatch):
    recorder = RecordingSt()
    monkeypatch.setattr(sidebar, "st", recorder)
    return recorder


def test_sidebar_always_links_clue_list(store, fake_st):
    sidebar.render_sidebar(store)
    assert ("page_link", "pages/clue_list.py", "問題一覧") in fake_st.calls


def test_sidebar_updates_api_url(store, fake_st):
    fake_st.text_value = " http://localhost:3000 "
    sidebar.render_sidebar(store)
    assert data_access.get_settings(store) == Settings(api_base_url="http://localhost:3000")


def test_sidebar_keeps_url_while_loading(store, fake_st):
    store.set("loading", True)
    fake_st.text_value = "http://elsewhere"
    sidebar.render_sidebar(store)
    assert data_access.get_settings(store) == Settings()
