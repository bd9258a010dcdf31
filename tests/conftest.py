"""
Pytest configuration for the Jeopardy board.

Provides a dict-backed session store and an in-memory trivia API so tests run
without Streamlit or network access.
"""

import pytest

from src.jeopardy_board.domain import NetworkError
from src.jeopardy_board.services import config_loader

TITLES = ["Math", "History", "Film", "Sports", "Music", "Art"]


class DictStore(dict):
    """SessionStore backed by a plain dict."""

    def set(self, key, value):
        self[key] = value


def make_clues(title, n):
    return [
        {"id": i, "question": f"{title} Q{i}", "answer": f"{title} A{i}", "value": 100 * (i + 1)}
        for i in range(n)
    ]


class FakeTriviaApi:
    """In-memory TriviaApi; categories maps id -> payload."""

    def __init__(self, categories, random_ids=None, fail_on=None):
        self.categories = categories
        self.random_ids = list(random_ids if random_ids is not None else categories)
        self.fail_on = fail_on
        self.calls = []

    def get_random(self, count):
        self.calls.append(("random", count))
        if self.fail_on == "random":
            raise NetworkError("random failed")
        return [{"id": 1000 + i, "category_id": cid} for i, cid in enumerate(self.random_ids[:count])]

    def get_category(self, category_id):
        self.calls.append(("category", category_id))
        if self.fail_on == category_id:
            raise NetworkError(f"category {category_id} failed")
        return self.categories[category_id]


def make_api(titles=TITLES, clues_per_category=8, **kwargs):
    categories = {
        i + 1: {"id": i + 1, "title": title, "clues": make_clues(title, clues_per_category)}
        for i, title in enumerate(titles)
    }
    return FakeTriviaApi(categories, **kwargs)


@pytest.fixture
def store():
    return DictStore()


@pytest.fixture
def api():
    return make_api()


@pytest.fixture(autouse=True)
def reset_runtime_config():
    config_loader.set_runtime_config(None)
    yield
    config_loader.set_runtime_config(None)
