"""
Tests for services.gameplay module.
"""

import random

import pytest
from urllib3.exceptions import LocationParseError

from conftest import TITLES, make_api
from src.jeopardy_board.adapters.trivia_api_requests import RequestsTriviaApi
from src.jeopardy_board.domain import Showing, validate_board
from src.jeopardy_board.services import app_state, config_loader, gameplay


def started_store(store, api, seed=0):
    app_state.initialize_state(store)
    assert gameplay.setup_and_start(store, api, rng=random.Random(seed)) is True
    return store


def test_setup_and_start_builds_full_board(store, api):
    started_store(store, api)

    state = app_state.load_app_state(store)
    assert state.loading is False
    assert state.last_error is None
    validate_board(state.board, 6, 5)
    assert all(clue.showing is Showing.HIDDEN for cat in state.board for clue in cat.clues)


def test_film_scenario(store, api):
    started_store(store, api)
    board = store.get("board")
    assert [c.title for c in board] == TITLES
    film_first = board[2].clues[0]

    assert gameplay.handle_cell_click(store, 2, 0) == film_first.question
    assert gameplay.handle_cell_click(store, 2, 0) == film_first.answer
    assert gameplay.handle_cell_click(store, 2, 0) is None
    assert film_first.showing is Showing.ANSWER


def test_click_out_of_range_raises(store, api):
    started_store(store, api)
    with pytest.raises(IndexError):
        gameplay.handle_cell_click(store, 6, 0)
    with pytest.raises(IndexError):
        gameplay.handle_cell_click(store, 0, 5)


def test_click_without_board_is_noop(store):
    app_state.initialize_state(store)
    assert gameplay.handle_cell_click(store, 0, 0) is None


def test_restart_discards_showing_state(store, api):
    started_store(store, api)
    old_board = store.get("board")
    gameplay.handle_cell_click(store, 1, 1)
    gameplay.handle_cell_click(store, 1, 1)
    assert old_board[1].clues[1].showing is Showing.ANSWER

    assert gameplay.setup_and_start(store, make_api(), rng=random.Random(1)) is True

    new_board = store.get("board")
    assert new_board is not old_board
    assert new_board[1].clues[1].showing is Showing.HIDDEN
    assert store.get("generation") == 2


def test_failure_leaves_no_board_and_allows_retry(store):
    app_state.initialize_state(store)

    assert gameplay.setup_and_start(store, make_api(fail_on=5)) is False
    state = app_state.load_app_state(store)
    assert state.board is None
    assert state.loading is False
    assert "category 5 failed" in state.last_error

    assert gameplay.setup_and_start(store, make_api()) is True
    state = app_state.load_app_state(store)
    assert state.board is not None
    assert state.last_error is None


def test_failure_discards_previous_board(store, api):
    started_store(store, api)
    assert gameplay.setup_and_start(store, make_api(clues_per_category=3)) is False
    assert store.get("board") is None


def test_stale_setup_does_not_overwrite_newer_board(store):
    """A setup that finishes after a newer one started must be dropped."""
    app_state.initialize_state(store)
    newer_api = make_api(titles=["A", "B", "C", "D", "E", "F"])

    class RestartingApi:
        def __init__(self, inner):
            self.inner = inner

        def get_random(self, count):
            # a restart completes while this setup is still fetching
            assert gameplay.setup_and_start(store, newer_api) is True
            return self.inner.get_random(count)

        def get_category(self, category_id):
            return self.inner.get_category(category_id)

    assert gameplay.setup_and_start(store, RestartingApi(make_api())) is False

    board = store.get("board")
    assert [c.title for c in board] == ["A", "B", "C", "D", "E", "F"]
    assert store.get("generation") == 2


def test_board_size_ignores_runtime_config(store, api):
    config_loader.set_runtime_config({"settings": {"categories": 2, "clues_per_category": 1}})
    app_state.initialize_state(store)

    assert gameplay.setup_and_start(store, api) is True
    validate_board(store.get("board"), 6, 5)


def test_unexpected_error_clears_loading_and_propagates(store):
    app_state.initialize_state(store)
    api = make_api()

    def explode(category_id):
        raise RuntimeError("decoder bug")

    api.get_category = explode

    with pytest.raises(RuntimeError):
        gameplay.setup_and_start(store, api)

    state = app_state.load_app_state(store)
    assert state.loading is False
    assert state.board is None
    assert state.last_error == "decoder bug"


def test_infinite_category_id_fails_setup(store):
    app_state.initialize_state(store)
    api = make_api()
    api.get_random = lambda count: [{"category_id": float("inf")}] * count

    assert gameplay.setup_and_start(store, api) is False

    state = app_state.load_app_state(store)
    assert state.loading is False
    assert state.board is None
    assert state.last_error


def test_malformed_base_url_fails_setup(store):
    class BadHostSession:
        def get(self, url, params=None, timeout=None):
            raise LocationParseError("a..b")

    app_state.initialize_state(store)
    api = RequestsTriviaApi("http://a..b", session=BadHostSession())

    assert gameplay.setup_and_start(store, api) is False

    state = app_state.load_app_state(store)
    assert state.loading is False
    assert state.board is None
    assert state.last_error
