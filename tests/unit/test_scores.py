"""
Unit tests for the best-time store.
"""
import json

import pytest
from minesweeper import Board, BestTimeStore, BoardConfig


@pytest.fixture
def store(tmp_path) -> BestTimeStore:
    """Store writing into a nested temp directory."""
    return BestTimeStore(tmp_path / "scores" / "best.json")


def win(board: Board, clock, seconds: float) -> Board:
    """Win the 3x3 single-mine board after the given time."""
    board.reveal(1, 1)
    clock.advance(seconds)
    board.reveal(0, 0)
    return board


class TestBestTimeStore:
    """Test recording and reading best times."""

    def test_missing_file_is_empty(self, store: BestTimeStore) -> None:
        assert store.all() == {}
        assert store.best(BoardConfig(3, 3, 1)) is None

    def test_records_win(self, store, make_board, clock) -> None:
        board = win(make_board(3, 3, [(2, 2)]), clock, 0)
        assert board.is_won
        assert store.record(board) is True
        assert store.best(board.config) == 0
        assert store.path.exists()

    def test_ignores_unfinished_and_lost(
        self, store, corridor_board: Board
    ) -> None:
        assert store.record(corridor_board) is False
        corridor_board.reveal(0, 0)
        corridor_board.reveal(2, 0)
        assert store.record(corridor_board) is False
        assert store.all() == {}

    def test_keeps_only_faster_times(self, store, make_board, clock) -> None:
        store.record(win(make_board(3, 3, [(2, 2)]), clock, 30))
        assert store.record(win(make_board(3, 3, [(2, 2)]), clock, 45)) is False
        assert store.record(win(make_board(3, 3, [(2, 2)]), clock, 12)) is True
        assert store.all() == {"3x3x1": 12}

    def test_corrupt_file_reads_as_empty(self, store: BestTimeStore) -> None:
        store.path.parent.mkdir(parents=True)
        store.path.write_text("{not json")
        assert store.all() == {}

    def test_file_is_plain_json(self, store, make_board, clock) -> None:
        store.record(win(make_board(3, 3, [(2, 2)]), clock, 7))
        assert json.loads(store.path.read_text()) == {"3x3x1": 7}
