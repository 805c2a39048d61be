"""
Pytest configuration and shared fixtures.
"""
import random
import pytest
import sys
from pathlib import Path
from typing import Callable, Iterable, List, Tuple

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from minesweeper import Board, BoardConfig, Cell, GameTimer


# ============================================================================
# Test Doubles
# ============================================================================

class FixedMines(random.Random):
    """Random source whose ``sample`` returns a chosen mine layout."""

    def __init__(self, mines: Iterable[Tuple[int, int]]) -> None:
        super().__init__(0)
        self.mines = list(mines)

    def sample(self, population, k, **kwargs) -> List[Tuple[int, int]]:
        assert len(self.mines) == k
        for position in self.mines:
            assert position in population, f"{position} is not a mine site"
        return list(self.mines)


class FakeClock:
    """Manually advanced clock."""

    def __init__(self, now: float = 1000.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def clock() -> FakeClock:
    """Clock starting at an arbitrary non-zero time."""
    return FakeClock()


@pytest.fixture
def make_board(clock: FakeClock) -> Callable[..., Board]:
    """Factory for boards with a fixed mine layout and the fake clock."""
    def factory(width: int, height: int, mines: List[Tuple[int, int]]) -> Board:
        return Board(
            BoardConfig(width, height, len(mines)),
            rng=FixedMines(mines),
            timer=GameTimer(clock=clock),
        )
    return factory


@pytest.fixture
def default_board() -> Board:
    """Create a default 9x9 board with 10 mines."""
    return Board(rng=random.Random(1234))


@pytest.fixture
def small_board(make_board) -> Board:
    """3x3 board with its single mine in the bottom-right corner."""
    return make_board(3, 3, [(2, 2)])


@pytest.fixture
def corridor_board(make_board) -> Board:
    """
    5x5 board with a mine column splitting it in two.

    Column 2 holds mines at rows 0-3; the left two columns and the
    right two columns are separate regions joined only through (2, 4).
    """
    return make_board(5, 5, [(2, 0), (2, 1), (2, 2), (2, 3)])


# ============================================================================
# Cell Fixtures
# ============================================================================

@pytest.fixture
def hidden_cell() -> Cell:
    """Create a hidden cell."""
    return Cell()


@pytest.fixture
def mine_cell() -> Cell:
    """Create a cell containing a mine."""
    return Cell(is_mine=True)


@pytest.fixture
def numbered_cell() -> Cell:
    """Create a revealed cell with neighbouring mines."""
    cell = Cell(neighbor_mines=3)
    cell.reveal()
    return cell
