"""
Unit tests for Cell class.

Tests cell state management, reveal/flag behavior, and observation codes.
"""
import pytest
from minesweeper import Cell, CellState


# ============================================================================
# Cell Initialization Tests
# ============================================================================

class TestCellInitialization:
    """Test cell creation and default values."""

    def test_default_cell_is_not_mine(self) -> None:
        """New cell should not be a mine by default."""
        cell = Cell()
        assert cell.is_mine is False

    def test_default_cell_is_hidden(self) -> None:
        """New cell should be hidden by default."""
        cell = Cell()
        assert cell.state == CellState.HIDDEN
        assert cell.is_hidden is True
        assert cell.is_revealed is False
        assert cell.is_flagged is False

    def test_default_cell_has_zero_neighbor_mines(self) -> None:
        """New cell should have 0 neighbouring mines by default."""
        cell = Cell()
        assert cell.neighbor_mines == 0

    def test_cell_keeps_coordinates(self) -> None:
        """Cell should report its grid position as (x, y)."""
        cell = Cell(x=3, y=7)
        assert cell.position == (3, 7)


# ============================================================================
# Cell Reveal Tests
# ============================================================================

class TestCellReveal:
    """Test cell reveal behavior."""

    def test_reveal_hidden_cell_returns_true(self, hidden_cell: Cell) -> None:
        """Revealing a hidden cell should succeed."""
        assert hidden_cell.reveal() is True
        assert hidden_cell.state == CellState.REVEALED

    def test_reveal_already_revealed_returns_false(
        self, numbered_cell: Cell
    ) -> None:
        """Revealing an already revealed cell should fail."""
        assert numbered_cell.reveal() is False
        assert numbered_cell.is_revealed is True

    def test_reveal_flagged_cell_returns_false(self, hidden_cell: Cell) -> None:
        """A flag blocks the reveal."""
        hidden_cell.toggle_flag()
        assert hidden_cell.reveal() is False
        assert hidden_cell.is_revealed is False


# ============================================================================
# Cell Flag Tests
# ============================================================================

class TestCellFlag:
    """Test cell flagging behavior."""

    def test_flag_changes_state_to_flagged(self, hidden_cell: Cell) -> None:
        """Flagging a cell should change its state."""
        assert hidden_cell.toggle_flag() is True
        assert hidden_cell.state == CellState.FLAGGED
        assert hidden_cell.is_hidden is False

    def test_unflag_returns_to_hidden(self, hidden_cell: Cell) -> None:
        """Unflagging a cell should return it to hidden."""
        hidden_cell.toggle_flag()
        hidden_cell.toggle_flag()
        assert hidden_cell.state == CellState.HIDDEN
        assert hidden_cell.is_hidden is True

    def test_flag_revealed_cell_returns_false(
        self, numbered_cell: Cell
    ) -> None:
        """Cannot flag a revealed cell."""
        assert numbered_cell.toggle_flag() is False
        assert numbered_cell.is_flagged is False

    def test_revealed_flagged_mine_reports_revealed(
        self, mine_cell: Cell
    ) -> None:
        """A flagged mine exposed by a loss shows as revealed."""
        mine_cell.toggle_flag()
        mine_cell.is_revealed = True
        assert mine_cell.state == CellState.REVEALED


# ============================================================================
# Cell Observation Tests
# ============================================================================

class TestCellObservation:
    """Test cell observation codes."""

    def test_hidden_cell_observation_is_negative_one(
        self, hidden_cell: Cell
    ) -> None:
        assert hidden_cell.to_observation() == -1

    def test_flagged_cell_observation_is_negative_two(
        self, hidden_cell: Cell
    ) -> None:
        hidden_cell.toggle_flag()
        assert hidden_cell.to_observation() == -2

    @pytest.mark.parametrize("count", range(0, 9))
    def test_revealed_cell_observation_matches_neighbor_count(
        self, count: int
    ) -> None:
        """Revealed cell returns its neighbour mine count."""
        cell = Cell(neighbor_mines=count)
        cell.reveal()
        assert cell.to_observation() == count

    def test_revealed_mine_observation_is_nine(self, mine_cell: Cell) -> None:
        """Revealed mine should return 9 for observation."""
        mine_cell.reveal()
        assert mine_cell.to_observation() == 9
