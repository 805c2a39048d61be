"""
Cell module for the Minesweeper engine.

Represents individual grid positions with their content (mine or
neighbour count) and their visibility (hidden, revealed, flagged).
"""
from enum import Enum, auto
from dataclasses import dataclass


# ============================================================================
# Constants
# ============================================================================

class CellState(Enum):
    """Possible visual states of a cell."""

    HIDDEN = auto()
    REVEALED = auto()
    FLAGGED = auto()


HIDDEN_CODE = -1
FLAGGED_CODE = -2
MINE_CODE = 9


# ============================================================================
# Cell Data Class
# ============================================================================

@dataclass
class Cell:
    """
    Represents a single cell in the Minesweeper grid.

    Attributes:
        x: Column index.
        y: Row index.
        is_mine: Whether this cell contains a mine.
        is_revealed: Whether the cell has been opened.
        is_flagged: Whether the player has marked the cell.
        neighbor_mines: Count of mines in neighbouring cells (0-8).

    A lost board reveals every mine without touching its flag, so a
    flagged mine can end up both revealed and flagged.
    """

    x: int = 0
    y: int = 0
    is_mine: bool = False
    is_revealed: bool = False
    is_flagged: bool = False
    neighbor_mines: int = 0

    def reveal(self) -> bool:
        """
        Open this cell.

        Returns:
            True if the cell was opened, False if it was already
            revealed or is flagged.
        """
        if self.is_revealed or self.is_flagged:
            return False
        self.is_revealed = True
        return True

    def toggle_flag(self) -> bool:
        """
        Toggle the flag on this cell.

        Returns:
            True if the flag was toggled, False if the cell is revealed.
        """
        if self.is_revealed:
            return False
        self.is_flagged = not self.is_flagged
        return True

    @property
    def is_hidden(self) -> bool:
        """Check if cell is neither revealed nor flagged."""
        return not self.is_revealed and not self.is_flagged

    @property
    def position(self) -> tuple:
        """(x, y) grid coordinates."""
        return self.x, self.y

    @property
    def state(self) -> CellState:
        """Visual state, with revealed taking precedence over flagged."""
        if self.is_revealed:
            return CellState.REVEALED
        if self.is_flagged:
            return CellState.FLAGGED
        return CellState.HIDDEN

    def to_observation(self) -> int:
        """
        Convert cell to a compact integer code.

        Returns:
            -1: Hidden cell
            -2: Flagged (and unrevealed) cell
            0-8: Revealed cell with neighbour mine count
            9: Revealed mine
        """
        if self.is_revealed:
            return MINE_CODE if self.is_mine else self.neighbor_mines
        if self.is_flagged:
            return FLAGGED_CODE
        return HIDDEN_CODE
