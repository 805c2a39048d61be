"""
Board module for the Minesweeper engine.

Implements the game board with deferred mine placement, flood reveal,
flag bookkeeping, the game phase state machine and the game timer.
"""
import logging
import random
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Dict, Iterator, List, Optional, Tuple

import numpy as np

from .cell import Cell
from .timer import GameTimer


logger = logging.getLogger(__name__)


# ============================================================================
# Constants
# ============================================================================

class GamePhase(Enum):
    """Top-level state of a game."""

    NOT_STARTED = auto()
    ACTIVE = auto()
    WON = auto()
    LOST = auto()


TERMINAL_PHASES = (GamePhase.WON, GamePhase.LOST)


@dataclass
class BoardConfig:
    """
    Configuration for a Minesweeper board.

    Attributes:
        width: Number of columns.
        height: Number of rows.
        mine_count: Total mines to place. Clamped into
            [1, width * height - 1] so the first reveal always has
            a safe cell and at least one mine exists.
    """

    width: int = 9
    height: int = 9
    mine_count: int = 10

    def __post_init__(self) -> None:
        """Validate dimensions and clamp the mine count."""
        self._validate()
        self.mine_count = max(1, min(self.mine_count, self.total_cells - 1))

    def _validate(self) -> None:
        """Ensure dimensions describe a playable board."""
        if self.width < 1 or self.height < 1:
            raise ValueError("Board dimensions must be positive")
        if self.total_cells < 2:
            raise ValueError("Board needs at least two cells")

    @property
    def total_cells(self) -> int:
        return self.width * self.height

    @property
    def safe_cells(self) -> int:
        """Number of cells that must be revealed to win."""
        return self.total_cells - self.mine_count

    @property
    def key(self) -> str:
        """Compact identifier such as ``16x16x40``."""
        return f"{self.width}x{self.height}x{self.mine_count}"


# Preset difficulty levels
BEGINNER = BoardConfig(9, 9, 10)
INTERMEDIATE = BoardConfig(16, 16, 40)
EXPERT = BoardConfig(30, 16, 99)

PRESETS: Dict[str, BoardConfig] = {
    "beginner": BEGINNER,
    "intermediate": INTERMEDIATE,
    "expert": EXPERT,
}


# ============================================================================
# Board Class
# ============================================================================

@dataclass
class Board:
    """
    Minesweeper game board.

    Owns the grid of cells, mine placement, revealing logic, flag
    counters, the game phase and the timer. Gameplay operations never
    raise: an invalid gesture is ignored and reported by a False
    return value.

    Attributes:
        config: Board dimensions and mine count.
        rng: Random source used for mine placement.
        timer: Game timer, started by the first reveal.
    """

    config: BoardConfig = field(default_factory=lambda: BoardConfig())
    rng: random.Random = field(default_factory=random.Random, repr=False)
    timer: GameTimer = field(default_factory=GameTimer, repr=False)
    _grid: List[List[Cell]] = field(default_factory=list, repr=False)
    _phase: GamePhase = GamePhase.NOT_STARTED
    _flagged_count: int = 0
    _revealed_count: int = 0

    def __post_init__(self) -> None:
        """Initialize the grid after dataclass creation."""
        self._start_new()

    # ========================================================================
    # Grid Initialization (Low-level)
    # ========================================================================

    def _start_new(self) -> None:
        """Discard the current game and allocate an empty board."""
        self._init_grid()
        self._phase = GamePhase.NOT_STARTED
        self._flagged_count = 0
        self._revealed_count = 0
        self.timer.reset()

    def _init_grid(self) -> None:
        """Create empty grid of cells, indexed as grid[y][x]."""
        self._grid = [
            [Cell(x=x, y=y) for x in range(self.config.width)]
            for y in range(self.config.height)
        ]

    def _place_mines(self, exclude: Tuple[int, int]) -> None:
        """
        Place mines randomly, excluding a specific cell.

        Args:
            exclude: (x, y) position to keep mine-free.
        """
        positions = self._get_valid_mine_positions(exclude)
        mine_positions = self.rng.sample(positions, self.config.mine_count)
        for x, y in mine_positions:
            self._grid[y][x].is_mine = True

    def _get_valid_mine_positions(
        self, exclude: Tuple[int, int]
    ) -> List[Tuple[int, int]]:
        """Get all valid positions for mine placement."""
        positions = []
        for y in range(self.config.height):
            for x in range(self.config.width):
                if (x, y) != exclude:
                    positions.append((x, y))
        return positions

    def _calculate_neighbor_mines(self) -> None:
        """Calculate neighbour mine counts for all non-mine cells."""
        for cell in self.cells():
            if not cell.is_mine:
                cell.neighbor_mines = self._count_neighbor_mines(
                    cell.x, cell.y
                )

    def _count_neighbor_mines(self, x: int, y: int) -> int:
        """Count mines adjacent to a specific cell."""
        count = 0
        for neighbor_x, neighbor_y in self._get_neighbors(x, y):
            if self._grid[neighbor_y][neighbor_x].is_mine:
                count += 1
        return count

    # ========================================================================
    # Neighbor Utilities (Low-level)
    # ========================================================================

    def _get_neighbors(self, x: int, y: int) -> List[Tuple[int, int]]:
        """
        Get valid neighbouring cell positions.

        Args:
            x: Column index of center cell.
            y: Row index of center cell.

        Returns:
            List of (x, y) tuples for in-bounds neighbours.
        """
        neighbors = []
        for delta_y in (-1, 0, 1):
            for delta_x in (-1, 0, 1):
                if delta_x == 0 and delta_y == 0:
                    continue
                new_x = x + delta_x
                new_y = y + delta_y
                if self._is_valid_position(new_x, new_y):
                    neighbors.append((new_x, new_y))
        return neighbors

    def _is_valid_position(self, x: int, y: int) -> bool:
        """Check if position is within board bounds."""
        return 0 <= x < self.config.width and 0 <= y < self.config.height

    # ========================================================================
    # Game Actions (Mid-level)
    # ========================================================================

    def new_game(self, width: int, height: int, mine_count: int) -> None:
        """
        Replace the current game with a fresh board.

        Args:
            width: Number of columns.
            height: Number of rows.
            mine_count: Mines to place on the first reveal (clamped).

        Raises:
            ValueError: If the dimensions cannot form a board.
        """
        self.config = BoardConfig(width, height, mine_count)
        self._start_new()
        logger.debug("New game %s", self.config.key)

    def reset(self) -> None:
        """Start over with the same dimensions and mine count."""
        self._start_new()

    def reveal(self, x: int, y: int) -> bool:
        """
        Reveal a cell at the given position.

        On the first reveal, places mines avoiding this cell and starts
        the timer. A cell with no neighbouring mines floods open its
        neighbours. Revealing a mine loses the game.

        Args:
            x: Column index to reveal.
            y: Row index to reveal.

        Returns:
            True if the board changed, False if the reveal was ignored.
        """
        if not self._can_reveal(x, y):
            return False

        if self._phase == GamePhase.NOT_STARTED:
            self._handle_first_click(x, y)

        cell = self._grid[y][x]
        cell.reveal()
        self._revealed_count += 1

        if cell.is_mine:
            self._lose(x, y)
            return True

        if cell.neighbor_mines == 0:
            self._flood_reveal(x, y)

        self._check_win_condition()
        return True

    def _can_reveal(self, x: int, y: int) -> bool:
        """Check if a cell can be revealed."""
        if not self.is_playing:
            return False
        if not self._is_valid_position(x, y):
            return False
        return self._grid[y][x].is_hidden

    def _handle_first_click(self, x: int, y: int) -> None:
        """Handle first click: place mines, count neighbours, start."""
        self._place_mines((x, y))
        self._calculate_neighbor_mines()
        self._phase = GamePhase.ACTIVE
        self.timer.start()
        logger.debug("Mines placed around first reveal at (%d, %d)", x, y)

    def _flood_reveal(self, x: int, y: int) -> None:
        """
        Open the connected zero region around (x, y) and its border.

        Uses an explicit stack so large boards do not hit the
        recursion limit. Each cell is counted once, when it opens.
        """
        stack = [(x, y)]
        while stack:
            current_x, current_y = stack.pop()
            for neighbor_x, neighbor_y in self._get_neighbors(
                current_x, current_y
            ):
                neighbor = self._grid[neighbor_y][neighbor_x]
                if neighbor.is_mine or not neighbor.reveal():
                    continue
                self._revealed_count += 1
                if neighbor.neighbor_mines == 0:
                    stack.append((neighbor_x, neighbor_y))

    def _check_win_condition(self) -> None:
        """Win once every non-mine cell is revealed."""
        if self._revealed_count == self.config.safe_cells:
            self._win()

    def _win(self) -> None:
        """Enter WON: stop the clock and flag every remaining mine."""
        self._phase = GamePhase.WON
        self.timer.stop()
        for cell in self.cells():
            if cell.is_mine and not cell.is_flagged:
                cell.is_flagged = True
                self._flagged_count += 1
        logger.debug("Game won in %d seconds", self.timer.elapsed_seconds)

    def _lose(self, x: int, y: int) -> None:
        """Enter LOST: stop the clock and expose the mine layout."""
        self._phase = GamePhase.LOST
        self.timer.stop()
        for cell in self.cells():
            if cell.is_mine:
                cell.is_revealed = True
        logger.debug("Game lost on mine at (%d, %d)", x, y)

    def toggle_flag(self, x: int, y: int) -> bool:
        """
        Toggle flag on a cell.

        Flags can only be placed while the game is active, and never
        more of them than there are mines.

        Args:
            x: Column index.
            y: Row index.

        Returns:
            True if flag was toggled, False otherwise.
        """
        if self._phase != GamePhase.ACTIVE:
            return False
        if not self._is_valid_position(x, y):
            return False
        cell = self._grid[y][x]
        if not cell.is_flagged and self.remaining_flags <= 0:
            return False
        if not cell.toggle_flag():
            return False
        self._flagged_count += 1 if cell.is_flagged else -1
        return True

    def tick(self) -> int:
        """
        Periodic callback from the host.

        Returns:
            Elapsed whole seconds; unchanged once the game is over.
        """
        return self.timer.tick()

    # ========================================================================
    # State Accessors (High-level)
    # ========================================================================

    @property
    def width(self) -> int:
        return self.config.width

    @property
    def height(self) -> int:
        return self.config.height

    @property
    def mine_count(self) -> int:
        return self.config.mine_count

    @property
    def flagged_count(self) -> int:
        return self._flagged_count

    @property
    def remaining_flags(self) -> int:
        """Flags still available to place."""
        return self.config.mine_count - self._flagged_count

    @property
    def revealed_count(self) -> int:
        """Cells revealed by play, the exploded mine included."""
        return self._revealed_count

    @property
    def elapsed_seconds(self) -> int:
        return self.timer.elapsed_seconds

    @property
    def phase(self) -> GamePhase:
        """Get current game phase."""
        return self._phase

    @property
    def mines_placed(self) -> bool:
        """Check if the first reveal has happened."""
        return self._phase != GamePhase.NOT_STARTED

    @property
    def is_playing(self) -> bool:
        """Check if the game still accepts moves."""
        return self._phase not in TERMINAL_PHASES

    @property
    def is_won(self) -> bool:
        """Check if game was won."""
        return self._phase == GamePhase.WON

    @property
    def is_lost(self) -> bool:
        """Check if game was lost."""
        return self._phase == GamePhase.LOST

    def get_cell(self, x: int, y: int) -> Optional[Cell]:
        """Get cell at position, or None if invalid."""
        if not self._is_valid_position(x, y):
            return None
        return self._grid[y][x]

    def cells(self) -> Iterator[Cell]:
        """Iterate over all cells row by row."""
        for row in self._grid:
            yield from row

    def neighbors(self, x: int, y: int) -> List[Cell]:
        """Cells adjacent to (x, y)."""
        return [
            self._grid[neighbor_y][neighbor_x]
            for neighbor_x, neighbor_y in self._get_neighbors(x, y)
        ]

    def get_observation(self) -> np.ndarray:
        """
        Get board state as a numpy array.

        Returns:
            2D array of shape (height, width) where:
                -1 = hidden
                -2 = flagged
                0-8 = revealed with neighbour count
                9 = revealed mine
        """
        obs = np.zeros((self.config.height, self.config.width), dtype=np.int8)
        for cell in self.cells():
            obs[cell.y, cell.x] = cell.to_observation()
        return obs

    def get_valid_actions(self) -> List[Tuple[int, int]]:
        """
        Get list of cells a reveal would accept.

        Returns:
            List of (x, y) positions, empty once the game is over.
        """
        if not self.is_playing:
            return []
        return [cell.position for cell in self.cells() if cell.is_hidden]
