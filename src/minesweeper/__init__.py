"""
Minesweeper engine module.

Provides the board engine (mine placement, flood reveal, flags, game
phase and timer) plus the layers that drive it: text rendering, a
Gymnasium environment and a best-time store.
"""
from .cell import Cell, CellState
from .board import (
    Board,
    BoardConfig,
    GamePhase,
    BEGINNER,
    INTERMEDIATE,
    EXPERT,
    PRESETS,
)
from .timer import GameTimer
from .display import format_time, render_board, render_status
from .environment import MinesweeperEnv
from .scores import BestTimeStore

__all__ = [
    "Cell",
    "CellState",
    "Board",
    "BoardConfig",
    "GamePhase",
    "BEGINNER",
    "INTERMEDIATE",
    "EXPERT",
    "PRESETS",
    "GameTimer",
    "format_time",
    "render_board",
    "render_status",
    "MinesweeperEnv",
    "BestTimeStore",
]
