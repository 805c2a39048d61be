"""
Text rendering for the Minesweeper engine.

Turns the board's read model into plain strings for terminal play.
"""
from .board import Board
from .cell import Cell


HIDDEN_CHAR = "."
FLAG_CHAR = "F"
WRONG_FLAG_CHAR = "X"
MINE_CHAR = "*"
EMPTY_CHAR = " "


def format_time(seconds: int) -> str:
    """Format elapsed seconds as zero-padded ``mm:ss``."""
    minutes, secs = divmod(max(0, int(seconds)), 60)
    return f"{minutes:02d}:{secs:02d}"


def cell_char(cell: Cell, game_lost: bool = False) -> str:
    """
    Single-character representation of a cell.

    Args:
        cell: Cell to draw.
        game_lost: Mark flags on non-mines as wrong.
    """
    if cell.is_revealed:
        if cell.is_mine:
            return MINE_CHAR
        if cell.neighbor_mines == 0:
            return EMPTY_CHAR
        return str(cell.neighbor_mines)
    if cell.is_flagged:
        if game_lost and not cell.is_mine:
            return WRONG_FLAG_CHAR
        return FLAG_CHAR
    return HIDDEN_CHAR


def render_board(board: Board, coordinates: bool = False) -> str:
    """
    Render board as ASCII string.

    Args:
        board: Board to draw.
        coordinates: Add column and row labels around the grid.

    Returns:
        One line per row, cells separated by single spaces.
    """
    lines = []
    if coordinates:
        header = " ".join(str(x % 10) for x in range(board.width))
        lines.append("   " + header)

    for y in range(board.height):
        row_str = " ".join(
            cell_char(board.get_cell(x, y), board.is_lost)
            for x in range(board.width)
        )
        if coordinates:
            row_str = f"{y:2d} {row_str}"
        lines.append(row_str)

    return "\n".join(lines)


def render_status(board: Board) -> str:
    """One-line summary: flags left, flags placed, time and phase."""
    return (
        f"Mines: {board.remaining_flags} | "
        f"Flagged: {board.flagged_count} | "
        f"Time: {format_time(board.elapsed_seconds)} | "
        f"{board.phase.name}"
    )
