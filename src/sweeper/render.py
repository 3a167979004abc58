"""
Text rendering for Minesweeper boards.

A cell's presentation depends only on whether it is uncovered, whether
it is flagged, and its content.
"""
from typing import Optional

from .board import BoardEngine, GameResult
from .cell import CellState


# ============================================================================
# Constants
# ============================================================================

FLAG_GLYPH = "F"
COVERED_GLYPH = "."
MINE_GLYPH = "*"
EMPTY_GLYPH = " "


# ============================================================================
# Rendering
# ============================================================================

def cell_glyph(cell: CellState, reveal_mines: bool = False) -> str:
    """
    Get the single-character presentation of a cell.

    Args:
        cell: Cell to draw.
        reveal_mines: Show covered, unflagged mines (end of game).

    Returns:
        "F" flagged, "." covered, "*" mine, " " empty, or the digit.
    """
    if not cell.uncovered:
        if cell.flagged:
            return FLAG_GLYPH
        if reveal_mines and cell.is_mine:
            return MINE_GLYPH
        return COVERED_GLYPH
    if cell.content.is_mine:
        return MINE_GLYPH
    if cell.content.is_empty:
        return EMPTY_GLYPH
    return str(cell.content.count)


def render_board(
    engine: BoardEngine, reveal_mines: Optional[bool] = None
) -> str:
    """
    Render a board as text with row and column labels.

    Args:
        engine: Board to draw.
        reveal_mines: Show all mines. Defaults to True once the game
            is lost.

    Returns:
        Multi-line string, one line per row plus a header.
    """
    if reveal_mines is None:
        reveal_mines = engine.result == GameResult.LOST

    width = len(str(engine.size - 1))
    header = " " * (width + 1) + " ".join(
        str(col % 10) for col in range(engine.size)
    )
    lines = [header]
    for row in range(engine.size):
        glyphs = " ".join(
            cell_glyph(engine.get_cell(row, col), reveal_mines)
            for col in range(engine.size)
        )
        lines.append(f"{row:>{width}} {glyphs}")

    return "\n".join(lines)
