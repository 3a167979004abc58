"""
Minesweeper board engine.

Provides grid generation, reveal and flag logic, text rendering, a game
session for front ends and a Gymnasium environment.
"""
from .cell import CellContent, CellState, ContentKind
from .board import (
    ActionStatus,
    BoardConfig,
    BoardEngine,
    FlagOutcome,
    GameResult,
    IndexOutOfBounds,
    RevealOutcome,
)
from .render import cell_glyph, render_board
from .session import ActionMode, GameSession
from .environment import MinesweeperEnv

__all__ = [
    "CellContent",
    "CellState",
    "ContentKind",
    "ActionStatus",
    "BoardConfig",
    "BoardEngine",
    "FlagOutcome",
    "GameResult",
    "IndexOutOfBounds",
    "RevealOutcome",
    "cell_glyph",
    "render_board",
    "ActionMode",
    "GameSession",
    "MinesweeperEnv",
]
