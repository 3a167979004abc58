"""
Game session for Minesweeper front ends.

Holds the single board engine of a game together with the selected
action mode, and routes clicks to reveal or flag.
"""
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Optional, Union

from .board import BoardConfig, BoardEngine, FlagOutcome, GameResult, RevealOutcome
from .render import render_board


# ============================================================================
# Constants
# ============================================================================

class ActionMode(Enum):
    """What a click on a cell does."""

    UNCOVER = auto()
    FLAG = auto()


RESULT_MESSAGES = {
    GameResult.IN_PROGRESS: "In progress",
    GameResult.WON: "You win!",
    GameResult.LOST: "Game over",
}


# ============================================================================
# Game Session
# ============================================================================

@dataclass
class GameSession:
    """
    One game as seen by a front end.

    The session is the only writer of its engine. Clicks are ignored
    once the game is won or lost.
    """

    config: Optional[BoardConfig] = None
    seed: Optional[int] = None
    mode: ActionMode = ActionMode.UNCOVER
    engine: BoardEngine = field(init=False)

    def __post_init__(self) -> None:
        self.config = self.config or BoardConfig()
        self.engine = BoardEngine(self.config, seed=self.seed)

    def toggle_mode(self) -> ActionMode:
        """Switch between uncover and flag mode."""
        if self.mode == ActionMode.UNCOVER:
            self.mode = ActionMode.FLAG
        else:
            self.mode = ActionMode.UNCOVER
        return self.mode

    def set_mode(self, mode: ActionMode) -> None:
        self.mode = mode

    def click(
        self, row: int, col: int
    ) -> Optional[Union[RevealOutcome, FlagOutcome]]:
        """
        Apply a click on a cell according to the current mode.

        Args:
            row: Row index.
            col: Column index.

        Returns:
            The engine's outcome, or None if the game is already over.
        """
        if self.engine.is_terminal:
            return None
        if self.mode == ActionMode.FLAG:
            return self.engine.toggle_flag(row, col)
        return self.engine.reveal(row, col)

    def new_game(self, seed: Optional[int] = None) -> None:
        """Start over with a fresh mine placement."""
        self.seed = seed
        self.engine = BoardEngine(self.config, seed=seed)
        self.mode = ActionMode.UNCOVER

    @property
    def result(self) -> GameResult:
        return self.engine.result

    def status_line(self) -> str:
        """Mode, flag count and result on one line."""
        return (
            f"Mode: {self.mode.name.capitalize()} | "
            f"Flags: {self.engine.flag_count}/{self.engine.mine_count} | "
            f"{RESULT_MESSAGES[self.engine.result]}"
        )

    def render(self) -> str:
        """Render the board followed by the status line."""
        return f"{render_board(self.engine)}\n{self.status_line()}"
