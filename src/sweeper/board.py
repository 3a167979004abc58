"""
Board module for the Minesweeper engine.

Implements the game board with per-cell random mine placement,
neighbour counts, flood-fill revealing, flagging and win/loss tracking.
"""
from collections import deque
from dataclasses import dataclass, field, replace
from enum import Enum, auto
from typing import Iterable, Iterator, List, Optional, Set, Tuple

import numpy as np

from .cell import CellContent, CellState


Position = Tuple[int, int]
Snapshot = Tuple[Tuple[CellState, ...], ...]


# ============================================================================
# Constants
# ============================================================================

class GameResult(Enum):
    """Possible results of a game."""

    IN_PROGRESS = auto()
    WON = auto()
    LOST = auto()


class ActionStatus(Enum):
    """Whether a mutating call changed anything."""

    APPLIED = auto()
    NO_OP = auto()


class IndexOutOfBounds(IndexError):
    """Raised when a coordinate falls outside the grid."""

    def __init__(self, row: int, col: int, size: int) -> None:
        super().__init__(
            f"Position ({row}, {col}) is outside a {size}x{size} board"
        )
        self.row = row
        self.col = col
        self.size = size


@dataclass
class BoardConfig:
    """
    Configuration for a Minesweeper board.

    Attributes:
        size: Side length of the square grid.
        mine_probability: Chance of each cell holding a mine.
    """

    size: int = 10
    mine_probability: float = 0.3

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        if self.size < 1:
            raise ValueError("Board size must be positive")
        if not 0.0 < self.mine_probability < 1.0:
            raise ValueError("Mine probability must be between 0 and 1")


# ============================================================================
# Outcomes
# ============================================================================

@dataclass(frozen=True)
class RevealOutcome:
    """
    Result of a reveal call.

    Attributes:
        status: APPLIED if any cell was uncovered, NO_OP otherwise.
        result: Game result after the call.
        uncovered: Positions uncovered by this call.
        board: Copy of the grid after the call.
    """

    status: ActionStatus
    result: GameResult
    uncovered: Tuple[Position, ...]
    board: Snapshot

    @property
    def applied(self) -> bool:
        return self.status == ActionStatus.APPLIED


@dataclass(frozen=True)
class FlagOutcome:
    """Result of a toggle_flag call."""

    status: ActionStatus
    flagged: bool
    result: GameResult

    @property
    def applied(self) -> bool:
        return self.status == ActionStatus.APPLIED


# ============================================================================
# Board Engine
# ============================================================================

@dataclass
class BoardEngine:
    """
    Minesweeper board engine.

    Owns the grid of cells, places the mines once at construction and
    applies reveal and flag actions until the game is won or lost.
    Not thread-safe: callers sharing an engine must serialize access.

    Mines come from `layout` if given, else from `rng`, else from a new
    generator seeded with `seed`. Passing both `seed` and `rng` is an
    error.
    """

    config: Optional[BoardConfig] = None
    seed: Optional[int] = None
    rng: Optional[np.random.Generator] = field(
        default=None, repr=False, compare=False
    )
    layout: Optional[np.ndarray] = field(default=None, repr=False, compare=False)
    _grid: List[List[CellState]] = field(default_factory=list, repr=False)
    _result: GameResult = GameResult.IN_PROGRESS
    _mine_count: int = 0
    _uncovered_count: int = 0

    def __post_init__(self) -> None:
        """Place mines and compute values after dataclass creation."""
        self.config = self.config or BoardConfig()
        if self.seed is not None and self.rng is not None:
            raise ValueError("Pass either seed or rng, not both")
        if self.layout is None:
            if self.rng is None:
                self.rng = np.random.default_rng(self.seed)
            self.layout = self._draw_mines()
        self.layout = np.asarray(self.layout, dtype=bool)
        self._place_mines(self.layout)

    @classmethod
    def from_mines(cls, size: int, mines: Iterable[Position]) -> "BoardEngine":
        """
        Build a board with a fixed mine layout.

        Args:
            size: Side length of the grid.
            mines: (row, col) positions holding mines.

        Returns:
            A new engine in progress with exactly those mines.

        Raises:
            IndexOutOfBounds: If a mine position is outside the board.
        """
        config = BoardConfig(size=size)
        layout = np.zeros((size, size), dtype=bool)
        for row, col in mines:
            if not 0 <= row < size or not 0 <= col < size:
                raise IndexOutOfBounds(row, col, size)
            layout[row, col] = True
        return cls(config, layout=layout)

    # ========================================================================
    # Grid Initialization (Low-level)
    # ========================================================================

    def _draw_mines(self) -> np.ndarray:
        """One independent Bernoulli trial per cell."""
        size = self.config.size
        return self.rng.random((size, size)) < self.config.mine_probability

    def _place_mines(self, layout: np.ndarray) -> None:
        """Create the grid from a boolean mine layout."""
        size = self.config.size
        if layout.shape != (size, size):
            raise ValueError(
                f"Mine layout shape {layout.shape} does not match size {size}"
            )
        self._grid = [
            [
                CellState(CellContent.mine() if layout[row, col] else CellContent())
                for col in range(size)
            ]
            for row in range(size)
        ]
        self._mine_count = int(layout.sum())
        self._calculate_values()

    def _calculate_values(self) -> None:
        """Set the content of every non-mine cell from its neighbours."""
        size = self.config.size
        for row in range(size):
            for col in range(size):
                cell = self._grid[row][col]
                if not cell.is_mine:
                    count = self._count_adjacent_mines(row, col)
                    cell.content = CellContent.from_count(count)

    def _count_adjacent_mines(self, row: int, col: int) -> int:
        """Count mines adjacent to a specific cell."""
        return sum(
            1
            for neighbor_row, neighbor_col in self.neighbors(row, col)
            if self._grid[neighbor_row][neighbor_col].is_mine
        )

    # ========================================================================
    # Neighbor Utilities (Low-level)
    # ========================================================================

    def neighbors(self, row: int, col: int) -> List[Position]:
        """
        Get the Moore neighbourhood of a cell, clipped at the edges.

        Args:
            row: Row index of center cell.
            col: Column index of center cell.

        Returns:
            List of (row, col) tuples: 3 for corners, 5 for edges,
            8 for interior cells.
        """
        neighbors = []
        for delta_row in (-1, 0, 1):
            for delta_col in (-1, 0, 1):
                if delta_row == 0 and delta_col == 0:
                    continue
                new_row = row + delta_row
                new_col = col + delta_col
                if self.is_valid_position(new_row, new_col):
                    neighbors.append((new_row, new_col))
        return neighbors

    def is_valid_position(self, row: int, col: int) -> bool:
        """Check if position is within board bounds."""
        return 0 <= row < self.config.size and 0 <= col < self.config.size

    def _check_position(self, row: int, col: int) -> None:
        if not self.is_valid_position(row, col):
            raise IndexOutOfBounds(row, col, self.config.size)

    # ========================================================================
    # Game Actions (Mid-level)
    # ========================================================================

    def reveal(self, row: int, col: int) -> RevealOutcome:
        """
        Reveal the cell at the given position.

        Flagged and already uncovered cells are left alone, as is any
        cell once the game is over. Revealing a mine loses the game.
        Revealing an empty cell flood-fills through the connected empty
        region and uncovers its bordering value cells.

        Args:
            row: Row index to reveal.
            col: Column index to reveal.

        Returns:
            Outcome with the cells uncovered and a copy of the board.

        Raises:
            IndexOutOfBounds: If the position is outside the board.
        """
        self._check_position(row, col)
        if self.is_terminal or not self._grid[row][col].is_covered:
            return self._reveal_outcome(ActionStatus.NO_OP, ())

        cell = self._grid[row][col]
        if cell.is_mine:
            cell.uncover()
            self._result = GameResult.LOST
            return self._reveal_outcome(ActionStatus.APPLIED, ((row, col),))

        uncovered = self._flood_fill(row, col)
        self._check_win_condition()
        return self._reveal_outcome(ActionStatus.APPLIED, tuple(uncovered))

    def _flood_fill(self, row: int, col: int) -> List[Position]:
        """
        Uncover a safe cell and, if empty, its connected empty region.

        Each position enters the worklist at most once. Value cells are
        uncovered but do not spread further.
        """
        uncovered = []
        pending = deque([(row, col)])
        seen: Set[Position] = {(row, col)}

        while pending:
            current_row, current_col = pending.popleft()
            cell = self._grid[current_row][current_col]
            if not cell.uncover():
                continue
            self._uncovered_count += 1
            uncovered.append((current_row, current_col))

            if not cell.content.is_empty:
                continue
            for neighbor in self.neighbors(current_row, current_col):
                if neighbor in seen:
                    continue
                seen.add(neighbor)
                if self._grid[neighbor[0]][neighbor[1]].is_covered:
                    pending.append(neighbor)

        return uncovered

    def _check_win_condition(self) -> None:
        """Check if all non-mine cells are uncovered."""
        if self.safe_cells_remaining == 0:
            self._result = GameResult.WON

    def _reveal_outcome(
        self, status: ActionStatus, uncovered: Tuple[Position, ...]
    ) -> RevealOutcome:
        return RevealOutcome(status, self._result, uncovered, self.snapshot())

    def toggle_flag(self, row: int, col: int) -> FlagOutcome:
        """
        Toggle the flag on a covered cell.

        Args:
            row: Row index.
            col: Column index.

        Returns:
            NO_OP outcome if the cell is uncovered or the game is over.

        Raises:
            IndexOutOfBounds: If the position is outside the board.
        """
        self._check_position(row, col)
        cell = self._grid[row][col]
        if self.is_terminal or not cell.toggle_flag():
            return FlagOutcome(ActionStatus.NO_OP, cell.flagged, self._result)
        return FlagOutcome(ActionStatus.APPLIED, cell.flagged, self._result)

    # ========================================================================
    # State Accessors (High-level)
    # ========================================================================

    @property
    def size(self) -> int:
        return self.config.size

    @property
    def result(self) -> GameResult:
        """Get current game result."""
        return self._result

    @property
    def is_terminal(self) -> bool:
        """Check if the game has been won or lost."""
        return self._result != GameResult.IN_PROGRESS

    @property
    def mine_count(self) -> int:
        return self._mine_count

    @property
    def uncovered_count(self) -> int:
        return self._uncovered_count

    @property
    def safe_cells_remaining(self) -> int:
        """Non-mine cells still to uncover."""
        return self.size * self.size - self._mine_count - self._uncovered_count

    @property
    def flag_count(self) -> int:
        return sum(1 for _, _, cell in self.cells() if cell.flagged)

    def get_cell(self, row: int, col: int) -> CellState:
        """
        Get a copy of the cell at a position.

        Changing the copy does not affect the board; use reveal and
        toggle_flag for that.

        Raises:
            IndexOutOfBounds: If the position is outside the board.
        """
        self._check_position(row, col)
        return replace(self._grid[row][col])

    def cells(self) -> Iterator[Tuple[int, int, CellState]]:
        """Iterate over (row, col, cell copy) in row-major order."""
        for row, cells in enumerate(self._grid):
            for col, cell in enumerate(cells):
                yield row, col, replace(cell)

    def snapshot(self) -> Snapshot:
        """Copy of the grid, safe to hand to renderers."""
        return tuple(tuple(replace(cell) for cell in row) for row in self._grid)

    def covered_positions(self) -> List[Position]:
        """
        Get the positions that can still be revealed.

        Returns:
            List of (row, col) for covered, unflagged cells.
        """
        return [(row, col) for row, col, cell in self.cells() if cell.is_covered]

    def get_observation(self) -> np.ndarray:
        """
        Get board state as a numpy array.

        Returns:
            2D int8 array where:
                -1 = covered
                -2 = flagged
                0-8 = uncovered with adjacent count
                9 = uncovered mine
        """
        obs = np.zeros((self.size, self.size), dtype=np.int8)
        for row, col, cell in self.cells():
            obs[row, col] = cell.to_observation()
        return obs
