"""
Cell module for the Minesweeper board engine.

Represents the fixed content of a grid cell (mine, value or empty) and
its mutable view state (covered/uncovered, flagged).
"""
from dataclasses import dataclass
from enum import Enum, auto


# ============================================================================
# Constants
# ============================================================================

MAX_VALUE = 8

OBS_COVERED = -1
OBS_FLAGGED = -2
OBS_MINE = 9


class ContentKind(Enum):
    """Kinds of content a cell can hold."""

    MINE = auto()
    VALUE = auto()
    EMPTY = auto()


# ============================================================================
# Cell Content
# ============================================================================

@dataclass(frozen=True)
class CellContent:
    """
    What lies under a cell, decided once when the board is generated.

    Attributes:
        kind: Mine, value or empty.
        count: Adjacent mine count for value cells (1-8), 0 otherwise.
    """

    kind: ContentKind = ContentKind.EMPTY
    count: int = 0

    @classmethod
    def mine(cls) -> "CellContent":
        return cls(ContentKind.MINE)

    @classmethod
    def empty(cls) -> "CellContent":
        return cls(ContentKind.EMPTY)

    @classmethod
    def value(cls, count: int) -> "CellContent":
        """Create a value cell, rejecting counts outside 1-8."""
        if not 1 <= count <= MAX_VALUE:
            raise ValueError(f"Value must be between 1 and {MAX_VALUE}, got {count}")
        return cls(ContentKind.VALUE, count)

    @classmethod
    def from_count(cls, count: int) -> "CellContent":
        """Content of a non-mine cell with `count` mine neighbours."""
        if count == 0:
            return cls.empty()
        return cls.value(count)

    @property
    def is_mine(self) -> bool:
        return self.kind == ContentKind.MINE

    @property
    def is_empty(self) -> bool:
        return self.kind == ContentKind.EMPTY

    @property
    def is_value(self) -> bool:
        return self.kind == ContentKind.VALUE

    def __str__(self) -> str:
        if self.is_value:
            return f"Value({self.count})"
        return self.kind.name.capitalize()


# ============================================================================
# Cell State
# ============================================================================

@dataclass
class CellState:
    """
    A single cell in the Minesweeper grid.

    Attributes:
        content: Fixed content of the cell.
        uncovered: Whether the cell has been revealed. Never reverts.
        flagged: Whether the player has flagged the cell. Only set
            while the cell is covered.
    """

    content: CellContent = CellContent()
    uncovered: bool = False
    flagged: bool = False

    def uncover(self) -> bool:
        """
        Uncover this cell.

        Returns:
            True if the cell was uncovered, False if it was flagged or
            already uncovered.
        """
        if self.flagged or self.uncovered:
            return False
        self.uncovered = True
        return True

    def toggle_flag(self) -> bool:
        """
        Toggle the flag on this cell.

        Returns:
            True if the flag was toggled, False if the cell is uncovered.
        """
        if self.uncovered:
            return False
        self.flagged = not self.flagged
        return True

    @property
    def is_mine(self) -> bool:
        return self.content.is_mine

    @property
    def is_covered(self) -> bool:
        """Covered and not flagged, i.e. a valid reveal target."""
        return not self.uncovered and not self.flagged

    def to_observation(self) -> int:
        """
        Convert cell to an integer observation.

        Returns:
            -1: Covered cell
            -2: Flagged cell
            0-8: Uncovered cell with adjacent mine count
            9: Uncovered mine
        """
        if self.flagged:
            return OBS_FLAGGED
        if not self.uncovered:
            return OBS_COVERED
        if self.content.is_mine:
            return OBS_MINE
        return self.content.count
