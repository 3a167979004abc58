"""
Pytest configuration and shared fixtures.
"""
import pytest
import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from sweeper import BoardConfig, BoardEngine, CellContent, CellState, GameSession


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def default_board() -> BoardEngine:
    """Create a seeded default 10x10 board."""
    return BoardEngine(seed=1234)


@pytest.fixture
def corner_mine_board() -> BoardEngine:
    """Create a 3x3 board with a single mine at (0, 0)."""
    return BoardEngine.from_mines(3, [(0, 0)])


@pytest.fixture
def diagonal_board() -> BoardEngine:
    """Create a 2x2 board with mines at (0, 0) and (1, 1)."""
    return BoardEngine.from_mines(2, [(0, 0), (1, 1)])


@pytest.fixture
def empty_board() -> BoardEngine:
    """Create a 5x5 board with no mines for flood fill testing."""
    return BoardEngine.from_mines(5, [])


@pytest.fixture
def wall_board() -> BoardEngine:
    """
    Create a 5x5 board with a wall of mines down column 2.

    Columns 0 and 4 are empty, columns 1 and 3 are values.
    """
    return BoardEngine.from_mines(5, [(row, 2) for row in range(5)])


@pytest.fixture
def single_mine_board() -> BoardEngine:
    """Create a 4x4 board with one mine at (1, 2)."""
    return BoardEngine.from_mines(4, [(1, 2)])


# ============================================================================
# Cell Fixtures
# ============================================================================

@pytest.fixture
def covered_cell() -> CellState:
    """Create a covered empty cell."""
    return CellState()


@pytest.fixture
def mine_cell() -> CellState:
    """Create a cell containing a mine."""
    return CellState(CellContent.mine())


@pytest.fixture
def numbered_cell() -> CellState:
    """Create an uncovered cell with three adjacent mines."""
    cell = CellState(CellContent.value(3))
    cell.uncover()
    return cell


# ============================================================================
# Session Fixtures
# ============================================================================

@pytest.fixture
def valid_config() -> BoardConfig:
    """Create a valid board configuration."""
    return BoardConfig(size=6, mine_probability=0.2)


@pytest.fixture
def session() -> GameSession:
    """Create a session whose board is replaced by a known layout."""
    game = GameSession(BoardConfig(size=3))
    game.engine = BoardEngine.from_mines(3, [(0, 0)])
    return game
