"""
Pytest configuration and shared fixtures.
"""
import pytest
import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from sweeper import Game, GameConfig, Grid


# ============================================================================
# Game Fixtures
# ============================================================================

@pytest.fixture
def default_game() -> Game:
    """Create a default 9x9 game with 10 mines."""
    return Game()


@pytest.fixture
def seeded_game() -> Game:
    """Create a 9x9 game with 10 mines and a fixed seed."""
    return Game(GameConfig(9, 9, 10), seed=1234)


@pytest.fixture
def corner_mine_game() -> Game:
    """
    Create a 5x5 game with a single mine in the bottom-right corner.

    Opening any zero cell clears the whole board except the mine.
    """
    mines = [[False] * 5 for _ in range(5)]
    mines[4][4] = True
    return Game.from_layout(mines, seed=7)


@pytest.fixture
def center_numbered_game() -> Game:
    """
    Create a 3x3 game with one mine at (0, 0).

    (1, 1) has one adjacent mine; (2, 2) has none.
    """
    return Game.from_layout([
        [True, False, False],
        [False, False, False],
        [False, False, False],
    ])


@pytest.fixture
def empty_game() -> Game:
    """Create a game with no mines for cascade testing."""
    return Game(GameConfig(5, 5, 0))


@pytest.fixture
def wall_game() -> Game:
    """
    Create a 5x3 game with a wall of mines in column x=2.

    The left two columns are reachable from (0, 0); the right two
    columns are not.
    """
    return Game.from_layout([
        [False, False, True, False, False],
        [False, False, True, False, False],
        [False, False, True, False, False],
    ])


# ============================================================================
# Grid Fixtures
# ============================================================================

@pytest.fixture
def small_grid() -> Grid:
    """Create a 3x3 grid filled with zeros."""
    return Grid(3, 3, 0)


# ============================================================================
# Configuration Fixtures
# ============================================================================

@pytest.fixture
def valid_config() -> GameConfig:
    """Create a valid game configuration."""
    return GameConfig(9, 9, 10)


@pytest.fixture
def dense_config() -> GameConfig:
    """3x3 board where every cell but the first click is a mine."""
    return GameConfig(3, 3, 8)