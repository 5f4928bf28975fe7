"""
Game module for the Sweeper engine.

Owns the ground-truth mine layout and the player's knowledge grid,
and implements deferred mine placement, flood-fill opening, chording,
flag toggling and win/loss evaluation.
"""
import logging
import random
from dataclasses import dataclass
from enum import Enum, auto
from typing import List, Optional, Sequence, Set

import numpy as np

from .cell import Knowledge, MineCell
from .grid import Grid, Position


logger = logging.getLogger(__name__)


# ============================================================================
# Constants
# ============================================================================

class GameState(Enum):
    """Lifecycle of a game. WON and LOST are terminal."""

    NOT_STARTED = auto()
    STARTED = auto()
    WON = auto()
    LOST = auto()


SEED_BITS = 32


@dataclass(frozen=True)
class GameConfig:
    """
    Configuration for a game.

    Attributes:
        width: Number of columns.
        height: Number of rows.
        mine_count: Total mines to place.
    """

    width: int = 9
    height: int = 9
    mine_count: int = 10

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        if self.width < 1 or self.height < 1:
            raise ValueError("Board dimensions must be positive")
        if self.mine_count < 0:
            raise ValueError("Number of mines cannot be negative")
        max_mines = self.total_cells - 1
        if self.mine_count > max_mines:
            raise ValueError(f"Too many mines (max {max_mines})")

    @property
    def total_cells(self) -> int:
        return self.width * self.height

    @property
    def safe_cells(self) -> int:
        """Number of cells without a mine."""
        return self.total_cells - self.mine_count


# Preset difficulty levels
BEGINNER = GameConfig(9, 9, 10)
INTERMEDIATE = GameConfig(16, 16, 40)
EXPERT = GameConfig(30, 16, 99)


# ============================================================================
# Game Class
# ============================================================================

class Game:
    """
    A single game, from first click to win or loss.

    The mine layout is generated lazily by the first ``open`` call so
    that the clicked cell and its neighbors are never mines. Commands
    acting on a terminal game, on an invalid position or on a cell in
    the wrong state are silent no-ops; callers poll the queries after
    each command.
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        seed: Optional[int] = None,
    ) -> None:
        """
        Create a game with no mines placed yet.

        Args:
            config: Game configuration (default: beginner).
            seed: Seed for layout generation. Drawn at random on the
                first open when omitted.
        """
        self.config = config or BEGINNER
        self._requested_seed = seed
        self._seed: Optional[int] = None
        self._truth: Optional[Grid[MineCell]] = None
        self._knowledge: Grid[Knowledge] = Grid(
            self.config.width, self.config.height, Knowledge.UNKNOWN
        )
        self._started = False
        self._dead = False
        self._won = False
        self._opened_count = 0
        self._flagged_count = 0

    @classmethod
    def from_layout(
        cls,
        mines: Sequence[Sequence[bool]],
        seed: Optional[int] = None,
    ) -> "Game":
        """
        Create a game with a fixed mine layout, ``mines[y][x]``.

        The first open does not relocate mines, so it may detonate.

        Raises:
            ValueError: If the layout is not rectangular or holds no
                safe cell.
        """
        layout = Grid.from_rows(mines)
        mine_count = sum(1 for is_mine in layout.values() if is_mine)
        game = cls(GameConfig(layout.width, layout.height, mine_count))
        game._install_truth({
            position for position in layout.positions()
            if layout.at(*position)
        })
        game._seed = seed
        return game

    # ========================================================================
    # Mine Placement (Low-level)
    # ========================================================================

    def _generate_layout(self, x: int, y: int) -> None:
        """
        Place mines randomly, keeping (x, y) and its neighbors clear.

        Args:
            x: Column of the first opened cell.
            y: Row of the first opened cell.
        """
        seed = self._requested_seed
        if seed is None:
            seed = random.SystemRandom().getrandbits(SEED_BITS)
        self._seed = seed

        rng = random.Random(seed)
        self._install_truth(self._choose_mine_positions(rng, x, y))
        logger.debug(
            "Generated %dx%d layout with %d mines (seed=%d)",
            self.config.width, self.config.height,
            self.config.mine_count, seed,
        )

    def _choose_mine_positions(
        self, rng: random.Random, x: int, y: int
    ) -> Set[Position]:
        """
        Pick mine positions around a first click at (x, y).

        Mines go outside the click's neighborhood. On boards too dense
        for that, every outside cell is mined and the rest are drawn
        from the neighbors; the clicked cell is never mined.
        """
        neighbors = self._knowledge.neighbors(x, y)
        excluded = {(x, y), *neighbors}
        outside = [
            position for position in self._knowledge.positions()
            if position not in excluded
        ]
        mine_count = self.config.mine_count
        if len(outside) >= mine_count:
            return set(rng.sample(outside, mine_count))
        remaining = mine_count - len(outside)
        return set(outside) | set(rng.sample(neighbors, remaining))

    def _install_truth(self, mines: Set[Position]) -> None:
        """Build the ground-truth grid and cache adjacent counts."""
        truth: Grid[MineCell] = Grid(
            self.config.width, self.config.height, MineCell()
        )
        for x, y in truth.positions():
            if (x, y) in mines:
                truth.set(x, y, MineCell(is_mine=True))
                continue
            count = sum(
                1 for neighbor in truth.neighbors(x, y) if neighbor in mines
            )
            truth.set(x, y, MineCell(adjacent_mines=count))
        self._truth = truth

    # ========================================================================
    # Game Actions (Mid-level)
    # ========================================================================

    def open(self, x: int, y: int) -> None:
        """
        Open a cell at the given position.

        On the first open, places mines avoiding this cell and its
        neighbors. An opened cell with no adjacent mines opens its
        neighbors transitively. Opening a mine loses the game.
        """
        if not self._can_open(x, y):
            logger.debug("Ignored open at (%d, %d)", x, y)
            return

        if self._truth is None:
            self._generate_layout(x, y)
        self._started = True
        self._open_cell(x, y)

    def _can_open(self, x: int, y: int) -> bool:
        """Check if a cell can be opened."""
        if self.finished:
            return False
        if not self._knowledge.contains(x, y):
            return False
        return self._knowledge.at(x, y).is_unknown

    def _open_cell(self, x: int, y: int) -> None:
        """Open an unknown cell and handle consequences."""
        if self._truth.at(x, y).is_mine:
            self._knowledge.set(x, y, Knowledge.DETONATED)
            self._dead = True
            logger.info("Game lost at (%d, %d) (seed=%s)", x, y, self._seed)
            return

        self._flood_fill(x, y)
        self._check_win_condition()

    def _flood_fill(self, x: int, y: int) -> None:
        """Open a safe cell, then every unknown cell reachable via zeros."""
        pending = [(x, y)]
        while pending:
            cell_x, cell_y = pending.pop()
            if not self._knowledge.at(cell_x, cell_y).is_unknown:
                continue

            cell = self._truth.at(cell_x, cell_y)
            self._knowledge.set(
                cell_x, cell_y, Knowledge.opened(cell.adjacent_mines)
            )
            self._opened_count += 1

            if cell.adjacent_mines == 0:
                for neighbor in self._knowledge.neighbors(cell_x, cell_y):
                    if self._knowledge.at(*neighbor).is_unknown:
                        pending.append(neighbor)

    def _check_win_condition(self) -> None:
        """Check if all non-mine cells are opened."""
        if self._opened_count < self.config.safe_cells:
            return

        self._won = True
        # Remaining unknown cells are all mines.
        for position in self._knowledge.positions():
            if self._knowledge.at(*position).is_unknown:
                self._knowledge.set(*position, Knowledge.FLAGGED)
                self._flagged_count += 1
        logger.info("Game won (seed=%s)", self._seed)

    def open_adjacent(self, x: int, y: int) -> None:
        """
        Chord: open all unknown neighbors if the flag count matches.

        Only applies to an opened cell whose adjacent mine count equals
        the number of flagged neighbors exactly.
        """
        if not self._can_chord(x, y):
            logger.debug("Ignored chord at (%d, %d)", x, y)
            return

        for neighbor in self._knowledge.neighbors(x, y):
            if self.finished:
                break
            if self._knowledge.at(*neighbor).is_unknown:
                self._open_cell(*neighbor)

    def _can_chord(self, x: int, y: int) -> bool:
        """Check if chord action is valid."""
        if self.finished:
            return False
        if not self._knowledge.contains(x, y):
            return False
        adjacent_mines = self._knowledge.at(x, y).adjacent_mines
        if not adjacent_mines:
            return False
        return self._count_adjacent_flags(x, y) == adjacent_mines

    def _count_adjacent_flags(self, x: int, y: int) -> int:
        """Count flagged cells adjacent to position."""
        return sum(
            1 for neighbor in self._knowledge.neighbors(x, y)
            if self._knowledge.at(*neighbor).is_flagged
        )

    def toggle_flag(self, x: int, y: int) -> bool:
        """
        Toggle flag on a cell.

        Returns:
            True if the flag was toggled, False otherwise.
        """
        if self.finished:
            return False
        if not self._knowledge.contains(x, y):
            return False

        knowledge = self._knowledge.at(x, y)
        if knowledge.is_opened:
            return False
        if knowledge.is_flagged:
            self._knowledge.set(x, y, Knowledge.UNKNOWN)
            self._flagged_count -= 1
        else:
            self._knowledge.set(x, y, Knowledge.FLAGGED)
            self._flagged_count += 1
        return True

    # ========================================================================
    # State Accessors (High-level)
    # ========================================================================

    @property
    def state(self) -> GameState:
        """Get current game state."""
        if self._dead:
            return GameState.LOST
        if self._won:
            return GameState.WON
        if self._started:
            return GameState.STARTED
        return GameState.NOT_STARTED

    @property
    def started(self) -> bool:
        """Check if game is in progress."""
        return self.state == GameState.STARTED

    @property
    def finished(self) -> bool:
        """Check if game was won or lost."""
        return self._dead or self._won

    @property
    def dead(self) -> bool:
        return self._dead

    @property
    def won(self) -> bool:
        return self._won

    @property
    def seed(self) -> Optional[int]:
        """Seed of the mine layout, None until it is generated."""
        return self._seed

    @property
    def opened_count(self) -> int:
        """Number of opened safe cells."""
        return self._opened_count

    uncovered_count = opened_count

    @property
    def flagged_count(self) -> int:
        return self._flagged_count

    @property
    def width(self) -> int:
        return self.config.width

    @property
    def height(self) -> int:
        return self.config.height

    @property
    def mine_count(self) -> int:
        return self.config.mine_count

    def contains(self, x: int, y: int) -> bool:
        """Check if position is on the board."""
        return self._knowledge.contains(x, y)

    def knowledge_at(self, x: int, y: int) -> Knowledge:
        """
        Get player knowledge at a position.

        Raises:
            OutOfBoundsError: If the position is outside the grid.
        """
        return self._knowledge.at(x, y)

    def knowledge_grid(self) -> List[Knowledge]:
        """Get player knowledge of every cell in row-major order."""
        return self._knowledge.values()

    def observation(self) -> np.ndarray:
        """
        Get player knowledge as a numpy array indexed [y, x].

        Returns:
            2D int8 array where:
                -1 = unknown
                -2 = flagged
                0-8 = opened with adjacent count
                9 = detonated mine
        """
        values = [knowledge.to_observation() for knowledge in self._knowledge.values()]
        return np.array(values, dtype=np.int8).reshape(
            self.config.height, self.config.width
        )

    def unknown_cells(self) -> List[Position]:
        """
        Get list of cells that can still be opened.

        Returns:
            List of (x, y) positions in row-major order.
        """
        return [
            position for position in self._knowledge.positions()
            if self._knowledge.at(*position).is_unknown
        ]

    def __repr__(self) -> str:
        return (
            f"Game({self.config.width}x{self.config.height}, "
            f"mines={self.config.mine_count}, state={self.state.name})"
        )
