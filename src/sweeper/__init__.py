"""
Sweeper engine.

Provides the logic behind a grid-based mine-clearing puzzle: grid
storage, mine placement, flood-fill opening, flagging and win/loss
evaluation.
"""
import logging

from .cell import Knowledge, MineCell
from .grid import Grid, OutOfBoundsError, Position
from .game import Game, GameConfig, GameState, BEGINNER, INTERMEDIATE, EXPERT
from .environment import SweeperEnv

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Knowledge",
    "MineCell",
    "Grid",
    "OutOfBoundsError",
    "Position",
    "Game",
    "GameConfig",
    "GameState",
    "BEGINNER",
    "INTERMEDIATE",
    "EXPERT",
    "SweeperEnv",
]
