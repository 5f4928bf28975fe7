"""
Cell module for the Sweeper engine.

Separates what a cell is (ground truth: mine or not, adjacent count)
from what the player knows about it (unknown, opened, flagged).
"""
from dataclasses import dataclass
from enum import IntEnum
from typing import Optional


# ============================================================================
# Ground Truth
# ============================================================================

@dataclass(frozen=True)
class MineCell:
    """
    Ground truth for a single cell.

    Attributes:
        is_mine: Whether this cell contains a mine.
        adjacent_mines: Count of mines in neighboring cells (0-8).
    """

    is_mine: bool = False
    adjacent_mines: int = 0


# ============================================================================
# Player Knowledge
# ============================================================================

class Knowledge(IntEnum):
    """
    What the player knows about a cell.

    Opened members carry the adjacent mine count: ``OPENED_n`` has
    value ``n + 1``. ``DETONATED`` marks the opened mine that ended
    the game.
    """

    UNKNOWN = 0
    OPENED_0 = 1
    OPENED_1 = 2
    OPENED_2 = 3
    OPENED_3 = 4
    OPENED_4 = 5
    OPENED_5 = 6
    OPENED_6 = 7
    OPENED_7 = 8
    OPENED_8 = 9
    FLAGGED = 10
    DETONATED = 11

    @classmethod
    def opened(cls, adjacent_mines: int) -> "Knowledge":
        """
        Get the opened member for an adjacent mine count.

        Raises:
            ValueError: If the count is not in 0-8.
        """
        if not 0 <= adjacent_mines <= 8:
            raise ValueError(f"Invalid adjacent mine count: {adjacent_mines}")
        return cls(cls.OPENED_0 + adjacent_mines)

    @property
    def is_unknown(self) -> bool:
        """Check if cell is still unknown."""
        return self is Knowledge.UNKNOWN

    @property
    def is_flagged(self) -> bool:
        """Check if cell is flagged."""
        return self is Knowledge.FLAGGED

    @property
    def is_opened(self) -> bool:
        """Check if cell has been opened (detonated mines included)."""
        return Knowledge.OPENED_0 <= self <= Knowledge.OPENED_8 or (
            self is Knowledge.DETONATED
        )

    @property
    def adjacent_mines(self) -> Optional[int]:
        """Adjacent mine count of an opened safe cell, else None."""
        if Knowledge.OPENED_0 <= self <= Knowledge.OPENED_8:
            return self - Knowledge.OPENED_0
        return None

    def to_observation(self) -> int:
        """
        Convert knowledge to an observation value for array consumers.

        Returns:
            -1: Unknown cell
            -2: Flagged cell
            0-8: Opened cell with adjacent mine count
            9: Detonated mine
        """
        if self is Knowledge.UNKNOWN:
            return -1
        if self is Knowledge.FLAGGED:
            return -2
        if self is Knowledge.DETONATED:
            return 9
        return self - Knowledge.OPENED_0
