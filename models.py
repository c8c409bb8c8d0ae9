"""Lightweight data models used across the game."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

from constants import INITIAL_TIME

if TYPE_CHECKING:
    from geometry import Board


@dataclass(frozen=True)
class Dimension:
    """Bounds of the playfield in terminal cells."""
    width: int
    height: int


@dataclass(frozen=True)
class Hole:
    """
    A single, fixed hole a mole can pop out of.

    Attributes
    ----------
    index : int
        Slot number, 0..8 in row-major order. Key ``index + 1`` strikes it.
    pos : tuple[int, int]
        The (x, y) centre cell of the hole's frame in the view grid.
    """
    index: int
    pos: tuple[int, int]


@dataclass
class Mole:
    """Target state of one hole for the current spawn tick."""
    appeared: bool = False


class GameStatus(Enum):
    STOPPED = "stopped"
    PLAYING = "playing"


@dataclass
class GameState:
    """
    Everything the three game tasks share.

    Only touch it through ``GameHandle.lock``; see ``game.py``.
    """
    board: Board
    holes: list[Hole] = field(default_factory=list)
    moles: list[Mole] = field(default_factory=list)
    scores: int = 0
    time: int = INITIAL_TIME
    status: GameStatus = GameStatus.STOPPED
    banner_shown: bool = False

    @property
    def stopped(self) -> bool:
        return self.status is GameStatus.STOPPED
