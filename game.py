"""Game construction and the lock-guarded handle shared by every task."""

from __future__ import annotations

import threading

from constants import (
    WIDTH, HEIGHT, DIVIDER_COLUMN,
    HOLE_COUNT, HOLE_COLUMNS, HOLE_TOP, HOLE_LEFT, HOLE_WIDTH, HOLE_HEIGHT,
    HOLE_STEP_X, HOLE_STEP_Y,
)
from geometry import Board
from models import Dimension, GameState, GameStatus, Hole, Mole


class GameHandle:
    """
    Owns the one ``GameState`` of a session and the lock that guards it.

    The spawner, the countdown and the input dispatcher each receive the same
    handle and do a whole read-modify-render step inside ``with handle.lock``.
    Nobody keeps the lock while sleeping or waiting for a key.
    """

    def __init__(self, state: GameState) -> None:
        self.state = state
        self.lock = threading.Lock()


def make_holes(board: Board) -> list[Hole]:
    """
    Frame 9 holes (3 rows x 3 columns) on the board and return their centres.
    """
    holes = []
    for index in range(HOLE_COUNT):
        col = index % HOLE_COLUMNS
        row = index // HOLE_COLUMNS
        top = HOLE_TOP + HOLE_STEP_Y * row
        bottom = top + HOLE_HEIGHT
        left = HOLE_LEFT + HOLE_STEP_X * col
        right = left + HOLE_WIDTH
        board.build_block(top, bottom, left, right)
        holes.append(Hole(index, pos=((left + right) // 2, (top + bottom) // 2)))
    return holes


def build_playfield(board: Board) -> list[Hole]:
    """Outer border, the divider to the side panel, then the holes."""
    width, height = board.size.width, board.size.height
    board.build_block(0, height - 1, 0, width - 1)
    board.build_block(0, height - 1, 0, DIVIDER_COLUMN)
    return make_holes(board)


def new_game(size: Dimension | None = None) -> GameHandle:
    """
    Lay out a fresh playfield and return the handle to its state.

    Raises
    ------
    GeometryError
        If the layout does not fit ``size``.
    """
    board = Board(size or Dimension(WIDTH, HEIGHT))
    state = GameState(board=board)
    state.holes = build_playfield(board)
    state.moles = [Mole() for _ in state.holes]
    state.status = GameStatus.PLAYING
    return GameHandle(state)
