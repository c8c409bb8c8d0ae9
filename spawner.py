from __future__ import annotations

import random
import time

from constants import (
    TICK_SECONDS, MIN_MOLES_PER_TICK, MAX_MOLES_PER_TICK, EMPTY_GLYPH, MOLE_GLYPH
)
from game import GameHandle
from logger import GameLogger
from ui import HUD, Renderer


class Spawner:
    """
    Background task that reshuffles the moles once per tick.

    Notes
    - Every tick clears all holes, then reveals 1-6 random picks. Picks are
      independent, so the same hole may come up twice; that just repeats the
      same work.
    - The task ends the first time it sees the game stopped, checked before
      each sleep. A tick already sleeping still runs once it wakes.
    """

    def __init__(self, handle: GameHandle, renderer: Renderer, hud: HUD,
                 logger: GameLogger | None = None, rng: random.Random | None = None,
                 sleep=time.sleep, tick_seconds: float = TICK_SECONDS) -> None:
        self.handle = handle
        self.renderer = renderer
        self.hud = hud
        self.logger = logger
        self.rng = rng or random.Random()
        self.sleep = sleep
        self.tick_seconds = tick_seconds

    def run(self) -> None:
        while True:
            with self.handle.lock:
                if self.handle.state.stopped:
                    return
            self.sleep(self.tick_seconds)
            self.tick()

    def tick(self) -> list[int]:
        """
        Spawn one round of moles and redraw.

        Returns
        -------
        list[int]
            Hole indices picked this tick, in draw order (may repeat).
        """
        with self.handle.lock:
            state = self.handle.state
            board = state.board
            count = self.rng.randint(MIN_MOLES_PER_TICK, MAX_MOLES_PER_TICK)

            for hole, mole in zip(state.holes, state.moles):
                mole.appeared = False
                board.write_text(*hole.pos, EMPTY_GLYPH)

            picked = []
            for _ in range(count):
                index = self.rng.randint(0, len(state.holes) - 1)
                state.moles[index].appeared = True
                board.write_text(*state.holes[index].pos, MOLE_GLYPH)
                picked.append(index)

            self.hud.draw_scores(state.scores)
            self.renderer.draw()

            if self.logger:
                self.logger.log_spawn(picked)
            return picked
