"""Countdown task: one second off the clock per tick until the game stops."""

from __future__ import annotations

import time

from constants import TICK_SECONDS
from game import GameHandle
from logger import GameLogger
from models import GameStatus
from ui import HUD, Renderer


class Countdown:
    """Background task that owns the ``time`` field of the game state."""

    def __init__(self, handle: GameHandle, renderer: Renderer, hud: HUD,
                 logger: GameLogger | None = None,
                 sleep=time.sleep, tick_seconds: float = TICK_SECONDS) -> None:
        self.handle = handle
        self.renderer = renderer
        self.hud = hud
        self.logger = logger
        self.sleep = sleep
        self.tick_seconds = tick_seconds

    def run(self) -> None:
        while True:
            self.sleep(self.tick_seconds)
            if not self.tick():
                return

    def tick(self) -> bool:
        """
        Take one second off the clock and redraw.

        Returns False, without drawing, once the game is already stopped.
        The tick that hits zero stops the game and writes the Game Over text.
        """
        with self.handle.lock:
            state = self.handle.state
            if state.stopped:
                return False

            if state.time > 0:
                state.time -= 1
            if state.time == 0:
                state.status = GameStatus.STOPPED
                self.hud.draw_game_over()
                if self.logger:
                    self.logger.log_game_over(state.scores)

            self.hud.draw_time(state.time)
            self.renderer.draw()
            return True
