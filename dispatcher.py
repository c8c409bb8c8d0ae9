"""Foreground input handling: digit strikes, quit, and the one-shot win banner."""

from __future__ import annotations

from constants import HIT_POINTS, WIN_SCORE, STRUCK_GLYPH, QUIT_KEY
from game import GameHandle
from logger import GameLogger
from models import GameStatus
from ui import Renderer, WinBanner


class InputDispatcher:
    """
    Maps key events onto the shared game state.

    Keys ``1``-``9`` strike holes 0-8 in row-major order. A strike only counts
    when a mole is showing in that hole; everything else is dropped silently.
    """

    def __init__(self, handle: GameHandle, renderer: Renderer, banner: WinBanner,
                 logger: GameLogger | None = None) -> None:
        self.handle = handle
        self.renderer = renderer
        self.banner = banner
        self.logger = logger

    def run(self, read_key) -> None:
        """
        Block on ``read_key`` until the quit key arrives.

        Parameters
        ----------
        read_key : Callable[[], str | int]
            Returns the next key event. Character keys come back as ``str``;
            anything else (e.g. curses ``KEY_RESIZE``) is ignored.
        """
        while True:
            key = read_key()
            if not self.handle_key(key):
                break
            self.check_win()

    def handle_key(self, key) -> bool:
        """Apply one key event. Returns False when the player asked to quit."""
        if not isinstance(key, str):
            return True
        if key == QUIT_KEY:
            return False
        if len(key) == 1 and "1" <= key <= "9":
            self.strike(int(key) - 1)
        return True

    def strike(self, index: int) -> bool:
        """
        Whack hole ``index``.

        Returns
        -------
        bool
            True if a mole was there and the hit scored.
        """
        with self.handle.lock:
            state = self.handle.state
            if index >= len(state.holes):
                return False
            mole = state.moles[index]
            hit = mole.appeared
            if hit:
                x, y = state.holes[index].pos
                state.board.write_text(x, y, STRUCK_GLYPH)
                mole.appeared = False
                self.renderer.draw()
                state.scores += HIT_POINTS

        if self.logger:
            details = f"Mole in hole {index + 1}" if hit else f"Hole {index + 1} empty"
            self.logger.log_strike(str(index + 1), hit, details)
        return hit

    def check_win(self) -> bool:
        """Show the win banner the first time scores pass the threshold."""
        with self.handle.lock:
            state = self.handle.state
            if state.scores <= WIN_SCORE or state.banner_shown:
                return False
            state.status = GameStatus.STOPPED
            state.banner_shown = True
            self.banner.draw(state.scores)
            if self.logger:
                self.logger.log_win(state.scores)
            return True
