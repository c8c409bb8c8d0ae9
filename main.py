"""Game entry point"""

from __future__ import annotations

import curses
import sys
import threading

from constants import LOG_FILE, WINDOW_TITLE
from countdown import Countdown
from dispatcher import InputDispatcher
from game import GameHandle, new_game
from geometry import GeometryError
from logger import GameLogger
from spawner import Spawner
from ui import HUD, Renderer, WinBanner


class TerminalError(RuntimeError):
    """The terminal cannot be switched into raw input mode."""


class Game:
    """
    Main game controller: wires the shared state to the renderer, starts the
    spawner and countdown threads, and runs the input loop on the caller's
    thread until the player quits.
    """

    def __init__(self, screen, handle: GameHandle, logger: GameLogger | None = None) -> None:
        self.screen = screen
        self.handle = handle
        board = handle.state.board

        self.renderer = Renderer(screen, board)
        self.hud = HUD(board)
        self.spawner = Spawner(handle, self.renderer, self.hud, logger)
        self.countdown = Countdown(handle, self.renderer, self.hud, logger)
        self.dispatcher = InputDispatcher(handle, self.renderer, WinBanner(screen), logger)

    # --------------------------------- Setup ----------------------------------------

    def setup_terminal(self) -> None:
        try:
            curses.raw()
        except curses.error as e:
            raise TerminalError("Your terminal does not support raw mode!") from e
        try:
            curses.curs_set(0)  # Hide cursor
        except curses.error:
            pass  # Not every terminal can hide it

    def make_input_window(self):
        """
        A 1x1 window used only for reading keys.

        It is never written to and starts untouched, so waiting on it does not
        refresh anything while the task threads draw on the main screen.
        """
        window = curses.newwin(1, 1, 0, 0)
        window.keypad(True)
        window.untouchwin()
        return window

    def start(self) -> None:
        """Draw the first frame and launch the background tasks."""
        with self.handle.lock:
            state = self.handle.state
            self.hud.draw(state.scores, state.time)
            self.renderer.draw()

        for name, task in (("spawner", self.spawner), ("countdown", self.countdown)):
            threading.Thread(target=task.run, name=name, daemon=True).start()

    # --------------------------------- Loop -----------------------------------------

    def run(self) -> None:
        self.setup_terminal()
        keys = self.make_input_window()
        self.start()
        self.dispatcher.run(keys.get_wch)


def set_title(title: str) -> None:
    sys.stdout.write(f"\33]0;{title}\a")
    sys.stdout.flush()


def main() -> None:
    try:
        handle = new_game()
    except GeometryError as e:
        print(f"\n{e}\n", file=sys.stderr)
        sys.exit(0)

    logger = GameLogger(LOG_FILE)
    set_title(WINDOW_TITLE)

    # curses.wrapper enters the alternate screen and restores the terminal on the way out
    try:
        curses.wrapper(lambda screen: Game(screen, handle, logger).run())
    except TerminalError as e:
        print(e, file=sys.stderr)
        sys.exit(0)


if __name__ == "__main__":
    main()
