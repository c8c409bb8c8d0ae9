"""Terminal output: full-frame renderer, side-panel HUD and the win banner."""

from __future__ import annotations

import curses
import io

from rich import box
from rich.align import Align
from rich.console import Console
from rich.panel import Panel

from constants import (
    WIDTH, WIN_SCORE, FIELD_WIDTH,
    SCORE_POS, TIME_POS, HELP_POS, GAME_OVER_POS, QUIT_KEY,
)
from geometry import Board


def safe_addstr(screen, y: int, x: int, text: str, attr: int = 0) -> None:
    """Add a string to the window, ignoring the error curses raises for the last cell."""
    try:
        screen.addstr(y, x, text, attr)
    except curses.error:
        pass


def safe_move(screen, y: int, x: int) -> None:
    """Move the cursor, ignoring rows or columns past the edge of a small terminal."""
    try:
        screen.move(y, x)
    except curses.error:
        pass


class Renderer:
    """
    Redraws the whole board every time ``draw`` is called.

    There is no diffing: the grid is small and ticks are a second apart.
    Callers must hold the game lock, since ``board.view`` is shared.
    """

    def __init__(self, screen, board: Board) -> None:
        self.screen = screen
        self.board = board

    def style(self, ch: str) -> int:
        """Attribute for one cell. Everything is plain for now."""
        return curses.A_NORMAL

    def draw(self) -> None:
        height = self.board.size.height
        safe_move(self.screen, 0, 0)
        for y, row in enumerate(self.board.view):
            for x, ch in enumerate(row):
                safe_addstr(self.screen, y, x, ch, self.style(ch))
            if y + 1 < height:
                safe_move(self.screen, y + 1, 0)
        self.screen.refresh()


class HUD:
    """Side-panel text written straight into the board's view grid."""

    def __init__(self, board: Board) -> None:
        self.board = board

    def _field(self, pos: tuple[int, int], text: str) -> None:
        # Pad so a shorter value wipes the tail of the previous one
        x, y = pos
        self.board.write_text(x, y, text.ljust(FIELD_WIDTH))

    def draw_scores(self, scores: int) -> None:
        self._field(SCORE_POS, f"Scores: {scores}")

    def draw_time(self, time: int) -> None:
        self._field(TIME_POS, f"Time: {time}")

    def draw_help(self) -> None:
        self._field(HELP_POS, f"{QUIT_KEY}: quit the game")

    def draw_game_over(self) -> None:
        self._field(GAME_OVER_POS, "Game is Over!")

    def draw(self, scores: int, time: int) -> None:
        """Write every panel field for the first frame."""
        self.draw_scores(scores)
        self.draw_time(time)
        self.draw_help()


class WinBanner:
    """One-shot celebration screen, drawn outside the board grid."""

    def __init__(self, screen) -> None:
        self.screen = screen

    def lines(self, scores: int) -> list[str]:
        """Compose the banner with rich and return it as plain text lines."""
        console = Console(file=io.StringIO(), width=WIDTH, color_system=None, highlight=False)
        message = (
            "[bold]* * *  ~ ~ ~  * * *[/]\n\n"
            f"[bold yellow]{WIN_SCORE} cheers![/]\n"
            f"You whacked your way to {scores} points!\n\n"
            "[bold]* * *  ~ ~ ~  * * *[/]\n\n"
            f"press {QUIT_KEY} to leave"
        )
        console.print(Panel(Align.center(message), title="YOU WIN", border_style="yellow", box=box.DOUBLE))
        return console.file.getvalue().splitlines()

    def draw(self, scores: int) -> None:
        self.screen.clear()
        for y, line in enumerate(self.lines(scores)):
            safe_addstr(self.screen, y, 0, line)
        self.screen.refresh()
