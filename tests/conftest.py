import curses

import pytest

from constants import WIDTH, HEIGHT
from game import new_game
from ui import HUD, Renderer


class FakeScreen:
    """Records what a curses window would have been asked to do."""

    def __init__(self, width=WIDTH, height=HEIGHT, keys=()):
        self.width = width
        self.height = height
        self.cells = {}
        self.moves = []
        self.refreshes = 0
        self.clears = 0
        self.keys = list(keys)
        self.keypad_on = False
        self.untouched = False

    def addstr(self, y, x, text, attr=0):
        if not (0 <= y < self.height and 0 <= x < self.width):
            raise curses.error("addwstr() returned ERR")
        for offset, ch in enumerate(text):
            self.cells[(y, x + offset)] = ch
        # curses complains after writing the very last cell of the window
        if y == self.height - 1 and x + len(text) >= self.width:
            raise curses.error("addwstr() returned ERR")

    def move(self, y, x):
        if not (0 <= y < self.height and 0 <= x < self.width):
            raise curses.error("wmove() returned ERR")
        self.moves.append((y, x))

    def refresh(self):
        self.refreshes += 1

    def clear(self):
        self.clears += 1
        self.cells.clear()

    def keypad(self, flag):
        self.keypad_on = flag

    def untouchwin(self):
        self.untouched = True

    def get_wch(self):
        return self.keys.pop(0)

    def row(self, y):
        return "".join(self.cells.get((y, x), "") for x in range(self.width))


class ScriptedRandom:
    """Stands in for random.Random; hands out ``randint`` results in order."""

    def __init__(self, values):
        self.values = list(values)
        self.calls = []

    def randint(self, low, high):
        self.calls.append((low, high))
        value = self.values.pop(0)
        assert low <= value <= high
        return value


@pytest.fixture
def handle():
    return new_game()


@pytest.fixture
def screen():
    return FakeScreen()


@pytest.fixture
def renderer(screen, handle):
    return Renderer(screen, handle.state.board)


@pytest.fixture
def hud(handle):
    return HUD(handle.state.board)
