"""Playfield geometry: wall bitmasks, box-drawing glyphs, and the view grid.

Every cell of the board carries a 4-bit wall mask. Rectangles drawn with
``Board.build_block`` OR their bits into the cells they cross, so frames that
share an edge or a corner merge into the right T- and cross-junctions instead
of overwriting each other. The view grid is derived from the masks through a
fixed 16-entry glyph table and then decorated with overlay text.
"""

from __future__ import annotations

from enum import Enum, IntFlag

from models import Dimension


class Wall(IntFlag):
    """Directions a wall line leaves a cell."""
    UP = 1
    DOWN = 2
    RIGHT = 4
    LEFT = 8

    VERTICAL = UP | DOWN
    HORIZONTAL = RIGHT | LEFT
    TOP_LEFT = DOWN | RIGHT
    TOP_RIGHT = DOWN | LEFT
    BOTTOM_LEFT = UP | RIGHT
    BOTTOM_RIGHT = UP | LEFT


class Glyph(str, Enum):
    """
    Box-drawing glyph for each wall mask.

    Members are declared in mask order (0..15), so ``list(Glyph)[mask]`` is the
    glyph for ``mask``. The single-direction stubs never come out of
    ``build_block`` but keep the table total.
    """
    BLANK = " "
    UP_STUB = "上"
    DOWN_STUB = "下"
    VERTICAL = "║"
    RIGHT_STUB = "左"
    BOTTOM_LEFT = "╚"
    TOP_LEFT = "╔"
    TEE_RIGHT = "╠"
    LEFT_STUB = "右"
    BOTTOM_RIGHT = "╝"
    TOP_RIGHT = "╗"
    TEE_LEFT = "╣"
    HORIZONTAL = "═"
    TEE_UP = "╩"
    TEE_DOWN = "╦"
    CROSS = "╬"


GLYPH_TABLE: tuple[Glyph, ...] = tuple(Glyph)


def glyph_for_mask(mask: int) -> Glyph:
    """Map a wall mask (0..15) to its glyph."""
    if not 0 <= mask < len(GLYPH_TABLE):
        raise ValueError(f"wall mask out of range: {mask}")
    return GLYPH_TABLE[mask]


class GeometryError(ValueError):
    """A block does not fit the board or has no area."""


class Board:
    """
    Wall mask grid plus the character grid that gets rendered.

    ``walls`` is only changed by ``build_block``. ``view`` is rebuilt from it
    after every block and afterwards only changed by ``write_text``.
    """

    def __init__(self, size: Dimension) -> None:
        self.size = size
        self.walls: list[list[int]] = [[0] * size.width for _ in range(size.height)]
        self.view: list[list[str]] = self.update_block_chars()

    def build_block(self, top: int, bottom: int, left: int, right: int) -> None:
        """
        Draw a rectangular frame onto the wall grid.

        Parameters
        ----------
        top, bottom : int
            Rows of the horizontal edges, ``0 <= top < bottom < height``.
        left, right : int
            Columns of the vertical edges, ``0 <= left < right < width``.

        Raises
        ------
        GeometryError
            If any bound is off the board or the block is degenerate. The grid
            is left untouched.
        """
        self.check_block(top, bottom, left, right)

        for row in range(top + 1, bottom):
            self.walls[row][left] |= Wall.VERTICAL
            self.walls[row][right] |= Wall.VERTICAL

        for col in range(left + 1, right):
            self.walls[top][col] |= Wall.HORIZONTAL
            self.walls[bottom][col] |= Wall.HORIZONTAL

        self.walls[top][left] |= Wall.TOP_LEFT
        self.walls[top][right] |= Wall.TOP_RIGHT
        self.walls[bottom][left] |= Wall.BOTTOM_LEFT
        self.walls[bottom][right] |= Wall.BOTTOM_RIGHT

        self.view = self.update_block_chars()

    def check_block(self, top: int, bottom: int, left: int, right: int) -> None:
        width, height = self.size.width, self.size.height
        problems = []
        if not 0 <= top < height:
            problems.append(f"top={top} outside 0..{height - 1}")
        if not 0 <= bottom < height:
            problems.append(f"bottom={bottom} outside 0..{height - 1}")
        if not 0 <= left < width:
            problems.append(f"left={left} outside 0..{width - 1}")
        if not 0 <= right < width:
            problems.append(f"right={right} outside 0..{width - 1}")
        if top >= bottom:
            problems.append(f"top={top} must be above bottom={bottom}")
        if left >= right:
            problems.append(f"left={left} must be left of right={right}")
        if problems:
            raise GeometryError(
                "Can not build the block: " + "; ".join(problems)
                + f" (width_limit={width}, height_limit={height})"
            )

    def update_block_chars(self) -> list[list[str]]:
        """Recompute the whole view grid from the wall masks."""
        return [[glyph_for_mask(mask).value for mask in row] for row in self.walls]

    def write_text(self, left: int, top: int, text: str) -> None:
        """Overlay ``text`` on row ``top`` starting at column ``left``, clipped at the right edge."""
        if not 0 <= top < self.size.height:
            raise IndexError(f"row {top} is off the board")
        row = self.view[top]
        for offset, ch in enumerate(text):
            col = left + offset
            if col >= self.size.width:
                break
            if col >= 0:
                row[col] = ch

    def rows(self) -> list[str]:
        return ["".join(row) for row in self.view]
