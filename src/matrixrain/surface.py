"""
The drawing surface the rain paints on.

Rain only needs a handful of primitives: dimensions, the pair id at a cell,
writing a glyph with a pair, re-pairing a cell without touching its glyph,
and access to the palette.  CursesSurface maps them onto a curses window;
MemorySurface keeps everything in lists so the engine can run headless.
"""
import curses
from typing import Dict, List, Tuple

RGB = Tuple[int, int, int]


class CursesSurface:
    """
    Wraps a curses window.  The palette behind it is process-wide, so every
    CursesSurface in a program shares the same colors and pairs.

    Pair ids are cached per cell rather than read back with inch(): on a
    wide-character ncurses, inch() of a non-ASCII glyph returns the code
    point and loses the pair.
    """
    def __init__(self, window, cs=curses):
        self.window = window
        self._cs = cs
        self._background = 0
        self._rows, self._cols = 0, 0
        # screen pair cache
        self._pairs: List[List[int]] = []
        self._sync()

    def _sync(self):
        rows, cols = self.window.getmaxyx()
        if (rows, cols) == (self._rows, self._cols):
            return
        pairs = [[self._background] * cols for _ in range(rows)]
        for r in range(min(rows, self._rows)):
            pairs[r][:min(cols, self._cols)] = self._pairs[r][:min(cols, self._cols)]
        self._rows, self._cols, self._pairs = rows, cols, pairs

    def size(self) -> Tuple[int, int]:
        self._sync()
        return self._rows, self._cols

    def pair_at(self, row: int, col: int) -> int:
        self._sync()
        return self._pairs[row][col]

    def put(self, row: int, col: int, glyph: str, pair: int):
        self._sync()
        self._pairs[row][col] = pair
        try:
            self.window.addch(row, col, glyph, self._cs.color_pair(pair))
        except self._cs.error:
            # bottom-right cell: glyph lands, cursor can't advance
            pass

    def recolor(self, row: int, col: int, pair: int):
        self._sync()
        self._pairs[row][col] = pair
        self.window.chgat(row, col, 1, self._cs.A_NORMAL | self._cs.color_pair(pair))

    def set_background(self, pair: int):
        self._sync()
        self.window.bkgd(' ', self._cs.color_pair(pair))
        # cells still carrying the old background follow the new one
        for line in self._pairs:
            for c, p in enumerate(line):
                if p == self._background:
                    line[c] = pair
        self._background = pair

    # palette

    def has_colors(self) -> bool:
        return self._cs.has_colors()

    def can_change_color(self) -> bool:
        return self._cs.can_change_color()

    @property
    def colors(self) -> int:
        return getattr(self._cs, 'COLORS', 0)

    @property
    def color_pairs(self) -> int:
        return getattr(self._cs, 'COLOR_PAIRS', 0)

    def color_content(self, index: int) -> RGB:
        return tuple(self._cs.color_content(index))

    def init_color(self, index: int, r: int, g: int, b: int):
        self._cs.init_color(index, r, g, b)

    def pair_content(self, pair: int) -> Tuple[int, int]:
        return tuple(self._cs.pair_content(pair))

    def init_pair(self, pair: int, fg: int, bg: int):
        self._cs.init_pair(pair, fg, bg)


class MemorySurface:
    """
    A grid of (glyph, pair) cells with its own palette tables.

    Colors start as a grey ramp and pair p starts as (p % 8, 0), so a
    palette that was not restored shows up as a difference.
    """
    def __init__(self, rows: int, cols: int, colors: int = 256, color_pairs: int = 256,
                 can_change: bool = True, has_colors: bool = True):
        self.rows = rows
        self.cols = cols
        self.background = 0
        self.cells: List[List[List]] = [[[' ', 0] for _ in range(cols)] for _ in range(rows)]
        self.colors = colors
        self.color_pairs = color_pairs
        self._can_change = can_change
        self._has_colors = has_colors
        self.palette: Dict[int, RGB] = {
            i: ((i * 4) % 1001,) * 3 for i in range(colors)
        }
        self.pairs: Dict[int, Tuple[int, int]] = {
            p: (p % 8, 0) for p in range(color_pairs)
        }
        self.writes = 0

    def _cell(self, row: int, col: int) -> List:
        if not (0 <= row < self.rows and 0 <= col < self.cols):
            raise IndexError(f"({row}, {col}) outside {self.rows}x{self.cols}")
        return self.cells[row][col]

    def size(self) -> Tuple[int, int]:
        return self.rows, self.cols

    def pair_at(self, row: int, col: int) -> int:
        return self._cell(row, col)[1]

    def glyph_at(self, row: int, col: int) -> str:
        return self._cell(row, col)[0]

    def put(self, row: int, col: int, glyph: str, pair: int):
        cell = self._cell(row, col)
        cell[0] = glyph
        cell[1] = pair
        self.writes += 1

    def recolor(self, row: int, col: int, pair: int):
        self._cell(row, col)[1] = pair
        self.writes += 1

    def set_background(self, pair: int):
        # cells still carrying the old background follow the new one
        for line in self.cells:
            for cell in line:
                if cell[1] == self.background:
                    cell[1] = pair
        self.background = pair

    def resize(self, rows: int, cols: int):
        cells = [[[' ', self.background] for _ in range(cols)] for _ in range(rows)]
        for r in range(min(rows, self.rows)):
            for c in range(min(cols, self.cols)):
                cells[r][c] = self.cells[r][c]
        self.rows, self.cols, self.cells = rows, cols, cells

    def snapshot(self) -> List[List[int]]:
        """Pair ids of every cell, row by row."""
        return [[cell[1] for cell in line] for line in self.cells]

    # palette

    def has_colors(self) -> bool:
        return self._has_colors

    def can_change_color(self) -> bool:
        return self._can_change

    def color_content(self, index: int) -> RGB:
        return self.palette[index]

    def init_color(self, index: int, r: int, g: int, b: int):
        if not 0 <= index < self.colors:
            raise IndexError(f"color {index} out of range")
        self.palette[index] = (r, g, b)

    def pair_content(self, pair: int) -> Tuple[int, int]:
        return self.pairs[pair]

    def init_pair(self, pair: int, fg: int, bg: int):
        if not 0 < pair < self.color_pairs:
            raise IndexError(f"pair {pair} out of range")
        self.pairs[pair] = (fg, bg)
