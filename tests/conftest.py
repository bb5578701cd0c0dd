"""
Shared fixtures: scripted random streams and a stand-in for the curses
module, so nothing here needs a real terminal.
"""
import pytest

from matrixrain import Chance, MemorySurface


class Script:
    """A random() source that replays fixed values."""

    def __init__(self, values):
        self.values = list(values)

    def random(self):
        if not self.values:
            raise AssertionError("random stream exhausted")
        return self.values.pop(0)


class FakeCursesError(Exception):
    pass


class FakeCurses:
    """Just enough of the curses module for CursesSurface and app.draw."""

    error = FakeCursesError
    A_NORMAL = 0
    KEY_RESIZE = 410

    def __init__(self, colors=256, color_pairs=256, has_colors=True, can_change=True):
        self.COLORS = colors
        self.COLOR_PAIRS = color_pairs
        self._has_colors = has_colors
        self._can_change = can_change
        self.palette = {i: (i, i, i) for i in range(colors)}
        self.pairs = {p: (p % 8, 0) for p in range(color_pairs)}
        self.modes = []

    @staticmethod
    def color_pair(n):
        return n << 8

    @staticmethod
    def pair_number(attr):
        return (attr >> 8) & 0xff

    def has_colors(self):
        return self._has_colors

    def can_change_color(self):
        return self._can_change

    def color_content(self, i):
        return self.palette[i]

    def init_color(self, i, r, g, b):
        self.palette[i] = (r, g, b)

    def pair_content(self, p):
        return self.pairs[p]

    def init_pair(self, p, fg, bg):
        self.pairs[p] = (fg, bg)

    def raw(self):
        self.modes.append('raw')

    def noecho(self):
        self.modes.append('noecho')

    def curs_set(self, n):
        self.modes.append(f'curs_set({n})')


class FakeWindow:
    def __init__(self, rows, cols, keys=()):
        self.rows = rows
        self.cols = cols
        self.cells = {(y, x): (' ', 0) for y in range(rows) for x in range(cols)}
        self.bg_attr = 0
        self.keys = list(keys)
        self.timeouts = []
        self.text = []
        self.refreshes = 0

    def getmaxyx(self):
        return self.rows, self.cols

    def resize(self, rows, cols):
        for y in range(rows):
            for x in range(cols):
                self.cells.setdefault((y, x), (' ', self.bg_attr))
        self.rows, self.cols = rows, cols

    def inch(self, y, x):
        ch, attr = self.cells[(y, x)]
        # ncursesw: a non-ASCII glyph comes back as its bare code point
        if ord(ch) > 0x7f:
            return ord(ch)
        return ord(ch) | attr

    def addch(self, y, x, ch, attr):
        self.cells[(y, x)] = (ch, attr)
        if (y, x) == (self.rows - 1, self.cols - 1):
            raise FakeCursesError("addch() returned ERR")

    def chgat(self, y, x, n, attr):
        for i in range(n):
            ch, _ = self.cells[(y, x + i)]
            self.cells[(y, x + i)] = (ch, attr)

    def bkgd(self, ch, attr):
        for pos, (c, a) in self.cells.items():
            if a == self.bg_attr:
                self.cells[pos] = (c, attr)
        self.bg_attr = attr

    def keypad(self, flag):
        pass

    def timeout(self, ms):
        self.timeouts.append(ms)

    def getch(self):
        return self.keys.pop(0) if self.keys else ord('q')

    def erase(self):
        pass

    def addstr(self, y, x, text):
        self.text.append(text)

    def refresh(self):
        self.refreshes += 1


@pytest.fixture
def script():
    def make(*values):
        return Chance(rng=Script(values))
    return make


@pytest.fixture
def never():
    """A stream whose every draw is just below 1: only p=1 events happen."""
    class AlmostOne:
        def random(self):
            return 0.999999
    return Chance(rng=AlmostOne())


@pytest.fixture
def surface():
    return MemorySurface(6, 4)


@pytest.fixture
def fake_curses():
    return FakeCurses()
