"""
Borrowing a block of the terminal palette.

curses colors come in two global tables: color indices (an RGB triple,
0..1000 per channel) and color pairs (a foreground and background color
index).  A cell can only be colored through a pair, and changing a color
index changes every pair that uses it.

PaletteManager claims color indices and pairs offset .. offset+steps for the
gradient, remembers what was there, and puts it all back on release.
"""
from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple

from .debug import log
from .gradient import Gradient

MAX_SATURATION = 1000
CHANNELS = ('r', 'g', 'b')


@dataclass
class Ramp:
    channel: str = 'g'
    background: Tuple[int, int, int] = (0, 0, 0)
    highlight: Tuple[int, int, int] = (700, 700, 700)

    def level(self, i: int, steps: int) -> Tuple[int, int, int]:
        value = i * (MAX_SATURATION // steps)
        rgb = [0, 0, 0]
        rgb[CHANNELS.index(self.channel)] = value
        return tuple(rgb)


@dataclass
class PaletteSnapshot:
    colors: Dict[int, Tuple[int, int, int]] = field(default_factory=dict)
    pairs: Dict[int, Tuple[int, int]] = field(default_factory=dict)


class PaletteManager:
    def __init__(self, surface, gradient: Gradient, ramp: Optional[Ramp] = None):
        if ramp is not None and ramp.channel not in CHANNELS:
            raise ValueError(f"unknown channel {ramp.channel!r}")
        self.surface = surface
        self.gradient = gradient
        self.ramp = ramp or Ramp()
        self._saved = None

    @property
    def acquired(self) -> bool:
        return self._saved is not None

    def acquire(self) -> Gradient:
        if self._saved is not None:
            return self.gradient

        g = self.gradient
        saved = PaletteSnapshot()
        for i in g.slots:
            saved.colors[i] = self.surface.color_content(i)
            saved.pairs[i] = self.surface.pair_content(i)
        self._saved = saved
        try:
            self._define()
        except Exception:
            self.release()
            raise

        log(f'palette acquired: slots {g.offset}..{g.head_id}')
        return g

    def _define(self):
        g = self.gradient
        black = g.offset
        white = g.head_id
        self.surface.init_color(black, *self.ramp.background)
        self.surface.init_color(white, *self.ramp.highlight)
        for i in range(g.steps):
            index = g.offset + i
            if i:
                self.surface.init_color(index, *self.ramp.level(i, g.steps))
            self.surface.init_pair(index, index, black)
        # head: inverted, background-colored glyph on the highlight
        self.surface.init_pair(g.head_id, black, white)

    def release(self):
        saved, self._saved = self._saved, None
        if saved is None:
            return
        for index, rgb in saved.colors.items():
            self.surface.init_color(index, *rgb)
        for pair, (fg, bg) in saved.pairs.items():
            self.surface.init_pair(pair, fg, bg)
        log(f'palette restored: {len(saved.colors)} colors, {len(saved.pairs)} pairs')

    def __enter__(self) -> Gradient:
        return self.acquire()

    def __exit__(self, exc_type, exc, tb):
        self.release()
        return False
