"""
The rain itself: a cellular automaton whose only state is the screen.

Every frame, each cell is decoded from the pair id the surface reports:

  HEAD   -> maybe roll: this cell drops to the brightest trail level and the
            cell below (if any) becomes the new head with a fresh glyph
  level  -> maybe fade one level toward the background

then each column may start a new drop at row 0.  Heads written below are
visited later in the same pass, so a lucky drop can fall several rows in
one frame.
"""
from typing import Optional

from .chance import Chance
from .config import MIN_PALETTE
from .debug import log
from .errors import CapabilityMissing, InsufficientPaletteCapacity
from .gradient import DEFAULT_OFFSET, DEFAULT_STEPS, HEAD, UNKNOWN, Gradient
from .palette import PaletteManager, Ramp


def _probability(name: str, p: float) -> float:
    if not 0.0 <= p <= 1.0:
        raise ValueError(f"{name} must be within [0, 1], got {p}")
    return p


def check_surface(surface, gradient: Gradient):
    """Raise unless the surface can host the gradient's palette."""
    has_colors = surface.has_colors()
    can_change = surface.can_change_color()
    log(f'capabilities: has_colors={has_colors} can_change_color={can_change} '
        f'colors={surface.colors} pairs={surface.color_pairs}')
    if not has_colors:
        raise CapabilityMissing("This terminal does not have access to color")
    if not can_change:
        raise CapabilityMissing("This terminal cannot redefine its colors")

    required = max(MIN_PALETTE, gradient.head_id + 1)
    if surface.colors < required or surface.color_pairs < required:
        raise InsufficientPaletteCapacity(required, surface.colors, surface.color_pairs)


class Rain:
    def __init__(self, surface, density: float, roll_rate: float, fade_rate: float,
                 charset, chance: Optional[Chance] = None,
                 offset: int = DEFAULT_OFFSET, steps: int = DEFAULT_STEPS,
                 ramp: Optional[Ramp] = None):
        self.density = _probability('density', density)
        self.roll_rate = _probability('roll_rate', roll_rate)
        self.fade_rate = _probability('fade_rate', fade_rate)
        self.charset = list(charset)
        if not self.charset:
            raise ValueError("charset is empty")

        self.surface = surface
        self.chance = chance or Chance()
        self.gradient = Gradient(offset, steps)
        check_surface(surface, self.gradient)

        self._palette = PaletteManager(surface, self.gradient, ramp)
        self._palette.acquire()
        try:
            self.surface.set_background(self.gradient.encode(self.gradient.background))
        except Exception:
            self._palette.release()
            raise

    def close(self):
        self._palette.release()

    def __enter__(self) -> 'Rain':
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False

    def state(self, row: int, col: int):
        return self.gradient.decode(self.surface.pair_at(row, col))

    def paint(self):
        rows, cols = self.surface.size()
        for col in range(cols):
            for row in range(rows):
                state = self.state(row, col)
                if state is HEAD:
                    if self.chance.happens(self.roll_rate):
                        self._roll(row, col, rows)
                elif self.chance.happens(self.fade_rate):
                    self._fade(row, col, state)
            if self.chance.happens(self.density) and rows and self.state(0, col) is not HEAD:
                self._highlight(0, col)

    def _roll(self, row: int, col: int, rows: int):
        g = self.gradient
        self.surface.recolor(row, col, g.encode(g.brightest))
        # last row: the drop just ends here
        if row + 1 < rows:
            self._highlight(row + 1, col)

    def _fade(self, row: int, col: int, state):
        faded = self.gradient.fade(state)
        if faded is UNKNOWN or faded == state:
            return
        self.surface.recolor(row, col, self.gradient.encode(faded))

    def _highlight(self, row: int, col: int):
        glyph = self.chance.choice(self.charset)
        self.surface.put(row, col, glyph, self.gradient.head_id)
