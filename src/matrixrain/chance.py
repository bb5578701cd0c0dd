import random
from typing import Optional, Sequence


class Chance:
    """
    One shared uniform [0, 1) stream for every roll, fade, spawn and glyph
    pick.  Pass `rng` to drive it from anything with a random() method.
    """
    def __init__(self, seed: Optional[int] = None, rng=None):
        self._rng = rng if rng is not None else random.Random(seed)

    def random(self) -> float:
        return self._rng.random()

    def happens(self, p: float) -> bool:
        return self._rng.random() < p

    def index(self, n: int) -> int:
        if n <= 0:
            raise ValueError("cannot pick from nothing")
        return min(n - 1, int(self._rng.random() * n))

    def choice(self, seq: Sequence):
        return seq[self.index(len(seq))]
