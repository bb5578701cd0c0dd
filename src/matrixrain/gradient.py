"""
Fade levels <-> palette pair ids.

The rain keeps no grid of its own: a cell's state is whatever pair id the
surface reports for it.  Pairs offset .. offset+steps-1 are the trail
levels (offset being the invisible background), offset+steps is the head.
"""


class _Marker:
    __slots__ = ('name',)

    def __init__(self, name: str):
        self.name = name

    def __repr__(self) -> str:
        return self.name


HEAD = _Marker('HEAD')
# any pair id the engine never wrote (pair 0, someone else's pairs, ...)
UNKNOWN = _Marker('UNKNOWN')

DEFAULT_OFFSET = 1      # pair 0 is not editable
DEFAULT_STEPS = 20


class Gradient:
    def __init__(self, offset: int = DEFAULT_OFFSET, steps: int = DEFAULT_STEPS):
        if offset < 1:
            raise ValueError("offset must be >= 1, pair 0 cannot be redefined")
        if steps < 2:
            raise ValueError("a gradient needs at least 2 steps")
        self.offset = offset
        self.steps = steps
        self.background = 0
        self.brightest = steps - 1
        self.head_id = offset + steps

    @property
    def slots(self) -> range:
        """Every reserved id, trail levels then the head."""
        return range(self.offset, self.head_id + 1)

    def encode(self, state) -> int:
        if state is HEAD:
            return self.head_id
        if state is UNKNOWN or not 0 <= state <= self.brightest:
            raise ValueError(f"cannot encode {state!r}")
        return self.offset + state

    def decode(self, pair_id: int):
        if pair_id == self.head_id:
            return HEAD
        level = pair_id - self.offset
        if 0 <= level <= self.brightest:
            return level
        return UNKNOWN

    def fade(self, state):
        if state is HEAD:
            raise ValueError("heads only leave by rolling")
        if state is UNKNOWN:
            return UNKNOWN
        return max(self.background, state - 1)
