"""
Errors raised while constructing the rain engine.

Both kinds are detected before any palette slot is touched; once a Rain
exists, painting never fails.
"""


class RainError(Exception):
    """Base class for terminals the engine refuses to run on."""


class CapabilityMissing(RainError):
    """The surface has no colour support or cannot redefine palette entries."""


class InsufficientPaletteCapacity(RainError):
    def __init__(self, required: int, colors: int, color_pairs: int):
        self.required = required
        self.colors = colors
        self.color_pairs = color_pairs
        super().__init__(
            f"need {required} colors and color pairs, "
            f"terminal has {colors} colors and {color_pairs} pairs"
        )
