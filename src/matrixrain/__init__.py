"""
matrixrain - digital rain for terminals that can redefine their palette.
"""
__version__ = "1.0.0"

from .chance import Chance
from .errors import CapabilityMissing, InsufficientPaletteCapacity, RainError
from .gradient import HEAD, UNKNOWN, Gradient
from .palette import PaletteManager, PaletteSnapshot, Ramp
from .rain import Rain
from .surface import CursesSurface, MemorySurface

__all__ = [
    'Chance',
    'CapabilityMissing',
    'InsufficientPaletteCapacity',
    'RainError',
    'HEAD',
    'UNKNOWN',
    'Gradient',
    'PaletteManager',
    'PaletteSnapshot',
    'Ramp',
    'Rain',
    'CursesSurface',
    'MemorySurface',
]
