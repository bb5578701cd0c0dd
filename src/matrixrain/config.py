from dataclasses import dataclass
from typing import Optional

# per frame, per column: chance a new drop starts at the top
DEFAULT_DENSITY = 0.001
# per frame, per head: chance it falls one row
DEFAULT_ROLL_RATE = 0.4
# per frame, per trail cell: chance it dims one level
DEFAULT_FADE_RATE = 0.2
# getch timeout doubles as the frame clock
DEFAULT_FRAME_MS = 80

# palette: the terminal must offer at least this many colors and pairs
MIN_PALETTE = 255

ASCII_GLYPHS = ''.join(chr(c) for c in range(33, 126))           # ! .. }
KATAKANA_GLYPHS = ''.join(chr(c) for c in range(0xFF66, 0xFF9E))  # ｦ .. ﾝ

CHARSETS = {
    'ascii': ASCII_GLYPHS,
    'katakana': KATAKANA_GLYPHS,
    'mixed': ASCII_GLYPHS + KATAKANA_GLYPHS,
}
DEFAULT_CHARSET = 'ascii'


@dataclass
class RainConfig:
    density: float = DEFAULT_DENSITY
    roll_rate: float = DEFAULT_ROLL_RATE
    fade_rate: float = DEFAULT_FADE_RATE
    charset: str = DEFAULT_CHARSET
    frame_ms: int = DEFAULT_FRAME_MS
    seed: Optional[int] = None

    @property
    def glyphs(self) -> str:
        return CHARSETS[self.charset]
