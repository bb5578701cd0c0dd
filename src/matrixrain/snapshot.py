#!/usr/bin/env python3
"""
Render a headless rain run to a PNG.

Usage:
    matrixrain-snapshot --rows 24 --cols 80 --frames 200 --seed 7 --out rain.png

Runs the engine on an in-memory surface, then paints every cell with the
colors its pair resolves to, so palette changes can be checked without a
256-color terminal.
"""
import argparse
import os
from typing import Optional, Tuple

from PIL import Image, ImageDraw, ImageFont

from .app import probability
from .chance import Chance
from .config import CHARSETS, DEFAULT_CHARSET, DEFAULT_DENSITY, DEFAULT_FADE_RATE, DEFAULT_ROLL_RATE
from .rain import Rain
from .surface import MemorySurface

DEFAULT_CELL = (10, 16)  # width, height in pixels


def to_rgb(rgb: Tuple[int, int, int]) -> Tuple[int, int, int]:
    # curses channels run 0..1000
    return tuple(round(c * 255 / 1000) for c in rgb)


def render(surface: MemorySurface, cell: Tuple[int, int] = DEFAULT_CELL, font=None) -> Image.Image:
    font = font or ImageFont.load_default()
    cw, ch = cell
    img = Image.new('RGB', (surface.cols * cw, surface.rows * ch), (0, 0, 0))
    draw = ImageDraw.Draw(img)

    for y in range(surface.rows):
        for x in range(surface.cols):
            glyph = surface.glyph_at(y, x)
            fg_index, bg_index = surface.pair_content(surface.pair_at(y, x))
            fg = to_rgb(surface.color_content(fg_index))
            bg = to_rgb(surface.color_content(bg_index))
            cx, cy = x * cw, y * ch
            draw.rectangle((cx, cy, cx + cw - 1, cy + ch - 1), fill=bg)
            if glyph != ' ':
                # center glyph in cell
                bbox = font.getbbox(glyph)
                gw = bbox[2] - bbox[0]
                gh = bbox[3] - bbox[1]
                gx = cx + (cw - gw) // 2 - bbox[0]
                gy = cy + (ch - gh) // 2 - bbox[1]
                draw.text((gx, gy), glyph, font=font, fill=fg)
    return img


def snapshot(rows: int, cols: int, frames: int, seed: Optional[int] = None,
             density: float = DEFAULT_DENSITY, roll_rate: float = DEFAULT_ROLL_RATE,
             fade_rate: float = DEFAULT_FADE_RATE, charset: str = DEFAULT_CHARSET,
             cell: Tuple[int, int] = DEFAULT_CELL, font=None) -> Image.Image:
    """Run `frames` frames and render the screen as it stands before teardown."""
    surface = MemorySurface(rows, cols)
    with Rain(surface, density, roll_rate, fade_rate, CHARSETS[charset],
              chance=Chance(seed)) as rain:
        for _ in range(frames):
            rain.paint()
        return render(surface, cell, font)


def main(argv=None):
    p = argparse.ArgumentParser(prog='matrixrain-snapshot')
    p.add_argument('--rows', type=int, default=24)
    p.add_argument('--cols', type=int, default=80)
    p.add_argument('--frames', type=int, default=200)
    p.add_argument('--seed', type=int, default=None)
    p.add_argument('--density', type=probability, default=0.05)
    p.add_argument('--roll-rate', type=probability, default=DEFAULT_ROLL_RATE)
    p.add_argument('--fade-rate', type=probability, default=DEFAULT_FADE_RATE)
    p.add_argument('--charset', choices=sorted(CHARSETS), default=DEFAULT_CHARSET)
    p.add_argument('--font', default=None, help="TrueType font, default is PIL's bitmap font")
    p.add_argument('--size', type=int, default=14)
    p.add_argument('--cell', type=int, nargs=2, default=list(DEFAULT_CELL), metavar=('W', 'H'))
    p.add_argument('--out', default='rain.png')
    args = p.parse_args(argv)

    font = ImageFont.truetype(args.font, args.size) if args.font else None
    img = snapshot(args.rows, args.cols, args.frames, args.seed,
                   args.density, args.roll_rate, args.fade_rate, args.charset,
                   tuple(args.cell), font)

    out_dir = os.path.dirname(args.out)
    if out_dir:
        os.makedirs(out_dir, exist_ok=True)
    img.save(args.out)


if __name__ == '__main__':
    main()
