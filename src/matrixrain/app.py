#!/usr/bin/env python3
"""
matrixrain - falling green glyphs for 256-color terminals

Press q to quit.
"""
import argparse
import curses
import os
import sys
from typing import List, Optional

from . import __version__
from .chance import Chance
from .config import (
    CHARSETS,
    DEFAULT_CHARSET,
    DEFAULT_DENSITY,
    DEFAULT_FADE_RATE,
    DEFAULT_FRAME_MS,
    DEFAULT_ROLL_RATE,
    RainConfig,
)
from .debug import log
from .errors import RainError
from .rain import Rain
from .surface import CursesSurface

QUIT_KEYS = (ord('q'), ord('Q'))


def probability(text: str) -> float:
    value = float(text)
    if not 0.0 <= value <= 1.0:
        raise argparse.ArgumentTypeError(f"{text} is not within [0, 1]")
    return value


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog='matrixrain', description=__doc__,
                                formatter_class=argparse.RawDescriptionHelpFormatter)
    p.add_argument('--density', type=probability, default=DEFAULT_DENSITY,
                   help="chance per frame that a column starts a new drop")
    p.add_argument('--roll-rate', type=probability, default=DEFAULT_ROLL_RATE,
                   help="chance per frame that a drop falls one row")
    p.add_argument('--fade-rate', type=probability, default=DEFAULT_FADE_RATE,
                   help="chance per frame that a trail cell dims one step")
    p.add_argument('--charset', choices=sorted(CHARSETS), default=DEFAULT_CHARSET)
    p.add_argument('--frame-ms', type=int, default=DEFAULT_FRAME_MS,
                   help="milliseconds to wait for input between frames")
    p.add_argument('--seed', type=int, default=None)
    p.add_argument('--version', action='version', version=f'%(prog)s {__version__}')
    return p


def parse_config(argv: Optional[List[str]] = None) -> RainConfig:
    args = build_parser().parse_args(argv)
    if args.frame_ms < 1:
        build_parser().error("--frame-ms must be at least 1")
    return RainConfig(
        density=args.density,
        roll_rate=args.roll_rate,
        fade_rate=args.fade_rate,
        charset=args.charset,
        frame_ms=args.frame_ms,
        seed=args.seed,
    )


def show_message(stdscr, message: str):
    """Center a message, wait for any key."""
    h, w = stdscr.getmaxyx()
    text = message[:max(0, w - 1)]
    try:
        stdscr.erase()
        stdscr.addstr(h // 2, max(0, (w - len(text)) // 2), text)
        stdscr.refresh()
    except curses.error:
        pass
    stdscr.timeout(-1)
    stdscr.getch()


def draw(stdscr, cfg: RainConfig) -> int:
    curses.raw()
    curses.noecho()
    stdscr.keypad(True)
    curses.curs_set(0)

    surface = CursesSurface(stdscr)
    try:
        rain = Rain(surface, cfg.density, cfg.roll_rate, cfg.fade_rate,
                    cfg.glyphs, chance=Chance(cfg.seed))
    except RainError as e:
        log(f'refusing to start: {e}')
        show_message(stdscr, f"{e}... exiting")
        return 1

    with rain:
        stdscr.timeout(cfg.frame_ms)
        h, w = stdscr.getmaxyx()
        while True:
            k = stdscr.getch()
            if k in QUIT_KEYS:
                break
            if k == curses.KEY_RESIZE:
                nh, nw = stdscr.getmaxyx()
                if (nh, nw) != (h, w):
                    log(f'resized {h}x{w} -> {nh}x{nw}')
                    h, w = nh, nw
            rain.paint()
            stdscr.refresh()
    return 0


def run(cfg: RainConfig) -> int:
    log('matrixrain starting')
    log(f'TERM={os.environ.get("TERM")}, COLORTERM={os.environ.get("COLORTERM")}')
    try:
        return curses.wrapper(draw, cfg)
    except KeyboardInterrupt:
        return 0
    except Exception as e:
        log(f'Unhandled exception in main: {e}')
        raise


def main(argv: Optional[List[str]] = None):
    cfg = parse_config(argv)
    sys.exit(run(cfg))


if __name__ == "__main__":
    main()
