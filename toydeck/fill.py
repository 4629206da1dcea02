#!/usr/bin/env python3
"""Render the 52-card deck as a grid of symbols, one suit per line.

Each line starts and ends with the suit's own symbol, with the suit's 13 cards
in ordinal order between them.
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional, Union

from .cards import cards as _c
from .config import SymbolStyle, config


def _cell(card_code: int, style: SymbolStyle) -> str:
    if style == SymbolStyle.ABBR:
        return _c.go_string(card_code)
    return _c.symbol(card_code)


def fill52_lines(style: SymbolStyle = SymbolStyle.UNICODE) -> List[str]:
    """Build the four grid lines in ordinal order (Spades, Hearts, Diamonds, Clubs)."""
    sep = " " if style == SymbolStyle.ABBR else ""
    lines = []
    row: List[str] = []
    for ordinal in range(52):
        card = _c.new_ord52(ordinal)
        if ordinal % _c.STRIDE52 == 0:
            row = [_cell(_c.suit(card), style)]
        row.append(_cell(card, style))
        if ordinal % _c.STRIDE52 == _c.STRIDE52 - 1:
            row.append(_cell(_c.suit(card), style))
            lines.append(sep.join(row))
    return lines


def render_fill52(style: SymbolStyle = SymbolStyle.UNICODE) -> str:
    return "".join(line + "\n" for line in fill52_lines(style))


def write_fill52(path: Union[str, Path], style: SymbolStyle = SymbolStyle.UNICODE) -> Path:
    """Write the grid to path as UTF-8 and return the path."""
    path = Path(path)
    path.write_text(render_fill52(style), encoding="utf-8")
    return path


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="Write the 52-card symbol grid")
    ap.add_argument("-o", "--output", default=config.fill_path, help="Output file path")
    ap.add_argument("--stdout", action="store_true", help="Print the grid instead of writing a file")
    ap.add_argument(
        "--style",
        default=config.symbol_style.value,
        choices=[s.value for s in SymbolStyle],
        help="Unicode playing-card glyphs or ASCII abbreviations",
    )
    ap.add_argument("--verbose", action="store_true", default=config.verbose)
    args = ap.parse_args(argv)

    style = SymbolStyle(args.style)
    if args.stdout:
        sys.stdout.write(render_fill52(style))
        return 0

    try:
        path = write_fill52(args.output, style)
    except OSError as e:
        print(f"Error: could not write {args.output}: {e}", file=sys.stderr)
        return 1

    if args.verbose:
        print(f"Wrote 52-card grid ({style.value}) to {path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
