from __future__ import annotations

import argparse
import logging
from typing import List, Optional, Sequence

from .board import Place
from .galaxy import find_galaxy, mark_galaxies, solved
from .hints import max_unmarked_region
from .logging_config import setup_logging
from .state import DEFAULT_SIZE, PuzzleState


def _place_arg(text: str) -> Place:
    """Parses 'x,y' or 'x y' into a Place."""
    sep = ',' if ',' in text else ' '
    try:
        x_s, y_s = [t for t in text.split(sep) if t != '']
        return Place(int(x_s), int(y_s))
    except ValueError:
        raise argparse.ArgumentTypeError(f'expected x,y but got {text!r}')


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Galaxies puzzle board checker')
    parser.add_argument('--cols', type=int, default=DEFAULT_SIZE, help='Number of cell columns')
    parser.add_argument('--rows', type=int, default=DEFAULT_SIZE, help='Number of cell rows')
    parser.add_argument('--center', type=_place_arg, action='append', default=[], metavar='X,Y',
                        help='Place a galaxy center (repeatable)')
    parser.add_argument('--boundary', type=_place_arg, action='append', default=[], metavar='X,Y',
                        help='Toggle a boundary edge (repeatable)')
    parser.add_argument('--hint', type=_place_arg, action='append', default=[], metavar='X,Y',
                        help='Show the largest symmetric unmarked region around a point')
    parser.add_argument('--mark-galaxies', type=int, default=None, metavar='V',
                        help='Mark every well-formed galaxy with value V before printing')
    parser.add_argument('--verbose', action='store_true', help='Log debug output')
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else logging.WARNING)

    try:
        state = PuzzleState(args.cols, args.rows)
        for edge in args.boundary:
            state.toggle_boundary(edge)
        for c in args.center:
            state.place_center(c)
        if args.mark_galaxies is not None:
            mark_galaxies(state, args.mark_galaxies)
    except ValueError as e:
        parser.error(str(e))

    print(state.pretty(), end='')
    print('Solved' if solved(state) else 'Not solved')
    for c in state.centers():
        region = find_galaxy(state, c)
        if region is None:
            print(f'Center {tuple(c)}: no galaxy')
        else:
            print(f'Center {tuple(c)}: galaxy of {len(region)} cells')
    for point in args.hint:
        cells: List[Place] = sorted(max_unmarked_region(state, point))
        print(f'Hint {tuple(point)}:', [tuple(p) for p in cells])
    return 0


if __name__ == '__main__':
    raise SystemExit(main())
