from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

Kind = str  # 'cell', 'vert', 'horiz', 'intersection'

CELL: Kind = 'cell'
VERT: Kind = 'vert'
HORIZ: Kind = 'horiz'
INTERSECTION: Kind = 'intersection'

# Half-steps from a cell to its four edges (the neighbouring cell is twice as far).
ORTHOGONAL: Tuple[Tuple[int, int], ...] = ((0, 1), (1, 0), (0, -1), (-1, 0))
# Half-steps from a cell to its four corner intersections.
DIAGONAL: Tuple[Tuple[int, int], ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))


@dataclass(frozen=True, order=True)
class Place:
    """An (x, y) position on the board: a cell, an edge, or an intersection."""
    x: int
    y: int

    def move(self, dx: int, dy: int) -> 'Place':
        """Returns the place displaced by (dx, dy)."""
        return Place(self.x + dx, self.y + dy)

    def __iter__(self):
        yield self.x
        yield self.y


def pl(x: int, y: int) -> Place:
    return Place(x, y)


def coordinate(v) -> int:
    """Returns V if it is a plain integer, else raises ValueError. Never truncates."""
    if isinstance(v, bool) or not isinstance(v, int):
        raise ValueError(f'coordinate must be an integer: {v!r}')
    return v


def as_place(p) -> Place:
    """Accepts a Place or any (x, y) pair of integers."""
    if isinstance(p, Place):
        return p
    try:
        x, y = p
    except (TypeError, ValueError):
        raise ValueError(f'expected an (x, y) pair: {p!r}')
    return Place(coordinate(x), coordinate(y))


def in_bounds(x: int, y: int, xlim: int, ylim: int) -> bool:
    return 0 <= x < xlim and 0 <= y < ylim


def is_cell(x: int, y: int, xlim: int, ylim: int) -> bool:
    return in_bounds(x, y, xlim, ylim) and x % 2 == 1 and y % 2 == 1


def is_edge(x: int, y: int, xlim: int, ylim: int) -> bool:
    return in_bounds(x, y, xlim, ylim) and x % 2 != y % 2


def is_vert(x: int, y: int, xlim: int, ylim: int) -> bool:
    return is_edge(x, y, xlim, ylim) and x % 2 == 0


def is_horiz(x: int, y: int, xlim: int, ylim: int) -> bool:
    return is_edge(x, y, xlim, ylim) and y % 2 == 0


def is_intersection(x: int, y: int, xlim: int, ylim: int) -> bool:
    return in_bounds(x, y, xlim, ylim) and x % 2 == 0 and y % 2 == 0


def on_periphery(x: int, y: int, xlim: int, ylim: int) -> bool:
    """True for in-bounds points lying on the outer frame of the board."""
    return in_bounds(x, y, xlim, ylim) and (x == 0 or y == 0 or x == xlim - 1 or y == ylim - 1)


def classify(x: int, y: int, xlim: int, ylim: int) -> Optional[Kind]:
    """Returns the kind of (x, y), or None when it lies outside the board."""
    if not in_bounds(x, y, xlim, ylim):
        return None
    if is_cell(x, y, xlim, ylim):
        return CELL
    if is_vert(x, y, xlim, ylim):
        return VERT
    if is_horiz(x, y, xlim, ylim):
        return HORIZ
    return INTERSECTION
