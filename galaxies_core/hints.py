from __future__ import annotations

import logging
from typing import Iterable, List, Set

from .board import CELL, DIAGONAL, HORIZ, VERT, Place, as_place
from .regions import neighbors, opposing
from .state import PuzzleState

logger = logging.getLogger(__name__)


def unmarked_containing(state: PuzzleState, point) -> List[Place]:
    """
    Returns the cells touching POINT (the cell itself, the two cells on either
    side of an edge, or the four cells around an intersection) if all of them
    are valid and unmarked. Otherwise returns an empty list.
    """
    point = as_place(point)
    kind = state.kind(point)
    if kind is None:
        return []
    if kind == CELL:
        cells = [point]
    elif kind == VERT:
        cells = [point.move(-1, 0), point.move(1, 0)]
    elif kind == HORIZ:
        cells = [point.move(0, -1), point.move(0, 1)]
    else:
        cells = [point.move(dx, dy) for dx, dy in DIAGONAL]
    # mark() is None off the board, which also disqualifies the point.
    if all(state.mark(c) == 0 for c in cells):
        return cells
    return []


def unmarked_sym_adjacent(state: PuzzleState, center, region: Iterable[Place]) -> List[Place]:
    """
    Returns the cells c outside REGION such that c is unmarked, the cell opposite
    c through CENTER exists and is unmarked, and c is vertically or horizontally
    adjacent to a cell of REGION. Each cell appears at most once.
    """
    center = as_place(center)
    members = region if isinstance(region, (set, frozenset)) else set(region)
    result: List[Place] = []
    seen: Set[Place] = set()
    for r in members:
        for _edge, p in neighbors(state, r):
            if p in members or p in seen:
                continue
            opp = opposing(state, center, p)
            if opp is not None and state.mark(p) == 0 and state.mark(opp) == 0:
                result.append(p)
                seen.add(p)
    return result


def max_unmarked_region(state: PuzzleState, point) -> Set[Place]:
    """
    Returns the largest region around POINT that contains every cell touching
    POINT, consists only of unmarked cells, is symmetric about POINT and is
    contiguous. Boundaries and centers are ignored. Returns an empty set when
    the cells touching POINT are not all unmarked.

    The board is only read: growth is tracked in a private set.
    """
    point = as_place(point)
    region: Set[Place] = set(unmarked_containing(state, point))
    if not region:
        return region
    while True:
        ring = unmarked_sym_adjacent(state, point, region)
        if not ring:
            break
        region.update(ring)
    logger.debug('hint around %s: %d cells', tuple(point), len(region))
    return region
