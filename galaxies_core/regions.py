from __future__ import annotations

from typing import Iterator, Optional, Set, Tuple

from .board import ORTHOGONAL, Place, as_place
from .state import PuzzleState


def neighbors(state: PuzzleState, cell: Place) -> Iterator[Tuple[Place, Place]]:
    """Yields (edge, next_cell) for the four orthogonal directions of a cell."""
    for dx, dy in ORTHOGONAL:
        yield cell.move(dx, dy), cell.move(2 * dx, 2 * dy)


def accrete_region(state: PuzzleState, seed, region: Set[Place]) -> Set[Place]:
    """
    Adds to REGION every cell reachable from SEED through vertical and horizontal
    moves that cross no boundary. Cells already in REGION are not expanded again.
    Uses an explicit stack so large boards do not hit the recursion limit.
    """
    seed = as_place(seed)
    if not state.is_cell(seed):
        raise ValueError(f'accretion seed is not a cell: {tuple(seed)}')
    stack = [seed]
    while stack:
        cell = stack.pop()
        if cell in region:
            continue
        region.add(cell)
        for edge, nxt in neighbors(state, cell):
            # Frame edges are boundaries, so nxt is always on the board here.
            if not state.is_boundary(edge) and nxt not in region:
                stack.append(nxt)
    return region


def opposing(state: PuzzleState, center, p) -> Optional[Place]:
    """Returns the cell opposite P through CENTER, or None if that is not a valid cell."""
    center = as_place(center)
    p = as_place(p)
    opp = Place(2 * center.x - p.x, 2 * center.y - p.y)
    if not state.is_cell(p) or not state.is_cell(opp) or state.on_periphery(opp):
        return None
    return opp
