from __future__ import annotations

import logging
from typing import Dict, List, Optional, Set

from .board import DIAGONAL, HORIZ, INTERSECTION, VERT, Place, as_place
from .regions import accrete_region, neighbors, opposing
from .state import PuzzleState, check_mark

logger = logging.getLogger(__name__)


def is_galaxy(state: PuzzleState, center, region: Set[Place]) -> bool:
    """
    Returns True iff REGION is a correctly formed galaxy around CENTER: it is
    symmetric about CENTER, has no interior boundaries, and no other center lies
    in it, on one of its cells' edges, or on one of its cells' corners.
    Assumes REGION is connected.
    """
    center = as_place(center)
    if not region:
        return False
    for cell in region:
        if cell != center and state.is_center(cell):
            logger.debug('galaxy %s rejected: foreign center at %s', tuple(center), tuple(cell))
            return False
        opp = opposing(state, center, cell)
        if opp is None or opp not in region:
            logger.debug('galaxy %s rejected: %s has no symmetric partner', tuple(center), tuple(cell))
            return False
        for edge, nxt in neighbors(state, cell):
            if state.is_boundary(edge) and nxt in region:
                logger.debug('galaxy %s rejected: interior boundary %s', tuple(center), tuple(edge))
                return False
            if edge != center and state.is_center(edge):
                logger.debug('galaxy %s rejected: foreign center on edge %s', tuple(center), tuple(edge))
                return False
        for dx, dy in DIAGONAL:
            corner = cell.move(dx, dy)
            if corner != center and state.is_center(corner):
                logger.debug('galaxy %s rejected: foreign center on corner %s', tuple(center), tuple(corner))
                return False
    return True


def _seeds(state: PuzzleState, center: Place) -> List[Place]:
    """Cells whose accretion makes up the candidate galaxy around CENTER."""
    kind = state.kind(center)
    if kind == HORIZ:
        return [center.move(0, 1), center.move(0, -1)]
    if kind == VERT:
        return [center.move(1, 0), center.move(-1, 0)]
    if kind == INTERSECTION:
        return [center.move(dx, dy) for dx, dy in DIAGONAL]
    return [center]


def find_galaxy(state: PuzzleState, center) -> Optional[Set[Place]]:
    """
    Returns the galaxy around CENTER: the boundary-enclosed connected region
    touching CENTER, provided it is symmetric about CENTER, holds no stray
    boundary edges and no other center. Returns None otherwise.
    CENTER must be on the board and off the periphery.
    """
    center = as_place(center)
    if not state.in_bounds(center) or state.on_periphery(center):
        raise ValueError(f'galaxy center must be inside the board: {tuple(center)}')
    region: Set[Place] = set()
    for seed in _seeds(state, center):
        accrete_region(state, seed, region)
    if is_galaxy(state, center, region):
        logger.debug('galaxy %s: %d cells', tuple(center), len(region))
        return region
    return None


def find_galaxies(state: PuzzleState) -> Dict[Place, Optional[Set[Place]]]:
    """Maps every center, in placement order, to its galaxy or None."""
    return {c: find_galaxy(state, c) for c in state.centers()}


def solved(state: PuzzleState) -> bool:
    """
    True iff every center has a galaxy and the galaxies tile the whole board.
    Galaxies must also be pairwise disjoint, so overlapping regions cannot
    add up to the cell count by accident.
    """
    centers = state.centers()
    if not centers:
        return False
    covered: Set[Place] = set()
    total = 0
    for c in centers:
        region = find_galaxy(state, c)
        if region is None:
            return False
        if not covered.isdisjoint(region):
            logger.debug('galaxy %s overlaps another galaxy', tuple(c))
            return False
        covered |= region
        total += len(region)
    return total == state.rows * state.cols


def mark_galaxies(state: PuzzleState, v: int) -> None:
    """Marks the cells of every well-formed galaxy with V and unmarks all others."""
    check_mark(v)
    state.mark_all(0)
    for c in state.centers():
        region = find_galaxy(state, c)
        if region is not None:
            state.mark_all(v, region)
