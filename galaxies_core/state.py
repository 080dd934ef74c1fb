from __future__ import annotations

import logging
from typing import Dict, FrozenSet, Iterable, List, Optional, Set, Tuple

from . import board as geo
from .board import Kind, Place, as_place, pl

logger = logging.getLogger(__name__)

DEFAULT_SIZE = 7


def check_mark(v) -> None:
    if isinstance(v, bool) or not isinstance(v, int) or v < 0:
        raise ValueError(f'bad mark value: {v!r}')


class PuzzleState:
    """The editable state of a Galaxies board: boundaries, centers and cell marks.

    Cells sit at odd (x, y), intersections at even (x, y), and edges where the
    parities differ. (0, 0) is the bottom left corner and (2*cols, 2*rows) the
    top right one. The outer frame is always a boundary.
    """

    def __init__(self, cols: int = DEFAULT_SIZE, rows: int = DEFAULT_SIZE):
        self._xlim = 0
        self._ylim = 0
        self._boundaries: Set[Place] = set()
        self._centers: List[Place] = []
        self._center_set: Set[Place] = set()
        self._marks: Dict[Place, int] = {}
        self.resize(cols, rows)

    def copy(self) -> 'PuzzleState':
        """Returns an independent copy of this board."""
        other = PuzzleState.__new__(PuzzleState)
        other._xlim = self._xlim
        other._ylim = self._ylim
        other._boundaries = set(self._boundaries)
        other._centers = list(self._centers)
        other._center_set = set(self._center_set)
        other._marks = dict(self._marks)
        return other

    def resize(self, cols: int, rows: int) -> None:
        """Sets the board to COLS x ROWS cells and clears it."""
        if cols < 1 or rows < 1:
            raise ValueError(f'bad board size: {cols}x{rows}')
        self._xlim = 2 * cols + 1
        self._ylim = 2 * rows + 1
        self._boundaries = set()
        self._centers = []
        self._center_set = set()
        self._marks = {}
        logger.debug('board reset to %dx%d', cols, rows)

    def clear(self) -> None:
        """Removes centers, inner boundaries and marks without resizing."""
        self.resize(self.cols, self.rows)

    # ---------- Dimensions ----------

    @property
    def cols(self) -> int:
        return self._xlim // 2

    @property
    def rows(self) -> int:
        return self._ylim // 2

    @property
    def xlim(self) -> int:
        """Number of vertical edges and cells in a row."""
        return self._xlim

    @property
    def ylim(self) -> int:
        """Number of horizontal edges and cells in a column."""
        return self._ylim

    def cells(self) -> Iterable[Place]:
        """Iterates over all cells, bottom row first."""
        for y in range(1, self._ylim, 2):
            for x in range(1, self._xlim, 2):
                yield pl(x, y)

    # ---------- Classification ----------

    def kind(self, p) -> Optional[Kind]:
        p = as_place(p)
        return geo.classify(p.x, p.y, self._xlim, self._ylim)

    def in_bounds(self, p) -> bool:
        p = as_place(p)
        return geo.in_bounds(p.x, p.y, self._xlim, self._ylim)

    def is_cell(self, p) -> bool:
        p = as_place(p)
        return geo.is_cell(p.x, p.y, self._xlim, self._ylim)

    def is_edge(self, p) -> bool:
        p = as_place(p)
        return geo.is_edge(p.x, p.y, self._xlim, self._ylim)

    def is_vert(self, p) -> bool:
        p = as_place(p)
        return geo.is_vert(p.x, p.y, self._xlim, self._ylim)

    def is_horiz(self, p) -> bool:
        p = as_place(p)
        return geo.is_horiz(p.x, p.y, self._xlim, self._ylim)

    def is_intersection(self, p) -> bool:
        p = as_place(p)
        return geo.is_intersection(p.x, p.y, self._xlim, self._ylim)

    def on_periphery(self, p) -> bool:
        p = as_place(p)
        return geo.on_periphery(p.x, p.y, self._xlim, self._ylim)

    # ---------- Boundaries ----------

    def is_boundary(self, p) -> bool:
        """True iff P is a drawn boundary or an edge of the outer frame."""
        p = as_place(p)
        if p in self._boundaries:
            return True
        return self.is_edge(p) and self.on_periphery(p)

    def toggle_boundary(self, edge) -> None:
        """Negates is_boundary(EDGE). Frame edges stay boundaries."""
        edge = as_place(edge)
        if not self.is_edge(edge):
            raise ValueError(f'not an edge: {tuple(edge)}')
        if self.is_boundary(edge):
            self._boundaries.discard(edge)
        else:
            self._boundaries.add(edge)

    def boundaries(self) -> FrozenSet[Place]:
        """The drawn boundaries (the frame is implicit)."""
        return frozenset(self._boundaries)

    # ---------- Centers ----------

    def is_center(self, p) -> bool:
        return as_place(p) in self._center_set

    def place_center(self, p) -> None:
        p = as_place(p)
        if not self.in_bounds(p):
            raise ValueError(f'center out of bounds: {tuple(p)}')
        if self.on_periphery(p):
            raise ValueError(f'center on the periphery: {tuple(p)}')
        if p not in self._center_set:
            self._centers.append(p)
            self._center_set.add(p)

    def remove_center(self, p) -> None:
        p = as_place(p)
        if p in self._center_set:
            self._centers.remove(p)
            self._center_set.discard(p)

    def centers(self) -> Tuple[Place, ...]:
        return tuple(self._centers)

    # ---------- Marks ----------

    def mark(self, p) -> Optional[int]:
        """Returns the mark on cell P (0 if unmarked), or None if P is not a cell."""
        try:
            p = as_place(p)
        except ValueError:
            return None
        if not self.is_cell(p):
            return None
        return self._marks.get(p, 0)

    def set_mark(self, p, v: int) -> None:
        p = as_place(p)
        if not self.is_cell(p):
            raise ValueError(f'bad cell coordinates: {tuple(p)}')
        check_mark(v)
        self._marks[p] = v

    def mark_all(self, v: int, cells: Optional[Iterable] = None) -> None:
        """Sets the marks of CELLS to V, or of every cell ever marked if CELLS is None."""
        check_mark(v)
        targets = list(self._marks) if cells is None else [as_place(c) for c in cells]
        # Validate everything first so a bad cell leaves the marks untouched.
        for c in targets:
            if not self.is_cell(c):
                raise ValueError(f'bad cell coordinates: {tuple(c)}')
        for c in targets:
            self._marks[c] = v

    def marked_cells(self) -> Dict[Place, int]:
        return {p: v for p, v in self._marks.items() if v != 0}

    # ---------- Rendering ----------

    def pretty(self) -> str:
        """One character per coordinate, top row first."""
        lines: List[str] = []
        for y in range(self._ylim - 1, -1, -1):
            row: List[str] = []
            for x in range(self._xlim):
                p = pl(x, y)
                cent = self.is_center(p)
                if self.is_intersection(p):
                    row.append('o' if cent else ' ')
                elif self.is_cell(p):
                    marked = (self.mark(p) or 0) > 0
                    if cent:
                        row.append('O' if marked else 'o')
                    else:
                        row.append('*' if marked else ' ')
                else:
                    bound = self.is_boundary(p)
                    if cent:
                        row.append('O' if bound else 'o')
                    elif self.is_horiz(p):
                        row.append('=' if bound else '-')
                    else:
                        row.append('I' if bound else '|')
            lines.append(''.join(row) + '\n')
        return ''.join(lines)

    def __str__(self) -> str:
        return self.pretty()

    def __repr__(self) -> str:
        return (f'PuzzleState(cols={self.cols}, rows={self.rows}, '
                f'centers={len(self._centers)}, boundaries={len(self._boundaries)})')
