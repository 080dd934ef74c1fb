from __future__ import annotations

# Facade module that re-exports the Galaxies core functionality.
# Used by the Flask app and tests; single-responsibility modules live under galaxies_core/*.

from galaxies_core.board import (  # noqa: F401
    CELL,
    DIAGONAL,
    HORIZ,
    INTERSECTION,
    ORTHOGONAL,
    VERT,
    Kind,
    Place,
    as_place,
    classify,
    pl,
)
from galaxies_core.state import DEFAULT_SIZE, PuzzleState  # noqa: F401
from galaxies_core.regions import accrete_region, neighbors, opposing  # noqa: F401
from galaxies_core.galaxy import (  # noqa: F401
    find_galaxies,
    find_galaxy,
    is_galaxy,
    mark_galaxies,
    solved,
)
from galaxies_core.hints import (  # noqa: F401
    max_unmarked_region,
    unmarked_containing,
    unmarked_sym_adjacent,
)


def main() -> None:
    # CLI driver delegated to galaxies_core.cli
    from galaxies_core.cli import main as _main
    raise SystemExit(_main())


if __name__ == '__main__':
    main()
