"""
Galaxies core Python package.

Board geometry and pure puzzle logic for the Galaxies (Tentai Show) puzzle.
Modules:
- board.py: Place and the coordinate classifier
- state.py: PuzzleState (boundaries, centers, marks, text rendering)
- regions.py: boundary-respecting accretion and point reflection
- galaxy.py: galaxy validation, finding, solved check
- hints.py: largest symmetric unmarked region around a point
- cli.py: command line driver
"""
