"""
grid/
-----
Pathfinding board.  Public API:

    from grid import Grid, Cell, CellType, DIRECTIONS
"""

from grid.cell import Cell, CellType
from grid.grid import Grid, DIRECTIONS

__all__ = [
    "Cell",      "CellType",
    "Grid",      "DIRECTIONS",
]
