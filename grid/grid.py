"""
grid.py — Grid Container & Maze Generator
==========================================
Single source of truth for the pathfinding board.  The traversal
generators read it, the web layer edits it, the renderer draws it.

Responsibilities:
  1. Cell lookup & adjacency              (cell, in_bounds, neighbours)
  2. Random maze generation               (generate)
  3. Click edits                          (toggle_wall, set_start, set_end)
  4. Run bookkeeping                      (mark_visited, apply_path, reset_path)
  5. Serialisation round-trip             (to_dict / from_dict)

Design decisions:
  - Cells live in a row-major list of lists, `cells[y][x]`, and are never
    replaced individually.  A new maze is a new Grid.
  - `start` / `end` are tracked on the Grid so that moving a marker can
    clear the old one in the same call.
"""

import logging
import random
from typing import Dict, Iterator, List, Optional, Tuple

from grid.cell import Cell, CellType, TYPE_CODES, CODE_TYPES

logger = logging.getLogger(__name__)


# (dx, dy) — down, right, up, left.  Traversal push/enqueue order depends on it.
DIRECTIONS: List[Tuple[int, int]] = [(0, 1), (1, 0), (0, -1), (-1, 0)]


class Grid:
    """
    Attributes:
        rows, cols : Board size.
        cells      : cells[y][x] → Cell
        start      : The START cell, or None.
        end        : The END cell, or None.
    """

    def __init__(self, rows: int = 20, cols: int = 20):
        self.rows:  int                = rows
        self.cols:  int                = cols
        self.cells: List[List[Cell]]   = [[Cell(x, y) for x in range(cols)] for y in range(rows)]
        self.start: Optional[Cell]     = None
        self.end:   Optional[Cell]     = None

    # ==================================================================
    # LOOKUP
    # ==================================================================
    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.cols and 0 <= y < self.rows

    def cell(self, x: int, y: int) -> Cell:
        if not self.in_bounds(x, y):
            raise IndexError(f"Cell ({x}, {y}) is outside a {self.cols}x{self.rows} grid")
        return self.cells[y][x]

    def neighbours(self, cell: Cell) -> List[Cell]:
        """In-bounds 4-neighbours in DIRECTIONS order, walls included."""
        result = []
        for dx, dy in DIRECTIONS:
            nx, ny = cell.x + dx, cell.y + dy
            if self.in_bounds(nx, ny):
                result.append(self.cells[ny][nx])
        return result

    def iter_cells(self) -> Iterator[Cell]:
        for row in self.cells:
            yield from row

    def count(self, cell_type: CellType) -> int:
        return sum(1 for c in self.iter_cells() if c.type == cell_type)

    # ==================================================================
    # GENERATOR
    # ==================================================================
    @classmethod
    def generate(
        cls,
        rows: int = 20,
        cols: int = 20,
        wall_probability: float = 0.3,
        rng: Optional[random.Random] = None,
        seed: Optional[int] = None,
    ) -> "Grid":
        """
        Random maze: every cell is a wall with probability
        `wall_probability`, independently, drawn in row-major order.
        There is no connectivity guarantee.

        Pass `rng` (or `seed`) to make the result reproducible.
        """
        if rng is None:
            rng = random.Random(seed)

        g = cls(rows=rows, cols=cols)
        for cell in g.iter_cells():
            if rng.random() < wall_probability:
                cell.type = CellType.WALL

        logger.debug("Generated %dx%d maze with %d walls", cols, rows, g.count(CellType.WALL))
        return g

    # ==================================================================
    # EDITS
    # ==================================================================
    def toggle_wall(self, x: int, y: int) -> bool:
        """WALL ↔ EMPTY.  Start / end cells are not toggled."""
        cell = self.cell(x, y)
        if cell.is_marker:
            return False
        cell.type = CellType.EMPTY if cell.is_wall else CellType.WALL
        return True

    def set_start(self, x: int, y: int) -> Cell:
        cell = self.cell(x, y)
        if self.start is not None:
            self.start.type = CellType.EMPTY
        if cell == self.end:
            self.end = None
        cell.type = CellType.START
        self.start = cell
        return cell

    def set_end(self, x: int, y: int) -> Cell:
        cell = self.cell(x, y)
        if self.end is not None:
            self.end.type = CellType.EMPTY
        if cell == self.start:
            self.start = None
        cell.type = CellType.END
        self.end = cell
        return cell

    # ==================================================================
    # RUN BOOKKEEPING
    # ==================================================================
    def reset_path(self) -> None:
        """Wipe the previous run: PATH / VISITED back to EMPTY."""
        for cell in self.iter_cells():
            if cell.type in (CellType.PATH, CellType.VISITED):
                cell.type = CellType.EMPTY

    def mark_visited(self, cell: Cell) -> bool:
        target = self.cell(cell.x, cell.y)
        if target.type != CellType.EMPTY:
            return False
        target.type = CellType.VISITED
        return True

    def apply_path(self, path: List[Cell]) -> None:
        for c in path:
            target = self.cell(c.x, c.y)
            if not target.is_marker:
                target.type = CellType.PATH

    # ==================================================================
    # SERIALISATION
    # ==================================================================
    def to_dict(self) -> dict:
        return {
            "rows":  self.rows,
            "cols":  self.cols,
            "cells": ["".join(TYPE_CODES[c.type] for c in row) for row in self.cells],
            "start": list(self.start.pos) if self.start else None,
            "end":   list(self.end.pos) if self.end else None,
        }

    @classmethod
    def from_dict(cls, data: Dict) -> "Grid":
        g = cls(rows=data["rows"], cols=data["cols"])
        for y, line in enumerate(data["cells"]):
            for x, code in enumerate(line):
                g.cells[y][x].type = CODE_TYPES[code]
        if data.get("start"):
            g.start = g.cell(*data["start"])
        if data.get("end"):
            g.end = g.cell(*data["end"])
        return g

    def __repr__(self) -> str:
        return f"Grid(rows={self.rows}, cols={self.cols}, start={self.start}, end={self.end})"
