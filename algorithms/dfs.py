"""
dfs.py — Depth-First Search
=============================
Generator-based DFS over the grid using an explicit stack.

Yields a Step at:
  1. Every cell that gets marked visited (wall / visited cells are
     filtered when popped, never when pushed)
  2. The end: target popped  →  path, or stack empty  →  no path

The "path" this search returns is its visit order with the target
appended.  It is what the search walked, not a connecting route, and
consecutive cells in it are not necessarily adjacent.
"""

import logging
from typing import Generator, List

from grid import Grid, Cell
from algorithms.step import Step, StepBuilder

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Pseudocode
# ---------------------------------------------------------------------------
PSEUDOCODE: List[str] = [
    "def DFS(grid, start, end):",                  # 0
    "    stack ← [start]",                         # 1
    "    order ← []",                              # 2
    "    while stack is not empty:",               # 3
    "        cell ← stack.pop()",                  # 4
    "        if cell == end:",                     # 5
    "            return order + [end]",            # 6
    "        if cell not visited and not wall:",   # 7
    "            visited.add(cell); order.add(cell)",  # 8
    "            for nbr in (down, right, up, left):", # 9
    "                stack.push(nbr)",             # 10
    "    return []",                               # 11
]


# ---------------------------------------------------------------------------
# Generator
# ---------------------------------------------------------------------------
def dfs(
    grid: Grid,
    start: Cell,
    end: Cell,
) -> Generator[Step, None, None]:
    """
    Iterative DFS.  Neighbours are pushed in the order down, right, up,
    left, so the last one pushed (left) is the first one explored.

    Args:
        grid  : The board; wall status is read from it.
        start : Starting cell.
        end   : Goal cell.

    Yields:
        Step – one per visited cell, then one final step carrying the path.
    """

    sb      = StepBuilder()
    visited = [[False] * grid.cols for _ in range(grid.rows)]
    order:  List[Cell] = []
    stack:  List[Cell] = [grid.cell(start.x, start.y)]

    while stack:
        cell = stack.pop()

        # -- target check (before the wall / visited filter) --
        if cell.pos == end.pos:
            order.append(cell)
            sb.current         = cell.pos
            sb.set_path([c.pos for c in order])
            sb.set_frontier(stack)
            sb.pseudocode_line = 6
            sb.explanation     = (
                f"🎯 Popped the end cell {cell.pos}. DFS reports the {len(order)} cell(s) "
                f"it walked to get here. That is the order it explored, not the shortest route."
            )
            logger.debug("DFS reached %s after %d visits", cell.pos, len(order) - 1)
            yield sb.emit(is_final=True)
            return

        if visited[cell.y][cell.x] or cell.is_wall:
            continue

        # -- visit --
        visited[cell.y][cell.x] = True
        order.append(cell)
        sb.visit(cell.pos)
        sb.set_frontier(stack)
        sb.pseudocode_line = 8
        sb.explanation     = (
            f"Pop {cell.pos} from the stack and mark it VISITED. Its neighbours go on "
            f"top of the stack, so DFS keeps diving from here before backtracking."
        )
        yield sb.emit()

        stack.extend(grid.neighbours(cell))

    # --- not found ---
    sb.pseudocode_line = 11
    sb.explanation     = f"Stack empty. {end.pos} is not reachable from {start.pos}."
    logger.debug("DFS exhausted after %d visits, no path", len(order))
    yield sb.emit(is_final=True)
