"""
bfs.py — Breadth-First Search
==============================
Generator-based BFS over the grid.  Yields a Step at every cell that
gets marked visited, then one final step with the shortest path
reconstructed from the parent map (or an empty path).

Cells are marked visited when dequeued, so a cell may sit in the queue
more than once and have its parent overwritten before it is expanded.
On a grid every neighbour of a cell lies exactly one BFS layer away,
so whichever parent is kept is still one step closer to the start and
the reconstructed path is a shortest one.
"""

import logging
from collections import deque
from typing import Deque, Dict, Generator, List

from grid import Grid, Cell
from algorithms.step import Step, StepBuilder, Pos

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Pseudocode — each string is one displayed line; index = pseudocode_line
# ---------------------------------------------------------------------------
PSEUDOCODE: List[str] = [
    "def BFS(grid, start, end):",                  # 0
    "    queue ← [start]",                         # 1
    "    parent ← {}",                             # 2
    "    while queue is not empty:",               # 3
    "        cell ← queue.dequeue()",              # 4
    "        if cell == end:",                     # 5
    "            return walk parent back from end",  # 6
    "        if cell not visited and not wall:",   # 7
    "            visited.add(cell)",               # 8
    "            for nbr in (down, right, up, left):", # 9
    "                if nbr not visited:",         # 10
    "                    queue.enqueue(nbr)",      # 11
    "                    parent[nbr] = cell",      # 12
    "    return []",                               # 13
]


# ---------------------------------------------------------------------------
# Generator
# ---------------------------------------------------------------------------
def bfs(
    grid: Grid,
    start: Cell,
    end: Cell,
) -> Generator[Step, None, None]:
    """
    Yields Step snapshots for every visit during BFS execution.

    Args:
        grid  : The board; wall status is read from it.
        start : Starting cell.
        end   : Goal cell.

    Yields:
        Step – one per visited cell, then one final step carrying the path.
    """

    sb      = StepBuilder()
    visited = [[False] * grid.cols for _ in range(grid.rows)]
    queue:  Deque[Cell]    = deque([grid.cell(start.x, start.y)])
    parent: Dict[Pos, Pos] = {}

    while queue:
        cell = queue.popleft()

        # -- target check --
        if cell.pos == end.pos:
            path = _reconstruct(parent, cell.pos)
            sb.current         = cell.pos
            sb.set_path(path)
            sb.set_frontier(queue)
            sb.pseudocode_line = 6
            sb.explanation     = (
                f"🎯 Dequeued the end cell {cell.pos}. Walking the parent links back "
                f"gives a shortest path of {len(path)} cell(s)."
            )
            logger.debug("BFS reached %s, path of %d cells", cell.pos, len(path))
            yield sb.emit(is_final=True)
            return

        if visited[cell.y][cell.x] or cell.is_wall:
            continue

        # -- visit --
        visited[cell.y][cell.x] = True
        sb.visit(cell.pos)
        sb.set_frontier(queue)
        sb.pseudocode_line = 8
        sb.explanation     = (
            f"Dequeue {cell.pos} and mark it VISITED. BFS always expands the cell "
            f"that was queued earliest, so the search spreads out layer by layer."
        )
        yield sb.emit()

        for nbr in grid.neighbours(cell):
            if not visited[nbr.y][nbr.x]:
                queue.append(nbr)
                parent[nbr.pos] = cell.pos

    # --- exhausted without finding target ---
    sb.pseudocode_line = 13
    sb.explanation     = f"Queue is empty. {end.pos} is NOT reachable from {start.pos}."
    logger.debug("BFS exhausted after %d visits, no path", len(sb.visited))
    yield sb.emit(is_final=True)


# ---------------------------------------------------------------------------
# Helper
# ---------------------------------------------------------------------------
def _reconstruct(parent: Dict[Pos, Pos], end: Pos) -> List[Pos]:
    path = [end]
    cur = end
    while cur in parent:
        cur = parent[cur]
        path.append(cur)
    path.reverse()
    return path
