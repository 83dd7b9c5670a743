"""
algorithms/__init__.py — Algorithm Selectors
=============================================
The closed set of algorithms the visualizer runs, one table per domain.

    from algorithms import get_traversal, get_sort

TRAVERSALS / SORTS are dicts:
    {
        "bfs": AlgoInfo(key, label, fn, pseudocode, …),
        …
    }

AlgoInfo is a lightweight dataclass.  The engine uses `fn`; the UI uses
the label, pseudocode and complexity strings.
"""

from dataclasses import dataclass
from typing import Callable, Dict, List

from algorithms.dfs         import dfs         as _dfs,         PSEUDOCODE as _dfs_pc
from algorithms.bfs         import bfs         as _bfs,         PSEUDOCODE as _bfs_pc
from algorithms.bubble_sort import bubble_sort as _bubble,      PSEUDOCODE as _bubble_pc
from algorithms.quick_sort  import quick_sort  as _quick,       PSEUDOCODE as _quick_pc
from algorithms.step        import Step, StepBuilder


class UnknownAlgorithm(ValueError):
    """Raised for a selector value outside the known set."""


# ---------------------------------------------------------------------------
# AlgoInfo — metadata card for each algorithm
# ---------------------------------------------------------------------------
@dataclass
class AlgoInfo:
    key:               str                    # selector value, e.g. "bfs"
    label:             str                    # human label, e.g. "Breadth-First Search"
    fn:                Callable               # the generator function
    pseudocode:        List[str]              # lines for the side-panel
    complexity_time:   str      = ""          # e.g. "O(V + E)"
    complexity_space:  str      = ""
    description:       str      = ""          # one-liner for the UI card


# ---------------------------------------------------------------------------
# Pathfinding
# ---------------------------------------------------------------------------
TRAVERSALS: Dict[str, AlgoInfo] = {

    "dfs": AlgoInfo(
        key="dfs", label="Depth-First Search", fn=_dfs, pseudocode=_dfs_pc,
        complexity_time="O(V + E)", complexity_space="O(V + E)",
        description="Dives deep before backtracking. Reports its visit order, not a shortest route.",
    ),

    "bfs": AlgoInfo(
        key="bfs", label="Breadth-First Search", fn=_bfs, pseudocode=_bfs_pc,
        complexity_time="O(V + E)", complexity_space="O(V)",
        description="Explores layer by layer. Finds a shortest path by step count.",
    ),
}


# ---------------------------------------------------------------------------
# Sorting
# ---------------------------------------------------------------------------
SORTS: Dict[str, AlgoInfo] = {

    "bubble": AlgoInfo(
        key="bubble", label="Bubble Sort", fn=_bubble, pseudocode=_bubble_pc,
        complexity_time="O(n²)", complexity_space="O(1)",
        description="Swaps neighbours that are out of order until nothing moves.",
    ),

    "quick": AlgoInfo(
        key="quick", label="Quick Sort", fn=_quick, pseudocode=_quick_pc,
        complexity_time="O(n log n) avg, O(n²) worst", complexity_space="O(log n) avg, O(n) worst",
        description="Partitions around the last element, then sorts each side.",
    ),
}


# ---------------------------------------------------------------------------
# Lookup helpers
# ---------------------------------------------------------------------------
def get_traversal(key: str) -> AlgoInfo:
    try:
        return TRAVERSALS[key]
    except (KeyError, TypeError):
        raise UnknownAlgorithm(f"Unknown pathfinding algorithm: {key!r}") from None


def get_sort(key: str) -> AlgoInfo:
    try:
        return SORTS[key]
    except (KeyError, TypeError):
        raise UnknownAlgorithm(f"Unknown sorting algorithm: {key!r}") from None


def list_traversals() -> List[AlgoInfo]:
    return list(TRAVERSALS.values())


def list_sorts() -> List[AlgoInfo]:
    return list(SORTS.values())


__all__ = [
    "AlgoInfo",
    "Step",
    "StepBuilder",
    "TRAVERSALS",
    "SORTS",
    "UnknownAlgorithm",
    "get_traversal",
    "get_sort",
    "list_traversals",
    "list_sorts",
]
