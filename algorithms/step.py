"""
step.py — Algorithm Step Snapshot
==================================
Every algorithm is a generator that yields Step objects.
A Step is a frozen-in-time picture of everything the visualizer
needs to render one frame:

    • Traversal: the cell just visited, the visit order so far, the
      stack / queue contents, and (on the last step) the path
    • Sorting:   a full copy of the array after one swap, plus which
      indices moved and where the pivot sits
    • Which line of pseudocode is executing right now
    • A plain-English explanation of *why* this step happened

Design decisions:
  - Step is a plain dataclass.  It is a SNAPSHOT: every list on it is a
    copy, so later mutations of the grid / array never leak into frames
    that were already handed out.
  - A run is a sequence of non-final steps (one per visited cell or per
    swap) followed by exactly one step with is_final=True.
  - Coordinates are (x, y) tuples, not Cell references, so steps stay
    serialisable.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

Pos = Tuple[int, int]


@dataclass(frozen=True)
class Step:
    """
    Attributes:
        step_number     : 0-based index of this step in the run.
        current         : (x, y) of the cell visited at this step (traversal).
        visited         : Visit order so far (traversal).
        frontier        : Stack (DFS) or queue (BFS) contents, next-out last for DFS.
        path            : Returned path; only filled on the final traversal step.
        array           : Array snapshot after this step (sorting).
        swapped         : Indices exchanged at this step (sorting).
        pivot           : Index of the pivot for the current partition (quick sort).
        pseudocode_line : 0-based index of the pseudocode line executing now.
        explanation     : Human-readable "why" text for the learning panel.
        metrics         : Running tally: cells_visited, path_length, swaps.
        is_final        : True on the very last step.
    """

    step_number:      int                  = 0
    current:          Optional[Pos]        = None
    visited:          List[Pos]            = field(default_factory=list)
    frontier:         List[Pos]            = field(default_factory=list)
    path:             List[Pos]            = field(default_factory=list)
    array:            List[int]            = field(default_factory=list)
    swapped:          Tuple[int, ...]      = ()
    pivot:            Optional[int]        = None
    pseudocode_line:  int                  = 0
    explanation:      str                  = ""
    metrics:          Dict[str, Any]       = field(default_factory=dict)
    is_final:         bool                 = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            "step_number":     self.step_number,
            "current":         list(self.current) if self.current else None,
            "path":            [list(p) for p in self.path],
            "array":           list(self.array),
            "swapped":         list(self.swapped),
            "pivot":           self.pivot,
            "pseudocode_line": self.pseudocode_line,
            "explanation":     self.explanation,
            "is_final":        self.is_final,
        }


# ---------------------------------------------------------------------------
# Convenience builder so algorithms don't have to spell out every kwarg
# ---------------------------------------------------------------------------
class StepBuilder:
    """
    Scratch-pad the generators use to construct Steps.

    The visit order and metrics accumulate for the whole run; everything
    else is per step and cleared by reset().

        sb = StepBuilder()
        sb.visit((3, 4))
        sb.explanation = "Pop (3, 4) from the stack."
        yield sb.emit()
    """

    def __init__(self):
        self.step_no:  int            = 0
        self.visited:  List[Pos]      = []
        self.metrics:  Dict[str, Any] = {"cells_visited": 0, "path_length": 0, "swaps": 0}
        self.reset()

    def reset(self):
        self.current:          Optional[Pos]    = None
        self.frontier:         List[Pos]        = []
        self.path:             List[Pos]        = []
        self.array:            List[int]        = []
        self.swapped:          Tuple[int, ...]  = ()
        self.pivot:            Optional[int]    = None
        self.pseudocode_line:  int              = 0
        self.explanation:      str              = ""

    # -- helpers --
    def visit(self, pos: Pos):
        self.current = pos
        self.visited.append(pos)
        self.metrics["cells_visited"] = len(self.visited)

    def set_frontier(self, cells):
        self.frontier = [c.pos for c in cells]

    def set_path(self, path: List[Pos]):
        self.path = list(path)
        self.metrics["path_length"] = len(path)

    def swap(self, i: int, j: int, values: List[int]):
        self.swapped = (i, j)
        self.array = list(values)
        self.metrics["swaps"] += 1

    def build(self, step_number: int = 0, is_final: bool = False) -> Step:
        return Step(
            step_number=step_number,
            current=self.current,
            visited=list(self.visited),
            frontier=list(self.frontier),
            path=list(self.path),
            array=list(self.array),
            swapped=tuple(self.swapped),
            pivot=self.pivot,
            pseudocode_line=self.pseudocode_line,
            explanation=self.explanation,
            metrics=dict(self.metrics),
            is_final=is_final,
        )

    def emit(self, is_final: bool = False) -> Step:
        """Build the next numbered step and clear the per-step fields."""
        step = self.build(step_number=self.step_no, is_final=is_final)
        self.step_no += 1
        self.reset()
        return step
