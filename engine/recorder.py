"""
recorder.py — Run Recorder & Analytics
========================================
Records a complete algorithm run (all Steps) without pacing, then
computes the metrics the Analytics panel shows.  The web layer uses it
to produce the frame list the browser animates.

Usage:
    rec = Recorder()
    rec.start_traversal("bfs", grid, grid.start, grid.end)
    rec.run_to_completion()          # exhausts the generator
    rec.visit_frames()               # [(x, y), …] in visit order
    rec.metrics                      # the analytics card

    rec = Recorder()
    rec.start_sort("quick", values)  # `values` is sorted in place
    rec.run_to_completion()
    rec.sort_frames()                # [[…snapshot…], …]
"""

import logging
import time
from dataclasses import dataclass, asdict
from typing import Any, Dict, List, Optional

from grid import Grid, Cell
from algorithms import AlgoInfo, get_traversal, get_sort
from algorithms.step import Step, Pos
from engine.stepper import Stepper

logger = logging.getLogger(__name__)


class MissingEndpointError(ValueError):
    """Raised when a traversal is requested without a start or end cell."""


# ---------------------------------------------------------------------------
# Metrics dataclass — what the Analytics panel renders
# ---------------------------------------------------------------------------
@dataclass
class RunMetrics:
    algo_key:        str   = ""
    algo_label:      str   = ""
    domain:          str   = ""         # "pathfinding" or "sorting"
    cells_visited:   int   = 0
    path_length:     int   = 0          # number of cells in the returned path
    path_found:      bool  = False
    swaps:           int   = 0
    total_steps:     int   = 0          # number of Steps yielded
    wall_time_ms:    float = 0.0        # wall-clock time to run to completion

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


# ---------------------------------------------------------------------------
# Recorder
# ---------------------------------------------------------------------------
class Recorder:
    """
    Attributes:
        steps       : Full list of Steps from the run.
        metrics     : Computed RunMetrics (available after run_to_completion).
        stepper     : The underlying Stepper.
    """

    def __init__(self):
        self.steps:     List[Step]           = []
        self.metrics:   Optional[RunMetrics] = None
        self.stepper:   Optional[Stepper]    = None

        self._algo_info:  Optional[AlgoInfo] = None
        self._domain:     str                = ""

    # ------------------------------------------------------------------
    # Setup & run
    # ------------------------------------------------------------------
    def start_traversal(
        self,
        algo_key: str,
        grid: Grid,
        start: Optional[Cell],
        end: Optional[Cell],
    ) -> None:
        if start is None or end is None:
            raise MissingEndpointError("Please select start and end points")
        info = get_traversal(algo_key)
        self._begin(info, "pathfinding", info.fn(grid, start, end))
        logger.info("Pathfinding run: %s from %s to %s", info.key, start.pos, end.pos)

    def start_sort(self, algo_key: str, values: List[int]) -> None:
        info = get_sort(algo_key)
        self._begin(info, "sorting", info.fn(values))
        logger.info("Sorting run: %s on %d values", info.key, len(values))

    def run_to_completion(self) -> RunMetrics:
        """Exhaust the generator, record every step, compute metrics."""
        if self.stepper is None:
            raise RuntimeError("Call start_traversal() or start_sort() first.")

        started = time.monotonic()
        self.stepper.jump_to_end()
        self.steps = list(self.stepper.steps)
        wall_ms = (time.monotonic() - started) * 1000

        self.metrics = self._compute_metrics(wall_ms)
        logger.info(
            "%s finished: %d steps in %.2f ms",
            self.metrics.algo_label, self.metrics.total_steps, self.metrics.wall_time_ms,
        )
        return self.metrics

    # ------------------------------------------------------------------
    # Frames for the browser
    # ------------------------------------------------------------------
    @property
    def final_step(self) -> Optional[Step]:
        return self.steps[-1] if self.steps else None

    def visit_frames(self) -> List[Pos]:
        return [s.current for s in self.steps if not s.is_final]

    def sort_frames(self) -> List[List[int]]:
        return [list(s.array) for s in self.steps if not s.is_final]

    def export(self) -> Dict[str, Any]:
        return {
            "algo_key": self._algo_info.key if self._algo_info else "",
            "domain":   self._domain,
            "metrics":  self.metrics.to_dict() if self.metrics else {},
            "steps":    [s.to_dict() for s in self.steps],
        }

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _begin(self, info: AlgoInfo, domain: str, gen) -> None:
        self._algo_info = info
        self._domain    = domain
        self.steps      = []
        self.metrics    = None
        self.stepper    = Stepper()
        self.stepper.start(gen)

    def _compute_metrics(self, wall_ms: float) -> RunMetrics:
        info = self._algo_info
        last = self.final_step

        return RunMetrics(
            algo_key=info.key if info else "",
            algo_label=info.label if info else "",
            domain=self._domain,
            cells_visited=last.metrics.get("cells_visited", 0) if last else 0,
            path_length=len(last.path) if last else 0,
            path_found=bool(last.path) if last else False,
            swaps=last.metrics.get("swaps", 0) if last else 0,
            total_steps=len(self.steps),
            wall_time_ms=round(wall_ms, 2),
        )
