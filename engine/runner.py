"""
runner.py — Paced callback entry points
========================================
`traverse` and `sort` drive an algorithm generator through a Stepper at
a human pace and hand every intermediate state to a callback:

    path = traverse(grid, grid.start, grid.end, "bfs", on_visit=draw_cell)
    values = sort(values, "bubble", on_step=draw_bars)

The callback runs before the delay, and the next step is not computed
until the delay is over.  Pass `sleep` to drive pacing from something
other than time.sleep (tests pass a recorder).
"""

import time
from typing import Callable, List, Optional

import config
from grid import Grid, Cell
from algorithms import get_traversal, get_sort
from algorithms.step import Step
from engine.recorder import MissingEndpointError
from engine.stepper import Stepper


def traverse(
    grid: Grid,
    start: Optional[Cell],
    end: Optional[Cell],
    algorithm: str,
    on_visit: Optional[Callable[[Cell], None]] = None,
    delay_ms: float = config.TRAVERSAL_DELAY_MS,
    sleep: Callable[[float], None] = time.sleep,
) -> List[Cell]:
    """Run DFS / BFS; `on_visit(cell)` fires once per newly visited cell."""
    if start is None or end is None:
        raise MissingEndpointError("Please select start and end points")
    info = get_traversal(algorithm)

    def _forward(step: Step) -> None:
        if on_visit and not step.is_final:
            on_visit(grid.cell(*step.current))

    stepper = Stepper(on_step=_forward, delay_ms=delay_ms)
    stepper.start(info.fn(grid, start, end))
    final = stepper.play_through(sleep)
    return [grid.cell(x, y) for x, y in final.path]


def sort(
    values: List[int],
    algorithm: str,
    on_step: Optional[Callable[[List[int]], None]] = None,
    delay_ms: float = config.SORT_DELAY_MS,
    sleep: Callable[[float], None] = time.sleep,
) -> List[int]:
    """Sort `values` in place; `on_step(snapshot)` fires after every swap."""
    info = get_sort(algorithm)

    def _forward(step: Step) -> None:
        if on_step and not step.is_final:
            on_step(list(step.array))

    stepper = Stepper(on_step=_forward, delay_ms=delay_ms)
    stepper.start(info.fn(values))
    stepper.play_through(sleep)
    return values
