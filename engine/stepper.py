"""
stepper.py — Step-by-Step Playback Engine
==========================================
The Stepper owns an algorithm generator, buffers every Step it has
pulled, and paces playback.  Nothing is computed ahead of time: each
step is pulled only when the previous one has been shown and its delay
has passed.

State machine:
    IDLE     →  start()          →  PAUSED
    PAUSED   →  play_through()   →  PLAYING
    PLAYING  →  (final step)     →  FINISHED
    any      →  jump_to_end()    →  FINISHED
    any      →  reset()          →  IDLE

There is no cancellation: a run that has started plays until its final
step.  Callers keep one run per grid / array at a time.
"""

import time
from enum import Enum
from typing import Callable, Iterator, List, Optional

from algorithms.step import Step


class StepperState(Enum):
    IDLE     = "idle"
    PAUSED   = "paused"
    PLAYING  = "playing"
    FINISHED = "finished"


class Stepper:
    """
    Attributes:
        state    : Current StepperState.
        steps    : Every Step pulled so far, in order.
        shown    : Index into `steps` of the step on screen, -1 before the first.
        delay    : Seconds to wait after each non-final step during playback.
        on_step  : Optional callback(Step), fired each time a step is shown.
    """

    def __init__(
        self,
        on_step: Optional[Callable[[Step], None]] = None,
        delay_ms: float = 0,
    ):
        self.on_step = on_step
        self.delay   = max(0.0, delay_ms / 1000.0)
        self.reset()

    def start(self, generator: Iterator[Step]) -> None:
        """Attach a fresh algorithm generator.  No step is pulled yet."""
        self.reset()
        self._source = generator
        self.state   = StepperState.PAUSED

    def reset(self) -> None:
        self._source: Optional[Iterator[Step]] = None
        self.steps:   List[Step]               = []
        self.shown:   int                      = -1
        self.state:   StepperState             = StepperState.IDLE

    # ------------------------------------------------------------------
    # Driving
    # ------------------------------------------------------------------
    def next_step(self) -> bool:
        """Show the next step, pulling it if needed.  False once exhausted."""
        if self.shown + 1 == len(self.steps) and self._pull() is None:
            self.state = StepperState.FINISHED
            return False
        self._show(self.shown + 1)
        return True

    def jump_to_end(self) -> None:
        """Drain the generator with no pauses and show the last step."""
        while self._pull() is not None:
            pass
        if self.steps:
            self._show(len(self.steps) - 1)
        self.state = StepperState.FINISHED

    def play_through(self, sleep: Callable[[float], None] = time.sleep) -> Optional[Step]:
        """
        Show every remaining step in order, calling sleep(delay) after each
        non-final one.  Returns the final step.
        """
        if self.state != StepperState.FINISHED:
            self.state = StepperState.PLAYING
            while self.next_step() and not self.current_step.is_final:
                sleep(self.delay)
            self.state = StepperState.FINISHED
        return self.current_step

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------
    @property
    def current_step(self) -> Optional[Step]:
        return self.steps[self.shown] if self.shown >= 0 else None

    @property
    def fetched(self) -> int:
        return len(self.steps)

    @property
    def is_finished(self) -> bool:
        return self.state is StepperState.FINISHED

    @property
    def is_playing(self) -> bool:
        return self.state is StepperState.PLAYING

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _pull(self) -> Optional[Step]:
        step = next(self._source, None) if self._source is not None else None
        if step is not None:
            self.steps.append(step)
        return step

    def _show(self, idx: int) -> None:
        self.shown = idx
        if self.on_step:
            self.on_step(self.steps[idx])
