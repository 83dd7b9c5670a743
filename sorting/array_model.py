"""
array_model.py — Array Model
=============================
The array being sorted plus the snapshot currently on screen.

`values` is what the sort generators mutate in place; `current_step` is
whatever snapshot the renderer should draw right now (the last emitted
step during a run, a copy of `values` otherwise).
"""

import logging
import random
import re
from typing import List, Optional

logger = logging.getLogger(__name__)

# leading integer of a token, the way a browser's parseInt reads " 12abc"
_INT_PREFIX = re.compile(r"^[+-]?\d+")


class InvalidArrayInput(ValueError):
    """Raised when the text holds no parseable integer."""


def parse_array_input(text: str) -> List[int]:
    """
    Parse comma-separated user input.  Each token is trimmed and read
    for its leading integer; tokens without one are dropped silently.

        "5, 3,x, 12abc, -4"  →  [5, 3, 12, -4]

    Raises InvalidArrayInput if nothing survives or `text` is not a string.
    """
    if not isinstance(text, str):
        raise InvalidArrayInput("Please enter valid numbers separated by commas")

    values = []
    for token in text.split(","):
        match = _INT_PREFIX.match(token.strip())
        if not match:
            continue
        try:
            values.append(int(match.group()))
        except ValueError:
            # over the interpreter's int-string digit limit
            logger.debug("Dropping %d-digit token", len(match.group()))
    if not values:
        raise InvalidArrayInput("Please enter valid numbers separated by commas")
    return values


def random_array(
    length: int = 50,
    low: int = 1,
    high: int = 100,
    rng: Optional[random.Random] = None,
) -> List[int]:
    rng = rng or random.Random()
    return [rng.randint(low, high) for _ in range(length)]


class ArrayModel:
    """
    Attributes:
        values       : The array the next run will sort (mutated in place by it).
        current_step : Snapshot currently rendered.
    """

    def __init__(self, values: Optional[List[int]] = None):
        self.values:       List[int] = list(values or [])
        self.current_step: List[int] = list(self.values)

    def set_values(self, values: List[int]) -> None:
        self.values = list(values)
        self.current_step = list(self.values)

    def randomize(
        self,
        length: int = 50,
        low: int = 1,
        high: int = 100,
        rng: Optional[random.Random] = None,
    ) -> List[int]:
        self.set_values(random_array(length, low, high, rng))
        return self.values

    def apply_input(self, text: str) -> List[int]:
        """Replace the array from user text.  On bad input nothing changes."""
        try:
            parsed = parse_array_input(text)
        except InvalidArrayInput:
            logger.warning("Rejected array input %r", str(text)[:80])
            raise
        self.set_values(parsed)
        return self.values

    def show(self, snapshot: List[int]) -> None:
        self.current_step = list(snapshot)

    def as_text(self) -> str:
        return ", ".join(str(v) for v in self.values)

    def __len__(self) -> int:
        return len(self.values)

    def __repr__(self) -> str:
        return f"ArrayModel(len={len(self.values)})"
