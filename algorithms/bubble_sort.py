"""
bubble_sort.py — Bubble Sort
=============================
Generator-based bubble sort.  Mutates the list in place and yields one
Step per swap, carrying a full copy of the array.  Comparisons that
don't swap produce no step.
"""

from typing import Generator, List

from algorithms.step import Step, StepBuilder


PSEUDOCODE: List[str] = [
    "def bubble_sort(a):",                          # 0
    "    n ← len(a)",                               # 1
    "    for i in 0 .. n-2:",                       # 2
    "        for j in 0 .. n-i-2:",                 # 3
    "            if a[j] > a[j+1]:",                # 4
    "                swap a[j], a[j+1]",            # 5
    "    return a",                                 # 6
]


def bubble_sort(values: List[int]) -> Generator[Step, None, None]:
    """
    Classic n-1 pass bubble sort.  After pass i the last i+1 slots hold
    their final values, so each pass stops one index earlier.
    """

    sb = StepBuilder()
    n  = len(values)

    for i in range(n - 1):
        for j in range(n - i - 1):
            if values[j] > values[j + 1]:
                values[j], values[j + 1] = values[j + 1], values[j]
                sb.swap(j, j + 1, values)
                sb.pseudocode_line = 5
                sb.explanation     = (
                    f"Pass {i + 1}: {values[j + 1]} > {values[j]}, so swap positions {j} and {j + 1}. "
                    f"The largest value seen so far keeps bubbling to the right."
                )
                yield sb.emit()

    sb.array           = list(values)
    sb.pseudocode_line = 6
    sb.explanation     = f"Done after {sb.metrics['swaps']} swap(s). The array is sorted."
    yield sb.emit(is_final=True)
