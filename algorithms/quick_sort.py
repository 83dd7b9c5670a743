"""
quick_sort.py — Quick Sort (Lomuto partition)
==============================================
Generator-based quick sort.  Pivot is always the last element of the
range; no randomisation, so sorted input degrades to O(n²) time.

Yields a Step for every swap inside a partition (including a value
swapped with itself) and one for the closing pivot swap.  Pending
ranges sit on an explicit stack with the left range on top, so steps
come out in the same order as the textbook recursion while sorted
input of any length only runs longer.  Each partition returns its
pivot index through the generator's return value.
"""

from typing import Generator, List, Tuple

from algorithms.step import Step, StepBuilder


PSEUDOCODE: List[str] = [
    "def quick_sort(a, low, high):",                # 0
    "    if low < high:",                           # 1
    "        p ← partition(a, low, high)",          # 2
    "        quick_sort(a, low, p - 1)",            # 3
    "        quick_sort(a, p + 1, high)",           # 4
    "def partition(a, low, high):",                 # 5
    "    pivot ← a[high]; i ← low - 1",             # 6
    "    for j in low .. high-1:",                  # 7
    "        if a[j] < pivot:",                     # 8
    "            i ← i + 1; swap a[i], a[j]",       # 9
    "    swap a[i+1], a[high]",                     # 10
    "    return i + 1",                             # 11
]


def quick_sort(values: List[int]) -> Generator[Step, None, None]:
    sb = StepBuilder()
    ranges: List[Tuple[int, int]] = [(0, len(values) - 1)]

    while ranges:
        low, high = ranges.pop()
        if low < high:
            p = yield from _partition(values, low, high, sb)
            # right pushed first so the left range is sorted first
            ranges.append((p + 1, high))
            ranges.append((low, p - 1))

    sb.array           = list(values)
    sb.pseudocode_line = 1
    sb.explanation     = f"Done after {sb.metrics['swaps']} swap(s). Every range is down to one element."
    yield sb.emit(is_final=True)


def _partition(values: List[int], low: int, high: int, sb: StepBuilder):
    pivot = values[high]
    i = low - 1

    for j in range(low, high):
        if values[j] < pivot:
            i += 1
            values[i], values[j] = values[j], values[i]
            sb.swap(i, j, values)
            sb.pivot           = high
            sb.pseudocode_line = 9
            sb.explanation     = (
                f"{values[i]} < pivot {pivot}: move it into the low side at position {i}."
            )
            yield sb.emit()

    values[i + 1], values[high] = values[high], values[i + 1]
    sb.swap(i + 1, high, values)
    sb.pivot           = i + 1
    sb.pseudocode_line = 10
    sb.explanation     = (
        f"Put pivot {pivot} at position {i + 1}: everything left of it is smaller, "
        f"everything right of it is not."
    )
    yield sb.emit()
    return i + 1
