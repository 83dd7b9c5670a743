import random

import pytest

from algorithms import get_sort, UnknownAlgorithm
from algorithms.bubble_sort import bubble_sort
from algorithms.quick_sort import quick_sort
from engine import sort


def test_bubble_sort_snapshots_follow_pass_order(fake_sleep):
    values = [5, 3, 1, 4, 2]
    snapshots = []

    result = sort(values, "bubble", on_step=snapshots.append, sleep=fake_sleep)

    assert snapshots == [
        [3, 5, 1, 4, 2],
        [3, 1, 5, 4, 2],
        [3, 1, 4, 5, 2],
        [3, 1, 4, 2, 5],
        [1, 3, 4, 2, 5],
        [1, 3, 2, 4, 5],
        [1, 2, 3, 4, 5],
    ]
    assert result is values
    assert values == [1, 2, 3, 4, 5]
    assert fake_sleep.calls == [0.05] * 7


def test_bubble_sort_steps_record_swapped_indices():
    steps = list(bubble_sort([2, 1, 3]))
    assert len(steps) == 2
    assert steps[0].swapped == (0, 1)
    assert steps[0].array == [1, 2, 3]
    assert steps[-1].is_final
    assert steps[-1].metrics["swaps"] == 1


def test_sorted_input_emits_only_final_step_for_bubble():
    steps = list(bubble_sort([1, 2, 3, 4]))
    assert len(steps) == 1
    assert steps[0].is_final
    assert steps[0].array == [1, 2, 3, 4]


def test_quick_sort_lomuto_sequence():
    values = [3, 1, 2]
    steps = list(quick_sort(values))

    # 1 < pivot 2 moves to index 0, then the pivot lands at index 1
    assert [s.array for s in steps[:-1]] == [[1, 3, 2], [1, 2, 3]]
    assert [s.swapped for s in steps[:-1]] == [(0, 1), (1, 2)]
    assert [s.pivot for s in steps[:-1]] == [2, 1]
    assert values == [1, 2, 3]


def test_quick_sort_emits_self_swaps():
    steps = list(quick_sort([1, 2]))
    assert [s.swapped for s in steps[:-1]] == [(0, 0), (1, 1)]
    assert all(s.array == [1, 2] for s in steps)


@pytest.mark.parametrize("algorithm", ["bubble", "quick"])
@pytest.mark.parametrize("seed", [0, 1, 2, 3])
def test_sort_produces_sorted_permutation(algorithm, seed):
    rng = random.Random(seed)
    # narrow range forces duplicates, and it straddles zero
    values = [rng.randint(-20, 20) for _ in range(40)]
    expected = sorted(values)

    steps = list(get_sort(algorithm).fn(values))
    assert values == expected
    assert steps[-1].array == expected
    for step in steps:
        assert sorted(step.array) == expected


@pytest.mark.parametrize("algorithm", ["bubble", "quick"])
def test_sort_handles_all_duplicates_and_reversed_input(algorithm):
    for values in ([4, 4, 4, 4], [3, -1, 3, -1, 0], list(range(15, -15, -1))):
        expected = sorted(values)
        steps = list(get_sort(algorithm).fn(values))
        assert values == expected
        assert steps[-1].array == expected


def _lomuto_swaps(a, low, high, out):
    if low < high:
        pivot = a[high]
        i = low - 1
        for j in range(low, high):
            if a[j] < pivot:
                i += 1
                a[i], a[j] = a[j], a[i]
                out.append((i, j))
        a[i + 1], a[high] = a[high], a[i + 1]
        out.append((i + 1, high))
        _lomuto_swaps(a, low, i, out)
        _lomuto_swaps(a, i + 2, high, out)


@pytest.mark.parametrize("seed", [5, 6, 7])
def test_quick_sort_swaps_match_left_first_recursion(seed):
    rng = random.Random(seed)
    values = [rng.randint(0, 50) for _ in range(30)]
    expected = []
    _lomuto_swaps(list(values), 0, len(values) - 1, expected)

    steps = list(quick_sort(values))
    assert [s.swapped for s in steps[:-1]] == expected


def test_quick_sort_long_degenerate_input_does_not_recurse():
    # equal values give one partition per element, like sorted input,
    # but with a single swap per partition
    values = [7] * 3000
    count = 0
    for step in quick_sort(values):
        count += 1
        last = step
    assert count == 3000
    assert last.is_final
    assert last.metrics["swaps"] == 2999


def test_quick_sort_sorted_input_through_sort(fake_sleep):
    values = list(range(120))
    assert sort(values, "quick", sleep=fake_sleep) == list(range(120))
    assert len(fake_sleep.calls) == 120 * 121 // 2 - 1


@pytest.mark.parametrize("algorithm", ["bubble", "quick"])
@pytest.mark.parametrize("values", [[], [7]])
def test_trivial_arrays_produce_a_single_final_step(algorithm, values):
    steps = list(get_sort(algorithm).fn(list(values)))
    assert len(steps) == 1
    assert steps[0].is_final
    assert steps[0].array == values


def test_sort_callback_gets_copies(fake_sleep):
    snapshots = []
    values = [2, 1]
    sort(values, "quick", on_step=snapshots.append, sleep=fake_sleep)
    snapshots[0].append(99)
    assert values == [1, 2]


def test_unknown_sort_key():
    with pytest.raises(UnknownAlgorithm):
        sort([3, 2, 1], "heap")
