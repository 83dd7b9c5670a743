import pytest

from algorithms import UnknownAlgorithm
from algorithms.bubble_sort import bubble_sort
from engine import Stepper, StepperState, Recorder, MissingEndpointError


# ---------------------------------------------------------------------------
# Stepper
# ---------------------------------------------------------------------------
def test_stepper_pulls_lazily():
    seen = []
    stepper = Stepper(on_step=seen.append)
    stepper.start(bubble_sort([3, 2, 1]))

    assert stepper.state == StepperState.PAUSED
    assert stepper.fetched == 0
    assert stepper.current_step is None

    assert stepper.next_step() is True
    assert stepper.fetched == 1
    assert seen == [stepper.current_step]
    assert stepper.current_step.array == [2, 3, 1]


def test_stepper_next_step_past_end():
    stepper = Stepper()
    stepper.start(bubble_sort([1]))
    assert stepper.next_step() is True
    assert stepper.current_step.is_final
    assert stepper.next_step() is False
    assert stepper.is_finished


def test_jump_to_end_shows_final_step():
    stepper = Stepper()
    stepper.start(bubble_sort([3, 2, 1]))
    stepper.jump_to_end()
    assert stepper.is_finished
    assert stepper.current_step.is_final
    assert stepper.current_step.array == [1, 2, 3]


def test_play_through_sleeps_after_each_non_final_step(fake_sleep):
    seen = []
    stepper = Stepper(on_step=seen.append, delay_ms=50)
    stepper.start(bubble_sort([3, 2, 1]))

    final = stepper.play_through(fake_sleep)

    assert final.is_final
    assert len(seen) == 4
    assert fake_sleep.calls == [0.05, 0.05, 0.05]
    assert not stepper.is_playing
    assert stepper.play_through(fake_sleep) is final
    assert len(fake_sleep.calls) == 3


def test_reset_returns_to_idle():
    stepper = Stepper()
    stepper.start(bubble_sort([2, 1]))
    stepper.next_step()
    stepper.reset()
    assert stepper.state == StepperState.IDLE
    assert stepper.next_step() is False


# ---------------------------------------------------------------------------
# Recorder
# ---------------------------------------------------------------------------
def test_recorder_traversal_metrics(open_grid):
    g = open_grid(3, 3)
    rec = Recorder()
    rec.start_traversal("bfs", g, g.cell(0, 0), g.cell(2, 2))
    metrics = rec.run_to_completion()

    assert metrics.domain == "pathfinding"
    assert metrics.algo_label == "Breadth-First Search"
    assert metrics.cells_visited == 8
    assert metrics.path_length == 5
    assert metrics.path_found is True
    assert metrics.total_steps == 9
    assert len(rec.visit_frames()) == 8


def test_recorder_unreachable_reports_no_path(open_grid):
    g = open_grid(2, 2, walls=[(1, 0), (0, 1)])
    rec = Recorder()
    rec.start_traversal("dfs", g, g.cell(0, 0), g.cell(1, 1))
    metrics = rec.run_to_completion()
    assert metrics.path_found is False
    assert metrics.cells_visited == 1


def test_recorder_sort_metrics_and_frames():
    values = [5, 3, 1, 4, 2]
    rec = Recorder()
    rec.start_sort("bubble", values)
    metrics = rec.run_to_completion()

    assert metrics.domain == "sorting"
    assert metrics.swaps == 7
    assert metrics.total_steps == 8
    assert rec.sort_frames()[-1] == [1, 2, 3, 4, 5]
    assert values == [1, 2, 3, 4, 5]

    exported = rec.export()
    assert exported["algo_key"] == "bubble"
    assert len(exported["steps"]) == 8
    assert exported["steps"][-1]["is_final"] is True


def test_recorder_requires_both_endpoints(open_grid):
    g = open_grid(3, 3)
    with pytest.raises(MissingEndpointError, match="Please select start and end points"):
        Recorder().start_traversal("bfs", g, g.cell(0, 0), None)


def test_recorder_rejects_unknown_algorithm(open_grid):
    g = open_grid(3, 3)
    with pytest.raises(UnknownAlgorithm):
        Recorder().start_traversal("dijkstra", g, g.cell(0, 0), g.cell(1, 1))
    with pytest.raises(UnknownAlgorithm):
        Recorder().start_sort("merge", [1])


def test_run_before_start_is_an_error():
    with pytest.raises(RuntimeError):
        Recorder().run_to_completion()
