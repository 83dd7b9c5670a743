from algorithms.step import StepBuilder
from ui.canvas import CONFIG, render_bars, render_grid


def test_render_grid_draws_cells_from_their_types(open_grid):
    g = open_grid(3, 3, walls=[(1, 1)])
    start = g.set_start(0, 0)
    end = g.set_end(2, 2)
    g.mark_visited(g.cell(1, 0))
    g.mark_visited(g.cell(2, 0))
    g.apply_path([start, g.cell(1, 0), g.cell(2, 0), g.cell(2, 1), end])

    svg = render_grid(g)
    assert svg.count("<rect id=") == 9
    assert 'id="cell-0-0" class="cell start"' in svg
    assert 'id="cell-2-2" class="cell end"' in svg
    assert 'id="cell-1-1" class="cell wall"' in svg
    assert 'id="cell-1-0" class="cell path"' in svg
    assert 'id="cell-0-1" class="cell empty"' in svg
    assert CONFIG.cell_colors["path"] in svg


def test_render_grid_shows_visited_cells(open_grid):
    g = open_grid(2, 2)
    g.mark_visited(g.cell(1, 1))
    assert 'id="cell-1-1" class="cell visited"' in render_grid(g)


def test_render_bars_highlights_swap_and_pivot():
    sb = StepBuilder()
    sb.swap(0, 1, [1, 3, 2])
    sb.pivot = 2
    svg = render_bars([1, 3, 2], sb.emit())

    assert svg.count('class="bar"') == 3
    assert svg.count(CONFIG.swap_color) == 2
    assert svg.count(CONFIG.pivot_color) == 1


def test_render_bars_final_step_is_all_sorted():
    sb = StepBuilder()
    sb.array = [1, 2, 3]
    svg = render_bars([1, 2, 3], sb.emit(is_final=True))
    assert svg.count(CONFIG.sorted_color) == 3
    assert CONFIG.bar_color not in svg


def test_render_bars_empty_array():
    svg = render_bars([])
    assert 'id="bars-svg"' in svg
    assert 'class="bar"' not in svg
