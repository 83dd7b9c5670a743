import pytest

import main


@pytest.fixture
def open_maze(client, monkeypatch):
    """Client whose session holds a wall-free board."""
    monkeypatch.setattr(main.config, "WALL_PROBABILITY", 0.0)
    client.post("/api/grid/generate", json={"seed": 1})
    return client


def _place(client, mode, x, y):
    assert client.post("/api/grid/select", json={"mode": mode}).status_code == 200
    return client.post("/api/grid/cell", json={"x": x, "y": y}).get_json()


# ---------------------------------------------------------------------------
# Page
# ---------------------------------------------------------------------------
def test_index_renders_both_tabs(client):
    res = client.get("/")
    assert res.status_code == 200
    html = res.get_data(as_text=True)
    assert 'id="grid-svg"' in html
    assert 'id="bars-svg"' in html
    assert 'id="btn-find-path"' in html
    assert "Bubble Sort" in html


# ---------------------------------------------------------------------------
# Sorting
# ---------------------------------------------------------------------------
def test_set_array_rejects_blank_input_and_keeps_array(client):
    assert client.post("/api/array/set", json={"text": "3, 1, 2"}).get_json()["values"] == [3, 1, 2]

    res = client.post("/api/array/set", json={"text": "   "})
    assert res.status_code == 400
    assert res.get_json()["error"] == "Please enter valid numbers separated by commas"

    data = client.post("/api/sort/run").get_json()
    assert data["frames"] == [[1, 3, 2], [1, 2, 3]]
    assert data["final"] == [1, 2, 3]


def test_random_array_uses_default_length(client):
    data = client.post("/api/array/random").get_json()
    assert len(data["values"]) == main.config.DEFAULT_ARRAY_LENGTH


def test_sort_run_appends_to_history(client):
    client.post("/api/array/set", json={"text": "4, 2, 3, 1"})
    client.post("/api/sort/config", json={"algo_key": "quick"})

    data = client.post("/api/sort/run").get_json()
    assert data["delay_ms"] == main.config.SORT_DELAY_MS
    assert data["final"] == [1, 2, 3, 4]
    assert "Quick Sort" in data["analytics"]

    history = client.get("/api/history").get_json()["history"]
    assert history == [{"array": [1, 2, 3, 4], "algorithm": "quick"}]
    assert len(main.history_store) == 1


def test_unknown_sort_key_is_rejected(client):
    res = client.post("/api/sort/config", json={"algo_key": "heap"})
    assert res.status_code == 400
    assert "heap" in res.get_json()["error"]


# ---------------------------------------------------------------------------
# Pathfinding
# ---------------------------------------------------------------------------
def test_path_run_without_endpoints_is_rejected(client):
    client.post("/api/grid/generate", json={"seed": 3})
    res = client.post("/api/path/run")
    assert res.status_code == 400
    assert res.get_json()["error"] == "Please select start and end points"


def test_generate_is_seedable_and_clears_markers(open_maze):
    data = _place(open_maze, "start", 0, 0)
    assert data["has_endpoints"] is False

    again = open_maze.post("/api/grid/generate", json={"seed": 1}).get_json()
    assert again["has_endpoints"] is False
    assert 'class="cell start"' not in again["svg"]


def test_cell_click_places_markers_then_toggles_walls(open_maze):
    first = _place(open_maze, "start", 0, 0)
    assert first["selecting"] is None
    assert 'id="cell-0-0" class="cell start"' in first["svg"]

    second = _place(open_maze, "end", 3, 0)
    assert second["has_endpoints"] is True

    wall = open_maze.post("/api/grid/cell", json={"x": 5, "y": 5}).get_json()
    assert 'id="cell-5-5" class="cell wall"' in wall["svg"]


def test_cell_click_outside_grid(open_maze):
    res = open_maze.post("/api/grid/cell", json={"x": 99, "y": 0})
    assert res.status_code == 400


def test_select_rejects_unknown_mode(client):
    assert client.post("/api/grid/select", json={"mode": "diagonal"}).status_code == 400


def test_bfs_run_returns_frames_and_path(open_maze):
    _place(open_maze, "start", 0, 0)
    _place(open_maze, "end", 3, 0)
    open_maze.post("/api/path/config", json={"algo_key": "bfs"})

    data = open_maze.post("/api/path/run").get_json()
    assert data["path"] == [[0, 0], [1, 0], [2, 0], [3, 0]]
    assert data["frames"][0] == [0, 0]
    assert data["delay_ms"] == main.config.TRAVERSAL_DELAY_MS
    assert 'class="cell path"' in data["svg"]
    assert 'class="cell visited"' in data["svg"]


def test_switching_algorithm_clears_previous_run(open_maze):
    _place(open_maze, "start", 0, 0)
    _place(open_maze, "end", 3, 0)
    open_maze.post("/api/path/run")

    data = open_maze.post("/api/path/config", json={"algo_key": "dfs"}).get_json()
    assert 'class="cell path"' not in data["svg"]
    assert 'class="cell visited"' not in data["svg"]


def test_unknown_path_key_is_rejected(client):
    assert client.post("/api/path/config", json={"algo_key": "astar"}).status_code == 400


# ---------------------------------------------------------------------------
# Malformed request bodies
# ---------------------------------------------------------------------------
def test_non_string_array_text_is_a_validation_error(client):
    res = client.post("/api/array/set", json={"text": 5})
    assert res.status_code == 400
    assert res.get_json()["error"] == "Please enter valid numbers separated by commas"


def test_non_object_body_counts_as_empty(client):
    assert client.post("/api/array/set", json=[1, 2]).status_code == 400
    assert client.post("/api/grid/select", json=["start"]).get_json() == {"selecting": None}


def test_oversized_number_token_is_dropped(client):
    data = client.post("/api/array/set", json={"text": "1" * 5000 + ", 3"}).get_json()
    assert data["values"][-1] == 3


@pytest.mark.parametrize("seed", [[1], "7", 1.5, True])
def test_maze_seed_must_be_an_integer(client, seed):
    assert client.post("/api/grid/generate", json={"seed": seed}).status_code == 400


def test_unhashable_algorithm_key_is_rejected(client):
    assert client.post("/api/sort/config", json={"algo_key": ["quick"]}).status_code == 400
    assert client.post("/api/path/config", json={"algo_key": {"k": 1}}).status_code == 400
