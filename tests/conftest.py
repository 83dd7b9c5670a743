import pytest

from grid import Grid


class SleepRecorder:
    """Stands in for time.sleep and remembers every requested delay."""

    def __init__(self):
        self.calls = []

    def __call__(self, seconds):
        self.calls.append(seconds)


@pytest.fixture
def fake_sleep():
    return SleepRecorder()


@pytest.fixture
def open_grid():
    """Factory for a wall-free grid with optional walls at the given (x, y)."""

    def _make(rows, cols, walls=()):
        grid = Grid(rows=rows, cols=cols)
        for x, y in walls:
            grid.toggle_wall(x, y)
        return grid

    return _make


@pytest.fixture
def client(monkeypatch, tmp_path):
    import main
    from sorting import HistoryStore

    monkeypatch.setattr(main, "history_store", HistoryStore(str(tmp_path / "history.json")))
    main.app.config["TESTING"] = True
    with main.app.test_client() as c:
        yield c
