import json
import threading

from sorting import HistoryEntry, HistoryStore, load_history, dump_history


def test_store_persists_across_instances(tmp_path):
    path = str(tmp_path / "history.json")
    store = HistoryStore(path)
    assert store.entries() == []

    store.append(HistoryEntry([1, 2, 3], "bubble"))
    store.append(HistoryEntry([4, 5], "quick"))

    reopened = HistoryStore(path)
    assert reopened.entries() == [HistoryEntry([1, 2, 3], "bubble"), HistoryEntry([4, 5], "quick")]


def test_append_rewrites_whole_file(tmp_path):
    path = tmp_path / "history.json"
    store = HistoryStore(str(path))
    store.append(HistoryEntry([9], "quick"))
    store.append(HistoryEntry([1, 8], "bubble"))

    assert json.loads(path.read_text(encoding="utf-8")) == [
        {"array": [9], "algorithm": "quick"},
        {"array": [1, 8], "algorithm": "bubble"},
    ]


def test_malformed_file_loads_as_empty(tmp_path, caplog):
    path = tmp_path / "history.json"
    path.write_text("{not json", encoding="utf-8")

    store = HistoryStore(str(path))
    assert len(store) == 0
    assert "unreadable" in caplog.text


def test_load_history_edge_cases():
    assert load_history("") == []
    assert load_history("  \n") == []
    assert load_history('[{"array": [1]}]') == []
    assert load_history('[{"array": ["x"], "algorithm": "bubble"}]') == []


def test_entries_returns_a_copy():
    store = HistoryStore()
    store.append(HistoryEntry([1], "bubble"))
    store.entries().clear()
    assert len(store) == 1


def test_dump_then_load_keeps_order():
    entries = [HistoryEntry([3, 1], "quick"), HistoryEntry([], "bubble")]
    assert load_history(dump_history(entries)) == entries


def test_undecodable_file_loads_as_empty(tmp_path, caplog):
    path = tmp_path / "history.json"
    path.write_bytes(b"\xff\xfe[")

    store = HistoryStore(str(path))
    assert store.entries() == []
    assert "unreadable" in caplog.text

    store.append(HistoryEntry([1, 2], "bubble"))
    assert HistoryStore(str(path)).entries() == [HistoryEntry([1, 2], "bubble")]


def test_concurrent_appends_keep_every_entry(tmp_path):
    path = str(tmp_path / "history.json")
    store = HistoryStore(path)

    def worker(n):
        for i in range(20):
            store.append(HistoryEntry([n, i], "quick"))

    threads = [threading.Thread(target=worker, args=(n,)) for n in range(4)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len(store) == 80
    assert len(HistoryStore(path).entries()) == 80
