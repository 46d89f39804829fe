import json

from snake.storage import JsonScoreStore, MemoryScoreStore


def test_missing_file_loads_zero(tmp_path):
    assert JsonScoreStore(str(tmp_path / "nope.json")).load() == 0


def test_save_then_load(tmp_path):
    path = tmp_path / "sub" / "scores.json"
    store = JsonScoreStore(str(path))
    store.save(12)
    assert json.loads(path.read_text()) == {"snakeHighScore": 12}
    assert JsonScoreStore(str(path)).load() == 12


def test_save_keeps_other_keys(tmp_path):
    path = tmp_path / "scores.json"
    path.write_text(json.dumps({"other": 5}))
    JsonScoreStore(str(path), key="best").save(3)
    assert json.loads(path.read_text()) == {"other": 5, "best": 3}


def test_corrupt_file_loads_zero(tmp_path):
    path = tmp_path / "scores.json"
    path.write_text("{not json")
    assert JsonScoreStore(str(path)).load() == 0
    path.write_text("[1, 2]")
    assert JsonScoreStore(str(path)).load() == 0
    path.write_text('{"snakeHighScore": "many"}')
    assert JsonScoreStore(str(path)).load() == 0


def test_non_finite_value_loads_zero(tmp_path):
    path = tmp_path / "scores.json"
    for raw in ("Infinity", "-Infinity", "1e400", "NaN"):
        path.write_text('{"snakeHighScore": %s}' % raw)
        assert JsonScoreStore(str(path)).load() == 0


def test_unwritable_path_is_dropped(tmp_path):
    blocker = tmp_path / "file"
    blocker.write_text("x")
    store = JsonScoreStore(str(blocker / "scores.json"))
    store.save(4)  # parent is a regular file; must not raise
    assert store.load() == 0


def test_memory_store():
    store = MemoryScoreStore(2)
    assert store.load() == 2
    store.save(5)
    assert store.load() == 5
