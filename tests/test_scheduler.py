import pytest

from snake.scheduler import RepeatingTask


def test_fires_once_per_interval():
    calls = []
    task = RepeatingTask(lambda: calls.append(1), 100)
    task.start(0)
    assert not task.poll(50)
    assert task.poll(100)
    assert not task.poll(150)
    assert task.poll(200)
    assert len(calls) == 2


def test_no_catch_up_burst():
    calls = []
    task = RepeatingTask(lambda: calls.append(1), 100)
    task.start(0)
    assert task.poll(1000)
    assert not task.poll(1000)
    assert len(calls) == 1


def test_cancel_stops_firing():
    calls = []
    task = RepeatingTask(lambda: calls.append(1), 100)
    assert not task.active
    assert not task.poll(500)
    task.start(0)
    task.cancel()
    assert not task.active
    assert not task.poll(500)
    assert calls == []


def test_cancel_from_callback():
    task = RepeatingTask(lambda: task.cancel(), 10)
    task.start(0)
    assert task.poll(10)
    assert not task.active
    assert not task.poll(100)


def test_interval_must_be_positive():
    with pytest.raises(ValueError):
        RepeatingTask(lambda: None, 0)
