import pytest

from classic_tetris.game.clock import ManualClock


def test_advance_fires_one_tick_per_interval():
    ticks = []
    clock = ManualClock()
    clock.start(800, lambda: ticks.append(1))
    assert clock.advance(799) == 0
    assert clock.advance(1) == 1
    assert clock.advance(1600) == 2
    assert len(ticks) == 3


def test_stopped_clock_delivers_nothing():
    ticks = []
    clock = ManualClock()
    clock.start(100, lambda: ticks.append(1))
    clock.stop()
    assert not clock.fire()
    assert clock.advance(1000) == 0
    assert ticks == []


def test_double_start_raises():
    clock = ManualClock()
    clock.start(100, lambda: None)
    with pytest.raises(RuntimeError):
        clock.start(100, lambda: None)


def test_tick_that_stops_clock_ends_advance():
    clock = ManualClock()
    clock.start(100, clock.stop)
    assert clock.advance(500) == 1
    assert not clock.running
