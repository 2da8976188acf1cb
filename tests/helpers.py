from __future__ import annotations

import itertools

from classic_tetris.game.engine import SPAWN_POSITION, TetrisEngine


class ScriptedRandom:
    """Stand-in for random.Random that yields a fixed sequence of shape ids."""

    def __init__(self, ids):
        self._ids = itertools.cycle(ids)

    def randrange(self, n):
        value = next(self._ids)
        assert 0 <= value < n
        return value


def make_engine(clock, view, ids=(3,)):
    return TetrisEngine(clock, view, rng=ScriptedRandom(ids))


def drop_active(engine, clock, limit=30):
    """Fire ticks until the active piece locks and a new one spawns."""
    for n in range(1, limit + 1):
        clock.fire()
        if engine.current.position == SPAWN_POSITION:
            return n
    raise AssertionError("piece never locked")
