from types import SimpleNamespace

import pytest

pygame = pytest.importorskip("pygame")

from classic_tetris.game.engine import Command  # noqa: E402
from classic_tetris.play import KEY_MAP, PygameClock  # noqa: E402


def test_key_map():
    assert KEY_MAP[pygame.K_LEFT] == Command.MOVE_LEFT
    assert KEY_MAP[pygame.K_RIGHT] == Command.MOVE_RIGHT
    assert KEY_MAP[pygame.K_DOWN] == Command.MOVE_DOWN
    assert KEY_MAP[pygame.K_UP] == Command.ROTATE
    assert KEY_MAP[pygame.K_SPACE] == Command.TOGGLE


def test_dispatch_ignores_other_events():
    clock = PygameClock()
    assert not clock.dispatch(SimpleNamespace(type=pygame.KEYDOWN))


def test_dispatch_swallows_tick_while_stopped():
    clock = PygameClock()
    assert clock.dispatch(SimpleNamespace(type=clock.event_type))
    assert not clock.running
