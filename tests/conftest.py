import pytest

from classic_tetris.game.clock import ManualClock
from classic_tetris.view import BoardView


@pytest.fixture
def clock():
    return ManualClock()


@pytest.fixture
def view():
    return BoardView()
