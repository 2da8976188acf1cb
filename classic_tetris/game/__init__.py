"""Game logic: shapes, board, clock, and engine."""

from classic_tetris.game.shapes import SHAPE_TYPES, offsets, rotation_states, color_of
from classic_tetris.game.board import Board
from classic_tetris.game.clock import Clock, ManualClock
from classic_tetris.game.engine import ActivePiece, Command, State, TetrisEngine

__all__ = [
    "SHAPE_TYPES",
    "offsets",
    "rotation_states",
    "color_of",
    "Board",
    "Clock",
    "ManualClock",
    "ActivePiece",
    "Command",
    "State",
    "TetrisEngine",
]
