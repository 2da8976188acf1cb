"""
Game engine: spawn, gravity, movement validation, locking, scoring, and the
Idle / Running / Paused / GameOver state machine.

The engine owns the Board, the active piece, the next (preview) shape and the
score for one session. It never draws anything itself: every state change is
reported to a ``Renderer`` after the state has been updated, and gravity comes
from an external ``Clock`` calling ``tick()``.
"""

from __future__ import annotations

import enum
import random
from dataclasses import dataclass
from typing import Any, Optional, Protocol, Sequence

import numpy as np

from classic_tetris.game.board import Board
from classic_tetris.game.clock import Clock
from classic_tetris.game.shapes import (
    BOARD_WIDTH,
    ROTATION_COUNT,
    SHAPE_COUNT,
    offsets,
    tag_of,
)


class State(enum.Enum):
    IDLE = "idle"
    RUNNING = "running"
    PAUSED = "paused"
    GAME_OVER = "game_over"


class Command(enum.IntEnum):
    """Discrete player commands."""
    MOVE_LEFT = 0
    MOVE_RIGHT = 1
    MOVE_DOWN = 2
    ROTATE = 3
    TOGGLE = 4


SCORE_PER_ROW = 10
SPAWN_POSITION = 4
TICK_INTERVAL_MS = 800


@dataclass(frozen=True)
class ActivePiece:
    """The falling piece: shape, rotation state, and anchor board index."""
    shape_id: int
    rotation: int
    position: int

    def cells(self, width: int = BOARD_WIDTH) -> tuple[int, ...]:
        return tuple(self.position + o for o in offsets(self.shape_id, self.rotation, width))

    def shifted(self, delta: int) -> ActivePiece:
        return ActivePiece(self.shape_id, self.rotation, self.position + delta)

    def rotated(self) -> ActivePiece:
        return ActivePiece(self.shape_id, (self.rotation + 1) % ROTATION_COUNT, self.position)


def at_left_edge(cells: Sequence[int], width: int = BOARD_WIDTH) -> bool:
    return any(i % width == 0 for i in cells)


def at_right_edge(cells: Sequence[int], width: int = BOARD_WIDTH) -> bool:
    return any(i % width == width - 1 for i in cells)


class Renderer(Protocol):
    """Presentation collaborator notified after every state change."""

    def draw_piece(self, cells: Sequence[int], tag: int) -> None: ...

    def undraw_piece(self, cells: Sequence[int]) -> None: ...

    def draw_board(self, grid: np.ndarray) -> None: ...

    def draw_preview(self, shape_id: int) -> None: ...

    def draw_score(self, score: int, lines: int) -> None: ...

    def draw_status(self, state: State) -> None: ...


class NullRenderer:
    """Renderer that ignores every notification."""

    def draw_piece(self, cells: Sequence[int], tag: int) -> None:
        pass

    def undraw_piece(self, cells: Sequence[int]) -> None:
        pass

    def draw_board(self, grid: np.ndarray) -> None:
        pass

    def draw_preview(self, shape_id: int) -> None:
        pass

    def draw_score(self, score: int, lines: int) -> None:
        pass

    def draw_status(self, state: State) -> None:
        pass


class TetrisEngine:
    """One Tetris session driven by commands and clock ticks.

    Attributes:
        board: The game board.
        state: Current state machine state.
        score: Current score (10 per cleared row).
        lines: Total rows cleared this session.
        current: Active piece, or None before the first game starts.
        next_shape: Shape id shown in the preview, or None before the first game.
        clock: Gravity clock, started/stopped only by the engine.
        renderer: Presentation collaborator.
        tick_interval_ms: Gravity interval handed to the clock.
    """

    def __init__(
        self,
        clock: Clock,
        renderer: Optional[Renderer] = None,
        rng: Optional[random.Random] = None,
        tick_interval_ms: int = TICK_INTERVAL_MS,
    ) -> None:
        self.board = Board()
        self.clock = clock
        self.renderer: Renderer = renderer if renderer is not None else NullRenderer()
        self.tick_interval_ms = tick_interval_ms
        self.state = State.IDLE
        self.score: int = 0
        self.lines: int = 0
        self.current: Optional[ActivePiece] = None
        self.next_shape: Optional[int] = None
        self._rng = rng if rng is not None else random.Random()

    # ── Commands ─────────────────────────────────────────────────────────

    def handle(self, command: Command) -> bool:
        """Apply one player command.

        Returns:
            True if the command changed any state.
        """
        command = Command(command)
        if command == Command.TOGGLE:
            self.toggle()
            return True
        if command == Command.MOVE_LEFT:
            return self.move_left()
        if command == Command.MOVE_RIGHT:
            return self.move_right()
        if command == Command.MOVE_DOWN:
            return self.move_down()
        return self.rotate()

    def toggle(self) -> None:
        """Start a game from Idle/GameOver, otherwise flip Running and Paused."""
        if self.state in (State.IDLE, State.GAME_OVER):
            self.new_game()
        elif self.state == State.RUNNING:
            self.pause()
        else:
            self.resume()

    def new_game(self) -> None:
        """Reset board, score and pieces and start running."""
        self._stop_clock()
        self.board.reset()
        self.score = 0
        self.lines = 0
        self.current = ActivePiece(self.random_shape_id(), 0, SPAWN_POSITION)
        self.next_shape = self.random_shape_id()
        self.state = State.RUNNING

        self.renderer.draw_board(self.board.get_grid())
        self.renderer.draw_piece(self.current.cells(), tag_of(self.current.shape_id))
        self.renderer.draw_preview(self.next_shape)
        self.renderer.draw_score(self.score, self.lines)
        self.renderer.draw_status(self.state)
        self._start_clock()

    def pause(self) -> None:
        if self.state != State.RUNNING:
            return
        self._stop_clock()
        self.state = State.PAUSED
        self.renderer.draw_status(self.state)

    def resume(self) -> None:
        if self.state != State.PAUSED:
            return
        self.state = State.RUNNING
        self.renderer.draw_status(self.state)
        self._start_clock()

    def tick(self) -> None:
        """One gravity step; called by the clock."""
        if self.state == State.RUNNING:
            self.move_down()

    def move_left(self) -> bool:
        if not self._accepting_moves():
            return False
        if at_left_edge(self.current.cells()):
            return False
        return self._try_place(self.current.shifted(-1))

    def move_right(self) -> bool:
        if not self._accepting_moves():
            return False
        if at_right_edge(self.current.cells()):
            return False
        return self._try_place(self.current.shifted(1))

    def move_down(self) -> bool:
        """Move the piece down one row, locking it if the row below is blocked.

        Returns:
            True in both cases, since a lock also changes state.
        """
        if not self._accepting_moves():
            return False
        if not self._try_place(self.current.shifted(self.board.width)):
            self._lock_piece()
        return True

    def rotate(self) -> bool:
        if not self._accepting_moves():
            return False
        return self._try_place(self.current.rotated())

    # ── Generation / state ───────────────────────────────────────────────

    def random_shape_id(self) -> int:
        """Uniform, independent shape pick in [0, SHAPE_COUNT)."""
        return self._rng.randrange(SHAPE_COUNT)

    def get_state(self) -> dict[str, Any]:
        """Return a dict describing the observable game state.

        Returns:
            Dict with keys:
              - board_grid: np.ndarray (height x width, int8), locked cells only
              - current_piece: ActivePiece or None
              - current_cells: tuple of board indices of the active piece
              - next_shape: int or None
              - score: int
              - lines: int
              - state: State
        """
        return {
            "board_grid": self.board.get_grid(),
            "current_piece": self.current,
            "current_cells": self.current.cells() if self.current else (),
            "next_shape": self.next_shape,
            "score": self.score,
            "lines": self.lines,
            "state": self.state,
        }

    # ── Internals ────────────────────────────────────────────────────────

    def _accepting_moves(self) -> bool:
        return self.state == State.RUNNING and self.current is not None

    def _try_place(self, candidate: ActivePiece) -> bool:
        """Move the active piece to ``candidate`` if it fits.

        The active piece is not part of the board, so its own current cells
        never block the candidate.
        """
        new_cells = candidate.cells()
        if not self.board.fits(new_cells):
            return False
        old_cells = self.current.cells()
        self.current = candidate
        self.renderer.undraw_piece(old_cells)
        self.renderer.draw_piece(new_cells, tag_of(candidate.shape_id))
        return True

    def _lock_piece(self) -> None:
        """Freeze the active piece, clear rows, score, and spawn the next piece."""
        self.board.occupy(self.current.cells(), tag_of(self.current.shape_id))
        cleared = self.board.clear_lines()
        self.lines += len(cleared)
        self.score += SCORE_PER_ROW * len(cleared)

        self.renderer.draw_board(self.board.get_grid())
        self.renderer.draw_score(self.score, self.lines)
        self._spawn_piece()

    def _spawn_piece(self) -> bool:
        """Promote the preview shape to the active piece at the spawn anchor.

        Returns:
            True if the spawn position is free, False on game over.
        """
        self.current = ActivePiece(self.next_shape, 0, SPAWN_POSITION)
        self.next_shape = self.random_shape_id()
        cells = self.current.cells()

        self.renderer.draw_piece(cells, tag_of(self.current.shape_id))
        self.renderer.draw_preview(self.next_shape)

        if any(self.board.is_occupied(i) for i in cells):
            self._stop_clock()
            self.state = State.GAME_OVER
            self.renderer.draw_status(self.state)
            return False
        return True

    def _start_clock(self) -> None:
        if not self.clock.running:
            self.clock.start(self.tick_interval_ms, self.tick)

    def _stop_clock(self) -> None:
        if self.clock.running:
            self.clock.stop()
