"""
Display buffer fed by engine notifications.

``BoardView`` implements the engine's Renderer protocol by recording what
should be on screen: the locked cells, the active piece overlay, the 4x4 NEXT
mini-grid, the score and the status. Concrete renderers (pygame window, PIL
snapshots) subclass it and paint ``visible_cells()``.
"""

from __future__ import annotations

from typing import Optional, Sequence

import numpy as np

from classic_tetris.game.engine import State
from classic_tetris.game.shapes import offsets, rgb_of, shape_of_tag, tag_of

PREVIEW_WIDTH = 4
PREVIEW_CELLS = PREVIEW_WIDTH * PREVIEW_WIDTH

EMPTY_CELL_COLOR = (40, 40, 40)
UNKNOWN_CELL_COLOR = (128, 128, 128)

STATUS_TEXT: dict[State, str] = {
    State.IDLE: "PRESS SPACE",
    State.RUNNING: "",
    State.PAUSED: "PAUSED",
    State.GAME_OVER: "GAME OVER",
}


def tag_color(tag: int) -> tuple[int, int, int]:
    """RGB for a cell tag; empty and sentinel tags get neutral colors."""
    if tag == 0:
        return EMPTY_CELL_COLOR
    if tag < 0:
        return UNKNOWN_CELL_COLOR
    return rgb_of(shape_of_tag(tag))


class BoardView:
    """Renderer that keeps a displayable copy of the game.

    Attributes:
        width: Board width in cells.
        height: Visible board height in cells.
        locked: Flat array of locked-cell tags for the visible rows.
        active: Flat array of active-piece tags (0 where no piece).
        preview: Flat 16-cell array for the NEXT mini-grid.
        score: Last score shown.
        lines: Last line count shown.
        state: Last status shown.
    """

    def __init__(self, width: int = 10, height: int = 20) -> None:
        self.width = width
        self.height = height
        self.locked = np.zeros(width * height, dtype=np.int8)
        self.active = np.zeros(width * height, dtype=np.int8)
        self.preview = np.zeros(PREVIEW_CELLS, dtype=np.int8)
        self.next_shape: Optional[int] = None
        self.score = 0
        self.lines = 0
        self.state = State.IDLE

    # ── Renderer protocol ────────────────────────────────────────────────

    def draw_piece(self, cells: Sequence[int], tag: int) -> None:
        for i in cells:
            if 0 <= i < self.active.size:
                self.active[i] = tag

    def undraw_piece(self, cells: Sequence[int]) -> None:
        for i in cells:
            if 0 <= i < self.active.size:
                self.active[i] = 0

    def draw_board(self, grid: np.ndarray) -> None:
        self.locked[:] = grid.ravel()
        self.active[:] = 0

    def draw_preview(self, shape_id: int) -> None:
        self.next_shape = shape_id
        self.preview[:] = 0
        for o in offsets(shape_id, 0, PREVIEW_WIDTH):
            self.preview[o] = tag_of(shape_id)

    def draw_score(self, score: int, lines: int) -> None:
        self.score = score
        self.lines = lines

    def draw_status(self, state: State) -> None:
        self.state = state

    # ── Queries for painters ─────────────────────────────────────────────

    def visible_cells(self) -> np.ndarray:
        """Tags to paint, shape (height, width): active piece over locked cells."""
        merged = np.where(self.active != 0, self.active, self.locked)
        return merged.reshape(self.height, self.width)

    def preview_cells(self) -> np.ndarray:
        return self.preview.reshape(PREVIEW_WIDTH, PREVIEW_WIDTH)

    def status_text(self) -> str:
        return STATUS_TEXT[self.state]
