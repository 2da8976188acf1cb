"""
Headless snapshots of the game with PIL.

``ImageRenderer`` paints a ``BoardView`` into a PIL image (no pygame needed).
``record_demo`` plays one game with random commands on a ``ManualClock`` and
saves every gravity tick as a frame of a looping GIF.
"""

from __future__ import annotations

import pathlib
import random
from typing import Any

from PIL import Image, ImageDraw, ImageFont

from classic_tetris.game.clock import ManualClock
from classic_tetris.game.engine import TICK_INTERVAL_MS, Command, State, TetrisEngine
from classic_tetris.view import BoardView, tag_color

CELL_SIZE = 24
PREVIEW_CELL = 16
SIDEBAR_WIDTH = 140

BG_COLOR = (18, 18, 24)
GRID_LINE_COLOR = (30, 30, 40)
SIDEBAR_BG = (14, 14, 20)
BORDER_COLOR = (80, 80, 100)
LABEL_COLOR = (140, 140, 160)
ACCENT_COLOR = (100, 200, 255)
STATUS_COLOR = (255, 80, 80)

# Player commands sampled by the demo; TOGGLE is excluded so the demo never pauses.
DEMO_COMMANDS = (Command.MOVE_LEFT, Command.MOVE_RIGHT, Command.ROTATE, Command.MOVE_DOWN)


def darken(color, amount=50):
    return tuple(max(0, c - amount) for c in color)


def draw_cell(draw, x, y, tag, size=CELL_SIZE):
    """Draw a single cell; filled cells get a darker outline."""
    color = tag_color(tag)
    if tag > 0:
        draw.rectangle([x, y, x + size - 1, y + size - 1], fill=color, outline=darken(color, 60))
    else:
        draw.rectangle([x, y, x + size - 1, y + size - 1], fill=color, outline=GRID_LINE_COLOR)


class ImageRenderer(BoardView):
    """BoardView that paints itself into PIL images."""

    def __init__(self, cell_size: int = CELL_SIZE, width: int = 10, height: int = 20) -> None:
        super().__init__(width, height)
        self.cell_size = cell_size
        self.board_pixel_width = cell_size * width
        self.board_pixel_height = cell_size * height
        self.image_size = (self.board_pixel_width + SIDEBAR_WIDTH, self.board_pixel_height)
        self._font = ImageFont.load_default()

    def render_frame(self) -> Image.Image:
        """Render the current buffer as an RGB image."""
        img = Image.new("RGB", self.image_size, BG_COLOR)
        draw = ImageDraw.Draw(img)

        cells = self.visible_cells()
        for row in range(self.height):
            for col in range(self.width):
                draw_cell(
                    draw,
                    col * self.cell_size,
                    row * self.cell_size,
                    int(cells[row, col]),
                    size=self.cell_size,
                )
        draw.rectangle(
            [0, 0, self.board_pixel_width - 1, self.board_pixel_height - 1],
            outline=BORDER_COLOR,
            width=2,
        )

        # --- Sidebar ---
        sx = self.board_pixel_width
        draw.rectangle([sx, 0, self.image_size[0] - 1, self.image_size[1] - 1], fill=SIDEBAR_BG)
        draw.line([(sx, 0), (sx, self.image_size[1])], fill=BORDER_COLOR, width=2)

        cx = sx + 12
        cy = 12
        draw.text((cx, cy), "NEXT", fill=LABEL_COLOR, font=self._font)
        cy += 20
        preview = self.preview_cells()
        for r in range(preview.shape[0]):
            for c in range(preview.shape[1]):
                draw_cell(
                    draw,
                    cx + c * PREVIEW_CELL,
                    cy + r * PREVIEW_CELL,
                    int(preview[r, c]),
                    size=PREVIEW_CELL,
                )
        cy += 4 * PREVIEW_CELL + 20

        for label, value in (("SCORE", self.score), ("LINES", self.lines)):
            draw.text((cx, cy), label, fill=LABEL_COLOR, font=self._font)
            cy += 15
            draw.text((cx, cy), str(value), fill=ACCENT_COLOR, font=self._font)
            cy += 28

        if self.status_text():
            draw.text((cx, cy), self.status_text(), fill=STATUS_COLOR, font=self._font)

        return img


def record_demo(config: dict[str, Any], output_path: str | pathlib.Path) -> pathlib.Path:
    """Play one self-driven game and save it as a GIF.

    Between gravity ticks the demo issues one random command. Recording stops
    at game over or after ``record_ticks`` ticks.

    Args:
        config: Config dict loaded from game.yaml.
        output_path: Where to write the GIF.

    Returns:
        The path written.
    """
    tick_interval_ms = config.get("tick_interval_ms", TICK_INTERVAL_MS)
    max_ticks = config.get("record_ticks", 400)
    frame_ms = config.get("record_frame_ms", 80)
    rng = random.Random(config.get("seed"))

    renderer = ImageRenderer(cell_size=config.get("snapshot_cell_size", CELL_SIZE))
    clock = ManualClock()
    engine = TetrisEngine(clock, renderer, rng=rng, tick_interval_ms=tick_interval_ms)
    engine.new_game()

    frames = [renderer.render_frame()]
    for _ in range(max_ticks):
        engine.handle(rng.choice(DEMO_COMMANDS))
        clock.advance(tick_interval_ms)
        frames.append(renderer.render_frame())
        if engine.state == State.GAME_OVER:
            break

    print(f"Recorded {len(frames)} frames | Score: {engine.score} | Lines: {engine.lines}")

    output_path = pathlib.Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    quantized = [f.quantize(colors=64, method=Image.Quantize.MEDIANCUT) for f in frames]
    quantized[0].save(
        str(output_path),
        save_all=True,
        append_images=quantized[1:],
        duration=frame_ms,
        loop=0,
        optimize=True,
    )
    print(f"GIF saved: {output_path}")
    return output_path
