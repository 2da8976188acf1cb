"""
Manual play mode.

Runs the engine in a pygame window. Gravity comes from a pygame timer event,
player input from the keyboard:
  - Left/Right arrow: move piece
  - Down arrow: move down one row
  - Up arrow: rotate
  - Space: start / pause / resume (starts a new game after game over)
  - R: new game
  - Escape / close window: quit
"""

from __future__ import annotations

import random
from typing import Any, Optional

try:
    import pygame
except ImportError:
    pygame = None  # type: ignore[assignment]

from classic_tetris.game.clock import TickCallback
from classic_tetris.game.engine import TICK_INTERVAL_MS, Command, State, TetrisEngine
from classic_tetris.renderer import TetrisRenderer


# ── Keyboard mapping ─────────────────────────────────────────────────────
KEY_MAP: dict[int, Command] = {}
if pygame is not None:
    KEY_MAP = {
        pygame.K_LEFT: Command.MOVE_LEFT,
        pygame.K_RIGHT: Command.MOVE_RIGHT,
        pygame.K_DOWN: Command.MOVE_DOWN,
        pygame.K_UP: Command.ROTATE,
        pygame.K_SPACE: Command.TOGGLE,
    }


class PygameClock:
    """Clock backed by ``pygame.time.set_timer``.

    Ticks arrive as events of ``event_type`` in the pygame queue and must be
    passed to ``dispatch``. Stopping cancels the timer and drops any tick
    events already queued.
    """

    def __init__(self, event_type: Optional[int] = None) -> None:
        if pygame is None:
            raise ImportError("pygame is required for play mode. Install it: pip install pygame")
        self.event_type = event_type if event_type is not None else pygame.USEREVENT + 1
        self.running = False
        self._on_tick: Optional[TickCallback] = None

    def start(self, interval_ms: int, on_tick: TickCallback) -> None:
        if self.running:
            raise RuntimeError("clock already running")
        self._on_tick = on_tick
        self.running = True
        pygame.time.set_timer(self.event_type, interval_ms)

    def stop(self) -> None:
        pygame.time.set_timer(self.event_type, 0)
        pygame.event.clear(self.event_type)
        self.running = False
        self._on_tick = None

    def dispatch(self, event: Any) -> bool:
        """Run the tick callback for a timer event. Returns True if the event was a tick."""
        if event.type != self.event_type:
            return False
        if self.running and self._on_tick is not None:
            self._on_tick()
        return True


def play_manual(config: dict[str, Any]) -> None:
    """Run the game in a pygame window until the player quits.

    Args:
        config: Config dict loaded from game.yaml.
    """
    if pygame is None:
        raise ImportError("pygame is required for play mode. Install it: pip install pygame")

    cell_size = config.get("cell_size", 30)
    fps = config.get("fps", 60)
    tick_interval_ms = config.get("tick_interval_ms", TICK_INTERVAL_MS)
    seed = config.get("seed")

    renderer = TetrisRenderer(cell_size=cell_size)
    # Force renderer init before event loop (pygame must be initialized for event.get())
    renderer.render(fps)

    clock = PygameClock()
    engine = TetrisEngine(
        clock,
        renderer,
        rng=random.Random(seed),
        tick_interval_ms=tick_interval_ms,
    )
    games = 0
    running = True

    while running:
        previous_state = engine.state
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
                break
            if clock.dispatch(event):
                continue
            if event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                    break
                if event.key == pygame.K_r:
                    engine.new_game()
                    games += 1
                elif event.key in KEY_MAP:
                    starting = engine.state in (State.IDLE, State.GAME_OVER)
                    engine.handle(KEY_MAP[event.key])
                    if starting and engine.state == State.RUNNING:
                        games += 1

        if engine.state == State.GAME_OVER and previous_state != State.GAME_OVER:
            print(f"Game {games} over | Score: {engine.score} | Lines: {engine.lines}")

        renderer.render(fps)

    if clock.running:
        clock.stop()
    renderer.close()
