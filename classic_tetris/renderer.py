"""
Pygame renderer for the Tetris game.

Draws the board grid with the active piece, the NEXT mini-grid, and a sidebar
with score / lines / status text. All content comes from the ``BoardView``
buffer that the engine updates; this module only paints it.
"""

from __future__ import annotations

try:
    import pygame
except ImportError:
    pygame = None  # type: ignore[assignment]

from classic_tetris.view import BoardView, tag_color

# ── Color constants ───────────────────────────────────────────────────────
BACKGROUND_COLOR = (30, 30, 30)
GRID_LINE_COLOR = (60, 60, 60)
BORDER_COLOR = (200, 200, 200)
TEXT_COLOR = (255, 255, 255)
STATUS_COLOR = (255, 50, 50)
SIDEBAR_BG_COLOR = (20, 20, 20)


class TetrisRenderer(BoardView):
    """Pygame window showing a ``BoardView``.

    The window is divided into:
      - Left: main board area (cell_size * width) x (cell_size * height)
      - Right: sidebar with next piece, score, lines and status

    Attributes:
        cell_size: Pixel size of each grid cell.
        board_pixel_width: Pixel width of the board area.
        board_pixel_height: Pixel height of the board area.
        sidebar_width: Pixel width of the sidebar.
        window_width: Total window width.
        window_height: Total window height.
        screen: Pygame display surface (created on first render).
    """

    SIDEBAR_WIDTH_CELLS: int = 6

    def __init__(self, cell_size: int = 30, width: int = 10, height: int = 20) -> None:
        """Initialize the renderer.

        Does NOT create the Pygame window yet; that happens on the first
        call to render().
        """
        if pygame is None:
            raise ImportError("pygame is required for rendering. Install it: pip install pygame")
        super().__init__(width, height)

        self.cell_size = cell_size
        self.board_pixel_width = cell_size * width
        self.board_pixel_height = cell_size * height
        self.sidebar_width = cell_size * self.SIDEBAR_WIDTH_CELLS
        self.window_width = self.board_pixel_width + self.sidebar_width
        self.window_height = self.board_pixel_height

        self.screen: pygame.Surface | None = None
        self._clock: pygame.time.Clock | None = None
        self._font: pygame.font.Font | None = None
        self._initialized: bool = False

    def render(self, fps: int = 60) -> None:
        """Paint the current buffer and flip the display.

        Initializes Pygame on the first call.
        """
        if not self._initialized:
            self._init_pygame()

        self.screen.fill(BACKGROUND_COLOR)
        self._draw_board()
        self._draw_sidebar()
        pygame.draw.rect(
            self.screen,
            BORDER_COLOR,
            (0, 0, self.board_pixel_width, self.board_pixel_height),
            2,
        )
        if self.status_text():
            self._draw_status_overlay()

        pygame.display.flip()
        self._clock.tick(fps)

    def _init_pygame(self) -> None:
        pygame.init()
        self.screen = pygame.display.set_mode((self.window_width, self.window_height))
        pygame.display.set_caption("Tetris")
        self._clock = pygame.time.Clock()
        self._font = pygame.font.SysFont("monospace", 20)
        self._large_font = pygame.font.SysFont("monospace", 32, bold=True)
        self._initialized = True

    def _draw_cell(self, x: int, y: int, size: int, tag: int) -> None:
        color = tag_color(tag)
        pygame.draw.rect(self.screen, color, (x, y, size, size))
        if tag > 0:
            # Slightly darker border for 3D effect
            darker = tuple(max(0, c - 40) for c in color)
            pygame.draw.rect(self.screen, darker, (x, y, size, size), 1)
        else:
            pygame.draw.rect(self.screen, GRID_LINE_COLOR, (x, y, size, size), 1)

    def _draw_board(self) -> None:
        cells = self.visible_cells()
        for row in range(self.height):
            for col in range(self.width):
                self._draw_cell(
                    col * self.cell_size, row * self.cell_size, self.cell_size, int(cells[row, col])
                )

    def _draw_sidebar(self) -> None:
        sidebar_x = self.board_pixel_width
        pygame.draw.rect(
            self.screen,
            SIDEBAR_BG_COLOR,
            (sidebar_x, 0, self.sidebar_width, self.window_height),
        )
        pygame.draw.line(
            self.screen,
            BORDER_COLOR,
            (sidebar_x, 0),
            (sidebar_x, self.window_height),
            2,
        )

        x = sidebar_x + 15
        self._draw_text("NEXT", x, 20)
        preview_cell = self.cell_size * 2 // 3
        preview = self.preview_cells()
        for r in range(preview.shape[0]):
            for c in range(preview.shape[1]):
                self._draw_cell(
                    x + c * preview_cell, 50 + r * preview_cell, preview_cell, int(preview[r, c])
                )

        text_y = 50 + preview_cell * 4 + 30
        self._draw_text("SCORE", x, text_y)
        self._draw_text(str(self.score), x, text_y + 25)
        text_y += 65
        self._draw_text("LINES", x, text_y)
        self._draw_text(str(self.lines), x, text_y + 25)

    def _draw_status_overlay(self) -> None:
        overlay = pygame.Surface(
            (self.board_pixel_width, self.board_pixel_height), pygame.SRCALPHA
        )
        overlay.fill((0, 0, 0, 150))
        self.screen.blit(overlay, (0, 0))

        text = self._large_font.render(self.status_text(), True, STATUS_COLOR)
        cx = self.board_pixel_width // 2
        cy = self.board_pixel_height // 2
        self.screen.blit(text, (cx - text.get_width() // 2, cy - 40))

    def _draw_text(self, text: str, x: int, y: int, color: tuple[int, int, int] = TEXT_COLOR) -> None:
        surface = self._font.render(text, True, color)
        self.screen.blit(surface, (x, y))

    def close(self) -> None:
        """Shut down Pygame and close the window."""
        if self._initialized:
            pygame.quit()
            self._initialized = False
