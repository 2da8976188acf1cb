from PIL import Image

from classic_tetris.game.clock import ManualClock
from classic_tetris.game.engine import TetrisEngine
from classic_tetris.snapshot import SIDEBAR_WIDTH, ImageRenderer, record_demo


def test_render_frame_size_and_piece_pixels():
    renderer = ImageRenderer(cell_size=10)
    engine = TetrisEngine(ManualClock(), renderer)
    engine.new_game()

    img = renderer.render_frame()

    assert img.size == (100 + SIDEBAR_WIDTH, 200)
    cells = engine.current.cells()
    row, col = divmod(cells[0], 10)
    color = renderer.visible_cells()[row, col]
    assert color != 0
    assert img.getpixel((col * 10 + 5, row * 10 + 5)) != img.getpixel((5, 195))


def test_record_demo_writes_gif(tmp_path):
    out = record_demo({"seed": 3, "record_ticks": 12, "record_frame_ms": 50}, tmp_path / "demo.gif")

    assert out.exists()
    with Image.open(out) as gif:
        assert gif.format == "GIF"
        assert gif.n_frames > 1
