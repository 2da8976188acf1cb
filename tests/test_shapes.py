from classic_tetris.game.engine import ActivePiece
from classic_tetris.game.shapes import (
    SHAPE_COUNT,
    SHAPE_TYPES,
    color_of,
    offsets,
    rgb_of,
    rotation_order,
    rotation_states,
)


def _connected(cells):
    cells = set(cells)
    start = next(iter(cells))
    seen = {start}
    stack = [start]
    while stack:
        r, c = stack.pop()
        for nb in ((r + 1, c), (r - 1, c), (r, c + 1), (r, c - 1)):
            if nb in cells and nb not in seen:
                seen.add(nb)
                stack.append(nb)
    return seen == cells


def test_catalog_has_five_shapes_with_four_rotations():
    assert SHAPE_COUNT == 5
    for shape_id in range(SHAPE_COUNT):
        assert len(rotation_states(shape_id)) == 4


def test_every_rotation_has_four_distinct_offsets():
    for shape_id in range(SHAPE_COUNT):
        for rotation in range(4):
            cells = offsets(shape_id, rotation)
            assert len(cells) == 4
            assert len(set(cells)) == 4


def test_every_rotation_is_a_connected_tetromino():
    for shape_id in range(SHAPE_COUNT):
        for state in rotation_states(shape_id):
            assert _connected(state), SHAPE_TYPES[shape_id]["name"]


def test_four_rotations_return_to_start():
    for shape_id in range(SHAPE_COUNT):
        piece = ActivePiece(shape_id, 0, 4)
        rotated = piece
        for _ in range(4):
            rotated = rotated.rotated()
        assert rotated == piece
        assert set(rotated.cells()) == set(piece.cells())


def test_rotation_order_matches_symmetry():
    orders = {shape["name"]: rotation_order(shape["id"]) for shape in SHAPE_TYPES}
    assert orders == {"L": 4, "Z": 2, "T": 4, "O": 1, "I": 2}


def test_offsets_on_main_board():
    assert offsets(0, 0) == (1, 11, 21, 2)
    assert offsets(3, 2) == (0, 1, 10, 11)
    assert offsets(4, 0) == (1, 11, 21, 31)
    assert offsets(4, 1) == (10, 11, 12, 13)


def test_offsets_on_preview_grid():
    assert offsets(0, 0, width=4) == (1, 5, 9, 2)
    assert max(offsets(4, 0, width=4)) < 16


def test_color_mapping():
    assert [color_of(i) for i in range(SHAPE_COUNT)] == ["orange", "red", "purple", "green", "blue"]
    assert len({rgb_of(i) for i in range(SHAPE_COUNT)}) == SHAPE_COUNT
