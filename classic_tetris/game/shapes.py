"""
Tetromino catalog with all 4 rotation states and the color mapping.

Five shapes are used: L, Z, T, O and I. Each shape has exactly 4 rotation
slots (shapes with 2-fold symmetry repeat their states, the O-piece repeats
one state four times) so rotation is always ``(rotation + 1) % 4``.

Coordinate convention:
  - Rotation states are stored as (row, col) cells relative to the piece's
    anchor (top-left corner of its bounding box).
  - On a board of a given width, a cell becomes the linear offset
    ``row * width + col``. The main board uses width 10, the NEXT preview
    mini-grid uses width 4.
"""

from __future__ import annotations

BOARD_WIDTH = 10
ROTATION_COUNT = 4

# =============================================================================
# Shape colors (name used by the web-style palette, RGB used by renderers)
# =============================================================================

COLOR_ORANGE = (255, 165, 0)    # L
COLOR_RED    = (220, 30, 30)    # Z
COLOR_PURPLE = (160, 0, 200)    # T
COLOR_GREEN  = (0, 200, 80)     # O
COLOR_BLUE   = (30, 90, 230)    # I

# =============================================================================
# Tetromino Definitions
# =============================================================================
# Rotation order: 0=spawn, then clockwise.

L_SHAPE: dict = {
    "id": 0,
    "name": "L",
    "color": "orange",
    "rgb": COLOR_ORANGE,
    "rotations": (
        ((0, 1), (1, 1), (2, 1), (0, 2)),
        ((1, 0), (1, 1), (1, 2), (2, 2)),
        ((0, 1), (1, 1), (2, 1), (2, 0)),
        ((1, 0), (2, 0), (2, 1), (2, 2)),
    ),
}

Z_SHAPE: dict = {
    "id": 1,
    "name": "Z",
    "color": "red",
    "rgb": COLOR_RED,
    "rotations": (
        ((0, 0), (1, 0), (1, 1), (2, 1)),
        ((1, 1), (1, 2), (2, 0), (2, 1)),
        ((0, 0), (1, 0), (1, 1), (2, 1)),
        ((1, 1), (1, 2), (2, 0), (2, 1)),
    ),
}

T_SHAPE: dict = {
    "id": 2,
    "name": "T",
    "color": "purple",
    "rgb": COLOR_PURPLE,
    "rotations": (
        ((0, 1), (1, 0), (1, 1), (1, 2)),
        ((0, 1), (1, 1), (1, 2), (2, 1)),
        ((1, 0), (1, 1), (1, 2), (2, 1)),
        ((0, 1), (1, 0), (1, 1), (2, 1)),
    ),
}

O_SHAPE: dict = {
    "id": 3,
    "name": "O",
    "color": "green",
    "rgb": COLOR_GREEN,
    "rotations": (
        # All 4 rotations are identical for the O-piece
        ((0, 0), (0, 1), (1, 0), (1, 1)),
        ((0, 0), (0, 1), (1, 0), (1, 1)),
        ((0, 0), (0, 1), (1, 0), (1, 1)),
        ((0, 0), (0, 1), (1, 0), (1, 1)),
    ),
}

I_SHAPE: dict = {
    "id": 4,
    "name": "I",
    "color": "blue",
    "rgb": COLOR_BLUE,
    "rotations": (
        ((0, 1), (1, 1), (2, 1), (3, 1)),
        ((1, 0), (1, 1), (1, 2), (1, 3)),
        ((0, 1), (1, 1), (2, 1), (3, 1)),
        ((1, 0), (1, 1), (1, 2), (1, 3)),
    ),
}

# =============================================================================
# Ordered list of all shape types (index == shape id)
# =============================================================================

SHAPE_TYPES: tuple[dict, ...] = (L_SHAPE, Z_SHAPE, T_SHAPE, O_SHAPE, I_SHAPE)
SHAPE_COUNT = len(SHAPE_TYPES)


def rotation_states(shape_id: int) -> tuple[tuple[tuple[int, int], ...], ...]:
    """Return the 4 rotation states of a shape as (row, col) cells."""
    assert 0 <= shape_id < SHAPE_COUNT, f"unknown shape id {shape_id}"
    return SHAPE_TYPES[shape_id]["rotations"]


def offsets(shape_id: int, rotation: int, width: int = BOARD_WIDTH) -> tuple[int, ...]:
    """Return the 4 linear offsets of a rotation state on a board of ``width``.

    Args:
        shape_id: Index into SHAPE_TYPES (0-4).
        rotation: Rotation state index (0-3).
        width: Row width of the target board (10 for play, 4 for preview).

    Returns:
        Tuple of 4 distinct offsets ``row * width + col``.
    """
    assert 0 <= rotation < ROTATION_COUNT, f"bad rotation {rotation}"
    return tuple(r * width + c for r, c in rotation_states(shape_id)[rotation])


def rotation_order(shape_id: int) -> int:
    """Smallest number of rotations that brings the shape back to state 0."""
    states = rotation_states(shape_id)
    first = frozenset(states[0])
    for k in range(1, ROTATION_COUNT):
        if frozenset(states[k]) == first:
            return k
    return ROTATION_COUNT


def color_of(shape_id: int) -> str:
    return SHAPE_TYPES[shape_id]["color"]


def rgb_of(shape_id: int) -> tuple[int, int, int]:
    return SHAPE_TYPES[shape_id]["rgb"]


def tag_of(shape_id: int) -> int:
    """Board cell tag for a locked cell of this shape (0 is reserved for empty)."""
    return shape_id + 1


def shape_of_tag(tag: int) -> int:
    return tag - 1
