"""Classic 10x20 Tetris: game engine plus pygame and PIL front ends."""

__version__ = "1.0.0"
