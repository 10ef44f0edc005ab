"""Tetromino shapes, their rotation states and their colours."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

import pygame

# Index 0 is the colour of an empty cell; index n is the colour of block id n.
COLORS: tuple[tuple[int, int, int], ...] = (
    (80, 80, 80),
    (230, 41, 55),
    (0, 82, 172),
    (0, 117, 44),
    (253, 249, 0),
    (255, 161, 0),
    (255, 109, 194),
    (200, 122, 255),
)


@dataclass(frozen=True)
class Position:
    """A cell on the board, counted from the top-left corner."""

    row: int
    col: int


class BlockKind(IntEnum):
    """The seven tetrominoes; the value is the block id stored in the grid."""

    L = 1
    J = 2
    I = 3  # noqa: E741
    O = 4  # noqa: E741
    S = 5
    T = 6
    Z = 7


def _shape(*cells: tuple[int, int]) -> tuple[Position, ...]:
    return tuple(Position(row, col) for row, col in cells)


_SHAPES: dict[BlockKind, tuple[tuple[Position, ...], ...]] = {
    BlockKind.L: (
        _shape((0, 2), (1, 0), (1, 1), (1, 2)),
        _shape((0, 1), (1, 1), (2, 1), (2, 2)),
        _shape((1, 0), (1, 1), (1, 2), (2, 0)),
        _shape((0, 0), (0, 1), (1, 1), (2, 1)),
    ),
    BlockKind.J: (
        _shape((0, 0), (1, 0), (1, 1), (1, 2)),
        _shape((0, 1), (0, 2), (1, 1), (2, 1)),
        _shape((1, 0), (1, 1), (1, 2), (2, 2)),
        _shape((0, 1), (1, 1), (2, 0), (2, 1)),
    ),
    BlockKind.I: (
        _shape((1, 0), (1, 1), (1, 2), (1, 3)),
        _shape((0, 2), (1, 2), (2, 2), (3, 2)),
        _shape((2, 0), (2, 1), (2, 2), (2, 3)),
        _shape((0, 1), (1, 1), (2, 1), (3, 1)),
    ),
    BlockKind.O: (
        _shape((0, 0), (0, 1), (1, 0), (1, 1)),
        _shape((0, 0), (0, 1), (1, 0), (1, 1)),
        _shape((0, 0), (0, 1), (1, 0), (1, 1)),
        _shape((0, 0), (0, 1), (1, 0), (1, 1)),
    ),
    BlockKind.S: (
        _shape((0, 1), (0, 2), (1, 0), (1, 1)),
        _shape((0, 1), (1, 1), (1, 2), (2, 2)),
        _shape((1, 1), (1, 2), (2, 0), (2, 1)),
        _shape((0, 0), (1, 0), (1, 1), (2, 1)),
    ),
    BlockKind.T: (
        _shape((0, 1), (1, 0), (1, 1), (1, 2)),
        _shape((0, 1), (1, 1), (1, 2), (2, 1)),
        _shape((1, 0), (1, 1), (1, 2), (2, 1)),
        _shape((0, 1), (1, 0), (1, 1), (2, 1)),
    ),
    BlockKind.Z: (
        _shape((0, 0), (0, 1), (1, 1), (1, 2)),
        _shape((0, 2), (1, 1), (1, 2), (2, 1)),
        _shape((1, 0), (1, 1), (2, 1), (2, 2)),
        _shape((0, 1), (1, 0), (1, 1), (2, 0)),
    ),
}

_SPAWN_OFFSET: dict[BlockKind, tuple[int, int]] = {
    BlockKind.L: (0, 3),
    BlockKind.J: (0, 3),
    BlockKind.I: (-1, 3),
    BlockKind.O: (0, 4),
    BlockKind.S: (0, 3),
    BlockKind.T: (0, 3),
    BlockKind.Z: (0, 3),
}


class Block:
    """A falling tetromino with a rotation state and a board offset."""

    def __init__(self, kind: BlockKind, cell_size: int = 30) -> None:
        self.kind = BlockKind(kind)
        self.cell_size = cell_size
        self.rotation = 0
        self.row_offset, self.col_offset = _SPAWN_OFFSET[self.kind]

    def __repr__(self) -> str:
        return (
            f"Block({self.kind.name}, rotation={self.rotation}, "
            f"offset=({self.row_offset}, {self.col_offset}))"
        )

    @property
    def id(self) -> int:
        return int(self.kind)

    @property
    def _states(self) -> tuple[tuple[Position, ...], ...]:
        return _SHAPES[self.kind]

    def move(self, rows: int, cols: int) -> None:
        self.row_offset += rows
        self.col_offset += cols

    def cell_positions(self) -> list[Position]:
        """The board cells the block covers in its current state."""
        return [
            Position(cell.row + self.row_offset, cell.col + self.col_offset)
            for cell in self._states[self.rotation]
        ]

    def rotate(self) -> None:
        self.rotation = (self.rotation + 1) % len(self._states)

    def undo_rotation(self) -> None:
        self.rotation = (self.rotation - 1) % len(self._states)

    def draw(self, surface: pygame.Surface, offset_x: int, offset_y: int) -> None:
        size = self.cell_size
        for cell in self.cell_positions():
            rect = pygame.Rect(
                cell.col * size + offset_x, cell.row * size + offset_y, size - 1, size - 1
            )
            pygame.draw.rect(surface, COLORS[self.id], rect)


def all_blocks() -> list[Block]:
    """A fresh bag holding one block of every kind."""
    order = (
        BlockKind.I,
        BlockKind.J,
        BlockKind.L,
        BlockKind.O,
        BlockKind.S,
        BlockKind.T,
        BlockKind.Z,
    )
    return [Block(kind) for kind in order]