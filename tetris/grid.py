"""The playing field: a matrix of block ids, zero meaning empty."""

from __future__ import annotations

import pygame

from .block import COLORS

BOARD_MARGIN = 11


class Grid:
    """A rows-by-columns board that can detect and clear full rows."""

    def __init__(self, rows: int = 20, columns: int = 10, cell_size: int = 30) -> None:
        self.rows = rows
        self.columns = columns
        self.cell_size = cell_size
        self.cells: list[list[int]] = []
        self.reset()

    def reset(self) -> None:
        self.cells = [[0] * self.columns for _ in range(self.rows)]

    def is_cell_outside(self, row: int, col: int) -> bool:
        return not (0 <= row < self.rows and 0 <= col < self.columns)

    def is_cell_empty(self, row: int, col: int) -> bool:
        if self.is_cell_outside(row, col):
            raise IndexError(f"cell ({row}, {col}) is outside the grid")
        return self.cells[row][col] == 0

    def clear_full_rows(self) -> int:
        """Remove every full row, drop the rows above, and return how many went."""
        kept = [row for row in self.cells if not all(row)]
        cleared = self.rows - len(kept)
        self.cells = [[0] * self.columns for _ in range(cleared)] + kept
        return cleared

    def draw(self, surface: pygame.Surface) -> None:
        size = self.cell_size
        for row_index, row in enumerate(self.cells):
            for col_index, value in enumerate(row):
                rect = pygame.Rect(
                    col_index * size + BOARD_MARGIN,
                    row_index * size + BOARD_MARGIN,
                    size - 1,
                    size - 1,
                )
                pygame.draw.rect(surface, COLORS[value], rect)