"""Game state and rules: moving, rotating, locking and scoring blocks."""

from __future__ import annotations

import random
from enum import Enum, auto
from typing import Callable, Optional

import pygame

from .block import Block, BlockKind, all_blocks
from .grid import BOARD_MARGIN, Grid

_LINE_POINTS = {1: 100, 2: 300, 3: 500}


class Action(Enum):
    """A player command; OTHER stands for any unmapped key."""

    LEFT = auto()
    RIGHT = auto()
    ROTATE = auto()
    DOWN = auto()
    OTHER = auto()


class Ticker:
    """Reports when at least `interval` seconds have passed since the last tick."""

    def __init__(self, interval: float = 0.4) -> None:
        self.interval = interval
        self.last = 0.0

    def triggered(self, now: float) -> bool:
        if now - self.last >= self.interval:
            self.last = now
            return True
        return False


class Game:
    """One game of Tetris on a 20 by 10 board."""

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        on_rotate: Optional[Callable[[], None]] = None,
        on_clear: Optional[Callable[[], None]] = None,
    ) -> None:
        self.rng = rng or random.Random()
        self.on_rotate = on_rotate
        self.on_clear = on_clear
        self.grid = Grid(20, 10, 30)
        self.score = 0
        self.is_over = False
        self._bag: list[Block] = all_blocks()
        self.current_block = self._random_block()
        self.next_block = self._random_block()

    def _random_block(self) -> Block:
        if not self._bag:
            self._bag = all_blocks()
        return self._bag.pop(self.rng.randrange(len(self._bag)))

    def handle_action(self, action: Action) -> None:
        if self.is_over:
            self.is_over = False
            self.reset()
        if action is Action.LEFT:
            self.move_left()
        elif action is Action.RIGHT:
            self.move_right()
        elif action is Action.ROTATE:
            self.rotate()
        elif action is Action.DOWN:
            self.move_block_down()
            self._update_score(0, 1)

    def _is_block_outside(self) -> bool:
        return any(
            self.grid.is_cell_outside(cell.row, cell.col)
            for cell in self.current_block.cell_positions()
        )

    def _block_fits(self) -> bool:
        return all(
            self.grid.is_cell_empty(cell.row, cell.col)
            for cell in self.current_block.cell_positions()
        )

    def _placement_invalid(self) -> bool:
        return self._is_block_outside() or not self._block_fits()

    def move_left(self) -> None:
        if not self.is_over:
            self.current_block.move(0, -1)
            if self._placement_invalid():
                self.current_block.move(0, 1)

    def move_right(self) -> None:
        if not self.is_over:
            self.current_block.move(0, 1)
            if self._placement_invalid():
                self.current_block.move(0, -1)

    def rotate(self) -> None:
        if not self.is_over:
            self.current_block.rotate()
            if self._placement_invalid():
                self.current_block.undo_rotation()
            elif self.on_rotate:
                self.on_rotate()

    def move_block_down(self) -> None:
        if not self.is_over:
            self.current_block.move(1, 0)
            if self._placement_invalid():
                self.current_block.move(-1, 0)
                self._lock_block()

    def _lock_block(self) -> None:
        for cell in self.current_block.cell_positions():
            self.grid.cells[cell.row][cell.col] = self.current_block.id
        self.current_block = self.next_block
        if not self._block_fits():
            self.is_over = True
        self.next_block = self._random_block()
        cleared = self.grid.clear_full_rows()
        if cleared > 0:
            if self.on_clear:
                self.on_clear()
            self._update_score(cleared, 0)

    def _update_score(self, lines_cleared: int, move_down_points: int) -> None:
        self.score += _LINE_POINTS.get(lines_cleared, 0) + move_down_points

    def reset(self) -> None:
        self.grid.reset()
        self._bag = all_blocks()
        self.current_block = self._random_block()
        self.next_block = self._random_block()
        self.score = 0

    def draw(self, surface: pygame.Surface) -> None:
        self.grid.draw(surface)
        self.current_block.draw(surface, BOARD_MARGIN, BOARD_MARGIN)
        if self.next_block.kind is BlockKind.I:
            self.next_block.draw(surface, 255, 290)
        elif self.next_block.kind is BlockKind.O:
            self.next_block.draw(surface, 255, 280)
        else:
            self.next_block.draw(surface, 270, 270)