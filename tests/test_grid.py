import pygame
import pytest

from tetris.block import COLORS
from tetris.grid import Grid


def test_new_grid_is_empty():
    grid = Grid(20, 10, 30)
    assert len(grid.cells) == 20
    assert all(len(row) == 10 for row in grid.cells)
    assert all(v == 0 for row in grid.cells for v in row)


@pytest.mark.parametrize(
    "row,col,outside",
    [(0, 0, False), (19, 9, False), (-1, 0, True), (20, 0, True), (0, -1, True), (0, 10, True)],
)
def test_is_cell_outside(row, col, outside):
    assert Grid().is_cell_outside(row, col) is outside


def test_is_cell_empty():
    grid = Grid()
    grid.cells[3][4] = 2
    assert grid.is_cell_empty(3, 4) is False
    assert grid.is_cell_empty(3, 5) is True


def test_is_cell_empty_outside_raises():
    with pytest.raises(IndexError):
        Grid().is_cell_empty(-1, 0)


def test_clear_single_row_drops_rows_above():
    grid = Grid()
    grid.cells[19] = [1] * 10
    grid.cells[18][2] = 5
    assert grid.clear_full_rows() == 1
    assert grid.cells[19][2] == 5
    assert sum(v for row in grid.cells for v in row) == 5


def test_clear_non_adjacent_rows():
    grid = Grid()
    grid.cells[19] = [1] * 10
    grid.cells[17] = [2] * 10
    grid.cells[18][0] = 3
    grid.cells[16][9] = 4
    assert grid.clear_full_rows() == 2
    assert grid.cells[19][0] == 3
    assert grid.cells[18][9] == 4
    assert len(grid.cells) == 20


def test_clear_nothing_leaves_grid():
    grid = Grid()
    grid.cells[19][0] = 1
    snapshot = [row[:] for row in grid.cells]
    assert grid.clear_full_rows() == 0
    assert grid.cells == snapshot


def test_reset_empties_grid():
    grid = Grid()
    grid.cells[5][5] = 7
    grid.reset()
    assert all(v == 0 for row in grid.cells for v in row)


def test_draw_uses_cell_colours():
    surface = pygame.Surface((500, 620))
    grid = Grid()
    grid.cells[0][1] = 2
    grid.draw(surface)
    assert tuple(surface.get_at((15, 15)))[:3] == COLORS[0]
    assert tuple(surface.get_at((45, 15)))[:3] == COLORS[2]