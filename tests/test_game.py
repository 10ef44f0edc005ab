import random

import pygame

from tetris.block import COLORS, Block, BlockKind
from tetris.game import Action, Game, Ticker


def make_game(seed=1, **kwargs):
    return Game(rng=random.Random(seed), **kwargs)


def drop_until_locked(game):
    block = game.current_block
    for _ in range(40):
        game.move_block_down()
        if game.current_block is not block:
            return
    raise AssertionError("block never locked")


def test_ticker():
    ticker = Ticker(0.4)
    assert ticker.triggered(0.1) is False
    assert ticker.triggered(0.4) is True
    assert ticker.triggered(0.5) is False
    assert ticker.triggered(0.8) is True


def test_first_two_blocks_differ():
    for seed in range(20):
        game = make_game(seed)
        assert game.current_block.kind != game.next_block.kind


def test_move_left_stops_at_wall():
    game = make_game()
    for _ in range(20):
        game.move_left()
    assert min(c.col for c in game.current_block.cell_positions()) == 0


def test_move_right_stops_at_wall():
    game = make_game()
    for _ in range(20):
        game.move_right()
    assert max(c.col for c in game.current_block.cell_positions()) == 9


def test_down_action_scores_one_point():
    game = make_game()
    game.handle_action(Action.DOWN)
    assert game.score == 1


def test_lock_writes_block_and_promotes_next():
    game = make_game()
    current, upcoming = game.current_block, game.next_block
    drop_until_locked(game)
    assert game.current_block is upcoming
    for cell in current.cell_positions():
        assert game.grid.cells[cell.row][cell.col] == current.id
    assert max(c.row for c in current.cell_positions()) == 19


def test_clearing_one_line_scores_and_signals():
    cleared = []
    game = make_game(on_clear=lambda: cleared.append(True))
    game.grid.cells[19] = [0] + [1] * 9
    block = Block(BlockKind.I)
    for _ in range(3):
        block.rotate()
    block.move(1, -4)
    game.current_block = block
    drop_until_locked(game)
    assert cleared == [True]
    assert game.score == 100
    assert game.grid.cells[19][0] == block.id
    assert game.grid.cells[19][1] == 0


def test_rotation_blocked_by_wall_is_undone():
    rotations = []
    game = make_game(on_rotate=lambda: rotations.append(True))
    block = Block(BlockKind.I)
    block.rotate()
    block.move(1, 4)
    game.current_block = block
    game.rotate()
    assert block.rotation == 1
    assert rotations == []


def test_successful_rotation_signals():
    rotations = []
    game = make_game(on_rotate=lambda: rotations.append(True))
    game.current_block = Block(BlockKind.T)
    game.current_block.move(2, 0)
    game.rotate()
    assert game.current_block.rotation == 1
    assert rotations == [True]


def test_game_over_and_restart_on_any_key():
    game = make_game()
    for row in range(4):
        game.grid.cells[row] = [1] * 9 + [0]
    game.move_block_down()
    assert game.is_over is True
    before = [c for c in game.current_block.cell_positions()]
    game.move_left()
    assert game.current_block.cell_positions() == before
    game.handle_action(Action.OTHER)
    assert game.is_over is False
    assert game.score == 0
    assert all(v == 0 for row in game.grid.cells for v in row)


def test_draw_shows_current_block():
    surface = pygame.Surface((500, 620))
    game = make_game()
    game.draw(surface)
    cell = game.current_block.cell_positions()[0]
    pixel = surface.get_at((cell.col * 30 + 15, cell.row * 30 + 15))
    assert tuple(pixel)[:3] == COLORS[game.current_block.id]