# tetris

A small falling-block puzzle game built on pygame. Blocks drop onto a
20 × 10 field. Fill whole rows to clear them and score points.

## Installing

```
pip install .
```

## Playing

```
tetris
```

This opens a 500 × 620 window titled "Tetris". The current block falls one row
every 0.4 seconds. The right-hand panel shows the score and the next block.

| Key              | Action                        |
|------------------|-------------------------------|
| `A` / `←`        | move left                     |
| `D` / `→`        | move right                    |
| `W` / `↑`        | rotate                        |
| `S` / `↓`        | move down (1 point per press) |

A move or rotation that would take the block off the field or onto a filled
cell is not made. When a block comes to rest, it is fixed into the field and
the next block appears. If that next block does not fit, "GAME OVER" is shown.
Pressing any key then starts a new game with the score back at zero.

Blocks are drawn from a bag that holds one of each of the seven kinds. The bag
is refilled once it is empty.

Clearing one row at once scores 100 points, two rows 300 and three rows 500.
Clearing four rows at once scores no points.

If the files `sounds/music.mp3`, `sounds/rotate.mp3` and `sounds/clear.mp3` are
in the working directory, they are played as looping background music, as the
sound of a successful rotation and as the sound of a row clear. If they are
missing, or no audio device can be opened, the game runs without sound.

## Using the pieces

The game logic does not need a window:

```python
import random

from tetris.game import Action, Game

game = Game(rng=random.Random(1))
game.handle_action(Action.LEFT)
game.move_block_down()
print(game.score, game.is_over)
```

- `tetris.game.Game` holds the state of one game. It has `handle_action`,
  `move_left`, `move_right`, `rotate`, `move_block_down`, `reset` and `draw`.
  It takes an optional `random.Random` and optional `on_rotate` and `on_clear`
  callbacks, which are called after a successful rotation and after rows are
  cleared.
- `tetris.game.Action` lists the player commands: `LEFT`, `RIGHT`, `ROTATE`,
  `DOWN`, and `OTHER` for any other key.
- `tetris.game.Ticker` reports, given the current time in seconds, whether its
  interval has passed since it last fired.
- `tetris.grid.Grid` holds the playing field as rows of block ids, with `0` for
  an empty cell. `clear_full_rows()` removes full rows and returns how many went.
- `tetris.block.all_blocks()` returns one fresh `Block` of each `BlockKind`. A
  `Block` can `move`, `rotate`, `undo_rotation` and report its
  `cell_positions()`.
- `tetris.app.action_for_key()` maps a pygame key code to an `Action`, and
  `tetris.app.main()` runs the windowed game.

## What it does not do

There are no levels: blocks always fall at the same speed. There is no hold
slot, no hard drop, no pause, and scores are not saved between games.

## Running the tests

```
pip install .[test]
pytest
```