"""The windowed game loop."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Optional, Sequence

import pygame

from .game import Action, Game, Ticker

WINDOW_SIZE = (500, 620)
BACKGROUND = (30, 30, 30)
UI_BACKGROUND = (20, 20, 20)
WHITE = (255, 255, 255)
SOUNDS_DIR = Path("sounds")

_KEY_ACTIONS = {
    pygame.K_a: Action.LEFT,
    pygame.K_LEFT: Action.LEFT,
    pygame.K_d: Action.RIGHT,
    pygame.K_RIGHT: Action.RIGHT,
    pygame.K_w: Action.ROTATE,
    pygame.K_UP: Action.ROTATE,
    pygame.K_s: Action.DOWN,
    pygame.K_DOWN: Action.DOWN,
}


def action_for_key(key: int) -> Action:
    """The game action bound to a pygame key code."""
    return _KEY_ACTIONS.get(key, Action.OTHER)


def _load_sound(name: str) -> Optional[pygame.mixer.Sound]:
    try:
        return pygame.mixer.Sound(str(SOUNDS_DIR / name))
    except (pygame.error, FileNotFoundError):
        return None


def _start_music(name: str) -> None:
    try:
        pygame.mixer.music.load(str(SOUNDS_DIR / name))
        pygame.mixer.music.play(-1)
    except (pygame.error, FileNotFoundError):
        pass


def _rounded_box(surface: pygame.Surface, rect: pygame.Rect) -> None:
    radius = int(0.3 * min(rect.width, rect.height) / 2)
    pygame.draw.rect(surface, UI_BACKGROUND, rect, border_radius=radius)


def _draw_frame(surface: pygame.Surface, game: Game, fonts: dict[int, pygame.font.Font]) -> None:
    surface.fill(BACKGROUND)
    surface.blit(fonts[30].render("Score", True, WHITE), (365, 15))
    surface.blit(fonts[30].render("Next", True, WHITE), (370, 175))
    if game.is_over:
        surface.blit(fonts[27].render("GAME OVER", True, WHITE), (320, 450))
    _rounded_box(surface, pygame.Rect(320, 55, 170, 60))

    score = fonts[38].render(str(game.score), True, WHITE)
    surface.blit(score, (320 + (170 - score.get_width()) // 2, 68))

    _rounded_box(surface, pygame.Rect(320, 215, 170, 180))
    game.draw(surface)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Open the window and play until it is closed."""
    argparse.ArgumentParser(prog="tetris", description="Play Tetris.").parse_args(argv)

    pygame.init()
    try:
        audio = True
        try:
            pygame.mixer.init()
        except pygame.error:
            audio = False

        surface = pygame.display.set_mode(WINDOW_SIZE)
        pygame.display.set_caption("Tetris")
        clock = pygame.time.Clock()
        fonts = {size: pygame.font.Font(None, size) for size in (27, 30, 38)}

        rotate_sound = _load_sound("rotate.mp3") if audio else None
        clear_sound = _load_sound("clear.mp3") if audio else None
        if audio:
            _start_music("music.mp3")

        game = Game(
            on_rotate=rotate_sound.play if rotate_sound else None,
            on_clear=clear_sound.play if clear_sound else None,
        )
        ticker = Ticker(0.4)

        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    game.handle_action(action_for_key(event.key))
            if not running:
                break

            if ticker.triggered(pygame.time.get_ticks() / 1000.0):
                game.move_block_down()

            _draw_frame(surface, game, fonts)
            pygame.display.flip()
            clock.tick(60)
    finally:
        pygame.quit()
    return 0