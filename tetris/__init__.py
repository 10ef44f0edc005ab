"""A falling-block puzzle game: blocks, the playing field, game rules and a pygame window."""

__version__ = "0.1.0"
__all__ = ["block", "grid", "game", "app"]