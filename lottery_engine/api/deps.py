"""Dependency injection for FastAPI."""

from lottery_engine.engine.games import get_config
from lottery_engine.schemas.games import GameConfig


def get_game_config(game: str) -> GameConfig:
    """Resolve the ``{game}`` path parameter to its rules.

    Unknown games raise ``ConfigNotFound``, answered with 404 by the app's
    engine error handler.
    """
    return get_config(game)
