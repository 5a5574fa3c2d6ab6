"""Lottery service — game rules, prize tables and bet quotes."""

from loguru import logger

from lottery_engine.config import settings
from lottery_engine.engine import betting, prizes
from lottery_engine.engine.games import check_play_type, get_config, list_configs
from lottery_engine.schemas.betting import BetQuote, BetQuoteRequest, CombinationsResponse
from lottery_engine.schemas.games import GameConfig
from lottery_engine.schemas.prizes import PrizeTier, TierTableRow


def resolve_play_type(game_type: str, play_type: int | None = None) -> int | None:
    """Requested play type, ``settings.DEFAULT_KL8_PLAY_TYPE`` when omitted.

    Games without play types always get ``None``.
    """
    config = get_config(game_type)
    if not config.is_play_type_game:
        return None
    if play_type is None:
        play_type = settings.DEFAULT_KL8_PLAY_TYPE
    return check_play_type(config, play_type)


def list_games() -> list[GameConfig]:
    return list_configs()


def get_prize_tiers(game_type: str, play_type: int | None = None) -> list[TierTableRow]:
    return prizes.tier_table(game_type, resolve_play_type(game_type, play_type))


def get_tier(
    game_type: str,
    matched_main: int,
    matched_special: int = 0,
    play_type: int | None = None,
) -> PrizeTier:
    """Prize for manually entered match counts."""
    return prizes.tier_for(
        game_type, matched_main, matched_special, resolve_play_type(game_type, play_type),
    )


def quote_bet(game_type: str, request: BetQuoteRequest) -> BetQuote:
    """Price a selection of ``main_count`` / ``special_count`` numbers."""
    config = get_config(game_type)
    bet = betting.quote(
        config, request.main_count, request.special_count,
        resolve_play_type(game_type, request.play_type),
    )
    if not bet.valid:
        logger.warning(
            "[{}] bet quote flagged ({}): {} combinations, {} total",
            game_type, bet.reason_code, bet.combination_count, bet.total_cost,
        )
    return bet


def get_combinations(n: int, k: int) -> CombinationsResponse:
    return CombinationsResponse(n=n, k=k, combinations=betting.combinations(n, k))
