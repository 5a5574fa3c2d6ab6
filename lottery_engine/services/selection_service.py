"""Selection service — generates numbers with the chosen strategy."""

from loguru import logger

from lottery_engine.engine import betting, selection, statistics
from lottery_engine.engine.games import bet_counts, get_config
from lottery_engine.engine.selection import RandomSource
from lottery_engine.schemas.selection import SelectionRequest, SelectionResponse
from lottery_engine.services.lottery_service import resolve_play_type


def generate(
    game_type: str, request: SelectionRequest, rng: RandomSource | None = None
) -> SelectionResponse:
    """Pick numbers and quote the resulting bet.

    Without history every strategy degrades to ``random``. Counts default to
    a single bet (for kl8: the play type).
    """
    config = get_config(game_type)
    play_type = resolve_play_type(game_type, request.play_type)
    main_k, special_k = bet_counts(config, play_type)

    main_count = request.main_count if request.main_count is not None else main_k
    special_count = request.special_count if request.special_count is not None else special_k

    snapshot = None
    if request.history:
        snapshot = statistics.analyze(request.history, config, request.window_size)

    result = selection.select(
        request.strategy, config, snapshot, main_count, special_count, rng=rng,
    )
    bet = betting.quote(config, main_count, special_count, play_type)
    logger.info(
        "[{}] generated {} selection: {} + {} ({} combinations)",
        game_type, request.strategy, result.main_numbers, result.special_numbers,
        bet.combination_count,
    )
    return SelectionResponse(
        game_id=game_type,
        strategy_label=selection.strategy_label(request.strategy),
        selection=result,
        bet=bet,
    )
