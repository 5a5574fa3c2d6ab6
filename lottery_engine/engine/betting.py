"""Bet counting and cost calculation (单式 / 复式投注)."""

from lottery_engine.engine.exceptions import InvalidInput, InvalidSelection
from lottery_engine.engine.games import KL8, bet_counts, check_play_type
from lottery_engine.schemas.betting import BET_LIMIT_EXCEEDED, INCOMPLETE_BET, BetQuote
from lottery_engine.schemas.games import GameConfig


def combinations(n: int, k: int) -> int:
    """Exact binomial coefficient C(n, k); 0 when ``k`` is outside [0, n].

    Multiplies then divides at every step so the running product is always
    an exact integer.
    """
    if n < 0:
        raise InvalidInput(f"n must be non-negative, got {n}", constraint="n")
    if k < 0 or k > n:
        return 0
    k = min(k, n - k)
    result = 1
    for i in range(1, k + 1):
        result = result * (n - k + i) // i
    return result


def bet_count(config: GameConfig, main_selected: int, special_selected: int = 0) -> int:
    """Number of single-bet combinations covered by a complex selection."""
    main_k, special_k = bet_counts(config)
    count = combinations(main_selected, main_k)
    if config.has_special_pool:
        count *= combinations(special_selected, special_k)
    return count


def bet_amount(config: GameConfig, main_selected: int, special_selected: int = 0) -> int:
    """Cost of a selection in a complex-betting game.

    A simple bet (selected counts equal to the single-bet counts) is one
    combination.
    """
    return bet_count(config, main_selected, special_selected) * config.unit_price


def kl8_bet_count(play_type: int, selected_count: int) -> int:
    """Combinations for a kl8 play type; 0 while the bet is incomplete."""
    check_play_type(KL8, play_type)
    if selected_count < play_type:
        return 0
    return combinations(selected_count, play_type)


def kl8_bet_amount(play_type: int, selected_count: int) -> int:
    return kl8_bet_count(play_type, selected_count) * KL8.unit_price


def validate_limit(
    amount: int, config: GameConfig, combination_count: int | None = None
) -> BetQuote:
    """Flag ``amount`` when it exceeds the game's single-bet cap.

    The quote still carries the computed amount so the caller can show it
    next to the warning.
    """
    if combination_count is None:
        combination_count = amount // config.unit_price
    cap = config.max_single_bet_cost
    if cap is not None and amount > cap:
        return BetQuote(
            combination_count=combination_count,
            total_cost=amount,
            valid=False,
            reason=f"投注金额 {amount} 元超过单注最高限额 {cap} 元",
            reason_code=BET_LIMIT_EXCEEDED,
        )
    return BetQuote(combination_count=combination_count, total_cost=amount)


def quote(
    config: GameConfig,
    main_selected: int,
    special_selected: int = 0,
    play_type: int | None = None,
) -> BetQuote:
    """Full quote for a selection of ``main_selected`` / ``special_selected``."""
    lo, hi = config.main_bounds
    if not lo <= main_selected <= hi:
        raise InvalidSelection(
            f"Main count must be between {lo} and {hi}, got {main_selected}",
            constraint="main_count",
        )
    if config.has_special_pool:
        s_lo, s_hi = config.special_bounds
        if not s_lo <= special_selected <= s_hi:
            raise InvalidSelection(
                f"Special count must be between {s_lo} and {s_hi}, got {special_selected}",
                constraint="special_count",
            )

    if config.is_play_type_game:
        check_play_type(config, play_type)
        count = kl8_bet_count(play_type, main_selected)
        if count == 0:
            return BetQuote(
                combination_count=0,
                total_cost=0,
                valid=False,
                reason=f"选{play_type}玩法至少需要选择{play_type}个号码",
                reason_code=INCOMPLETE_BET,
            )
    else:
        count = bet_count(config, main_selected, special_selected)

    return validate_limit(count * config.unit_price, config, combination_count=count)
