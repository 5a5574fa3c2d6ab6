"""Number selection strategies.

random     uniform Fisher-Yates pick from the full range
frequency  hot-biased: shuffle the 2x most frequent numbers, fill any shortfall
omission   cold-biased: same shape over the longest-absent numbers
balanced   union of the ceil(n/2) hottest and ceil(n/2) coldest numbers

Each strategy runs independently on the main pool and, when the game has one,
on the special pool using that pool's own statistics.
"""

import math
import random
from collections.abc import MutableSequence
from typing import Protocol

from loguru import logger

from lottery_engine.engine.exceptions import InvalidInput, InvalidSelection
from lottery_engine.engine.games import check_play_type
from lottery_engine.engine.statistics import top_by_frequency, top_by_omission
from lottery_engine.schemas.games import GameConfig
from lottery_engine.schemas.selection import SelectionResult
from lottery_engine.schemas.statistics import Pool, StatisticsSnapshot


class RandomSource(Protocol):
    def randrange(self, stop: int) -> int: ...


STRATEGY_LABELS = {
    "random": "随机选取",
    "frequency": "高频优先",
    "omission": "遗漏优先",
    "balanced": "均衡选取",
}

STRATEGIES = tuple(STRATEGY_LABELS)


def strategy_label(strategy: str) -> str:
    if strategy not in STRATEGY_LABELS:
        raise InvalidInput(f"Unknown strategy: {strategy}", constraint="strategy")
    return STRATEGY_LABELS[strategy]


def fisher_yates_shuffle(items: MutableSequence[int], rng: RandomSource) -> None:
    """Shuffle ``items`` in place."""
    for i in range(len(items) - 1, 0, -1):
        j = rng.randrange(i + 1)
        items[i], items[j] = items[j], items[i]


def _random_pick(full_range: list[int], count: int, rng: RandomSource) -> list[int]:
    pool = list(full_range)
    fisher_yates_shuffle(pool, rng)
    return sorted(pool[:count])


def _pick_from_candidates(
    candidates: list[int], full_range: list[int], count: int, rng: RandomSource
) -> list[int]:
    """Take ``count`` numbers from ``candidates``, topping up from the rest."""
    pool = list(dict.fromkeys(candidates))
    if len(pool) >= count:
        fisher_yates_shuffle(pool, rng)
        return sorted(pool[:count])

    chosen = set(pool)
    unused = [num for num in full_range if num not in chosen]
    fisher_yates_shuffle(unused, rng)
    return sorted(pool + unused[:count - len(pool)])


def _candidates(
    strategy: str, snapshot: StatisticsSnapshot, count: int, pool: Pool
) -> list[int]:
    if strategy == "frequency":
        return top_by_frequency(snapshot, count * 2, pool)
    if strategy == "omission":
        return top_by_omission(snapshot, count * 2, pool)
    half = math.ceil(count / 2)
    return top_by_frequency(snapshot, half, pool) + top_by_omission(snapshot, half, pool)


def _select_pool(
    strategy: str,
    snapshot: StatisticsSnapshot | None,
    full_range: list[int],
    count: int,
    pool: Pool,
    rng: RandomSource,
) -> list[int]:
    if count == 0:
        return []
    if strategy == "random" or snapshot is None:
        return _random_pick(full_range, count, rng)
    return _pick_from_candidates(
        _candidates(strategy, snapshot, count, pool), full_range, count, rng,
    )


def _check_count(count: int, bounds: tuple[int, int], constraint: str) -> None:
    lo, hi = bounds
    if not lo <= count <= hi:
        raise InvalidSelection(
            f"{constraint} must be between {lo} and {hi}, got {count}",
            constraint=constraint,
        )


def select(
    strategy: str,
    config: GameConfig,
    snapshot: StatisticsSnapshot | None,
    target_main_count: int,
    target_special_count: int = 0,
    rng: RandomSource | None = None,
) -> SelectionResult:
    """Generate a candidate selection.

    Args:
        strategy: One of ``random``, ``frequency``, ``omission``, ``balanced``.
        config: Game rules.
        snapshot: Statistics to bias the pick with. ``None`` falls back to
            ``random`` for every strategy.
        target_main_count: How many main numbers to pick.
        target_special_count: How many special numbers to pick (0 for games
            without a special pool).
        rng: Source with ``randrange``; the ``random`` module when omitted.

    Returns:
        Sorted, de-duplicated main and special numbers.
    """
    strategy_label(strategy)
    _check_count(target_main_count, config.main_bounds, "main_count")
    if config.has_special_pool:
        _check_count(target_special_count, config.special_bounds, "special_count")
    elif target_special_count:
        raise InvalidSelection(
            f"{config.game_id} has no special numbers", constraint="special_count",
        )
    if snapshot is not None and snapshot.game_id != config.game_id:
        raise InvalidInput(
            f"Statistics for {snapshot.game_id} cannot drive a {config.game_id} selection",
            constraint="snapshot",
        )

    rng = rng or random
    main = _select_pool(
        strategy, snapshot, config.main_numbers(), target_main_count, "main", rng,
    )
    special = _select_pool(
        strategy, snapshot, config.special_numbers(), target_special_count, "special", rng,
    )
    logger.debug("[{}] {} selection: {} + {}", config.game_id, strategy, main, special)
    return SelectionResult(strategy=strategy, main_numbers=main, special_numbers=special)


def validate_selection(
    config: GameConfig,
    main_numbers: list[int],
    special_numbers: list[int] | None = None,
    play_type: int | None = None,
) -> tuple[list[int], list[int]]:
    """Check a user selection and return it sorted.

    Raises:
        InvalidSelection: duplicates, out-of-range numbers, or counts outside
            the game's bounds (for kl8: fewer numbers than the play type).
    """
    special_numbers = special_numbers or []
    _check_numbers(main_numbers, config.main_range, "main_numbers")
    _check_count(len(main_numbers), config.main_bounds, "main_count")

    if config.has_special_pool:
        _check_numbers(special_numbers, config.special_range, "special_numbers")
        _check_count(len(special_numbers), config.special_bounds, "special_count")
    elif special_numbers:
        raise InvalidSelection(
            f"{config.game_id} has no special numbers", constraint="special_numbers",
        )

    play_type = check_play_type(config, play_type)
    if play_type is not None and len(main_numbers) < play_type:
        raise InvalidSelection(
            f"选{play_type}玩法至少需要选择{play_type}个号码",
            constraint="main_count",
        )
    return sorted(main_numbers), sorted(special_numbers)


def _check_numbers(numbers: list[int], number_range: tuple[int, int], constraint: str) -> None:
    if len(set(numbers)) != len(numbers):
        raise InvalidSelection(f"Duplicate numbers in {constraint}", constraint=constraint)
    lo, hi = number_range
    outside = [num for num in numbers if not lo <= num <= hi]
    if outside:
        raise InvalidSelection(
            f"{constraint} out of range {lo}-{hi}: {outside}", constraint=constraint,
        )
