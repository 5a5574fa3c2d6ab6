"""Frequency / omission (遗漏值) statistics over a window of recent draws."""

from collections.abc import Sequence

from loguru import logger

from lottery_engine.engine.exceptions import InvalidInput
from lottery_engine.schemas.draws import DrawRecord
from lottery_engine.schemas.games import GameConfig
from lottery_engine.schemas.statistics import (
    NumberStat,
    Pool,
    PoolStatistics,
    StatisticsSnapshot,
)

POOLS = ("main", "special")


def _pool_statistics(
    pool: Pool,
    number_range: tuple[int, int],
    drawn: list[frozenset[int]],
    window_size: int,
) -> PoolStatistics:
    """Walk ``drawn`` (newest first) and build the maps for one pool."""
    lo, hi = number_range
    frequency = {num: 0 for num in range(lo, hi + 1)}
    omission: dict[int, int] = {}

    for i, nums in enumerate(drawn):
        for num in nums:
            if num not in frequency:
                continue
            frequency[num] += 1
            if num not in omission:
                omission[num] = i

    # Never seen in the window: maximal staleness
    for num in frequency:
        omission.setdefault(num, window_size)

    return PoolStatistics(
        pool=pool,
        number_range=number_range,
        frequency=frequency,
        omission=dict(sorted(omission.items())),
    )


def analyze(
    history: Sequence[DrawRecord], config: GameConfig, window_size: int
) -> StatisticsSnapshot:
    """Compute per-number statistics over the most recent ``window_size`` draws.

    Args:
        history: Chronological draw history, most recent draw last.
        config: Rules of the game the history belongs to.
        window_size: Number of most recent draws to analyse. When the history
            is shorter, all of it is used.

    Returns:
        Snapshot with independent main-pool and special-pool maps.
    """
    if window_size < 1:
        raise InvalidInput(
            f"Window size must be at least 1, got {window_size}",
            constraint="window_size",
        )

    window = list(history[-window_size:])
    window.reverse()

    main = _pool_statistics(
        "main", config.main_range, [d.main_numbers for d in window], window_size,
    )
    special = None
    if config.special_range is not None:
        special = _pool_statistics(
            "special",
            config.special_range,
            [d.special_numbers for d in window],
            window_size,
        )

    logger.debug(
        "[{}] statistics over {} draws (window={})",
        config.game_id, len(window), window_size,
    )
    return StatisticsSnapshot(
        game_id=config.game_id,
        window_size=window_size,
        draws_analyzed=len(window),
        main=main,
        special=special,
    )


def _pool_or_raise(snapshot: StatisticsSnapshot, pool: str) -> PoolStatistics | None:
    if pool not in POOLS:
        raise InvalidInput(f"Unknown pool: {pool}", constraint="pool")
    return snapshot.pool(pool)


def _top(values: dict[int, int], count: int) -> list[int]:
    # Highest value first, ties by ascending number
    ranked = sorted(values.items(), key=lambda item: (-item[1], item[0]))
    return [num for num, _ in ranked[:max(count, 0)]]


def top_by_frequency(
    snapshot: StatisticsSnapshot, count: int, pool: Pool = "main"
) -> list[int]:
    """The ``count`` most frequent numbers of ``pool`` (hot numbers)."""
    stats = _pool_or_raise(snapshot, pool)
    if stats is None:
        return []
    return _top(stats.frequency, count)


def top_by_omission(
    snapshot: StatisticsSnapshot, count: int, pool: Pool = "main"
) -> list[int]:
    """The ``count`` longest-absent numbers of ``pool`` (cold numbers)."""
    stats = _pool_or_raise(snapshot, pool)
    if stats is None:
        return []
    return _top(stats.omission, count)


def number_stats(
    snapshot: StatisticsSnapshot, numbers: list[int], pool: Pool = "main"
) -> list[NumberStat]:
    """Expand ``numbers`` into full per-number rows for display."""
    stats = _pool_or_raise(snapshot, pool)
    if stats is None:
        return []
    draws = snapshot.draws_analyzed
    return [
        NumberStat(
            number=num,
            frequency=stats.frequency[num],
            omission=stats.omission[num],
            percentage=round(stats.frequency[num] / draws * 100, 2) if draws > 0 else 0,
        )
        for num in numbers
    ]
