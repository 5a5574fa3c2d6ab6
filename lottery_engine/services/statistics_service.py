"""Statistics service — frequency, omission, hot/cold analysis."""

from loguru import logger

from lottery_engine.engine import statistics
from lottery_engine.engine.games import get_config
from lottery_engine.schemas.statistics import (
    HotColdAnalysis,
    HotColdRequest,
    StatisticsRequest,
    StatisticsSnapshot,
)


def get_snapshot(game_type: str, request: StatisticsRequest) -> StatisticsSnapshot:
    """Frequency and omission for every number over the requested window."""
    config = get_config(game_type)
    snapshot = statistics.analyze(request.history, config, request.window_size)
    logger.info(
        "[{}] statistics: {} draws analysed (window={})",
        game_type, snapshot.draws_analyzed, request.window_size,
    )
    return snapshot


def get_hot_cold(game_type: str, request: HotColdRequest) -> HotColdAnalysis:
    """Hottest (most frequent) and coldest (longest absent) numbers of a pool."""
    snapshot = get_snapshot(game_type, request)
    hot = statistics.top_by_frequency(snapshot, request.count, request.pool)
    cold = statistics.top_by_omission(snapshot, request.count, request.pool)
    return HotColdAnalysis(
        pool=request.pool,
        window_size=request.window_size,
        hot_numbers=statistics.number_stats(snapshot, hot, request.pool),
        cold_numbers=statistics.number_stats(snapshot, cold, request.pool),
    )
