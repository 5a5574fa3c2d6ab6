"""Statistics API endpoints."""

from fastapi import APIRouter, Depends

from lottery_engine.api.deps import get_game_config
from lottery_engine.config import settings
from lottery_engine.schemas.games import GameConfig
from lottery_engine.schemas.statistics import (
    HotColdAnalysis,
    HotColdRequest,
    StatisticsRequest,
    StatisticsSnapshot,
)
from lottery_engine.services import statistics_service as stats

router = APIRouter()


@router.get("/windows")
async def windows():
    """可选的统计期数."""
    return {"presets": settings.WINDOW_PRESETS, "default": settings.DEFAULT_WINDOW_SIZE}


@router.post("/{game}/analyze", response_model=StatisticsSnapshot)
async def analyze(
    request: StatisticsRequest,
    config: GameConfig = Depends(get_game_config),
):
    """号码出现频率与遗漏值分析."""
    return stats.get_snapshot(config.game_id, request)


@router.post("/{game}/hot-cold", response_model=HotColdAnalysis)
async def hot_cold(
    request: HotColdRequest,
    config: GameConfig = Depends(get_game_config),
):
    """冷热号码分析."""
    return stats.get_hot_cold(config.game_id, request)
