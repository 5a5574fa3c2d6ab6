"""Prize API endpoints."""

from fastapi import APIRouter, Depends, Query

from lottery_engine.api.deps import get_game_config
from lottery_engine.schemas.games import GameConfig
from lottery_engine.schemas.prizes import (
    HistoryAnalysisRequest,
    PrizeStatistics,
    PrizeTier,
    TicketCheckRequest,
    TicketCheckResponse,
)
from lottery_engine.services import lottery_service, prize_service

router = APIRouter()


@router.get("/{game}/tier", response_model=PrizeTier)
async def tier(
    matched_main: int = Query(..., description="主号码命中数"),
    matched_special: int = Query(0, description="特别号命中数"),
    play_type: int | None = Query(None, description="快乐8玩法(选几)"),
    config: GameConfig = Depends(get_game_config),
):
    """根据命中数查询奖级."""
    return lottery_service.get_tier(config.game_id, matched_main, matched_special, play_type)


@router.post("/{game}/history-analysis", response_model=PrizeStatistics)
async def history_analysis(
    request: HistoryAnalysisRequest,
    config: GameConfig = Depends(get_game_config),
):
    """当前选号在往期开奖中的中奖情况."""
    return prize_service.analyze_history(config.game_id, request)


@router.post("/{game}/ticket-check", response_model=TicketCheckResponse)
async def ticket_check(
    request: TicketCheckRequest,
    config: GameConfig = Depends(get_game_config),
):
    """彩票兑奖：逐注核对指定期号的开奖结果."""
    return prize_service.check_ticket(config.game_id, request)
