"""Bet calculation API endpoints."""

from fastapi import APIRouter, Depends, Query

from lottery_engine.api.deps import get_game_config
from lottery_engine.schemas.betting import BetQuote, BetQuoteRequest, CombinationsResponse
from lottery_engine.schemas.games import GameConfig
from lottery_engine.services import lottery_service

router = APIRouter()


@router.get("/combinations", response_model=CombinationsResponse)
async def combinations(
    n: int = Query(..., ge=0, le=1000),
    k: int = Query(..., ge=0),
):
    """组合数 C(n, k)."""
    return lottery_service.get_combinations(n, k)


@router.post("/{game}/quote", response_model=BetQuote)
async def quote(
    request: BetQuoteRequest,
    config: GameConfig = Depends(get_game_config),
):
    """计算复式投注注数与金额."""
    return lottery_service.quote_bet(config.game_id, request)
