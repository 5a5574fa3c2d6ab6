"""Game rules API endpoints."""

from fastapi import APIRouter, Depends, Query

from lottery_engine.api.deps import get_game_config
from lottery_engine.schemas.games import GameConfig
from lottery_engine.schemas.prizes import TierTableRow
from lottery_engine.services import lottery_service

router = APIRouter()


@router.get("", response_model=list[GameConfig])
async def list_games():
    """列出所有支持的彩种规则."""
    return lottery_service.list_games()


@router.get("/{game}", response_model=GameConfig)
async def get_game(config: GameConfig = Depends(get_game_config)):
    """取得单一彩种规则."""
    return config


@router.get("/{game}/prize-tiers", response_model=list[TierTableRow])
async def prize_tiers(
    config: GameConfig = Depends(get_game_config),
    play_type: int | None = Query(None, ge=1, le=10, description="快乐8玩法(选几)"),
):
    """奖级对照表."""
    return lottery_service.get_prize_tiers(config.game_id, play_type)
