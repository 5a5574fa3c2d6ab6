"""Number selection API endpoints."""

from fastapi import APIRouter, Depends

from lottery_engine.api.deps import get_game_config
from lottery_engine.schemas.games import GameConfig
from lottery_engine.schemas.selection import SelectionRequest, SelectionResponse
from lottery_engine.services import selection_service

router = APIRouter()


@router.post("/{game}/generate", response_model=SelectionResponse)
async def generate(
    request: SelectionRequest,
    config: GameConfig = Depends(get_game_config),
):
    """按算法生成号码（随机 / 高频 / 遗漏 / 均衡）."""
    return selection_service.generate(config.game_id, request)
