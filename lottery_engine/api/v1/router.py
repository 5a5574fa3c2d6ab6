"""Aggregate API v1 router."""

from fastapi import APIRouter

from lottery_engine.api.v1.endpoints import (
    games,
    statistics,
    selection,
    betting,
    prizes,
)

api_router = APIRouter()

api_router.include_router(games.router, prefix="/games", tags=["玩法规则"])
api_router.include_router(statistics.router, prefix="/stats", tags=["统计分析"])
api_router.include_router(selection.router, prefix="/selection", tags=["智能选号"])
api_router.include_router(betting.router, prefix="/betting", tags=["投注计算"])
api_router.include_router(prizes.router, prefix="/prizes", tags=["奖金分析"])
