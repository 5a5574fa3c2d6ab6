"""Prize service — historical prize analysis and ticket checking."""

from loguru import logger

from lottery_engine.config import settings
from lottery_engine.engine import prizes
from lottery_engine.schemas.prizes import (
    HistoryAnalysisRequest,
    PrizeStatistics,
    TicketCheckRequest,
    TicketCheckResponse,
)
from lottery_engine.schemas.selection import SelectionResult
from lottery_engine.services.lottery_service import resolve_play_type


def analyze_history(game_type: str, request: HistoryAnalysisRequest) -> PrizeStatistics:
    """How a fixed selection would have fared over recent draws.

    Only the most recent ``limit`` draws are analysed (``settings.PRIZE_ANALYSIS_LIMIT``
    when the request does not say; 0 means the whole history).
    """
    limit = request.limit if request.limit is not None else settings.PRIZE_ANALYSIS_LIMIT
    history = request.history[-limit:] if limit else request.history

    selection = SelectionResult(
        strategy="manual",
        main_numbers=request.main_numbers,
        special_numbers=request.special_numbers,
    )
    result = prizes.analyze_against_history(
        selection, history, game_type, resolve_play_type(game_type, request.play_type),
    )
    logger.info(
        "[{}] prize analysis over {} draws: {} wins, fixed total {}",
        game_type, result.total_draws, result.winning_draws, result.total_fixed_prize_amount,
    )
    return result


def check_ticket(game_type: str, request: TicketCheckRequest) -> TicketCheckResponse:
    """Check a parsed ticket against the draw of its issue."""
    result = prizes.check_ticket(
        request.ticket, request.history, game_type,
        resolve_play_type(game_type, request.play_type),
    )
    logger.info(
        "[{}] ticket {}: {}/{} winning entries",
        game_type, result.issue_id, result.winning_entries, len(result.results),
    )
    return result
