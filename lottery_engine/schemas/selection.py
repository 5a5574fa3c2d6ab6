"""Pydantic schemas for number selection."""

from typing import Literal

from pydantic import BaseModel, Field

from lottery_engine.config import settings
from lottery_engine.schemas.betting import BetQuote
from lottery_engine.schemas.draws import DrawRecord

Strategy = Literal["random", "frequency", "omission", "balanced"]


class SelectionResult(BaseModel):
    strategy: str
    main_numbers: list[int]
    special_numbers: list[int] = []


class SelectionRequest(BaseModel):
    strategy: Strategy = "balanced"
    history: list[DrawRecord] | None = None  # None: pure random
    window_size: int = Field(settings.DEFAULT_WINDOW_SIZE, ge=1)
    main_count: int | None = None  # defaults to the single-bet count
    special_count: int | None = None
    play_type: int | None = None  # kl8 only


class SelectionResponse(BaseModel):
    game_id: str
    strategy_label: str
    selection: SelectionResult
    bet: BetQuote
