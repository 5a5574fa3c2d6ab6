"""Pydantic schemas for bet cost quotes."""

from pydantic import BaseModel, Field

BET_LIMIT_EXCEEDED = "bet_limit_exceeded"
INCOMPLETE_BET = "incomplete_bet"


class BetQuote(BaseModel):
    combination_count: int
    total_cost: int
    valid: bool = True
    reason: str | None = None
    reason_code: str | None = None  # bet_limit_exceeded / incomplete_bet


class BetQuoteRequest(BaseModel):
    main_count: int = Field(..., ge=0)
    special_count: int = Field(0, ge=0)
    play_type: int | None = None  # kl8 only


class CombinationsResponse(BaseModel):
    n: int
    k: int
    combinations: int
