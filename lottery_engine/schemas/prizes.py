"""Pydantic schemas for prize tiers and prize analysis."""

from datetime import date
from decimal import Decimal
from typing import Annotated

from pydantic import BaseModel, Field, PlainSerializer

from lottery_engine.schemas.betting import BetQuote
from lottery_engine.schemas.draws import DrawRecord, ParsedTicket


def _amount_to_json(value: Decimal) -> int | float:
    return int(value) if value == value.to_integral_value() else float(value)


# Exact money: Decimal internally, a plain JSON number on the wire
Amount = Annotated[
    Decimal, PlainSerializer(_amount_to_json, return_type=int | float, when_used="json"),
]


class PrizeTier(BaseModel):
    model_config = {"frozen": True}

    name: str
    label: str
    amount: Amount | None = None  # None: floating (jackpot pool) prize
    floating: bool = False

    @property
    def is_winning(self) -> bool:
        return self.name != "no_prize"


class TierTableRow(BaseModel):
    matched_main: int
    matched_special: int = 0
    tier: PrizeTier


class MatchResult(BaseModel):
    matched_main: int
    matched_special: int
    matched_main_numbers: list[int]
    matched_special_numbers: list[int]


class PrizeBreakdownItem(BaseModel):
    """Winning single bets of one match pattern inside a complex bet."""

    matched_main: int
    matched_special: int = 0
    tier: PrizeTier
    bet_count: int
    amount: Amount | None = None  # tier amount x bet_count, None when floating


class PrizeAnalysisRecord(BaseModel):
    issue_id: str
    draw_date: date | None = None
    matched_main: int
    matched_special: int
    tier_name: str
    tier_label: str
    amount: Amount | None = Decimal(0)  # None: floating prize, unknown offline
    floating: bool = False
    winning: bool = False
    draw_main_numbers: list[int]
    draw_special_numbers: list[int] = []
    breakdown: list[PrizeBreakdownItem] = []


class PrizeStatistics(BaseModel):
    game_id: str
    play_type: int | None = None
    total_draws: int
    winning_draws: int
    floating_wins: int
    winning_rate: float  # percent
    total_fixed_prize_amount: Amount
    max_fixed_prize_amount: Amount
    max_prize_issue_id: str | None = None
    average_prize_amount: Amount
    bet_cost: BetQuote
    total_bet_cost: int
    net_fixed_result: Amount
    records: list[PrizeAnalysisRecord]


class TicketCheckResult(BaseModel):
    bet_index: int
    numbers: list[int]
    special_numbers: list[int] = []
    matched_main: int
    matched_special: int
    matched_main_numbers: list[int]
    matched_special_numbers: list[int]
    tier: PrizeTier
    breakdown: list[PrizeBreakdownItem] = []


class TicketCheckResponse(BaseModel):
    game_id: str
    issue_id: str
    draw_main_numbers: list[int]
    draw_special_numbers: list[int]
    results: list[TicketCheckResult]
    winning_entries: int


# --- Requests ---

class HistoryAnalysisRequest(BaseModel):
    main_numbers: list[int]
    special_numbers: list[int] = []
    play_type: int | None = None  # kl8 only
    history: list[DrawRecord]
    limit: int | None = Field(None, ge=0)  # most recent N draws; 0 = all


class TicketCheckRequest(BaseModel):
    ticket: ParsedTicket
    history: list[DrawRecord]
    play_type: int | None = None
