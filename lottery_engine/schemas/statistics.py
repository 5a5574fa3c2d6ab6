"""Pydantic schemas for statistics."""

from typing import Literal

from pydantic import BaseModel, Field

from lottery_engine.config import settings
from lottery_engine.schemas.draws import DrawRecord

Pool = Literal["main", "special"]


class PoolStatistics(BaseModel):
    """Frequency and omission for one number pool.

    Every number of ``number_range`` has an entry in both maps.
    """

    pool: Pool
    number_range: tuple[int, int]
    frequency: dict[int, int]
    omission: dict[int, int]


class StatisticsSnapshot(BaseModel):
    game_id: str
    window_size: int
    draws_analyzed: int
    main: PoolStatistics
    special: PoolStatistics | None = None

    def pool(self, pool: Pool) -> PoolStatistics | None:
        return self.main if pool == "main" else self.special


class NumberStat(BaseModel):
    number: int
    frequency: int
    omission: int
    percentage: float  # frequency / draws analyzed


class HotColdAnalysis(BaseModel):
    pool: Pool
    window_size: int
    hot_numbers: list[NumberStat]
    cold_numbers: list[NumberStat]


# --- Requests ---

class StatisticsRequest(BaseModel):
    history: list[DrawRecord]
    window_size: int = Field(settings.DEFAULT_WINDOW_SIZE, ge=1)


class HotColdRequest(StatisticsRequest):
    pool: Pool = "main"
    count: int = Field(5, ge=1, le=80)
