"""Pydantic schemas for game rules."""

from pydantic import BaseModel, model_validator

NumberRange = tuple[int, int]


class GameConfig(BaseModel):
    """Static rules of one lottery game.

    ``main_count`` / ``special_count`` are the selection bounds: a single int
    for a fixed count, or ``(min, max)`` when complex bets are allowed.
    ``bet_*_count`` is how many numbers make up one combination and
    ``draw_*_count`` how many numbers each official draw yields.
    """

    model_config = {"frozen": True}

    game_id: str
    name: str
    description: str = ""

    main_range: NumberRange
    main_count: int | NumberRange
    bet_main_count: int | None = None  # None: decided by the play type (kl8)
    draw_main_count: int

    special_range: NumberRange | None = None
    special_count: int | NumberRange | None = None
    bet_special_count: int = 0
    draw_special_count: int = 0

    unit_price: int = 2
    max_single_bet_cost: int | None = None
    play_types: NumberRange | None = None  # kl8 only: choose k in [1, 10]

    @model_validator(mode="after")
    def _check_ranges(self) -> "GameConfig":
        lo, hi = self.main_range
        if lo > hi:
            raise ValueError(f"main_range lower bound {lo} exceeds upper bound {hi}")
        if (self.special_count is None) != (self.special_range is None):
            raise ValueError("special_range and special_count must be set together")
        if self.special_range is not None:
            s_lo, s_hi = self.special_range
            if s_lo > s_hi:
                raise ValueError(
                    f"special_range lower bound {s_lo} exceeds upper bound {s_hi}"
                )
        return self

    @property
    def has_special_pool(self) -> bool:
        return self.special_range is not None

    @property
    def is_play_type_game(self) -> bool:
        return self.play_types is not None

    @property
    def main_bounds(self) -> NumberRange:
        return _bounds(self.main_count)

    @property
    def special_bounds(self) -> NumberRange:
        if self.special_count is None:
            return (0, 0)
        return _bounds(self.special_count)

    def main_numbers(self) -> list[int]:
        return list(range(self.main_range[0], self.main_range[1] + 1))

    def special_numbers(self) -> list[int]:
        if self.special_range is None:
            return []
        return list(range(self.special_range[0], self.special_range[1] + 1))


def _bounds(count: int | NumberRange) -> NumberRange:
    if isinstance(count, int):
        return (count, count)
    return (count[0], count[1])
