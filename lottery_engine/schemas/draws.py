"""Pydantic schemas for draw history and parsed tickets.

Both shapes come from external feeds (history providers, the OCR/AI ticket
parser) and use their own key names and string-typed numbers, so the models
accept those aliases and normalise them on the way in.
"""

from datetime import date

from pydantic import BaseModel, ConfigDict, model_validator

_ISSUE_KEYS = ("issue_id", "issueId", "issue", "period", "issue_number", "issueNumber")
_DATE_KEYS = ("draw_date", "drawDate", "date")
_MAIN_KEYS = (
    "main_numbers", "mainNumbers", "numbers", "redBalls", "red_balls", "front_numbers",
)
_SPECIAL_KEYS = (
    "special_numbers", "specialNumbers", "blueBalls", "blueBall", "blue_balls",
    "blue_ball", "back_numbers",
)


def _first(data: dict, keys: tuple[str, ...]):
    for key in keys:
        if data.get(key) not in (None, ""):
            return data[key]
    return None


def _issue(data: dict) -> str | None:
    # Missing issue ids are left as None so field validation rejects them
    issue = _first(data, _ISSUE_KEYS)
    return None if issue is None else str(issue)


def _to_ints(value) -> list[int]:
    """Coerce feed values like ``["07", "12"]`` or ``"05"`` to ints."""
    if value is None:
        return []
    if isinstance(value, (str, int)):
        value = [value]
    return [int(v) for v in value]


class DrawRecord(BaseModel):
    """One official draw. History lists are chronological, newest last."""

    model_config = ConfigDict(frozen=True)

    issue_id: str
    draw_date: date | None = None
    main_numbers: frozenset[int]
    special_numbers: frozenset[int] = frozenset()

    @model_validator(mode="before")
    @classmethod
    def _normalise_feed(cls, data):
        if not isinstance(data, dict):
            return data
        return {
            "issue_id": _issue(data),
            "draw_date": _first(data, _DATE_KEYS),
            "main_numbers": _to_ints(_first(data, _MAIN_KEYS)),
            "special_numbers": _to_ints(_first(data, _SPECIAL_KEYS)),
        }


class TicketEntry(BaseModel):
    """One bet line read off a ticket."""

    numbers: list[int]
    special_numbers: list[int] = []

    @model_validator(mode="before")
    @classmethod
    def _normalise_feed(cls, data):
        if not isinstance(data, dict):
            return data
        return {
            "numbers": _to_ints(_first(data, _MAIN_KEYS)),
            "special_numbers": _to_ints(_first(data, _SPECIAL_KEYS)),
        }


class ParsedTicket(BaseModel):
    """Output of the ticket parser: the issue played and its bet lines."""

    issue_id: str
    entries: list[TicketEntry]

    @model_validator(mode="before")
    @classmethod
    def _normalise_feed(cls, data):
        if not isinstance(data, dict):
            return data
        return {
            "issue_id": _issue(data),
            "entries": data.get("entries") or data.get("bets") or [],
        }
