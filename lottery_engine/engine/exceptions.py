"""Engine error kinds.

Every error carries a short machine-usable ``constraint`` naming the rule that
failed, so callers can build their own user-facing message.
"""


class LotteryEngineError(ValueError):
    """Base class for all engine errors."""

    kind: str = "lottery_engine_error"

    def __init__(self, message: str, constraint: str | None = None):
        super().__init__(message)
        self.message = message
        self.constraint = constraint


class ConfigNotFound(LotteryEngineError):
    """Unknown game id."""

    kind = "config_not_found"

    def __init__(self, game_id: str, valid: list[str] | None = None):
        detail = f"Unknown game: {game_id}"
        if valid:
            detail += f". Valid: {', '.join(valid)}"
        super().__init__(detail, constraint="game_id")
        self.game_id = game_id


class InvalidSelection(LotteryEngineError):
    """Selected numbers or counts violate the game's rules."""

    kind = "invalid_selection"


class InvalidInput(LotteryEngineError):
    """Out-of-bounds parameters, e.g. negative manual match counts."""

    kind = "invalid_input"


class DrawNotFound(LotteryEngineError):
    """No draw in the supplied history carries the requested issue id."""

    kind = "draw_not_found"

    def __init__(self, issue_id: str):
        super().__init__(f"Draw issue {issue_id} not found", constraint="issue_id")
        self.issue_id = issue_id
