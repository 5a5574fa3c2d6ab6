"""Game registry: static rules for every supported lottery."""

from types import MappingProxyType

from lottery_engine.engine.exceptions import ConfigNotFound, InvalidInput
from lottery_engine.schemas.games import GameConfig

UNIT_PRICE = 2
KL8_MAX_SINGLE_BET_COST = 20000

# 大乐透: 前区 5/35 + 后区 2/12
DLT = GameConfig(
    game_id="dlt",
    name="大乐透",
    description="前区5个号码(1-35) + 后区2个号码(1-12)",
    main_range=(1, 35),
    main_count=(5, 18),
    bet_main_count=5,
    draw_main_count=5,
    special_range=(1, 12),
    special_count=(2, 12),
    bet_special_count=2,
    draw_special_count=2,
    unit_price=UNIT_PRICE,
)

# 双色球: 红球 6/33 + 蓝球 1/16
SSQ = GameConfig(
    game_id="ssq",
    name="双色球",
    description="红球6个号码(1-33) + 蓝球1个号码(1-16)",
    main_range=(1, 33),
    main_count=(6, 20),
    bet_main_count=6,
    draw_main_count=6,
    special_range=(1, 16),
    special_count=(1, 16),
    bet_special_count=1,
    draw_special_count=1,
    unit_price=UNIT_PRICE,
)

# 快乐8: 选k (1-10), 每期从80个号码中开出20个
KL8 = GameConfig(
    game_id="kl8",
    name="快乐8",
    description="从1-80中选择号码进行选一至选十玩法投注，每期开出20个号码",
    main_range=(1, 80),
    main_count=(1, 16),
    bet_main_count=None,
    draw_main_count=20,
    unit_price=UNIT_PRICE,
    max_single_bet_cost=KL8_MAX_SINGLE_BET_COST,
    play_types=(1, 10),
)

GAME_CONFIGS = MappingProxyType({c.game_id: c for c in (DLT, SSQ, KL8)})

VALID_GAMES = tuple(GAME_CONFIGS.keys())


def get_config(game_id: str) -> GameConfig:
    """Return the rules for ``game_id``."""
    try:
        return GAME_CONFIGS[game_id]
    except KeyError:
        raise ConfigNotFound(game_id, list(VALID_GAMES)) from None


def list_configs() -> list[GameConfig]:
    return list(GAME_CONFIGS.values())


def bet_counts(config: GameConfig, play_type: int | None = None) -> tuple[int, int]:
    """Numbers per single combination ``(main, special)``.

    For play-type games the main count is the chosen ``k``.
    """
    if config.is_play_type_game:
        return check_play_type(config, play_type), 0
    return config.bet_main_count, config.bet_special_count


def check_play_type(config: GameConfig, play_type: int | None) -> int | None:
    """Validate ``play_type`` against the game; ``None`` for games without one."""
    if not config.is_play_type_game:
        return None
    if play_type is None:
        raise InvalidInput(
            f"{config.game_id} requires a play type", constraint="play_type"
        )
    lo, hi = config.play_types
    if not lo <= play_type <= hi:
        raise InvalidInput(
            f"Play type must be between {lo} and {hi}, got {play_type}",
            constraint="play_type",
        )
    return play_type
