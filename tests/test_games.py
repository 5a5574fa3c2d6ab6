"""Tests for the game registry."""

import pytest
from pydantic import ValidationError

from lottery_engine.engine.exceptions import ConfigNotFound, InvalidInput
from lottery_engine.engine.games import bet_counts, check_play_type, get_config, list_configs
from lottery_engine.schemas.games import GameConfig


def test_registry_has_three_games():
    assert [c.game_id for c in list_configs()] == ["dlt", "ssq", "kl8"]


def test_dlt_rules():
    config = get_config("dlt")
    assert config.main_range == (1, 35)
    assert config.special_range == (1, 12)
    assert bet_counts(config) == (5, 2)
    assert config.unit_price == 2
    assert config.max_single_bet_cost is None


def test_kl8_rules():
    config = get_config("kl8")
    assert config.main_range == (1, 80)
    assert config.draw_main_count == 20
    assert not config.has_special_pool
    assert config.max_single_bet_cost == 20000
    assert bet_counts(config, 7) == (7, 0)


def test_unknown_game_raises_config_not_found():
    with pytest.raises(ConfigNotFound) as exc_info:
        get_config("powerball")
    assert exc_info.value.constraint == "game_id"
    assert "dlt" in exc_info.value.message


def test_play_type_bounds():
    kl8 = get_config("kl8")
    assert check_play_type(kl8, 1) == 1
    with pytest.raises(InvalidInput):
        check_play_type(kl8, 11)
    with pytest.raises(InvalidInput):
        check_play_type(kl8, None)
    # Games without play types ignore the argument
    assert check_play_type(get_config("ssq"), 5) is None


def test_configs_are_immutable():
    with pytest.raises(ValidationError):
        get_config("ssq").unit_price = 5


def test_inverted_range_rejected():
    with pytest.raises(ValidationError):
        GameConfig(game_id="x", name="x", main_range=(10, 1), main_count=1, draw_main_count=1)


def test_special_count_requires_special_range():
    with pytest.raises(ValidationError):
        GameConfig(
            game_id="x", name="x", main_range=(1, 10), main_count=1,
            draw_main_count=1, special_count=1,
        )
