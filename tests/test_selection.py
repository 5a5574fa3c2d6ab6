"""Tests for the number selection strategies."""

import random

import pytest

from lottery_engine.engine.exceptions import InvalidInput, InvalidSelection
from lottery_engine.engine.games import get_config
from lottery_engine.engine.selection import (
    STRATEGIES,
    fisher_yates_shuffle,
    select,
    strategy_label,
    validate_selection,
)
from lottery_engine.engine.statistics import analyze
from tests.conftest import FixedRandom, ZeroRandom, make_draw


def _assert_valid(result, config, main_count, special_count):
    lo, hi = config.main_range
    assert result.main_numbers == sorted(set(result.main_numbers))
    assert len(result.main_numbers) == main_count
    assert all(lo <= n <= hi for n in result.main_numbers)
    assert len(result.special_numbers) == special_count
    assert result.special_numbers == sorted(set(result.special_numbers))
    if special_count:
        s_lo, s_hi = config.special_range
        assert all(s_lo <= n <= s_hi for n in result.special_numbers)


@pytest.mark.parametrize("strategy", STRATEGIES)
def test_selections_are_valid_for_every_game(strategy, ssq_history):
    rng = random.Random(1234)
    kl8_history = [make_draw(str(i), range(i, i + 20)) for i in range(1, 31)]
    dlt_history = [make_draw(str(i), [i, i + 1, i + 2, i + 3, i + 4], [1 + i % 12, 1 + (i + 5) % 12])
                   for i in range(1, 31)]
    cases = [
        ("ssq", ssq_history, [(6, 1), (10, 3), (20, 16)]),
        ("dlt", dlt_history, [(5, 2), (18, 12), (7, 3)]),
        ("kl8", kl8_history, [(1, 0), (10, 0), (16, 0)]),
    ]
    for game_id, history, counts in cases:
        config = get_config(game_id)
        snapshot = analyze(history, config, 30)
        for main_count, special_count in counts:
            for _ in range(20):
                result = select(strategy, config, snapshot, main_count, special_count, rng=rng)
                _assert_valid(result, config, main_count, special_count)


def test_fisher_yates_with_scripted_source():
    items = [1, 2, 3, 4]
    fisher_yates_shuffle(items, ZeroRandom())
    assert items == [2, 3, 4, 1]
    items = [1, 2, 3, 4]
    fisher_yates_shuffle(items, FixedRandom())
    assert items == [1, 2, 3, 4]


def test_fisher_yates_keeps_elements():
    items = list(range(1, 81))
    fisher_yates_shuffle(items, random.Random(7))
    assert sorted(items) == list(range(1, 81))


def test_random_strategy_is_deterministic_with_injected_source():
    result = select("random", get_config("ssq"), None, 6, 1, rng=ZeroRandom())
    assert result.main_numbers == [2, 3, 4, 5, 6, 7]
    assert result.special_numbers == [2]


def test_same_seed_same_selection(ssq_history):
    config = get_config("ssq")
    snapshot = analyze(ssq_history, config, 10)
    first = select("balanced", config, snapshot, 6, 1, rng=random.Random(99))
    second = select("balanced", config, snapshot, 6, 1, rng=random.Random(99))
    assert first == second


def test_frequency_strategy_draws_from_hot_numbers(ssq_history):
    config = get_config("ssq")
    snapshot = analyze(ssq_history, config, 10)
    result = select("frequency", config, snapshot, 6, 1, rng=FixedRandom())
    assert result.main_numbers == [1, 2, 3, 4, 5, 6]
    assert result.special_numbers == [5]


def test_omission_strategy_draws_from_cold_numbers(ssq_history):
    config = get_config("ssq")
    snapshot = analyze(ssq_history, config, 10)
    result = select("omission", config, snapshot, 6, 1, rng=FixedRandom())
    assert result.main_numbers == [1, 2, 11, 12, 22, 28]
    assert result.special_numbers == [3]


def test_balanced_strategy_mixes_hot_and_cold(ssq_history):
    config = get_config("ssq")
    snapshot = analyze(ssq_history, config, 10)
    result = select("balanced", config, snapshot, 6, 1, rng=FixedRandom())
    assert result.main_numbers == [1, 2, 3, 4, 11, 22]
    assert result.special_numbers == [5]


def test_balanced_shortfall_is_filled_from_unused_numbers():
    """Empty history: hot and cold candidates coincide, the rest is topped up."""
    config = get_config("ssq")
    snapshot = analyze([], config, 10)
    result = select("balanced", config, snapshot, 6, 1, rng=FixedRandom())
    assert result.main_numbers == [1, 2, 3, 4, 5, 6]
    assert result.special_numbers == [1]


def test_missing_statistics_fall_back_to_random():
    result = select("frequency", get_config("ssq"), None, 6, 1, rng=ZeroRandom())
    assert result.main_numbers == [2, 3, 4, 5, 6, 7]


def test_select_rejects_bad_counts(ssq_history):
    config = get_config("ssq")
    with pytest.raises(InvalidSelection):
        select("random", config, None, 5, 1)
    with pytest.raises(InvalidSelection):
        select("random", config, None, 6, 0)
    with pytest.raises(InvalidSelection):
        select("random", get_config("kl8"), None, 10, 1)
    with pytest.raises(InvalidInput):
        select("lucky", config, None, 6, 1)


def test_select_rejects_snapshot_of_other_game(ssq_history):
    snapshot = analyze(ssq_history, get_config("ssq"), 10)
    with pytest.raises(InvalidInput):
        select("frequency", get_config("dlt"), snapshot, 5, 2)


def test_strategy_labels():
    assert strategy_label("omission") == "遗漏优先"


def test_validate_selection():
    dlt = get_config("dlt")
    assert validate_selection(dlt, [5, 4, 3, 2, 1], [2, 1]) == ([1, 2, 3, 4, 5], [1, 2])
    with pytest.raises(InvalidSelection) as exc_info:
        validate_selection(dlt, [1, 1, 2, 3, 4], [1, 2])
    assert exc_info.value.constraint == "main_numbers"
    with pytest.raises(InvalidSelection):
        validate_selection(dlt, [1, 2, 3, 4, 36], [1, 2])
    with pytest.raises(InvalidSelection):
        validate_selection(dlt, [1, 2, 3, 4, 5], [13, 1])
    with pytest.raises(InvalidSelection):
        validate_selection(get_config("kl8"), [1, 2, 3], [], play_type=5)
    with pytest.raises(InvalidSelection):
        validate_selection(get_config("kl8"), [1, 2, 3], [4], play_type=3)
