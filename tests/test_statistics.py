"""Tests for frequency / omission statistics."""

import pytest

from lottery_engine.engine.exceptions import InvalidInput
from lottery_engine.engine.games import get_config
from lottery_engine.engine.statistics import analyze, number_stats, top_by_frequency, top_by_omission
from tests.conftest import make_draw


def test_frequency_sums_match_draw_sizes(ssq_history):
    """10 ssq draws: 60 main numbers and 10 special numbers in total."""
    snapshot = analyze(ssq_history, get_config("ssq"), 10)
    assert snapshot.draws_analyzed == 10
    assert sum(snapshot.main.frequency.values()) == 60
    assert sum(snapshot.special.frequency.values()) == 10


def test_every_number_has_an_entry(ssq_history):
    snapshot = analyze(ssq_history, get_config("ssq"), 5)
    assert sorted(snapshot.main.frequency) == list(range(1, 34))
    assert sorted(snapshot.main.omission) == list(range(1, 34))
    assert sorted(snapshot.special.frequency) == list(range(1, 17))
    assert sorted(snapshot.special.omission) == list(range(1, 17))


def test_frequency_and_omission_values(ssq_history):
    snapshot = analyze(ssq_history, get_config("ssq"), 10)
    assert snapshot.main.frequency[1] == 2
    assert snapshot.main.omission[1] == 5
    assert snapshot.main.frequency[6] == 3
    assert snapshot.main.omission[6] == 0
    assert snapshot.special.frequency[5] == 3
    assert snapshot.special.omission[5] == 1
    # Never drawn in the window
    assert snapshot.special.frequency[3] == 0
    assert snapshot.special.omission[3] == 10


def test_window_limits_to_most_recent_draws(ssq_history):
    snapshot = analyze(ssq_history, get_config("ssq"), 2)
    assert snapshot.draws_analyzed == 2
    assert sum(snapshot.main.frequency.values()) == 12
    # 1 last appeared five draws back: outside the window
    assert snapshot.main.frequency[1] == 0
    assert snapshot.main.omission[1] == 2


def test_short_history_uses_everything(ssq_history):
    snapshot = analyze(ssq_history[:3], get_config("ssq"), 50)
    assert snapshot.draws_analyzed == 3
    assert snapshot.window_size == 50
    assert sum(snapshot.main.frequency.values()) == 18
    assert snapshot.main.omission[33] == 50


def test_overlapping_pools_are_tracked_separately():
    """dlt main 1-35 and special 1-12 share numbers but not statistics."""
    history = [make_draw("1", [1, 2, 3, 4, 5], [1, 2])]
    snapshot = analyze(history, get_config("dlt"), 1)
    assert snapshot.main.frequency[1] == 1
    assert snapshot.special.frequency[1] == 1
    assert snapshot.main.frequency[6] == 0
    assert snapshot.special.omission[3] == 1
    assert sum(snapshot.main.frequency.values()) == 5
    assert sum(snapshot.special.frequency.values()) == 2


def test_kl8_has_no_special_snapshot():
    history = [make_draw("1", range(1, 21)), make_draw("2", range(21, 41))]
    snapshot = analyze(history, get_config("kl8"), 10)
    assert snapshot.special is None
    assert sum(snapshot.main.frequency.values()) == 40
    assert top_by_frequency(snapshot, 3, "special") == []


def test_top_by_frequency_breaks_ties_by_number(ssq_history):
    snapshot = analyze(ssq_history, get_config("ssq"), 10)
    assert top_by_frequency(snapshot, 5) == [2, 3, 4, 5, 6]
    assert top_by_frequency(snapshot, 6) == [2, 3, 4, 5, 6, 1]
    assert top_by_frequency(snapshot, 2, "special") == [5, 1]


def test_top_by_omission(ssq_history):
    snapshot = analyze(ssq_history, get_config("ssq"), 10)
    assert top_by_omission(snapshot, 4) == [1, 11, 22, 28]
    assert top_by_omission(snapshot, 2, "special") == [3, 4]


def test_number_stats_percentage(ssq_history):
    snapshot = analyze(ssq_history, get_config("ssq"), 10)
    [row] = number_stats(snapshot, [6])
    assert row.frequency == 3
    assert row.percentage == 30.0


def test_invalid_window_and_pool(ssq_history):
    with pytest.raises(InvalidInput):
        analyze(ssq_history, get_config("ssq"), 0)
    snapshot = analyze(ssq_history, get_config("ssq"), 10)
    with pytest.raises(InvalidInput):
        top_by_frequency(snapshot, 3, "bonus")
