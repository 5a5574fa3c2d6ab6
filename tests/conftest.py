"""Shared fixtures: small hand-built draw histories."""

import os

# Keep test runs from writing log files
os.environ.setdefault("LOG_FILE", "")
os.environ.setdefault("DEBUG", "false")

import pytest  # noqa: E402

from lottery_engine.schemas.draws import DrawRecord  # noqa: E402


def make_draw(issue_id: str, main, special=()) -> DrawRecord:
    return DrawRecord(issue_id=issue_id, main_numbers=main, special_numbers=special)


class FixedRandom:
    """Random source whose ``randrange`` always returns ``stop - 1``.

    Fisher-Yates then never moves anything, so shuffles keep the input order.
    """

    def randrange(self, stop: int) -> int:
        return stop - 1


class ZeroRandom:
    """Random source whose ``randrange`` always returns 0."""

    def randrange(self, stop: int) -> int:
        return 0


@pytest.fixture
def ssq_history() -> list[DrawRecord]:
    """Ten ssq draws, oldest first."""
    rows = [
        ([1, 2, 3, 4, 5, 6], [1]),
        ([2, 8, 13, 19, 25, 31], [5]),
        ([3, 9, 14, 20, 26, 32], [9]),
        ([4, 10, 15, 21, 27, 33], [13]),
        ([5, 11, 16, 22, 28, 1], [16]),
        ([6, 12, 17, 23, 29, 2], [2]),
        ([7, 13, 18, 24, 30, 3], [5]),
        ([8, 14, 19, 25, 31, 4], [7]),
        ([9, 15, 20, 26, 32, 5], [5]),
        ([10, 16, 21, 27, 33, 6], [11]),
    ]
    return [make_draw(f"2024{i + 1:03d}", main, special) for i, (main, special) in enumerate(rows)]


@pytest.fixture
def dlt_history() -> list[DrawRecord]:
    """Four dlt draws, oldest first, built around the selection 1-5 + 1,2."""
    return [
        make_draw("24001", [1, 2, 3, 4, 5], [1, 2]),   # 5+2: floating tier1
        make_draw("24002", [1, 2, 3, 4, 5], [3, 4]),   # 5+0: 10000
        make_draw("24003", [1, 2, 3, 30, 31], [1, 9]),  # 3+1: 100
        make_draw("24004", [20, 21, 22, 23, 24], [10, 11]),  # 0+0: nothing
    ]


@pytest.fixture
def kl8_draw() -> DrawRecord:
    return make_draw("2024100", list(range(1, 21)))
