# tests/unit/core/test_timefmt.py
# Unit tests for clock formatting helpers

import pytest

from cadence.core.timefmt import (
    format_clock,
    format_deviation,
    format_remaining,
    round_half_up,
)


@pytest.mark.parametrize(
    "value, expected",
    [(0.5, 1), (1.49, 1), (-0.5, 0), (-0.51, -1), (-1.5, -1), (2.5, 3)],
)
def test_round_half_up(value, expected):
    assert round_half_up(value) == expected


@pytest.mark.parametrize(
    "seconds, expected",
    [
        (0, "00:00"),
        (59.9, "00:59"),
        (180, "03:00"),
        (3599, "59:59"),
        (3600, "1:00:00"),
        (3725, "1:02:05"),
        (-12, "00:00"),
    ],
)
def test_format_clock(seconds, expected):
    assert format_clock(seconds) == expected


# * remaining time goes negative w/ a leading minus in overtime
@pytest.mark.parametrize(
    "seconds, expected",
    [(180, "03:00"), (0.4, "00:00"), (-0.2, "-00:01"), (-65, "-01:05")],
)
def test_format_remaining(seconds, expected):
    assert format_remaining(seconds) == expected


@pytest.mark.parametrize(
    "seconds, expected",
    [(0, "+00:00"), (20, "+00:20"), (-20, "-00:20"), (-0.4, "+00:00"), (125.6, "+02:06")],
)
def test_format_deviation(seconds, expected):
    assert format_deviation(seconds) == expected
