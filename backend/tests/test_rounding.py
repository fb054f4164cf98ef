import pytest

from kleaners.domain.rounding import round_half_up


@pytest.mark.parametrize(
    "value, expected",
    [(0.5, 1), (1.5, 2), (2.5, 3), (28.5, 29), (2.49, 2), (113.832, 114), (0, 0), (-0.4, 0)],
)
def test_round_half_up(value, expected):
    assert round_half_up(value) == expected
