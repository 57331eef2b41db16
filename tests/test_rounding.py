import unittest

import pytest

from treasury_fx.utils.rounding import round_amount, round_half_up, round_rate


class RoundHalfUpTests(unittest.TestCase):
    def test_ties_round_towards_positive_infinity(self) -> None:
        self.assertEqual(round_half_up(2.5), 3.0)
        self.assertEqual(round_half_up(-2.5), -2.0)
        self.assertEqual(round_half_up(0.5), 1.0)

    def test_non_ties(self) -> None:
        self.assertEqual(round_half_up(2.49), 2.0)
        self.assertEqual(round_half_up(-2.51), -3.0)


def test_round_rate_keeps_six_decimals() -> None:
    assert round_rate(0.79 / 0.851) == 0.92832
    assert round_rate(1 / 3) == 0.333333
    assert round_rate(2 / 3) == 0.666667


def test_round_amount_keeps_two_decimals() -> None:
    assert round_amount(100, 0.851) == 85.1
    assert round_amount(250.5, 0.851) == 213.18
    assert round_amount(0, 156.83) == 0.0


@pytest.mark.parametrize("value", [0.1, 1.234567, 98.765432, 0.000001, 156.83, 1.0])
def test_round_rate_is_idempotent(value: float) -> None:
    assert round_rate(value) == value
    assert round_rate(round_rate(value)) == round_rate(value)


@pytest.mark.parametrize("value", [12.34, 0.01, 99999.99, 85.1])
def test_round_amount_is_idempotent(value: float) -> None:
    assert round_amount(value, 1.0) == value


@pytest.mark.parametrize(
    "value, expected",
    [
        (float(2**52 + 1), float(2**52 + 1)),
        (float(2**52 + 3), float(2**52 + 3)),
        (0.49999999999999994, 0.0),
        (-0.5, 0.0),
        (-0.49999999999999994, 0.0),
    ],
)
def test_round_half_up_avoids_addition_error(value: float, expected: float) -> None:
    assert round_half_up(value) == expected


def test_round_amount_keeps_large_two_decimal_amounts() -> None:
    assert round_amount(45035996273704.97, 1.0) == 45035996273704.97
