"""Rounding rules applied to every resolver output."""

from __future__ import annotations

import math

RATE_SCALE = 1_000_000
AMOUNT_SCALE = 100


def round_half_up(value: float) -> float:
    """Round to the nearest integer, ties towards positive infinity."""

    # value - floor(value) is exact, unlike value + 0.5 near 2**52
    whole = math.floor(value)
    return float(whole + 1 if value - whole >= 0.5 else whole)


def round_rate(rate: float) -> float:
    """Round a derived rate to 6 decimal places."""

    return round_half_up(rate * RATE_SCALE) / RATE_SCALE


def round_amount(amount: float, rate: float) -> float:
    """Convert ``amount`` at ``rate`` and round the result to 2 decimal places."""

    return round_half_up(amount * rate * AMOUNT_SCALE) / AMOUNT_SCALE


__all__ = ["RATE_SCALE", "AMOUNT_SCALE", "round_half_up", "round_rate", "round_amount"]
