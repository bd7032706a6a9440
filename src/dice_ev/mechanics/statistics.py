"""Closed-form roll statistics: pure math, no I/O."""
from __future__ import annotations

from fractions import Fraction
from typing import Iterable

from dice_ev.mechanics.dice import RollLimits, parse
from dice_ev.models.roll import DiceRoll, Statistics

# Ints are rendered in chunks this wide to stay under the int/str conversion limit.
_CHUNK_DIGITS = 1000
_CHUNK = 10 ** _CHUNK_DIGITS


def evaluate(roll: DiceRoll) -> Statistics:
    """Compute min, max and expected value of a roll without enumerating outcomes.

    Each die is uniform over 1..sides, so it contributes 1, sides and
    (sides + 1) / 2 respectively; the modifier shifts all three.
    """
    return Statistics(
        min=roll.count + roll.modifier,
        max=roll.count * roll.sides + roll.modifier,
        expected_value=Fraction(roll.count * (roll.sides + 1), 2) + roll.modifier,
    )


def evaluate_all(
    tokens: Iterable[str],
    limits: RollLimits | None = None,
) -> list[tuple[DiceRoll, Statistics]]:
    """Parse every token, then evaluate them in input order.

    Raises ParseError for the first bad token before evaluating anything.
    """
    rolls = [parse(token, limits) for token in tokens]
    return [(roll, evaluate(roll)) for roll in rolls]


def _int_text(n: int) -> str:
    if n < _CHUNK:
        return str(n)
    high, low = divmod(n, _CHUNK)
    return _int_text(high) + str(low).zfill(_CHUNK_DIGITS)


def _terminates(denominator: int) -> bool:
    for factor in (2, 5):
        while denominator % factor == 0:
            denominator //= factor
    return denominator == 1


def format_value(value: int | Fraction) -> str:
    """Shortest exact decimal for a value: 7, 3.5, -0.5. Never a trailing .0.

    Raises ValueError for fractions with no finite decimal form, e.g. 2/3.
    """
    value = Fraction(value)
    if not _terminates(value.denominator):
        raise ValueError("value has no exact decimal representation")
    sign = "-" if value < 0 else ""
    whole, remainder = divmod(abs(value.numerator), value.denominator)
    if not remainder:
        return f"{sign}{_int_text(whole)}"

    digits = []
    while remainder:
        remainder *= 10
        digit, remainder = divmod(remainder, value.denominator)
        digits.append(str(digit))
    return f"{sign}{_int_text(whole)}.{''.join(digits)}"
