"""Dice notation parser: pure, no I/O.

Accepts XdY, XdY+Z, XdY-Z and dY (count defaults to 1). The die marker is
case-insensitive. Each rejection carries a reason so callers can tell the
user exactly what is wrong with the token.
"""
from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from enum import Enum

from dice_ev.models.roll import DiceRoll

logger = logging.getLogger(__name__)

# Everything before the first die marker, then the rest.
_SPLIT_RE = re.compile(r"^(?P<count>[^dD]*)[dD](?P<rest>.*)$", re.DOTALL)
_DIGITS_RE = re.compile(r"[0-9]+")

# Significant digits allowed per number. Keeps every derived statistic well
# under the interpreter's int/str conversion limit.
MAX_DIGITS = 1000


class ParseErrorReason(str, Enum):
    EMPTY = "empty roll"
    MISSING_SEPARATOR = "missing die separator 'd'"
    INVALID_COUNT = "number of dice must be a positive integer"
    MISSING_SIDES = "missing number of sides"
    INVALID_SIDES = "number of sides must be a positive integer"
    MISSING_MODIFIER = "missing bonus after sign"
    TRAILING_TEXT = "unexpected characters after roll"
    TOO_MANY_DICE = "too many dice"
    TOO_MANY_SIDES = "too many sides"
    MODIFIER_TOO_LARGE = "bonus too large"


class ParseError(ValueError):
    """Raised when a token is not valid dice notation."""

    def __init__(self, token: str, reason: ParseErrorReason):
        self.token = token
        self.reason = reason
        super().__init__(f"{reason.value}: {token}")


@dataclass(frozen=True)
class RollLimits:
    """Optional upper bounds on parsed values; None means unbounded."""

    max_dice: int | None = None
    max_sides: int | None = None
    max_modifier: int | None = None

    def check(self, token: str, count: int, sides: int, modifier: int) -> None:
        if self.max_dice is not None and count > self.max_dice:
            raise ParseError(token, ParseErrorReason.TOO_MANY_DICE)
        if self.max_sides is not None and sides > self.max_sides:
            raise ParseError(token, ParseErrorReason.TOO_MANY_SIDES)
        if self.max_modifier is not None and abs(modifier) > self.max_modifier:
            raise ParseError(token, ParseErrorReason.MODIFIER_TOO_LARGE)


def _to_int(token: str, digits: str, too_large: ParseErrorReason) -> int:
    significant = digits.lstrip("0") or "0"
    if len(significant) > MAX_DIGITS:
        raise ParseError(token, too_large)
    return int(significant)


def _parse_count(token: str, text: str) -> int:
    if not text:
        return 1
    if not _DIGITS_RE.fullmatch(text):
        raise ParseError(token, ParseErrorReason.INVALID_COUNT)
    count = _to_int(token, text, ParseErrorReason.TOO_MANY_DICE)
    if count == 0:
        raise ParseError(token, ParseErrorReason.INVALID_COUNT)
    return count


def _parse_sides(token: str, rest: str) -> tuple[int, str]:
    """Read the sides number off the front of rest; return it with the tail."""
    m = _DIGITS_RE.match(rest)
    if not m:
        if not rest or rest[0] == "+":
            raise ParseError(token, ParseErrorReason.MISSING_SIDES)
        raise ParseError(token, ParseErrorReason.INVALID_SIDES)
    sides = _to_int(token, m.group(), ParseErrorReason.TOO_MANY_SIDES)
    if sides == 0:
        raise ParseError(token, ParseErrorReason.INVALID_SIDES)
    return sides, rest[m.end():]


def _parse_modifier(token: str, tail: str) -> int:
    if not tail:
        return 0
    if tail[0] not in "+-":
        raise ParseError(token, ParseErrorReason.TRAILING_TEXT)
    m = _DIGITS_RE.match(tail, 1)
    if not m:
        raise ParseError(token, ParseErrorReason.MISSING_MODIFIER)
    if m.end() != len(tail):
        raise ParseError(token, ParseErrorReason.TRAILING_TEXT)
    value = _to_int(token, m.group(), ParseErrorReason.MODIFIER_TOO_LARGE)
    return -value if tail[0] == "-" else value


def parse(token: str, limits: RollLimits | None = None) -> DiceRoll:
    """Parse one dice notation token, e.g. '3d4+1', into a DiceRoll.

    Args:
        token: A single roll, already split from its neighbours.
        limits: Optional bounds; unbounded when omitted.

    Returns:
        The parsed roll, keeping token as its source text.

    Raises:
        ParseError: If the token is not valid notation or exceeds limits.
    """
    if not token:
        raise ParseError(token, ParseErrorReason.EMPTY)

    m = _SPLIT_RE.match(token)
    if not m:
        raise ParseError(token, ParseErrorReason.MISSING_SEPARATOR)

    count = _parse_count(token, m.group("count"))
    sides, tail = _parse_sides(token, m.group("rest"))
    modifier = _parse_modifier(token, tail)

    if limits is not None:
        limits.check(token, count, sides, modifier)

    logger.debug("Parsed %r as count=%d sides=%d modifier=%d", token, count, sides, modifier)
    return DiceRoll(count=count, sides=sides, modifier=modifier, source_text=token)


def format_notation(count: int, sides: int, modifier: int = 0) -> str:
    """Render the canonical notation that parse() reads back to the same roll."""
    return DiceRoll(count=count, sides=sides, modifier=modifier).notation
