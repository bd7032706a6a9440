"""Min, max and expected value of dice rolls in XdY+Z notation."""
from __future__ import annotations

from dice_ev.mechanics.dice import ParseError, ParseErrorReason, RollLimits, format_notation, parse
from dice_ev.mechanics.statistics import evaluate, evaluate_all, format_value
from dice_ev.models.roll import DiceRoll, Statistics

__version__ = "0.1.0"

__all__ = [
    "DiceRoll",
    "ParseError",
    "ParseErrorReason",
    "RollLimits",
    "Statistics",
    "evaluate",
    "evaluate_all",
    "format_notation",
    "format_value",
    "parse",
]
