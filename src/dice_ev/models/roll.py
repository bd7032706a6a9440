from __future__ import annotations

from dataclasses import dataclass, field
from fractions import Fraction


@dataclass(frozen=True)
class DiceRoll:
    count: int
    sides: int
    modifier: int = 0
    source_text: str = field(default="", compare=False)

    def __post_init__(self) -> None:
        if self.count < 1:
            raise ValueError(f"count must be at least 1, got {self.count}")
        if self.sides < 1:
            raise ValueError(f"sides must be at least 1, got {self.sides}")

    @property
    def notation(self) -> str:
        """Canonical XdY+Z form, omitting a count of 1 and a zero modifier."""
        text = f"{self.count}d{self.sides}" if self.count != 1 else f"d{self.sides}"
        if self.modifier:
            text += f"{self.modifier:+d}"
        return text

    @property
    def label(self) -> str:
        return self.source_text or self.notation


@dataclass(frozen=True)
class Statistics:
    min: int
    max: int
    expected_value: Fraction
