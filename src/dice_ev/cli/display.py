"""Rich terminal output for roll statistics."""
from __future__ import annotations

from rich.console import Console

from dice_ev.mechanics.statistics import format_value
from dice_ev.models.roll import DiceRoll, Statistics


def _plain_console(stderr: bool = False) -> Console:
    # Output is meant for pipes as much as terminals: no markup, no wrapping.
    return Console(stderr=stderr, markup=False, emoji=False, highlight=False, soft_wrap=True)


class Display:
    def __init__(self, indent: int = 4):
        self.console = _plain_console()
        self.err_console = _plain_console(stderr=True)
        self.indent = " " * indent

    def render_multi_line(self, roll: DiceRoll, stats: Statistics) -> list[str]:
        return [
            f"{roll.label}:",
            f"{self.indent}min: {format_value(stats.min)}",
            f"{self.indent}max: {format_value(stats.max)}",
            f"{self.indent}ev : {format_value(stats.expected_value)}",
        ]

    def render_single_line(self, roll: DiceRoll, stats: Statistics) -> list[str]:
        values = (stats.min, stats.max, stats.expected_value)
        return [" ".join([roll.label, *(format_value(v) for v in values)])]

    def show_multi_line(self, roll: DiceRoll, stats: Statistics) -> None:
        self._print_lines(self.render_multi_line(roll, stats))

    def show_single_line(self, roll: DiceRoll, stats: Statistics) -> None:
        self._print_lines(self.render_single_line(roll, stats))

    def show_results(self, results: list[tuple[DiceRoll, Statistics]], single_line: bool = False) -> None:
        """Render every result before writing any, so a failure leaves stdout empty."""
        render = self.render_single_line if single_line else self.render_multi_line
        lines = [line for roll, stats in results for line in render(roll, stats)]
        self._print_lines(lines)

    def show_error(self, message: str) -> None:
        self.err_console.print(f"ev: {message}", style="bold red")

    def _print_lines(self, lines: list[str]) -> None:
        for line in lines:
            self.console.print(line)
