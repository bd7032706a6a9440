"""Tests for src/dice_ev/cli/display.py."""
from __future__ import annotations

from fractions import Fraction

import pytest

from dice_ev.cli.display import Display
from dice_ev.models.roll import Statistics


class TestDisplay:
    def test_multi_line(self, capsys, three_d4_plus_one):
        Display(indent=2).show_multi_line(three_d4_plus_one, Statistics(4, 13, Fraction(17, 2)))
        assert capsys.readouterr().out == "3d4+1:\n  min: 4\n  max: 13\n  ev : 8.5\n"

    def test_single_line(self, capsys, three_d4_plus_one):
        Display().show_single_line(three_d4_plus_one, Statistics(4, 13, Fraction(17, 2)))
        assert capsys.readouterr().out == "3d4+1 4 13 8.5\n"

    def test_results_in_order(self, capsys, three_d4_plus_one):
        stats = Statistics(4, 13, Fraction(17, 2))
        Display().show_results([(three_d4_plus_one, stats)] * 2, single_line=True)
        assert capsys.readouterr().out == "3d4+1 4 13 8.5\n3d4+1 4 13 8.5\n"

    def test_error_goes_to_stderr(self, capsys):
        Display().show_error("empty roll: [x]")
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "ev: empty roll: [x]" in captured.err

    def test_failed_render_prints_nothing(self, capsys, three_d4_plus_one):
        good = Statistics(4, 13, Fraction(17, 2))
        bad = Statistics(1, 2, Fraction(4, 3))
        with pytest.raises(ValueError):
            Display().show_results([(three_d4_plus_one, good), (three_d4_plus_one, bad)])
        assert capsys.readouterr().out == ""
