"""Shared fixtures for the dice-ev test suite."""
from __future__ import annotations

import pytest
from typer.testing import CliRunner

from dice_ev.models.roll import DiceRoll


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def three_d4_plus_one() -> DiceRoll:
    return DiceRoll(count=3, sides=4, modifier=1, source_text="3d4+1")


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Keep a stray ./ev.toml or $EV_CONFIG from leaking into tests."""
    monkeypatch.delenv("EV_CONFIG", raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path
