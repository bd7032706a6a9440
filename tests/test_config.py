"""Tests for src/dice_ev/config.py."""
from __future__ import annotations

import pytest

from dice_ev.config import ConfigError, EvConfig, load_config
from dice_ev.mechanics.dice import RollLimits


class TestLoadConfig:
    def test_defaults_without_file(self):
        config = load_config()
        assert config == EvConfig()
        assert config.output.style == "multi"
        assert config.output.indent == 4
        assert config.limits.to_limits() == RollLimits()

    def test_reads_default_file_in_cwd(self, isolated_config):
        (isolated_config / "ev.toml").write_text('[output]\nstyle = "single"\n')
        assert load_config().output.style == "single"

    def test_explicit_path(self, tmp_path):
        path = tmp_path / "custom.toml"
        path.write_text("[limits]\nmax_dice = 100\nmax_sides = 1000\n")
        limits = load_config(path).limits.to_limits()
        assert limits == RollLimits(max_dice=100, max_sides=1000)

    def test_env_var(self, tmp_path, monkeypatch):
        path = tmp_path / "env.toml"
        path.write_text("[output]\nindent = 2\n")
        monkeypatch.setenv("EV_CONFIG", str(path))
        assert load_config().output.indent == 2

    def test_explicit_missing_file(self, tmp_path):
        with pytest.raises(ConfigError, match="not found"):
            load_config(tmp_path / "nope.toml")

    def test_invalid_toml(self, tmp_path):
        path = tmp_path / "bad.toml"
        path.write_text("[output\n")
        with pytest.raises(ConfigError, match="cannot read"):
            load_config(path)

    @pytest.mark.parametrize("body", [
        '[output]\nstyle = "fancy"\n',
        "[output]\nindent = -1\n",
        "[limits]\nmax_dice = 0\n",
        "[limits]\nmax_rolls = 3\n",
        "[colors]\nerror = 'red'\n",
    ])
    def test_invalid_values(self, tmp_path, body):
        path = tmp_path / "invalid.toml"
        path.write_text(body)
        with pytest.raises(ConfigError, match="invalid config"):
            load_config(path)
