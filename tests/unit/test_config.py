"""Tests for NumberConfig."""

import dataclasses

import pytest

from exactnum import DEFAULT_NUMBER_CONFIG, NumberConfig


class TestNumberConfig:
    """Tests for NumberConfig defaults and validation."""

    def test_defaults(self):
        """Scale 20 and 100 ln terms."""
        config = NumberConfig()
        assert config.scale == 20
        assert config.ln_iterations == 100
        assert DEFAULT_NUMBER_CONFIG == config

    def test_frozen(self):
        """Configs cannot be modified."""
        with pytest.raises(dataclasses.FrozenInstanceError):
            DEFAULT_NUMBER_CONFIG.scale = 5  # type: ignore[misc]

    def test_replace(self):
        """replace() returns a modified copy."""
        config = DEFAULT_NUMBER_CONFIG.replace(scale=8)
        assert config.scale == 8
        assert config.ln_iterations == 100
        assert DEFAULT_NUMBER_CONFIG.scale == 20

    def test_scale_zero_allowed(self):
        """Scale 0 is valid."""
        assert NumberConfig(scale=0).scale == 0

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"scale": -1},
            {"scale": True},
            {"scale": "20"},
            {"ln_iterations": 0},
            {"ln_iterations": 2.5},
        ],
    )
    def test_invalid_values_raise(self, kwargs):
        """Negative, non-int and bool values are rejected."""
        with pytest.raises(ValueError):
            NumberConfig(**kwargs)


class TestNumberConfigFromEnv:
    """Tests for NumberConfig.from_env."""

    def test_unset_uses_defaults(self, monkeypatch):
        """Without variables the defaults apply."""
        monkeypatch.delenv("EXACTNUM_SCALE", raising=False)
        monkeypatch.delenv("EXACTNUM_LN_ITERATIONS", raising=False)
        assert NumberConfig.from_env() == NumberConfig()

    def test_reads_variables(self, monkeypatch):
        """Both variables are read."""
        monkeypatch.setenv("EXACTNUM_SCALE", "8")
        monkeypatch.setenv("EXACTNUM_LN_ITERATIONS", "50")
        config = NumberConfig.from_env()
        assert config.scale == 8
        assert config.ln_iterations == 50

    def test_blank_uses_default(self, monkeypatch):
        """Blank values fall back to the defaults."""
        monkeypatch.setenv("EXACTNUM_SCALE", "  ")
        assert NumberConfig.from_env().scale == 20

    def test_non_integer_raises(self, monkeypatch):
        """Non-integer values name the variable in the error."""
        monkeypatch.setenv("EXACTNUM_SCALE", "abc")
        with pytest.raises(ValueError, match="EXACTNUM_SCALE"):
            NumberConfig.from_env()

    def test_negative_raises(self, monkeypatch):
        """Out-of-range values are rejected by validation."""
        monkeypatch.setenv("EXACTNUM_LN_ITERATIONS", "-1")
        with pytest.raises(ValueError):
            NumberConfig.from_env()
