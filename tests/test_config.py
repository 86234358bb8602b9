"""Tests for application configuration."""

import pytest
from pydantic import ValidationError

from hobby_forecast.config import ScoringConfig, get_settings, get_settings_uncached


class TestScoringConfig:
    """Tests for ScoringConfig."""

    def test_defaults(self):
        config = ScoringConfig()
        assert config.weather_weight == 0.5
        assert config.temperature_weight == 0.35
        assert config.time_of_day_weight == 0.15
        assert config.high_pop_threshold == 0.5
        assert config.high_pop_penalty == 0.7
        assert config.temperature_decay_c == 10.0

    def test_weights_must_sum_to_one(self):
        with pytest.raises(ValidationError, match="must sum to 1.0"):
            ScoringConfig(weather_weight=0.6)

    def test_decay_must_be_positive(self):
        with pytest.raises(ValidationError):
            ScoringConfig(temperature_decay_c=0)

    @pytest.mark.parametrize("favorable,unfavorable", [(5, 5), (3, 7)])
    def test_weight_thresholds_must_be_ordered(self, favorable: int, unfavorable: int):
        """Test an inverted threshold pair is rejected."""
        with pytest.raises(ValidationError, match="must be below"):
            ScoringConfig(favorable_weight=favorable, unfavorable_weight=unfavorable)

    def test_wind_thresholds_must_be_ordered(self):
        with pytest.raises(ValidationError, match="calm_wind_ms"):
            ScoringConfig(calm_wind_ms=10, strong_wind_ms=8)


class TestSettings:
    """Tests for environment-driven settings."""

    def test_defaults(self):
        settings = get_settings_uncached()
        assert settings.app_name == "Hobby Forecast"
        assert settings.notifications.min_score == 80
        assert settings.notifications.top_n == 3
        assert settings.is_production is False

    def test_nested_env_override(self, monkeypatch):
        """Test scoring values can be set with a double underscore."""
        monkeypatch.setenv("SCORING__WEATHER_WEIGHT", "0.6")
        monkeypatch.setenv("SCORING__TEMPERATURE_WEIGHT", "0.25")
        monkeypatch.setenv("NOTIFICATIONS__TOP_N", "5")

        settings = get_settings_uncached()
        assert settings.scoring.weather_weight == 0.6
        assert settings.scoring.temperature_weight == 0.25
        assert settings.scoring.time_of_day_weight == 0.15
        assert settings.notifications.top_n == 5

    def test_settings_cached(self):
        assert get_settings() is get_settings()
