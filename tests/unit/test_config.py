"""Tests for application and fraud configuration."""

import pytest

from src.config import Settings
from src.domains.fraud.config import (
    DecisionSettings,
    FeatureWeights,
    FraudConfig,
    HistorySettings,
)


class TestSettings:
    def test_default_settings(self):
        settings = Settings()
        assert settings.app_name == "fraud-risk-engine"
        assert settings.app_version == "0.1.0"
        assert settings.log_format == "json"
        assert settings.model_version == "heuristic-v1"

    def test_settings_from_env(self, monkeypatch):
        monkeypatch.setenv("APP_NAME", "test-app")
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("DEBUG", "true")
        settings = Settings()
        assert settings.app_name == "test-app"
        assert settings.log_level == "DEBUG"
        assert settings.debug is True


class TestFeatureWeights:
    def test_defaults_sum_to_one(self):
        weights = FeatureWeights()
        assert sum(weights.as_dict().values()) == pytest.approx(1.0)
        assert weights.amount == 0.25
        assert weights.velocity == 0.02

    def test_rejects_weights_not_summing_to_one(self):
        with pytest.raises(ValueError, match="sum to 1.0"):
            FeatureWeights(amount=0.5)

    def test_rejects_negative_weight(self):
        with pytest.raises(ValueError, match="non-negative"):
            FeatureWeights(amount=0.5, hour=-0.1, day_of_week=0.05)

    def test_custom_weights_accepted(self):
        weights = FeatureWeights(amount=0.30, hour=0.10)
        assert weights.amount == 0.30


class TestFraudConfig:
    def test_defaults(self):
        config = FraudConfig()
        assert config.timezone == "UTC"
        assert config.decision == DecisionSettings()
        assert config.decision.fraud_threshold == 0.5
        assert config.history == HistorySettings()
        assert config.merchant_tiers.high_risk == 0.8
        assert config.location_tiers.low_risk == 0.2

    def test_from_env_without_overrides(self, monkeypatch):
        for name in (
            "FRAUD_TIMEZONE",
            "FRAUD_DECISION_THRESHOLD",
            "FRAUD_FREQUENCY_WINDOW_MINUTES",
            "FRAUD_VELOCITY_WINDOW_MINUTES",
            "FRAUD_VELOCITY_AMOUNT_CEILING",
            "FRAUD_MIN_HISTORY",
        ):
            monkeypatch.delenv(name, raising=False)
        config = FraudConfig.from_env()
        assert config.decision.fraud_threshold == 0.5
        assert config.history.frequency_window_minutes == 60

    def test_from_env_overrides(self, monkeypatch):
        monkeypatch.setenv("FRAUD_TIMEZONE", "Etc/UTC")
        monkeypatch.setenv("FRAUD_DECISION_THRESHOLD", "0.6")
        monkeypatch.setenv("FRAUD_FREQUENCY_WINDOW_MINUTES", "30")
        monkeypatch.setenv("FRAUD_MIN_HISTORY", "5")
        config = FraudConfig.from_env()
        assert config.timezone == "Etc/UTC"
        assert config.decision.fraud_threshold == 0.6
        assert config.history.frequency_window_minutes == 30
        assert config.history.min_history == 5
        # Untouched values keep their defaults
        assert config.history.velocity_window_minutes == 10

    def test_nested_settings_are_immutable(self):
        config = FraudConfig()
        with pytest.raises(AttributeError):
            config.weights.amount = 0.9
