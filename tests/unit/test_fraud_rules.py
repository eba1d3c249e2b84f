"""Unit tests for the per-feature scoring rules."""

import pytest

from src.domains.fraud.config import FraudConfig
from src.domains.fraud.models import FeatureVector, Transaction
from src.domains.fraud.rules import (
    ALL_RULES,
    BehaviorDeviationRule,
    LocationRiskRule,
    MerchantRiskRule,
    TransactionAmountRule,
    TransactionFrequencyRule,
    UnusualHourRule,
    VelocityRule,
    WeekendRule,
)

CONFIG = FraudConfig()


def _make_transaction(**kwargs) -> Transaction:
    defaults = {
        "id": "txn-1",
        "user_id": "user-1",
        "amount": "100.00",
        "merchant": "Starbucks",
        "location": "Seattle, WA",
        "timestamp": "2026-01-14T14:00:00Z",
    }
    defaults.update(kwargs)
    return Transaction(**defaults)


def _make_features(**kwargs) -> FeatureVector:
    defaults = {
        "amount": 100.0,
        "hour": 14,
        "day_of_week": 3,
        "merchant_risk": 0.1,
        "location_risk": 0.2,
    }
    defaults.update(kwargs)
    return FeatureVector(**defaults)


class TestRuleOrder:
    def test_one_rule_per_feature_in_order(self):
        assert [r.feature for r in ALL_RULES] == [
            "amount",
            "hour",
            "day_of_week",
            "merchant_risk",
            "location_risk",
            "user_behavior_deviation",
            "transaction_frequency",
            "velocity",
        ]

    def test_rule_ids_unique(self):
        ids = [r.rule_id for r in ALL_RULES]
        assert len(ids) == len(set(ids))


class TestTransactionAmountRule:
    rule = TransactionAmountRule()

    @pytest.mark.parametrize(
        ("amount", "multiplier", "label"),
        [
            (2500.0, 0.8, "High"),
            (2000.0, 0.5, "Medium-high"),
            (1500.0, 0.5, "Medium-high"),
            (750.0, 0.2, "Moderate"),
        ],
    )
    def test_bands(self, amount, multiplier, label):
        result = self.rule.evaluate(_make_transaction(), _make_features(amount=amount), CONFIG)
        assert result.triggered is True
        assert result.multiplier == multiplier
        assert result.contribution == pytest.approx(0.25 * multiplier)
        assert result.explanation.startswith(f"{label} transaction amount: $")

    def test_explanation_formats_amount(self):
        result = self.rule.evaluate(_make_transaction(), _make_features(amount=2500.0), CONFIG)
        assert result.explanation == "High transaction amount: $2500.00"

    def test_explanation_has_no_thousands_separator(self):
        result = self.rule.evaluate(_make_transaction(), _make_features(amount=12345.5), CONFIG)
        assert result.explanation == "High transaction amount: $12345.50"

    def test_small_amount_not_triggered(self):
        result = self.rule.evaluate(_make_transaction(), _make_features(amount=500.0), CONFIG)
        assert result.triggered is False
        assert result.contribution == 0.0
        assert result.explanation == ""
        assert result.weight == 0.25


class TestUnusualHourRule:
    rule = UnusualHourRule()

    @pytest.mark.parametrize("hour", [22, 23, 0, 3, 5])
    def test_unusual_hours(self, hour):
        result = self.rule.evaluate(_make_transaction(), _make_features(hour=hour), CONFIG)
        assert result.triggered is True
        assert result.contribution == pytest.approx(0.15 * 0.7)
        assert result.explanation == f"Transaction at unusual hour: {hour}:00"

    @pytest.mark.parametrize("hour", [6, 12, 21])
    def test_ordinary_hours(self, hour):
        result = self.rule.evaluate(_make_transaction(), _make_features(hour=hour), CONFIG)
        assert result.triggered is False


class TestWeekendRule:
    rule = WeekendRule()

    @pytest.mark.parametrize("day", [0, 6])
    def test_weekend(self, day):
        result = self.rule.evaluate(_make_transaction(), _make_features(day_of_week=day), CONFIG)
        assert result.triggered is True
        assert result.contribution == pytest.approx(0.10 * 0.3)
        assert result.explanation == "Weekend transaction"

    @pytest.mark.parametrize("day", [1, 3, 5])
    def test_weekday(self, day):
        result = self.rule.evaluate(_make_transaction(), _make_features(day_of_week=day), CONFIG)
        assert result.triggered is False


class TestMerchantRiskRule:
    rule = MerchantRiskRule()

    def test_high_risk_merchant(self):
        txn = _make_transaction(merchant="Downtown Casino")
        result = self.rule.evaluate(txn, _make_features(merchant_risk=0.8), CONFIG)
        assert result.multiplier == 0.9
        assert result.explanation == "High-risk merchant: Downtown Casino"

    def test_medium_risk_boundary(self):
        # 0.5 does not exceed the high threshold
        txn = _make_transaction(merchant="Online Shopping Hub")
        result = self.rule.evaluate(txn, _make_features(merchant_risk=0.5), CONFIG)
        assert result.multiplier == 0.4
        assert result.explanation == "Medium-risk merchant: Online Shopping Hub"

    def test_low_risk_merchant(self):
        result = self.rule.evaluate(_make_transaction(), _make_features(merchant_risk=0.1), CONFIG)
        assert result.triggered is False

    def test_braces_in_merchant_name(self):
        txn = _make_transaction(merchant="Casino {VIP}")
        result = self.rule.evaluate(txn, _make_features(merchant_risk=0.8), CONFIG)
        assert result.explanation == "High-risk merchant: Casino {VIP}"


class TestLocationRiskRule:
    rule = LocationRiskRule()

    def test_high_risk_location(self):
        txn = _make_transaction(location="Lagos, Nigeria")
        result = self.rule.evaluate(txn, _make_features(location_risk=0.9), CONFIG)
        assert result.multiplier == 0.8
        assert result.contribution == pytest.approx(0.12)
        assert result.explanation == "Unusual location: Lagos, Nigeria"

    def test_medium_risk_location(self):
        txn = _make_transaction(location="Panama City, Panama")
        result = self.rule.evaluate(txn, _make_features(location_risk=0.6), CONFIG)
        assert result.multiplier == 0.4
        assert result.explanation == "Somewhat unusual location: Panama City, Panama"

    def test_domestic_location(self):
        result = self.rule.evaluate(_make_transaction(), _make_features(location_risk=0.2), CONFIG)
        assert result.triggered is False


class TestBehaviorRules:
    def test_significant_deviation(self):
        result = BehaviorDeviationRule().evaluate(
            _make_transaction(), _make_features(user_behavior_deviation=0.95), CONFIG
        )
        assert result.multiplier == 0.9
        assert result.explanation == "Significant deviation from user behavior"

    def test_moderate_deviation(self):
        result = BehaviorDeviationRule().evaluate(
            _make_transaction(), _make_features(user_behavior_deviation=0.6), CONFIG
        )
        assert result.multiplier == 0.5
        assert result.explanation == "Moderate deviation from user behavior"

    def test_no_deviation(self):
        result = BehaviorDeviationRule().evaluate(
            _make_transaction(), _make_features(user_behavior_deviation=0.5), CONFIG
        )
        assert result.triggered is False

    def test_high_frequency(self):
        result = TransactionFrequencyRule().evaluate(
            _make_transaction(), _make_features(transaction_frequency=6), CONFIG
        )
        assert result.triggered is True
        assert result.contribution == pytest.approx(0.03 * 0.6)
        assert result.explanation == "High transaction frequency"

    def test_frequency_at_threshold(self):
        result = TransactionFrequencyRule().evaluate(
            _make_transaction(), _make_features(transaction_frequency=5), CONFIG
        )
        assert result.triggered is False

    def test_high_velocity(self):
        result = VelocityRule().evaluate(
            _make_transaction(), _make_features(velocity=0.9), CONFIG
        )
        assert result.triggered is True
        assert result.contribution == pytest.approx(0.02 * 0.7)
        assert result.explanation == "High transaction velocity"

    def test_velocity_at_threshold(self):
        result = VelocityRule().evaluate(
            _make_transaction(), _make_features(velocity=0.8), CONFIG
        )
        assert result.triggered is False
