"""Merchant and location risk rules, driven by the keyword tier classifiers."""

from ..config import CategoricalCurve, FraudConfig
from ..models import FeatureVector, RuleResult, Transaction
from ..risk_curves import Breakpoint, StepCurve
from .base import FeatureRule


def merchant_curve(cfg: CategoricalCurve) -> StepCurve:
    return StepCurve(
        (
            Breakpoint(cfg.merchant_high_above, cfg.merchant_high_multiplier, "High-risk"),
            Breakpoint(cfg.merchant_medium_above, cfg.merchant_medium_multiplier, "Medium-risk"),
        )
    )


def location_curve(cfg: CategoricalCurve) -> StepCurve:
    return StepCurve(
        (
            Breakpoint(cfg.location_high_above, cfg.location_high_multiplier, "Unusual"),
            Breakpoint(
                cfg.location_medium_above, cfg.location_medium_multiplier, "Somewhat unusual"
            ),
        )
    )


class MerchantRiskRule(FeatureRule):
    rule_id = "merchant_risk"
    feature = "merchant_risk"

    def evaluate(
        self,
        transaction: Transaction,
        features: FeatureVector,
        config: FraudConfig,
    ) -> RuleResult:
        return self._from_curve(
            merchant_curve(config.categorical),
            features.merchant_risk,
            lambda label: f"{label} merchant: {transaction.merchant}",
            config,
        )


class LocationRiskRule(FeatureRule):
    rule_id = "location_risk"
    feature = "location_risk"

    def evaluate(
        self,
        transaction: Transaction,
        features: FeatureVector,
        config: FraudConfig,
    ) -> RuleResult:
        return self._from_curve(
            location_curve(config.categorical),
            features.location_risk,
            lambda label: f"{label} location: {transaction.location}",
            config,
        )
