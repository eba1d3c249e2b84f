"""History-driven rules: behaviour deviation, frequency and velocity."""

from ..config import BehaviorCurve, FraudConfig
from ..models import FeatureVector, RuleResult, Transaction
from ..risk_curves import Breakpoint, StepCurve
from .base import FeatureRule


def deviation_curve(cfg: BehaviorCurve) -> StepCurve:
    return StepCurve(
        (
            Breakpoint(cfg.deviation_high_above, cfg.deviation_high_multiplier, "Significant"),
            Breakpoint(cfg.deviation_medium_above, cfg.deviation_medium_multiplier, "Moderate"),
        )
    )


class BehaviorDeviationRule(FeatureRule):
    """Triggers when the amount or location departs from the user's own history."""

    rule_id = "behavior_deviation"
    feature = "user_behavior_deviation"

    def evaluate(
        self,
        transaction: Transaction,
        features: FeatureVector,
        config: FraudConfig,
    ) -> RuleResult:
        return self._from_curve(
            deviation_curve(config.behavior),
            features.user_behavior_deviation,
            lambda label: f"{label} deviation from user behavior",
            config,
        )


class TransactionFrequencyRule(FeatureRule):
    """Triggers for many transactions by the same user in the frequency window."""

    rule_id = "transaction_frequency"
    feature = "transaction_frequency"

    def evaluate(
        self,
        transaction: Transaction,
        features: FeatureVector,
        config: FraudConfig,
    ) -> RuleResult:
        if features.transaction_frequency <= config.behavior.frequency_above:
            return self._not_triggered(config)
        return self._triggered(
            config.behavior.frequency_multiplier, "High transaction frequency", config
        )


class VelocityRule(FeatureRule):
    """Triggers when recent spend approaches the velocity ceiling."""

    rule_id = "velocity"
    feature = "velocity"

    def evaluate(
        self,
        transaction: Transaction,
        features: FeatureVector,
        config: FraudConfig,
    ) -> RuleResult:
        if features.velocity <= config.behavior.velocity_above:
            return self._not_triggered(config)
        return self._triggered(
            config.behavior.velocity_multiplier, "High transaction velocity", config
        )
