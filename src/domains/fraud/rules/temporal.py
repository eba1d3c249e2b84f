"""Time-of-day and day-of-week scoring rules.

Both read values already converted to the engine's reference time zone.
"""

from ..config import FraudConfig
from ..models import FeatureVector, RuleResult, Transaction
from .base import FeatureRule


class UnusualHourRule(FeatureRule):
    """Triggers for late-night and early-morning transactions (22:00-05:59 by default)."""

    rule_id = "unusual_hour"
    feature = "hour"

    def evaluate(
        self,
        transaction: Transaction,
        features: FeatureVector,
        config: FraudConfig,
    ) -> RuleResult:
        hour = features.hour
        if not (hour >= config.time.late_start_hour or hour <= config.time.early_end_hour):
            return self._not_triggered(config)

        return self._triggered(
            config.time.unusual_hour_multiplier,
            f"Transaction at unusual hour: {hour}:00",
            config,
        )


class WeekendRule(FeatureRule):
    rule_id = "weekend"
    feature = "day_of_week"

    def evaluate(
        self,
        transaction: Transaction,
        features: FeatureVector,
        config: FraudConfig,
    ) -> RuleResult:
        if features.day_of_week not in config.time.weekend_days:
            return self._not_triggered(config)
        return self._triggered(config.time.weekend_multiplier, "Weekend transaction", config)
