"""Fraud scoring configuration with sensible defaults.

Weights, curve breakpoints, keyword tiers and history windows used by the
feature extractor and the scorer. Everything here is immutable once the
engine is built; calibration never rewrites it.
"""

import os
from dataclasses import dataclass, field


@dataclass(frozen=True)
class FeatureWeights:
    """Static per-feature weights. The eight weights must sum to 1.0."""

    amount: float = 0.25
    hour: float = 0.15
    day_of_week: float = 0.10
    merchant_risk: float = 0.20
    location_risk: float = 0.15
    user_behavior_deviation: float = 0.10
    transaction_frequency: float = 0.03
    velocity: float = 0.02

    def __post_init__(self) -> None:
        weights = self.as_dict()
        negative = [name for name, w in weights.items() if w < 0]
        if negative:
            raise ValueError(f"Feature weights must be non-negative: {', '.join(negative)}")
        total = sum(weights.values())
        if abs(total - 1.0) > 1e-6:
            raise ValueError(f"Feature weights must sum to 1.0, got {total:.4f}")

    def as_dict(self) -> dict[str, float]:
        return {
            "amount": self.amount,
            "hour": self.hour,
            "day_of_week": self.day_of_week,
            "merchant_risk": self.merchant_risk,
            "location_risk": self.location_risk,
            "user_behavior_deviation": self.user_behavior_deviation,
            "transaction_frequency": self.transaction_frequency,
            "velocity": self.velocity,
        }


@dataclass(frozen=True)
class AmountCurve:
    high_above: float = 2_000.0
    high_multiplier: float = 0.8
    medium_high_above: float = 1_000.0
    medium_high_multiplier: float = 0.5
    moderate_above: float = 500.0
    moderate_multiplier: float = 0.2


@dataclass(frozen=True)
class TimeCurve:
    # Unusual window wraps midnight: hour >= late_start or hour <= early_end
    late_start_hour: int = 22
    early_end_hour: int = 5
    unusual_hour_multiplier: float = 0.7
    # Sunday=0, Saturday=6
    weekend_days: tuple[int, ...] = (0, 6)
    weekend_multiplier: float = 0.3


@dataclass(frozen=True)
class CategoricalCurve:
    merchant_high_above: float = 0.5
    merchant_high_multiplier: float = 0.9
    merchant_medium_above: float = 0.2
    merchant_medium_multiplier: float = 0.4
    location_high_above: float = 0.7
    location_high_multiplier: float = 0.8
    location_medium_above: float = 0.4
    location_medium_multiplier: float = 0.4


@dataclass(frozen=True)
class BehaviorCurve:
    deviation_high_above: float = 0.8
    deviation_high_multiplier: float = 0.9
    deviation_medium_above: float = 0.5
    deviation_medium_multiplier: float = 0.5
    frequency_above: float = 5.0
    frequency_multiplier: float = 0.6
    velocity_above: float = 0.8
    velocity_multiplier: float = 0.7


@dataclass(frozen=True)
class KeywordTiers:
    """Three-tier keyword table: high keywords, medium keywords, fallback."""

    high_keywords: tuple[str, ...]
    medium_keywords: tuple[str, ...]
    high_risk: float
    medium_risk: float
    low_risk: float


def _merchant_tiers() -> KeywordTiers:
    return KeywordTiers(
        high_keywords=("casino", "gambling", "crypto exchange", "jewelry"),
        medium_keywords=("online shopping", "electronics", "luxury goods"),
        high_risk=0.8,
        medium_risk=0.5,
        low_risk=0.1,
    )


def _location_tiers() -> KeywordTiers:
    return KeywordTiers(
        high_keywords=("nigeria", "somalia", "north korea", "iran"),
        medium_keywords=("caribbean", "panama", "cayman islands"),
        high_risk=0.9,
        medium_risk=0.6,
        low_risk=0.2,
    )


@dataclass(frozen=True)
class HistorySettings:
    frequency_window_minutes: int = 60
    velocity_window_minutes: int = 10
    velocity_amount_ceiling: float = 3_000.0
    min_history: int = 3
    deviation_zscore_ceiling: float = 4.0
    new_location_deviation: float = 0.6
    # Per-user cap for the in-memory history store
    max_transactions_per_user: int = 500


@dataclass(frozen=True)
class DecisionSettings:
    fraud_threshold: float = 0.5
    round_digits: int = 3


@dataclass
class FraudConfig:
    weights: FeatureWeights = field(default_factory=FeatureWeights)
    amount: AmountCurve = field(default_factory=AmountCurve)
    time: TimeCurve = field(default_factory=TimeCurve)
    categorical: CategoricalCurve = field(default_factory=CategoricalCurve)
    behavior: BehaviorCurve = field(default_factory=BehaviorCurve)
    merchant_tiers: KeywordTiers = field(default_factory=_merchant_tiers)
    location_tiers: KeywordTiers = field(default_factory=_location_tiers)
    history: HistorySettings = field(default_factory=HistorySettings)
    decision: DecisionSettings = field(default_factory=DecisionSettings)
    timezone: str = "UTC"

    @classmethod
    def from_env(cls) -> "FraudConfig":
        """Load config with env var overrides. Env vars use FRAUD_ prefix."""
        config = cls()

        if v := os.getenv("FRAUD_TIMEZONE"):
            config.timezone = v

        # Decision overrides
        decision = {}
        if v := os.getenv("FRAUD_DECISION_THRESHOLD"):
            decision["fraud_threshold"] = float(v)
        if decision:
            config.decision = DecisionSettings(**decision)

        # History overrides
        history = {}
        if v := os.getenv("FRAUD_FREQUENCY_WINDOW_MINUTES"):
            history["frequency_window_minutes"] = int(v)
        if v := os.getenv("FRAUD_VELOCITY_WINDOW_MINUTES"):
            history["velocity_window_minutes"] = int(v)
        if v := os.getenv("FRAUD_VELOCITY_AMOUNT_CEILING"):
            history["velocity_amount_ceiling"] = float(v)
        if v := os.getenv("FRAUD_MIN_HISTORY"):
            history["min_history"] = int(v)
        if history:
            config.history = HistorySettings(**history)

        return config


# Module-level default instance
default_config = FraudConfig()
