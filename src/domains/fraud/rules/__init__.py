"""Scoring rules package.

Exports ALL_RULES (one rule per feature, in explanation order) and the
individual rule classes for direct use.
"""

from .amount import TransactionAmountRule, amount_curve
from .base import FeatureRule
from .behavior import BehaviorDeviationRule, TransactionFrequencyRule, VelocityRule, deviation_curve
from .categorical import LocationRiskRule, MerchantRiskRule, location_curve, merchant_curve
from .temporal import UnusualHourRule, WeekendRule

# All rule instances in evaluation order
ALL_RULES: list[FeatureRule] = [
    TransactionAmountRule(),
    UnusualHourRule(),
    WeekendRule(),
    MerchantRiskRule(),
    LocationRiskRule(),
    BehaviorDeviationRule(),
    TransactionFrequencyRule(),
    VelocityRule(),
]

__all__ = [
    "ALL_RULES",
    "FeatureRule",
    "amount_curve",
    "deviation_curve",
    "location_curve",
    "merchant_curve",
    # Amount
    "TransactionAmountRule",
    # Temporal
    "UnusualHourRule",
    "WeekendRule",
    # Categorical
    "MerchantRiskRule",
    "LocationRiskRule",
    # Behavior
    "BehaviorDeviationRule",
    "TransactionFrequencyRule",
    "VelocityRule",
]
