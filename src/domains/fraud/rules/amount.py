"""Amount-based scoring rule."""

from ..config import AmountCurve, FraudConfig
from ..models import FeatureVector, RuleResult, Transaction
from ..risk_curves import Breakpoint, StepCurve
from .base import FeatureRule


def amount_curve(cfg: AmountCurve) -> StepCurve:
    return StepCurve(
        (
            Breakpoint(cfg.high_above, cfg.high_multiplier, "High"),
            Breakpoint(cfg.medium_high_above, cfg.medium_high_multiplier, "Medium-high"),
            Breakpoint(cfg.moderate_above, cfg.moderate_multiplier, "Moderate"),
        )
    )


class TransactionAmountRule(FeatureRule):
    """Higher amounts carry more risk, in three bands."""

    rule_id = "transaction_amount"
    feature = "amount"

    def evaluate(
        self,
        transaction: Transaction,
        features: FeatureVector,
        config: FraudConfig,
    ) -> RuleResult:
        return self._from_curve(
            amount_curve(config.amount),
            features.amount,
            lambda label: f"{label} transaction amount: ${features.amount:.2f}",
            config,
        )
