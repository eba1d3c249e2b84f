"""Abstract base class for per-feature scoring rules."""

from abc import ABC, abstractmethod
from collections.abc import Callable

from ..config import FraudConfig
from ..models import FeatureVector, RuleResult, Transaction
from ..risk_curves import StepCurve


class FeatureRule(ABC):
    """Base class for all scoring rules.

    Each rule reads one feature, maps it to a multiplier in [0, 1] and
    contributes ``weight * multiplier`` to the risk score, where the weight is
    the configured weight of that feature.
    """

    rule_id: str
    feature: str  # attribute name on FeatureWeights and FeatureVector

    @abstractmethod
    def evaluate(
        self,
        transaction: Transaction,
        features: FeatureVector,
        config: FraudConfig,
    ) -> RuleResult:
        """Evaluate this rule and return a RuleResult."""
        ...

    def _weight(self, config: FraudConfig) -> float:
        return getattr(config.weights, self.feature)

    def _not_triggered(self, config: FraudConfig) -> RuleResult:
        """Convenience: return a non-triggered result for this rule."""
        return RuleResult(
            rule_name=self.rule_id,
            feature=self.feature,
            triggered=False,
            weight=self._weight(config),
        )

    def _triggered(self, multiplier: float, explanation: str, config: FraudConfig) -> RuleResult:
        """Convenience: return a triggered result. A zero multiplier never triggers."""
        if multiplier == 0:
            return self._not_triggered(config)
        weight = self._weight(config)
        return RuleResult(
            rule_name=self.rule_id,
            feature=self.feature,
            triggered=True,
            multiplier=multiplier,
            weight=weight,
            contribution=weight * multiplier,
            explanation=explanation,
        )

    def _from_curve(
        self,
        curve: StepCurve,
        value: float,
        describe: Callable[[str], str],
        config: FraudConfig,
    ) -> RuleResult:
        """Apply a step curve; ``describe`` turns the matched breakpoint label into text."""
        bp = curve.match(value)
        if bp is None:
            return self._not_triggered(config)
        return self._triggered(bp.multiplier, describe(bp.label), config)
