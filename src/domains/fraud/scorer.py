"""Fraud risk scorer: features -> rules -> weighted score -> decision."""

import structlog

from .calibration import Calibrator
from .config import FraudConfig, default_config
from .errors import InvalidInputError
from .feature_extractor import FeatureExtractor
from .models import FeatureVector, PredictionResult, RuleResult, Transaction, UserHistory
from .rules import ALL_RULES, FeatureRule

logger = structlog.get_logger()


class RiskScorer:
    """Weighted linear scoring over the per-feature rules.

    Scoring:
    1. Extract the FeatureVector
    2. Run every rule in order -> list[RuleResult]
    3. Score = sum of weight * multiplier, clamped to [0, 1], rounded
    4. is_fraud = score > threshold (strict)
    5. Confidence = |score - threshold| * 2, clamped, rounded. It is measured
       from the configured fraud threshold, which is 0.5 by default

    The decision and confidence are taken from the rounded score so the
    returned fields always agree with each other.
    """

    def __init__(
        self,
        config: FraudConfig | None = None,
        extractor: FeatureExtractor | None = None,
        calibrator: Calibrator | None = None,
        rules: list[FeatureRule] | None = None,
    ) -> None:
        self._config = config or default_config
        self._extractor = extractor or FeatureExtractor(config=self._config)
        self._calibrator = calibrator
        self._rules = list(rules or ALL_RULES)

    @property
    def extractor(self) -> FeatureExtractor:
        return self._extractor

    def predict(
        self,
        transaction: Transaction,
        context: UserHistory | None = None,
    ) -> PredictionResult:
        """Score one transaction. Raises InvalidInputError if it cannot be scored."""
        if self._calibrator is not None and not self._calibrator.is_calibrated:
            logger.warning(
                "model_not_calibrated",
                transaction_id=transaction.id,
                detail="scoring with static weights",
            )

        try:
            features = self._extractor.extract(transaction, context)
        except InvalidInputError as exc:
            logger.warning(
                "invalid_transaction",
                transaction_id=transaction.id,
                field=exc.field,
                error=str(exc),
            )
            raise

        result, _ = self.score(transaction, features)
        return result

    def score(
        self,
        transaction: Transaction,
        features: FeatureVector,
    ) -> tuple[PredictionResult, list[RuleResult]]:
        """Score an already extracted feature vector. Returns the result and rule breakdown."""
        cfg = self._config
        results = [rule.evaluate(transaction, features, cfg) for rule in self._rules]
        triggered = [r for r in results if r.triggered]

        raw_score = sum(r.contribution for r in triggered)
        digits = cfg.decision.round_digits
        risk_score = round(min(max(raw_score, 0.0), 1.0), digits)

        threshold = cfg.decision.fraud_threshold
        is_fraud = risk_score > threshold
        confidence = round(min(abs(risk_score - threshold) * 2, 1.0), digits)

        logger.info(
            "transaction_scored",
            transaction_id=transaction.id,
            risk_score=risk_score,
            is_fraud=is_fraud,
            confidence=confidence,
            triggered_rules=[r.rule_name for r in triggered],
        )

        return (
            PredictionResult(
                is_fraud=is_fraud,
                risk_score=risk_score,
                confidence=confidence,
                explanations=[r.explanation for r in triggered],
            ),
            results,
        )
