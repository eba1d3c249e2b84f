"""The fraud detection engine: one configured value shared by all callers."""

import uuid
from collections.abc import Iterable, Sequence
from datetime import UTC, datetime

import structlog

from src.config import Settings

from .calibration import AggregateTrainer, Calibrator
from .config import FraudConfig, default_config
from .evaluator import Evaluator
from .feature_extractor import FeatureExtractor
from .history import HistoryRecorder, NullUserHistory, UserHistoryProvider
from .models import (
    CalibrationSummary,
    EvaluationMetrics,
    PredictionResult,
    Transaction,
    TransactionAnalysis,
    UserHistory,
)
from .scorer import RiskScorer

logger = structlog.get_logger()


class FraudDetectionEngine:
    """Wires the extractor, scorer, trainer and evaluator around one config.

    Build it once at process start and hand the same instance to request
    handlers, event consumers and batch jobs.
    """

    def __init__(
        self,
        config: FraudConfig | None = None,
        history: UserHistoryProvider | None = None,
        calibrator: Calibrator | None = None,
        model_version: str = "heuristic-v1",
    ) -> None:
        self._config = config or default_config
        self._model_version = model_version
        self._history = history or NullUserHistory()
        self._extractor = FeatureExtractor(config=self._config, history=self._history)
        self._calibrator = calibrator or AggregateTrainer(model_version=model_version)
        self._scorer = RiskScorer(
            config=self._config,
            extractor=self._extractor,
            calibrator=self._calibrator,
        )
        self._evaluator = Evaluator(self._scorer, digits=self._config.decision.round_digits)
        logger.info(
            "fraud_engine_initialized",
            model_version=model_version,
            timezone=self._config.timezone,
            fraud_threshold=self._config.decision.fraud_threshold,
        )

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        history: UserHistoryProvider | None = None,
    ) -> "FraudDetectionEngine":
        return cls(
            config=FraudConfig.from_env(),
            history=history,
            model_version=settings.model_version,
        )

    @property
    def config(self) -> FraudConfig:
        return self._config

    @property
    def model_version(self) -> str:
        return self._model_version

    @property
    def calibrator(self) -> Calibrator:
        return self._calibrator

    @property
    def scorer(self) -> RiskScorer:
        return self._scorer

    @property
    def is_calibrated(self) -> bool:
        return self._calibrator.is_calibrated

    def predict(
        self,
        transaction: Transaction,
        context: UserHistory | None = None,
    ) -> PredictionResult:
        return self._scorer.predict(transaction, context)

    def calibrate(self, transactions: Iterable[Transaction]) -> CalibrationSummary:
        return self._calibrator.calibrate(transactions)

    def evaluate(
        self,
        test_transactions: Sequence[Transaction],
        actual_labels: Sequence[bool],
    ) -> EvaluationMetrics:
        return self._evaluator.evaluate(test_transactions, actual_labels)

    def analyze(
        self,
        transaction: Transaction,
        context: UserHistory | None = None,
        record: bool = True,
    ) -> TransactionAnalysis:
        """Score a transaction and wrap the result for delivery to collaborators.

        A missing timestamp means "now". When the history provider can record,
        the scored transaction is appended to the user's history afterwards.
        """
        if transaction.timestamp is None:
            transaction = transaction.model_copy(update={"timestamp": datetime.now(UTC)})

        prediction = self.predict(transaction, context)

        if record and isinstance(self._history, HistoryRecorder):
            self._history.add(transaction.user_id, self._extractor.history_entry(transaction))

        return TransactionAnalysis(
            transaction_id=transaction.id or uuid.uuid4().hex,
            is_fraud=prediction.is_fraud,
            risk_score=prediction.risk_score,
            confidence=prediction.confidence,
            explanations=prediction.explanations,
            model_version=self._model_version,
            analyzed_at=datetime.now(UTC),
        )
