"""Fraud detection domain."""

from .calibration import AggregateTrainer, CalibrationSnapshot, Calibrator
from .config import FeatureWeights, FraudConfig, default_config
from .engine import FraudDetectionEngine
from .errors import FraudEngineError, InvalidInputError, LengthMismatchError
from .evaluator import Evaluator, matrix_from_labels, metrics_from_labels
from .feature_extractor import FeatureExtractor
from .history import InMemoryHistoryStore, NullUserHistory, UserHistoryProvider
from .models import (
    AmountStats,
    CalibrationSummary,
    ConfusionMatrix,
    EvaluationMetrics,
    FeatureVector,
    HistoricalTransaction,
    PredictionResult,
    RuleResult,
    Transaction,
    TransactionAnalysis,
    TransactionStatus,
    UserHistory,
)
from .risk_curves import StepCurve, classify_location, classify_merchant
from .rules import ALL_RULES
from .scorer import RiskScorer

__all__ = [
    "ALL_RULES",
    "AggregateTrainer",
    "AmountStats",
    "CalibrationSnapshot",
    "CalibrationSummary",
    "Calibrator",
    "ConfusionMatrix",
    "EvaluationMetrics",
    "Evaluator",
    "FeatureExtractor",
    "FeatureVector",
    "FeatureWeights",
    "FraudConfig",
    "FraudDetectionEngine",
    "FraudEngineError",
    "HistoricalTransaction",
    "InMemoryHistoryStore",
    "InvalidInputError",
    "LengthMismatchError",
    "NullUserHistory",
    "PredictionResult",
    "RiskScorer",
    "RuleResult",
    "StepCurve",
    "Transaction",
    "TransactionAnalysis",
    "TransactionStatus",
    "UserHistory",
    "UserHistoryProvider",
    "classify_location",
    "classify_merchant",
    "default_config",
    "matrix_from_labels",
    "metrics_from_labels",
]
