"""Classifier quality metrics for the scorer against labelled transactions."""

from collections.abc import Sequence

import structlog
from sklearn.metrics import (
    accuracy_score,
    confusion_matrix,
    f1_score,
    precision_score,
    recall_score,
)

from .errors import LengthMismatchError
from .models import ConfusionMatrix, EvaluationMetrics, Transaction
from .scorer import RiskScorer

logger = structlog.get_logger()

# Fixed label order keeps the matrix 2x2 even when one class is absent
_LABELS = [0, 1]


def matrix_from_labels(actual: Sequence[bool], predicted: Sequence[bool]) -> ConfusionMatrix:
    if not actual:
        return ConfusionMatrix()
    y_true = [int(bool(v)) for v in actual]
    y_pred = [int(bool(v)) for v in predicted]
    tn, fp, fn, tp = confusion_matrix(y_true, y_pred, labels=_LABELS).ravel()
    return ConfusionMatrix(
        true_positives=int(tp),
        false_positives=int(fp),
        true_negatives=int(tn),
        false_negatives=int(fn),
    )


def metrics_from_labels(
    actual: Sequence[bool],
    predicted: Sequence[bool],
    digits: int = 3,
) -> EvaluationMetrics:
    """Accuracy, precision, recall and F1. Undefined ratios (and an empty set) are 0."""
    if not actual:
        return EvaluationMetrics(accuracy=0.0, precision=0.0, recall=0.0, f1_score=0.0)

    y_true = [int(bool(v)) for v in actual]
    y_pred = [int(bool(v)) for v in predicted]
    return EvaluationMetrics(
        accuracy=round(float(accuracy_score(y_true, y_pred)), digits),
        precision=round(float(precision_score(y_true, y_pred, zero_division=0)), digits),
        recall=round(float(recall_score(y_true, y_pred, zero_division=0)), digits),
        f1_score=round(float(f1_score(y_true, y_pred, zero_division=0)), digits),
    )


class Evaluator:
    """Runs the scorer over labelled transactions and derives confusion-matrix metrics."""

    def __init__(self, scorer: RiskScorer, digits: int = 3) -> None:
        self._scorer = scorer
        self._digits = digits

    def predict_labels(
        self,
        test_transactions: Sequence[Transaction],
        actual_labels: Sequence[bool],
    ) -> list[bool]:
        """Fraud decisions for every transaction. Inputs must be index-aligned."""
        if len(test_transactions) != len(actual_labels):
            raise LengthMismatchError(len(test_transactions), len(actual_labels))
        return [self._scorer.predict(txn).is_fraud for txn in test_transactions]

    def confusion_matrix(
        self,
        test_transactions: Sequence[Transaction],
        actual_labels: Sequence[bool],
    ) -> ConfusionMatrix:
        predicted = self.predict_labels(test_transactions, actual_labels)
        return matrix_from_labels(actual_labels, predicted)

    def evaluate(
        self,
        test_transactions: Sequence[Transaction],
        actual_labels: Sequence[bool],
    ) -> EvaluationMetrics:
        predicted = self.predict_labels(test_transactions, actual_labels)
        matrix = matrix_from_labels(actual_labels, predicted)
        metrics = metrics_from_labels(actual_labels, predicted, self._digits)

        logger.info(
            "model_evaluated",
            **matrix.model_dump(),
            **metrics.model_dump(),
        )
        return metrics
