"""Unit tests for the classifier evaluator."""

import pytest
from structlog.testing import capture_logs

from src.domains.fraud.config import FraudConfig
from src.domains.fraud.errors import LengthMismatchError
from src.domains.fraud.evaluator import Evaluator, matrix_from_labels, metrics_from_labels
from src.domains.fraud.models import Transaction
from src.domains.fraud.scorer import RiskScorer

CONFIG = FraudConfig()


@pytest.fixture
def evaluator():
    return Evaluator(RiskScorer(config=CONFIG))


@pytest.fixture
def risky(risky_transaction_data) -> Transaction:
    return Transaction.model_validate(risky_transaction_data)


@pytest.fixture
def everyday(everyday_transaction_data) -> Transaction:
    return Transaction.model_validate(everyday_transaction_data)


class TestMetricsFromLabels:
    def test_worked_example(self):
        metrics = metrics_from_labels([True, True, False, False], [True, True, True, False])
        assert metrics.accuracy == 0.75
        assert metrics.precision == 0.667
        assert metrics.recall == 1.0
        assert metrics.f1_score == 0.8

    def test_empty_set_is_all_zero(self):
        metrics = metrics_from_labels([], [])
        assert metrics.accuracy == 0.0
        assert metrics.precision == 0.0
        assert metrics.recall == 0.0
        assert metrics.f1_score == 0.0

    def test_no_positive_predictions(self):
        metrics = metrics_from_labels([False, False, False, True], [False] * 4)
        assert metrics.accuracy == 0.75
        assert metrics.precision == 0.0
        assert metrics.recall == 0.0
        assert metrics.f1_score == 0.0

    def test_no_positive_labels(self):
        metrics = metrics_from_labels([False, False], [True, False])
        assert metrics.accuracy == 0.5
        assert metrics.recall == 0.0
        assert metrics.f1_score == 0.0

    def test_matrix_is_two_by_two_with_one_class(self):
        matrix = matrix_from_labels([True, True], [True, False])
        assert matrix.true_positives == 1
        assert matrix.false_negatives == 1
        assert matrix.true_negatives == 0
        assert matrix.false_positives == 0

    def test_empty_matrix(self):
        assert matrix_from_labels([], []).total == 0


class TestEvaluator:
    def test_confusion_matrix(self, evaluator, risky, everyday):
        matrix = evaluator.confusion_matrix(
            [risky, risky, risky, everyday, everyday],
            [True, True, False, False, True],
        )
        assert matrix.true_positives == 2
        assert matrix.false_positives == 1
        assert matrix.true_negatives == 1
        assert matrix.false_negatives == 1
        assert matrix.total == 5

    def test_evaluate_worked_example(self, evaluator, risky, everyday):
        with capture_logs() as logs:
            metrics = evaluator.evaluate(
                [risky, risky, risky, everyday], [True, True, False, False]
            )
        assert metrics.accuracy == 0.75
        assert metrics.precision == 0.667
        assert metrics.recall == 1.0
        assert metrics.f1_score == 0.8

        event = next(e for e in logs if e["event"] == "model_evaluated")
        assert event["true_positives"] == 2
        assert event["f1_score"] == 0.8

    def test_empty_inputs(self, evaluator):
        metrics = evaluator.evaluate([], [])
        assert metrics.accuracy == 0.0
        assert metrics.f1_score == 0.0

    def test_length_mismatch_rejected_before_scoring(self, risky):
        class _ExplodingScorer:
            def predict(self, transaction):
                raise AssertionError("scored despite mismatched inputs")

        evaluator = Evaluator(_ExplodingScorer())
        with pytest.raises(LengthMismatchError, match="same length"):
            evaluator.evaluate([risky, risky], [True])

    def test_length_mismatch_is_a_value_error(self, evaluator, risky):
        with pytest.raises(ValueError):
            evaluator.confusion_matrix([risky], [])
