"""Typed failures raised by the scoring engine."""


class FraudEngineError(Exception):
    """Base class for scoring engine errors."""


class InvalidInputError(FraudEngineError, ValueError):
    """A transaction field needed for feature extraction is missing or malformed."""

    def __init__(self, field: str, message: str, transaction_id: str | None = None) -> None:
        self.field = field
        self.transaction_id = transaction_id
        super().__init__(f"{field}: {message}")


class LengthMismatchError(FraudEngineError, ValueError):
    """Evaluation inputs are not aligned by index."""

    def __init__(self, transactions: int, labels: int) -> None:
        self.transactions = transactions
        self.labels = labels
        super().__init__(
            f"Got {transactions} transactions but {labels} labels; inputs must be the same length"
        )
