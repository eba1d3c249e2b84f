"""Pydantic models for the fraud domain."""

from datetime import UTC, datetime
from decimal import Decimal
from enum import StrEnum

from pydantic import BaseModel, Field, field_validator
from pydantic.alias_generators import to_camel


class EngineModel(BaseModel):
    """Snake_case attributes, camelCase accepted on input and emitted with by_alias."""

    model_config = {
        "alias_generator": to_camel,
        "populate_by_name": True,
        "protected_namespaces": (),
    }


class TransactionStatus(StrEnum):
    PENDING = "pending"
    COMPLETED = "completed"
    FAILED = "failed"
    CANCELLED = "cancelled"


class Transaction(EngineModel):
    """Transaction record as supplied by the storage collaborator.

    Validation is lenient: amount and timestamp are kept in whatever shape
    they arrived so the extractor can reject them with an InvalidInputError
    instead of a generic validation failure.
    """

    id: str | None = None
    user_id: str
    amount: str | None = None
    currency: str = "USD"
    merchant: str | None = None
    location: str | None = None
    ip_address: str | None = None
    device_fingerprint: str | None = None
    timestamp: datetime | str | None = None
    status: TransactionStatus = TransactionStatus.PENDING

    @field_validator("amount", mode="before")
    @classmethod
    def _amount_as_text(cls, value):
        if isinstance(value, (int, float, Decimal)) and not isinstance(value, bool):
            return str(value)
        return value


class HistoricalTransaction(EngineModel):
    amount: float = Field(ge=0)
    timestamp: datetime
    location: str | None = None

    @field_validator("timestamp")
    @classmethod
    def _assume_utc(cls, value: datetime) -> datetime:
        if value.tzinfo is None:
            return value.replace(tzinfo=UTC)
        return value


class UserHistory(EngineModel):
    """Prior transactions of one user, oldest first."""

    user_id: str
    transactions: list[HistoricalTransaction] = []


class FeatureVector(EngineModel):
    amount: float = Field(ge=0)
    hour: int = Field(ge=0, le=23)
    day_of_week: int = Field(ge=0, le=6)
    merchant_risk: float = Field(ge=0.0, le=1.0)
    location_risk: float = Field(ge=0.0, le=1.0)
    user_behavior_deviation: float = Field(default=0.0, ge=0.0, le=1.0)
    transaction_frequency: float = Field(default=0.0, ge=0)
    velocity: float = Field(default=0.0, ge=0.0, le=1.0)


class RuleResult(EngineModel):
    rule_name: str
    feature: str
    triggered: bool
    multiplier: float = 0.0
    weight: float = 0.0
    contribution: float = 0.0
    explanation: str = ""


class PredictionResult(EngineModel):
    is_fraud: bool
    risk_score: float = Field(ge=0.0, le=1.0)
    confidence: float = Field(ge=0.0, le=1.0)
    explanations: list[str] = []


class ConfusionMatrix(EngineModel):
    true_positives: int = 0
    false_positives: int = 0
    true_negatives: int = 0
    false_negatives: int = 0

    @property
    def total(self) -> int:
        return (
            self.true_positives
            + self.false_positives
            + self.true_negatives
            + self.false_negatives
        )


class EvaluationMetrics(EngineModel):
    accuracy: float = Field(ge=0.0, le=1.0)
    precision: float = Field(ge=0.0, le=1.0)
    recall: float = Field(ge=0.0, le=1.0)
    f1_score: float = Field(ge=0.0, le=1.0)


class AmountStats(EngineModel):
    count: int
    total: float
    mean: float
    stddev: float
    minimum: float
    maximum: float


class CalibrationSummary(EngineModel):
    transaction_count: int
    merchant_count: int
    location_count: int
    calibrated_at: datetime
    model_version: str


class TransactionAnalysis(EngineModel):
    transaction_id: str
    is_fraud: bool
    risk_score: float = Field(ge=0.0, le=1.0)
    confidence: float = Field(ge=0.0, le=1.0)
    explanations: list[str] = []
    model_version: str
    analyzed_at: datetime
