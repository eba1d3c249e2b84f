"""Turn a transaction and the user's history into the scoring feature vector."""

import statistics
from datetime import UTC, datetime, timedelta, tzinfo
from decimal import Decimal, InvalidOperation
from zoneinfo import ZoneInfo

import structlog

from .config import FraudConfig, default_config
from .errors import InvalidInputError
from .history import NullUserHistory, UserHistoryProvider
from .models import FeatureVector, HistoricalTransaction, Transaction, UserHistory
from .risk_curves import classify_location, classify_merchant

logger = structlog.get_logger()


def reference_zone(name: str) -> tzinfo:
    if name.upper() == "UTC":
        return UTC
    return ZoneInfo(name)


def parse_amount(transaction: Transaction) -> float:
    """Amount as a float. Negative, NaN and infinite amounts count as zero."""
    raw = transaction.amount
    if raw is None or not raw.strip():
        raise InvalidInputError("amount", "missing", transaction.id)
    try:
        value = Decimal(raw.strip())
    except InvalidOperation as exc:
        raise InvalidInputError("amount", f"not a number: {raw!r}", transaction.id) from exc

    if not value.is_finite() or value < 0:
        logger.warning("amount_coerced_to_zero", transaction_id=transaction.id, raw_amount=raw)
        return 0.0
    return float(value)


def resolve_timestamp(transaction: Transaction, zone: tzinfo = UTC) -> datetime:
    """Timestamp converted to ``zone``. Naive values are taken to be in ``zone``."""
    raw = transaction.timestamp
    if raw is None:
        raise InvalidInputError("timestamp", "missing", transaction.id)

    if isinstance(raw, str):
        text = raw.strip()
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError as exc:
            raise InvalidInputError(
                "timestamp", f"not an ISO-8601 datetime: {raw!r}", transaction.id
            ) from exc
    else:
        parsed = raw

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=zone)
    return parsed.astimezone(zone)


def require_text(value: str | None, field: str, transaction_id: str | None) -> str:
    if value is None or not value.strip():
        raise InvalidInputError(field, "missing", transaction_id)
    return value


class FeatureExtractor:
    """Builds FeatureVectors. Pure apart from the read-only history lookup."""

    def __init__(
        self,
        config: FraudConfig | None = None,
        history: UserHistoryProvider | None = None,
    ) -> None:
        self._config = config or default_config
        self._history = history or NullUserHistory()
        self._zone = reference_zone(self._config.timezone)

    def extract(
        self,
        transaction: Transaction,
        context: UserHistory | None = None,
    ) -> FeatureVector:
        amount = parse_amount(transaction)
        timestamp = resolve_timestamp(transaction, self._zone)
        merchant = require_text(transaction.merchant, "merchant", transaction.id)
        location = require_text(transaction.location, "location", transaction.id)

        history = context
        if history is None:
            history = self._history.history_for(transaction.user_id, timestamp)
        prior = [e for e in history.transactions if e.timestamp < timestamp]

        return FeatureVector(
            amount=amount,
            hour=timestamp.hour,
            # isoweekday: Monday=1..Sunday=7, shifted to Sunday=0
            day_of_week=timestamp.isoweekday() % 7,
            merchant_risk=classify_merchant(merchant, self._config.merchant_tiers),
            location_risk=classify_location(location, self._config.location_tiers),
            user_behavior_deviation=self._behavior_deviation(prior, amount, location),
            transaction_frequency=self._transaction_frequency(prior, timestamp),
            velocity=self._velocity(prior, amount, timestamp),
        )

    def history_entry(self, transaction: Transaction) -> HistoricalTransaction:
        """The record a history store keeps for an already-scored transaction."""
        return HistoricalTransaction(
            amount=parse_amount(transaction),
            timestamp=resolve_timestamp(transaction, self._zone),
            location=transaction.location,
        )

    def _transaction_frequency(
        self, prior: list[HistoricalTransaction], timestamp: datetime
    ) -> float:
        window_start = timestamp - timedelta(minutes=self._config.history.frequency_window_minutes)
        return float(sum(1 for e in prior if e.timestamp >= window_start))

    def _velocity(
        self, prior: list[HistoricalTransaction], amount: float, timestamp: datetime
    ) -> float:
        cfg = self._config.history
        window_start = timestamp - timedelta(minutes=cfg.velocity_window_minutes)
        recent = [e.amount for e in prior if e.timestamp >= window_start]
        if not recent:
            return 0.0
        return min((sum(recent) + amount) / cfg.velocity_amount_ceiling, 1.0)

    def _behavior_deviation(
        self, prior: list[HistoricalTransaction], amount: float, location: str
    ) -> float:
        cfg = self._config.history
        if len(prior) < cfg.min_history:
            return 0.0

        amounts = [e.amount for e in prior]
        mean = statistics.fmean(amounts)
        # Spread floor: 10% of the mean, never below 1.0
        spread = max(statistics.pstdev(amounts), mean * 0.1, 1.0)
        zscore = abs(amount - mean) / spread
        amount_deviation = min(zscore / cfg.deviation_zscore_ceiling, 1.0)

        known_locations = {e.location.strip().lower() for e in prior if e.location}
        location_deviation = 0.0
        if known_locations and location.strip().lower() not in known_locations:
            location_deviation = cfg.new_location_deviation

        return max(amount_deviation, location_deviation)
