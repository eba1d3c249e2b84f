"""Batch calibration: descriptive amount statistics per merchant and location.

Calibration does not touch the scoring weights. The statistics are published
as an immutable snapshot so the scorer and other readers never block on a
running calibration.
"""

import statistics
import threading
from collections import defaultdict
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field, replace
from datetime import UTC, datetime
from types import MappingProxyType
from typing import Protocol, runtime_checkable

import structlog

from .errors import InvalidInputError
from .feature_extractor import parse_amount, require_text
from .models import AmountStats, CalibrationSummary, Transaction

logger = structlog.get_logger()


@runtime_checkable
class Calibrator(Protocol):
    """What the engine needs from a calibration backend."""

    @property
    def is_calibrated(self) -> bool: ...

    def calibrate(self, transactions: Iterable[Transaction]) -> CalibrationSummary: ...


@dataclass(frozen=True)
class CalibrationSnapshot:
    calibrated: bool = False
    transaction_count: int = 0
    merchant_stats: Mapping[str, AmountStats] = field(
        default_factory=lambda: MappingProxyType({})
    )
    location_stats: Mapping[str, AmountStats] = field(
        default_factory=lambda: MappingProxyType({})
    )
    calibrated_at: datetime | None = None


def group_key(value: str) -> str:
    return value.strip().lower()


def amount_stats(amounts: list[float]) -> AmountStats:
    return AmountStats(
        count=len(amounts),
        total=sum(amounts),
        mean=statistics.fmean(amounts),
        stddev=statistics.pstdev(amounts),
        minimum=min(amounts),
        maximum=max(amounts),
    )


class AggregateTrainer:
    """Groups historical transactions by merchant and location.

    Each ``calibrate`` call replaces the statistics with those of the batch it
    was given, so re-running a batch is idempotent. Writers are serialised by
    a lock; the snapshot reference is swapped only once a batch has been fully
    aggregated, so a failing batch leaves the previous state untouched.

    The returned summary describes the batch itself: an empty batch reports
    zero groups even though the previous statistics are retained.
    """

    def __init__(self, model_version: str = "heuristic-v1") -> None:
        self._model_version = model_version
        self._lock = threading.Lock()
        self._snapshot = CalibrationSnapshot()

    @property
    def snapshot(self) -> CalibrationSnapshot:
        return self._snapshot

    @property
    def is_calibrated(self) -> bool:
        return self._snapshot.calibrated

    @property
    def merchant_stats(self) -> Mapping[str, AmountStats]:
        return self._snapshot.merchant_stats

    @property
    def location_stats(self) -> Mapping[str, AmountStats]:
        return self._snapshot.location_stats

    def calibrate(self, transactions: Iterable[Transaction]) -> CalibrationSummary:
        batch = list(transactions)
        logger.info("calibration_started", transaction_count=len(batch))

        with self._lock:
            now = datetime.now(UTC)
            if not batch:
                snapshot = replace(self._snapshot, calibrated=True, calibrated_at=now)
            else:
                try:
                    snapshot = self._aggregate(batch, now)
                except InvalidInputError as exc:
                    logger.warning(
                        "calibration_failed",
                        transaction_id=exc.transaction_id,
                        field=exc.field,
                        error=str(exc),
                    )
                    raise
            self._snapshot = snapshot

        summary = CalibrationSummary(
            transaction_count=len(batch),
            merchant_count=len(snapshot.merchant_stats) if batch else 0,
            location_count=len(snapshot.location_stats) if batch else 0,
            calibrated_at=now,
            model_version=self._model_version,
        )
        logger.info(
            "calibration_completed",
            transaction_count=summary.transaction_count,
            merchant_count=summary.merchant_count,
            location_count=summary.location_count,
        )
        return summary

    def _aggregate(self, batch: list[Transaction], now: datetime) -> CalibrationSnapshot:
        by_merchant: dict[str, list[float]] = defaultdict(list)
        by_location: dict[str, list[float]] = defaultdict(list)

        for txn in batch:
            amount = parse_amount(txn)
            merchant = require_text(txn.merchant, "merchant", txn.id)
            location = require_text(txn.location, "location", txn.id)
            by_merchant[group_key(merchant)].append(amount)
            by_location[group_key(location)].append(amount)

        return CalibrationSnapshot(
            calibrated=True,
            transaction_count=len(batch),
            merchant_stats=MappingProxyType(
                {key: amount_stats(values) for key, values in by_merchant.items()}
            ),
            location_stats=MappingProxyType(
                {key: amount_stats(values) for key, values in by_location.items()}
            ),
            calibrated_at=now,
        )
