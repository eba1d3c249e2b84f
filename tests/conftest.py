"""Shared test fixtures for the fraud risk engine tests."""

from datetime import UTC, datetime

import pytest
import structlog

# Saturday 03:00 UTC and Wednesday 14:00 UTC
SATURDAY_NIGHT = datetime(2026, 1, 17, 3, 0, 0, tzinfo=UTC)
WEDNESDAY_AFTERNOON = datetime(2026, 1, 14, 14, 0, 0, tzinfo=UTC)


@pytest.fixture(autouse=True)
def _reset_structlog():
    yield
    structlog.reset_defaults()


@pytest.fixture
def risky_transaction_data() -> dict:
    return {
        "id": "txn-risky-1",
        "userId": "user-1",
        "amount": "2500",
        "merchant": "Jewelry Store",
        "location": "Miami, FL",
        "timestamp": "2026-01-17T03:00:00Z",
    }


@pytest.fixture
def everyday_transaction_data() -> dict:
    return {
        "id": "txn-coffee-1",
        "userId": "user-2",
        "amount": "45.99",
        "merchant": "Starbucks",
        "location": "Seattle, WA",
        "timestamp": "2026-01-14T14:00:00Z",
    }
