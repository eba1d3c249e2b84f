"""Labelled transaction generator with fraud injection."""

import random
from datetime import UTC, datetime, timedelta
from typing import Any

from .base import BaseGenerator
from .utils.distributions import (
    daytime_hour,
    generate_device_fingerprint,
    generate_ip_address,
    log_normal_sample,
    night_hour,
)
from .utils.geography import random_domestic_location, random_risky_location
from .utils.merchants import random_everyday_merchant, random_risky_merchant

DEFAULT_CONFIG: dict[str, Any] = {
    "num_users": 200,
    "time_span_days": 30,
    "fraud_injection_rate": 0.05,
    "amount_distribution": {"log_normal_mean": 4.0, "log_normal_std": 0.9},
    "fraud_amount_range": [1500.0, 9000.0],
    "status_weights": {"completed": 0.9, "pending": 0.06, "failed": 0.03, "cancelled": 0.01},
}


class TransactionGenerator(BaseGenerator):
    """Produces transactions with an ``is_fraud`` label.

    Normal traffic is small daytime purchases at everyday merchants in the
    user's home city. Injected fraud combines large amounts, night hours,
    risky merchants and risky locations.
    """

    def __init__(self, config: dict[str, Any] | None = None, seed: int = 42):
        super().__init__(config={**DEFAULT_CONFIG, **(config or {})}, seed=seed)

    def generate(self, num_transactions: int = 1000) -> list[dict[str, Any]]:
        config = self.config
        base_time = datetime(2026, 1, 1, tzinfo=UTC)
        end_time = base_time + timedelta(days=config["time_span_days"])

        users = [
            {
                "user_id": self._uuid(),
                "home": random_domestic_location(),
                "device_fingerprint": generate_device_fingerprint(),
                "ip_address": generate_ip_address(),
            }
            for _ in range(config["num_users"])
        ]

        records: list[dict[str, Any]] = []
        for _ in range(num_transactions):
            user = random.choice(users)
            is_fraud = random.random() < config["fraud_injection_rate"]

            if is_fraud:
                low, high = config["fraud_amount_range"]
                amount = random.uniform(low, high)
                hour = night_hour() if random.random() < 0.8 else daytime_hour()
                merchant = random_risky_merchant()
                location = (
                    random_risky_location() if random.random() < 0.6 else user["home"]
                )
                # Fresh device for injected fraud
                device = generate_device_fingerprint()
            else:
                dist = config["amount_distribution"]
                amount = log_normal_sample(
                    dist["log_normal_mean"], dist["log_normal_std"], min_val=1.0, max_val=1500.0
                )
                hour = daytime_hour()
                merchant = random_everyday_merchant()
                location = user["home"]
                device = user["device_fingerprint"]

            timestamp = self._random_moment(base_time, end_time, hour=hour)
            records.append(
                {
                    "id": self._uuid(),
                    "user_id": user["user_id"],
                    "amount": self._money(amount),
                    "currency": "USD",
                    "merchant": merchant,
                    "location": location.label,
                    "ip_address": user["ip_address"],
                    "device_fingerprint": device,
                    "timestamp": timestamp.isoformat(),
                    "status": self._weighted_choice(config["status_weights"]),
                    "is_fraud": is_fraud,
                }
            )

        records.sort(key=lambda r: r["timestamp"])
        return records
