"""Shared plumbing for the synthetic data generators.

All randomness flows through the module-level ``random`` generator, seeded
once per generator instance, so a (config, seed) pair always reproduces the
same records.
"""

import random
import uuid
from datetime import datetime, timedelta
from typing import Any


class BaseGenerator:
    def __init__(self, config: dict[str, Any], seed: int = 42):
        self.config = config
        self.seed = seed
        random.seed(seed)

    def _uuid(self) -> str:
        return str(uuid.UUID(int=random.getrandbits(128), version=4))

    def _random_moment(self, start: datetime, end: datetime, hour: int | None = None) -> datetime:
        """Random instant in [start, end]; ``hour`` pins the hour of day."""
        span = max(1, int((end - start).total_seconds()))
        moment = start + timedelta(seconds=random.randint(0, span))
        if hour is not None:
            moment = moment.replace(hour=hour)
        return moment

    def _money(self, value: float) -> str:
        """Amounts travel as two-decimal strings."""
        return f"{value:.2f}"

    def _weighted_choice(self, options: dict[str, float]) -> str:
        return random.choices(list(options), weights=list(options.values()), k=1)[0]
