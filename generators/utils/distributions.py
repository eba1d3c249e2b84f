"""Statistical distribution helpers for realistic data generation."""

import random
import uuid

NIGHT_HOURS = (0, 1, 2, 3, 4, 5, 22, 23)


def log_normal_sample(
    mean: float, std: float, min_val: float = 0.01, max_val: float | None = None
) -> float:
    value = random.lognormvariate(mean, std)
    value = max(value, min_val)
    if max_val is not None:
        value = min(value, max_val)
    return value


def daytime_hour() -> int:
    return random.randint(8, 20)


def night_hour() -> int:
    return random.choice(NIGHT_HOURS)


def generate_ip_address() -> str:
    octets = [
        random.randint(10, 99), random.randint(0, 255),
        random.randint(0, 255), random.randint(1, 254),
    ]
    return f"{octets[0]}.{octets[1]}.{octets[2]}.{octets[3]}"


def generate_device_fingerprint() -> str:
    return f"fp_{uuid.UUID(int=random.getrandbits(128), version=4).hex[:16]}"
