"""Merchant names grouped by the risk tier the engine assigns them."""

import random

LOW_RISK_MERCHANTS = [
    "Starbucks",
    "Whole Foods Market",
    "Shell Gas Station",
    "Target",
    "Walgreens",
    "Chipotle",
    "Uber",
    "Netflix",
]

MEDIUM_RISK_MERCHANTS = [
    "Best Buy Electronics",
    "Online Shopping Hub",
    "Luxury Goods Outlet",
]

HIGH_RISK_MERCHANTS = [
    "Downtown Casino",
    "Online Gambling Ltd",
    "Crypto Exchange Pro",
    "Jewelry Store",
]


def random_everyday_merchant() -> str:
    if random.random() < 0.85:
        return random.choice(LOW_RISK_MERCHANTS)
    return random.choice(MEDIUM_RISK_MERCHANTS)


def random_risky_merchant() -> str:
    if random.random() < 0.7:
        return random.choice(HIGH_RISK_MERCHANTS)
    return random.choice(MEDIUM_RISK_MERCHANTS)
