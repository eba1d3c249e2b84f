"""Location strings grouped by the risk tier the engine assigns them."""

import random
from typing import NamedTuple


class Location(NamedTuple):
    city: str
    region: str

    @property
    def label(self) -> str:
        return f"{self.city}, {self.region}"


DOMESTIC_LOCATIONS = [
    Location("Seattle", "WA"),
    Location("Boston", "MA"),
    Location("Miami", "FL"),
    Location("New York", "NY"),
    Location("Chicago", "IL"),
    Location("Atlanta", "GA"),
    Location("Austin", "TX"),
    Location("Los Angeles", "CA"),
    Location("Denver", "CO"),
    Location("Portland", "OR"),
]

OFFSHORE_LOCATIONS = [
    Location("Panama City", "Panama"),
    Location("George Town", "Cayman Islands"),
    Location("Bridgetown", "Caribbean"),
]

HIGH_RISK_LOCATIONS = [
    Location("Lagos", "Nigeria"),
    Location("Mogadishu", "Somalia"),
    Location("Tehran", "Iran"),
    Location("Pyongyang", "North Korea"),
]


def random_domestic_location() -> Location:
    return random.choice(DOMESTIC_LOCATIONS)


def random_risky_location() -> Location:
    return random.choice(HIGH_RISK_LOCATIONS + OFFSHORE_LOCATIONS)
