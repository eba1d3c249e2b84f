"""Risk curves: keyword tier classifiers and breakpoint step functions.

The keyword classifiers stand in for a historical fraud-rate lookup. Each
returns one of three fixed risk values (high / medium / low) so callers can
rely on exact outputs. Step curves turn a raw feature value into a
contribution multiplier in [0, 1].
"""

from dataclasses import dataclass

from .config import KeywordTiers, default_config


def classify_keywords(value: str, tiers: KeywordTiers) -> float:
    """Case-insensitive substring match against high, then medium keywords."""
    lowered = value.lower()
    if any(keyword in lowered for keyword in tiers.high_keywords):
        return tiers.high_risk
    if any(keyword in lowered for keyword in tiers.medium_keywords):
        return tiers.medium_risk
    return tiers.low_risk


def classify_merchant(merchant: str, tiers: KeywordTiers | None = None) -> float:
    return classify_keywords(merchant, tiers or default_config.merchant_tiers)


def classify_location(location: str, tiers: KeywordTiers | None = None) -> float:
    return classify_keywords(location, tiers or default_config.location_tiers)


@dataclass(frozen=True)
class Breakpoint:
    above: float
    multiplier: float
    label: str


@dataclass(frozen=True)
class StepCurve:
    """Maps a value to the multiplier of the first breakpoint it strictly exceeds.

    Breakpoints are checked in the order given, so list them from the highest
    threshold down. A value that exceeds none of them contributes nothing.
    """

    breakpoints: tuple[Breakpoint, ...]

    def __post_init__(self) -> None:
        for bp in self.breakpoints:
            if not 0.0 <= bp.multiplier <= 1.0:
                raise ValueError(f"Multiplier for '{bp.label}' must be in [0, 1], got {bp.multiplier}")
        thresholds = [bp.above for bp in self.breakpoints]
        if thresholds != sorted(thresholds, reverse=True):
            raise ValueError("Breakpoints must be ordered from the highest threshold down")

    def match(self, value: float) -> Breakpoint | None:
        for bp in self.breakpoints:
            if value > bp.above:
                return bp
        return None

    def __call__(self, value: float) -> float:
        bp = self.match(value)
        return bp.multiplier if bp else 0.0
