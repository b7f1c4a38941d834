"""Domain models for weight history."""

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class WeightSample:
    """Body weight recorded for a calendar day."""

    recorded_on: date
    weight_kg: float


@dataclass(frozen=True)
class WeightTrend:
    """Weight samples in ascending date order with the goal weight."""

    samples: list[WeightSample]
    target_weight_kg: float | None
