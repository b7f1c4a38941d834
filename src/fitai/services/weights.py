"""Weight history service."""

import math
from collections.abc import Callable
from dataclasses import dataclass
from datetime import date
from typing import Protocol
from uuid import UUID

from fitai.domain.profiles import Profile
from fitai.domain.weights import WeightSample, WeightTrend
from fitai.services.clock import utc_today


class WeightRepository(Protocol):
    """Persistence interface for weight samples."""

    def upsert_sample(self, user_id: UUID, sample: WeightSample) -> None:
        """Store the sample, replacing any sample for the same day."""

    def list_samples(self, user_id: UUID) -> list[WeightSample]:
        """Return samples ordered by date ascending."""


@dataclass
class WeightHistoryService:
    """Service for recording and reading body weight over time."""

    repository: WeightRepository
    today: Callable[[], date] = utc_today

    def record(
        self, user_id: UUID, weight_kg: float, day: date | None = None
    ) -> WeightSample:
        """Record the weight for a day, overwriting an earlier sample."""
        if not math.isfinite(weight_kg) or weight_kg <= 0:
            raise ValueError("weight_kg must be a positive finite number")
        sample = WeightSample(recorded_on=day or self.today(), weight_kg=weight_kg)
        self.repository.upsert_sample(user_id, sample)
        return sample

    def history(self, user_id: UUID) -> list[WeightSample]:
        """Return one sample per day in ascending date order."""
        by_day: dict[date, WeightSample] = {}
        for sample in self.repository.list_samples(user_id):
            by_day[sample.recorded_on] = sample
        return [by_day[day] for day in sorted(by_day)]

    def trend(self, user_id: UUID, profile: Profile | None) -> WeightTrend:
        """Return the weight history with the goal weight for charting.

        Without any recorded samples the current profile weight is shown as a
        single point for today.
        """
        samples = self.history(user_id)
        if not samples and profile is not None and profile.weight_kg:
            samples = [
                WeightSample(recorded_on=self.today(), weight_kg=profile.weight_kg)
            ]
        return WeightTrend(
            samples=samples,
            target_weight_kg=profile.target_weight_kg if profile else None,
        )
