"""Domain models for meal logging."""

from dataclasses import dataclass
from datetime import date, datetime
from uuid import UUID

from fitai.domain.rounding import round_half_up


@dataclass(frozen=True)
class MealEntry:
    """A logged meal with its nutritional values."""

    id: UUID
    user_id: UUID
    name: str
    calories: int
    protein_g: float
    fat_g: float
    carbs_g: float
    created_at: datetime


@dataclass(frozen=True)
class MealDraft:
    """Meal values supplied by a logging action before persistence."""

    name: str
    calories: int
    protein_g: float
    fat_g: float
    carbs_g: float
    created_at: datetime | None = None


@dataclass(frozen=True)
class DailyTotals:
    """Totals for a single UTC day.

    Macro sums are kept unrounded; use the ``*_display`` properties for
    presentation.
    """

    day: date
    total_calories: int
    total_protein_g: float
    total_fat_g: float
    total_carbs_g: float

    @property
    def protein_display(self) -> int:
        return round_half_up(self.total_protein_g)

    @property
    def fat_display(self) -> int:
        return round_half_up(self.total_fat_g)

    @property
    def carbs_display(self) -> int:
        return round_half_up(self.total_carbs_g)


@dataclass(frozen=True)
class Progress:
    """Progress of consumed energy against the daily target."""

    target_kcal: int
    consumed_kcal: int
    remaining_kcal: int
    percent: float
    over_target: bool


@dataclass(frozen=True)
class DaySummary:
    """Meals, totals and progress for a day."""

    entries: list[MealEntry]
    totals: DailyTotals
    progress: Progress
