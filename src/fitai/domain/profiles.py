"""Domain models for user profiles and calorie targets."""

from dataclasses import dataclass
from datetime import date
from enum import Enum


class Sex(Enum):
    """Biological sex used by the BMR formula."""

    MALE = "male"
    FEMALE = "female"


class ActivityLevel(Enum):
    """Supported activity multipliers."""

    SEDENTARY = 1.2
    LIGHT = 1.375
    MODERATE = 1.55
    ACTIVE = 1.725
    VERY_ACTIVE = 1.9


ACTIVITY_FACTORS: frozenset[float] = frozenset(level.value for level in ActivityLevel)


class InvalidProfile(ValueError):
    """Raised when a profile cannot be used to compute targets."""

    def __init__(self, fields: list[str]) -> None:
        self.fields = fields
        super().__init__(f"Invalid or missing profile fields: {', '.join(fields)}")


@dataclass(frozen=True)
class Profile:
    """Body metrics and weight goal for a user.

    Required metrics may be ``None`` for a stored profile that was never
    completed; the target calculator rejects such profiles.
    """

    sex: Sex | None
    weight_kg: float | None
    height_cm: float | None
    age_years: int | None
    activity_factor: float | None
    target_weight_kg: float | None = None
    target_date: date | None = None
    daily_goal_kcal: int | None = None

    @property
    def has_goal(self) -> bool:
        """Return True when both goal weight and goal date are set."""
        return self.target_weight_kg is not None and self.target_date is not None


@dataclass(frozen=True)
class TargetResult:
    """Computed maintenance and target energy."""

    maintenance_kcal: int
    target_kcal: int
    fallback_applied: bool = False


@dataclass(frozen=True)
class MacroTargets:
    """Daily macronutrient targets in grams."""

    protein_g: float
    fat_g: float
    carbs_g: float
