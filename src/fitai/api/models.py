"""Pydantic models for API request payloads."""

from datetime import date, datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from fitai.domain.meals import MealDraft
from fitai.domain.profiles import ACTIVITY_FACTORS, Profile, Sex

MAX_WEIGHT_KG = 500
MAX_HEIGHT_CM = 300
MAX_AGE_YEARS = 150
MAX_MEAL_KCAL = 50_000
MAX_MEAL_GRAMS = 5_000


class ProfilePayload(BaseModel):
    """Body metrics and optional weight goal submitted by the user."""

    model_config = ConfigDict(allow_inf_nan=False)

    sex: Literal["male", "female"]
    weight_kg: float = Field(gt=0, le=MAX_WEIGHT_KG)
    height_cm: float = Field(gt=0, le=MAX_HEIGHT_CM)
    age_years: int = Field(gt=0, le=MAX_AGE_YEARS)
    activity_factor: float = 1.2
    target_weight_kg: float | None = Field(default=None, gt=0, le=MAX_WEIGHT_KG)
    target_date: date | None = None

    @field_validator("activity_factor")
    @classmethod
    def _known_activity_factor(cls, value: float) -> float:
        if value not in ACTIVITY_FACTORS:
            allowed = ", ".join(str(factor) for factor in sorted(ACTIVITY_FACTORS))
            raise ValueError(f"activity_factor must be one of {allowed}")
        return value

    def to_profile(self) -> Profile:
        """Convert the payload into a domain profile."""
        return Profile(
            sex=Sex(self.sex),
            weight_kg=self.weight_kg,
            height_cm=self.height_cm,
            age_years=self.age_years,
            activity_factor=self.activity_factor,
            target_weight_kg=self.target_weight_kg,
            target_date=self.target_date,
        )


class MealPayload(BaseModel):
    """Meal values from manual entry or an extraction flow."""

    model_config = ConfigDict(allow_inf_nan=False)

    name: str = ""
    calories: float = Field(ge=0, le=MAX_MEAL_KCAL)
    protein_g: float = Field(default=0, ge=0, le=MAX_MEAL_GRAMS)
    fat_g: float = Field(default=0, ge=0, le=MAX_MEAL_GRAMS)
    carbs_g: float = Field(default=0, ge=0, le=MAX_MEAL_GRAMS)
    created_at: datetime | None = None

    def to_draft(self) -> MealDraft:
        """Convert the payload into a meal draft."""
        return MealDraft(
            name=self.name,
            calories=self.calories,  # type: ignore[arg-type]
            protein_g=self.protein_g,
            fat_g=self.fat_g,
            carbs_g=self.carbs_g,
            created_at=self.created_at,
        )
