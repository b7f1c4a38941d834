"""Daily energy target calculator.

Maintenance energy follows Mifflin-St Jeor scaled by an activity factor. When
the profile carries a goal weight and a goal date in the future, the target is
shifted by a linear daily deficit (or surplus) that reaches the goal on that
date; otherwise a flat 500 kcal deficit applies. Targets never drop below a
sex-specific floor.
"""

import logging
import math
from datetime import date, datetime

from fitai.domain.profiles import (
    InvalidProfile,
    MacroTargets,
    Profile,
    Sex,
    TargetResult,
)
from fitai.domain.rounding import round_half_up

KCAL_PER_KG = 7700
FLAT_DEFICIT_KCAL = 500
MIN_TARGET_KCAL = {Sex.FEMALE: 1200, Sex.MALE: 1500}
DEFAULT_FALLBACK_KCAL = 2000

# Share of energy per macro and kcal per gram.
_MACRO_SPLIT = {"protein": (0.20, 4.0), "fat": (0.30, 9.0), "carbs": (0.50, 4.0)}

_logger = logging.getLogger(__name__)


def calculate_targets(profile: Profile, today: date) -> TargetResult:
    """Return maintenance and target kcal for a profile as of ``today``.

    Raises:
        InvalidProfile: when a required metric is missing or out of range.
    """
    _validate(profile)
    sex = Sex(profile.sex)
    weight_kg = float(profile.weight_kg or 0)
    maintenance = maintenance_kcal(
        sex,
        weight_kg=weight_kg,
        height_cm=float(profile.height_cm or 0),
        age_years=int(profile.age_years or 0),
        activity_factor=float(profile.activity_factor or 0),
    )

    target = maintenance - FLAT_DEFICIT_KCAL
    days = days_remaining(profile.target_date, today) if profile.has_goal else 0
    if days > 0 and profile.target_weight_kg is not None:
        total_delta_kg = weight_kg - profile.target_weight_kg
        daily_delta = total_delta_kg * KCAL_PER_KG / days
        target = round_half_up(maintenance - daily_delta)

    return TargetResult(
        maintenance_kcal=maintenance,
        target_kcal=max(target, MIN_TARGET_KCAL[sex]),
    )


def resolve_targets(
    profile: Profile | None, today: date, fallback_kcal: int | None = None
) -> TargetResult:
    """Compute targets, substituting ``fallback_kcal`` for unusable profiles.

    With ``fallback_kcal`` set to ``None`` the ``InvalidProfile`` error is
    propagated to the caller.
    """
    try:
        if profile is None:
            raise InvalidProfile(["profile"])
        return calculate_targets(profile, today)
    except InvalidProfile as exc:
        if fallback_kcal is None:
            raise
        _logger.warning(
            "Using fallback target of %s kcal: %s", fallback_kcal, exc.fields
        )
        return TargetResult(
            maintenance_kcal=fallback_kcal,
            target_kcal=fallback_kcal,
            fallback_applied=True,
        )


def maintenance_kcal(
    sex: Sex,
    *,
    weight_kg: float,
    height_cm: float,
    age_years: int,
    activity_factor: float,
) -> int:
    """Return rounded maintenance energy for the given body metrics."""
    base = 10 * weight_kg + 6.25 * height_cm - 5 * age_years
    resting = base + 5 if sex is Sex.MALE else base - 161
    return round_half_up(resting * activity_factor)


def days_remaining(
    target_date: date | datetime | None, today: date | datetime
) -> int:
    """Return whole calendar days from ``today`` until ``target_date``."""
    if target_date is None:
        return 0
    return (_as_date(target_date) - _as_date(today)).days


def macro_targets(target_kcal: int) -> MacroTargets:
    """Split a calorie target into protein, fat and carbohydrate grams."""
    grams = {
        name: round(target_kcal * share / kcal_per_gram, 1)
        for name, (share, kcal_per_gram) in _MACRO_SPLIT.items()
    }
    return MacroTargets(
        protein_g=grams["protein"], fat_g=grams["fat"], carbs_g=grams["carbs"]
    )


def _validate(profile: Profile) -> None:
    invalid: list[str] = []
    if not isinstance(profile.sex, Sex):
        invalid.append("sex")
    if not _is_positive(profile.weight_kg):
        invalid.append("weight_kg")
    if not _is_positive(profile.height_cm):
        invalid.append("height_cm")
    if (
        isinstance(profile.age_years, bool)
        or not isinstance(profile.age_years, int)
        or profile.age_years <= 0
    ):
        invalid.append("age_years")
    if not _is_number(profile.activity_factor) or profile.activity_factor <= 1.0:
        invalid.append("activity_factor")
    if profile.target_weight_kg is not None and not _is_positive(
        profile.target_weight_kg
    ):
        invalid.append("target_weight_kg")
    if invalid:
        raise InvalidProfile(invalid)


def _is_number(value: object) -> bool:
    return (
        isinstance(value, int | float)
        and not isinstance(value, bool)
        and math.isfinite(value)
    )


def _is_positive(value: object) -> bool:
    return _is_number(value) and value > 0  # type: ignore[operator]


def _as_date(value: date | datetime) -> date:
    if isinstance(value, datetime):
        return value.date()
    return value
