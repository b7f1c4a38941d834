"""JSON serialization of domain objects for API responses."""

from fitai.domain.meals import DaySummary, MealEntry
from fitai.domain.profiles import MacroTargets, Profile, TargetResult
from fitai.domain.weights import WeightTrend


def serialize_profile(profile: Profile) -> dict[str, object]:
    return {
        "sex": profile.sex.value if profile.sex else None,
        "weight_kg": profile.weight_kg,
        "height_cm": profile.height_cm,
        "age_years": profile.age_years,
        "activity_factor": profile.activity_factor,
        "target_weight_kg": profile.target_weight_kg,
        "target_date": profile.target_date.isoformat()
        if profile.target_date
        else None,
        "daily_goal_kcal": profile.daily_goal_kcal,
    }


def serialize_targets(
    targets: TargetResult, macros: MacroTargets
) -> dict[str, object]:
    return {
        "maintenance_kcal": targets.maintenance_kcal,
        "target_kcal": targets.target_kcal,
        "fallback_applied": targets.fallback_applied,
        "macros": {
            "protein_g": macros.protein_g,
            "fat_g": macros.fat_g,
            "carbs_g": macros.carbs_g,
        },
    }


def serialize_meal(entry: MealEntry) -> dict[str, object]:
    return {
        "id": str(entry.id),
        "name": entry.name,
        "calories": entry.calories,
        "protein_g": entry.protein_g,
        "fat_g": entry.fat_g,
        "carbs_g": entry.carbs_g,
        "created_at": entry.created_at.isoformat(),
    }


def serialize_day(summary: DaySummary) -> dict[str, object]:
    """Serialize a day summary; macro totals are rounded for display."""
    totals = summary.totals
    progress = summary.progress
    return {
        "day": totals.day.isoformat(),
        "meals": [serialize_meal(entry) for entry in summary.entries],
        "totals": {
            "calories": totals.total_calories,
            "protein_g": totals.protein_display,
            "fat_g": totals.fat_display,
            "carbs_g": totals.carbs_display,
        },
        "progress": {
            "target_kcal": progress.target_kcal,
            "consumed_kcal": progress.consumed_kcal,
            "remaining_kcal": progress.remaining_kcal,
            "percent": round(progress.percent, 1),
            "over_target": progress.over_target,
        },
    }


def serialize_trend(trend: WeightTrend) -> dict[str, object]:
    return {
        "samples": [
            {"date": sample.recorded_on.isoformat(), "weight_kg": sample.weight_kg}
            for sample in trend.samples
        ],
        "target_weight_kg": trend.target_weight_kg,
    }
