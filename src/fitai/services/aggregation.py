"""Per-day aggregation of logged meals."""

from collections.abc import Iterable
from datetime import UTC, date, datetime, time

from fitai.domain.meals import DailyTotals, MealEntry, Progress

_DAY_END = time(23, 59, 59, 999000)


def day_bounds(day: date) -> tuple[datetime, datetime]:
    """Return the inclusive UTC range ``[00:00:00.000, 23:59:59.999]``."""
    start = datetime.combine(day, time.min, tzinfo=UTC)
    end = datetime.combine(day, _DAY_END, tzinfo=UTC)
    return start, end


def filter_by_day(entries: Iterable[MealEntry], day: date) -> list[MealEntry]:
    """Return entries created within the given UTC day, boundaries included."""
    start, end = day_bounds(day)
    return [entry for entry in entries if start <= _as_utc(entry.created_at) <= end]


def aggregate(entries: Iterable[MealEntry], day: date) -> DailyTotals:
    """Sum calories and macros of the given entries."""
    calories = 0
    protein = fat = carbs = 0.0
    for entry in entries:
        calories += entry.calories
        protein += entry.protein_g
        fat += entry.fat_g
        carbs += entry.carbs_g
    return DailyTotals(
        day=day,
        total_calories=calories,
        total_protein_g=protein,
        total_fat_g=fat,
        total_carbs_g=carbs,
    )


def progress(total_calories: int, target_kcal: int) -> Progress:
    """Return consumption progress against a target.

    A non-positive target means the profile is not configured yet; the
    percentage is reported as zero instead of dividing by it.
    """
    if target_kcal > 0:
        percent = min(total_calories / target_kcal * 100, 100.0)
    else:
        percent = 0.0
    return Progress(
        target_kcal=target_kcal,
        consumed_kcal=total_calories,
        remaining_kcal=target_kcal - total_calories,
        percent=percent,
        over_target=target_kcal > 0 and total_calories > target_kcal,
    )


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)
