"""Tests for meal service."""

from datetime import UTC, datetime
from uuid import UUID, uuid4

import pytest

from fitai.domain.meals import MealDraft
from fitai.services.meals import MealService
from fitai.services.profiles import ProfileService
from tests.conftest import TODAY, make_profile


def _draft(calories: float, hour: int = 12, name: str = "Oatmeal") -> MealDraft:
    return MealDraft(
        name=name,
        calories=calories,  # type: ignore[arg-type]
        protein_g=10.0,
        fat_g=5.0,
        carbs_g=40.0,
        created_at=datetime(TODAY.year, TODAY.month, TODAY.day, hour, tzinfo=UTC),
    )


def test_summarize_day_totals_and_progress(
    meal_service: MealService, profile_service: ProfileService, user_id: UUID
) -> None:
    profile_service.save_profile(user_id, make_profile())
    for calories in (300, 250, 450):
        meal_service.add_meal(user_id, _draft(calories))

    summary = meal_service.summarize_day(user_id)

    assert summary.totals.total_calories == 1000
    assert summary.progress.target_kcal == 1636
    assert summary.progress.remaining_kcal == 636
    assert summary.progress.over_target is False


def test_summarize_day_without_profile_reports_zero_percent(
    meal_service: MealService, user_id: UUID
) -> None:
    summary = meal_service.summarize_day(user_id, TODAY)

    assert summary.entries == []
    assert summary.totals.total_calories == 0
    assert summary.progress.percent == 0


def test_list_day_excludes_other_days_and_users(
    meal_service: MealService, user_id: UUID
) -> None:
    meal_service.add_meal(user_id, _draft(300))
    meal_service.add_meal(
        user_id,
        MealDraft(
            name="Late snack",
            calories=150,
            protein_g=0,
            fat_g=0,
            carbs_g=0,
            created_at=datetime(2026, 1, 16, 0, 0, tzinfo=UTC),
        ),
    )
    meal_service.add_meal(uuid4(), _draft(999))

    entries = meal_service.list_day(user_id, TODAY)

    assert [entry.calories for entry in entries] == [300]


def test_add_meal_normalizes_values(meal_service: MealService, user_id: UUID) -> None:
    entry = meal_service.add_meal(user_id, _draft(412.5, name="  "))

    assert entry.name == "Meal"
    assert entry.calories == 413
    assert isinstance(entry.calories, int)


def test_add_meal_rejects_negative_values(
    meal_service: MealService, user_id: UUID
) -> None:
    with pytest.raises(ValueError):
        meal_service.add_meal(user_id, _draft(-1))


@pytest.mark.parametrize("calories", [float("nan"), float("inf")])
def test_add_meal_rejects_non_finite_values(
    meal_service: MealService, user_id: UUID, calories: float
) -> None:
    with pytest.raises(ValueError):
        meal_service.add_meal(user_id, _draft(calories))


def test_delete_meal_is_scoped_to_owner(
    meal_service: MealService, user_id: UUID
) -> None:
    entry = meal_service.add_meal(user_id, _draft(300))

    assert meal_service.delete_meal(uuid4(), entry.id) is False
    assert meal_service.delete_meal(user_id, entry.id) is True
    assert meal_service.list_day(user_id, TODAY) == []
