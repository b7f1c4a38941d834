"""Meal logging and daily summaries."""

import logging
import math
from collections.abc import Callable
from dataclasses import dataclass
from datetime import UTC, date, datetime
from typing import Protocol
from uuid import UUID

from fitai.domain.meals import DaySummary, MealDraft, MealEntry
from fitai.domain.rounding import round_half_up
from fitai.services.aggregation import aggregate, day_bounds, filter_by_day, progress
from fitai.services.clock import utc_today
from fitai.services.profiles import ProfileService

DEFAULT_MEAL_NAME = "Meal"

_logger = logging.getLogger(__name__)


class MealRepository(Protocol):
    """Persistence interface for meal entries."""

    def list_meals(
        self, user_id: UUID, start: datetime, end: datetime
    ) -> list[MealEntry]:
        """Return meals created within ``[start, end]``, newest first."""

    def create_meal(self, user_id: UUID, draft: MealDraft) -> MealEntry:
        """Insert a meal and return the stored entry."""

    def delete_meal(self, user_id: UUID, meal_id: UUID) -> bool:
        """Delete a meal owned by the user; return True when a row was removed."""


@dataclass
class MealService:
    """Service for logging meals and summarizing days."""

    repository: MealRepository
    profile_service: ProfileService
    today: Callable[[], date] = utc_today

    def list_day(self, user_id: UUID, day: date | None = None) -> list[MealEntry]:
        """Return the meals logged on a UTC day."""
        resolved_day = day or self.today()
        start, end = day_bounds(resolved_day)
        entries = self.repository.list_meals(user_id, start, end)
        return filter_by_day(entries, resolved_day)

    def summarize_day(self, user_id: UUID, day: date | None = None) -> DaySummary:
        """Return meals, totals and progress for a UTC day."""
        resolved_day = day or self.today()
        entries = self.list_day(user_id, resolved_day)
        totals = aggregate(entries, resolved_day)
        target = self.profile_service.daily_goal(user_id)
        return DaySummary(
            entries=entries,
            totals=totals,
            progress=progress(totals.total_calories, target),
        )

    def add_meal(self, user_id: UUID, draft: MealDraft) -> MealEntry:
        """Validate and store a new meal entry."""
        values = (draft.calories, draft.protein_g, draft.fat_g, draft.carbs_g)
        if not all(math.isfinite(value) for value in values):
            raise ValueError("Meal values must be finite numbers")
        if min(values) < 0:
            raise ValueError("Meal values must be non-negative")
        normalized = MealDraft(
            name=draft.name.strip() or DEFAULT_MEAL_NAME,
            calories=round_half_up(draft.calories),
            protein_g=float(draft.protein_g),
            fat_g=float(draft.fat_g),
            carbs_g=float(draft.carbs_g),
            created_at=draft.created_at or datetime.now(tz=UTC),
        )
        entry = self.repository.create_meal(user_id, normalized)
        _logger.info(
            "Logged meal %s for %s (%s kcal)", entry.id, user_id, entry.calories
        )
        return entry

    def delete_meal(self, user_id: UUID, meal_id: UUID) -> bool:
        """Delete a meal by id for its owner."""
        deleted = self.repository.delete_meal(user_id, meal_id)
        if not deleted:
            _logger.info("Meal %s not found for %s", meal_id, user_id)
        return deleted
