"""Profile management and target computation."""

import logging
from collections.abc import Callable
from dataclasses import dataclass, replace
from datetime import date
from typing import Protocol
from uuid import UUID

from fitai.domain.profiles import Profile, TargetResult
from fitai.services.clock import utc_today
from fitai.services.targets import resolve_targets
from fitai.services.weights import WeightHistoryService

_logger = logging.getLogger(__name__)


class ProfileRepository(Protocol):
    """Persistence interface for user profiles."""

    def get_profile(self, user_id: UUID) -> Profile | None:
        """Return the stored profile, if any."""

    def upsert_profile(self, user_id: UUID, profile: Profile) -> None:
        """Create or replace the profile for a user."""


@dataclass
class ProfileService:
    """Application service for profile reads, saves and targets."""

    repository: ProfileRepository
    weight_history: WeightHistoryService
    fallback_kcal: int | None = None
    today: Callable[[], date] = utc_today

    def get_profile(self, user_id: UUID) -> Profile | None:
        """Return the user's profile."""
        return self.repository.get_profile(user_id)

    def get_targets(self, user_id: UUID) -> TargetResult:
        """Compute today's targets from the stored profile."""
        profile = self.repository.get_profile(user_id)
        return resolve_targets(profile, self.today(), self.fallback_kcal)

    def save_profile(self, user_id: UUID, profile: Profile) -> TargetResult:
        """Persist a profile with its cached daily goal and log today's weight."""
        today = self.today()
        targets = resolve_targets(profile, today, self.fallback_kcal)
        self.repository.upsert_profile(
            user_id, replace(profile, daily_goal_kcal=targets.target_kcal)
        )
        if profile.weight_kg:
            self.weight_history.record(user_id, profile.weight_kg, today)
        _logger.info(
            "Saved profile for %s: target=%s kcal fallback=%s",
            user_id,
            targets.target_kcal,
            targets.fallback_applied,
        )
        return targets

    def daily_goal(self, user_id: UUID) -> int:
        """Return the cached daily goal, falling back to the policy or zero."""
        profile = self.repository.get_profile(user_id)
        if profile and profile.daily_goal_kcal:
            return profile.daily_goal_kcal
        return self.fallback_kcal or 0
