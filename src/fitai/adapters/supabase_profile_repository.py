"""Supabase repository for user profiles."""

from dataclasses import dataclass
from datetime import date
from uuid import UUID

from supabase import Client

from fitai.domain.profiles import Profile, Sex
from fitai.services.profiles import ProfileRepository


@dataclass
class SupabaseProfileRepository(ProfileRepository):
    """Supabase implementation for profile persistence."""

    client: Client

    def get_profile(self, user_id: UUID) -> Profile | None:
        """Return the stored profile for a user."""
        response = (
            self.client.table("profiles")
            .select(
                "weight, height, age, gender, activity_level, target_weight, "
                "target_date, daily_goal_kcal"
            )
            .eq("id", str(user_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_row(response.data[0])

    def upsert_profile(self, user_id: UUID, profile: Profile) -> None:
        """Create or replace the profile row."""
        response = (
            self.client.table("profiles")
            .upsert(
                {
                    "id": str(user_id),
                    "weight": profile.weight_kg,
                    "height": profile.height_cm,
                    "age": profile.age_years,
                    "gender": profile.sex.value if profile.sex else None,
                    "activity_level": profile.activity_factor,
                    "target_weight": profile.target_weight_kg,
                    "target_date": profile.target_date.isoformat()
                    if profile.target_date
                    else None,
                    "daily_goal_kcal": profile.daily_goal_kcal,
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to upsert profile")


def _parse_row(row: dict[str, object]) -> Profile:
    return Profile(
        sex=_parse_sex(row.get("gender")),
        weight_kg=_positive_float(row.get("weight")),
        height_cm=_positive_float(row.get("height")),
        age_years=_positive_int(row.get("age")),
        activity_factor=_positive_float(row.get("activity_level")),
        target_weight_kg=_positive_float(row.get("target_weight")),
        target_date=_parse_date(row.get("target_date")),
        daily_goal_kcal=_positive_int(row.get("daily_goal_kcal")),
    )


def _parse_sex(value: object) -> Sex | None:
    try:
        return Sex(value)
    except ValueError:
        return None


def _positive_float(value: object) -> float | None:
    """Treat null, empty and zero columns as absent."""
    if value is None or value == "":
        return None
    number = float(value)  # type: ignore[arg-type]
    return number if number > 0 else None


def _positive_int(value: object) -> int | None:
    number = _positive_float(value)
    return int(number) if number is not None else None


def _parse_date(value: object) -> date | None:
    if isinstance(value, str) and value:
        return date.fromisoformat(value[:10])
    return None
