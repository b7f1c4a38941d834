"""Supabase repository for meal entries."""

from dataclasses import dataclass
from datetime import UTC, datetime
from uuid import UUID

from supabase import Client

from fitai.domain.meals import MealDraft, MealEntry
from fitai.services.meals import MealRepository

_COLUMNS = "id, user_id, name, calories, protein, fat, carbs, created_at"


@dataclass
class SupabaseMealRepository(MealRepository):
    """Supabase implementation for meal entries."""

    client: Client

    def list_meals(
        self, user_id: UUID, start: datetime, end: datetime
    ) -> list[MealEntry]:
        """Return meals created in the inclusive range, newest first."""
        response = (
            self.client.table("meals")
            .select(_COLUMNS)
            .eq("user_id", str(user_id))
            .gte("created_at", _format_timestamp(start))
            .lte("created_at", _format_timestamp(end))
            .order("created_at", desc=True)
            .execute()
        )
        return [_parse_row(row) for row in response.data or []]

    def create_meal(self, user_id: UUID, draft: MealDraft) -> MealEntry:
        """Insert a meal row and return the stored entry."""
        payload: dict[str, object] = {
            "user_id": str(user_id),
            "name": draft.name,
            "calories": draft.calories,
            "protein": draft.protein_g,
            "fat": draft.fat_g,
            "carbs": draft.carbs_g,
        }
        if draft.created_at is not None:
            payload["created_at"] = _format_timestamp(draft.created_at)
        response = self.client.table("meals").insert(payload).execute()
        if not response.data:
            raise RuntimeError("Failed to create meal")
        return _parse_row(response.data[0])

    def delete_meal(self, user_id: UUID, meal_id: UUID) -> bool:
        """Delete a meal scoped to its owner."""
        response = (
            self.client.table("meals")
            .delete()
            .eq("id", str(meal_id))
            .eq("user_id", str(user_id))
            .execute()
        )
        return bool(response.data)


def _format_timestamp(value: datetime) -> str:
    if value.tzinfo is None:
        value = value.replace(tzinfo=UTC)
    return value.astimezone(UTC).isoformat(timespec="milliseconds")


def _parse_row(row: dict[str, object]) -> MealEntry:
    created_raw = str(row.get("created_at") or "")
    created_at = datetime.fromisoformat(created_raw.replace("Z", "+00:00"))
    return MealEntry(
        id=UUID(str(row["id"])),
        user_id=UUID(str(row["user_id"])),
        name=str(row.get("name") or ""),
        calories=int(row.get("calories") or 0),
        protein_g=float(row.get("protein") or 0.0),
        fat_g=float(row.get("fat") or 0.0),
        carbs_g=float(row.get("carbs") or 0.0),
        created_at=created_at,
    )
