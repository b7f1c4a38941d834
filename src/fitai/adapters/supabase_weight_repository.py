"""Supabase repository for weight history."""

from dataclasses import dataclass
from datetime import date
from uuid import UUID

from supabase import Client

from fitai.domain.weights import WeightSample
from fitai.services.weights import WeightRepository


@dataclass
class SupabaseWeightRepository(WeightRepository):
    """Supabase implementation for per-day weight samples."""

    client: Client

    def upsert_sample(self, user_id: UUID, sample: WeightSample) -> None:
        """Store the day's sample, replacing an existing one."""
        response = (
            self.client.table("weight_history")
            .upsert(
                {
                    "user_id": str(user_id),
                    "weight": sample.weight_kg,
                    "recorded_at": sample.recorded_on.isoformat(),
                },
                on_conflict="user_id,recorded_at",
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to upsert weight sample")

    def list_samples(self, user_id: UUID) -> list[WeightSample]:
        """Return samples ordered by day ascending."""
        response = (
            self.client.table("weight_history")
            .select("weight, recorded_at")
            .eq("user_id", str(user_id))
            .order("recorded_at", desc=False)
            .execute()
        )
        return [
            WeightSample(
                recorded_on=date.fromisoformat(str(row["recorded_at"])[:10]),
                weight_kg=float(row.get("weight") or 0.0),
            )
            for row in response.data or []
        ]
