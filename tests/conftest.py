"""Shared test fixtures."""

from dataclasses import dataclass, field
from datetime import UTC, date, datetime
from uuid import UUID, uuid4

import pytest

from fitai.config import Settings
from fitai.containers import AppContainer
from fitai.domain.meals import MealDraft, MealEntry
from fitai.domain.profiles import Profile, Sex
from fitai.domain.weights import WeightSample
from fitai.services.auth import AuthGateway, AuthService
from fitai.services.meals import MealRepository, MealService
from fitai.services.profiles import ProfileRepository, ProfileService
from fitai.services.weights import WeightHistoryService, WeightRepository

TODAY = date(2026, 1, 15)
TOKEN = "valid-token"


def make_profile(**overrides: object) -> Profile:
    """Return a complete male profile with optional overrides."""
    values: dict[str, object] = {
        "sex": Sex.MALE,
        "weight_kg": 80.0,
        "height_cm": 180.0,
        "age_years": 30,
        "activity_factor": 1.2,
    }
    values.update(overrides)
    return Profile(**values)  # type: ignore[arg-type]


def make_meal(
    calories: int,
    created_at: datetime,
    *,
    user_id: UUID | None = None,
    protein_g: float = 0.0,
    fat_g: float = 0.0,
    carbs_g: float = 0.0,
    name: str = "Meal",
) -> MealEntry:
    return MealEntry(
        id=uuid4(),
        user_id=user_id or uuid4(),
        name=name,
        calories=calories,
        protein_g=protein_g,
        fat_g=fat_g,
        carbs_g=carbs_g,
        created_at=created_at,
    )


@dataclass
class InMemoryProfileRepository(ProfileRepository):
    """In-memory profile repository for tests."""

    profiles: dict[UUID, Profile] = field(default_factory=dict)

    def get_profile(self, user_id: UUID) -> Profile | None:
        return self.profiles.get(user_id)

    def upsert_profile(self, user_id: UUID, profile: Profile) -> None:
        self.profiles[user_id] = profile


@dataclass
class InMemoryMealRepository(MealRepository):
    """In-memory meal repository for tests."""

    meals: dict[UUID, MealEntry] = field(default_factory=dict)

    def list_meals(
        self, user_id: UUID, start: datetime, end: datetime
    ) -> list[MealEntry]:
        matching = [
            meal
            for meal in self.meals.values()
            if meal.user_id == user_id and start <= meal.created_at <= end
        ]
        return sorted(matching, key=lambda meal: meal.created_at, reverse=True)

    def create_meal(self, user_id: UUID, draft: MealDraft) -> MealEntry:
        entry = MealEntry(
            id=uuid4(),
            user_id=user_id,
            name=draft.name,
            calories=draft.calories,
            protein_g=draft.protein_g,
            fat_g=draft.fat_g,
            carbs_g=draft.carbs_g,
            created_at=draft.created_at or datetime.now(tz=UTC),
        )
        self.meals[entry.id] = entry
        return entry

    def delete_meal(self, user_id: UUID, meal_id: UUID) -> bool:
        meal = self.meals.get(meal_id)
        if meal is None or meal.user_id != user_id:
            return False
        del self.meals[meal_id]
        return True


@dataclass
class InMemoryWeightRepository(WeightRepository):
    """In-memory weight repository keyed by user and day."""

    samples: dict[tuple[UUID, date], WeightSample] = field(default_factory=dict)

    def upsert_sample(self, user_id: UUID, sample: WeightSample) -> None:
        self.samples[(user_id, sample.recorded_on)] = sample

    def list_samples(self, user_id: UUID) -> list[WeightSample]:
        return sorted(
            (
                sample
                for (owner, _), sample in self.samples.items()
                if owner == user_id
            ),
            key=lambda sample: sample.recorded_on,
        )


@dataclass
class FakeAuthGateway(AuthGateway):
    """Auth gateway accepting a fixed set of tokens."""

    tokens: dict[str, UUID] = field(default_factory=dict)

    def get_user_id(self, access_token: str) -> UUID | None:
        return self.tokens.get(access_token)


@pytest.fixture
def settings() -> Settings:
    return Settings(
        supabase_url="https://example.supabase.co",
        supabase_service_key="header.payload.signature",
    )


@pytest.fixture
def user_id() -> UUID:
    return uuid4()


@pytest.fixture
def weight_service() -> WeightHistoryService:
    return WeightHistoryService(InMemoryWeightRepository(), today=lambda: TODAY)


@pytest.fixture
def profile_service(weight_service: WeightHistoryService) -> ProfileService:
    return ProfileService(
        repository=InMemoryProfileRepository(),
        weight_history=weight_service,
        today=lambda: TODAY,
    )


@pytest.fixture
def meal_service(profile_service: ProfileService) -> MealService:
    return MealService(
        repository=InMemoryMealRepository(),
        profile_service=profile_service,
        today=lambda: TODAY,
    )


@pytest.fixture
def container(
    settings: Settings,
    user_id: UUID,
    profile_service: ProfileService,
    meal_service: MealService,
    weight_service: WeightHistoryService,
) -> AppContainer:
    auth_service = AuthService(FakeAuthGateway(tokens={TOKEN: user_id}))

    return AppContainer(
        settings=settings,
        auth_service=auth_service,
        profile_service=profile_service,
        meal_service=meal_service,
        weight_service=weight_service,
    )


@pytest.fixture
def auth_headers() -> dict[str, str]:
    return {"Authorization": f"Bearer {TOKEN}"}
