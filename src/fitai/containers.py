"""Dependency container wiring for the application."""

from dataclasses import dataclass

from supabase import create_client

from fitai.adapters.supabase_auth_gateway import SupabaseAuthGateway
from fitai.adapters.supabase_meal_repository import SupabaseMealRepository
from fitai.adapters.supabase_profile_repository import SupabaseProfileRepository
from fitai.adapters.supabase_weight_repository import SupabaseWeightRepository
from fitai.config import Settings
from fitai.services.auth import AuthService
from fitai.services.meals import MealService
from fitai.services.profiles import ProfileService
from fitai.services.weights import WeightHistoryService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    auth_service: AuthService
    profile_service: ProfileService
    meal_service: MealService
    weight_service: WeightHistoryService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    weight_service = WeightHistoryService(SupabaseWeightRepository(supabase_client))
    profile_service = ProfileService(
        repository=SupabaseProfileRepository(supabase_client),
        weight_history=weight_service,
        fallback_kcal=resolved_settings.target_fallback_kcal,
    )
    meal_service = MealService(
        repository=SupabaseMealRepository(supabase_client),
        profile_service=profile_service,
    )
    auth_service = AuthService(SupabaseAuthGateway(supabase_client))

    return AppContainer(
        settings=resolved_settings,
        auth_service=auth_service,
        profile_service=profile_service,
        meal_service=meal_service,
        weight_service=weight_service,
    )
