"""User-facing API endpoints authenticated with a bearer access token."""

from datetime import date
from uuid import UUID

from fastapi import APIRouter, Depends, Header, HTTPException, Request, Response, status

from fitai.api.models import MealPayload, ProfilePayload
from fitai.api.serializers import (
    serialize_day,
    serialize_meal,
    serialize_profile,
    serialize_targets,
    serialize_trend,
)
from fitai.containers import AppContainer
from fitai.services.targets import macro_targets

router = APIRouter(tags=["tracker"])


def _get_container(request: Request) -> AppContainer:
    return request.app.state.container


async def require_user(
    authorization: str | None = Header(default=None),
    container: AppContainer = Depends(_get_container),
) -> UUID:
    """Resolve the authenticated user id from the bearer token."""
    user_id = container.auth_service.authenticate(authorization)
    if user_id is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            headers={"WWW-Authenticate": "Bearer"},
        )
    return user_id


@router.get("/profile")
async def get_profile(
    user_id: UUID = Depends(require_user),
    container: AppContainer = Depends(_get_container),
) -> dict[str, object]:
    """Return the stored profile."""
    profile = container.profile_service.get_profile(user_id)
    if profile is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    return serialize_profile(profile)


@router.put("/profile")
async def save_profile(
    payload: ProfilePayload,
    user_id: UUID = Depends(require_user),
    container: AppContainer = Depends(_get_container),
) -> dict[str, object]:
    """Save the profile and return it with the recomputed targets."""
    targets = container.profile_service.save_profile(user_id, payload.to_profile())
    profile = container.profile_service.get_profile(user_id)
    return {
        "profile": serialize_profile(profile) if profile else None,
        "targets": serialize_targets(targets, macro_targets(targets.target_kcal)),
    }


@router.get("/targets")
async def get_targets(
    user_id: UUID = Depends(require_user),
    container: AppContainer = Depends(_get_container),
) -> dict[str, object]:
    """Return today's maintenance and target energy."""
    targets = container.profile_service.get_targets(user_id)
    return serialize_targets(targets, macro_targets(targets.target_kcal))


@router.get("/meals")
async def get_day(
    day: date | None = None,
    user_id: UUID = Depends(require_user),
    container: AppContainer = Depends(_get_container),
) -> dict[str, object]:
    """Return the meals, totals and progress for a UTC day."""
    return serialize_day(container.meal_service.summarize_day(user_id, day))


@router.post("/meals", status_code=status.HTTP_201_CREATED)
async def add_meal(
    payload: MealPayload,
    user_id: UUID = Depends(require_user),
    container: AppContainer = Depends(_get_container),
) -> dict[str, object]:
    """Log a meal."""
    entry = container.meal_service.add_meal(user_id, payload.to_draft())
    return serialize_meal(entry)


@router.delete("/meals/{meal_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_meal(
    meal_id: UUID,
    user_id: UUID = Depends(require_user),
    container: AppContainer = Depends(_get_container),
) -> Response:
    """Delete a meal owned by the user."""
    if not container.meal_service.delete_meal(user_id, meal_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/weights")
async def get_weights(
    user_id: UUID = Depends(require_user),
    container: AppContainer = Depends(_get_container),
) -> dict[str, object]:
    """Return the weight history with the goal weight."""
    profile = container.profile_service.get_profile(user_id)
    return serialize_trend(container.weight_service.trend(user_id, profile))
