"""Tests for weight history service."""

from datetime import date
from uuid import UUID, uuid4

import pytest

from fitai.domain.weights import WeightSample
from fitai.services.weights import WeightHistoryService
from tests.conftest import TODAY, InMemoryWeightRepository, make_profile


def test_record_overwrites_same_day(
    weight_service: WeightHistoryService, user_id: UUID
) -> None:
    weight_service.record(user_id, 81.0)
    weight_service.record(user_id, 80.5)

    history = weight_service.history(user_id)

    assert history == [WeightSample(recorded_on=TODAY, weight_kg=80.5)]


@pytest.mark.parametrize("weight_kg", [0.0, -1.0, float("nan"), float("inf")])
def test_record_rejects_invalid_weight(
    weight_service: WeightHistoryService, user_id: UUID, weight_kg: float
) -> None:
    with pytest.raises(ValueError):
        weight_service.record(user_id, weight_kg)

    assert weight_service.history(user_id) == []


def test_history_is_ascending_and_per_user(user_id: UUID) -> None:
    repository = InMemoryWeightRepository()
    service = WeightHistoryService(repository, today=lambda: TODAY)
    service.record(user_id, 82.0, date(2026, 1, 10))
    service.record(user_id, 81.0, date(2026, 1, 5))
    service.record(user_id, 80.0, date(2026, 1, 12))
    service.record(uuid4(), 99.0, TODAY)

    history = service.history(user_id)

    assert [sample.recorded_on.day for sample in history] == [5, 10, 12]
    assert [sample.weight_kg for sample in history] == [81.0, 82.0, 80.0]


def test_trend_includes_goal_weight(
    weight_service: WeightHistoryService, user_id: UUID
) -> None:
    weight_service.record(user_id, 80.0, date(2026, 1, 1))
    profile = make_profile(target_weight_kg=75.0)

    trend = weight_service.trend(user_id, profile)

    assert len(trend.samples) == 1
    assert trend.target_weight_kg == 75.0


def test_trend_without_samples_uses_profile_weight(
    weight_service: WeightHistoryService, user_id: UUID
) -> None:
    trend = weight_service.trend(user_id, make_profile(weight_kg=79.0))

    assert trend.samples == [WeightSample(recorded_on=TODAY, weight_kg=79.0)]
    assert trend.target_weight_kg is None


def test_trend_without_profile_is_empty(
    weight_service: WeightHistoryService, user_id: UUID
) -> None:
    trend = weight_service.trend(user_id, None)

    assert trend.samples == []
    assert trend.target_weight_kg is None
