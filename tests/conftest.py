"""Shared test fixtures."""

import pytest

from intake_metrics.config import Settings
from intake_metrics.containers import AppContainer, build_container
from intake_metrics.domain.intake import IntakeLog, UserProfile


@pytest.fixture
def settings() -> Settings:
    return Settings(
        timezone="UTC",
        saturation_window_days=28,
        dose_time_window_days=30,
        habits_window_days=30,
        performance_mode="arithmetic",
        environment="test",
    )


@pytest.fixture
def container(settings: Settings) -> AppContainer:
    return build_container(settings)


@pytest.fixture
def male_profile() -> UserProfile:
    # Requirement: 150 * 0.6 + (70 - 60) * 0.4 + 10 = 104 oz.
    return UserProfile(height_inches=70, weight_lb=150, sex="male")


@pytest.fixture
def female_profile() -> UserProfile:
    # Requirement: 100 * 0.6 = 60 oz.
    return UserProfile(height_inches=58, weight_lb=100, sex="female")


@pytest.fixture
def water_logs() -> list[IntakeLog]:
    return [
        IntakeLog(consumed_at="2024-03-01T08:00:00", amount=40),
        IntakeLog(consumed_at="2024-03-01T19:30:00", amount=30),
        IntakeLog(consumed_at="2024-03-02T10:00:00", amount=50),
        IntakeLog(consumed_at="2024-03-03T13:15:00", amount=64),
    ]
