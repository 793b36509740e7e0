"""Dependency container wiring for the application."""

from dataclasses import dataclass

from intake_metrics.config import Settings, parse_performance_weights
from intake_metrics.domain.intake import PerformanceOptions, PerformanceWeights
from intake_metrics.services.metrics import MetricsService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    metrics_service: MetricsService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    weights = parse_performance_weights(resolved_settings.performance_weights)
    metrics_service = MetricsService(
        timezone_name=resolved_settings.timezone,
        saturation_window_days=resolved_settings.saturation_window_days,
        dose_time_window_days=resolved_settings.dose_time_window_days,
        habits_window_days=resolved_settings.habits_window_days,
        performance_options=PerformanceOptions(
            mode=resolved_settings.performance_mode,
            weights=weights or PerformanceWeights(),
        ),
    )
    return AppContainer(settings=resolved_settings, metrics_service=metrics_service)
