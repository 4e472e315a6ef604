"""Application state and feature flags."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class AppState(str, Enum):
    """Life-cycle states of the application."""

    INITIALIZING = "initializing"
    RUNNING = "running"
    SHUTTING_DOWN = "shutting_down"
    MAINTENANCE = "maintenance"
    ERROR = "error"

    def __str__(self) -> str:
        return self.value


DEFAULT_APP_STATE = AppState.INITIALIZING


@dataclass(frozen=True)
class FeatureFlags:
    """Which optional features are switched on."""

    enable_advanced_search: bool = True
    enable_caching: bool = True
    enable_metrics: bool = True
    enable_rate_limiting: bool = True
    experimental_features: bool = False


_FEATURE_FIELDS = {
    "advanced_search": "enable_advanced_search",
    "caching": "enable_caching",
    "metrics": "enable_metrics",
    "rate_limiting": "enable_rate_limiting",
    "experimental": "experimental_features",
}


def get_app_state() -> AppState:
    """The current state of the application."""
    return AppState.RUNNING


def is_feature_enabled(feature: str) -> bool:
    """Whether ``feature`` is on under the default flags; unknown features are off."""
    field_name = _FEATURE_FIELDS.get(feature)
    if field_name is None:
        return False
    return getattr(FeatureFlags(), field_name)