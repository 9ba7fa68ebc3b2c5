"""Configuration package exports."""

from .loader import ConfigLocator, ConfigRepository
from .models import (
    ApiConfig,
    EndpointConfig,
    HttpConfig,
    RefreshConfig,
    ScheduleConfig,
    ScheduleType,
    Settings,
)

__all__ = [
    "ApiConfig",
    "ConfigLocator",
    "ConfigRepository",
    "EndpointConfig",
    "HttpConfig",
    "RefreshConfig",
    "ScheduleConfig",
    "ScheduleType",
    "Settings",
]
