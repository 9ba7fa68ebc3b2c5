"""Pydantic models describing the partner directory settings."""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field, field_validator, model_validator

PARTNERS_URL = (
    "https://www.opentext.com/en/partners/partners-directory-overview/1716790338234.ajax"
)
SOLUTIONS_URL = (
    "https://www.opentext.com/en/partners/ApplicationMarketplace/1754971906819.ajax"
)


class ScheduleType(str, Enum):
    """Trigger kinds accepted for the periodic refresh."""

    CRON = "cron"
    INTERVAL = "interval"


class ScheduleConfig(BaseModel):
    """When the refresh job fires after the startup run."""

    type: ScheduleType = Field(default=ScheduleType.INTERVAL)
    value: Any = Field(
        default=180,
        description="Crontab expression, or interval seconds / kwargs dict.",
    )

    @model_validator(mode="after")
    def _validate_value(self) -> "ScheduleConfig":
        if self.type is ScheduleType.CRON and not isinstance(self.value, str):
            raise ValueError("Cron schedule requires string expression")
        if self.type is ScheduleType.INTERVAL and not isinstance(self.value, (int, float, dict)):
            raise ValueError("Interval schedule requires seconds (int/float) or kwargs dict")
        return self


class EndpointConfig(BaseModel):
    """One paginated upstream JSON endpoint."""

    name: str
    url: str
    sorter: str = "Default_Sort"
    query: str = ""
    batch_size: int = 200
    max_workers: int = 8

    @field_validator("batch_size", "max_workers")
    @classmethod
    def _positive(cls, value: int) -> int:
        if value < 1:
            raise ValueError("must be >= 1")
        return value


class HttpConfig(BaseModel):
    """Client timeouts and default headers."""

    connect_timeout: float = 10.0
    read_timeout: float = 30.0
    fetch_timeout: float = 50.0
    user_agent: str = "PartnerDirectory-Service"

    @model_validator(mode="after")
    def _validate_timeouts(self) -> "HttpConfig":
        for name in ("connect_timeout", "read_timeout", "fetch_timeout"):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be > 0")
        return self


class RefreshConfig(BaseModel):
    """Refresh driver behaviour."""

    run_on_startup: bool = True
    # Publishing an all-empty join over a populated cache is the reference behaviour
    publish_empty: bool = True
    schedule: ScheduleConfig = Field(default_factory=ScheduleConfig)


class ApiConfig(BaseModel):
    """HTTP server options."""

    host: str = "0.0.0.0"
    port: int = 8080
    cors_origins: list[str] = Field(default_factory=lambda: ["http://localhost:3000"])
    default_page_size: int = 10

    @field_validator("default_page_size")
    @classmethod
    def _positive_page_size(cls, value: int) -> int:
        if value < 1:
            raise ValueError("must be >= 1")
        return value

    @field_validator("port")
    @classmethod
    def _valid_port(cls, value: int) -> int:
        if not 0 < value < 65536:
            raise ValueError("must be between 1 and 65535")
        return value


def _default_partners() -> EndpointConfig:
    return EndpointConfig(name="partners", url=PARTNERS_URL, sorter="Default_Sort")


def _default_solutions() -> EndpointConfig:
    return EndpointConfig(name="solutions", url=SOLUTIONS_URL, sorter="Name")


class Settings(BaseModel):
    """Top-level settings document."""

    partners: EndpointConfig = Field(default_factory=_default_partners)
    solutions: EndpointConfig = Field(default_factory=_default_solutions)
    http: HttpConfig = Field(default_factory=HttpConfig)
    refresh: RefreshConfig = Field(default_factory=RefreshConfig)
    api: ApiConfig = Field(default_factory=ApiConfig)


__all__ = [
    "ApiConfig",
    "EndpointConfig",
    "HttpConfig",
    "RefreshConfig",
    "ScheduleConfig",
    "ScheduleType",
    "Settings",
]
