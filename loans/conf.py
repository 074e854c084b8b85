"""Typed configuration for the loan origination service.

Values come from environment variables (and an optional .env file) through
pydantic-settings. The Django settings module copies them into Django
settings; at runtime ``loan_settings()`` re-validates whatever Django
settings currently hold, so ``override_settings`` keeps working in tests.
"""

from datetime import timedelta
from decimal import Decimal

from django.conf import settings
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .utils import MAX_MONEY


class ServiceSettings(BaseSettings):
    """Deployment settings for the Django project."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    SECRET_KEY: str = Field(
        default="django-insecure-loan-origination-dev-key",
        description="Django secret key",
    )
    DEBUG: bool = Field(default=True, description="Django debug mode")
    ALLOWED_HOSTS: str = Field(
        default="localhost,127.0.0.1,testserver",
        description="Comma-separated host names the service answers to",
    )
    DATABASE_PATH: str = Field(default="", description="SQLite database file path")
    TIME_ZONE: str = Field(default="UTC", description="Time zone used for working hours")
    LOG_LEVEL: str = Field(default="INFO", description="Level of the loans logger")
    CELERY_BROKER_URL: str = Field(default="memory://")
    CELERY_RESULT_BACKEND: str = Field(default="cache+memory://")
    CELERY_TASK_ALWAYS_EAGER: bool = Field(default=False)

    @property
    def allowed_hosts(self) -> list[str]:
        return [host.strip() for host in self.ALLOWED_HOSTS.split(",") if host.strip()]


class LoanSettings(BaseSettings):
    """Loan pricing and risk analysis policy."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    MAX_LOAN_AMOUNT: Decimal = Field(
        default=Decimal("300"),
        gt=0,
        le=MAX_MONEY,
        description="Largest amount a single loan may be taken for",
    )
    MAX_LOAN_TERM_IN_DAYS: int = Field(
        default=365,
        ge=1,
        le=3650,
        description="Longest term of a loan and of a single extension",
    )
    LOAN_WEEKLY_INTEREST_FACTOR: Decimal = Field(
        default=Decimal("1.5"),
        ge=0,
        le=100,
        description="Interest charged per started week, as a share of the amount",
    )
    RISK_WORKING_HOURS_START: int = Field(default=6, ge=0, le=24)
    RISK_WORKING_HOURS_END: int = Field(default=24, ge=0, le=24)
    RISK_MAX_REQUESTS_PER_WINDOW: int = Field(default=3, ge=1)
    RISK_REQUEST_WINDOW_HOURS: int = Field(default=24, ge=1)

    @field_validator("RISK_WORKING_HOURS_END")
    @classmethod
    def validate_working_hours(cls, v: int, info) -> int:
        start = info.data.get("RISK_WORKING_HOURS_START")
        if start is not None and v <= start:
            raise ValueError("RISK_WORKING_HOURS_END must be after RISK_WORKING_HOURS_START")
        return v

    @property
    def request_window(self) -> timedelta:
        return timedelta(hours=self.RISK_REQUEST_WINDOW_HOURS)


def loan_settings() -> LoanSettings:
    """Read the loan and risk policy from the current Django settings."""
    overrides = {
        name: getattr(settings, name)
        for name in LoanSettings.model_fields
        if hasattr(settings, name)
    }
    return LoanSettings(**overrides)
