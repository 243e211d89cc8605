"""Application configuration."""

import logging
import sys
from collections.abc import Callable
from decimal import Decimal
from functools import lru_cache
from typing import Any, Literal

import structlog
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from lending.domain.common.value_objects import Currency
from lending.domain.lending.statuses import WaitingListType


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Environment
    ENVIRONMENT: Literal["development", "production", "test"] = "development"

    # Loans
    DEFAULT_LOAN_DAYS: int = 14
    RESERVATION_DAYS: int = 3
    DEFAULT_WAITING_LIST_TYPE: WaitingListType = WaitingListType.FIRST_COME_FIRST_SERVE

    # Borrow requests
    BORROW_REQUEST_COOLDOWN_MINUTES: int = 60

    # Fees
    DEFAULT_CURRENCY: Currency = Currency.USD
    MAX_FINES_BEFORE_SUSPENSION: Decimal = Decimal("100")

    @field_validator("DEFAULT_LOAN_DAYS", "RESERVATION_DAYS", mode="after")
    @classmethod
    def validate_positive_days(cls, value: int) -> int:
        """Day counts must be at least one."""
        if value < 1:
            msg = "must be a positive number of days"
            raise ValueError(msg)
        return value

    @field_validator("BORROW_REQUEST_COOLDOWN_MINUTES", mode="after")
    @classmethod
    def validate_cooldown(cls, value: int) -> int:
        if value < 0:
            msg = "cooldown cannot be negative"
            raise ValueError(msg)
        return value

    @field_validator("MAX_FINES_BEFORE_SUSPENSION", mode="after")
    @classmethod
    def validate_threshold(cls, value: Decimal) -> Decimal:
        """Suspension threshold cannot be negative."""
        if value < 0:
            msg = "MAX_FINES_BEFORE_SUSPENSION cannot be negative"
            raise ValueError(msg)
        return value


def configure_logging(environment: str = "development") -> None:
    """Configure structured logging with structlog."""
    use_json = environment == "production"

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=logging.DEBUG if environment == "development" else logging.INFO,
    )

    processors: list[Callable[..., Any]] = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if use_json:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
