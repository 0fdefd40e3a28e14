"""Application settings loaded from environment variables."""

import logging
import os
from dataclasses import dataclass, field
from functools import cached_property

from ...application.exceptions import ConfigurationError
from ...domain.value_objects import AmountPolicy, BillingPolicy

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _env_int(key: str, default: int) -> int:
    """Get integer from environment variable."""
    raw = os.environ.get(key, str(default))
    try:
        return int(raw)
    except ValueError:
        msg = f"{key} must be an integer, got {raw!r}"
        raise ConfigurationError(msg) from None


def _env_str(key: str, default: str = "") -> str:
    """Get string from environment variable."""
    return os.environ.get(key, default)


@dataclass
class Settings:
    """Application settings container."""

    # Pricing
    monthly_fee: int = field(default_factory=lambda: _env_int("MONTHLY_FEE", 10_000))
    annual_fee: int = field(default_factory=lambda: _env_int("ANNUAL_FEE", 100_000))
    annual_months: int = field(default_factory=lambda: _env_int("ANNUAL_MONTHS", 12))
    amount_policy: str = field(default_factory=lambda: _env_str("AMOUNT_POLICY", "strict"))

    # Logging
    log_level: str = field(default_factory=lambda: _env_str("LOG_LEVEL", "INFO"))

    def validate(self) -> None:
        """Validate settings."""
        problems: list[str] = []

        if self.monthly_fee <= 0:
            problems.append("MONTHLY_FEE must be positive")
        if self.annual_fee <= 0:
            problems.append("ANNUAL_FEE must be positive")
        if self.annual_months <= 0:
            problems.append("ANNUAL_MONTHS must be positive")
        if self.amount_policy.lower() not in {p.value for p in AmountPolicy}:
            problems.append(
                f"AMOUNT_POLICY must be one of {', '.join(AmountPolicy)}, got {self.amount_policy!r}"
            )
        if self.log_level.upper() not in _LOG_LEVELS:
            problems.append(f"LOG_LEVEL must be one of {', '.join(_LOG_LEVELS)}")

        if problems:
            msg = f"Invalid configuration: {'; '.join(problems)}"
            raise ConfigurationError(msg)

    @cached_property
    def billing_policy(self) -> BillingPolicy:
        """Get the billing policy.

        Raises:
            ConfigurationError: If the pricing values do not form a valid policy.
        """
        try:
            return BillingPolicy(
                monthly_fee=self.monthly_fee,
                annual_fee=self.annual_fee,
                annual_months=self.annual_months,
                amount_policy=AmountPolicy(self.amount_policy.lower()),
            )
        except ValueError as e:
            msg = f"Invalid billing policy configuration: {e}"
            raise ConfigurationError(msg) from e

    @property
    def logging_level(self) -> int:
        """Numeric logging level."""
        return logging.getLevelName(self.log_level.upper())


def load_settings() -> Settings:
    """Load and validate settings from environment."""
    settings = Settings()
    settings.validate()
    return settings
