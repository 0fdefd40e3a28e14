"""
Subscription expiry calculator

Composition root. Wires the domain calculator into the application use case
using settings from the environment.
"""

from __future__ import annotations

import logging
import sys

from .application.use_cases import CalculateExpiryDate
from .domain.services import ExpiryDateCalculator
from .infrastructure.config import Settings, load_settings

logger = logging.getLogger(__name__)


class ApplicationContainer:
    """
    Dependency injection container.

    Responsible for creating and wiring all application components.
    """

    def __init__(self, settings: Settings) -> None:
        """Initialize container with settings."""
        self._settings = settings

    def create_calculator(self) -> ExpiryDateCalculator:
        """Create the expiry date calculator for the configured policy."""
        return ExpiryDateCalculator(self._settings.billing_policy)

    def create_calculate_use_case(self) -> CalculateExpiryDate:
        """Create the main use case with all dependencies."""
        return CalculateExpiryDate(self.create_calculator())


def configure_logging(level: int | str = logging.INFO) -> None:
    """Send log records to stdout in the application format."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )


def bootstrap(settings: Settings | None = None) -> CalculateExpiryDate:
    """Load settings, configure logging and return the wired use case."""
    if settings is None:
        settings = load_settings()
    else:
        settings.validate()

    configure_logging(settings.logging_level)
    logging.getLogger().setLevel(settings.logging_level)

    policy = settings.billing_policy
    logger.info(
        "Billing policy: monthly_fee=%d annual_fee=%d annual_months=%d amount_policy=%s",
        policy.monthly_fee,
        policy.annual_fee,
        policy.annual_months,
        policy.amount_policy,
    )
    return ApplicationContainer(settings).create_calculate_use_case()
