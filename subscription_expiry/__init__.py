"""Expiry date calculation for prepaid monthly subscriptions."""

from .application.use_cases import CalculateExpiryDate, ExpiryResult
from .container import bootstrap
from .domain.exceptions import DomainError, InvalidAmountError, InvalidBillingPolicyError
from .domain.services import ExpiryDateCalculator, calculate_expiry_date
from .domain.value_objects import AmountPolicy, BillingPolicy, PaymentRecord
from .infrastructure.config import Settings, load_settings

__version__ = "1.0.0"

__all__ = [
    "AmountPolicy",
    "BillingPolicy",
    "CalculateExpiryDate",
    "DomainError",
    "ExpiryDateCalculator",
    "ExpiryResult",
    "InvalidAmountError",
    "InvalidBillingPolicyError",
    "PaymentRecord",
    "Settings",
    "bootstrap",
    "calculate_expiry_date",
    "load_settings",
]
