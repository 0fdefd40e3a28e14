"""Domain value objects - Immutable objects defined by their attributes."""

from .amount_policy import AmountPolicy
from .billing_policy import BillingPolicy
from .payment_record import PaymentRecord

__all__ = [
    "AmountPolicy",
    "BillingPolicy",
    "PaymentRecord",
]
