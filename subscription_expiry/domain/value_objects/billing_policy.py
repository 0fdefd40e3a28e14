"""Billing policy value object."""

from dataclasses import dataclass

from ..exceptions import InvalidAmountError, InvalidBillingPolicyError
from .amount_policy import AmountPolicy


@dataclass(frozen=True, slots=True)
class BillingPolicy:
    """Prices that translate a paid amount into subscription months."""

    monthly_fee: int = 10_000
    annual_fee: int = 100_000
    annual_months: int = 12
    amount_policy: AmountPolicy = AmountPolicy.STRICT

    def __post_init__(self) -> None:
        """Validate that all prices and durations are positive."""
        if not (self.monthly_fee > 0 and self.annual_fee > 0 and self.annual_months > 0):
            msg = (
                f"Billing policy values must be positive: monthly_fee({self.monthly_fee}), "
                f"annual_fee({self.annual_fee}), annual_months({self.annual_months})"
            )
            raise InvalidBillingPolicyError(msg)

    def months_for(self, pay_amount: int) -> int:
        """
        Number of months a payment buys.

        The annual fee is a flat plan worth ``annual_months``; any other amount
        is proportional to the monthly fee.

        Raises:
            InvalidAmountError: If the amount buys no months, or is not a whole
                number of monthly fees under the strict policy.
        """
        if pay_amount <= 0:
            raise InvalidAmountError(pay_amount, "amount must be positive")
        if pay_amount == self.annual_fee:
            return self.annual_months

        months, remainder = divmod(pay_amount, self.monthly_fee)
        if remainder and self.amount_policy is AmountPolicy.STRICT:
            raise InvalidAmountError(
                pay_amount, f"amount must be a multiple of {self.monthly_fee}"
            )
        if months == 0:
            raise InvalidAmountError(
                pay_amount, f"amount is less than the monthly fee {self.monthly_fee}"
            )
        return months
