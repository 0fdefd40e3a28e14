"""Payment record value object."""

from dataclasses import dataclass
from datetime import date
from typing import Self


def _as_date(value: date | str) -> date:
    """Accept a date or an ISO-8601 date string."""
    if isinstance(value, date):
        return value
    return date.fromisoformat(value)


@dataclass(frozen=True, slots=True)
class PaymentRecord:
    """A single prepaid payment towards a subscription."""

    billing_date: date
    pay_amount: int
    first_billing_date: date | None = None

    @property
    def anchor_day(self) -> int:
        """Day of month every expiry date tries to land on."""
        if self.first_billing_date is not None:
            return self.first_billing_date.day
        return self.billing_date.day

    @classmethod
    def create(
        cls,
        *,
        billing_date: date | str,
        pay_amount: int,
        first_billing_date: date | str | None = None,
    ) -> Self:
        """Factory method to create a PaymentRecord from dates or ISO strings."""
        return cls(
            billing_date=_as_date(billing_date),
            pay_amount=pay_amount,
            first_billing_date=(
                _as_date(first_billing_date) if first_billing_date is not None else None
            ),
        )
