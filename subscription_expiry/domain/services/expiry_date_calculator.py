"""Domain service for calculating subscription expiry dates."""

import calendar
import logging
from datetime import MAXYEAR, date

from ..exceptions import InvalidAmountError
from ..value_objects import BillingPolicy, PaymentRecord

logger = logging.getLogger(__name__)


def _add_months(year: int, month: int, months: int) -> tuple[int, int]:
    """Shift a year/month pair forward by a number of months."""
    index = month - 1 + months
    return year + index // 12, index % 12 + 1


class ExpiryDateCalculator:
    """Domain service translating a payment into the date its service period ends."""

    def __init__(self, policy: BillingPolicy | None = None) -> None:
        """Initialize calculator with a billing policy."""
        self._policy = policy or BillingPolicy()

    @property
    def policy(self) -> BillingPolicy:
        """Billing policy used to convert amounts into months."""
        return self._policy

    def calculate_expiry_date(self, record: PaymentRecord) -> date:
        """
        Calculate the expiry date for a payment.

        The expiry keeps the anchor day of month (taken from the first billing
        date) and is clamped to the last day of the target month when that
        month is too short.

        Args:
            record: The payment to evaluate.

        Returns:
            The date the paid-for service period ends.

        Raises:
            InvalidAmountError: If the amount does not buy any months, or buys
                so many that the expiry falls past the last representable year.
        """
        return self.expiry_after(record, self._policy.months_for(record.pay_amount))

    def expiry_after(self, record: PaymentRecord, months: int) -> date:
        """Expiry date of a record once a number of months has been bought."""
        year, month = _add_months(record.billing_date.year, record.billing_date.month, months)
        if year > MAXYEAR:
            raise InvalidAmountError(record.pay_amount, "expiry date is out of range")
        last_day = calendar.monthrange(year, month)[1]
        expiry = date(year, month, min(record.anchor_day, last_day))

        logger.debug(
            "Expiry for %s (amount=%d, anchor_day=%d): %d months -> %s",
            record.billing_date.isoformat(),
            record.pay_amount,
            record.anchor_day,
            months,
            expiry.isoformat(),
        )
        return expiry


def calculate_expiry_date(record: PaymentRecord, policy: BillingPolicy | None = None) -> date:
    """Calculate the expiry date for a payment under the given (or default) policy."""
    return ExpiryDateCalculator(policy).calculate_expiry_date(record)
