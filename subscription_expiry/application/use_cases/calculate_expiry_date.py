"""Use case for calculating the expiry date of a payment."""

import calendar
import logging
from dataclasses import dataclass
from datetime import date

from ...domain.exceptions import InvalidAmountError
from ...domain.services import ExpiryDateCalculator
from ...domain.value_objects import PaymentRecord

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ExpiryResult:
    """Result of the expiry date calculation use case."""

    record: PaymentRecord
    months_paid: int
    expiry_date: date

    @property
    def anchor_restored(self) -> bool:
        """Check if a day shortened by an earlier month was restored.

        Only a payment made on the last day of a month shorter than the anchor
        day counts; late payments that simply return to the anchor do not.
        """
        billing_date = self.record.billing_date
        month_end = calendar.monthrange(billing_date.year, billing_date.month)[1]
        return (
            billing_date.day < self.record.anchor_day
            and billing_date.day == month_end
            and self.expiry_date.day == self.record.anchor_day
        )


class CalculateExpiryDate:
    """
    Use case for calculating when a prepaid subscription expires.

    Thin application service around the domain calculator that reports how
    many months were bought and logs every calculation.
    """

    def __init__(self, calculator: ExpiryDateCalculator) -> None:
        """Initialize the use case with a calculator."""
        self._calculator = calculator

    def execute(self, record: PaymentRecord) -> ExpiryResult:
        """
        Execute the expiry date calculation.

        Returns:
            ExpiryResult with the months paid for and the expiry date.

        Raises:
            InvalidAmountError: If the paid amount is rejected by the policy.
        """
        try:
            months = self._calculator.policy.months_for(record.pay_amount)
            expiry = self._calculator.expiry_after(record, months)
        except InvalidAmountError as e:
            logger.warning("Rejected payment on %s: %s", record.billing_date.isoformat(), e)
            raise

        logger.info(
            "Payment of %d on %s buys %d month(s), expires %s",
            record.pay_amount,
            record.billing_date.isoformat(),
            months,
            expiry.isoformat(),
        )
        return ExpiryResult(record=record, months_paid=months, expiry_date=expiry)
