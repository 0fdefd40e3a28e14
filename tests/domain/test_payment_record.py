"""Tests for PaymentRecord value object."""

from __future__ import annotations

from datetime import date

import pytest

from subscription_expiry.domain.value_objects import PaymentRecord


class TestPaymentRecord:
    """Tests for PaymentRecord value object."""

    def test_first_billing_date_optional(self) -> None:
        """First billing date defaults to None."""
        record = PaymentRecord(billing_date=date(2021, 3, 1), pay_amount=10_000)
        assert record.first_billing_date is None

    def test_anchor_day_defaults_to_billing_day(self) -> None:
        """Without a first billing date the anchor is the billing day."""
        record = PaymentRecord(billing_date=date(2021, 2, 28), pay_amount=10_000)
        assert record.anchor_day == 28

    def test_anchor_day_from_first_billing_date(self, month_end_record: PaymentRecord) -> None:
        """The first billing date fixes the anchor day."""
        assert month_end_record.anchor_day == 31

    def test_record_is_frozen(self, month_end_record: PaymentRecord) -> None:
        """Records should be immutable."""
        with pytest.raises(AttributeError):
            month_end_record.pay_amount = 20_000  # type: ignore[misc]

    def test_records_compare_by_value(self, month_end_record: PaymentRecord) -> None:
        """Records with equal fields are equal and hash alike."""
        copy = PaymentRecord(
            billing_date=date(2021, 2, 28),
            pay_amount=10_000,
            first_billing_date=date(2021, 1, 31),
        )
        assert copy == month_end_record
        assert hash(copy) == hash(month_end_record)


class TestPaymentRecordCreate:
    """Tests for the create factory method."""

    def test_create_from_iso_strings(self, month_end_record: PaymentRecord) -> None:
        """ISO date strings are parsed."""
        record = PaymentRecord.create(
            billing_date="2021-02-28",
            pay_amount=10_000,
            first_billing_date="2021-01-31",
        )
        assert record == month_end_record

    def test_create_from_dates(self) -> None:
        """Date values are used as they are."""
        record = PaymentRecord.create(billing_date=date(2021, 3, 1), pay_amount=20_000)
        assert record.billing_date == date(2021, 3, 1)
        assert record.pay_amount == 20_000
        assert record.first_billing_date is None

    def test_create_rejects_bad_date_string(self) -> None:
        """Malformed dates raise ValueError."""
        with pytest.raises(ValueError):
            PaymentRecord.create(billing_date="2021-02-30", pay_amount=10_000)
