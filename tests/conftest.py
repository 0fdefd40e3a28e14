"""Pytest configuration and shared fixtures."""

from __future__ import annotations

from datetime import date

import pytest

from subscription_expiry.domain.services import ExpiryDateCalculator
from subscription_expiry.domain.value_objects import AmountPolicy, BillingPolicy, PaymentRecord

_ENV_VARS = ("MONTHLY_FEE", "ANNUAL_FEE", "ANNUAL_MONTHS", "AMOUNT_POLICY", "LOG_LEVEL")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep configuration environment variables out of every test."""
    for key in _ENV_VARS:
        monkeypatch.delenv(key, raising=False)


@pytest.fixture
def default_policy() -> BillingPolicy:
    """Default billing policy: 10,000 a month, 100,000 a year."""
    return BillingPolicy()


@pytest.fixture
def floor_policy() -> BillingPolicy:
    """Billing policy that floors partial monthly fees."""
    return BillingPolicy(amount_policy=AmountPolicy.FLOOR)


@pytest.fixture
def calculator(default_policy: BillingPolicy) -> ExpiryDateCalculator:
    """Calculator using the default policy."""
    return ExpiryDateCalculator(default_policy)


@pytest.fixture
def month_end_record() -> PaymentRecord:
    """Renewal on Feb 28 of a subscription first paid on Jan 31."""
    return PaymentRecord(
        billing_date=date(2021, 2, 28),
        pay_amount=10_000,
        first_billing_date=date(2021, 1, 31),
    )
