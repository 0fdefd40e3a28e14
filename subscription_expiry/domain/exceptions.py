"""Domain exceptions."""


class DomainError(Exception):
    """Base exception for domain errors."""


class InvalidAmountError(DomainError):
    """Raised when a paid amount cannot be converted into subscription months."""

    def __init__(self, pay_amount: int, reason: str) -> None:
        self.pay_amount = pay_amount
        self.reason = reason
        super().__init__(f"Invalid pay amount {pay_amount}: {reason}")


class InvalidBillingPolicyError(DomainError, ValueError):
    """Raised when billing policy values are invalid."""
