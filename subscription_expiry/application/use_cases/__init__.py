"""Application use cases."""

from .calculate_expiry_date import CalculateExpiryDate, ExpiryResult

__all__ = ["CalculateExpiryDate", "ExpiryResult"]
