"""Domain services - Stateless operations on domain objects."""

from .expiry_date_calculator import ExpiryDateCalculator, calculate_expiry_date

__all__ = ["ExpiryDateCalculator", "calculate_expiry_date"]
