"""
Domain models and value objects.

Contains the Payment model and the date capability it relies on.
"""

from xirr.core.domain.dates import (
    CivilDate,
    PaymentDate,
    days_between,
    normalize_date,
)
from xirr.core.domain.payment import Payment, payments_from_pairs

__all__ = [
    # Dates
    "PaymentDate",
    "CivilDate",
    "days_between",
    "normalize_date",
    # Payment model
    "Payment",
    "payments_from_pairs",
]
