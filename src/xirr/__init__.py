"""
XIRR — internal rate of return for irregularly dated cash flows.

Реализует функцию XIRR табличных процессоров (LibreOffice Calc, Excel).

Example:
    >>> from datetime import date
    >>> from xirr import Payment, compute
    >>> payments = [
    ...     Payment.of(date(2015, 6, 11), -1000.0),
    ...     Payment.of(date(2015, 7, 21), -9000.0),
    ...     Payment.of(date(2018, 6, 10), 20000.0),
    ...     Payment.of(date(2015, 10, 17), -3000.0),
    ... ]
    >>> compute(payments)
    0.1635371584432641

Даты: datetime.date или любой тип с методом days_since (см. PaymentDate).
"""

from xirr.core.domain import CivilDate, Payment, PaymentDate, payments_from_pairs
from xirr.core.errors import InvalidPaymentsError
from xirr.core.math.solver import (
    DEFAULT_GUESS,
    MAX_COMPUTE_WITH_GUESS_ITERATIONS,
    MAX_ERROR,
    compute,
)

__version__ = "0.3.0"

__all__ = [
    "compute",
    "Payment",
    "payments_from_pairs",
    "PaymentDate",
    "CivilDate",
    "InvalidPaymentsError",
    "DEFAULT_GUESS",
    "MAX_COMPUTE_WITH_GUESS_ITERATIONS",
    "MAX_ERROR",
]
