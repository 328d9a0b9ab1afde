"""
Payment — Модель денежного потока

Immutable Pydantic модель одного платежа: дата и знаковая сумма.
Отрицательная сумма — платёж сделан (инвестиция), положительная — получен.
"""

import math
from typing import Any, Iterable

from pydantic import BaseModel, Field, field_validator

from xirr.core.domain.dates import normalize_date


# =============================================================================
# PAYMENT MODEL
# =============================================================================


class Payment(BaseModel):
    """
    Платёж, сделанный или полученный в определённую дату.

    Нулевая сумма допустима, но не участвует в проверке знаков.
    Immutable модель (frozen=True).
    """

    amount: float = Field(..., description="Сумма: < 0 платёж сделан, > 0 платёж получен")
    date: Any = Field(..., description="Дата платежа (datetime.date или PaymentDate)")

    model_config = {"frozen": True}  # Immutable

    @field_validator("amount")
    @classmethod
    def validate_amount_finite(cls, v: float) -> float:
        """Сумма должна быть конечным числом"""
        if not math.isfinite(v):
            raise ValueError(f"amount must be finite, got {v}")
        return v

    @field_validator("date")
    @classmethod
    def validate_date_capability(cls, v: Any) -> Any:
        """Дата должна поддерживать порядок и подсчёт дней"""
        try:
            return normalize_date(v)
        except TypeError as e:
            raise ValueError(str(e)) from e

    @classmethod
    def of(cls, date: Any, amount: float) -> "Payment":
        """Позиционный конструктор: Payment.of(date, amount)"""
        return cls(date=date, amount=amount)


def payments_from_pairs(pairs: Iterable[tuple[Any, float]]) -> list[Payment]:
    """
    Построение списка платежей из пар (date, amount).

    Examples:
        >>> payments_from_pairs([(date(2015, 6, 11), -1000.0), (date(2018, 6, 10), 2000.0)])
        [Payment(amount=-1000.0, ...), Payment(amount=2000.0, ...)]
    """
    return [Payment.of(date, amount) for date, amount in pairs]
