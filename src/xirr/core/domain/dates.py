"""
Dates — Date Capability для расчёта XIRR

Solver не привязан к конкретной календарной библиотеке. От даты требуется
только:
- полный порядок (`<`), чтобы отсортировать платежи
- знаковое число дней между двумя датами

Поддерживаются:
- любой тип, реализующий протокол PaymentDate (метод days_since)
- datetime.date (и datetime.datetime, нормализуется до календарной даты)
- CivilDate — дата как proleptic Gregorian ordinal
"""

import datetime
from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable


# =============================================================================
# PROTOCOL
# =============================================================================


@runtime_checkable
class PaymentDate(Protocol):
    """
    Дата платежа.

    Реализация обязана быть полностью упорядоченной и сообщать число дней
    от `other` до `self` (положительное, если `self` позже).
    """

    def __lt__(self, other: Any) -> bool:
        ...

    def days_since(self, other: Any) -> int:
        ...


# =============================================================================
# CIVIL DATE
# =============================================================================


@dataclass(frozen=True, order=True)
class CivilDate:
    """Календарная дата без времени суток, хранится как ordinal (1 = 0001-01-01)."""

    ordinal: int

    def __post_init__(self) -> None:
        if self.ordinal < 1:
            raise ValueError(f"ordinal must be >= 1, got {self.ordinal}")

    @classmethod
    def from_date(cls, value: datetime.date) -> "CivilDate":
        return cls(value.toordinal())

    @classmethod
    def from_ymd(cls, year: int, month: int, day: int) -> "CivilDate":
        return cls(datetime.date(year, month, day).toordinal())

    def to_date(self) -> datetime.date:
        return datetime.date.fromordinal(self.ordinal)

    def days_since(self, other: "CivilDate") -> int:
        return self.ordinal - other.ordinal

    def __str__(self) -> str:
        return self.to_date().isoformat()


# =============================================================================
# ADAPTERS
# =============================================================================


def normalize_date(value: Any) -> Any:
    """
    Приведение даты платежа к поддерживаемому виду.

    datetime.datetime → datetime.date (время суток отбрасывается).
    PaymentDate и datetime.date возвращаются без изменений.

    Raises:
        TypeError: Если тип даты не поддерживается
    """
    if isinstance(value, PaymentDate):
        return value
    if isinstance(value, datetime.datetime):
        return value.date()
    if isinstance(value, datetime.date):
        return value
    raise TypeError(
        f"unsupported payment date type {type(value).__name__}: "
        f"expected datetime.date or an object with days_since()"
    )


def days_between(later: Any, earlier: Any) -> int:
    """
    Знаковое число дней от `earlier` до `later`.

    Examples:
        >>> days_between(datetime.date(2016, 3, 1), datetime.date(2016, 2, 28))
        2
        >>> days_between(CivilDate(10), CivilDate(15))
        -5
    """
    if isinstance(later, PaymentDate):
        return later.days_since(earlier)
    if isinstance(later, datetime.date) and isinstance(earlier, datetime.date):
        return (later - earlier).days
    raise TypeError(
        f"cannot count days between {type(earlier).__name__} and {type(later).__name__}"
    )
