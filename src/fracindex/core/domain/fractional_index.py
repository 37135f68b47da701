"""
FractionalIndex — Модель позиции в упорядоченной коллекции

Immutable Pydantic модель, представляющая одно значение fractional index.
Внешнее представление — fixed-point строка; порядок определяется
ЧИСЛЕННЫМ сравнением (parse-and-compare), а не лексикографическим:
строки разной длины ('0.0005000000' и '0.000500000000001') лексикографически
сравниваются иначе, чем численно.
"""

from decimal import Decimal
from typing import Final, Iterable, Union

from pydantic import BaseModel, Field

from fracindex.core.math.decimal_safeguards import is_strictly_between, to_decimal

# =============================================================================
# CONSTANTS
# =============================================================================

# Допустимая запись: знак, целая часть, необязательная дробная часть.
# Экспоненциальная запись ('1e-5') не допускается.
DECIMAL_STRING_PATTERN: Final[str] = r"^-?[0-9]+(\.[0-9]+)?$"


# =============================================================================
# FRACTIONAL INDEX MODEL
# =============================================================================


class FractionalIndex(BaseModel):
    """
    Модель fractional index.

    Immutable модель (frozen=True): сгенерированное значение не меняется,
    хранение и дедупликация — ответственность вызывающего кода.
    """

    value: str = Field(
        ...,
        pattern=DECIMAL_STRING_PATTERN,
        description="Fixed-point запись индекса (например, '0.001500000000000')",
    )

    model_config = {"frozen": True, "str_strip_whitespace": True}

    @property
    def numeric(self) -> Decimal:
        """Численное значение индекса (точное, без float-округления)."""
        return to_decimal(self.value)

    @classmethod
    def parse(cls, raw: "IndexLike") -> "FractionalIndex":
        """
        Построение модели из строки, числа или существующей модели.

        Числа переводятся в fixed-point запись без экспоненты.

        Raises:
            pydantic.ValidationError: Если строка не является десятичной записью
            ValueError: Если число NaN/Inf
        """
        if isinstance(raw, FractionalIndex):
            return raw
        if isinstance(raw, str):
            return cls(value=raw)
        return cls(value=f"{to_decimal(raw):f}")

    def __str__(self) -> str:
        return self.value


IndexLike = Union[str, int, float, Decimal, FractionalIndex]


# =============================================================================
# ORDERING HELPERS
# =============================================================================


def parse_bound(raw: IndexLike | None) -> Decimal | None:
    """
    Численное значение необязательной границы.

    Returns:
        Decimal или None, если граница отсутствует
    """
    if raw is None:
        return None
    return FractionalIndex.parse(raw).numeric


def index_sort_key(index: IndexLike) -> Decimal:
    """
    Ключ сортировки индекса.

    Examples:
        >>> sorted(["0.0015", "0.00051", "0.001"], key=index_sort_key)
        ['0.00051', '0.001', '0.0015']
    """
    return FractionalIndex.parse(index).numeric


def compare_indexes(a: IndexLike, b: IndexLike) -> int:
    """
    Численное сравнение двух индексов.

    Returns:
        -1 если a < b, 0 если a == b, +1 если a > b
    """
    left = index_sort_key(a)
    right = index_sort_key(b)

    if left < right:
        return -1
    elif left > right:
        return 1
    return 0


def sort_indexes(indexes: Iterable[str]) -> list[str]:
    """Индексы в численном порядке (строки возвращаются без изменений)."""
    return sorted(indexes, key=index_sort_key)


def is_within_bounds(
    index: IndexLike,
    prev_index: IndexLike | None = None,
    next_index: IndexLike | None = None,
) -> bool:
    """
    Проверка prev < index < next; отсутствующая граница не ограничивает.
    """
    return is_strictly_between(
        index_sort_key(index), parse_bound(prev_index), parse_bound(next_index)
    )


def is_strictly_increasing(indexes: Iterable[IndexLike]) -> bool:
    """Проверка строгого численного возрастания последовательности."""
    values = [index_sort_key(index) for index in indexes]
    return all(left < right for left, right in zip(values, values[1:]))
