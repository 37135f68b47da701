"""
Decimal Safeguards — Safe Decimal Primitives

Модуль обеспечивает численную устойчивость всех операций над fractional indexes:
- Единый Decimal context с запасом точности (без двоичного float-округления)
- Безопасная конверсия входов в Decimal с отказом от NaN/Inf
- Fixed-point форматирование с явным числом знаков после точки
- Адаптивная точность: отформатированное значение никогда не совпадает с границей
- Строгие сравнения "внутри интервала" и epsilon-защиты

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Все арифметические операции выполняются в DECIMAL_CONTEXT
2. format_within никогда не возвращает строку вне открытого интервала (lower, upper)
3. NaN/Inf никогда не проходят to_decimal
4. Все операции детерминированы и воспроизводимы
"""

from decimal import ROUND_HALF_EVEN, Context, Decimal, InvalidOperation, localcontext
from typing import Final

# =============================================================================
# DECIMAL CONTEXT
# =============================================================================

# Точность с запасом: повторное деление пополам добавляет по одному знаку,
# jitter из random() даёт до ~53 значащих цифр
DECIMAL_PRECISION: Final[int] = 80

DECIMAL_CONTEXT: Final[Context] = Context(prec=DECIMAL_PRECISION, rounding=ROUND_HALF_EVEN)

ZERO: Final[Decimal] = Decimal(0)

# =============================================================================
# ПАРАМЕТРЫ ГЕНЕРАЦИИ
# =============================================================================

# Шаг по умолчанию для пустого списка и вставки в конец
STEP_SIZE: Final[Decimal] = Decimal("0.001")

# Максимальный jitter для пустого списка и вставки в конец
BOUNDARY_JITTER: Final[Decimal] = Decimal("0.0001")

# Gap, ниже которого jitter не применяется (точный midpoint)
MIN_SAFE_GAP: Final[Decimal] = Decimal("1e-10")

# Epsilon-отступ от границ для кандидата с jitter
BOUNDARY_EPS: Final[Decimal] = Decimal("1e-15")

# Минимальная точность форматирования
BOUNDARY_PLACES: Final[int] = 10
BETWEEN_PLACES: Final[int] = 15
RELOCATION_PLACES: Final[int] = 5


# =============================================================================
# КОНВЕРСИЯ
# =============================================================================


def to_decimal(value: str | int | float | Decimal) -> Decimal:
    """
    Конверсия входного значения в конечный Decimal.

    Строки парсятся точно; float конвертируется через repr, чтобы получить
    ту же десятичную запись, что видит пользователь.

    Args:
        value: Строка, int, float или Decimal

    Returns:
        Конечный Decimal

    Raises:
        ValueError: Если строку нельзя распарсить или значение NaN/Inf
        TypeError: Если тип не поддерживается

    Examples:
        >>> to_decimal("0.001")
        Decimal('0.001')
        >>> to_decimal(0.1)
        Decimal('0.1')
    """
    if isinstance(value, bool):
        raise TypeError(f"Cannot convert bool to Decimal: {value!r}")

    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, int):
        result = Decimal(value)
    elif isinstance(value, float):
        result = Decimal(repr(value))
    elif isinstance(value, str):
        try:
            result = Decimal(value.strip())
        except InvalidOperation:
            raise ValueError(f"Not a decimal number: {value!r}") from None
    else:
        raise TypeError(f"Cannot convert {type(value).__name__} to Decimal: {value!r}")

    if not result.is_finite():
        raise ValueError(f"Value must be finite (not NaN/Inf), got {value!r}")

    return result


def decimal_places(value: Decimal) -> int:
    """Количество знаков после точки в записи value (0 для целых)."""
    return max(0, -value.as_tuple().exponent)


# =============================================================================
# ФОРМАТИРОВАНИЕ
# =============================================================================


def quantize_places(value: Decimal, places: int) -> Decimal:
    """
    Округление до places знаков после точки (ROUND_HALF_EVEN).

    Args:
        value: Исходное значение
        places: Количество знаков после точки (>= 0)

    Returns:
        Округлённое значение с exponent == -places
    """
    if places < 0:
        raise ValueError(f"places must be non-negative, got {places}")

    # Точности контекста должно хватить на все цифры результата
    required = max(DECIMAL_PRECISION, value.adjusted() + places + 2)

    with localcontext(DECIMAL_CONTEXT) as ctx:
        ctx.prec = required
        return value.quantize(Decimal(1).scaleb(-places))


def format_fixed(value: Decimal, places: int) -> str:
    """
    Fixed-point строка с ровно places знаками после точки.

    Examples:
        >>> format_fixed(Decimal("0.0005"), 10)
        '0.0005000000'
        >>> format_fixed(Decimal("0.0015"), 15)
        '0.001500000000000'
    """
    return f"{quantize_places(value, places):f}"


def format_within(
    value: Decimal,
    places: int,
    lower: Decimal | None = None,
    upper: Decimal | None = None,
) -> str:
    """
    Форматирование с адаптивной точностью внутри открытого интервала.

    Начинает с places знаков и добавляет знаки, пока округлённое значение
    не окажется строго внутри (lower, upper). Если value сам строго внутри,
    процесс завершается не позже точной записи value.

    Args:
        value: Значение для форматирования
        places: Минимальное количество знаков после точки
        lower: Нижняя граница (optional, не включается)
        upper: Верхняя граница (optional, не включается)

    Returns:
        Fixed-point строка, значение которой строго внутри (lower, upper)

    Raises:
        ValueError: Если value не лежит строго внутри (lower, upper)

    Examples:
        >>> format_within(Decimal("0.1234567890123455"), 15,
        ...               Decimal("0.123456789012345"), Decimal("0.123456789012346"))
        '0.1234567890123455'
    """
    if not is_strictly_between(value, lower, upper):
        raise ValueError(f"Value {value} is not strictly inside ({lower}, {upper})")

    exact_places = max(places, decimal_places(value))

    for current_places in range(places, exact_places + 1):
        rounded = quantize_places(value, current_places)
        if is_strictly_between(rounded, lower, upper):
            return f"{rounded:f}"

    # Недостижимо: при exact_places округление тождественно
    raise ValueError(f"Cannot format {value} inside ({lower}, {upper})")


# =============================================================================
# СРАВНЕНИЯ И ИНТЕРВАЛЫ
# =============================================================================


def is_strictly_between(
    value: Decimal,
    lower: Decimal | None = None,
    upper: Decimal | None = None,
) -> bool:
    """
    Проверка lower < value < upper; отсутствующая граница не ограничивает.

    Examples:
        >>> is_strictly_between(Decimal("0.0015"), Decimal("0.001"), Decimal("0.002"))
        True
        >>> is_strictly_between(Decimal("0.001"), Decimal("0.001"), None)
        False
    """
    if lower is not None and value <= lower:
        return False
    if upper is not None and value >= upper:
        return False
    return True


def exact_precision(*values: Decimal) -> int:
    """
    Точность контекста, при которой сумма, разность и половина values точны.

    Каждое деление пополам добавляет знак к записи индекса, поэтому после
    длинной цепочки вставок границы перерастают DECIMAL_PRECISION.

    Examples:
        >>> exact_precision(Decimal("0.001"), Decimal("0.002"))
        80
        >>> exact_precision(Decimal("1"), Decimal("1E-100"))
        103
    """
    top = max(value.adjusted() for value in values)
    bottom = min(value.as_tuple().exponent for value in values)
    return max(DECIMAL_PRECISION, top - bottom + 3)


def is_inside_with_margin(value: Decimal, lower: Decimal, upper: Decimal, eps: Decimal) -> bool:
    """Проверка lower + eps < value < upper - eps."""
    with localcontext(DECIMAL_CONTEXT) as ctx:
        ctx.prec = exact_precision(lower, upper, eps)
        return lower + eps < value < upper - eps


def midpoint(lower: Decimal, upper: Decimal) -> Decimal:
    """
    Точный midpoint двух Decimal.

    Точность контекста расширяется под все знаки обеих границ.

    Examples:
        >>> midpoint(Decimal("0.001"), Decimal("0.002"))
        Decimal('0.0015')
    """
    with localcontext(DECIMAL_CONTEXT) as ctx:
        ctx.prec = exact_precision(lower, upper)
        return lower + (upper - lower) / 2


def relocation_places(step: Decimal, min_places: int = RELOCATION_PLACES) -> int:
    """
    Точность для равномерного распределения с шагом step.

    Разрешение 10^-places не превышает step / 10, поэтому округление позиции
    сдвигает её меньше чем на 5% шага, а добавленный суффикс — меньше чем на 10%.

    Args:
        step: Шаг между соседними позициями (> 0)
        min_places: Минимальное количество знаков (default: RELOCATION_PLACES)

    Returns:
        Количество знаков после точки

    Examples:
        >>> relocation_places(Decimal("0.0006666"))
        5
        >>> relocation_places(Decimal("1e-9"))
        10
    """
    if step <= 0:
        raise ValueError(f"step must be positive, got {step}")

    with localcontext(DECIMAL_CONTEXT):
        resolution = step / 10

    return max(min_places, -resolution.adjusted())


# =============================================================================
# ВАЛИДАЦИЯ И ПРОВЕРКИ
# =============================================================================


def validate_positive(value: Decimal, name: str) -> None:
    """
    Валидация, что значение положительное.

    Raises:
        ValueError: Если value <= 0 или NaN/Inf
    """
    if not value.is_finite():
        raise ValueError(f"{name} must be finite (not NaN/Inf), got {value}")

    if value <= 0:
        raise ValueError(f"{name} must be positive, got {value}")


def validate_in_range(
    value: Decimal | int,
    name: str,
    min_value: Decimal | int | None = None,
    max_value: Decimal | int | None = None,
) -> None:
    """
    Валидация, что значение в заданном диапазоне [min_value, max_value].

    Raises:
        ValueError: Если value вне диапазона
    """
    if min_value is not None and value < min_value:
        raise ValueError(f"{name} must be >= {min_value}, got {value}")

    if max_value is not None and value > max_value:
        raise ValueError(f"{name} must be <= {max_value}, got {value}")
