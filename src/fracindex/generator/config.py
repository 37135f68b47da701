"""Конфигурация генераторов fractional indexes.

Все числовые параметры хранятся как Decimal; значения float/str/int
конвертируются в __post_init__ через to_decimal.
"""

from dataclasses import dataclass
from decimal import Decimal

from fracindex.core.math.decimal_safeguards import (
    BETWEEN_PLACES,
    BOUNDARY_EPS,
    BOUNDARY_JITTER,
    BOUNDARY_PLACES,
    MIN_SAFE_GAP,
    RELOCATION_PLACES,
    STEP_SIZE,
    to_decimal,
    validate_in_range,
    validate_positive,
)

_DECIMAL_FIELDS = (
    "step_size",
    "empty_jitter",
    "tail_jitter",
    "head_jitter_fraction",
    "between_jitter_fraction",
    "min_safe_gap",
    "boundary_eps",
)


@dataclass(frozen=True)
class GeneratorConfig:
    """Параметры генерации.

    - step_size: шаг S для пустого списка (S/2) и вставки в конец (prev + S)
    - empty_jitter / tail_jitter: верхняя граница jitter [0, x)
    - head_jitter_fraction: jitter в начале списка, доля от baseline
    - between_jitter_fraction: jitter между границами, доля от gap в обе стороны
    - min_safe_gap: gap, ниже которого возвращается точный midpoint
    - boundary_eps: отступ от границ для кандидата с jitter
    - *_places: минимальная точность форматирования
    - suffix_min / suffix_max: диапазон суффикса relocation [min, max)
    """

    step_size: Decimal = STEP_SIZE
    empty_jitter: Decimal = BOUNDARY_JITTER
    tail_jitter: Decimal = BOUNDARY_JITTER
    head_jitter_fraction: Decimal = Decimal("0.1")
    between_jitter_fraction: Decimal = Decimal("0.25")
    min_safe_gap: Decimal = MIN_SAFE_GAP
    boundary_eps: Decimal = BOUNDARY_EPS
    boundary_places: int = BOUNDARY_PLACES
    between_places: int = BETWEEN_PLACES
    relocation_places: int = RELOCATION_PLACES
    suffix_min: int = 10000
    suffix_max: int = 99999

    def __post_init__(self) -> None:
        for name in _DECIMAL_FIELDS:
            object.__setattr__(self, name, to_decimal(getattr(self, name)))

        validate_positive(self.step_size, "step_size")
        validate_positive(self.min_safe_gap, "min_safe_gap")
        validate_positive(self.boundary_eps, "boundary_eps")
        validate_in_range(self.empty_jitter, "empty_jitter", min_value=0)
        validate_in_range(self.tail_jitter, "tail_jitter", min_value=0)
        validate_in_range(self.head_jitter_fraction, "head_jitter_fraction", 0, 1)
        # Jitter больше половины gap может вывести кандидата за границу
        validate_in_range(self.between_jitter_fraction, "between_jitter_fraction", 0, Decimal("0.5"))

        # Пустой список: S/2 + jitter должен остаться внутри (0, S)
        if self.empty_jitter >= self.step_size / 2:
            raise ValueError(
                f"empty_jitter {self.empty_jitter} must be below step_size / 2 ({self.step_size / 2})"
            )

        for name in ("boundary_places", "between_places"):
            validate_in_range(getattr(self, name), name, min_value=0)
        # Суффикс relocation дописывается после точки: хотя бы один знак дробной части
        validate_in_range(self.relocation_places, "relocation_places", min_value=1)

        # Суффикс фиксированной ширины: все значения с одинаковым числом цифр
        if self.suffix_min >= self.suffix_max:
            raise ValueError(f"suffix_min {self.suffix_min} must be below suffix_max {self.suffix_max}")
        if len(str(self.suffix_min)) != len(str(self.suffix_max - 1)) or self.suffix_min < 1:
            raise ValueError(
                f"suffix range [{self.suffix_min}, {self.suffix_max}) must hold positive numbers "
                f"of equal width"
            )


DEFAULT_CONFIG = GeneratorConfig()
