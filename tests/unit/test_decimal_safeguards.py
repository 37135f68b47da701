"""
Тесты для модуля Decimal Safeguards

Проверяет:
1. Конверсию входов в Decimal
2. Fixed-point форматирование
3. Адаптивную точность (format_within)
4. Интервальные проверки и midpoint
5. Точность равномерной сетки
6. Валидацию параметров
"""

from decimal import Decimal

import pytest

from fracindex.core.math.decimal_safeguards import (
    BETWEEN_PLACES,
    BOUNDARY_EPS,
    BOUNDARY_PLACES,
    MIN_SAFE_GAP,
    RELOCATION_PLACES,
    STEP_SIZE,
    decimal_places,
    exact_precision,
    format_fixed,
    format_within,
    is_inside_with_margin,
    is_strictly_between,
    midpoint,
    quantize_places,
    relocation_places,
    to_decimal,
    validate_in_range,
    validate_positive,
)

# =============================================================================
# КОНСТАНТЫ
# =============================================================================


class TestConstants:
    """Тесты значений по умолчанию"""

    def test_default_values(self) -> None:
        """Константы генерации"""
        assert STEP_SIZE == Decimal("0.001")
        assert MIN_SAFE_GAP == Decimal("1e-10")
        assert BOUNDARY_EPS == Decimal("1e-15")
        assert BOUNDARY_PLACES == 10
        assert BETWEEN_PLACES == 15
        assert RELOCATION_PLACES == 5


# =============================================================================
# ТЕСТЫ КОНВЕРСИИ
# =============================================================================


class TestToDecimal:
    """Тесты для to_decimal"""

    def test_string_parsed_exactly(self) -> None:
        """Строка парсится без потери точности"""
        assert to_decimal("0.001") == Decimal("0.001")
        assert to_decimal("0.123456789012345678") == Decimal("0.123456789012345678")

    def test_whitespace_stripped(self) -> None:
        """Пробелы по краям игнорируются"""
        assert to_decimal("  0.5 ") == Decimal("0.5")

    def test_float_uses_repr(self) -> None:
        """Float конвертируется через repr, без двоичного хвоста"""
        assert to_decimal(0.1) == Decimal("0.1")
        assert to_decimal(1e-05) == Decimal("0.00001")

    def test_int_and_decimal(self) -> None:
        """Int и Decimal принимаются как есть"""
        assert to_decimal(5) == Decimal(5)
        assert to_decimal(Decimal("0.25")) == Decimal("0.25")

    def test_garbage_string_raises(self) -> None:
        """Нечисловая строка вызывает ValueError"""
        with pytest.raises(ValueError, match="Not a decimal number"):
            to_decimal("abc")

    def test_nan_inf_rejected(self) -> None:
        """NaN/Inf не проходят конверсию"""
        with pytest.raises(ValueError, match="finite"):
            to_decimal("NaN")
        with pytest.raises(ValueError, match="finite"):
            to_decimal(float("inf"))

    def test_unsupported_types_raise(self) -> None:
        """Bool и прочие типы вызывают TypeError"""
        with pytest.raises(TypeError):
            to_decimal(True)
        with pytest.raises(TypeError):
            to_decimal([1])


class TestDecimalPlaces:
    """Тесты для decimal_places"""

    def test_fractional(self) -> None:
        assert decimal_places(Decimal("0.001")) == 3
        assert decimal_places(Decimal("0.001500000000000")) == 15

    def test_integers(self) -> None:
        assert decimal_places(Decimal("10")) == 0
        assert decimal_places(Decimal("1E+2")) == 0


# =============================================================================
# ТЕСТЫ ФОРМАТИРОВАНИЯ
# =============================================================================


class TestFormatFixed:
    """Тесты для format_fixed и quantize_places"""

    def test_pads_with_zeros(self) -> None:
        """Недостающие знаки дополняются нулями"""
        assert format_fixed(Decimal("0.0005"), 10) == "0.0005000000"
        assert format_fixed(Decimal("0.0015"), 15) == "0.001500000000000"

    def test_rounds_extra_digits(self) -> None:
        """Лишние знаки округляются"""
        assert format_fixed(Decimal("0.00123456789012345678"), 15) == "0.001234567890123"

    def test_half_even_rounding(self) -> None:
        """Округление ROUND_HALF_EVEN"""
        assert format_fixed(Decimal("0.25"), 1) == "0.2"
        assert format_fixed(Decimal("0.35"), 1) == "0.4"
        assert format_fixed(Decimal("-1.5"), 0) == "-2"

    def test_no_exponent_in_output(self) -> None:
        """Результат никогда не содержит экспоненту"""
        assert format_fixed(Decimal("1E-12"), 12) == "0.000000000001"
        assert "E" not in format_fixed(Decimal("1E+3"), 2)

    def test_negative_places_raises(self) -> None:
        with pytest.raises(ValueError, match="places must be non-negative"):
            quantize_places(Decimal("1"), -1)


class TestFormatWithin:
    """Тесты для format_within (адаптивная точность)"""

    def test_minimum_precision_when_safe(self) -> None:
        """Достаточно минимальной точности"""
        result = format_within(Decimal("0.00055"), 10, Decimal(0), Decimal("0.001"))
        assert result == "0.0005500000"

    def test_extends_precision_near_upper_bound(self) -> None:
        """Округление на верхнюю границу → добавляется знак"""
        result = format_within(
            Decimal("0.1234567890123455"),
            15,
            Decimal("0.123456789012345"),
            Decimal("0.123456789012346"),
        )
        assert result == "0.1234567890123455"

    def test_extends_precision_near_zero(self) -> None:
        """Малое значение не округляется в ноль"""
        result = format_within(Decimal("0.0000000000005"), 10, Decimal(0), None)
        assert result == "0.0000000000005"
        assert Decimal(result) > 0

    def test_unbounded(self) -> None:
        """Без границ используется минимальная точность"""
        assert format_within(Decimal("1.23456789012"), 10) == "1.2345678901"

    def test_value_outside_raises(self) -> None:
        """Значение вне интервала вызывает ValueError"""
        with pytest.raises(ValueError, match="not strictly inside"):
            format_within(Decimal("0.002"), 15, Decimal("0.001"), Decimal("0.002"))
        with pytest.raises(ValueError, match="not strictly inside"):
            format_within(Decimal("0.0005"), 10, Decimal("0.001"), None)


# =============================================================================
# ТЕСТЫ ИНТЕРВАЛОВ
# =============================================================================


class TestIntervals:
    """Тесты для is_strictly_between, is_inside_with_margin, midpoint"""

    def test_strictly_between(self) -> None:
        assert is_strictly_between(Decimal("0.0015"), Decimal("0.001"), Decimal("0.002"))
        assert not is_strictly_between(Decimal("0.001"), Decimal("0.001"), Decimal("0.002"))
        assert not is_strictly_between(Decimal("0.002"), Decimal("0.001"), Decimal("0.002"))

    def test_missing_bounds_do_not_constrain(self) -> None:
        assert is_strictly_between(Decimal("-5"))
        assert is_strictly_between(Decimal("5"), lower=Decimal("1"))
        assert is_strictly_between(Decimal("-5"), upper=Decimal("1"))

    def test_margin(self) -> None:
        """Epsilon-отступ от обеих границ"""
        lower, upper, eps = Decimal("0.001"), Decimal("0.002"), Decimal("1e-15")
        assert is_inside_with_margin(Decimal("0.0015"), lower, upper, eps)
        assert not is_inside_with_margin(lower + eps, lower, upper, eps)
        assert not is_inside_with_margin(upper - eps, lower, upper, eps)

    def test_midpoint_exact(self) -> None:
        """Midpoint точный, без округления"""
        assert midpoint(Decimal("0.001"), Decimal("0.002")) == Decimal("0.0015")
        assert midpoint(
            Decimal("0.123456789012345"), Decimal("0.123456789012346")
        ) == Decimal("0.1234567890123455")

    def test_midpoint_large_magnitude(self) -> None:
        """Большие значения не теряют младшие знаки"""
        assert midpoint(
            Decimal("999999.999999998"), Decimal("999999.999999999")
        ) == Decimal("999999.9999999985")

    def test_midpoint_beyond_context_precision(self) -> None:
        """Границы длиннее DECIMAL_PRECISION: midpoint строго внутри"""
        lower = Decimal("0.000" + "9" * 120)
        upper = Decimal("0.001")
        result = midpoint(lower, upper)

        assert lower < result < upper
        assert result == Decimal("0.000" + "9" * 120 + "5")

    def test_margin_beyond_context_precision(self) -> None:
        """Epsilon-отступ не теряется на длинных границах"""
        lower = Decimal("0.001" + "0" * 100 + "1")
        upper = Decimal("0.002")
        eps = Decimal("1e-15")
        on_margin = Decimal("0.001000000000001" + "0" * 88 + "1")  # ровно lower + eps
        assert not is_inside_with_margin(on_margin, lower, upper, eps)
        assert is_inside_with_margin(Decimal("0.0015"), lower, upper, eps)


class TestExactPrecision:
    """Тесты для exact_precision"""

    def test_short_values_use_context_precision(self) -> None:
        assert exact_precision(Decimal("0.001"), Decimal("0.002")) == 80

    def test_long_values_widen_precision(self) -> None:
        """Точность покрывает все знаки от старшего до младшего"""
        assert exact_precision(Decimal("1"), Decimal("1E-100")) == 103
        assert exact_precision(Decimal("0.000" + "9" * 120), Decimal("0.001")) == 123


class TestRelocationPlaces:
    """Тесты для relocation_places"""

    def test_minimum_places(self) -> None:
        """Крупный шаг → минимальная точность"""
        assert relocation_places(Decimal("0.0006666")) == 5
        assert relocation_places(Decimal("100")) == 5

    def test_fine_step(self) -> None:
        """Мелкий шаг → разрешение не хуже step / 10"""
        assert relocation_places(Decimal("1e-9")) == 10
        places = relocation_places(Decimal("1.7e-16"))
        assert Decimal(1).scaleb(-places) <= Decimal("1.7e-16") / 10

    def test_custom_minimum(self) -> None:
        assert relocation_places(Decimal("0.1"), min_places=8) == 8

    def test_non_positive_step_raises(self) -> None:
        with pytest.raises(ValueError, match="step must be positive"):
            relocation_places(Decimal(0))


# =============================================================================
# ТЕСТЫ ВАЛИДАЦИИ
# =============================================================================


class TestValidation:
    """Тесты валидации параметров"""

    def test_validate_positive(self) -> None:
        validate_positive(Decimal("0.001"), "step_size")
        with pytest.raises(ValueError, match="step_size must be positive"):
            validate_positive(Decimal(0), "step_size")
        with pytest.raises(ValueError, match="finite"):
            validate_positive(Decimal("NaN"), "step_size")

    def test_validate_in_range(self) -> None:
        validate_in_range(Decimal("0.25"), "fraction", 0, 1)
        with pytest.raises(ValueError, match="fraction must be >= 0"):
            validate_in_range(Decimal("-0.1"), "fraction", 0, 1)
        with pytest.raises(ValueError, match="fraction must be <= 1"):
            validate_in_range(Decimal("1.5"), "fraction", 0, 1)
