"""
Single Index Generator — один fractional index между двумя границами

Четыре случая по наличию границ:
- нет prev, нет next: пустой список, baseline = S/2 + jitter [0, empty_jitter)
- нет prev: начало списка, baseline = min(S/2, next/2) + jitter [0, 10% baseline)
- нет next: конец списка, baseline = prev + S + jitter [0, tail_jitter)
- обе границы: вставка между элементами (критический путь)

Вставка между элементами:
1. gap = next - prev; gap <= 0 → InvalidRange (единственная ошибка генератора)
2. gap <= min_safe_gap → точный midpoint без jitter
3. candidate = midpoint + jitter, jitter равномерно в [-25% gap, +25% gap]
4. Boundary guard: candidate <= prev + eps или >= next - eps → midpoint
   (структурированное событие в результате + WARNING в logging)
5. Форматирование: 15 знаков для вставки между границами, 10 для остальных.
   Точность минимальная: если округление попадает на границу, добавляются знаки.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Обе границы: prev < result < next (численно)
2. Только next > 0: 0 < result < next
3. Только prev: result > prev
"""

import logging
from dataclasses import dataclass
from decimal import Decimal, localcontext
from enum import Enum
from typing import Optional

from fracindex.core.domain.fractional_index import IndexLike, parse_bound
from fracindex.core.math.decimal_safeguards import (
    DECIMAL_CONTEXT,
    ZERO,
    exact_precision,
    format_within,
    is_inside_with_margin,
    midpoint,
)
from fracindex.generator.config import DEFAULT_CONFIG, GeneratorConfig
from fracindex.generator.jitter import JitterSource, resolve_rng, uniform_decimal

logger = logging.getLogger(__name__)


# =============================================================================
# EXCEPTIONS
# =============================================================================


class InvalidRange(ValueError):
    """
    Невалидный диапазон: обе границы заданы и prev >= next (численно).

    Единственная ошибка генерации. Все остальные граничные случаи
    (малый gap, выход jitter за границы) обрабатываются внутри генератора.
    """

    def __init__(self, prev_index: IndexLike, next_index: IndexLike):
        self.prev_index = prev_index
        self.next_index = next_index
        super().__init__(
            f"Invalid range: prev_index ({prev_index}) must be less than "
            f"next_index ({next_index})"
        )


# =============================================================================
# RESULT
# =============================================================================


class IndexStrategy(str, Enum):
    """Путь генерации, по которому получен индекс."""

    EMPTY = "empty"
    HEAD = "head"
    TAIL = "tail"
    BETWEEN = "between"
    BETWEEN_TINY_GAP = "between_tiny_gap"
    BETWEEN_FALLBACK = "between_fallback"


@dataclass(frozen=True)
class IndexGenerationResult:
    """Результат генерации одного индекса."""

    index: str
    strategy: IndexStrategy
    jitter_applied: bool

    # Диагностика
    fallback_reason: str  # "" если fallback не было
    details: str

    @property
    def fallback_occurred(self) -> bool:
        return bool(self.fallback_reason)


# =============================================================================
# GENERATOR
# =============================================================================


def generate_index(
    prev_index: IndexLike | None = None,
    next_index: IndexLike | None = None,
    *,
    rng: Optional[JitterSource] = None,
    config: GeneratorConfig = DEFAULT_CONFIG,
) -> IndexGenerationResult:
    """
    Генерация одного индекса с диагностикой.

    Args:
        prev_index: Индекс перед позицией вставки (None — начало списка)
        next_index: Индекс после позиции вставки (None — конец списка)
        rng: Источник случайности (default: модульный random.Random)
        config: Параметры генерации

    Returns:
        IndexGenerationResult с индексом и использованной стратегией

    Raises:
        InvalidRange: Если обе границы заданы и prev >= next
        pydantic.ValidationError: Если граница не является десятичной записью

    Examples:
        >>> import random
        >>> result = generate_index("0.001", "0.002", rng=random.Random(7))
        >>> result.strategy
        <IndexStrategy.BETWEEN: 'between'>
    """
    lower = parse_bound(prev_index)
    upper = parse_bound(next_index)
    source = resolve_rng(rng)

    if lower is None and upper is None:
        return _generate_empty(source, config)
    if lower is None:
        return _generate_head(upper, source, config)
    if upper is None:
        return _generate_tail(lower, source, config)

    if upper <= lower:
        raise InvalidRange(prev_index, next_index)

    return _generate_between(lower, upper, source, config)


def generate_single(
    prev_index: IndexLike | None = None,
    next_index: IndexLike | None = None,
    *,
    rng: Optional[JitterSource] = None,
    config: GeneratorConfig = DEFAULT_CONFIG,
) -> str:
    """
    Генерация одного индекса между prev_index и next_index.

    Raises:
        InvalidRange: Если обе границы заданы и prev >= next
    """
    return generate_index(prev_index, next_index, rng=rng, config=config).index


# =============================================================================
# CASES
# =============================================================================


def _generate_empty(source: JitterSource, config: GeneratorConfig) -> IndexGenerationResult:
    with localcontext(DECIMAL_CONTEXT):
        baseline = config.step_size / 2
        value = baseline + uniform_decimal(source, ZERO, config.empty_jitter)

    return IndexGenerationResult(
        index=format_within(value, config.boundary_places, ZERO, config.step_size),
        strategy=IndexStrategy.EMPTY,
        jitter_applied=True,
        fallback_reason="",
        details=f"baseline={baseline}",
    )


def _generate_head(
    upper: Decimal, source: JitterSource, config: GeneratorConfig
) -> IndexGenerationResult:
    with localcontext(DECIMAL_CONTEXT):
        if upper > 0:
            baseline = min(config.step_size / 2, upper / 2)
            value = baseline + uniform_decimal(
                source, ZERO, baseline * config.head_jitter_fraction
            )
            lower = ZERO
        else:
            # Неположительный next: интервал (0, next) пуст, уходим ниже next
            baseline = upper - config.step_size
            value = baseline - uniform_decimal(source, ZERO, config.tail_jitter)
            lower = None

    return IndexGenerationResult(
        index=format_within(value, config.boundary_places, lower, upper),
        strategy=IndexStrategy.HEAD,
        jitter_applied=True,
        fallback_reason="",
        details=f"baseline={baseline}, next={upper}",
    )


def _generate_tail(
    lower: Decimal, source: JitterSource, config: GeneratorConfig
) -> IndexGenerationResult:
    with localcontext(DECIMAL_CONTEXT):
        baseline = lower + config.step_size
        value = baseline + uniform_decimal(source, ZERO, config.tail_jitter)

    return IndexGenerationResult(
        index=format_within(value, config.boundary_places, lower, None),
        strategy=IndexStrategy.TAIL,
        jitter_applied=True,
        fallback_reason="",
        details=f"baseline={baseline}, prev={lower}",
    )


def _generate_between(
    lower: Decimal, upper: Decimal, source: JitterSource, config: GeneratorConfig
) -> IndexGenerationResult:
    with localcontext(DECIMAL_CONTEXT) as ctx:
        ctx.prec = exact_precision(lower, upper)
        gap = upper - lower
        safe_midpoint = midpoint(lower, upper)

        if gap <= config.min_safe_gap:
            logger.debug(
                "Gap below min_safe_gap, using exact midpoint",
                extra={"gap": str(gap), "prev_bound": str(lower), "next_bound": str(upper)},
            )
            return IndexGenerationResult(
                index=format_within(safe_midpoint, config.between_places, lower, upper),
                strategy=IndexStrategy.BETWEEN_TINY_GAP,
                jitter_applied=False,
                fallback_reason="",
                details=f"gap={gap} <= min_safe_gap={config.min_safe_gap}",
            )

        spread = gap * config.between_jitter_fraction
        jitter = uniform_decimal(source, -spread, spread)

    with localcontext(DECIMAL_CONTEXT) as ctx:
        ctx.prec = exact_precision(safe_midpoint, jitter)
        candidate = safe_midpoint + jitter

    if not is_inside_with_margin(candidate, lower, upper, config.boundary_eps):
        logger.warning(
            "Boundary violation detected, using safe midpoint",
            extra={
                "candidate": str(candidate),
                "prev_bound": str(lower),
                "next_bound": str(upper),
            },
        )
        return IndexGenerationResult(
            index=format_within(safe_midpoint, config.between_places, lower, upper),
            strategy=IndexStrategy.BETWEEN_FALLBACK,
            jitter_applied=False,
            fallback_reason="boundary_violation",
            details=f"candidate={candidate} outside ({lower}, {upper}) with eps={config.boundary_eps}",
        )

    return IndexGenerationResult(
        index=format_within(candidate, config.between_places, lower, upper),
        strategy=IndexStrategy.BETWEEN,
        jitter_applied=True,
        fallback_reason="",
        details=f"gap={gap}, midpoint={safe_midpoint}",
    )
