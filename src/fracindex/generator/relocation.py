"""
Relocation Generator — индексы для перемещения N элементов в целевой gap

Режимы:
- distribute_evenly=False: делегирование в generate_bulk с теми же границами
- distribute_evenly=True: равномерная сетка внутри (start, end)

Равномерная сетка:
    start = prev (0, если prev отсутствует)
    end   = next (start + count * S, если next отсутствует)
    step  = (end - start) / (count + 1)
    slot_i = format(start + step * i) + suffix_i,  i = 1..count

Границы парсятся целиком (без усечения до фиксированного префикса), а точность
выбирается по величине step: разрешение 10^-places <= step / 10. Поэтому
соседние позиции никогда не совпадают после округления, и порядок слотов
не зависит от случайного суффикса.

Суффикс — случайное число из [suffix_min, suffix_max), дописанное после
последнего знака позиции. Он снижает вероятность совпадения индексов у двух
relocation-пакетов, нацеленных в один gap; значение позиции он сдвигает
меньше чем на одну единицу последнего знака.
"""

from decimal import Decimal, localcontext
from typing import Optional

from fracindex.core.domain.fractional_index import IndexLike, parse_bound
from fracindex.core.math.decimal_safeguards import (
    DECIMAL_CONTEXT,
    ZERO,
    exact_precision,
    format_fixed,
    relocation_places,
)
from fracindex.generator.bulk import generate_bulk
from fracindex.generator.config import DEFAULT_CONFIG, GeneratorConfig
from fracindex.generator.jitter import JitterSource, random_suffix, resolve_rng
from fracindex.generator.single import InvalidRange, generate_single


def generate_relocation(
    prev_index: IndexLike | None,
    next_index: IndexLike | None,
    count: int,
    distribute_evenly: bool = True,
    *,
    rng: Optional[JitterSource] = None,
    config: GeneratorConfig = DEFAULT_CONFIG,
) -> list[str]:
    """
    Генерация count индексов для перемещения элементов между prev и next.

    Args:
        prev_index: Индекс перед целевой позицией (None — начало списка)
        next_index: Индекс после целевой позиции (None — конец списка)
        count: Количество перемещаемых элементов (<= 0 → пустой список)
        distribute_evenly: Равномерная сетка (True) или цепочка generate_bulk (False)
        rng: Источник случайности
        config: Параметры генерации

    Returns:
        Список длины max(count, 0) в порядке возрастания

    Raises:
        InvalidRange: Если обе границы заданы и prev >= next
    """
    if count <= 0:
        return []

    source = resolve_rng(rng)

    if count == 1:
        return [generate_single(prev_index, next_index, rng=source, config=config)]

    if not distribute_evenly:
        return generate_bulk(prev_index, next_index, count, rng=source, config=config)

    return _distribute_evenly(prev_index, next_index, count, source, config)


def _distribute_evenly(
    prev_index: IndexLike | None,
    next_index: IndexLike | None,
    count: int,
    source: JitterSource,
    config: GeneratorConfig,
) -> list[str]:
    start, end = _resolve_span(prev_index, next_index, count, config)

    with localcontext(DECIMAL_CONTEXT) as ctx:
        # Позиции различимы на уровне step / 100 при любой длине границ
        ctx.prec = exact_precision(start, end) + len(str(count + 1)) + 3
        step = (end - start) / (count + 1)
        positions = [start + step * slot for slot in range(1, count + 1)]

    places = relocation_places(step, config.relocation_places)

    return [
        format_fixed(position, places)
        + random_suffix(source, config.suffix_min, config.suffix_max)
        for position in positions
    ]


def _resolve_span(
    prev_index: IndexLike | None,
    next_index: IndexLike | None,
    count: int,
    config: GeneratorConfig,
) -> tuple[Decimal, Decimal]:
    """Числовой интервал (start, end) для сетки с подстановкой отсутствующих границ."""
    start = parse_bound(prev_index)
    end = parse_bound(next_index)

    if start is not None and end is not None and end <= start:
        raise InvalidRange(prev_index, next_index)

    with localcontext(DECIMAL_CONTEXT):
        if start is None:
            if end is None or end > 0:
                start = ZERO
            else:
                # Неположительный next: сетка целиком ниже next
                start = end - config.step_size * (count + 1)
        if end is None:
            end = start + config.step_size * count

    return start, end
