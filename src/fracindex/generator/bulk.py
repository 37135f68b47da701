"""Bulk Index Generator — пакет индексов для вставки N элементов подряд.

Последовательная цепочка: первый индекс между prev и next, каждый следующий —
между предыдущим сгенерированным и тем же фиксированным next. Ребалансировки
нет: при больших count оставшийся gap сужается, и хвост пакета уходит в
ветку точного midpoint (без jitter). Это ожидаемая деградация, не ошибка.
"""

from typing import Optional

from fracindex.core.domain.fractional_index import IndexLike
from fracindex.generator.config import DEFAULT_CONFIG, GeneratorConfig
from fracindex.generator.jitter import JitterSource, resolve_rng
from fracindex.generator.single import generate_single


def generate_bulk(
    prev_index: IndexLike | None,
    next_index: IndexLike | None,
    count: int,
    *,
    rng: Optional[JitterSource] = None,
    config: GeneratorConfig = DEFAULT_CONFIG,
) -> list[str]:
    """
    Генерация count индексов между prev_index и next_index.

    Args:
        prev_index: Индекс перед позицией вставки (None — начало списка)
        next_index: Индекс после позиции вставки (None — конец списка)
        count: Количество индексов (<= 0 → пустой список)
        rng: Источник случайности
        config: Параметры генерации

    Returns:
        Строго возрастающий (численно) список длины max(count, 0)

    Raises:
        InvalidRange: Если обе границы заданы и prev >= next
    """
    if count <= 0:
        return []

    source = resolve_rng(rng)
    indexes: list[str] = []
    current_prev = prev_index

    for _ in range(count):
        new_index = generate_single(current_prev, next_index, rng=source, config=config)
        indexes.append(new_index)
        current_prev = new_index

    return indexes
