"""Источник случайности для jitter.

Генераторы никогда не обращаются к глобальному random напрямую: источник
передаётся явно (rng=...), иначе используется модульный экземпляр
random.Random. Для воспроизводимых тестов достаточно random.Random(seed).

Источник не потокобезопасен сам по себе: при общем rng между потоками
сериализация вызовов — ответственность вызывающего кода.
"""

import random
from decimal import Decimal, localcontext
from typing import Optional, Protocol

from fracindex.core.math.decimal_safeguards import DECIMAL_CONTEXT


class JitterSource(Protocol):
    """Минимальный интерфейс источника случайности (совместим с random.Random)."""

    def random(self) -> float:
        """Float в [0, 1)."""
        ...

    def randrange(self, start: int, stop: int) -> int:
        """Целое в [start, stop)."""
        ...


_DEFAULT_RNG = random.Random()


def resolve_rng(rng: Optional[JitterSource]) -> JitterSource:
    """Переданный источник или модульный по умолчанию."""
    return _DEFAULT_RNG if rng is None else rng


def uniform_decimal(rng: JitterSource, low: Decimal, high: Decimal) -> Decimal:
    """Равномерное значение в [low, high) как Decimal.

    Float из rng.random() переводится в Decimal точно, без округления.
    """
    draw = Decimal(rng.random())
    with localcontext(DECIMAL_CONTEXT):
        return low + (high - low) * draw


def random_suffix(rng: JitterSource, low: int, high: int) -> str:
    """Случайный числовой суффикс в [low, high) в виде строки цифр."""
    return str(rng.randrange(low, high))
