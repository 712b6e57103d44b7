"""
RandomSource — Потокобезопасный источник псевдослучайных чисел

Генератор random.Random не защищён для одновременных вызовов из
нескольких потоков, поэтому каждый поток получает собственный
экземпляр (threading.local).

- random_int(min, max): целое в [min, max] включительно
- random_float(min, max): float в [min, max]
- Перевёрнутые границы переупорядочиваются
"""

import logging
import random
import threading
from dataclasses import dataclass
from typing import Optional

logger = logging.getLogger(__name__)

_thread_state = threading.local()


@dataclass(frozen=True)
class RandomConfig:
    """
    Конфигурация источника случайных чисел.

    seed=None — генератор инициализируется из системной энтропии.
    """

    seed: Optional[int] = None


def get_default_random_generator() -> random.Random:
    """Генератор текущего потока (создаётся при первом обращении)."""
    generator = getattr(_thread_state, "generator", None)
    if generator is None:
        generator = random.Random()
        _thread_state.generator = generator
    return generator


def seed_default_generator(seed: Optional[int]) -> None:
    """Переинициализация генератора текущего потока."""
    logger.info("Reseeding random generator of thread %s", threading.current_thread().name)
    get_default_random_generator().seed(seed)


def configure_random(config: RandomConfig) -> None:
    """Применение RandomConfig к генератору текущего потока."""
    seed_default_generator(config.seed)


def random_int(min_value: int, max_value: int) -> int:
    """
    Равномерное целое в [min_value, max_value] включительно.

    Examples:
        >>> random_int(3, 3)
        3
    """
    if max_value < min_value:
        min_value, max_value = max_value, min_value
    return get_default_random_generator().randint(min_value, max_value)


def random_float(min_value: float, max_value: float) -> float:
    """Равномерное значение в [min_value, max_value]."""
    if max_value < min_value:
        min_value, max_value = max_value, min_value
    return get_default_random_generator().uniform(min_value, max_value)
