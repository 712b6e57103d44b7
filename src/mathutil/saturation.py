"""
Saturating Conversion — Безопасное сужение числовых типов

Модуль конвертирует значение одного числового типа в диапазон другого,
ограничивая (clamp) выход за границы вместо переполнения:
- integral → integral: точное сравнение с границами целевого типа
- floating → floating: сравнение с границами и округление до точности цели
- смешанные пары: точное сравнение int/float в Python как общий широкий тип,
  floating → integral усекается к нулю после clamp

ЗАПРЕЩЁННЫЕ ПАРЫ:
В пределах одного домена самый широкий тип (UINT64, LONG_DOUBLE) не может
быть ни источником, ни целью: он не помещается в промежуточный тип.
make_limiter проверяет пару один раз при создании конвертера, поэтому
конвертеры, созданные на уровне модуля, отклоняют пару при импорте.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Результат всегда в [target.min_value, target.max_value] (кроме NaN для floating цели)
2. Значения, представимые в целевом типе, возвращаются без изменений
3. NaN → 0 для integral цели, NaN → NaN для floating цели
"""

import logging
import math
import struct
from typing import Callable, Optional

from src.mathutil.numeric_types import (
    FLOAT32,
    FLOAT64,
    FLOAT64_MAX,
    INT64,
    NumericType,
)

logger = logging.getLogger(__name__)

Number = int | float


# =============================================================================
# EXCEPTIONS
# =============================================================================


class DisallowedNumericTypeError(TypeError):
    """
    Запрещённая пара типов для saturating-конверсии.

    Возникает, если в конверсии внутри одного домена участвует самый
    широкий тип (источник или цель), который нельзя расширить без потери
    точности.
    """

    pass


# =============================================================================
# ПРОВЕРКА ПАР ТИПОВ
# =============================================================================


def is_allowed_pair(source: NumericType, target: NumericType) -> bool:
    """
    Проверка, допустима ли пара source → target.

    Args:
        source: Тип исходного значения
        target: Целевой тип

    Returns:
        False если оба типа одного домена и хотя бы один из них самый широкий
    """
    if source.kind is not target.kind:
        return True
    return not (source.is_widest or target.is_widest)


def check_pair(source: NumericType, target: NumericType) -> None:
    """
    Валидация пары source → target.

    Raises:
        DisallowedNumericTypeError: Если пара запрещена
    """
    if is_allowed_pair(source, target):
        return
    widest = source if source.is_widest else target
    role = "source" if widest is source else "target"
    raise DisallowedNumericTypeError(
        f"Type not allowed as {role}: '{widest}' "
        f"(limit {source} -> {target} exceeds the widening type)"
    )


def infer_source_type(value: Number) -> NumericType:
    """
    Тип источника по Python-значению: int → INT64, float → FLOAT64.

    Raises:
        TypeError: Если значение не int/float (bool отклоняется)
    """
    if isinstance(value, bool):
        raise TypeError("limit does not accept bool values")
    if isinstance(value, int):
        return INT64
    if isinstance(value, float):
        return FLOAT64
    raise TypeError(f"limit expects int or float, got {type(value).__name__}")


# =============================================================================
# КОНВЕРСИЯ
# =============================================================================


def _round_to_precision(value: float, target: NumericType) -> float:
    """Округление binary64 до точности целевого floating типа."""
    if target.bits == FLOAT32.bits:
        return struct.unpack("<f", struct.pack("<f", value))[0]
    # binary64 и extended precision хранятся в Python float
    return value


def _convert(value: Number, target: NumericType) -> Number:
    if isinstance(value, float) and math.isnan(value):
        return math.nan if target.is_floating else 0

    lo = target.min_value
    hi = target.max_value
    if target.is_floating:
        # Результат хранится в Python float
        lo = max(lo, -FLOAT64_MAX)
        hi = min(hi, FLOAT64_MAX)

    if value > hi:
        logger.debug("limit: %r saturated to %s max %r", value, target, hi)
        clamped = hi
    elif value < lo:
        logger.debug("limit: %r saturated to %s min %r", value, target, lo)
        clamped = lo
    else:
        clamped = value

    if target.is_integral:
        # Усечение к нулю, как при static_cast
        return int(clamped)
    return _round_to_precision(float(clamped), target)


def _check_value(value: Number, source: NumericType) -> None:
    infer_source_type(value)
    if source.is_integral and not isinstance(value, int):
        raise TypeError(
            f"value for integral source {source} must be an int, got {type(value).__name__}"
        )
    # ±inf и NaN допустимы для floating источника
    special = isinstance(value, float) and not math.isfinite(value)
    if not special and not source.contains(value):
        raise ValueError(
            f"value must be in [{source.min_value}, {source.max_value}] ({source}), got {value}"
        )


def limit(
    value: Number,
    target: NumericType,
    source: Optional[NumericType] = None,
) -> Number:
    """
    Saturating-конверсия value в диапазон target.

    Args:
        value: Исходное значение (int или float)
        target: Целевой тип
        source: Тип источника (default: INT64 для int, FLOAT64 для float)

    Returns:
        int для integral цели, float для floating цели

    Raises:
        DisallowedNumericTypeError: Если пара source → target запрещена
        TypeError: Если value не int/float или не соответствует source
        ValueError: Если value вне диапазона явно заданного source

    Examples:
        >>> limit(300, INT8)
        127
        >>> limit(-300, INT8)
        -128
        >>> limit(-1, UINT8)
        0
        >>> limit(3.7, INT32)
        3
    """
    if source is None:
        source = infer_source_type(value)
    else:
        _check_value(value, source)
    check_pair(source, target)
    return _convert(value, target)


def make_limiter(source: NumericType, target: NumericType) -> Callable[[Number], Number]:
    """
    Создание конвертера для фиксированной пары source → target.

    Пара проверяется один раз при создании, а не при каждом вызове.

    Args:
        source: Тип исходных значений
        target: Целевой тип

    Returns:
        Функция value → saturated value

    Raises:
        DisallowedNumericTypeError: Если пара запрещена
    """
    check_pair(source, target)

    def limiter(value: Number) -> Number:
        _check_value(value, source)
        return _convert(value, target)

    limiter.__name__ = f"limit_{source}_to_{target}"
    limiter.__qualname__ = limiter.__name__
    return limiter
