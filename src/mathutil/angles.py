"""
Angles — Периодическая арифметика углов

Модуль работает с углами в градусах на цикле 360°:
- Нормализация в (base, base + 360] одним вычислением fmod
- Кратчайшая знаковая разность углов в (-180, 180]
- Приближение и интерполяция по кратчайшей дуге
- Проверка попадания в дугу и clamp к дуге

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. normalize_angle идемпотентна: normalize_angle(normalize_angle(x)) == normalize_angle(x)
2. angle_difference(a, b) == -angle_difference(b, a)
3. Стоимость O(1) для любых конечных входов (без циклов по оборотам)
4. Нечисловые входы (NaN / ±inf) дают NaN, а не исключение
5. approach_angle и lerp_angle(t=1) достигают эквивалента b точно, в том числе в пол-оборота
"""

import math
from typing import Final

from src.mathutil.scalar import clamp

# =============================================================================
# ПАРАМЕТРЫ
# =============================================================================

# Полный оборот (градусы)
FULL_TURN_DEG: Final[float] = 360.0

# Пол-оборота (градусы)
HALF_TURN_DEG: Final[float] = 180.0

# База нормализации по умолчанию: результат в (-180, 180]
DEFAULT_ANGLE_BASE: Final[float] = -HALF_TURN_DEG

# Разность ровно в пол-оборота: наибольшее значение строго меньше 180
HALF_TURN_TIE_DEG: Final[float] = math.nextafter(HALF_TURN_DEG, 0.0)


# =============================================================================
# НОРМАЛИЗАЦИЯ
# =============================================================================


def normalize_angle(angle: float, base: float = DEFAULT_ANGLE_BASE) -> float:
    """
    Нормализация угла в полуинтервал (base, base + 360].

    fmod точен, поэтому углы, уже лежащие в интервале, возвращаются
    без изменений, а огромные по модулю углы не требуют циклов.

    Args:
        angle: Угол (градусы)
        base: Нижняя (исключённая) граница интервала (default: -180)

    Returns:
        Угол в (base, base + 360] или NaN для нечисловых входов

    Examples:
        >>> normalize_angle(190.0)
        -170.0
        >>> normalize_angle(-180.0)
        180.0
        >>> normalize_angle(-90.0, base=0.0)
        270.0
    """
    if not (math.isfinite(angle) and math.isfinite(base)):
        return math.nan

    r = math.fmod(angle, FULL_TURN_DEG)
    r += FULL_TURN_DEG * math.floor((base + FULL_TURN_DEG - r) / FULL_TURN_DEG)

    # Поправка на округление при больших base
    if r <= base:
        r += FULL_TURN_DEG
    elif r > base + FULL_TURN_DEG:
        r -= FULL_TURN_DEG
    return r


def _wrap_full_turn(angle: float) -> float:
    """Угол в [0, 360)."""
    r = math.fmod(angle, FULL_TURN_DEG)
    if r < 0.0:
        r += FULL_TURN_DEG
    if r >= FULL_TURN_DEG:
        r = 0.0
    return r


# =============================================================================
# РАЗНОСТЬ, ПРИБЛИЖЕНИЕ, ИНТЕРПОЛЯЦИЯ
# =============================================================================


def angle_difference(a: float, b: float) -> float:
    """
    Кратчайшая знаковая разность от a к b в (-180, 180].

    При разности ровно в пол-оборота направление неоднозначно: прямое
    направление получает HALF_TURN_TIE_DEG, обратное — его отрицание,
    что сохраняет антисимметрию и диапазон (-180, 180].

    Examples:
        >>> angle_difference(170.0, -170.0)
        20.0
        >>> angle_difference(-170.0, 170.0)
        -20.0
    """
    raw = b - a
    delta = normalize_angle(raw)
    if delta == HALF_TURN_DEG:
        return HALF_TURN_TIE_DEG if raw >= 0.0 else -HALF_TURN_TIE_DEG
    return delta


def approach_angle(a: float, b: float, max_delta: float) -> float:
    """
    Сдвиг угла a к b по кратчайшей дуге не более чем на |max_delta|.

    Если b достижим за один шаг, возвращается a + normalize_angle(b - a):
    эквивалент b достигается точно, в том числе при разности в пол-оборота.

    Examples:
        >>> approach_angle(0.0, 170.0, 200.0)
        170.0
        >>> approach_angle(0.0, 170.0, 10.0)
        10.0
        >>> approach_angle(170.0, -170.0, 5.0)
        175.0
    """
    step = abs(max_delta)
    diff = angle_difference(a, b)
    if abs(diff) <= step:
        return a + normalize_angle(b - a)
    return a + clamp(diff, -step, step)


def lerp_angle(a: float, b: float, t: float) -> float:
    """
    Интерполяция от a к b по кратчайшей дуге.

    t не ограничивается [0, 1]: t > 1 и t < 0 экстраполируют вдоль той же дуги.
    При t == 1 результат совпадает с эквивалентом b.
    """
    diff = angle_difference(a, b)
    if abs(diff) == HALF_TURN_TIE_DEG:
        # Точные пол-оборота в направлении, выбранном angle_difference
        diff = math.copysign(HALF_TURN_DEG, diff)
    return a + diff * t


# =============================================================================
# ДУГИ
# =============================================================================


def is_angle_in_range(angle: float, min_angle: float, max_angle: float) -> bool:
    """
    Проверка, что angle лежит на дуге от min_angle до max_angle (против часовой).

    Смещения границ относительно angle нормализуются так, что смещение
    min_angle лежит в (-360, 0], а смещение max_angle отличается от него
    на ширину дуги; угол на дуге, если ноль лежит между ними.

    - max_angle - min_angle >= 360: полный круг, всегда True
    - min_angle == max_angle: дуга из одной точки
    """
    if max_angle - min_angle >= FULL_TURN_DEG:
        return True

    span = _wrap_full_turn(max_angle - min_angle)
    offset_min = -_wrap_full_turn(angle - min_angle)
    offset_max = offset_min + span
    return offset_min <= 0.0 <= offset_max


def clamp_angle(angle: float, min_angle: float, max_angle: float) -> float:
    """
    Clamp угла к дуге [min_angle, max_angle].

    Returns:
        angle без изменений, если он на дуге; иначе ближайшая по кругу
        граница (max_angle при равенстве расстояний)

    Examples:
        >>> clamp_angle(0.0, -45.0, 45.0)
        0.0
        >>> clamp_angle(60.0, -45.0, 45.0)
        45.0
        >>> clamp_angle(-100.0, -45.0, 45.0)
        -45.0
    """
    if is_angle_in_range(angle, min_angle, max_angle):
        return angle
    to_min = abs(angle_difference(angle, min_angle))
    to_max = abs(angle_difference(angle, max_angle))
    if to_min < to_max:
        return min_angle
    return max_angle
