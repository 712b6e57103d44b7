"""
Scalar — Скалярные математические примитивы

Тонкие обёртки над math и обобщённые скалярные функции:
- Сравнения с epsilon (is_zero), sign
- clamp, вариадические vmin / vmax / abs_max, approach
- Интерполяция: lerp, smooth_step, smoother_step
- Округление к целому с насыщением до INT32 / INT64
- Тригонометрия с защитой домена (asin/acos clamp, atan2 в начале координат)

Округление к целому использует limit, поэтому inf насыщается до границ
целевого типа, а NaN даёт 0.
"""

import math
from typing import Callable, Final, TypeVar

from src.mathutil.numeric_types import INT32, INT64
from src.mathutil.saturation import limit

T = TypeVar("T", int, float)


# =============================================================================
# ПАРАМЕТРЫ
# =============================================================================

# Epsilon-окрестность нуля для is_zero
EQN_EPS: Final[float] = 1e-9

# Ширина fixed-нотации при подсчёте знаков после запятой
DECIMALS_FIXED_DIGITS: Final[int] = 6


# =============================================================================
# СРАВНЕНИЯ
# =============================================================================


def is_zero(x: float, eps: float = EQN_EPS) -> bool:
    """
    Проверка, что x лежит в открытой окрестности нуля (-eps, eps).

    Examples:
        >>> is_zero(1e-10)
        True
        >>> is_zero(1e-9)
        False
    """
    return -eps < x < eps


def sign(v: float) -> int:
    """Знак: 1 для v >= 0 (включая ноль), иначе -1."""
    return 1 if v >= 0 else -1


def clamp(val: T, min_value: T, max_value: T) -> T:
    """
    Ограничение значения диапазоном [min_value, max_value].

    Границы не переупорядочиваются: при min_value > max_value
    приоритет у min_value.
    """
    if val < min_value:
        return min_value
    if val > max_value:
        return max_value
    return val


def vmin(*args: T) -> T:
    """Минимум аргументов (первый при равенстве)."""
    if not args:
        raise ValueError("vmin requires at least one argument")
    result = args[0]
    for arg in args[1:]:
        if arg < result:
            result = arg
    return result


def vmax(*args: T) -> T:
    """Максимум аргументов (первый при равенстве)."""
    if not args:
        raise ValueError("vmax requires at least one argument")
    result = args[0]
    for arg in args[1:]:
        if arg > result:
            result = arg
    return result


def abs_max(*args: T) -> T:
    """
    Аргумент с наибольшим модулем (знак сохраняется, первый при равенстве).

    Examples:
        >>> abs_max(3, -5, 4)
        -5
    """
    if not args:
        raise ValueError("abs_max requires at least one argument")
    result = args[0]
    for arg in args[1:]:
        if abs(arg) > abs(result):
            result = arg
    return result


def approach(val: T, tgt: T, inc: T) -> T:
    """
    Сдвиг val к tgt на |inc| без перескока цели.

    Examples:
        >>> approach(0.0, 10.0, 3.0)
        3.0
        >>> approach(9.0, 10.0, 3.0)
        10.0
        >>> approach(5.0, 0.0, -2.0)
        3.0
    """
    inc = abs(inc)
    if val < tgt:
        return min(val + inc, tgt)
    return max(val - inc, tgt)


# =============================================================================
# ИНТЕРПОЛЯЦИЯ
# =============================================================================


def lerp(start: float, end: float, t: float) -> float:
    """Линейная интерполяция start + t * (end - start); t не ограничивается."""
    return start + t * (end - start)


def smooth_step(edge0: float, edge1: float, x: float) -> float:
    """
    Smoothstep: 3x² - 2x³ после нормализации x в [0, 1].

    See https://en.wikipedia.org/wiki/Smoothstep
    """
    x = clamp((x - edge0) / (edge1 - edge0), 0.0, 1.0)
    return x * x * (3 - 2 * x)


def smoother_step(edge0: float, edge1: float, x: float) -> float:
    """Smootherstep (Perlin): 6x⁵ - 15x⁴ + 10x³ после нормализации x в [0, 1]."""
    x = clamp((x - edge0) / (edge1 - edge0), 0.0, 1.0)
    return x * x * x * (x * (x * 6 - 15) + 10)


def pow2(base: T) -> T:
    return base * base


def pow3(base: T) -> T:
    return pow2(base) * base


def pow4(base: T) -> T:
    return pow3(base) * base


# =============================================================================
# ОКРУГЛЕНИЕ
# =============================================================================


def _round_half_away(x: float) -> int:
    """Округление half away from zero (встроенный round — banker's)."""
    if x >= 0:
        return math.floor(x + 0.5)
    return math.ceil(x - 0.5)


def _to_int(value: float, rounder: Callable[[float], int], wide: bool) -> int:
    target = INT64 if wide else INT32
    if not math.isfinite(value):
        # inf → граница типа, NaN → 0
        return limit(float(value), target)
    return limit(rounder(value), target)


def ceil_to_int(x: float, wide: bool = False) -> int:
    """ceil(x), насыщенный до INT32 (INT64 при wide=True)."""
    return _to_int(x, math.ceil, wide)


def floor_to_int(x: float, wide: bool = False) -> int:
    """floor(x), насыщенный до INT32 (INT64 при wide=True)."""
    return _to_int(x, math.floor, wide)


def round_to_int(x: float, wide: bool = False) -> int:
    """
    Округление half away from zero, насыщенное до INT32 (INT64 при wide=True).

    Examples:
        >>> round_to_int(2.5)
        3
        >>> round_to_int(-2.5)
        -3
        >>> round_to_int(1e20)
        2147483647
    """
    return _to_int(x, lambda v: int(_round_half_away(v)), wide)


def round_to_places(v: float, places: int) -> float:
    """
    Округление до places знаков после запятой (half away from zero).

    Отрицательное places округляет до десятков, сотен и т.д.
    """
    scale = math.pow(10.0, places)
    scaled = v * scale
    if not math.isfinite(scaled):
        return v
    return _round_half_away(scaled) / scale


def get_number_of_decimals(f: float) -> int:
    """
    Число значащих знаков дробной части f.

    Дробная часть f - floor(f) форматируется в fixed-нотации с
    DECIMALS_FIXED_DIGITS знаками, хвостовые нули отбрасываются.

    Examples:
        >>> get_number_of_decimals(1.25)
        2
        >>> get_number_of_decimals(3.0)
        0
    """
    frac = f - math.floor(f)
    text = f"{frac:.{DECIMALS_FIXED_DIGITS}f}".rstrip("0")
    point = text.find(".")
    if point < 0:
        return 0
    return len(text) - point - 1


def get_number_of_times_dividable_by_x(v: float, x: float) -> int:
    """
    Сколько раз v делится на x: floor(log(v) / log(x)).

    Returns:
        0 для v <= 0 или x <= 1 (логарифм не определён или основание вырождено)
    """
    if v <= 0 or x <= 1:
        return 0
    return math.floor(math.log(v) / math.log(x))


# =============================================================================
# ТРИГОНОМЕТРИЯ
# =============================================================================


def deg_to_rad(deg: float) -> float:
    return (deg / 180.0) * math.pi


def rad_to_deg(rad: float) -> float:
    return (rad * 180.0) / math.pi


def sin(x: float) -> float:
    return math.sin(x)


def cos(x: float) -> float:
    return math.cos(x)


def tan(x: float) -> float:
    return math.tan(x)


def asin(x: float) -> float:
    """
    asin с clamp аргумента в [-1, 1].

    Аргументы чуть за пределами [-1, 1] из-за погрешности float
    не вызывают math domain error.
    """
    return math.asin(clamp(x, -1.0, 1.0))


def acos(x: float) -> float:
    """acos с clamp аргумента в [-1, 1]."""
    return math.acos(clamp(x, -1.0, 1.0))


def atan2(y: float, x: float) -> float:
    """atan2; в начале координат (0, 0) возвращает 0.0 независимо от знаков нулей."""
    if y == 0.0 and x == 0.0:
        return 0.0
    return math.atan2(y, x)


def sqrt(v: float) -> float:
    return math.sqrt(v)
