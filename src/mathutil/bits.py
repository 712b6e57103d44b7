"""
Bits — Степени двойки и битовые утилиты

Модуль реализует целочисленные операции над беззнаковыми значениями
фиксированной ширины:
- Округление до степеней двойки (next / previous)
- Разложение на степени двойки (PowerOfTwoSet)
- Выделение старшего установленного бита (bit-smear)
- Выравнивание смещений и привязка к сетке
- НОД / НОК

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. sum(get_power_of_2_values(v)) == v, элементы различны и убывают
2. next_power_of_2(0) == 1, previous_power_of_2(v <= 1) == 1
3. Деление на нулевой шаг (alignment, grid_size) никогда не выполняется
4. Результаты 64-битных операций ведут себя как uint64 (перенос за 2**64 → 0)
"""

from typing import Final

from src.mathutil.numeric_types import (
    INT32,
    UINT8,
    UINT16,
    UINT32,
    UINT64,
    NumericType,
    validate_unsigned,
)
from src.mathutil.saturation import limit
from src.mathutil.scalar import sign

# =============================================================================
# ПАРАМЕТРЫ
# =============================================================================

# Сдвиги bit-smear для каждой ширины: 1, 2, 4 / +8 / +16 / +32
SMEAR_SHIFTS: Final[dict[int, tuple[int, ...]]] = {
    UINT8.bits: (1, 2, 4),
    UINT16.bits: (1, 2, 4, 8),
    UINT32.bits: (1, 2, 4, 8, 16),
    UINT64.bits: (1, 2, 4, 8, 16, 32),
}

UINT64_MASK: Final[int] = UINT64.mask


# =============================================================================
# СТЕПЕНИ ДВОЙКИ
# =============================================================================


def next_power_of_2(v: int) -> int:
    """
    Наименьшая степень двойки >= v.

    Для v == 0 возвращается 1 (начальное значение аккумулятора).
    Для v > 2**63 результат не помещается в uint64 и переносится в 0.

    Examples:
        >>> next_power_of_2(0)
        1
        >>> next_power_of_2(5)
        8
        >>> next_power_of_2(8)
        8
    """
    validate_unsigned(v, "v")
    if v <= 1:
        return 1
    return (1 << (v - 1).bit_length()) & UINT64_MASK


def previous_power_of_2(v: int) -> int:
    """
    Наибольшая степень двойки <= v; 1 для v <= 1.

    Examples:
        >>> previous_power_of_2(5)
        4
        >>> previous_power_of_2(8)
        8
    """
    validate_unsigned(v, "v")
    if v <= 1:
        return 1
    return 1 << (v.bit_length() - 1)


def get_power_of_2_values(v: int) -> list[int]:
    """
    Разложение v на различные степени двойки (PowerOfTwoSet).

    Биты проверяются от старшей степени двойки вниз, поэтому результат
    упорядочен по убыванию. Число итераций не превышает 64.

    Args:
        v: Беззнаковое 64-битное значение

    Returns:
        Список степеней двойки, сумма которых равна v (пустой для v == 0)

    Examples:
        >>> get_power_of_2_values(13)
        [8, 4, 1]
        >>> get_power_of_2_values(0)
        []
    """
    validate_unsigned(v, "v")
    values: list[int] = []
    bit = previous_power_of_2(v) if v > 0 else 0
    while v > 0 and bit > 0:
        if v & bit:
            values.append(bit)
            v &= ~bit
        bit >>= 1
    return values


def get_highest_bit(n: int, width: NumericType = UINT64) -> int:
    """
    Выделение старшего установленного бита n.

    Все биты ниже старшего "размазываются" каскадом OR-сдвигов, после чего
    n - (n >> 1) оставляет только старший бит.

    Args:
        n: Значение в диапазоне width
        width: Беззнаковый целый тип (UINT8 / UINT16 / UINT32 / UINT64)

    Returns:
        Степень двойки (старший бит) или 0 для n == 0

    Raises:
        TypeError: Если width не беззнаковый целый тип
        ValueError: Если n вне диапазона width

    Examples:
        >>> get_highest_bit(0b0101_1010, UINT8)
        64
    """
    if not width.is_integral or width.signed:
        raise TypeError(f"width must be an unsigned integral type, got {width}")
    validate_unsigned(n, "n", width)

    for shift in SMEAR_SHIFTS[width.bits]:
        n |= n >> shift
    return n - (n >> 1)


# =============================================================================
# ВЫРАВНИВАНИЕ И СЕТКА
# =============================================================================


def _require_int(value: int, name: str) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")


def get_aligned_offset(base_offset: int, alignment: int) -> int:
    """
    Округление base_offset вверх до кратного alignment.

    Args:
        base_offset: Исходное смещение
        alignment: Шаг выравнивания (0 — без выравнивания)

    Returns:
        base_offset, если он уже выровнен или alignment == 0

    Raises:
        TypeError: Если аргументы не int

    Examples:
        >>> get_aligned_offset(13, 8)
        16
        >>> get_aligned_offset(16, 8)
        16
    """
    _require_int(base_offset, "base_offset")
    _require_int(alignment, "alignment")
    if alignment == 0:
        return base_offset
    r = base_offset % alignment
    if r == 0:
        return base_offset
    return base_offset + alignment - r


def snap_to_grid(f: float, grid_size: int = 1) -> int:
    """
    Привязка значения к сетке с шагом grid_size.

    Модуль f усекается до целого (с насыщением до INT32), округляется до
    ближайшего кратного grid_size (половина шага — вверх), затем
    восстанавливается знак.

    Args:
        f: Значение
        grid_size: Шаг сетки (беззнаковый)

    Returns:
        Кратное grid_size (INT32) или 0 при grid_size == 0;
        вблизи границы INT32 кратное выбирается в сторону нуля

    Raises:
        ValueError: Если grid_size отрицательный

    Examples:
        >>> snap_to_grid(-7.0, 5)
        -5
        >>> snap_to_grid(8.0, 5)
        10
        >>> snap_to_grid(3.0, 0)
        0
    """
    validate_unsigned(grid_size, "grid_size", UINT32)
    if grid_size == 0:
        return 0

    s = sign(f)
    r = limit(float(f * s), INT32)
    # Модуль результата не должен выйти за границу INT32 со стороны знака
    bound = INT32.max_value if s > 0 else -INT32.min_value
    d = r % grid_size
    if d < grid_size * 0.5 or r + grid_size - d > bound:
        r -= d
    else:
        r += grid_size - d
    return r * s


# =============================================================================
# НОД / НОК
# =============================================================================


def get_greatest_common_divisor(a: int, b: int) -> int:
    """
    НОД по алгоритму Евклида; результат неотрицателен при любых знаках.

    Examples:
        >>> get_greatest_common_divisor(12, 18)
        6
        >>> get_greatest_common_divisor(0, 7)
        7
    """
    a, b = abs(a), abs(b)
    while True:
        if a == 0:
            return b
        b %= a
        if b == 0:
            return a
        a %= b


def get_least_common_multiple(a: int, b: int) -> int:
    """
    НОК через НОД: a // gcd * b; 0, если gcd == 0 (оба аргумента нулевые).

    Examples:
        >>> get_least_common_multiple(4, 6)
        12
        >>> get_least_common_multiple(0, 0)
        0
    """
    gcd = get_greatest_common_divisor(a, b)
    return a // gcd * b if gcd else 0
