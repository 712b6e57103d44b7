"""
Float16 — IEEE-754 binary16 кодек

Модуль конвертирует binary32 ↔ binary16 бит-в-бит:
- Разбор sign / exponent / mantissa из 32-битного паттерна
- Перебазирование экспоненты: 8 бит / bias 127 → 5 бит / bias 15
- Округление round-to-nearest-even
- Переполнение → ±inf, антипереполнение → subnormal или ±0
- NaN → quiet NaN (знак и старшие биты payload сохраняются), ±inf без изменений

Формат binary16: 1 бит знака, 5 бит экспоненты, 10 бит мантиссы.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. float32_to_float16(float16_to_float32(h)) == h для любого не-NaN паттерна h
2. |f| > 65504 (после округления) → ±inf
3. NaN никогда не кодируется как inf
"""

import logging
import math
import struct
from typing import Final, NamedTuple

logger = logging.getLogger(__name__)


# =============================================================================
# ПАРАМЕТРЫ ФОРМАТОВ
# =============================================================================

# binary32
FLOAT32_SIGN_MASK: Final[int] = 0x80000000
FLOAT32_EXPONENT_MASK: Final[int] = 0x7F800000
FLOAT32_MANTISSA_MASK: Final[int] = 0x007FFFFF
FLOAT32_MANTISSA_BITS: Final[int] = 23
FLOAT32_EXPONENT_BIAS: Final[int] = 127
FLOAT32_EXPONENT_MAX: Final[int] = 0xFF

# binary16
FLOAT16_SIGN_MASK: Final[int] = 0x8000
FLOAT16_EXPONENT_MASK: Final[int] = 0x7C00
FLOAT16_MANTISSA_MASK: Final[int] = 0x03FF
FLOAT16_MANTISSA_BITS: Final[int] = 10
FLOAT16_EXPONENT_BIAS: Final[int] = 15
FLOAT16_EXPONENT_MAX: Final[int] = 0x1F
FLOAT16_QUIET_BIT: Final[int] = 0x0200

# Отбрасываемые младшие биты мантиссы при сужении
MANTISSA_SHIFT: Final[int] = FLOAT32_MANTISSA_BITS - FLOAT16_MANTISSA_BITS

FLOAT16_POSITIVE_INFINITY: Final[int] = FLOAT16_EXPONENT_MASK
FLOAT16_NEGATIVE_INFINITY: Final[int] = FLOAT16_SIGN_MASK | FLOAT16_EXPONENT_MASK
FLOAT16_MAX: Final[float] = 65504.0
FLOAT16_MIN_SUBNORMAL: Final[float] = 2.0**-24


# =============================================================================
# BINARY32
# =============================================================================


def float32_bits(f: float) -> int:
    """
    32-битный паттерн значения f после округления до binary32.

    Значения за пределами диапазона binary32 дают ±inf, как при
    приведении double → float.
    """
    try:
        packed = struct.pack("<f", f)
    except OverflowError:
        return FLOAT32_EXPONENT_MASK | (FLOAT32_SIGN_MASK if f < 0 else 0)
    return struct.unpack("<I", packed)[0]


def float32_from_bits(bits: int) -> float:
    """Значение binary32 по 32-битному паттерну."""
    if not 0 <= bits <= 0xFFFFFFFF:
        raise ValueError(f"bits must be a 32-bit pattern, got {bits:#x}")
    return struct.unpack("<f", struct.pack("<I", bits))[0]


# =============================================================================
# КОДЕК
# =============================================================================


def _round_shift_right(value: int, shift: int) -> int:
    """value >> shift с округлением round-to-nearest-even."""
    result = value >> shift
    remainder = value & ((1 << shift) - 1)
    halfway = 1 << (shift - 1)
    if remainder > halfway or (remainder == halfway and result & 1):
        result += 1
    return result


def float32_to_float16(f: float) -> int:
    """
    Кодирование значения в 16-битный паттерн binary16.

    f сначала округляется до binary32, затем сужается до binary16.
    Перенос при округлении мантиссы корректно переходит в экспоненту
    (в том числе subnormal → normal и max → inf).

    Args:
        f: Значение (Python float)

    Returns:
        16-битный паттерн binary16

    Examples:
        >>> hex(float32_to_float16(1.0))
        '0x3c00'
        >>> hex(float32_to_float16(-2.5))
        '0xc100'
        >>> hex(float32_to_float16(1e10))
        '0x7c00'
    """
    bits = float32_bits(f)
    sign = (bits >> 16) & FLOAT16_SIGN_MASK
    exponent = (bits & FLOAT32_EXPONENT_MASK) >> FLOAT32_MANTISSA_BITS
    mantissa = bits & FLOAT32_MANTISSA_MASK

    if exponent == FLOAT32_EXPONENT_MAX:
        if mantissa == 0:
            return sign | FLOAT16_EXPONENT_MASK
        logger.debug("float32_to_float16: NaN payload %#x narrowed", mantissa)
        return sign | FLOAT16_EXPONENT_MASK | FLOAT16_QUIET_BIT | (mantissa >> MANTISSA_SHIFT)

    half_exponent = exponent - FLOAT32_EXPONENT_BIAS + FLOAT16_EXPONENT_BIAS

    if half_exponent >= FLOAT16_EXPONENT_MAX:
        logger.debug("float32_to_float16: %r overflows binary16, saturated to inf", f)
        return sign | FLOAT16_EXPONENT_MASK

    if half_exponent <= 0:
        # Ниже половины наименьшего subnormal значение округляется к нулю
        if half_exponent < -FLOAT16_MANTISSA_BITS:
            return sign
        full_mantissa = mantissa | (1 << FLOAT32_MANTISSA_BITS)
        shift = MANTISSA_SHIFT + 1 - half_exponent
        return sign | _round_shift_right(full_mantissa, shift)

    half = (half_exponent << FLOAT16_MANTISSA_BITS) | (mantissa >> MANTISSA_SHIFT)
    remainder = mantissa & ((1 << MANTISSA_SHIFT) - 1)
    halfway = 1 << (MANTISSA_SHIFT - 1)
    if remainder > halfway or (remainder == halfway and half & 1):
        half += 1
    return sign | half


def float16_to_float32(v: int) -> float:
    """
    Декодирование 16-битного паттерна binary16 (точное).

    Args:
        v: 16-битный паттерн

    Returns:
        Значение как Python float (точно представимо в binary32)

    Raises:
        ValueError: Если v вне [0, 0xFFFF]

    Examples:
        >>> float16_to_float32(0x3C00)
        1.0
        >>> float16_to_float32(0xC100)
        -2.5
    """
    if isinstance(v, bool) or not isinstance(v, int):
        raise TypeError(f"v must be an int, got {type(v).__name__}")
    if not 0 <= v <= 0xFFFF:
        raise ValueError(f"v must be a 16-bit pattern, got {v:#x}")

    sign_bit = (v & FLOAT16_SIGN_MASK) << 16
    exponent = (v & FLOAT16_EXPONENT_MASK) >> FLOAT16_MANTISSA_BITS
    mantissa = v & FLOAT16_MANTISSA_MASK

    if exponent == FLOAT16_EXPONENT_MAX:
        bits = sign_bit | FLOAT32_EXPONENT_MASK | (mantissa << MANTISSA_SHIFT)
        return float32_from_bits(bits)

    if exponent == 0:
        # Subnormal и ±0: mantissa * 2**-24 точно представимо
        value = math.ldexp(mantissa, -(FLOAT16_EXPONENT_BIAS - 1 + FLOAT16_MANTISSA_BITS))
        return -value if sign_bit else value

    bits = (
        sign_bit
        | ((exponent - FLOAT16_EXPONENT_BIAS + FLOAT32_EXPONENT_BIAS) << FLOAT32_MANTISSA_BITS)
        | (mantissa << MANTISSA_SHIFT)
    )
    return float32_from_bits(bits)


# =============================================================================
# ТИП FLOAT16
# =============================================================================


class Float16(NamedTuple):
    """
    Значение binary16, хранимое как 16-битный паттерн.

    Immutable: все преобразования создают новый экземпляр.
    """

    bits: int

    @classmethod
    def from_float(cls, f: float) -> "Float16":
        return cls(float32_to_float16(f))

    def to_float(self) -> float:
        return float16_to_float32(self.bits)

    @property
    def sign(self) -> int:
        return (self.bits & FLOAT16_SIGN_MASK) >> 15

    @property
    def exponent(self) -> int:
        """Смещённая (biased) экспонента, 0..31."""
        return (self.bits & FLOAT16_EXPONENT_MASK) >> FLOAT16_MANTISSA_BITS

    @property
    def mantissa(self) -> int:
        return self.bits & FLOAT16_MANTISSA_MASK

    @property
    def is_nan(self) -> bool:
        return self.exponent == FLOAT16_EXPONENT_MAX and self.mantissa != 0

    @property
    def is_inf(self) -> bool:
        return self.exponent == FLOAT16_EXPONENT_MAX and self.mantissa == 0

    @property
    def is_subnormal(self) -> bool:
        return self.exponent == 0 and self.mantissa != 0

    def __float__(self) -> float:
        return self.to_float()
