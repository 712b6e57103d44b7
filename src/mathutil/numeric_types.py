"""
NumericType — Дескрипторы числовых типов фиксированной ширины

Модуль описывает числовые представления, с которыми работают
saturating-конверсия (limit) и битовые утилиты:
- Знаковые/беззнаковые целые 8/16/32/64 бит
- IEEE-754 binary32 / binary64
- Extended precision (long double) как самый широкий floating тип

Python int не ограничен по ширине, а float всегда binary64, поэтому
ширина типа задаётся явно дескриптором, а не типом значения.

ИНВАРИАНТЫ:
1. min_value <= 0 <= max_value для любого типа
2. Беззнаковые типы бывают только целыми
3. Дескрипторы immutable (frozen=True)
"""

import sys
from enum import Enum
from typing import Final

from pydantic import BaseModel, Field, model_validator


# =============================================================================
# ПАРАМЕТРЫ
# =============================================================================

# Допустимые ширины целых типов (бит)
INTEGRAL_WIDTHS: Final[tuple[int, ...]] = (8, 16, 32, 64)

# Допустимые ширины floating типов (бит)
# 80: x87 extended precision (long double)
FLOATING_WIDTHS: Final[tuple[int, ...]] = (32, 64, 80)

# Наибольшее конечное значение binary32
FLOAT32_MAX: Final[float] = 3.4028234663852886e38

# Наибольшее конечное значение binary64
FLOAT64_MAX: Final[float] = sys.float_info.max


# =============================================================================
# ТИПЫ
# =============================================================================


class NumericKind(str, Enum):
    """Домен числового типа"""

    INTEGRAL = "integral"
    FLOATING = "floating"


class NumericType(BaseModel):
    """
    Дескриптор числового представления фиксированной ширины.

    Является "numeric capability" для обобщённых функций: задаёт
    упорядочивание, ноль и границы представимого диапазона.

    Для LONG_DOUBLE границы равны ±inf: диапазон extended precision
    шире binary64 и не представим в Python float.
    """

    name: str = Field(..., min_length=1, description="Имя типа (например, 'int8')")
    kind: NumericKind = Field(..., description="Домен: integral / floating")
    bits: int = Field(..., gt=0, description="Ширина представления (бит)")
    signed: bool = Field(True, description="Знаковый тип")
    is_widest: bool = Field(
        False,
        description="Самый широкий тип своего домена (не помещается в промежуточный тип)",
    )

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_layout(self) -> "NumericType":
        """Проверка согласованности kind / bits / signed."""
        if self.kind is NumericKind.INTEGRAL:
            if self.bits not in INTEGRAL_WIDTHS:
                raise ValueError(
                    f"integral width must be one of {INTEGRAL_WIDTHS}, got {self.bits}"
                )
        else:
            if self.bits not in FLOATING_WIDTHS:
                raise ValueError(
                    f"floating width must be one of {FLOATING_WIDTHS}, got {self.bits}"
                )
            if not self.signed:
                raise ValueError(f"floating type {self.name} cannot be unsigned")
        return self

    @property
    def is_integral(self) -> bool:
        return self.kind is NumericKind.INTEGRAL

    @property
    def is_floating(self) -> bool:
        return self.kind is NumericKind.FLOATING

    @property
    def min_value(self) -> int | float:
        """Наименьшее представимое конечное значение (lowest)."""
        if self.is_integral:
            return -(1 << (self.bits - 1)) if self.signed else 0
        return -self.max_value

    @property
    def max_value(self) -> int | float:
        """Наибольшее представимое конечное значение."""
        if self.is_integral:
            return (1 << (self.bits - 1)) - 1 if self.signed else (1 << self.bits) - 1
        if self.bits == 32:
            return FLOAT32_MAX
        if self.bits == 64:
            return FLOAT64_MAX
        return float("inf")

    @property
    def mask(self) -> int:
        """Битовая маска ширины типа (только для integral)."""
        if not self.is_integral:
            raise TypeError(f"mask is defined for integral types only, got {self.name}")
        return (1 << self.bits) - 1

    def contains(self, value: int | float) -> bool:
        """Проверка, что значение лежит в [min_value, max_value]."""
        return self.min_value <= value <= self.max_value

    def __str__(self) -> str:
        return self.name


# =============================================================================
# ПРЕДОПРЕДЕЛЁННЫЕ ТИПЫ
# =============================================================================

INT8: Final[NumericType] = NumericType(name="int8", kind=NumericKind.INTEGRAL, bits=8)
UINT8: Final[NumericType] = NumericType(
    name="uint8", kind=NumericKind.INTEGRAL, bits=8, signed=False
)
INT16: Final[NumericType] = NumericType(name="int16", kind=NumericKind.INTEGRAL, bits=16)
UINT16: Final[NumericType] = NumericType(
    name="uint16", kind=NumericKind.INTEGRAL, bits=16, signed=False
)
INT32: Final[NumericType] = NumericType(name="int32", kind=NumericKind.INTEGRAL, bits=32)
UINT32: Final[NumericType] = NumericType(
    name="uint32", kind=NumericKind.INTEGRAL, bits=32, signed=False
)
INT64: Final[NumericType] = NumericType(name="int64", kind=NumericKind.INTEGRAL, bits=64)
# Не помещается в промежуточный знаковый 64-битный тип
UINT64: Final[NumericType] = NumericType(
    name="uint64", kind=NumericKind.INTEGRAL, bits=64, signed=False, is_widest=True
)

FLOAT32: Final[NumericType] = NumericType(name="float32", kind=NumericKind.FLOATING, bits=32)
FLOAT64: Final[NumericType] = NumericType(name="float64", kind=NumericKind.FLOATING, bits=64)
LONG_DOUBLE: Final[NumericType] = NumericType(
    name="long_double", kind=NumericKind.FLOATING, bits=80, is_widest=True
)

ALL_TYPES: Final[tuple[NumericType, ...]] = (
    INT8,
    UINT8,
    INT16,
    UINT16,
    INT32,
    UINT32,
    INT64,
    UINT64,
    FLOAT32,
    FLOAT64,
    LONG_DOUBLE,
)

UINT64_MAX: Final[int] = UINT64.max_value


def get_numeric_type(name: str) -> NumericType:
    """
    Поиск предопределённого типа по имени.

    Args:
        name: Имя типа (например, 'int8', 'float32')

    Returns:
        Дескриптор типа

    Raises:
        KeyError: Если тип с таким именем не определён
    """
    for numeric_type in ALL_TYPES:
        if numeric_type.name == name:
            return numeric_type
    raise KeyError(f"Unknown numeric type: {name!r}")


def validate_unsigned(value: int, name: str, numeric_type: NumericType = UINT64) -> int:
    """
    Валидация, что value — int в диапазоне беззнакового типа.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)
        numeric_type: Беззнаковый целый тип (default: UINT64)

    Returns:
        value без изменений

    Raises:
        TypeError: Если value не int (bool тоже отклоняется)
        ValueError: Если value вне [0, numeric_type.max_value]
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    if not numeric_type.contains(value):
        raise ValueError(
            f"{name} must be in [0, {numeric_type.max_value}] ({numeric_type}), got {value}"
        )
    return value
