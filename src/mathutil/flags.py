"""
Flags — Битовые флаги

Обобщённые операции над флагами для int и enum.IntFlag:
- set_flag / add_flag / remove_flag / is_flag_set
- FlagSet — immutable набор флагов фиксированной беззнаковой ширины

Функции не изменяют аргументы, а возвращают новое значение.
"""

from dataclasses import dataclass
from enum import IntFlag
from typing import TypeVar

from src.mathutil.numeric_types import UINT32, NumericType, validate_unsigned

F = TypeVar("F", int, IntFlag)


# =============================================================================
# ФУНКЦИИ НАД ФЛАГАМИ
# =============================================================================


def add_flag(base_flags: F, flag: F) -> F:
    return base_flags | flag


def remove_flag(base_flags: F, flag: F) -> F:
    return base_flags & ~flag


def set_flag(base_flags: F, flag: F, enabled: bool = True) -> F:
    """
    Установка или снятие флага.

    Examples:
        >>> set_flag(0b0001, 0b0100)
        5
        >>> set_flag(0b0101, 0b0100, enabled=False)
        1
    """
    if enabled:
        return add_flag(base_flags, flag)
    return remove_flag(base_flags, flag)


def is_flag_set(base_flags: F, flag: F) -> bool:
    """True, если хотя бы один бит flag установлен в base_flags."""
    return int(base_flags & flag) != 0


# =============================================================================
# FLAGSET
# =============================================================================


@dataclass(frozen=True)
class FlagSet:
    """
    Набор флагов в беззнаковом представлении фиксированной ширины.

    Инвертирование маскируется шириной width, поэтому результат всегда
    остаётся в диапазоне типа.
    """

    value: int = 0
    width: NumericType = UINT32

    def __post_init__(self) -> None:
        if not self.width.is_integral or self.width.signed:
            raise TypeError(f"width must be an unsigned integral type, got {self.width}")
        validate_unsigned(int(self.value), "value", self.width)

    def _coerce(self, other: "FlagSet | int") -> int:
        if isinstance(other, FlagSet):
            if other.width != self.width:
                raise TypeError(
                    f"cannot combine FlagSet of {self.width} with FlagSet of {other.width}"
                )
            return other.value
        return validate_unsigned(int(other), "flag", self.width)

    def set(self, flag: "FlagSet | int", enabled: bool = True) -> "FlagSet":
        return FlagSet(set_flag(self.value, self._coerce(flag), enabled), self.width)

    def add(self, flag: "FlagSet | int") -> "FlagSet":
        return FlagSet(add_flag(self.value, self._coerce(flag)), self.width)

    def remove(self, flag: "FlagSet | int") -> "FlagSet":
        return FlagSet(remove_flag(self.value, self._coerce(flag)), self.width)

    def is_set(self, flag: "FlagSet | int") -> bool:
        return is_flag_set(self.value, self._coerce(flag))

    def __or__(self, other: "FlagSet | int") -> "FlagSet":
        return self.add(other)

    def __and__(self, other: "FlagSet | int") -> "FlagSet":
        return FlagSet(self.value & self._coerce(other), self.width)

    def __invert__(self) -> "FlagSet":
        return FlagSet(~self.value & self.width.mask, self.width)

    def __int__(self) -> int:
        return self.value

    def __bool__(self) -> bool:
        return self.value != 0
