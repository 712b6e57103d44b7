"""
Тесты для модуля Flags — битовые флаги

Проверяет:
1. add_flag / remove_flag / set_flag / is_flag_set для int и IntFlag
2. FlagSet: операции, маскирование инверсии шириной типа
3. Валидацию ширины и значений FlagSet
4. Immutability
"""

from dataclasses import FrozenInstanceError
from enum import IntFlag

import pytest

from src.mathutil.flags import FlagSet, add_flag, is_flag_set, remove_flag, set_flag
from src.mathutil.numeric_types import INT32, FLOAT32, UINT8, UINT16, UINT32


class Permission(IntFlag):
    READ = 1
    WRITE = 2
    EXECUTE = 4


# =============================================================================
# ТЕСТЫ ФУНКЦИЙ
# =============================================================================


class TestFlagFunctions:
    """Тесты функций над флагами"""

    def test_add_and_remove(self) -> None:
        """Добавление и снятие битов"""
        assert add_flag(0b0001, 0b0100) == 0b0101
        assert remove_flag(0b0101, 0b0100) == 0b0001
        assert remove_flag(0b0001, 0b0100) == 0b0001

    def test_set_flag(self) -> None:
        """set_flag с enabled=True / False"""
        assert set_flag(0b0001, 0b0100) == 0b0101
        assert set_flag(0b0101, 0b0100, enabled=False) == 0b0001
        assert set_flag(0b0101, 0b0100, enabled=True) == 0b0101

    def test_is_flag_set_any_bit(self) -> None:
        """Достаточно любого общего бита"""
        assert is_flag_set(0b0110, 0b0010)
        assert is_flag_set(0b0110, 0b0011)
        assert not is_flag_set(0b0110, 0b1001)
        assert not is_flag_set(0, 0)

    def test_int_flag(self) -> None:
        """Работа с enum.IntFlag сохраняет тип"""
        perms = add_flag(Permission.READ, Permission.WRITE)
        assert isinstance(perms, Permission)
        assert is_flag_set(perms, Permission.WRITE)
        assert not is_flag_set(perms, Permission.EXECUTE)

        perms = remove_flag(perms, Permission.READ)
        assert perms == Permission.WRITE
        assert set_flag(perms, Permission.EXECUTE) == Permission.WRITE | Permission.EXECUTE


# =============================================================================
# ТЕСТЫ FLAGSET
# =============================================================================


class TestFlagSet:
    """Тесты для FlagSet"""

    def test_default(self) -> None:
        """По умолчанию пустой набор uint32"""
        flags = FlagSet()
        assert flags.value == 0
        assert flags.width == UINT32
        assert not flags

    def test_operations_return_new_instance(self) -> None:
        """Операции не изменяют исходный набор"""
        empty = FlagSet(width=UINT8)
        flags = empty.add(0b0100)
        assert empty.value == 0
        assert flags.value == 0b0100
        assert flags.is_set(0b0100)
        assert flags.set(0b0001).value == 0b0101
        assert flags.set(0b0100, enabled=False).value == 0
        assert flags.remove(0b0100).value == 0

    def test_operators(self) -> None:
        """|, &, int(), bool()"""
        a = FlagSet(0b0011, UINT8)
        b = FlagSet(0b0110, UINT8)
        assert int(a | b) == 0b0111
        assert int(a & b) == 0b0010
        assert int(a | 0b1000) == 0b1011
        assert bool(a)

    def test_invert_masked_to_width(self) -> None:
        """Инверсия маскируется шириной типа"""
        assert int(~FlagSet(0b0000_1111, UINT8)) == 0b1111_0000
        assert int(~FlagSet(0, UINT16)) == 0xFFFF
        assert int(~FlagSet(0)) == 0xFFFF_FFFF

    def test_accepts_int_flag(self) -> None:
        """IntFlag принимается как значение флага"""
        flags = FlagSet(width=UINT8).add(Permission.EXECUTE)
        assert flags.is_set(Permission.EXECUTE)
        assert not flags.is_set(Permission.READ)

    def test_immutable(self) -> None:
        """FlagSet immutable"""
        flags = FlagSet(1)
        with pytest.raises(FrozenInstanceError):
            flags.value = 2

    def test_value_out_of_range(self) -> None:
        """Значение шире типа отклоняется"""
        with pytest.raises(ValueError):
            FlagSet(256, UINT8)
        with pytest.raises(ValueError):
            FlagSet(-1, UINT8)
        with pytest.raises(ValueError):
            FlagSet(width=UINT8).add(0x100)

    def test_invalid_width(self) -> None:
        """Ширина должна быть беззнаковым целым типом"""
        with pytest.raises(TypeError, match="unsigned integral"):
            FlagSet(0, INT32)
        with pytest.raises(TypeError, match="unsigned integral"):
            FlagSet(0, FLOAT32)

    def test_mismatched_widths(self) -> None:
        """Наборы разной ширины не комбинируются"""
        with pytest.raises(TypeError, match="cannot combine"):
            FlagSet(1, UINT8) | FlagSet(1, UINT16)
