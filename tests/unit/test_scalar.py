"""
Тесты для модуля Scalar — скалярные примитивы

Проверяет:
1. is_zero / sign
2. clamp и вариадические vmin / vmax / abs_max
3. approach / lerp / smooth_step
4. Округление к целому с насыщением
5. Тригонометрию с защитой домена
"""

import math

import pytest

from src.mathutil.scalar import (
    EQN_EPS,
    abs_max,
    acos,
    approach,
    asin,
    atan2,
    ceil_to_int,
    clamp,
    deg_to_rad,
    floor_to_int,
    get_number_of_decimals,
    get_number_of_times_dividable_by_x,
    is_zero,
    lerp,
    pow2,
    pow3,
    pow4,
    rad_to_deg,
    round_to_int,
    round_to_places,
    sign,
    smooth_step,
    smoother_step,
    vmax,
    vmin,
)

INT32_MAX = 2**31 - 1
INT32_MIN = -(2**31)


# =============================================================================
# ТЕСТЫ СРАВНЕНИЙ
# =============================================================================


class TestIsZero:
    """Тесты для is_zero"""

    def test_open_interval(self) -> None:
        """Окрестность нуля открытая: ±EQN_EPS не считаются нулём"""
        assert is_zero(0.0)
        assert is_zero(1e-10)
        assert is_zero(-1e-10)
        assert not is_zero(EQN_EPS)
        assert not is_zero(-EQN_EPS)

    def test_custom_eps(self) -> None:
        """Пользовательский eps"""
        assert is_zero(0.05, eps=0.1)
        assert not is_zero(0.2, eps=0.1)


class TestSign:
    """Тесты для sign"""

    def test_values(self) -> None:
        """Ноль считается положительным"""
        assert sign(5) == 1
        assert sign(0) == 1
        assert sign(0.0) == 1
        assert sign(-0.5) == -1


class TestClampAndExtrema:
    """Тесты для clamp / vmin / vmax / abs_max"""

    def test_clamp(self) -> None:
        """Ограничение диапазоном"""
        assert clamp(5, 0, 10) == 5
        assert clamp(-1, 0, 10) == 0
        assert clamp(15.0, 0.0, 10.0) == 10.0

    def test_vmin_vmax(self) -> None:
        """Вариадические минимум и максимум"""
        assert vmin(3, 1, 2) == 1
        assert vmax(3, 1, 2) == 3
        assert vmin(7) == 7
        assert vmax(-1.5, -2.5) == -1.5

    def test_abs_max(self) -> None:
        """Наибольший по модулю аргумент сохраняет знак"""
        assert abs_max(3, -5, 4) == -5
        assert abs_max(-5, 5) == -5
        assert abs_max(2.0, -1.0) == 2.0

    @pytest.mark.parametrize("func", [vmin, vmax, abs_max])
    def test_empty_rejected(self, func) -> None:
        """Пустой список аргументов — ошибка"""
        with pytest.raises(ValueError, match="at least one argument"):
            func()


# =============================================================================
# ТЕСТЫ ИНТЕРПОЛЯЦИИ
# =============================================================================


class TestApproach:
    """Тесты для approach"""

    def test_step_without_overshoot(self) -> None:
        """Шаг к цели без перескока"""
        assert approach(0.0, 10.0, 3.0) == 3.0
        assert approach(9.0, 10.0, 3.0) == 10.0
        assert approach(10.0, 0.0, 4.0) == 6.0
        assert approach(1.0, 0.0, 4.0) == 0.0

    def test_negative_increment_uses_magnitude(self) -> None:
        """Отрицательный шаг трактуется как модуль"""
        assert approach(5.0, 0.0, -2.0) == 3.0


class TestInterpolation:
    """Тесты для lerp / smooth_step / smoother_step"""

    def test_lerp(self) -> None:
        """Линейная интерполяция без ограничения t"""
        assert lerp(0.0, 10.0, 0.25) == 2.5
        assert lerp(0.0, 10.0, 1.5) == 15.0
        assert lerp(5.0, -5.0, 0.5) == 0.0

    @pytest.mark.parametrize("func", [smooth_step, smoother_step])
    def test_step_functions(self, func) -> None:
        """Края, середина и насыщение вне [edge0, edge1]"""
        assert func(0.0, 1.0, 0.0) == 0.0
        assert func(0.0, 1.0, 1.0) == 1.0
        assert func(0.0, 1.0, 0.5) == pytest.approx(0.5)
        assert func(0.0, 1.0, -3.0) == 0.0
        assert func(0.0, 1.0, 3.0) == 1.0

    def test_smooth_step_shape(self) -> None:
        """smoothstep(0.25) = 0.15625"""
        assert smooth_step(0.0, 1.0, 0.25) == pytest.approx(0.15625)

    def test_powers(self) -> None:
        """pow2 / pow3 / pow4"""
        assert pow2(3) == 9
        assert pow3(2) == 8
        assert pow4(2) == 16
        assert pow2(-1.5) == 2.25


# =============================================================================
# ТЕСТЫ ОКРУГЛЕНИЯ
# =============================================================================


class TestRoundingToInt:
    """Тесты для ceil_to_int / floor_to_int / round_to_int"""

    def test_ceil_floor(self) -> None:
        """ceil / floor"""
        assert ceil_to_int(1.2) == 2
        assert ceil_to_int(-1.2) == -1
        assert floor_to_int(1.8) == 1
        assert floor_to_int(-1.2) == -2

    def test_round_half_away_from_zero(self) -> None:
        """Половина округляется от нуля (в отличие от встроенного round)"""
        assert round_to_int(2.5) == 3
        assert round_to_int(-2.5) == -3
        assert round_to_int(0.49) == 0
        assert round_to_int(-0.5) == -1

    def test_saturation_to_int32(self) -> None:
        """Выход за int32 насыщается"""
        assert ceil_to_int(1e20) == INT32_MAX
        assert floor_to_int(-1e20) == INT32_MIN
        assert round_to_int(math.inf) == INT32_MAX
        assert round_to_int(-math.inf) == INT32_MIN

    def test_nan_gives_zero(self) -> None:
        """NaN → 0"""
        assert round_to_int(math.nan) == 0
        assert ceil_to_int(math.nan) == 0

    def test_wide(self) -> None:
        """wide=True — насыщение до int64"""
        assert round_to_int(1e12, wide=True) == 1_000_000_000_000
        assert floor_to_int(1e30, wide=True) == 2**63 - 1

    def test_results_are_int(self) -> None:
        """Результат — int"""
        assert isinstance(round_to_int(1.5), int)
        assert isinstance(ceil_to_int(1e20), int)


class TestRoundToPlaces:
    """Тесты для round_to_places"""

    def test_half_away_from_zero(self) -> None:
        """Точные половины округляются от нуля"""
        assert round_to_places(0.125, 2) == pytest.approx(0.13)
        assert round_to_places(-1.25, 1) == pytest.approx(-1.3)

    def test_regular(self) -> None:
        """Обычное округление"""
        assert round_to_places(3.14159, 3) == pytest.approx(3.142)
        assert round_to_places(2.0, 0) == 2.0

    def test_non_finite_unchanged(self) -> None:
        """inf остаётся inf"""
        assert round_to_places(math.inf, 2) == math.inf


class TestDecimals:
    """Тесты для get_number_of_decimals / get_number_of_times_dividable_by_x"""

    @pytest.mark.parametrize(
        "value, expected",
        [(1.25, 2), (3.0, 0), (-0.5, 1), (0.1234567, 6), (10.5, 1)],
    )
    def test_number_of_decimals(self, value: float, expected: int) -> None:
        """Число знаков дробной части"""
        assert get_number_of_decimals(value) == expected

    def test_dividable(self) -> None:
        """floor(log(v) / log(x))"""
        assert get_number_of_times_dividable_by_x(100, 3) == 4
        assert get_number_of_times_dividable_by_x(1, 2) == 0
        assert get_number_of_times_dividable_by_x(1e6, 7) == 7

    def test_dividable_degenerate(self) -> None:
        """v <= 0 или x <= 1 → 0"""
        assert get_number_of_times_dividable_by_x(0, 2) == 0
        assert get_number_of_times_dividable_by_x(-5, 2) == 0
        assert get_number_of_times_dividable_by_x(5, 1) == 0


# =============================================================================
# ТЕСТЫ ТРИГОНОМЕТРИИ
# =============================================================================


class TestTrigonometry:
    """Тесты для тригонометрических обёрток"""

    def test_asin_acos_clamp_domain(self) -> None:
        """Аргументы чуть за [-1, 1] не вызывают domain error"""
        assert asin(1.0000001) == pytest.approx(math.pi / 2)
        assert asin(-1.0000001) == pytest.approx(-math.pi / 2)
        assert acos(1.0000001) == 0.0
        assert acos(-1.0000001) == pytest.approx(math.pi)

    def test_asin_acos_regular(self) -> None:
        """Обычные значения делегируются math"""
        assert asin(0.5) == pytest.approx(math.asin(0.5))
        assert acos(0.5) == pytest.approx(math.acos(0.5))

    def test_atan2_origin(self) -> None:
        """atan2(0, 0) == 0 для любых знаков нулей"""
        assert atan2(0.0, 0.0) == 0.0
        assert atan2(-0.0, -0.0) == 0.0
        assert atan2(1.0, 0.0) == pytest.approx(math.pi / 2)

    def test_degree_radian_conversion(self) -> None:
        """Градусы ↔ радианы"""
        assert deg_to_rad(180.0) == pytest.approx(math.pi)
        assert rad_to_deg(math.pi / 2) == pytest.approx(90.0)
        assert rad_to_deg(deg_to_rad(123.0)) == pytest.approx(123.0)
