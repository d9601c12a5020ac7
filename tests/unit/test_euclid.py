"""
Тесты для GcdEngine — gcd, расширенный алгоритм Евклида, lcm

Проверяемые инварианты:
1. gcd(a, b) >= 0; gcd(0, 0) == 0; gcd(a, 0) == |a|
2. x*a + y*b == gcd(a, b) для extended_gcd
3. FixedWidthOverflow, когда |результат| не представим (min_value)
4. Отрицательные операнды extended_gcd запрещены только для фиксированной ширины
5. Совпадение с math.gcd / math.lcm на случайных входах
"""

import math
import random

import pytest

from src.ntheory.domain import FixedWidthOverflow, IllegalArgument, IntWidth
from src.ntheory.math.euclid import extended_gcd, gcd, lcm


INT64_MIN = IntWidth.INT64.min_value
INT64_MAX = IntWidth.INT64.max_value


# =============================================================================
# ТЕСТЫ: gcd
# =============================================================================


class TestGcd:
    """Тесты gcd: базовые случаи, знаки, границы ширины."""

    def test_classic_values(self):
        """Классический пример Евклида."""
        assert gcd(1071, 462) == 21
        assert gcd(462, 1071) == 21
        assert gcd(17, 5) == 1

    def test_signs_are_ignored(self):
        """gcd неотрицателен независимо от знаков операндов."""
        assert gcd(-12, 18) == 6
        assert gcd(12, -18) == 6
        assert gcd(-12, -18) == 6

    def test_zero_operands(self):
        """gcd(0, 0) == 0, gcd(a, 0) == |a|."""
        assert gcd(0, 0) == 0
        assert gcd(-7, 0) == 7
        assert gcd(0, -5) == 5

    def test_min_value_with_zero_overflows(self):
        """|INT64.min_value| == 2^63 не представим."""
        with pytest.raises(FixedWidthOverflow):
            gcd(INT64_MIN, 0)

        with pytest.raises(FixedWidthOverflow):
            gcd(INT64_MIN, INT64_MIN)

    def test_min_value_with_small_operand(self):
        """gcd(min_value, 6) == 2 представим."""
        assert gcd(INT64_MIN, 6) == 2
        assert gcd(IntWidth.INT8.min_value, 12, IntWidth.INT8) == 4

    def test_int8_min_value_overflows(self):
        """Для INT8: gcd(-128, 0) == 128 > 127."""
        with pytest.raises(FixedWidthOverflow):
            gcd(-128, 0, IntWidth.INT8)

    def test_operand_outside_width_rejected(self):
        """Операнд вне ширины отклоняется до вычислений."""
        with pytest.raises(FixedWidthOverflow):
            gcd(128, 2, IntWidth.INT8)

        with pytest.raises(FixedWidthOverflow):
            gcd(INT64_MAX + 1, 2)

    def test_arbitrary_precision(self):
        """width=None: результат 2^63 допустим."""
        assert gcd(INT64_MIN, 0, width=None) == 2**63
        assert gcd(2**200, 6**100, width=None) == 2**100

    def test_matches_math_gcd(self):
        """Совпадение с math.gcd на случайных int64."""
        rng = random.Random(42)
        for _ in range(500):
            a = rng.randint(INT64_MIN + 1, INT64_MAX)
            b = rng.randint(INT64_MIN + 1, INT64_MAX)
            assert gcd(a, b) == math.gcd(a, b)


# =============================================================================
# ТЕСТЫ: extended_gcd
# =============================================================================


class TestExtendedGcd:
    """Тесты extended_gcd: тождество Безу и особые случаи."""

    def test_bezout_identity(self):
        """x*a + y*b == g."""
        result = extended_gcd(240, 46)
        assert result.gcd == 2
        assert result.x * 240 + result.y * 46 == 2

    def test_unpacking_as_triple(self):
        """Результат распаковывается как (x, y, g)."""
        x, y, g = extended_gcd(3, 5)
        assert (x, y, g) == (2, -1, 1)

    def test_zero_cases(self):
        """Особые случаи с нулевыми операндами."""
        assert tuple(extended_gcd(0, 0)) == (0, 0, 0)
        assert tuple(extended_gcd(0, 5)) == (0, 1, 5)
        assert tuple(extended_gcd(7, 0)) == (1, 0, 7)

    def test_negative_operands_rejected_for_fixed_width(self):
        """Фиксированная ширина требует неотрицательных операндов."""
        with pytest.raises(IllegalArgument):
            extended_gcd(-240, 46)

        with pytest.raises(IllegalArgument):
            extended_gcd(240, -46, IntWidth.INT32)

    def test_negative_operands_arbitrary_precision(self):
        """width=None: знаки нормализуются внутри."""
        result = extended_gcd(-240, 46, width=None)
        assert result.gcd == 2
        assert result.x * -240 + result.y * 46 == 2

        result = extended_gcd(0, -5, width=None)
        assert tuple(result) == (0, -1, 5)
        assert result.y * -5 == 5

    def test_max_operands(self):
        """Операнды у верхней границы INT64."""
        a = INT64_MAX
        b = INT64_MAX - 1
        result = extended_gcd(a, b)
        assert result.gcd == 1
        assert result.x * a + result.y * b == 1
        assert IntWidth.INT64.fits(result.x)
        assert IntWidth.INT64.fits(result.y)

    def test_random_coefficients_bounded(self):
        """Коэффициенты ограничены max(a, b) / g и тождество выполняется."""
        rng = random.Random(7)
        for _ in range(300):
            a = rng.randint(1, INT64_MAX)
            b = rng.randint(1, INT64_MAX)
            x, y, g = extended_gcd(a, b)
            assert g == math.gcd(a, b)
            assert x * a + y * b == g
            bound = max(a, b) // g
            assert abs(x) <= bound
            assert abs(y) <= bound


# =============================================================================
# ТЕСТЫ: lcm
# =============================================================================


class TestLcm:
    """Тесты lcm: нули, знаки, переполнение."""

    def test_basic_values(self):
        assert lcm(4, 6) == 12
        assert lcm(-4, 6) == 12
        assert lcm(7, 13) == 91

    def test_zero_operand(self):
        """lcm == 0, если хотя бы один операнд равен 0."""
        assert lcm(0, 5) == 0
        assert lcm(5, 0) == 0
        assert lcm(0, 0) == 0

    def test_overflow(self):
        """Истинный результат вне INT64 → FixedWidthOverflow."""
        with pytest.raises(FixedWidthOverflow):
            lcm(2**62, 3)

        with pytest.raises(FixedWidthOverflow):
            lcm(INT64_MIN, INT64_MIN)

        with pytest.raises(FixedWidthOverflow):
            lcm(INT64_MIN, 1)

    def test_min_value_pair_arbitrary_precision(self):
        """width=None: lcm(min, min) == 2^63."""
        assert lcm(INT64_MIN, INT64_MIN, width=None) == 2**63

    def test_int16_boundary(self):
        """Результат ровно на границе INT16 представим."""
        assert lcm(32767, 1, IntWidth.INT16) == 32767
        with pytest.raises(FixedWidthOverflow):
            lcm(32767, 2, IntWidth.INT16)

    def test_matches_math_lcm(self):
        """Совпадение с math.lcm на случайных входах без переполнения."""
        rng = random.Random(11)
        for _ in range(300):
            a = rng.randint(-(2**31), 2**31)
            b = rng.randint(-(2**31), 2**31)
            assert lcm(a, b) == math.lcm(a, b)
