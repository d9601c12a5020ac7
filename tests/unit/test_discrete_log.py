"""
Тесты для DiscreteLogSolver — дискретный логарифм и первообразные корни

Проверяемые инварианты:
1. baby_step_giant_step и linear_search возвращают наименьший показатель
2. Оба алгоритма согласованы на всех малых модулях
3. gcd(n, m) != 1 → UndefinedInverse для baby-step/giant-step
4. is_primitive_root согласован с порядком элемента
"""

import math

import pytest

from src.ntheory.domain import IntWidth, InvalidModulus, UndefinedInverse
from src.ntheory.math.discrete_log import baby_step_giant_step, is_primitive_root, linear_search


def multiplicative_order(n: int, m: int) -> int:
    """Порядок n в (Z/mZ)* перебором (gcd(n, m) == 1)."""
    k, value = 1, n % m
    while value != 1 % m:
        value = value * n % m
        k += 1
    return k


def euler_phi(m: int) -> int:
    return sum(1 for k in range(1, m + 1) if math.gcd(k, m) == 1)


# =============================================================================
# ТЕСТЫ: baby_step_giant_step
# =============================================================================


class TestBabyStepGiantStep:
    """Тесты алгоритма Шенкса."""

    def test_known_logarithms(self):
        assert baby_step_giant_step(2, 9, 11) == 6
        assert baby_step_giant_step(4, 2, 7) == 2
        assert baby_step_giant_step(3, 13, 17) == 4

    def test_target_one(self):
        """target ≡ 1 → 0."""
        assert baby_step_giant_step(5, 1, 13) == 0
        assert baby_step_giant_step(5, 14, 13) == 0

    def test_base_one(self):
        assert baby_step_giant_step(8, 1, 7) == 0
        assert baby_step_giant_step(1, 3, 7) is None

    def test_base_minus_one(self):
        assert baby_step_giant_step(6, 6, 7) == 1
        assert baby_step_giant_step(-1, 6, 7) == 1
        assert baby_step_giant_step(6, 3, 7) is None

    def test_no_solution(self):
        """2 порождает {1, 2, 4} по модулю 7."""
        assert baby_step_giant_step(2, 3, 7) is None

    def test_modulus_one(self):
        assert baby_step_giant_step(5, 3, 1) == 0

    def test_not_coprime(self):
        with pytest.raises(UndefinedInverse):
            baby_step_giant_step(2, 4, 8)

        with pytest.raises(UndefinedInverse):
            baby_step_giant_step(0, 0, 5)

    def test_invalid_modulus(self):
        with pytest.raises(InvalidModulus):
            baby_step_giant_step(2, 3, 0)

    def test_agrees_with_linear_search(self):
        """Полное сравнение на всех модулях до 40."""
        for m in range(2, 41):
            for n in range(1, m):
                if math.gcd(n, m) != 1:
                    continue
                for target in range(m):
                    assert baby_step_giant_step(n, target, m) == linear_search(n, target, m)

    def test_large_prime_modulus(self):
        m = 1000003
        target = pow(2, 123457, m)
        p = baby_step_giant_step(2, target, m)
        assert p is not None
        assert p <= 123457
        assert pow(2, p, m) == target

    def test_mersenne_modulus(self):
        """m == 2^31 - 1: произведения остаются в INT64."""
        m = 2**31 - 1
        target = pow(3, 987654, m)
        p = baby_step_giant_step(3, target, m)
        assert p is not None
        assert pow(3, p, m) == target

    def test_int16_width(self):
        m = 32749
        target = pow(2, 1000, m)
        p = baby_step_giant_step(2, target, m, IntWidth.INT16)
        assert pow(2, p, m) == target


# =============================================================================
# ТЕСТЫ: linear_search
# =============================================================================


class TestLinearSearch:
    """Тесты полного перебора."""

    def test_known_logarithms(self):
        assert linear_search(3, 13, 17) == 4
        assert linear_search(2, 0, 8) == 3
        assert linear_search(10, 1, 15) == 0

    def test_no_solution(self):
        assert linear_search(2, 3, 4) is None

    def test_zero_base_convention(self):
        """0^0 == 0: все степени нуля равны 0."""
        assert linear_search(0, 0, 5) == 0
        assert linear_search(5, 0, 5) == 0
        assert linear_search(0, 1, 5) is None

    def test_modulus_one(self):
        assert linear_search(3, 2, 1) == 0

    def test_invalid_modulus(self):
        with pytest.raises(InvalidModulus):
            linear_search(2, 3, -1)


# =============================================================================
# ТЕСТЫ: is_primitive_root
# =============================================================================


class TestIsPrimitiveRoot:
    """Тесты проверки первообразного корня."""

    def test_prime_moduli(self):
        assert is_primitive_root(3, 7)
        assert not is_primitive_root(2, 7)
        assert is_primitive_root(2, 11)

    def test_prime_power_moduli(self):
        assert is_primitive_root(2, 9)
        assert is_primitive_root(5, 18)
        assert not is_primitive_root(2, 18)

    def test_no_primitive_roots(self):
        """По модулям 8 и 15 первообразных корней нет."""
        assert not any(is_primitive_root(n, 8) for n in range(8))
        assert not any(is_primitive_root(n, 15) for n in range(15))

    def test_small_moduli(self):
        assert is_primitive_root(1, 2)
        assert is_primitive_root(2, 3)
        assert is_primitive_root(3, 4)
        assert not is_primitive_root(0, 2)
        assert is_primitive_root(5, 6)
        assert not is_primitive_root(5, 1)

    def test_invalid_modulus(self):
        with pytest.raises(InvalidModulus):
            is_primitive_root(3, 0)

    def test_agrees_with_order(self):
        """n — первообразный корень ⇔ порядок n равен φ(m)."""
        for m in range(2, 80):
            phi = euler_phi(m)
            for n in range(m):
                expected = math.gcd(n, m) == 1 and multiplicative_order(n, m) == phi
                assert is_primitive_root(n, m) == expected, (n, m)
