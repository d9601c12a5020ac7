"""
Тесты для базовых доменных моделей: IntWidth, результаты, конфигурации, ошибки

Проверяет:
1. Диапазоны ширин и контракт представимости
2. Корректность границ LARGEST_PRIME / LARGEST_SAFE_PRIME
3. Инварианты FactorMap (валидация, порядок, восстановление значения)
4. Immutability результатов (frozen dataclass) и конфигураций (frozen pydantic)
5. Иерархию ошибок и совместимость с builtin-исключениями
"""

import dataclasses

import pytest
from pydantic import ValidationError
from sympy import isprime

from src.ntheory.domain import (
    DEFAULT_CERTAINTY,
    DEFAULT_WIDTH,
    LARGEST_PRIME,
    LARGEST_SAFE_PRIME,
    CRTConfig,
    CRTResult,
    ExtendedGcdResult,
    FactorMap,
    FixedWidthOverflow,
    IllegalArgument,
    IncompatibleCongruences,
    IntWidth,
    InvalidModulus,
    NumberTheoryViolation,
    PollardConfig,
    SafePrimeConfig,
    UndefinedInverse,
    ensure_operands,
    fits,
    require_modulus,
)
from src.ntheory.math.primality import is_prime, is_safe_prime, prime_after, safe_prime_after


# =============================================================================
# INT WIDTH TESTS
# =============================================================================


class TestIntWidth:
    """Тесты для IntWidth"""

    def test_ranges(self):
        assert IntWidth.INT8.min_value == -128
        assert IntWidth.INT8.max_value == 127
        assert IntWidth.INT16.max_value == 32767
        assert IntWidth.INT32.min_value == -(2**31)
        assert IntWidth.INT64.max_value == 2**63 - 1
        assert IntWidth.INT64.bits == 64

    def test_default_width(self):
        assert DEFAULT_WIDTH is IntWidth.INT64

    def test_fits(self):
        assert IntWidth.INT8.fits(-128)
        assert not IntWidth.INT8.fits(128)
        assert fits(None, 2**200)
        assert not fits(IntWidth.INT64, 2**63)

    def test_ensure_fits(self):
        assert IntWidth.INT16.ensure_fits(-32768) == -32768
        with pytest.raises(FixedWidthOverflow, match="int16"):
            IntWidth.INT16.ensure_fits(32768, "n")

    def test_ensure_operands(self):
        ensure_operands(None, n=2**100)
        ensure_operands(IntWidth.INT8, a=1, b=-128)
        with pytest.raises(FixedWidthOverflow, match="b=200"):
            ensure_operands(IntWidth.INT8, a=1, b=200)


# =============================================================================
# PRIME BOUNDS TESTS
# =============================================================================


class TestPrimeBounds:
    """Тесты для LARGEST_PRIME / LARGEST_SAFE_PRIME"""

    @pytest.mark.parametrize("width", [IntWidth.INT8, IntWidth.INT16, IntWidth.INT32])
    def test_largest_prime_is_largest(self, width):
        """Следующее простое уже не представимо."""
        assert is_prime(LARGEST_PRIME[width], width)
        assert prime_after(LARGEST_PRIME[width], None) > width.max_value

    def test_largest_int64_prime(self):
        assert isprime(LARGEST_PRIME[IntWidth.INT64])
        assert not any(isprime(n) for n in range(LARGEST_PRIME[IntWidth.INT64] + 1, 2**63))

    @pytest.mark.parametrize("width", [IntWidth.INT8, IntWidth.INT16])
    def test_largest_safe_prime_is_largest(self, width):
        assert is_safe_prime(LARGEST_SAFE_PRIME[width], width)
        assert safe_prime_after(LARGEST_SAFE_PRIME[width], None) > width.max_value

    @pytest.mark.parametrize("width", list(IntWidth))
    def test_largest_safe_prime_is_safe(self, width):
        p = LARGEST_SAFE_PRIME[width]
        assert isprime(p)
        assert isprime((p - 1) // 2)


# =============================================================================
# RESULT TESTS
# =============================================================================


class TestResults:
    """Тесты для ExtendedGcdResult и CRTResult"""

    def test_extended_gcd_result_unpacking(self):
        x, y, g = ExtendedGcdResult(x=2, y=-1, gcd=1)
        assert (x, y, g) == (2, -1, 1)

    def test_crt_result_pair(self):
        result = CRTResult(residue=8, modulus=15, gcd=1, m1_inverse=2, m2_inverse=2)
        assert result.pair == (8, 15)
        assert tuple(result) == (8, 15)
        assert result.to_dict()["m2_inverse"] == 2

    def test_results_are_frozen(self):
        result = ExtendedGcdResult(x=2, y=-1, gcd=1)
        with pytest.raises(dataclasses.FrozenInstanceError):
            result.gcd = 5  # type: ignore[misc]


# =============================================================================
# FACTOR MAP TESTS
# =============================================================================


class TestFactorMap:
    """Тесты для FactorMap"""

    def test_sorted_by_base(self):
        factors = FactorMap({5: 1, -1: 1, 2: 2})
        assert list(factors) == [-1, 2, 5]
        assert factors.primes() == [2, 5]

    def test_value(self):
        assert FactorMap({-1: 1, 2: 2, 3: 1, 5: 1}).value() == -60
        assert FactorMap({}).value() == 1
        assert FactorMap({}, zero=True).value() == 0

    def test_validation(self):
        with pytest.raises(ValueError):
            FactorMap({1: 1})
        with pytest.raises(ValueError):
            FactorMap({2: 0})
        with pytest.raises(ValueError):
            FactorMap({-1: 2})
        with pytest.raises(ValueError):
            FactorMap({2: 1}, zero=True)

    def test_prime_power(self):
        assert FactorMap({3: 4}).is_prime_power()
        assert FactorMap({-1: 1, 3: 4}).is_prime_power()
        assert not FactorMap({2: 1, 3: 1}).is_prime_power()
        assert not FactorMap({}).is_prime_power()

    def test_equality_and_hash(self):
        assert FactorMap({2: 1, 3: 1}) == FactorMap({3: 1, 2: 1})
        assert hash(FactorMap({2: 1, 3: 1})) == hash(FactorMap({3: 1, 2: 1}))
        assert FactorMap({2: 3}) == {2: 3}
        assert FactorMap({}, zero=True) != FactorMap({})
        assert FactorMap({}, zero=True) != {}

    def test_format(self):
        assert FactorMap({}, zero=True).format() == "0"
        assert FactorMap({}).format() == "1"
        assert FactorMap({7: 2}).format() == "(7)^2"

    def test_dict_round_trip(self):
        original = FactorMap({-1: 1, 2: 63})
        assert FactorMap.from_dict(original.to_dict()) == original
        assert FactorMap.from_dict({"value": 0, "factors": []}).is_zero

    def test_from_dict_product_mismatch(self):
        with pytest.raises(ValueError):
            FactorMap.from_dict({"value": 7, "factors": [{"base": 2, "exponent": 1}]})

    def test_fits(self):
        """min_value INT64 представим, его модуль — нет."""
        assert FactorMap({-1: 1, 2: 63}).fits(IntWidth.INT64)
        assert not FactorMap({2: 63}).fits(IntWidth.INT64)
        assert FactorMap({2: 63}).fits(None)


# =============================================================================
# CONFIG TESTS
# =============================================================================


class TestConfigs:
    """Тесты для Pydantic конфигураций"""

    def test_defaults(self):
        crt = CRTConfig()
        assert crt.pre_reduce_inputs and crt.reduce_each_step

        pollard = PollardConfig()
        assert (pollard.base, pollard.begin, pollard.end) == (2, 0, 100)

        safe = SafePrimeConfig(bits=64)
        assert safe.certainty == DEFAULT_CERTAINTY
        assert safe.max_attempts is None

    def test_configs_are_frozen(self):
        config = CRTConfig()
        with pytest.raises(ValidationError):
            config.reduce_each_step = False  # type: ignore[misc]

    def test_bits_required(self):
        with pytest.raises(ValidationError):
            SafePrimeConfig()  # type: ignore[call-arg]


# =============================================================================
# ERROR TESTS
# =============================================================================


class TestErrors:
    """Тесты иерархии ошибок"""

    def test_hierarchy(self):
        for error in (InvalidModulus, UndefinedInverse, IllegalArgument, FixedWidthOverflow):
            assert issubclass(error, NumberTheoryViolation)
        assert issubclass(IncompatibleCongruences, IllegalArgument)

    def test_builtin_compatibility(self):
        assert issubclass(InvalidModulus, ValueError)
        assert issubclass(IllegalArgument, ValueError)
        assert issubclass(UndefinedInverse, ArithmeticError)
        assert issubclass(FixedWidthOverflow, OverflowError)

    def test_require_modulus(self):
        require_modulus(1)
        require_modulus(2, minimum=2)
        with pytest.raises(InvalidModulus, match=">= 2"):
            require_modulus(1, minimum=2)
