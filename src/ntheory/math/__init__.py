"""
Math modules для ntheory

Модульная арифметика и элементарная теория чисел с точностью на границах
фиксированной ширины. Вариант произвольной точности: src.ntheory.math.bigint.
"""

# Errors (реэкспорт из domain)
from src.ntheory.domain.errors import (
    FixedWidthOverflow,
    IllegalArgument,
    IncompatibleCongruences,
    InvalidModulus,
    NumberTheoryViolation,
    UndefinedInverse,
)

# GcdEngine
from src.ntheory.math.euclid import (
    extended_gcd,
    gcd,
    lcm,
)

# ModularRing
from src.ntheory.math.modular import (
    mod,
    mod_add,
    mod_inverse,
    mod_min,
    mod_mult,
    mod_pow,
    mod_sub,
)

# CRTSolver
from src.ntheory.math.crt import (
    combine,
    combine_many,
)

# PrimalityOracle
from src.ntheory.math.primality import (
    is_prime,
    is_safe_prime,
    prime_after,
    prime_before,
    safe_prime_after,
    safe_prime_before,
)

# Factorizer
from src.ntheory.math.factorization import (
    euler_totient,
    factor,
    pollards_p_minus_one,
    pollards_p_minus_one_with,
)

# DiscreteLogSolver
from src.ntheory.math.discrete_log import (
    baby_step_giant_step,
    is_primitive_root,
    linear_search,
)

# Arbitrary precision
from src.ntheory.math.bigint import (
    is_probable_prime,
    is_probable_safe_prime,
    isqrt,
    mod_powers,
    probable_safe_prime,
    probable_safe_prime_with,
)

__all__ = [
    # Errors
    "FixedWidthOverflow",
    "IllegalArgument",
    "IncompatibleCongruences",
    "InvalidModulus",
    "NumberTheoryViolation",
    "UndefinedInverse",
    # GcdEngine
    "extended_gcd",
    "gcd",
    "lcm",
    # ModularRing
    "mod",
    "mod_add",
    "mod_inverse",
    "mod_min",
    "mod_mult",
    "mod_pow",
    "mod_sub",
    # CRTSolver
    "combine",
    "combine_many",
    # PrimalityOracle
    "is_prime",
    "is_safe_prime",
    "prime_after",
    "prime_before",
    "safe_prime_after",
    "safe_prime_before",
    # Factorizer
    "euler_totient",
    "factor",
    "pollards_p_minus_one",
    "pollards_p_minus_one_with",
    # DiscreteLogSolver
    "baby_step_giant_step",
    "is_primitive_root",
    "linear_search",
    # Arbitrary precision
    "is_probable_prime",
    "is_probable_safe_prime",
    "isqrt",
    "mod_powers",
    "probable_safe_prime",
    "probable_safe_prime_with",
]
