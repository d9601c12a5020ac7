"""
BigInt — Вариант движка для целых произвольной точности

Повторяет контракты GcdEngine, ModularRing и CRTSolver без ограничений ширины
(все вызовы с width=None) и добавляет операции, имеющие смысл только для
неограниченных целых:
- isqrt: целый квадратный корень методом Ньютона (floor / ceil)
- mod_powers: последовательные степени основания по модулю
- is_probable_prime: вероятностная проверка простоты (Miller–Rabin из sympy)
- is_probable_safe_prime / probable_safe_prime: вероятно-безопасные простые

Вероятностная проверка простоты не реализуется здесь, а делегируется sympy.
"""

import logging
import random
from typing import Optional

from sympy import isprime
from sympy.ntheory.primetest import mr

from src.ntheory.domain.config import DEFAULT_CERTAINTY, CRTConfig, SafePrimeConfig
from src.ntheory.domain.errors import IllegalArgument, UndefinedInverse, require_modulus
from src.ntheory.domain.results import CRTResult, ExtendedGcdResult
from src.ntheory.math.crt import combine as _combine
from src.ntheory.math.euclid import extended_gcd as _extended_gcd
from src.ntheory.math.euclid import gcd as _gcd
from src.ntheory.math.euclid import lcm as _lcm
from src.ntheory.math.modular import mod as _mod
from src.ntheory.math.modular import mod_inverse as _mod_inverse
from src.ntheory.math.modular import mod_min as _mod_min
from src.ntheory.math.modular import mod_mult as _mod_mult
from src.ntheory.math.modular import mod_pow as _mod_pow

logger = logging.getLogger(__name__)


# =============================================================================
# ЦЕЛЫЙ КВАДРАТНЫЙ КОРЕНЬ
# =============================================================================


def isqrt(n: int, ceil: bool = False) -> int:
    """
    Целый квадратный корень методом Ньютона.

    Итерация x_{k+1} = (x_k + n // x_k) // 2 от начального приближения
    2^ceil(bits/2) >= sqrt(n) монотонно убывает до floor(sqrt(n)).

    Args:
        n: Неотрицательное целое
        ceil: False — floor(sqrt(n)), True — ceil(sqrt(n))

    Returns:
        floor(sqrt(n)) или ceil(sqrt(n))

    Raises:
        IllegalArgument: Если n < 0

    Examples:
        >>> isqrt(99)
        9
        >>> isqrt(99, ceil=True)
        10
        >>> isqrt(100, ceil=True)
        10
    """
    if n < 0:
        raise IllegalArgument(f"square root of negative {n} is not an integer")
    if n < 2:
        return n

    x = 1 << ((n.bit_length() + 1) // 2)
    while True:
        y = (x + n // x) // 2
        if y >= x:
            break
        x = y

    if ceil and x * x != n:
        return x + 1
    return x


# =============================================================================
# GCD / МОДУЛЬНАЯ АРИФМЕТИКА / CRT БЕЗ ОГРАНИЧЕНИЯ ШИРИНЫ
# =============================================================================


def gcd(a: int, b: int) -> int:
    return _gcd(a, b, width=None)


def extended_gcd(a: int, b: int) -> ExtendedGcdResult:
    """Расширенный алгоритм Евклида; знаки a и b любые."""
    return _extended_gcd(a, b, width=None)


def lcm(a: int, b: int) -> int:
    return _lcm(a, b, width=None)


def mod(n: int, m: int) -> int:
    return _mod(n, m, width=None)


def mod_min(n: int, m: int) -> int:
    return _mod_min(n, m, width=None)


def mod_mult(a: int, b: int, m: int) -> int:
    return _mod_mult(a, b, m, width=None)


def mod_inverse(n: int, m: int) -> int:
    return _mod_inverse(n, m, width=None)


def mod_pow(n: int, p: int, m: int) -> int:
    """n^p mod m в центрированной форме (0^0 == 0)."""
    return _mod_pow(n, p, m, width=None)


def crt(n1: int, m1: int, n2: int, m2: int, config: Optional[CRTConfig] = None) -> CRTResult:
    """Китайская теорема об остатках для двух сравнений без ограничения ширины."""
    return _combine(n1, m1, n2, m2, config=config, width=None)


# =============================================================================
# ПОСЛЕДОВАТЕЛЬНЫЕ СТЕПЕНИ
# =============================================================================


def mod_powers(n: int, m: int, begin: int, end: int) -> list[int]:
    """
    Степени n^begin, n^(begin+1), ..., n^(end-1) по модулю m.

    Особые случаи n ≡ 0, 1, -1 (mod m) заполняются без умножений.
    Отрицательные показатели допустимы при gcd(n, m) == 1.

    Args:
        n: Основание
        m: Модуль (m >= 1)
        begin: Первый показатель (включительно)
        end: Последний показатель (исключительно)

    Returns:
        Список длины end - begin в канонической форме [0, m - 1]

    Raises:
        InvalidModulus: Если m < 1
        IllegalArgument: Если end < begin
        UndefinedInverse: Если begin < 0 и n не обратим по модулю m

    Examples:
        >>> mod_powers(3, 7, 0, 6)
        [1, 3, 2, 6, 4, 5]
        >>> mod_powers(6, 7, 1, 4)
        [6, 1, 6]
    """
    require_modulus(m)
    if end < begin:
        raise IllegalArgument(f"end {end} must be >= begin {begin}")

    length = end - begin
    if length == 0:
        return []

    n %= m
    if n == 0:
        if begin < 0:
            raise UndefinedInverse(f"0 (mod {m}) cannot be raised to negative power {begin}")
        return [0] * length
    if n == 1:
        return [1] * length
    if n == m - 1:
        return [1 if (begin + i) % 2 == 0 else n for i in range(length)]

    result = []
    power = _mod_pow(n, begin, m, width=None) % m
    for _ in range(length):
        result.append(power)
        power = power * n % m
    return result


# =============================================================================
# ВЕРОЯТНОСТНАЯ ПРОСТОТА
# =============================================================================


def is_probable_prime(
    n: int,
    certainty: Optional[int] = DEFAULT_CERTAINTY,
    rng: Optional[random.Random] = None,
) -> bool:
    """
    Вероятностная проверка простоты.

    Miller–Rabin с ceil(certainty / 2) случайными основаниями: вероятность
    признать составное число простым не превышает 2^-certainty.

    Args:
        n: Проверяемое целое
        certainty: Уверенность; <= 0 — всегда True, None — строгая
            проверка sympy.isprime (без ложных срабатываний)
        rng: Источник оснований (по умолчанию random.SystemRandom)

    Returns:
        False если n составное; True если n вероятно простое

    Examples:
        >>> is_probable_prime(2**61 - 1)
        True
        >>> is_probable_prime(561)  # число Кармайкла
        False
    """
    if certainty is None:
        return bool(isprime(n))
    if certainty <= 0:
        return True

    if n < 4:
        return n == 2 or n == 3
    if n % 2 == 0:
        return False

    rng = rng or random.SystemRandom()
    rounds = (certainty + 1) // 2
    bases = [rng.randrange(2, n - 1) for _ in range(rounds)]
    return bool(mr(n, bases))


def is_probable_safe_prime(
    n: int,
    certainty: Optional[int] = DEFAULT_CERTAINTY,
    rng: Optional[random.Random] = None,
) -> bool:
    """
    n и (n - 1) / 2 вероятно простые.

    Examples:
        >>> is_probable_safe_prime(2**64 - 59)  # (p - 1) / 2 чётно
        False
        >>> is_probable_safe_prime(23)
        True
    """
    if n < 5 or n % 2 == 0:
        return False
    if n > 7 and n % 12 != 11:
        return False
    return is_probable_prime((n - 1) // 2, certainty, rng) and is_probable_prime(n, certainty, rng)


def probable_safe_prime(
    bits: int,
    certainty: Optional[int] = DEFAULT_CERTAINTY,
    rng: Optional[random.Random] = None,
    max_attempts: Optional[int] = None,
) -> int:
    """
    Случайное вероятно-безопасное простое заданной битовой длины.

    Кандидаты: нечётные числа с установленным старшим битом; кандидат
    принимается, если он и (p - 1) / 2 вероятно простые.

    Args:
        bits: Битовая длина p (bits >= 3)
        certainty: Уверенность теста простоты
        rng: Источник случайности (по умолчанию random.SystemRandom)
        max_attempts: Ограничение числа кандидатов (None — без ограничения)

    Returns:
        p, 2^(bits-1) <= p < 2^bits, p и (p - 1) / 2 вероятно простые

    Raises:
        IllegalArgument: Если bits < 3 или кандидаты исчерпаны
    """
    if bits < 3:
        raise IllegalArgument(f"no safe prime has {bits} bits")
    config = SafePrimeConfig(bits=bits, certainty=certainty, max_attempts=max_attempts)
    return probable_safe_prime_with(config, rng)


def probable_safe_prime_with(config: SafePrimeConfig, rng: Optional[random.Random] = None) -> int:
    """probable_safe_prime с параметрами из SafePrimeConfig."""
    rng = rng or random.SystemRandom()
    top = 1 << (config.bits - 1)

    attempts = 0
    while config.max_attempts is None or attempts < config.max_attempts:
        attempts += 1
        candidate = rng.getrandbits(config.bits) | top | 1
        if is_probable_safe_prime(candidate, config.certainty, rng):
            logger.debug("safe prime: %d-bit candidate accepted after %d attempts", config.bits, attempts)
            return candidate

    raise IllegalArgument(
        f"no {config.bits}-bit safe prime found within {config.max_attempts} attempts"
    )
