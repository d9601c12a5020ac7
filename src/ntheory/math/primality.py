"""
PrimalityOracle — Детерминированная проверка простоты пробным делением

Модуль обеспечивает:
- is_prime: колесо 6k ± 1 до floor(sqrt(n))
- is_safe_prime: p и (p - 1) / 2 простые; колесо по модулю 12
- prime_after / prime_before: соседние простые
- safe_prime_after / safe_prime_before: соседние безопасные простые

Колёса:
- Любое простое > 3 сравнимо с 1 или 5 (mod 6)
- Любое безопасное простое > 7 сравнимо с 11 (mod 12): иначе p или (p - 1) / 2
  делится на 2 или 3

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Поиск соседей проверяет каждого кандидата допустимого класса вычетов
   (ни одно простое в просмотренном диапазоне не пропускается)
2. Для фиксированной ширины ответ всегда представим: prime_after(n) требует
   n < LARGEST_PRIME[width], safe_prime_after(n) требует n < LARGEST_SAFE_PRIME[width]
"""

from math import isqrt
from typing import Optional

from src.ntheory.domain.errors import IllegalArgument
from src.ntheory.domain.widths import (
    DEFAULT_WIDTH,
    FIRST_PRIME,
    FIRST_SAFE_PRIME,
    LARGEST_PRIME,
    LARGEST_SAFE_PRIME,
    SECOND_PRIME,
    SECOND_SAFE_PRIME,
    IntWidth,
    ensure_operands,
)


# =============================================================================
# ТЕСТЫ ПРОСТОТЫ
# =============================================================================


def _has_no_wheel_divisor(n: int) -> bool:
    """n нечётно, не делится на 3 и n > 3: пробное деление кандидатами 6k ± 1."""
    bound = isqrt(n)
    i = 5
    while i <= bound:
        if n % i == 0 or n % (i + 2) == 0:
            return False
        i += 6
    return True


def is_prime(n: int, width: Optional[IntWidth] = DEFAULT_WIDTH) -> bool:
    """
    Проверка простоты пробным делением (колесо 6k ± 1).

    Время: O(sqrt(n) / 3).

    Args:
        n: Проверяемое целое (отрицательные и 0, 1 не простые)
        width: Ширина целых (None — произвольная точность)

    Returns:
        True тогда и только тогда, когда n простое

    Examples:
        >>> is_prime(97)
        True
        >>> is_prime(91)
        False
    """
    ensure_operands(width, n=n)
    if n < 4:
        return n == FIRST_PRIME or n == SECOND_PRIME
    if n % 2 == 0 or n % 3 == 0:
        return False
    return _has_no_wheel_divisor(n)


def _is_safe_wheel_candidate(n: int) -> bool:
    """n ≡ 11 (mod 12) и n > 7."""
    if not _has_no_wheel_divisor(n):
        return False
    half = (n - 1) // 2
    if half % 2 == 0 or half % 3 == 0:
        return False
    return _has_no_wheel_divisor(half)


def is_safe_prime(n: int, width: Optional[IntWidth] = DEFAULT_WIDTH) -> bool:
    """
    Проверка безопасной простоты: n простое и (n - 1) / 2 простое.

    Args:
        n: Проверяемое целое
        width: Ширина целых (None — произвольная точность)

    Returns:
        True тогда и только тогда, когда n безопасное простое

    Examples:
        >>> is_safe_prime(23)
        True
        >>> is_safe_prime(13)
        False
    """
    ensure_operands(width, n=n)
    if n < 8:
        return n == FIRST_SAFE_PRIME or n == SECOND_SAFE_PRIME
    if n % 12 != 11:
        return False
    return _is_safe_wheel_candidate(n)


# =============================================================================
# СОСЕДНИЕ ПРОСТЫЕ
# =============================================================================


def prime_after(n: int, width: Optional[IntWidth] = DEFAULT_WIDTH) -> int:
    """
    Наименьшее простое, строго большее n.

    Raises:
        IllegalArgument: Если n >= LARGEST_PRIME[width] (ответ не представим)

    Examples:
        >>> prime_after(13)
        17
        >>> prime_after(-5)
        2
    """
    ensure_operands(width, n=n)
    if width is not None and n >= LARGEST_PRIME[width]:
        raise IllegalArgument(f"no int{width.value} prime after {n}")

    if n < 4:
        if n < 2:
            return FIRST_PRIME
        return SECOND_PRIME if n == 2 else 5

    # Первый кандидат ≡ 5 (mod 6), строго больший n
    residue = n % 6
    if residue == 0:
        if _has_no_wheel_divisor(n + 1):
            return n + 1
        candidate = n + 5
    elif residue == 5:
        if _has_no_wheel_divisor(n + 2):
            return n + 2
        candidate = n + 6
    else:
        candidate = n + 5 - residue

    # candidate ≡ 5 (mod 6): проверяем candidate и candidate + 2
    while True:
        if _has_no_wheel_divisor(candidate):
            return candidate
        if _has_no_wheel_divisor(candidate + 2):
            return candidate + 2
        candidate += 6


def prime_before(n: int, width: Optional[IntWidth] = DEFAULT_WIDTH) -> int:
    """
    Наибольшее простое, строго меньшее n.

    Raises:
        IllegalArgument: Если n < 3 (простых меньше n нет)

    Examples:
        >>> prime_before(17)
        13
        >>> prime_before(3)
        2
    """
    ensure_operands(width, n=n)
    if n < 4:
        if n < 3:
            raise IllegalArgument(f"no prime before {n}")
        return FIRST_PRIME

    # Первый кандидат ≡ 1 (mod 6), строго меньший n
    residue = n % 6
    if residue == 0:
        if _has_no_wheel_divisor(n - 1):
            return n - 1
        candidate = n - 5
    elif residue == 1:
        if _has_no_wheel_divisor(n - 2):
            return n - 2
        candidate = n - 6
    else:
        if n == residue:  # n == 4 или n == 5
            return SECOND_PRIME
        candidate = n + 1 - residue

    # candidate ≡ 1 (mod 6), candidate >= 7: проверяем candidate и candidate - 2
    while True:
        if _has_no_wheel_divisor(candidate):
            return candidate
        if _has_no_wheel_divisor(candidate - 2):
            return candidate - 2
        candidate -= 6


# =============================================================================
# СОСЕДНИЕ БЕЗОПАСНЫЕ ПРОСТЫЕ
# =============================================================================


def safe_prime_after(n: int, width: Optional[IntWidth] = DEFAULT_WIDTH) -> int:
    """
    Наименьшее безопасное простое, строго большее n.

    Raises:
        IllegalArgument: Если n >= LARGEST_SAFE_PRIME[width]

    Examples:
        >>> safe_prime_after(11)
        23
    """
    ensure_operands(width, n=n)
    if width is not None and n >= LARGEST_SAFE_PRIME[width]:
        raise IllegalArgument(f"no int{width.value} safe prime after {n}")

    if n < 8:
        if n < FIRST_SAFE_PRIME:
            return FIRST_SAFE_PRIME
        return SECOND_SAFE_PRIME if n < SECOND_SAFE_PRIME else 11

    residue = n % 12
    candidate = n + 12 if residue == 11 else n + 11 - residue
    while not _is_safe_wheel_candidate(candidate):
        candidate += 12
    return candidate


def safe_prime_before(n: int, width: Optional[IntWidth] = DEFAULT_WIDTH) -> int:
    """
    Наибольшее безопасное простое, строго меньшее n.

    Raises:
        IllegalArgument: Если n < 6 (безопасных простых меньше n нет)

    Examples:
        >>> safe_prime_before(23)
        11
        >>> safe_prime_before(6)
        5
    """
    ensure_operands(width, n=n)
    if n < 8:
        if n < 6:
            raise IllegalArgument(f"no safe prime before {n}")
        return FIRST_SAFE_PRIME

    residue = n % 12
    if residue == 11:
        if n == 11:
            return SECOND_SAFE_PRIME
        candidate = n - 12
    else:
        if n < 13:  # 8 <= n <= 10 или n == 12
            return 11 if n == 12 else SECOND_SAFE_PRIME
        candidate = n - 1 - residue

    # candidate ≡ 11 (mod 12), candidate >= 11
    while not _is_safe_wheel_candidate(candidate):
        candidate -= 12
    return candidate
