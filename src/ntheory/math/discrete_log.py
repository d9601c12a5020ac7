"""
DiscreteLogSolver — Дискретный логарифм

Находит наименьшее p >= 0 такое что n^p ≡ target (mod m):
- baby_step_giant_step: алгоритм Шенкса за O(sqrt(m)) времени и памяти
- linear_search: полный перебор за O(m) (малые модули, эталон для тестов,
  случаи без обратного элемента)
- is_primitive_root: n порождает мультипликативную группу (Z/mZ)*

Baby-step/giant-step:
    bound = ceil(sqrt(m))
    Таблица: n^i mod m → i для i в [0, bound) (хранится наименьший i)
    giant_step = n^(-bound) mod m
    Шаг j: target * giant_step^j совпал с n^i → p = j * bound + i

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Таблица локальна для вызова и не разделяется между вызовами
2. Возвращается наименьший показатель (согласовано с linear_search)
3. Соглашение 0^0 == 0 соблюдается так же, как в mod_pow
"""

import logging
from math import isqrt
from typing import Optional

from src.ntheory.domain.errors import UndefinedInverse, require_modulus
from src.ntheory.domain.widths import DEFAULT_WIDTH, IntWidth, ensure_operands
from src.ntheory.math.factorization import euler_totient, factor
from src.ntheory.math.euclid import gcd
from src.ntheory.math.modular import mod_mult, mod_pow

logger = logging.getLogger(__name__)


def _ceil_sqrt(m: int) -> int:
    root = isqrt(m)
    return root if root * root == m else root + 1


# =============================================================================
# BABY-STEP GIANT-STEP
# =============================================================================


def baby_step_giant_step(
    n: int,
    target: int,
    m: int,
    width: Optional[IntWidth] = DEFAULT_WIDTH,
) -> Optional[int]:
    """
    Дискретный логарифм алгоритмом Шенкса (baby-step/giant-step).

    Вырожденные случаи (target ≡ 1, n ≡ 1, n ≡ -1) решаются без таблицы.

    Args:
        n: Основание (gcd(n, m) == 1)
        target: Искомое значение
        m: Модуль (m >= 1)
        width: Ширина целых (None — произвольная точность)

    Returns:
        Наименьшее p >= 0 такое что n^p ≡ target (mod m), или None

    Raises:
        InvalidModulus: Если m < 1
        UndefinedInverse: Если gcd(n, m) != 1 (в т.ч. n ≡ 0)
        FixedWidthOverflow: Если операнд вне ширины

    Examples:
        >>> baby_step_giant_step(2, 9, 11)  # 2^6 == 64 ≡ 9 (mod 11)
        6
        >>> baby_step_giant_step(4, 2, 7)  # 4^2 == 16 ≡ 2 (mod 7)
        2
    """
    ensure_operands(width, n=n, target=target, m=m)
    require_modulus(m)
    if m == 1:
        return 0

    base = n % m
    goal = target % m
    common = gcd(base, m, width)
    if common != 1:
        raise UndefinedInverse(f"gcd({n}, {m}) = {common} != 1, baby-step giant-step needs an inverse")

    if goal == 1:
        return 0
    if base == 1:
        return None
    if base == m - 1:
        return 1 if goal == m - 1 else None

    bound = _ceil_sqrt(m)
    table: dict[int, int] = {}
    power = 1
    for i in range(bound):
        table.setdefault(power, i)
        power = mod_mult(power, base, m, width) % m
    logger.debug("bsgs: %d baby steps for m=%d", len(table), m)

    # giant_step == (n^-1)^bound
    giant_step = mod_pow(base, -bound, m, width)
    guess = goal
    for j in range(bound):
        i = table.get(guess)
        if i is not None:
            return j * bound + i
        guess = mod_mult(guess, giant_step, m, width) % m
    return None


# =============================================================================
# LINEAR SEARCH
# =============================================================================


def linear_search(
    n: int,
    target: int,
    m: int,
    width: Optional[IntWidth] = DEFAULT_WIDTH,
) -> Optional[int]:
    """
    Дискретный логарифм полным перебором p в [0, m).

    Не требует обратного элемента. Для n ≡ 0 действует соглашение 0^0 == 0:
    все степени равны 0.

    Returns:
        Наименьшее p >= 0 такое что n^p ≡ target (mod m), или None

    Raises:
        InvalidModulus: Если m < 1

    Examples:
        >>> linear_search(3, 13, 17)  # 3^4 == 81 ≡ 13 (mod 17)
        4
        >>> linear_search(2, 3, 4) is None
        True
    """
    ensure_operands(width, n=n, target=target, m=m)
    require_modulus(m)
    if m == 1:
        return 0

    base = n % m
    goal = target % m
    if base == 0:
        return 0 if goal == 0 else None

    power = 1
    for p in range(m):
        if power == goal:
            return p
        power = mod_mult(power, base, m, width) % m
    return None


# =============================================================================
# PRIMITIVE ROOT
# =============================================================================


def is_primitive_root(n: int, m: int, width: Optional[IntWidth] = DEFAULT_WIDTH) -> bool:
    """
    Проверка, является ли n первообразным корнем по модулю m.

    Первообразные корни существуют только для m == 2, 4, p^e, 2 * p^e
    (p нечётное простое). n — первообразный корень тогда и только тогда,
    когда gcd(n, m) == 1 и n^(φ(m)/q) ≢ 1 (mod m) для каждого простого q | φ(m).

    Args:
        n: Проверяемое основание
        m: Модуль (m >= 1)
        width: Ширина целых

    Returns:
        True если n порождает (Z/mZ)*

    Raises:
        InvalidModulus: Если m < 1

    Examples:
        >>> is_primitive_root(3, 7)
        True
        >>> is_primitive_root(2, 7)
        False
    """
    ensure_operands(width, n=n, m=m)
    require_modulus(m)
    if m == 1:
        return False

    residue = n % m
    if m < 5:
        # Для m в {2, 3, 4} единственный первообразный корень: m - 1
        return residue != 0 and residue == m - 1

    odd_part = m
    if m % 2 == 0:
        odd_part //= 2
        if odd_part % 2 == 0:
            return False

    if residue < 2:
        return False
    if residue == m - 1:
        return m == 6
    if gcd(residue, m, width) != 1:
        return False

    if not factor(odd_part, width).is_prime_power():
        return False

    phi = euler_totient(odd_part, width)
    for q in factor(phi, width).primes():
        if mod_pow(residue, phi // q, m, width) == 1:
            return False
    return True
