"""
Factorizer — Разложение на множители

Модуль обеспечивает:
- factor: разложение пробным делением (2, 3, затем кандидаты 6k ± 1)
- pollards_p_minus_one: поиск нетривиального делителя методом p - 1 Полларда
- euler_totient: функция Эйлера φ(n) через разложение

p - 1 Полларда:
    Если p | n и p - 1 раскладывается только на малые простые, то
    (p - 1) | k! для небольшого k и base^(k!) ≡ 1 (mod p), т.е.
    p | gcd(base^(k!) - 1, n).
    Аккумулятор base^(k!) обновляется инкрементально:
    base^(k!) = (base^((k-1)!))^k — O(end) возведений в степень вместо O(end²).

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Произведение base^exponent по FactorMap == n (включая знак -1)
2. Найденный делитель d удовлетворяет 1 < d < n
3. Рекурсия не используется
"""

import logging
from math import isqrt
from typing import Optional

from src.ntheory.domain.config import P_MINUS_ONE_DEFAULT_BASE, P_MINUS_ONE_DEFAULT_END, PollardConfig
from src.ntheory.domain.errors import IllegalArgument, require_modulus
from src.ntheory.domain.results import SIGN_FACTOR, FactorMap
from src.ntheory.domain.widths import DEFAULT_WIDTH, IntWidth, ensure_operands
from src.ntheory.math.euclid import gcd
from src.ntheory.math.modular import mod_min, mod_pow

logger = logging.getLogger(__name__)


# =============================================================================
# FACTOR
# =============================================================================


def _divide_out(n: int, p: int) -> tuple[int, int]:
    """Делит n на p, пока делится. Возвращает (остаток, показатель)."""
    exponent = 0
    while n % p == 0:
        n //= p
        exponent += 1
    return n, exponent


def factor(n: int, width: Optional[IntWidth] = DEFAULT_WIDTH) -> FactorMap:
    """
    Разложение целого на простые множители пробным делением.

    Сначала выделяются множители 2 и 3, затем перебираются кандидаты
    6k ± 1 до floor(sqrt(оставшегося n)). Остаток > 1 — простой.

    Отрицательное n даёт псевдо-множитель -1 с показателем 1. Крайнее
    отрицательное значение ширины раскладывается как -1 * 2^(bits - 1).

    Args:
        n: Раскладываемое целое
        width: Ширина целых (None — произвольная точность)

    Returns:
        FactorMap; для n == 0 — пустое разложение с флагом zero,
        для n == 1 — пустое разложение

    Examples:
        >>> factor(360).format()
        '(2)^3 * (3)^2 * (5)^1'
        >>> dict(factor(-12))
        {-1: 1, 2: 2, 3: 1}
    """
    ensure_operands(width, n=n)
    if n == 0:
        return FactorMap({}, zero=True)

    factors: dict[int, int] = {}
    if n < 0:
        factors[SIGN_FACTOR] = 1
        # Модуль min_value на единицу вне положительного диапазона: считаем без ширины
        n = -n

    for small in (2, 3):
        n, exponent = _divide_out(n, small)
        if exponent:
            factors[small] = exponent

    candidate = 5
    while n > 1 and candidate <= isqrt(n):
        for p in (candidate, candidate + 2):
            n, exponent = _divide_out(n, p)
            if exponent:
                factors[p] = exponent
        candidate += 6

    if n > 1:
        factors[n] = 1
    return FactorMap(factors)


# =============================================================================
# POLLARD p - 1
# =============================================================================


def _nontrivial_gcd(accumulator: int, n: int) -> Optional[int]:
    """gcd(accumulator - 1, n), если он нетривиален; accumulator центрирован."""
    d = (accumulator - 1) % n
    if d < 2:
        return None
    g = gcd(d, n, width=None)
    return g if g != 1 else None


def pollards_p_minus_one(
    n: int,
    base: int = P_MINUS_ONE_DEFAULT_BASE,
    begin: int = 0,
    end: int = P_MINUS_ONE_DEFAULT_END,
    width: Optional[IntWidth] = DEFAULT_WIDTH,
) -> Optional[int]:
    """
    Нетривиальный делитель n методом p - 1 Полларда.

    Для k в [begin, end) поддерживается base^(k!) mod n и проверяется
    gcd(base^(k!) - 1, n). Первый делитель d с 1 < d < n возвращается сразу.

    Чётные n и n, кратные 3, обрабатываются без цикла (делитель 2 или 3).

    Args:
        n: Раскладываемое целое (n >= 1)
        base: Основание (base ∉ {0, 1, -1} mod n, gcd(base, n) == 1)
        begin: Начало диапазона степеней (включительно, >= 0)
        end: Конец диапазона степеней (исключительно, >= begin)
        width: Ширина целых (None — произвольная точность)

    Returns:
        Делитель d, 1 < d < n, или None если делитель не найден

    Raises:
        InvalidModulus: Если n < 1
        IllegalArgument: Если end < begin, begin < 0, base ≡ 0, 1, -1 (mod n)
            или gcd(base, n) != 1

    Examples:
        >>> pollards_p_minus_one(299)  # 13 * 23, 13 - 1 == 2^2 * 3
        13
        >>> pollards_p_minus_one(13) is None
        True
    """
    ensure_operands(width, n=n, base=base, begin=begin, end=end)
    require_modulus(n)
    if end < begin or begin < 0:
        raise IllegalArgument(f"power range must satisfy 0 <= begin <= end, got [{begin}, {end})")

    if n == 1:
        return None
    if n % 2 == 0:
        return 2 if n != 2 else None
    if n % 3 == 0:
        return 3 if n != 3 else None

    # n >= 5, n не делится на 2 и 3
    reduced_base = base % n
    if reduced_base < 2 or reduced_base == n - 1:
        raise IllegalArgument(f"base {base} ≡ {reduced_base} (mod {n}) is one of 0, 1, -1")
    common = gcd(reduced_base, n, width)
    if common != 1:
        raise IllegalArgument(f"gcd(base={base}, n={n}) = {common} != 1")

    if begin == end:
        return None

    # base^(begin!) mod n
    accumulator = mod_min(reduced_base, n, width)
    for k in range(2, begin + 1):
        accumulator = mod_pow(accumulator, k, n, width)
        if accumulator == 1:
            return None

    divisor = _nontrivial_gcd(accumulator, n)
    if divisor is not None:
        logger.debug("p-1: divisor %d of %d at k=%d", divisor, n, begin)
        return divisor

    for k in range(begin + 1, end):
        accumulator = mod_pow(accumulator, k, n, width)
        if accumulator == 1:
            return None
        divisor = _nontrivial_gcd(accumulator, n)
        if divisor is not None:
            logger.debug("p-1: divisor %d of %d at k=%d", divisor, n, k)
            return divisor

    return None


def pollards_p_minus_one_with(
    n: int,
    config: Optional[PollardConfig] = None,
    width: Optional[IntWidth] = DEFAULT_WIDTH,
) -> Optional[int]:
    """p - 1 Полларда с параметрами из PollardConfig (по умолчанию base=2, [0, 100))."""
    config = config or PollardConfig()
    return pollards_p_minus_one(n, config.base, config.begin, config.end, width)


# =============================================================================
# EULER TOTIENT
# =============================================================================


def euler_totient(n: int, width: Optional[IntWidth] = DEFAULT_WIDTH) -> int:
    """
    Функция Эйлера φ(n): число k в [1, n], взаимно простых с n.

    φ(n) = n * Π(1 - 1/p) по простым p | n.

    Returns:
        φ(n); 0 для n < 1, 1 для n == 1

    Examples:
        >>> euler_totient(36)
        12
        >>> euler_totient(0)
        0
    """
    ensure_operands(width, n=n)
    if n < 1:
        return 0

    result = n
    for p in factor(n, width).primes():
        result -= result // p
    return result
