"""
ModularRing — Арифметика в кольце вычетов Z/mZ

Модуль обеспечивает точную модульную арифметику на границах фиксированной ширины:
- Каноническое приведение mod: [0, m - 1]
- Центрированное приведение mod_min: [-floor(m/2), floor(m/2)]
- Сложение, вычитание, умножение, возведение в степень, обращение

Формы результатов:
- mod, mod_inverse → каноническая форма [0, m - 1]
- mod_min, mod_add, mod_sub, mod_mult, mod_pow → центрированная форма

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Промежуточные значения остаются в [-m, m] и, значит, представимы в ширине
2. mod_mult при угрозе переполнения переходит на "double-and-add" за O(log min(|a|, |b|))
3. 0^0 == 0 (явное соглашение движка, отличается от математического 0^0 == 1)
4. Отрицательная степень: n^(-p) == (n^-1)^p; при gcd(n, m) != 1 → UndefinedInverse
5. Ничья в mod_min (m чётно, |n mod m| == m/2) разрешается в пользу неотрицательного
   кандидата m/2
"""

import logging
from typing import Optional

from src.ntheory.domain.errors import UndefinedInverse, require_modulus
from src.ntheory.domain.widths import DEFAULT_WIDTH, IntWidth, ensure_operands, fits
from src.ntheory.math.euclid import extended_gcd

logger = logging.getLogger(__name__)


# =============================================================================
# ПРИВЕДЕНИЕ
# =============================================================================


def mod(n: int, m: int, width: Optional[IntWidth] = DEFAULT_WIDTH) -> int:
    """
    Каноническое приведение по модулю.

    Args:
        n: Целое
        m: Модуль (m >= 1)
        width: Ширина целых (None — произвольная точность)

    Returns:
        r в [0, m - 1], r ≡ n (mod m)

    Raises:
        InvalidModulus: Если m <= 0
        FixedWidthOverflow: Если операнд вне ширины

    Examples:
        >>> mod(-7, 5)
        3
        >>> mod(7, 5)
        2
    """
    ensure_operands(width, n=n, m=m)
    require_modulus(m)
    return n % m


def _centered(n: int, m: int) -> int:
    # Оба кандидата: r и r - m; берём строго меньший по модулю, иначе r
    r = n % m
    alt = r - m
    if abs(alt) < abs(r):
        return alt
    return r


def mod_min(n: int, m: int, width: Optional[IntWidth] = DEFAULT_WIDTH) -> int:
    """
    Центрированное приведение по модулю (минимальный по модулю представитель).

    Вычисляет оба кандидата {n mod m, (n mod m) - m} и возвращает тот,
    у которого абсолютное значение строго меньше. При точной ничьей
    (m чётно и n mod m == m/2) возвращается неотрицательный кандидат m/2.

    Args:
        n: Целое
        m: Модуль (m >= 1)
        width: Ширина целых (None — произвольная точность)

    Returns:
        r в [-floor(m/2), floor(m/2)], r ≡ n (mod m)

    Raises:
        InvalidModulus: Если m <= 0
        FixedWidthOverflow: Если операнд вне ширины

    Examples:
        >>> mod_min(4, 5)
        -1
        >>> mod_min(2, 4)  # ничья: 2 и -2
        2
        >>> mod_min(-2, 4)
        2
    """
    ensure_operands(width, n=n, m=m)
    require_modulus(m)
    return _centered(n, m)


# =============================================================================
# СЛОЖЕНИЕ / ВЫЧИТАНИЕ
# =============================================================================


def mod_add(a: int, b: int, m: int, width: Optional[IntWidth] = DEFAULT_WIDTH) -> int:
    """
    Сложение по модулю.

    Оба операнда приводятся к центрированной форме, поэтому сумма
    лежит в [-m, m] и представима в ширине.

    Returns:
        (a + b) mod m в центрированной форме

    Raises:
        InvalidModulus: Если m <= 0
        FixedWidthOverflow: Если операнд вне ширины

    Examples:
        >>> mod_add(4, 3, 5)
        2
    """
    ensure_operands(width, a=a, b=b, m=m)
    require_modulus(m)
    return _centered(_centered(a, m) + _centered(b, m), m)


def mod_sub(a: int, b: int, m: int, width: Optional[IntWidth] = DEFAULT_WIDTH) -> int:
    """
    Вычитание по модулю.

    Returns:
        (a - b) mod m в центрированной форме

    Raises:
        InvalidModulus: Если m <= 0
        FixedWidthOverflow: Если операнд вне ширины

    Examples:
        >>> mod_sub(1, 3, 5)
        -2
    """
    ensure_operands(width, a=a, b=b, m=m)
    require_modulus(m)
    return _centered(_centered(a, m) - _centered(b, m), m)


# =============================================================================
# УМНОЖЕНИЕ
# =============================================================================


def _double_and_add(x: int, y: int, m: int) -> int:
    # x, y центрированы: |x|, |y| <= m/2, поэтому каждая сумма лежит в [-m, m]
    if abs(y) < abs(x):
        x, y = y, x
    # |x| <= |y|: x задаёт биты, y удваивается
    if x < 0:
        x, y = -x, -y

    result = 0
    while x != 0:
        if x & 1:
            result = _centered(result + y, m)
        y = _centered(y + y, m)
        x >>= 1
    return result


def _mult(x: int, y: int, m: int, width: Optional[IntWidth]) -> int:
    """Произведение центрированных x, y (без валидации входов)."""
    product = x * y
    if fits(width, product):
        return _centered(product, m)

    logger.debug("mod_mult: %d * %d overflows int%s, using double-and-add", x, y, width.value)
    return _double_and_add(x, y, m)


def mod_mult(a: int, b: int, m: int, width: Optional[IntWidth] = DEFAULT_WIDTH) -> int:
    """
    Умножение по модулю без переполнения.

    Сначала пробуется прямое произведение центрированных операндов;
    если оно не представимо в ширине, выполняется "double-and-add":
    один операнд многократно удваивается по модулю m и условно накапливается,
    все промежуточные значения остаются в [-m, m].

    Время: O(1) при отсутствии переполнения, иначе O(log min(|a|, |b|)).

    Returns:
        (a * b) mod m в центрированной форме

    Raises:
        InvalidModulus: Если m <= 0
        FixedWidthOverflow: Если операнд вне ширины

    Examples:
        >>> mod_mult(3, 4, 5)
        2
    """
    ensure_operands(width, a=a, b=b, m=m)
    require_modulus(m)
    return _mult(_centered(a, m), _centered(b, m), m, width)


# =============================================================================
# ОБРАЩЕНИЕ
# =============================================================================


def mod_inverse(n: int, m: int, width: Optional[IntWidth] = DEFAULT_WIDTH) -> int:
    """
    Обратный элемент по модулю (через расширенный алгоритм Евклида).

    Args:
        n: Целое
        m: Модуль (m >= 2)
        width: Ширина целых (None — произвольная точность)

    Returns:
        x в [0, m - 1] такой что n * x ≡ 1 (mod m)

    Raises:
        InvalidModulus: Если m < 2
        UndefinedInverse: Если n ≡ 0 (mod m) или gcd(n, m) != 1
        FixedWidthOverflow: Если операнд вне ширины

    Examples:
        >>> mod_inverse(3, 7)
        5
        >>> mod_inverse(-3, 7)
        2
    """
    ensure_operands(width, n=n, m=m)
    require_modulus(m, 2)

    residue = n % m
    if residue == 0:
        raise UndefinedInverse(f"{n} ≡ 0 (mod {m}) has no inverse")

    result = extended_gcd(residue, m, width)
    if result.gcd != 1:
        raise UndefinedInverse(f"gcd({n}, {m}) = {result.gcd} != 1, inverse is undefined")
    return result.x % m


# =============================================================================
# ВОЗВЕДЕНИЕ В СТЕПЕНЬ
# =============================================================================


def _pow(base: int, p: int, m: int, width: Optional[IntWidth]) -> int:
    """base центрирован, p > 0; бинарное возведение справа налево."""
    result = 1
    while p != 0:
        if p & 1:
            result = _mult(result, base, m, width)
        base = _mult(base, base, m, width)
        p >>= 1
    return result


def mod_pow(n: int, p: int, m: int, width: Optional[IntWidth] = DEFAULT_WIDTH) -> int:
    """
    Возведение в степень по модулю (повторное возведение в квадрат).

    Особые случаи n ≡ 0, 1, -1 (mod m) обрабатываются без цикла.
    Отрицательная степень переписывается как (n^-1)^|p|. Наименьшая
    представимая степень (p == width.min_value) не отрицается: из неё
    выносится одно дополнительное умножение на n^-1.

    Соглашение: 0^0 == 0.

    Args:
        n: Основание
        p: Показатель (может быть отрицательным)
        m: Модуль (m >= 1)
        width: Ширина целых (None — произвольная точность)

    Returns:
        n^p mod m в центрированной форме

    Raises:
        InvalidModulus: Если m <= 0
        UndefinedInverse: Если p < 0 и gcd(n, m) != 1
        FixedWidthOverflow: Если операнд вне ширины

    Examples:
        >>> mod_pow(3, 4, 5)
        1
        >>> mod_pow(2, -1, 5)  # 2^-1 == 3 ≡ -2 (mod 5)
        -2
        >>> mod_pow(0, 0, 7)
        0
    """
    ensure_operands(width, n=n, p=p, m=m)
    require_modulus(m)
    if m == 1:
        return 0

    base = _centered(n, m)
    if base == 0:
        if p < 0:
            raise UndefinedInverse(f"{n} ≡ 0 (mod {m}) cannot be raised to negative power {p}")
        return 0
    if p == 0 or base == 1:
        return 1
    if base == -1:
        return 1 if p % 2 == 0 else -1

    if p > 0:
        return _pow(base, p, m, width)

    inverse = _centered(mod_inverse(base, m, width), m)
    if width is not None and p == width.min_value:
        # -p не представим: n^p == (n^-1)^(-(p + 1)) * n^-1
        return _mult(_pow(inverse, -(p + 1), m, width), inverse, m, width)
    return _pow(inverse, -p, m, width)
