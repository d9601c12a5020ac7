"""
GcdEngine — НОД, расширенный алгоритм Евклида, НОК

Модуль обеспечивает базовый слой для обращения по модулю и CRT:
- gcd: итеративный алгоритм Евклида на абсолютных значениях
- extended_gcd: коэффициенты Безу x*a + y*b == gcd(a, b) без рекурсии
- lcm: |a / gcd(a, b) * b| с проверкой представимости

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. gcd(a, b) >= 0; gcd(0, 0) == 0; gcd(a, 0) == |a|
2. Для фиксированной ширины результат, не представимый в ширине
   (|min_value| == 2^(bits-1)), вызывает FixedWidthOverflow
3. Рекурсия не используется (глубина стека не зависит от входа)
"""

from typing import Optional

from src.ntheory.domain.errors import IllegalArgument
from src.ntheory.domain.results import ExtendedGcdResult
from src.ntheory.domain.widths import DEFAULT_WIDTH, IntWidth, ensure_operands


# =============================================================================
# GCD
# =============================================================================


def gcd(a: int, b: int, width: Optional[IntWidth] = DEFAULT_WIDTH) -> int:
    """
    Наибольший общий делитель (итеративный алгоритм Евклида).

    Args:
        a: Первое целое
        b: Второе целое
        width: Ширина целых (None — произвольная точность)

    Returns:
        gcd(a, b) >= 0

    Raises:
        FixedWidthOverflow: Если операнд вне ширины или |gcd| не представим
            (например, gcd(INT64.min_value, 0) == 2^63)

    Examples:
        >>> gcd(1071, 462)
        21
        >>> gcd(-12, 18)
        6
        >>> gcd(0, 0)
        0
    """
    ensure_operands(width, a=a, b=b)

    # gcd неотрицателен: работаем с абсолютными значениями
    larger, smaller = abs(a), abs(b)
    if larger < smaller:
        larger, smaller = smaller, larger

    # gcd(larger, smaller) == gcd(smaller, larger mod smaller)
    while smaller != 0:
        larger, smaller = smaller, larger % smaller

    if width is not None:
        width.ensure_fits(larger, "gcd")
    return larger


# =============================================================================
# EXTENDED GCD
# =============================================================================


def extended_gcd(a: int, b: int, width: Optional[IntWidth] = DEFAULT_WIDTH) -> ExtendedGcdResult:
    """
    Расширенный алгоритм Евклида.

    Находит x, y такие что x*a + y*b == g == gcd(a, b), g >= 0.

    Итеративная рекуррента цепной дроби: на каждом шаге
    (r_{i+1}, s_{i+1}, t_{i+1}) = (r_{i-1}, s_{i-1}, t_{i-1}) - q_i * (r_i, s_i, t_i).
    Для неотрицательных a, b все коэффициенты ограничены max(a, b) / g,
    поэтому промежуточные значения остаются в ширине.

    Args:
        a: Первое целое (для фиксированной ширины: a >= 0)
        b: Второе целое (для фиксированной ширины: b >= 0)
        width: Ширина целых (None — любые знаки, нормализуются внутри)

    Returns:
        ExtendedGcdResult(x, y, gcd)

    Raises:
        IllegalArgument: Если width задана и a < 0 или b < 0
        FixedWidthOverflow: Если операнд вне ширины

    Examples:
        >>> r = extended_gcd(1071, 462)
        >>> r.gcd, 1071 * r.x + 462 * r.y
        (21, 21)
    """
    ensure_operands(width, a=a, b=b)
    if width is not None and (a < 0 or b < 0):
        raise IllegalArgument(
            f"extended_gcd requires non-negative operands for int{width.value}, got a={a}, b={b}"
        )

    sign_a = -1 if a < 0 else 1
    sign_b = -1 if b < 0 else 1

    # Простые случаи: хотя бы один операнд равен нулю
    if a == 0:
        if b == 0:
            return ExtendedGcdResult(0, 0, 0)
        return ExtendedGcdResult(0, sign_b, abs(b))
    if b == 0:
        return ExtendedGcdResult(sign_a, 0, abs(a))

    old_r, r = abs(a), abs(b)
    old_s, s = 1, 0
    old_t, t = 0, 1
    while r != 0:
        quotient = old_r // r
        old_r, r = r, old_r - quotient * r
        old_s, s = s, old_s - quotient * s
        old_t, t = t, old_t - quotient * t

    # old_s * |a| + old_t * |b| == old_r
    return ExtendedGcdResult(sign_a * old_s, sign_b * old_t, old_r)


# =============================================================================
# LCM
# =============================================================================


def lcm(a: int, b: int, width: Optional[IntWidth] = DEFAULT_WIDTH) -> int:
    """
    Наименьшее общее кратное.

    Args:
        a: Первое целое
        b: Второе целое
        width: Ширина целых (None — произвольная точность)

    Returns:
        |a / gcd(a, b) * b|; 0 если a == 0 или b == 0

    Raises:
        FixedWidthOverflow: Если операнд вне ширины или результат не представим

    Examples:
        >>> lcm(4, 6)
        12
        >>> lcm(-4, 6)
        12
        >>> lcm(0, 5)
        0
    """
    ensure_operands(width, a=a, b=b)
    if a == 0 or b == 0:
        return 0

    # gcd(a, b) может быть 2^(bits-1) (a == b == min_value): считаем без ширины
    divisor = gcd(a, b, width=None)
    result = abs(a // divisor * b)

    if width is not None:
        width.ensure_fits(result, "lcm")
    return result
