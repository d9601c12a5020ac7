"""
CRTSolver — Китайская теорема об остатках для двух сравнений

Решает систему:
    r ≡ n1 (mod m1)
    r ≡ n2 (mod m2)

Обобщение на не взаимно простые модули:
- g = gcd(m1, m2) через расширенный алгоритм Евклида (x*m1 + y*m2 == g)
- При g != 1 система совместна только если n1 ≡ n2 (mod g)
- m1 и m2 делятся на g перед применением формулы

ФОРМУЛА:
    L = lcm(m1, m2) = (m1 / g) * m2
    r = n1 * (m2 / g) * (y mod m1) + n2 * (m1 / g) * (x mod m2)   (mod L)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. r ≡ n1 (mod m1), r ≡ n2 (mod m2), L == lcm(m1, m2)
2. Конфигурация (CRTConfig) влияет только на диапазон промежуточных значений
3. L, не представимый в ширине, вызывает FixedWidthOverflow
"""

import logging
from collections.abc import Iterable
from typing import Optional

from src.ntheory.domain.config import CRTConfig
from src.ntheory.domain.errors import IllegalArgument, IncompatibleCongruences, require_modulus
from src.ntheory.domain.results import CRTResult
from src.ntheory.domain.widths import DEFAULT_WIDTH, IntWidth, ensure_operands, fits
from src.ntheory.math.euclid import extended_gcd
from src.ntheory.math.modular import mod_mult

logger = logging.getLogger(__name__)


def _unreduced_terms(
    n1: int,
    m2_reduced: int,
    m2_inverse: int,
    n2: int,
    m1_reduced: int,
    m1_inverse: int,
    width: Optional[IntWidth],
) -> Optional[int]:
    """Сумма слагаемых формулы без промежуточного приведения или None при переполнении."""
    lhs = n1 * m2_reduced
    rhs = n2 * m1_reduced
    if not (fits(width, lhs) and fits(width, rhs)):
        return None
    lhs *= m2_inverse
    rhs *= m1_inverse
    if not (fits(width, lhs) and fits(width, rhs) and fits(width, lhs + rhs)):
        return None
    return lhs + rhs


def combine(
    n1: int,
    m1: int,
    n2: int,
    m2: int,
    config: Optional[CRTConfig] = None,
    width: Optional[IntWidth] = DEFAULT_WIDTH,
) -> CRTResult:
    """
    Объединение двух сравнений по китайской теореме об остатках.

    Args:
        n1: Остаток по первому модулю
        m1: Первый модуль (m1 >= 2)
        n2: Остаток по второму модулю
        m2: Второй модуль (m2 >= 2)
        config: Режимы приведения (по умолчанию CRTConfig())
        width: Ширина целых (None — произвольная точность)

    Returns:
        CRTResult(residue в [0, L - 1], L = lcm(m1, m2), gcd, m1_inverse, m2_inverse)

    Raises:
        InvalidModulus: Если m1 < 2 или m2 < 2
        IncompatibleCongruences: Если n1 ≢ n2 (mod gcd(m1, m2))
        FixedWidthOverflow: Если операнд вне ширины или lcm(m1, m2) не представим

    Examples:
        >>> combine(2, 3, 3, 5).pair
        (8, 15)
        >>> combine(3, 4, 5, 6).pair  # gcd == 2
        (11, 12)
    """
    config = config or CRTConfig()
    ensure_operands(width, n1=n1, m1=m1, n2=n2, m2=m2)
    require_modulus(m1, 2)
    require_modulus(m2, 2)

    bezout = extended_gcd(m1, m2, width)
    g = bezout.gcd

    m1_reduced, m2_reduced = m1, m2
    if g != 1:
        if n1 % g != n2 % g:
            raise IncompatibleCongruences(
                f"{n1} (mod {m1}) and {n2} (mod {m2}) disagree modulo gcd={g}"
            )
        m1_reduced //= g
        m2_reduced //= g

    modulus = m1_reduced * m2
    if width is not None:
        width.ensure_fits(modulus, "lcm(m1, m2)")

    if config.pre_reduce_inputs:
        n1 %= m1
        n2 %= m2

    # Перекрёстные коэффициенты: x*m1 ≡ g (mod m2), y*m2 ≡ g (mod m1)
    m1_inverse = bezout.x % m2
    m2_inverse = bezout.y % m1

    total: Optional[int] = None
    if not config.reduce_each_step:
        total = _unreduced_terms(n1, m2_reduced, m2_inverse, n2, m1_reduced, m1_inverse, width)
        if total is None:
            logger.debug(
                "crt: unreduced products overflow int%s, reducing each step mod %d",
                width.value,
                modulus,
            )

    if total is None:
        lhs = mod_mult(mod_mult(n1, m2_reduced, modulus, width), m2_inverse, modulus, width)
        rhs = mod_mult(mod_mult(n2, m1_reduced, modulus, width), m1_inverse, modulus, width)
        # lhs, rhs центрированы: сумма лежит в [-L, L]
        total = lhs + rhs

    return CRTResult(
        residue=total % modulus,
        modulus=modulus,
        gcd=g,
        m1_inverse=m1_inverse,
        m2_inverse=m2_inverse,
    )


def combine_many(
    congruences: Iterable[tuple[int, int]],
    config: Optional[CRTConfig] = None,
    width: Optional[IntWidth] = DEFAULT_WIDTH,
) -> CRTResult:
    """
    Последовательное объединение нескольких сравнений (левая свёртка combine).

    Args:
        congruences: Пары (n_i, m_i), не менее двух
        config: Режимы приведения
        width: Ширина целых

    Returns:
        CRTResult последнего шага (modulus == lcm всех m_i)

    Raises:
        IllegalArgument: Если передано меньше двух сравнений
        IncompatibleCongruences: Если система несовместна
    """
    pairs = list(congruences)
    if len(pairs) < 2:
        raise IllegalArgument(f"at least two congruences are required, got {len(pairs)}")

    residue, modulus = pairs[0]
    result: Optional[CRTResult] = None
    for n, m in pairs[1:]:
        result = combine(residue, modulus, n, m, config=config, width=width)
        residue, modulus = result.pair
    return result
