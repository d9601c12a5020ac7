"""
Errors — Типизированные нарушения числовой теории

Все ошибки движка синхронные и пробрасываются вызывающему немедленно:
- InvalidModulus: модуль вне допустимого диапазона операции
- UndefinedInverse: gcd(n, m) != 1 или n ≡ 0 (mod m)
- IllegalArgument: некорректные диапазоны/аргументы
- IncompatibleCongruences: система сравнений CRT несовместна
- FixedWidthOverflow: истинный результат не представим в фиксированной ширине

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Ошибка никогда не сопровождается частично вычисленным результатом
2. Ни одна ошибка не перехватывается и не повторяется внутри движка
3. Каждая ошибка остаётся совместимой с соответствующим builtin-исключением
"""


class NumberTheoryViolation(Exception):
    """Базовый класс для всех ошибок движка."""

    pass


class InvalidModulus(NumberTheoryViolation, ValueError):
    """
    Модуль вне требуемого диапазона.

    Большинство операций требуют m >= 1; обращение и CRT требуют m >= 2.
    Модуль никогда не приводится к допустимому молча.
    """

    pass


class UndefinedInverse(NumberTheoryViolation, ArithmeticError):
    """Обратный элемент не существует: gcd(n, m) != 1 или n ≡ 0 (mod m)."""

    pass


class IllegalArgument(NumberTheoryViolation, ValueError):
    """Некорректный аргумент (например, end < begin или недопустимое основание)."""

    pass


class IncompatibleCongruences(IllegalArgument):
    """
    Система n ≡ n1 (mod m1), n ≡ n2 (mod m2) не имеет решений.

    Возникает при n1 ≢ n2 (mod gcd(m1, m2)).
    """

    pass


class FixedWidthOverflow(NumberTheoryViolation, OverflowError):
    """
    Истинный математический результат не представим в выбранной ширине.

    Пример: gcd(INT64.min_value, 0) == 2^63 > INT64.max_value.
    """

    pass


def require_modulus(m: int, minimum: int = 1) -> None:
    """
    Валидация модуля.

    Args:
        m: Модуль
        minimum: Минимально допустимое значение (1 или 2)

    Raises:
        InvalidModulus: Если m < minimum
    """
    if m < minimum:
        raise InvalidModulus(f"modulus must be >= {minimum}, got {m}")
