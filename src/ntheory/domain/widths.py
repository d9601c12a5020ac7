"""
IntWidth — Фиксированные ширины знаковых целых

Движок оперирует знаковыми целыми фиксированной ширины (8/16/32/64 бит)
или целыми произвольной точности (width=None).

В Python int не переполняется, поэтому ширина — это контракт диапазона:
- Входы вне диапазона ширины отклоняются до вычислений
- Результаты, истинное значение которых не представимо, вызывают FixedWidthOverflow
- Промежуточные значения алгоритмов (modMult, modPow, CRT) удерживаются в диапазоне

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. min_value = -2^(bits-1) не имеет положительного двойника
2. Никакой результат не "заворачивается" по модулю 2^bits молча
"""

from enum import Enum
from typing import Final, Optional

from src.ntheory.domain.errors import FixedWidthOverflow


# =============================================================================
# ENUMS
# =============================================================================


class IntWidth(int, Enum):
    """Ширина знакового целого в битах."""

    INT8 = 8
    INT16 = 16
    INT32 = 32
    INT64 = 64

    @property
    def bits(self) -> int:
        return int(self.value)

    @property
    def min_value(self) -> int:
        """Наименьшее представимое значение: -2^(bits-1)."""
        return -(1 << (self.value - 1))

    @property
    def max_value(self) -> int:
        """Наибольшее представимое значение: 2^(bits-1) - 1."""
        return (1 << (self.value - 1)) - 1

    def fits(self, value: int) -> bool:
        """True если value представимо в этой ширине."""
        return self.min_value <= value <= self.max_value

    def ensure_fits(self, value: int, name: str = "value") -> int:
        """
        Проверка представимости значения.

        Args:
            value: Проверяемое значение
            name: Имя значения (для сообщения об ошибке)

        Returns:
            value без изменений

        Raises:
            FixedWidthOverflow: Если value вне [min_value, max_value]
        """
        if not self.fits(value):
            raise FixedWidthOverflow(
                f"{name}={value} is not representable as int{self.value} "
                f"[{self.min_value}, {self.max_value}]"
            )
        return value


# Ширина по умолчанию (аналог long)
DEFAULT_WIDTH: Final[IntWidth] = IntWidth.INT64


def fits(width: Optional[IntWidth], value: int) -> bool:
    """Представимость с учётом произвольной точности (width=None → всегда True)."""
    return width is None or width.fits(value)


def ensure_operands(width: Optional[IntWidth], **operands: int) -> None:
    """
    Проверка, что все операнды представимы в ширине.

    Args:
        width: Ширина или None для произвольной точности
        **operands: Именованные операнды

    Raises:
        FixedWidthOverflow: Если хотя бы один операнд не представим
    """
    if width is None:
        return
    for name, value in operands.items():
        width.ensure_fits(value, name)


# =============================================================================
# PRIME BOUNDS
# =============================================================================

# Наибольшее простое, представимое в каждой ширине
LARGEST_PRIME: Final[dict[IntWidth, int]] = {
    IntWidth.INT8: 127,
    IntWidth.INT16: 32749,
    IntWidth.INT32: 2147483647,
    IntWidth.INT64: 9223372036854775783,
}

# Наибольшее безопасное простое, представимое в каждой ширине
LARGEST_SAFE_PRIME: Final[dict[IntWidth, int]] = {
    IntWidth.INT8: 107,
    IntWidth.INT16: 32603,
    IntWidth.INT32: 2147483579,
    IntWidth.INT64: 9223372036854771239,
}

# Первые простые и безопасные простые
FIRST_PRIME: Final[int] = 2
SECOND_PRIME: Final[int] = 3
FIRST_SAFE_PRIME: Final[int] = 5
SECOND_SAFE_PRIME: Final[int] = 7
