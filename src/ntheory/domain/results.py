"""
Results — Неизменяемые результаты операций движка

Value objects, создаваемые и потребляемые в рамках одного вызова:
- ExtendedGcdResult: (x, y, g) такие что x*a + y*b == g == gcd(a, b)
- CRTResult: (r, L) и вспомогательные gcd/обратные элементы
- FactorMap: разложение на простые (с псевдо-множителем -1 для знака)

Все объекты сериализуются в JSON-совместимые dict через to_dict()
(контракты: src/ntheory/contracts/schema/).
"""

from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from typing import Any, Dict, Final, Optional

from src.ntheory.domain.widths import IntWidth


# Псевдо-множитель знака в FactorMap
SIGN_FACTOR: Final[int] = -1


# =============================================================================
# EXTENDED GCD
# =============================================================================


@dataclass(frozen=True)
class ExtendedGcdResult:
    """Результат расширенного алгоритма Евклида: x*a + y*b == gcd >= 0."""

    x: int
    y: int
    gcd: int

    def __iter__(self) -> Iterator[int]:
        # Распаковка как тройки: x, y, g = extended_gcd(a, b)
        return iter((self.x, self.y, self.gcd))

    def to_dict(self) -> Dict[str, Any]:
        return {"x": self.x, "y": self.y, "gcd": self.gcd}


# =============================================================================
# CRT
# =============================================================================


@dataclass(frozen=True)
class CRTResult:
    """
    Результат китайской теоремы об остатках для двух сравнений.

    residue ≡ n1 (mod m1), residue ≡ n2 (mod m2), modulus == lcm(m1, m2).

    Attributes:
        residue: Совместный остаток в [0, modulus - 1]
        modulus: lcm(m1, m2)
        gcd: gcd(m1, m2)
        m1_inverse: Коэффициент при m1 из extended gcd, приведённый mod m2
        m2_inverse: Коэффициент при m2 из extended gcd, приведённый mod m1
    """

    residue: int
    modulus: int
    gcd: int
    m1_inverse: int
    m2_inverse: int

    @property
    def pair(self) -> tuple[int, int]:
        """Только ответ: (residue, modulus)."""
        return (self.residue, self.modulus)

    def __iter__(self) -> Iterator[int]:
        return iter(self.pair)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "residue": self.residue,
            "modulus": self.modulus,
            "gcd": self.gcd,
            "m1_inverse": self.m1_inverse,
            "m2_inverse": self.m2_inverse,
        }


# =============================================================================
# FACTOR MAP
# =============================================================================


class FactorMap(Mapping[int, int]):
    """
    Разложение целого на простые множители.

    Ключи: простые числа или SIGN_FACTOR (-1) для отрицательных значений.
    Значения: положительные показатели степени.

    Инвариант: произведение base^exponent по всем элементам == исходное значение.
    Крайнее отрицательное значение ширины раскладывается как {-1: 1, 2: bits - 1}.
    Ноль не имеет разложения: пустая карта с флагом zero.

    Примеры:
        >>> FactorMap({-1: 1, 2: 2, 3: 1, 5: 1}).value()
        -60
        >>> FactorMap({}).value()
        1
    """

    __slots__ = ("_factors", "_zero")

    def __init__(self, factors: Mapping[int, int], zero: bool = False):
        for base, exponent in factors.items():
            if base != SIGN_FACTOR and base < 2:
                raise ValueError(f"factor base must be a prime or -1, got {base}")
            if exponent < 1:
                raise ValueError(f"exponent must be positive, got {exponent} for base {base}")
            if base == SIGN_FACTOR and exponent != 1:
                raise ValueError(f"sign factor exponent must be 1, got {exponent}")
        if zero and factors:
            raise ValueError("zero has no factors")
        self._factors: Dict[int, int] = {base: factors[base] for base in sorted(factors)}
        self._zero = zero

    def __getitem__(self, base: int) -> int:
        return self._factors[base]

    def __iter__(self) -> Iterator[int]:
        return iter(self._factors)

    def __len__(self) -> int:
        return len(self._factors)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, FactorMap):
            return self._factors == other._factors and self._zero == other._zero
        if isinstance(other, Mapping):
            return not self._zero and self._factors == dict(other.items())
        return NotImplemented

    def __hash__(self) -> int:
        return hash((tuple(self._factors.items()), self._zero))

    def __repr__(self) -> str:
        return f"FactorMap({self._factors!r})"

    @property
    def is_negative(self) -> bool:
        return SIGN_FACTOR in self._factors

    @property
    def is_zero(self) -> bool:
        """True для разложения нуля (пустое, но value() == 0)."""
        return self._zero

    def primes(self) -> list[int]:
        """Простые множители по возрастанию (без псевдо-множителя знака)."""
        return [base for base in self._factors if base != SIGN_FACTOR]

    def is_prime_power(self) -> bool:
        """True если абсолютное значение — степень одного простого."""
        return len(self.primes()) == 1

    def value(self) -> int:
        """Восстановление исходного значения (точное, без ограничения ширины)."""
        if self._zero:
            return 0
        result = 1
        for base, exponent in self._factors.items():
            result *= base**exponent
        return result

    def fits(self, width: Optional[IntWidth]) -> bool:
        """True если восстановленное значение представимо в ширине."""
        return width is None or width.fits(self.value())

    def format(self) -> str:
        """
        Текстовое представление разложения.

        Examples:
            >>> FactorMap({-1: 1, 2: 2, 3: 1}).format()
            '(-1)^1 * (2)^2 * (3)^1'
        """
        if self._zero:
            return "0"
        if not self._factors:
            return "1"
        return " * ".join(f"({base})^{exponent}" for base, exponent in self._factors.items())

    def to_dict(self) -> Dict[str, Any]:
        return {
            "value": self.value(),
            "factors": [
                {"base": base, "exponent": exponent}
                for base, exponent in self._factors.items()
            ],
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "FactorMap":
        """
        Обратная операция к to_dict().

        Raises:
            ValueError: Если произведение множителей не совпадает с value
        """
        value = data["value"]
        factors = {item["base"]: item["exponent"] for item in data["factors"]}
        result = cls(factors, zero=(value == 0))
        if result.value() != value:
            raise ValueError(f"factors reconstruct {result.value()}, expected {value}")
        return result
