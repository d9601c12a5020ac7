"""
Config — Конфигурация алгоритмов движка

Immutable Pydantic модели, валидируемые при создании:
- CRTConfig: режимы приведения в китайской теореме об остатках
- PollardConfig: основание и диапазон степеней для p - 1 Полларда
- SafePrimeConfig: параметры генерации вероятно-безопасных простых

Конфигурация влияет только на диапазон промежуточных значений
и объём работы, но никогда на итоговый ответ.
"""

from typing import Final, Optional

from pydantic import BaseModel, Field, field_validator


# =============================================================================
# DEFAULTS
# =============================================================================

# Основание по умолчанию для p - 1 Полларда
P_MINUS_ONE_DEFAULT_BASE: Final[int] = 2

# Конец диапазона степеней по умолчанию для p - 1 Полларда
P_MINUS_ONE_DEFAULT_END: Final[int] = 100

# Уверенность по умолчанию: вероятность ошибки <= 2^-certainty
DEFAULT_CERTAINTY: Final[int] = 64


# =============================================================================
# CRT
# =============================================================================


class CRTConfig(BaseModel):
    """
    Конфигурация CRTSolver.

    pre_reduce_inputs: привести n1 mod m1 и n2 mod m2 до комбинирования.
    reduce_each_step: приводить каждое промежуточное произведение по модулю
        lcm(m1, m2) сразу (ограничивает величину промежуточных значений).
        При False произведения накапливаются без приведения, а для
        фиксированной ширины при угрозе переполнения выполняется
        автоматический переход на поэтапное приведение.
    """

    pre_reduce_inputs: bool = Field(True, description="Приводить входы до комбинирования")
    reduce_each_step: bool = Field(True, description="Приводить каждое промежуточное произведение")

    model_config = {"frozen": True}


# =============================================================================
# POLLARD p - 1
# =============================================================================


class PollardConfig(BaseModel):
    """
    Конфигурация p - 1 Полларда.

    Проверяются gcd(base^(k!) - 1, n) для k в [begin, end).
    """

    base: int = Field(P_MINUS_ONE_DEFAULT_BASE, description="Основание base")
    begin: int = Field(0, ge=0, description="Начало диапазона степеней (включительно)")
    end: int = Field(P_MINUS_ONE_DEFAULT_END, ge=0, description="Конец диапазона степеней (исключительно)")

    model_config = {"frozen": True}

    @field_validator("end")
    @classmethod
    def validate_end_not_before_begin(cls, v: int, info) -> int:
        """Проверка, что end >= begin"""
        if "begin" in info.data:
            begin = info.data["begin"]
            if v < begin:
                raise ValueError(f"end {v} must be >= begin {begin}")
        return v


# =============================================================================
# SAFE PRIME GENERATION
# =============================================================================


class SafePrimeConfig(BaseModel):
    """
    Конфигурация генерации вероятно-безопасных простых.

    Кандидат p принимается, если p и (p - 1) / 2 вероятно простые
    с вероятностью ошибки не более 2^-certainty каждое.
    """

    bits: int = Field(..., ge=3, description="Битовая длина простого p")
    certainty: Optional[int] = Field(
        DEFAULT_CERTAINTY, description="Уверенность теста простоты (None — строгая проверка)"
    )
    max_attempts: Optional[int] = Field(
        None, gt=0, description="Ограничение числа кандидатов (None — без ограничения)"
    )

    model_config = {"frozen": True}
