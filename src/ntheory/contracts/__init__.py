"""
Contract Validation Module

Модуль для валидации JSON представлений результатов ntheory.
"""

from .validators import (
    ContractValidator,
    CRTResultValidator,
    ExtendedGcdResultValidator,
    FactorMapValidator,
    SchemaLoader,
    validate_crt_result,
    validate_extended_gcd_result,
    validate_factor_map,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "FactorMapValidator",
    "CRTResultValidator",
    "ExtendedGcdResultValidator",
    # Functions
    "validate_factor_map",
    "validate_crt_result",
    "validate_extended_gcd_result",
]
