"""
Domain models and value objects.

Contains integer widths, typed errors, immutable results and configs.
"""

from src.ntheory.domain.config import (
    DEFAULT_CERTAINTY,
    P_MINUS_ONE_DEFAULT_BASE,
    P_MINUS_ONE_DEFAULT_END,
    CRTConfig,
    PollardConfig,
    SafePrimeConfig,
)
from src.ntheory.domain.errors import (
    FixedWidthOverflow,
    IllegalArgument,
    IncompatibleCongruences,
    InvalidModulus,
    NumberTheoryViolation,
    UndefinedInverse,
    require_modulus,
)
from src.ntheory.domain.results import (
    SIGN_FACTOR,
    CRTResult,
    ExtendedGcdResult,
    FactorMap,
)
from src.ntheory.domain.widths import (
    DEFAULT_WIDTH,
    FIRST_PRIME,
    FIRST_SAFE_PRIME,
    LARGEST_PRIME,
    LARGEST_SAFE_PRIME,
    SECOND_PRIME,
    SECOND_SAFE_PRIME,
    IntWidth,
    ensure_operands,
    fits,
)

__all__ = [
    # Config
    "DEFAULT_CERTAINTY",
    "P_MINUS_ONE_DEFAULT_BASE",
    "P_MINUS_ONE_DEFAULT_END",
    "CRTConfig",
    "PollardConfig",
    "SafePrimeConfig",
    # Errors
    "FixedWidthOverflow",
    "IllegalArgument",
    "IncompatibleCongruences",
    "InvalidModulus",
    "NumberTheoryViolation",
    "UndefinedInverse",
    "require_modulus",
    # Results
    "SIGN_FACTOR",
    "CRTResult",
    "ExtendedGcdResult",
    "FactorMap",
    # Widths
    "DEFAULT_WIDTH",
    "FIRST_PRIME",
    "FIRST_SAFE_PRIME",
    "LARGEST_PRIME",
    "LARGEST_SAFE_PRIME",
    "SECOND_PRIME",
    "SECOND_SAFE_PRIME",
    "IntWidth",
    "ensure_operands",
    "fits",
]
