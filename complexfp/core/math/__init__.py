"""
Core math modules для complexfp

Комплексное число над IEEE-754 binary32/binary64 и вспомогательные
численные примитивы.
"""

# Precision
from complexfp.core.math.precision import (
    EPS_COMPARE_BINARY32,
    EPS_COMPARE_BINARY64,
    EPS_COMPARE_REL_BINARY32,
    EPS_COMPARE_REL_BINARY64,
    Precision,
)

# Complex value type
from complexfp.core.math.complex_number import (
    Complex,
    Complex32,
    Complex64,
    PrecisionMismatchError,
    complex_type,
)

# Numerical Safeguards
from complexfp.core.math.numerical_safeguards import (
    ToleranceConfig,
    has_inf,
    has_nan,
    is_close,
    is_close_complex,
    is_finite,
    validate_tolerance,
)

__all__ = [
    # Precision — Epsilon constants
    "EPS_COMPARE_BINARY32",
    "EPS_COMPARE_BINARY64",
    "EPS_COMPARE_REL_BINARY32",
    "EPS_COMPARE_REL_BINARY64",
    # Precision — Types
    "Precision",
    # Complex — Types
    "Complex",
    "Complex32",
    "Complex64",
    # Complex — Exceptions
    "PrecisionMismatchError",
    # Complex — Functions
    "complex_type",
    # Numerical Safeguards — Config
    "ToleranceConfig",
    # Numerical Safeguards — Epsilon comparisons
    "is_close",
    "is_close_complex",
    # Numerical Safeguards — IEEE-754 inspection
    "has_inf",
    "has_nan",
    "is_finite",
    # Numerical Safeguards — Validation
    "validate_tolerance",
]
