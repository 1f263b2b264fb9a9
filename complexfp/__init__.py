"""
complexfp: Complex numbers over IEEE-754 binary floating point

Examples:
    >>> from complexfp import Complex64
    >>> z = Complex64.new(2.0, 3.0) * Complex64.new(1.0, -1.0)
    >>> print(z)
    5.0 + 1.0i
    >>> float(Complex64.new(3.0, 4.0).norm())
    5.0

Types:
    Complex32, Complex64: Complex values with binary32 / binary64 components
    Precision: Element type selector
    ComplexRecord: Plain-data form (pydantic)
"""

from complexfp.core.domain import ComplexRecord
from complexfp.core.math import (
    Complex,
    Complex32,
    Complex64,
    Precision,
    PrecisionMismatchError,
    complex_type,
)

__all__ = [
    "Complex",
    "Complex32",
    "Complex64",
    "ComplexRecord",
    "Precision",
    "PrecisionMismatchError",
    "complex_type",
]

__version__ = "0.1.0"
