"""
Domain models and value objects.

Contains the plain-data form of complex values.
"""

from complexfp.core.domain.complex_record import ComplexRecord

__all__ = [
    # Complex record model
    "ComplexRecord",
]
