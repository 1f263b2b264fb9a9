"""
ComplexRecord — Плоская запись комплексного значения

Immutable Pydantic модель: форма комплексного числа из встроенных float
для передачи внутри процесса (dict, диагностика, явная смена формата).

Конверсия Complex -> ComplexRecord -> Complex без потерь в обоих форматах:
binary32 точно представим в float, обратное приведение к float32 точное.
"""

from pydantic import BaseModel, Field

from complexfp.core.math.complex_number import Complex, complex_type
from complexfp.core.math.precision import Precision


# =============================================================================
# COMPLEX RECORD MODEL
# =============================================================================


class ComplexRecord(BaseModel):
    """
    Плоская запись комплексного числа.

    Immutable модель (frozen=True). NaN и Inf в компонентах допустимы.
    """

    precision: Precision = Field(..., description="Формат элемента (binary32/binary64)")
    re: float = Field(..., description="Вещественная часть")
    im: float = Field(..., description="Мнимая часть")

    model_config = {"frozen": True}

    @classmethod
    def from_complex(cls, z: Complex) -> "ComplexRecord":
        """
        Запись из комплексного числа.

        Args:
            z: Complex32 или Complex64

        Returns:
            ComplexRecord с форматом z
        """
        return cls(precision=z.precision, re=float(z.re), im=float(z.im))

    def to_complex(self) -> Complex:
        """Комплексное число формата записи."""
        return complex_type(self.precision)(self.re, self.im)
