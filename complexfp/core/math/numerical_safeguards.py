"""
Numerical Safeguards — Приближённые сравнения и инспекция IEEE-754

Тип Complex сравнивается только покомпонентно и точно. Модуль предоставляет
вызывающей стороне то, что в сам тип намеренно не встроено:
- Epsilon-сравнения скаляров и комплексных чисел с толерантностью по формату
- Инспекцию компонент на NaN/Inf (результаты деления на ноль, переполнения)
- Валидацию параметров толерантности

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Сравнение с NaN всегда False (как и в IEEE-754)
2. Сравнение комплексных чисел разных форматов запрещено (PrecisionMismatchError)
3. Толерантность по умолчанию определяется форматом первого операнда
"""

import math
from dataclasses import dataclass
from typing import Optional

from complexfp.core.math.complex_number import Complex, PrecisionMismatchError
from complexfp.core.math.precision import Precision


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class ToleranceConfig:
    """Толерантности приближённого сравнения.

    Алгоритм:
        abs(a - b) <= max(rel_tol * max(abs(a), abs(b)), abs_tol)
    """

    abs_tol: float
    rel_tol: float = 0.0

    def __post_init__(self) -> None:
        validate_tolerance(self.abs_tol, "abs_tol")
        if self.rel_tol != 0.0:
            validate_tolerance(self.rel_tol, "rel_tol")

    @classmethod
    def for_precision(cls, precision: Precision) -> "ToleranceConfig":
        """Толерантность по умолчанию для формата."""
        precision = Precision(precision)
        return cls(abs_tol=precision.tolerance, rel_tol=precision.rel_tolerance)


# =============================================================================
# EPSILON-СРАВНЕНИЯ
# =============================================================================


def is_close(a: float, b: float, tol: Optional[ToleranceConfig] = None) -> bool:
    """
    Сравнение вещественных значений с учётом толерантности.

    Args:
        a: Первое значение (float или numpy-скаляр)
        b: Второе значение
        tol: Толерантность (default: по формату a; binary64 для float)

    Returns:
        True если значения близки; False если хотя бы одно NaN

    Examples:
        >>> is_close(1.0, 1.0 + 1e-12)
        True
        >>> is_close(1.0, 1.1)
        False
        >>> is_close(float("inf"), float("inf"))
        True
    """
    if tol is None:
        try:
            precision = Precision.of(a)
        except TypeError:
            precision = Precision.BINARY64
        tol = ToleranceConfig.for_precision(precision)
    return math.isclose(float(a), float(b), rel_tol=tol.rel_tol, abs_tol=tol.abs_tol)


def is_close_complex(
    a: Complex,
    b: Complex,
    tol: Optional[ToleranceConfig] = None,
) -> bool:
    """
    Покомпонентное приближённое сравнение комплексных чисел.

    Args:
        a: Первое значение
        b: Второе значение (того же формата)
        tol: Толерантность (default: по формату a)

    Returns:
        True если обе компоненты близки

    Raises:
        PrecisionMismatchError: Если форматы a и b различаются
    """
    if a.precision is not b.precision:
        raise PrecisionMismatchError(
            f"Cannot compare {a.precision.value} and {b.precision.value} complex values"
        )

    if tol is None:
        tol = ToleranceConfig.for_precision(a.precision)

    return is_close(a.re, b.re, tol) and is_close(a.im, b.im, tol)


# =============================================================================
# ИНСПЕКЦИЯ IEEE-754
# =============================================================================


def is_finite(z: Complex) -> bool:
    """True если обе компоненты конечны (не NaN, не Inf)."""
    return math.isfinite(z.re) and math.isfinite(z.im)


def has_nan(z: Complex) -> bool:
    """True если хотя бы одна компонента NaN."""
    return math.isnan(z.re) or math.isnan(z.im)


def has_inf(z: Complex) -> bool:
    """True если хотя бы одна компонента бесконечна."""
    return math.isinf(z.re) or math.isinf(z.im)


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def validate_tolerance(value: float, name: str) -> None:
    """
    Валидация параметра толерантности.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        ValueError: Если value <= 0 или NaN/Inf
    """
    if not math.isfinite(value):
        raise ValueError(f"{name} must be a valid float (not NaN/Inf), got {value}")

    if value <= 0:
        raise ValueError(f"{name} must be positive, got {value}")
