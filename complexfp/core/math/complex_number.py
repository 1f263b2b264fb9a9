"""
Complex — Комплексное число над IEEE-754 float

Значение (re, im) с компонентами одного формата (binary32 или binary64):
- Конструкторы: new(re, im), zero(), one(), i()
- Аксессоры: conjugate(), norm(), norm_squared()
- Поле: + - * / между комплексными, унарный минус
- Умножение на скаляр справа: z * s
- Текстовое представление: "re + |im|i" / "re - |im|i"

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. re и im всегда одного numpy-типа (float32 или float64), смешанных форматов нет
2. Никакой нормализации: -0.0, NaN, Inf сохраняются как есть
3. Все операции тотальны: деление на ноль и переполнение дают Inf/NaN в компонентах,
   без исключений и без RuntimeWarning (независимо от глобального numpy.seterr)
4. Значения неизменяемы, операции всегда возвращают новый экземпляр
5. Равенство строго покомпонентное (IEEE-754 ==), без epsilon

ФОРМУЛЫ:
    (a + bi) * (c + di) = (ac - bd) + (ad + bc)i
    (a + bi) / (c + di) = [(ac + bd) + (bc - ad)i] / (c^2 + d^2)
    |z| = sqrt(a^2 + b^2)  (без hypot-масштабирования)
"""

from dataclasses import dataclass
from numbers import Real
from typing import ClassVar, Final, Generic, TypeVar

import numpy as np

from complexfp.core.math.precision import Precision

T = TypeVar("T", np.float32, np.float64)


# =============================================================================
# EXCEPTIONS
# =============================================================================


class PrecisionMismatchError(TypeError):
    """
    Операция между комплексными числами разных форматов.

    Complex32 и Complex64 не смешиваются: приведение формата выполняется
    вызывающей стороной явно (например, через ComplexRecord).
    """

    pass


# =============================================================================
# ПРИВЕДЕНИЕ К ФОРМАТУ
# =============================================================================


def _to_element(dtype: type[np.floating], value: Real) -> np.floating:
    """
    Приведение вещественного значения к формату элемента.

    Целые вне диапазона float округляются к ±Inf, как того требует
    IEEE-754, вместо OverflowError из int -> float.
    """
    try:
        return dtype(value)
    except OverflowError:
        return dtype(np.inf) if value > 0 else dtype(-np.inf)


# =============================================================================
# COMPLEX VALUE TYPE
# =============================================================================


@dataclass(frozen=True, eq=False, repr=False, slots=True)
class Complex(Generic[T]):
    """
    Комплексное число re + im·i над типом элемента T.

    Базовый класс не инстанцируется: формат фиксируют Complex32 и Complex64.
    Входные значения приводятся к numpy dtype формата.

    Examples:
        >>> z = Complex64.new(3.0, 4.0)
        >>> float(z.norm())
        5.0
        >>> str(Complex64(1.0, -2.0))
        '1.0 - 2.0i'
    """

    re: T
    im: T

    precision: ClassVar[Precision]

    # numpy не должен перехватывать операции вида np.float64(2) * z
    __array_ufunc__ = None

    def __post_init__(self) -> None:
        precision = getattr(type(self), "precision", None)
        if precision is None:
            raise TypeError(
                f"{type(self).__name__} is generic over the element type; "
                f"use Complex32 or Complex64"
            )

        dtype = precision.dtype
        with np.errstate(all="ignore"):
            object.__setattr__(self, "re", _to_element(dtype, self.re))
            object.__setattr__(self, "im", _to_element(dtype, self.im))

    # -------------------------------------------------------------------------
    # Конструкторы
    # -------------------------------------------------------------------------

    @classmethod
    def new(cls, re: float, im: float) -> "Complex[T]":
        """Новое комплексное число (re, im)."""
        return cls(re, im)

    @classmethod
    def zero(cls) -> "Complex[T]":
        """0 + 0i"""
        return cls(0.0, 0.0)

    @classmethod
    def one(cls) -> "Complex[T]":
        """1 + 0i"""
        return cls(1.0, 0.0)

    @classmethod
    def i(cls) -> "Complex[T]":
        """Мнимая единица 0 + 1i"""
        return cls(0.0, 1.0)

    @classmethod
    def from_complex(cls, value: complex) -> "Complex[T]":
        """
        Конверсия из встроенного complex.

        Для Complex32 компоненты округляются до binary32.
        """
        return cls(value.real, value.imag)

    # -------------------------------------------------------------------------
    # Аксессоры
    # -------------------------------------------------------------------------

    def conjugate(self) -> "Complex[T]":
        """Сопряжённое число: (re, -im)."""
        return type(self)(self.re, -self.im)

    def norm_squared(self) -> T:
        """
        Квадрат модуля: re^2 + im^2.

        Дешевле norm() (без sqrt), поэтому предпочтителен для сравнений
        величин и вероятностных расчётов.
        """
        with np.errstate(all="ignore"):
            return self.re * self.re + self.im * self.im

    magnitude_squared = norm_squared

    def norm(self) -> T:
        """Модуль: sqrt(re^2 + im^2) в формате элемента."""
        with np.errstate(all="ignore"):
            return np.sqrt(self.norm_squared())

    # -------------------------------------------------------------------------
    # Арифметика (именованные методы)
    # -------------------------------------------------------------------------

    def add(self, other: "Complex[T]") -> "Complex[T]":
        self._check_precision(other)
        with np.errstate(all="ignore"):
            return type(self)(self.re + other.re, self.im + other.im)

    def sub(self, other: "Complex[T]") -> "Complex[T]":
        self._check_precision(other)
        with np.errstate(all="ignore"):
            return type(self)(self.re - other.re, self.im - other.im)

    def mul(self, other: "Complex[T]") -> "Complex[T]":
        self._check_precision(other)
        with np.errstate(all="ignore"):
            return type(self)(
                self.re * other.re - self.im * other.im,
                self.re * other.im + self.im * other.re,
            )

    def div(self, other: "Complex[T]") -> "Complex[T]":
        """
        Деление без масштабирования.

        При other == 0 знаменатель равен нулю, и компоненты результата
        получаются по правилам IEEE-754 (Inf и/или NaN).
        """
        self._check_precision(other)
        with np.errstate(all="ignore"):
            denom = other.norm_squared()
            re = (self.re * other.re + self.im * other.im) / denom
            im = (self.im * other.re - self.re * other.im) / denom
            return type(self)(re, im)

    def neg(self) -> "Complex[T]":
        return type(self)(-self.re, -self.im)

    def mul_scalar(self, scalar: float) -> "Complex[T]":
        """
        Умножение на вещественный скаляр справа: (re·s, im·s).

        Args:
            scalar: Вещественное число, приводится к формату элемента
                (целые вне диапазона float дают ±Inf)

        Returns:
            Новое комплексное число того же формата
        """
        with np.errstate(all="ignore"):
            s = _to_element(self.precision.dtype, scalar)
            return type(self)(self.re * s, self.im * s)

    # -------------------------------------------------------------------------
    # Операторы
    # -------------------------------------------------------------------------

    def __add__(self, other: object) -> "Complex[T]":
        if not isinstance(other, Complex):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: object) -> "Complex[T]":
        if not isinstance(other, Complex):
            return NotImplemented
        return self.sub(other)

    def __mul__(self, other: object) -> "Complex[T]":
        if isinstance(other, Complex):
            return self.mul(other)
        if isinstance(other, Real):
            return self.mul_scalar(other)
        return NotImplemented

    def __truediv__(self, other: object) -> "Complex[T]":
        if not isinstance(other, Complex):
            return NotImplemented
        return self.div(other)

    def __neg__(self) -> "Complex[T]":
        return self.neg()

    def __abs__(self) -> T:
        return self.norm()

    # -------------------------------------------------------------------------
    # Равенство и копирование
    # -------------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Complex):
            return NotImplemented
        if other.precision is not self.precision:
            return False
        return bool(self.re == other.re and self.im == other.im)

    def __hash__(self) -> int:
        return hash((self.precision, float(self.re), float(self.im)))

    def __copy__(self) -> "Complex[T]":
        return self

    def __deepcopy__(self, memo: dict) -> "Complex[T]":
        return self

    def __reduce__(self) -> tuple:
        return (type(self), (self.re, self.im))

    def __complex__(self) -> complex:
        return complex(float(self.re), float(self.im))

    # -------------------------------------------------------------------------
    # Текстовое представление
    # -------------------------------------------------------------------------

    def __str__(self) -> str:
        # NaN не < 0, поэтому попадает в ветку "+"
        sign = "-" if self.im < 0 else "+"
        return f"{self.re!s} {sign} {abs(self.im)!s}i"

    def __repr__(self) -> str:
        return f"{type(self).__name__}(re={self.re!s}, im={self.im!s})"

    def _check_precision(self, other: "Complex") -> None:
        if other.precision is not self.precision:
            raise PrecisionMismatchError(
                f"Cannot combine {self.precision.value} and {other.precision.value} "
                f"complex values"
            )


# =============================================================================
# КОНКРЕТНЫЕ ФОРМАТЫ
# =============================================================================


class Complex32(Complex[np.float32]):
    """Комплексное число с компонентами binary32 (numpy.float32)."""

    __slots__ = ()
    precision = Precision.BINARY32


class Complex64(Complex[np.float64]):
    """Комплексное число с компонентами binary64 (numpy.float64)."""

    __slots__ = ()
    precision = Precision.BINARY64


_COMPLEX_TYPES: Final[dict[Precision, type[Complex]]] = {
    Precision.BINARY32: Complex32,
    Precision.BINARY64: Complex64,
}


def complex_type(precision: Precision) -> type[Complex]:
    """
    Конкретный класс комплексного числа для формата.

    Args:
        precision: Precision или его строковое значение ("binary32"/"binary64")

    Returns:
        Complex32 или Complex64
    """
    return _COMPLEX_TYPES[Precision(precision)]
