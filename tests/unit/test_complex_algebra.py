"""
Тесты алгебраических законов Complex

Проверяет для конечных значений в обоих форматах:
1. Коммутативность сложения и умножения (точно)
2. Ассоциативность (в пределах толерантности формата)
3. Нейтральные элементы zero/one и обратный по сложению
4. Инволюцию сопряжения и тождество z·conj(z) = |z|^2
5. Согласованность norm и norm_squared
6. Обратимость деления и дистрибутивность скаляра
7. Поворот умножением на i
"""

from itertools import product

import pytest

from complexfp.core.math.complex_number import Complex32, Complex64
from complexfp.core.math.numerical_safeguards import (
    ToleranceConfig,
    is_close,
    is_close_complex,
)

SAMPLES = [
    (2.0, 3.0),
    (1.0, -1.0),
    (0.5, -2.25),
    (-3.75, 4.125),
    (1e-3, 7.5),
    (-6.0, -0.2),
]

NONZERO_PAIRS = list(product(SAMPLES, SAMPLES))

TRIPLES = [
    (SAMPLES[0], SAMPLES[1], SAMPLES[2]),
    (SAMPLES[3], SAMPLES[4], SAMPLES[5]),
    (SAMPLES[5], SAMPLES[0], SAMPLES[3]),
    (SAMPLES[2], SAMPLES[4], SAMPLES[1]),
]

SCALAR_PAIRS = [
    (SAMPLES[0], SAMPLES[1]),
    (SAMPLES[3], SAMPLES[5]),
    (SAMPLES[2], SAMPLES[4]),
]

SCALARS = [0.0, -1.0, 2.5, 1e-3]


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture(params=[Complex32, Complex64], ids=["binary32", "binary64"])
def ctype(request):
    """Конкретный класс комплексного числа (оба формата)."""
    return request.param


@pytest.fixture
def tol(ctype) -> ToleranceConfig:
    """Толерантность по формату."""
    return ToleranceConfig.for_precision(ctype.precision)


# =============================================================================
# ТЕСТЫ: Коммутативность и ассоциативность
# =============================================================================


class TestCommutativity:
    """a + b = b + a; a·b = b·a (точно, без толерантности)"""

    @pytest.mark.parametrize("a, b", NONZERO_PAIRS)
    def test_addition(self, ctype, a, b) -> None:
        x, y = ctype.new(*a), ctype.new(*b)
        assert x + y == y + x

    @pytest.mark.parametrize("a, b", NONZERO_PAIRS)
    def test_multiplication(self, ctype, a, b) -> None:
        x, y = ctype.new(*a), ctype.new(*b)
        assert x * y == y * x


class TestAssociativity:
    """(a + b) + c ≈ a + (b + c); (a·b)·c ≈ a·(b·c)"""

    @pytest.mark.parametrize("a, b, c", TRIPLES)
    def test_addition(self, ctype, tol, a, b, c) -> None:
        x, y, z = ctype.new(*a), ctype.new(*b), ctype.new(*c)
        assert is_close_complex((x + y) + z, x + (y + z), tol)

    @pytest.mark.parametrize("a, b, c", TRIPLES)
    def test_multiplication(self, ctype, tol, a, b, c) -> None:
        x, y, z = ctype.new(*a), ctype.new(*b), ctype.new(*c)
        assert is_close_complex((x * y) * z, x * (y * z), tol)


# =============================================================================
# ТЕСТЫ: Нейтральные и обратные элементы
# =============================================================================


class TestIdentities:
    """Нейтральные элементы и обратный по сложению"""

    @pytest.mark.parametrize("a", SAMPLES)
    def test_additive_identity(self, ctype, a) -> None:
        x = ctype.new(*a)
        assert x + ctype.zero() == x

    @pytest.mark.parametrize("a", SAMPLES)
    def test_multiplicative_identity(self, ctype, a) -> None:
        x = ctype.new(*a)
        assert x * ctype.one() == x

    @pytest.mark.parametrize("a", SAMPLES)
    def test_additive_inverse(self, ctype, a) -> None:
        x = ctype.new(*a)
        assert x + (-x) == ctype.zero()

    @pytest.mark.parametrize("a, b", NONZERO_PAIRS)
    def test_division_inverse(self, ctype, tol, a, b) -> None:
        """(a·b) / b ≈ a при b ≠ 0"""
        x, y = ctype.new(*a), ctype.new(*b)
        assert is_close_complex((x * y) / y, x, tol)

    @pytest.mark.parametrize("a", SAMPLES)
    def test_self_division_is_one(self, ctype, tol, a) -> None:
        x = ctype.new(*a)
        assert is_close_complex(x / x, ctype.one(), tol)


# =============================================================================
# ТЕСТЫ: Сопряжение и модуль
# =============================================================================


class TestConjugateAndNorm:
    """Сопряжение, norm, norm_squared"""

    @pytest.mark.parametrize("a", SAMPLES)
    def test_conjugate_involution(self, ctype, a) -> None:
        x = ctype.new(*a)
        assert x.conjugate().conjugate() == x

    @pytest.mark.parametrize("a", SAMPLES)
    def test_conjugate_norm_identity(self, ctype, tol, a) -> None:
        """a · conj(a) = (|a|^2, 0)"""
        x = ctype.new(*a)
        expected = ctype.new(x.norm_squared(), 0.0)
        assert is_close_complex(x * x.conjugate(), expected, tol)

    @pytest.mark.parametrize("a", SAMPLES)
    def test_norm_consistency(self, ctype, tol, a) -> None:
        """norm(a)^2 ≈ norm_squared(a)"""
        x = ctype.new(*a)
        assert is_close(x.norm() * x.norm(), x.norm_squared(), tol)

    @pytest.mark.parametrize("a", SAMPLES)
    def test_norm_non_negative(self, ctype, a) -> None:
        x = ctype.new(*a)
        assert x.norm() >= 0.0
        assert (-x).norm() == x.norm()
        assert x.conjugate().norm() == x.norm()

    @pytest.mark.parametrize("a, b", NONZERO_PAIRS)
    def test_norm_multiplicative(self, ctype, tol, a, b) -> None:
        """|a·b| ≈ |a|·|b|"""
        x, y = ctype.new(*a), ctype.new(*b)
        assert is_close((x * y).norm(), x.norm() * y.norm(), tol)


# =============================================================================
# ТЕСТЫ: Скаляры и мнимая единица
# =============================================================================


class TestScalarAndRotation:
    """Дистрибутивность скаляра и поворот на i"""

    @pytest.mark.parametrize("s", SCALARS)
    @pytest.mark.parametrize("a, b", SCALAR_PAIRS)
    def test_scalar_distributivity(self, ctype, tol, a, b, s) -> None:
        """(a + b)·s = a·s + b·s"""
        x, y = ctype.new(*a), ctype.new(*b)
        assert is_close_complex((x + y) * s, x * s + y * s, tol)

    @pytest.mark.parametrize("a", SAMPLES)
    def test_scalar_one_is_identity(self, ctype, a) -> None:
        x = ctype.new(*a)
        assert x * 1.0 == x

    @pytest.mark.parametrize("a", SAMPLES)
    def test_rotation_by_i(self, ctype, a) -> None:
        """(x, y) · i = (-y, x)"""
        z = ctype.new(*a)
        assert z * ctype.i() == ctype.new(-z.im, z.re)

    def test_i_squared_is_minus_one(self, ctype) -> None:
        assert ctype.i() * ctype.i() == -ctype.one()
