"""
Unit tests for the Complex value type.

Arithmetic is checked against Python's builtin complex on seeded random
operands; identities and the worked scenarios are checked exactly or
within floating-point tolerance.
"""

import cmath
import math
import pickle

import numpy as np
import pytest
from numpy.testing import assert_allclose

from physlab.complex import (
    Complex,
    DivisionByZero,
    add,
    argument,
    conjugate,
    divide,
    equals,
    from_polar,
    from_rectangular,
    isclose,
    magnitude,
    multiply,
    subtract,
)

TOL = 1e-9


def _operands(seed, n=50):
    rng = np.random.default_rng(seed)
    for x1, y1, x2, y2 in rng.uniform(-10.0, 10.0, size=(n, 4)):
        yield Complex(x1, y1), Complex(x2, y2)


def _parts(z):
    return [z.real, z.imaginary]


# =============================================================================
# Construction
# =============================================================================

class TestConstruction:
    """Rectangular and polar constructors."""

    def test_rectangular_exact(self):
        z = from_rectangular(3, -4)
        assert z.real == 3.0 and z.imaginary == -4.0
        assert isinstance(z.real, float)

    def test_negative_zero_kept(self):
        z = Complex(-0.0, -0.0)
        assert math.copysign(1.0, z.real) == -1.0
        assert math.copysign(1.0, z.imaginary) == -1.0

    def test_polar(self):
        z = from_polar(2.0, math.pi / 3)
        assert_allclose(_parts(z), [1.0, math.sqrt(3)], atol=TOL)

    def test_polar_negative_magnitude_flips_phase(self):
        """A negative magnitude is a 180° phase flip, not an error."""
        assert Complex.from_polar(-2.0, 0.0) == Complex(-2.0, 0.0)
        z = Complex.from_polar(-1.0, math.pi / 2)
        assert_allclose(_parts(z), [0.0, -1.0], atol=TOL)

    def test_unit(self):
        z = Complex.unit(math.pi / 2)
        assert_allclose(_parts(z), [0.0, 1.0], atol=TOL)

    def test_builtin_round_trip(self):
        z = Complex(1.5, -2.5)
        assert complex(z) == complex(1.5, -2.5)
        assert Complex.from_builtin(complex(z)) == z

    def test_immutable(self):
        z = Complex(1, 2)
        with pytest.raises(AttributeError):
            z.real = 5.0
        with pytest.raises(AttributeError):
            del z.imaginary

    def test_pickle(self):
        z = Complex(1.25, -3.0)
        assert pickle.loads(pickle.dumps(z)) == z


# =============================================================================
# Queries
# =============================================================================

class TestQueries:
    """Magnitude and argument."""

    def test_three_four_five(self):
        z = Complex(3, 4)
        assert z.magnitude() == 5.0
        assert abs(z.argument() - 0.9273) < 1e-4
        assert abs(z) == 5.0

    def test_magnitude_never_negative(self):
        for a, _ in _operands(1):
            assert magnitude(a) >= 0.0
        assert Complex(-0.0, -0.0).magnitude() == 0.0

    def test_argument_axis_boundaries(self):
        """atan2 conventions, including the signed negative real axis."""
        assert Complex(1, 0).argument() == 0.0
        assert Complex(-1, 0.0).argument() == math.pi
        assert Complex(-1, -0.0).argument() == -math.pi
        assert Complex(0, 1).argument() == math.pi / 2
        assert Complex(0, -1).argument() == -math.pi / 2
        assert argument(Complex(0, 0)) == 0.0

    @pytest.mark.parametrize("m, theta", [
        (1.0, 0.0),
        (2.5, 0.75),
        (0.3, -2.0),
        (7.0, math.pi),
        (4.0, -math.pi / 2),
    ])
    def test_polar_round_trip(self, m, theta):
        z = Complex.from_polar(m, theta)
        assert abs(z.magnitude() - m) < TOL
        assert abs(z.argument() - theta) < TOL


# =============================================================================
# Arithmetic
# =============================================================================

class TestArithmetic:
    """Field operations against the builtin complex type."""

    @pytest.mark.parametrize("op, builtin", [
        (add, lambda a, b: a + b),
        (subtract, lambda a, b: a - b),
        (multiply, lambda a, b: a * b),
        (divide, lambda a, b: a / b),
    ])
    def test_matches_builtin(self, op, builtin):
        for a, b in _operands(42):
            expected = builtin(complex(a), complex(b))
            assert_allclose(_parts(op(a, b)), [expected.real, expected.imag],
                            rtol=1e-12, atol=TOL)

    def test_conjugate(self):
        assert conjugate(Complex(3, 4)) == Complex(3, -4)
        assert ~Complex(3, -4) == Complex(3, 4)

    def test_multiply_scenario(self):
        assert multiply(Complex(1, 2), Complex(3, 4)) == Complex(-5, 10)

    def test_divide_scenario(self):
        assert divide(Complex(1, 0), Complex(0, 1)) == Complex(0, -1)

    def test_operators_match_named_functions(self):
        a, b = Complex(1.5, -2.0), Complex(-0.5, 3.0)
        assert a + b == add(a, b)
        assert a - b == subtract(a, b)
        assert a * b == multiply(a, b)
        assert a / b == divide(a, b)
        assert -a == Complex(-1.5, 2.0)
        assert +a is a

    def test_real_operands_promoted(self):
        z = Complex(1, 2)
        assert z + 1 == Complex(2, 2)
        assert 1 + z == Complex(2, 2)
        assert 3 - z == Complex(2, -2)
        assert 2 * z == Complex(2, 4)
        assert z / 2 == Complex(0.5, 1)
        assert 1 / Complex(0, 1) == Complex(0, -1)

    def test_unsupported_operand(self):
        with pytest.raises(TypeError):
            Complex(1, 2) + "3"
        with pytest.raises(TypeError):
            add("3", Complex(1, 2))

    def test_inverse(self):
        z = Complex(3, 4)
        assert_allclose(_parts(z.inverse()), [0.12, -0.16], atol=TOL)

    def test_power(self):
        z = Complex(1, 1)
        assert isclose(z ** 2, Complex(0, 2))
        assert isclose(z ** 0, Complex(1, 0))
        assert isclose(z ** -1, z.inverse())
        expected = complex(z) ** 5
        assert isclose(z.power(5), Complex.from_builtin(expected))


class TestDivisionByZero:
    """The single failure mode of the value type."""

    def test_raises(self):
        with pytest.raises(DivisionByZero):
            divide(Complex(1, 1), Complex(0, 0))

    def test_negative_zero_divisor(self):
        with pytest.raises(DivisionByZero):
            Complex(1, 1) / Complex(-0.0, -0.0)

    def test_is_zero_division_error(self):
        with pytest.raises(ZeroDivisionError):
            Complex(1, 1) / 0

    def test_inverse_of_zero(self):
        with pytest.raises(DivisionByZero):
            Complex(0, 0).inverse()
        with pytest.raises(DivisionByZero):
            Complex(0, 0) ** -2

    def test_zero_numerator_is_fine(self):
        assert Complex(0, 0) / Complex(2, 0) == Complex(0, 0)


# =============================================================================
# Algebraic properties
# =============================================================================

class TestProperties:
    """Identities that must hold for every value."""

    def test_additive_identity(self):
        zero = from_rectangular(0, 0)
        for a, _ in _operands(7):
            assert add(a, zero) == a

    def test_multiplicative_identity(self):
        one = from_rectangular(1, 0)
        for a, _ in _operands(8):
            assert multiply(a, one) == a

    def test_conjugate_involution(self):
        for a, _ in _operands(9):
            assert conjugate(conjugate(a)) == a

    def test_division_multiplication_inverse(self):
        for a, b in _operands(10):
            assert isclose(multiply(divide(a, b), b), a, rel_tol=1e-9, abs_tol=1e-9)

    def test_magnitude_of_product(self):
        for a, b in _operands(11):
            assert abs((a * b).magnitude() - a.magnitude() * b.magnitude()) < 1e-9


# =============================================================================
# Equality and formatting
# =============================================================================

class TestEqualityAndFormat:
    """Exact equality, hashing and string rendering."""

    def test_exact_equality(self):
        assert equals(Complex(1, 2), Complex(1, 2))
        assert not equals(Complex(1, 2), Complex(1, 2 + 1e-15))
        assert Complex(0.1 + 0.2, 0) != Complex(0.3, 0)

    def test_isclose_tolerates_rounding(self):
        assert isclose(Complex(0.1 + 0.2, 0), Complex(0.3, 0))

    def test_equal_to_real(self):
        assert Complex(3, 0) == 3
        assert Complex(3, 1) != 3

    def test_not_equal_to_other_types(self):
        assert Complex(1, 2) != "(1 + 2i)"
        assert Complex(1, 2) != (1, 2)

    def test_hash_consistent(self):
        assert hash(Complex(1, 2)) == hash(Complex(1.0, 2.0))
        assert hash(Complex(3, 0)) == hash(3)
        assert len({Complex(1, 2), Complex(1, 2), Complex(2, 1)}) == 2

    @pytest.mark.parametrize("z, text", [
        (Complex(3, 4), "(3 + 4i)"),
        (Complex(3, -4), "(3 - 4i)"),
        (Complex(0.5, 1.25), "(0.5 + 1.25i)"),
        (Complex(-2, 0), "(-2 + 0i)"),
    ])
    def test_str(self, z, text):
        assert str(z) == text

    def test_repr(self):
        assert repr(Complex(1, -2)) == "Complex(1.0, -2.0)"

    def test_unpack(self):
        re, im = Complex(1, 2)
        assert (re, im) == (1.0, 2.0)


# =============================================================================
# Exactness against real operands and integer powers
# =============================================================================

class TestExactness:
    """Equality and powers must not round through float."""

    def test_large_int_not_rounded(self):
        z = Complex(2**53, 0)
        big = 2**53 + 1
        assert z != big
        assert not equals(z, big)
        assert not equals(big, z)
        assert z == 2**53

    def test_fraction_compared_exactly(self):
        from fractions import Fraction
        assert Complex(0.5, 0) == Fraction(1, 2)
        assert Complex(0.1, 0) != Fraction(1, 10)

    def test_equal_implies_equal_hash(self):
        for other in (2**53, 2**53 + 1, 3, 0.5):
            z = Complex(float(other), 0)
            if z == other:
                assert hash(z) == hash(other)

    def test_equals_rejects_other_types(self):
        with pytest.raises(TypeError):
            equals(Complex(1, 2), "x")

    def test_integer_powers_exact(self):
        i = Complex(0, 1)
        assert i ** 2 == Complex(-1, 0)
        assert i ** 2 == i * i
        assert i ** 4 == Complex(1, 0)
        assert Complex(1, 2) ** 3 == Complex(1, 2) * Complex(1, 2) * Complex(1, 2)

    def test_first_power_is_identity(self):
        for z in (Complex(-2, 0), Complex(-3.5, 0.25), Complex(0, -1)):
            assert z ** 1 == z
