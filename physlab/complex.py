import math
import numbers


class DivisionByZero(ZeroDivisionError):
    """Raised when a complex value is divided by the exact zero value."""


class Complex:
    """
    A lightweight complex‑number value with rectangular and polar support.

    Constructors
    ------------
    Complex(a, b)                    -> a + b i     (rectangular)
    Complex.from_rectangular(a, b)   -> a + b i
    Complex.from_polar(r, theta)     -> r·e^{iθ}
    Complex.unit(theta)              -> e^{iθ}      (unit‑circle)

    Instances are immutable: every operation returns a new value.
    Equality is exact; use ``isclose`` for computed values.
    """

    __slots__ = ("real", "imaginary")

    # ---------- construction ----------
    def __init__(self, real: float = 0.0, imaginary: float = 0.0):
        object.__setattr__(self, "real", float(real))
        object.__setattr__(self, "imaginary", float(imaginary))

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self):
        return (type(self), (self.real, self.imaginary))

    # ---------- convenience makers ----------
    @classmethod
    def from_rectangular(cls, real: float, imaginary: float) -> "Complex":
        return cls(real, imaginary)

    @classmethod
    def from_polar(cls, magnitude: float, angle: float) -> "Complex":
        """Polar constructor. A negative magnitude flips the phase by π."""
        return cls(magnitude * math.cos(angle), magnitude * math.sin(angle))

    @classmethod
    def unit(cls, theta: float) -> "Complex":
        """e^{iθ}"""
        return cls.from_polar(1.0, theta)

    @classmethod
    def from_builtin(cls, value: complex) -> "Complex":
        return cls(value.real, value.imag)

    # ---------- basic properties ----------
    def magnitude(self) -> float:
        return math.sqrt(self.real * self.real + self.imaginary * self.imaginary)

    # alias kept for the textbook name
    modulus = magnitude

    def argument(self) -> float:
        return math.atan2(self.imaginary, self.real)

    # ---------- arithmetic helpers ----------
    def add(self, other: "Complex | float | int") -> "Complex":
        other = _promote(other)
        return Complex(self.real + other.real, self.imaginary + other.imaginary)

    def subtract(self, other: "Complex | float | int") -> "Complex":
        other = _promote(other)
        return Complex(self.real - other.real, self.imaginary - other.imaginary)

    def multiply(self, other: "Complex | float | int") -> "Complex":
        other = _promote(other)
        return Complex(self.real * other.real - self.imaginary * other.imaginary,
                       self.real * other.imaginary + self.imaginary * other.real)

    def divide(self, other: "Complex | float | int") -> "Complex":
        other = _promote(other)
        denom = other.real * other.real + other.imaginary * other.imaginary
        if denom == 0:
            raise DivisionByZero(f"cannot divide {self} by zero")
        numerator = self.multiply(other.conjugate())
        return Complex(numerator.real / denom, numerator.imaginary / denom)

    def conjugate(self) -> "Complex":
        return Complex(self.real, -self.imaginary)

    def negate(self) -> "Complex":
        return Complex(-self.real, -self.imaginary)

    def inverse(self) -> "Complex":
        """Multiplicative inverse, 1 / z."""
        return Complex(1.0, 0.0).divide(self)

    def power(self, n: int) -> "Complex":
        """Integer power by repeated squaring, exact where the products are."""
        if n < 0:
            return self.inverse().power(-n)
        result = Complex(1.0, 0.0)
        base = self
        while n:
            if n & 1:
                result = result.multiply(base)
            n >>= 1
            if n:
                base = base.multiply(base)
        return result

    # ---------- dunder sugar ----------
    def __add__(self, other):
        return self.add(other) if _is_operand(other) else NotImplemented

    def __radd__(self, other):
        return _promote(other).add(self) if _is_operand(other) else NotImplemented

    def __sub__(self, other):
        return self.subtract(other) if _is_operand(other) else NotImplemented

    def __rsub__(self, other):
        return _promote(other).subtract(self) if _is_operand(other) else NotImplemented

    def __mul__(self, other):
        return self.multiply(other) if _is_operand(other) else NotImplemented

    def __rmul__(self, other):
        return _promote(other).multiply(self) if _is_operand(other) else NotImplemented

    def __truediv__(self, other):
        return self.divide(other) if _is_operand(other) else NotImplemented

    def __rtruediv__(self, other):
        return _promote(other).divide(self) if _is_operand(other) else NotImplemented

    def __pow__(self, n):
        if not isinstance(n, numbers.Integral):
            return NotImplemented
        return self.power(int(n))

    __abs__ = magnitude
    __invert__ = conjugate
    __neg__ = negate

    def __pos__(self):
        return self

    def __complex__(self):
        return complex(self.real, self.imaginary)

    def __eq__(self, other):
        if isinstance(other, Complex):
            return self.real == other.real and self.imaginary == other.imaginary
        if isinstance(other, numbers.Real):
            # float vs int/Fraction compares exactly, no rounding through float()
            return self.imaginary == 0 and self.real == other
        return NotImplemented

    def __hash__(self):
        # agrees with the builtin so Complex(3, 0) == 3 hashes consistently
        return hash(complex(self.real, self.imaginary))

    def __iter__(self):
        yield self.real
        yield self.imaginary

    # readable REPL / print‑outs
    def __str__(self):
        sign = "-" if self.imaginary < 0 else "+"
        return f"({self.real:g} {sign} {abs(self.imaginary):g}i)"

    def __repr__(self):
        return f"Complex({self.real!r}, {self.imaginary!r})"


def _is_operand(value) -> bool:
    return isinstance(value, (Complex, numbers.Real))


def _promote(value) -> Complex:
    if isinstance(value, Complex):
        return value
    if isinstance(value, numbers.Real):
        return Complex(value, 0.0)
    raise TypeError(f"expected Complex or real number, got {type(value).__name__}")


# ---------- free functions ----------
def from_rectangular(real: float, imaginary: float) -> Complex:
    return Complex.from_rectangular(real, imaginary)


def from_polar(magnitude: float, angle: float) -> Complex:
    return Complex.from_polar(magnitude, angle)


def add(a, b) -> Complex:
    return _promote(a).add(b)


def subtract(a, b) -> Complex:
    return _promote(a).subtract(b)


def multiply(a, b) -> Complex:
    return _promote(a).multiply(b)


def divide(a, b) -> Complex:
    """a / b, raising DivisionByZero when b is the zero value."""
    return _promote(a).divide(b)


def conjugate(a) -> Complex:
    return _promote(a).conjugate()


def magnitude(a) -> float:
    return _promote(a).magnitude()


def argument(a) -> float:
    return _promote(a).argument()


def equals(a, b) -> bool:
    """Exact component-wise equality."""
    if not (_is_operand(a) and _is_operand(b)):
        raise TypeError(f"cannot compare {type(a).__name__} and {type(b).__name__}")
    if not isinstance(a, Complex):
        a, b = b, a
    return _promote(a) == b


def isclose(a, b, *, rel_tol: float = 1e-9, abs_tol: float = 1e-9) -> bool:
    a, b = _promote(a), _promote(b)
    return (math.isclose(a.real, b.real, rel_tol=rel_tol, abs_tol=abs_tol)
            and math.isclose(a.imaginary, b.imaginary, rel_tol=rel_tol, abs_tol=abs_tol))


if __name__ == "__main__":
    z1 = Complex(3, 4)                     # 3 + 4i
    z2 = Complex.from_polar(2, math.pi/4)  # 2·e^{iπ/4}
    print(z1.magnitude())                  # 5.0
    print(z1.argument())                   # ≈ 0.9273
    print(z1.add(z2))                      # vector addition
    print(z1 * z2)                         # operator sugar for multiply
    print(~z1)                             # conjugate: (3 - 4i)
    print(z1.inverse())                    # multiplicative inverse
    print(Complex.unit(math.pi/2))         # e^{iπ/2}  => ≈ 0 + 1i
