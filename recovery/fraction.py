from dataclasses import dataclass

from recovery.bigint import to_decimal


def gcd(a: int, b: int) -> int:
    a = abs(a)
    b = abs(b)
    while b != 0:
        a, b = b, a % b
    return a


@dataclass(frozen=True)
class Fraction:
    """Exact rational, always kept in lowest terms with a positive denominator.

    Build instances with :func:`reduce` (or the arithmetic methods); the
    constructor does not normalise.
    """

    numerator: int
    denominator: int = 1

    def add(self, other: "Fraction") -> "Fraction":
        return reduce(
            self.numerator * other.denominator + other.numerator * self.denominator,
            self.denominator * other.denominator,
        )

    def multiply(self, other: "Fraction") -> "Fraction":
        return reduce(self.numerator * other.numerator, self.denominator * other.denominator)

    def __add__(self, other: "Fraction") -> "Fraction":
        if not isinstance(other, Fraction):
            return NotImplemented
        return self.add(other)

    def __mul__(self, other: "Fraction") -> "Fraction":
        if not isinstance(other, Fraction):
            return NotImplemented
        return self.multiply(other)

    def is_integer(self) -> bool:
        return self.denominator == 1

    def to_int(self) -> int:
        if not self.is_integer():
            raise ValueError(f"{self} is not an integer")
        return self.numerator

    def __str__(self) -> str:
        if self.denominator == 1:
            return to_decimal(self.numerator)
        return f"{to_decimal(self.numerator)}/{to_decimal(self.denominator)}"


ZERO = Fraction(0, 1)
ONE = Fraction(1, 1)


def reduce(n: int, d: int) -> Fraction:
    if d == 0:
        raise ZeroDivisionError("fraction with zero denominator")
    g = gcd(n, d)
    n, d = n // g, d // g
    if d < 0:
        n, d = -n, -d
    return Fraction(n, d)
