from dataclasses import dataclass
from typing import Sequence

from recovery.errors import DuplicateAbscissa, InsufficientPoints, NonIntegerResult
from recovery.fraction import ZERO, Fraction, reduce


@dataclass(frozen=True)
class Point:
    x: int
    y: int


def interpolate_fraction(points: Sequence[Point]) -> Fraction:
    if len(points) == 0:
        raise InsufficientPoints(0, 1)

    secret = ZERO
    for i, p_i in enumerate(points):
        num = 1
        den = 1
        for j, p_j in enumerate(points):
            if i == j:
                continue
            diff = p_i.x - p_j.x
            if diff == 0:
                raise DuplicateAbscissa(p_i.x)
            num *= -p_j.x
            den *= diff
        secret = secret.add(reduce(p_i.y * num, den))
    return secret


def interpolate(points: Sequence[Point]) -> int:
    """Evaluate the polynomial through ``points`` at x = 0."""
    value = interpolate_fraction(points)
    if not value.is_integer():
        raise NonIntegerResult(value)
    return value.numerator


def interpolate_first(points: Sequence[Point], k: int) -> int:
    if k < 1:
        raise ValueError("k must be at least 1")
    if len(points) < k:
        raise InsufficientPoints(len(points), k)
    ordered = sorted(points, key=lambda p: p.x)
    return interpolate(ordered[:k])
