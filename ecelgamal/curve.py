#!/usr/bin/env python3

# Copyright (C) 2026 The ecelgamal developers
#
# This file is part of ecelgamal. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecelgamal including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Elliptic Curve class and functions.

The elliptic curve is the set of points (x, y)
that are solutions to a Weierstrass equation y^2 = x^3 + a*x + b,
with x, y, a, and b in Fp (p being a prime),
together with a point at infinity.
The constants a, b must satisfy the relationship
4 a^3 + 27 b^2 ≠ 0.

The group is defined by the point addition group law,
implemented here in affine coordinates.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

from ecelgamal.alias import Integer
from ecelgamal.exceptions import (
    ElGamalTypeError,
    ElGamalValueError,
    FieldMismatchError,
)
from ecelgamal.mod_num import ModNum
from ecelgamal.point import EllipticPoint, Infinity, Point
from ecelgamal.utils import HEX_THRESHOLD, hex_string, int_from_integer, int_repr


@dataclass(frozen=True)
class Curve:
    """Elliptic curve over Fp, with a base point.

    Parameters are checked according to SEC 1 v.2 3.1.1.2.1,
    with the exception of the base point order,
    which is not needed by the ElGamal scheme.
    """

    a: ModNum
    b: ModNum
    base_point: Point

    def __init__(self, a: ModNum, b: ModNum, base_point: EllipticPoint) -> None:

        if not isinstance(a, ModNum) or not isinstance(b, ModNum):
            raise ElGamalTypeError("curve coefficients must be ModNum")
        if a.field != b.field:
            err_msg = "a and b are not in the same field: "
            err_msg += f"{int_repr(a.field)} vs {int_repr(b.field)}"
            raise FieldMismatchError(err_msg)
        p = a.field

        # Fermat test will do as _probabilistic_ primality test...
        if p < 3 or p % 2 == 0 or pow(2, p - 1, p) != 1:
            raise ElGamalValueError(f"p is not prime: {int_repr(p)}")

        # 4*a^3 + 27*b^2 ≠ 0 (mod p)
        if (4 * a * a * a + 27 * b * b).value == 0:
            raise ElGamalValueError("zero discriminant")

        if isinstance(base_point, Infinity):
            raise ElGamalValueError("Infinity cannot be a base point")
        if not isinstance(base_point, Point):
            raise ElGamalTypeError(f"not a point: {base_point!r}")
        if base_point.field != p:
            err_msg = "base point and curve are not in the same field: "
            err_msg += f"{int_repr(base_point.field)} vs {int_repr(p)}"
            raise FieldMismatchError(err_msg)
        # validated in its own constructor, but maybe with other a and b
        if not self._is_on_curve(base_point, a, b):
            raise ElGamalValueError("base point is not on the curve")

        object.__setattr__(self, "a", a)
        object.__setattr__(self, "b", b)
        object.__setattr__(self, "base_point", base_point)

    @classmethod
    def from_params(
        cls, p: Integer, a: Integer, b: Integer, G: Tuple[Integer, Integer]
    ) -> "Curve":
        "Return the curve from its integer domain parameters."

        p = int_from_integer(p)
        a_ = ModNum(a, p)
        b_ = ModNum(b, p)
        if len(G) != 2:
            raise ElGamalValueError("base point must be a sequence[int, int]")
        base_point = Point(ModNum(G[0], p), ModNum(G[1], p), a_, b_)
        return cls(a_, b_, base_point)

    def __str__(self) -> str:
        p, a, b = self.field, self.a.value, self.b.value
        if p > HEX_THRESHOLD:
            return f"x^3 + {hex_string(a)}x + {hex_string(b)} in field F{hex_string(p)}"
        return f"x^3 + {a}x + {b} in field F{p}"

    def __repr__(self) -> str:
        result = f"Curve({int_repr(self.field)}, "
        result += f"{int_repr(self.a.value)}, {int_repr(self.b.value)}, "
        G = self.base_point
        result += f"({int_repr(G.x.value)}, {int_repr(G.y.value)}))"
        return result

    @property
    def field(self) -> int:
        return self.a.field

    @staticmethod
    def _is_on_curve(Q: Point, a: ModNum, b: ModNum) -> bool:
        return Q.y * Q.y == Q.x * Q.x * Q.x + a * Q.x + b

    def y2(self, x: ModNum) -> ModNum:
        "Return x^3 + a*x + b, i.e. the square of the y-coordinate of x."
        return (x * x + self.a) * x + self.b

    def y(self, x: ModNum) -> Optional[ModNum]:
        """Return a y-coordinate associated to x, None if x is not valid.

        The other y-coordinate is the additive inverse of the returned one.
        """
        self._require_field(x.field)
        return self.y2(x).sqrt()

    def point(self, x: Integer, y: Integer) -> Point:
        "Return the curve point (x, y), checking it is on curve."
        return Point(ModNum(x, self.field), ModNum(y, self.field), self.a, self.b)

    def is_on_curve(self, Q: EllipticPoint) -> bool:
        "Return True if the point is on the curve."
        self._require_point(Q)
        if isinstance(Q, Infinity):
            return True
        return self._is_on_curve(Q, self.a, self.b)

    def _require_field(self, field: int) -> None:
        if field != self.field:
            err_msg = "point and curve are not in the same field: "
            err_msg += f"{int_repr(field)} vs {int_repr(self.field)}"
            raise FieldMismatchError(err_msg)

    def _require_point(self, Q: EllipticPoint) -> None:
        if not isinstance(Q, (Point, Infinity)):
            raise ElGamalTypeError(f"not a point: {Q!r}")
        self._require_field(Q.field)

    # group law

    def negate(self, Q: EllipticPoint) -> EllipticPoint:
        "Return the opposite point."
        self._require_point(Q)
        return Q.group_inverse()

    def add(self, Q: EllipticPoint, R: EllipticPoint) -> EllipticPoint:
        """Return the sum of two points.

        The input points are assumed to be on curve:
        Point construction already took care of that.
        """

        self._require_point(Q)
        self._require_point(R)

        if isinstance(Q, Infinity):
            return R
        if isinstance(R, Infinity):
            return Q

        if Q.x == R.x:
            # opposite points, including the doubling of a y=0 point
            if Q.y == -R.y:
                return Infinity(self.field)
            return self._double(Q)

        lam = (R.y - Q.y) / (R.x - Q.x)
        return self._from_slope(lam, Q, R)

    def double(self, Q: EllipticPoint) -> EllipticPoint:
        "Return Q + Q."
        return self.add(Q, Q)

    def _double(self, Q: Point) -> Point:
        # Q.y is not zero here
        lam = (3 * Q.x * Q.x + self.a) / (2 * Q.y)
        return self._from_slope(lam, Q, Q)

    @staticmethod
    def _from_slope(lam: ModNum, Q: Point, R: Point) -> Point:
        x = lam * lam - Q.x - R.x
        y = -(Q.y + lam * (x - Q.x))
        return Point._from_valid(x, y)

    def mult(self, m: int, Q: EllipticPoint) -> EllipticPoint:
        """Scalar multiplication of a curve point.

        This implementation uses
        'double & add' algorithm,
        'left-to-right' binary decomposition of the m coefficient,
        affine coordinates: O(log m) group operations.
        """

        self._require_point(Q)
        if m < 0:
            raise ElGamalValueError(f"negative m: {hex(m)}")
        return _mult_aff(m, Q, self)


def _mult_aff(m: int, Q: EllipticPoint, ec: Curve) -> EllipticPoint:

    if m == 0:
        return Infinity(ec.field)
    if isinstance(Q, Infinity):
        return Q

    # the most significant bit of m is accounted for by R = Q
    R: EllipticPoint = Q
    for i in range(m.bit_length() - 2, -1, -1):
        # the doubling part of 'double & add'
        R = ec.add(R, R)
        if (m >> i) & 1:
            R = ec.add(R, Q)
    return R
