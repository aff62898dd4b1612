#!/usr/bin/env python3

# Copyright (C) 2026 The ecelgamal developers
#
# This file is part of ecelgamal. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecelgamal including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Elliptic curve points.

An elliptic curve point is either a finite Point, with affine
(x, y) ModNum coordinates, or the Infinity point, i.e. the identity
element of the group, which has no coordinates and only carries
the field it belongs to:

    EllipticPoint = Union[Point, Infinity]

Both are immutable value types.
The group law itself depends on the curve coefficients
and is implemented by ecelgamal.curve.Curve;
the group_op and pow methods are shortcuts to it.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Union

from ecelgamal.exceptions import (
    ElGamalTypeError,
    FieldMismatchError,
    InvalidFieldError,
    InvalidPointError,
)
from ecelgamal.mod_num import ModNum
from ecelgamal.utils import HEX_THRESHOLD, hex_string, int_repr

if TYPE_CHECKING:  # pragma: no cover
    from ecelgamal.curve import Curve


def _field_str(field: int) -> str:
    return hex_string(field) if field > HEX_THRESHOLD else f"{field}"


class _GroupElement:
    "Group law shortcuts shared by Point and Infinity."

    @property
    def field(self) -> int:
        raise NotImplementedError

    def group_op(self, other: "EllipticPoint", curve: "Curve") -> "EllipticPoint":
        "Return self + other according to the curve group law."
        return curve.add(self, other)  # type: ignore

    def group_inverse(self) -> "EllipticPoint":
        raise NotImplementedError

    def pow(self, exponent: int, curve: "Curve") -> "EllipticPoint":
        "Return the scalar multiplication exponent * self."
        return curve.mult(exponent, self)  # type: ignore

    def __neg__(self) -> "EllipticPoint":
        return self.group_inverse()


@dataclass(frozen=True)
class Infinity(_GroupElement):
    "Point at infinity, i.e. the identity element of the group."

    _field: int

    def __init__(self, field: int) -> None:
        if field <= 0:
            raise InvalidFieldError(f"invalid field: {field}")
        object.__setattr__(self, "_field", field)

    def __str__(self) -> str:
        return f"Infinity in field F{_field_str(self._field)}"

    def __repr__(self) -> str:
        return f"Infinity({int_repr(self._field)})"

    @property
    def field(self) -> int:
        return self._field

    def group_inverse(self) -> "Infinity":
        return self


@dataclass(frozen=True)
class Point(_GroupElement):
    """Finite point (x, y) of the curve y^2 = x^3 + a*x + b.

    The curve coefficients a and b are only used to check
    that the point is on the curve: they are not stored.
    """

    x: ModNum
    y: ModNum

    def __init__(self, x: ModNum, y: ModNum, a: ModNum, b: ModNum) -> None:

        for coordinate in (x, y, a, b):
            if not isinstance(coordinate, ModNum):
                raise ElGamalTypeError(f"not a ModNum: {coordinate!r}")
        if not x.field == y.field == a.field == b.field:
            err_msg = "x, y, a, and b are not in the same field: "
            err_msg += ", ".join(int_repr(c.field) for c in (x, y, a, b))
            raise FieldMismatchError(err_msg)

        if y * y != x * x * x + a * x + b:
            raise InvalidPointError(f"point not on curve: ({x.value}, {y.value})")

        object.__setattr__(self, "x", x)
        object.__setattr__(self, "y", y)

    @classmethod
    def _from_valid(cls, x: ModNum, y: ModNum) -> "Point":
        # for group law results: coordinates are on curve by construction
        point = object.__new__(cls)
        object.__setattr__(point, "x", x)
        object.__setattr__(point, "y", y)
        return point

    def __str__(self) -> str:
        x, y = self.x.value, self.y.value
        if self.field > HEX_THRESHOLD:
            return f"({hex_string(x)}, {hex_string(y)}) in field F{_field_str(self.field)}"
        return f"({x}, {y}) in field F{self.field}"

    def __repr__(self) -> str:
        return f"Point({int_repr(self.x.value)}, {int_repr(self.y.value)})"

    @property
    def field(self) -> int:
        return self.x.field

    def group_inverse(self) -> "Point":
        "Return the opposite point (x, -y); points with y = 0 are their own opposite."
        if self.y.value == 0:
            return self
        return Point._from_valid(self.x, -self.y)


EllipticPoint = Union[Point, Infinity]
