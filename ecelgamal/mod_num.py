#!/usr/bin/env python3

# Copyright (C) 2026 The ecelgamal developers
#
# This file is part of ecelgamal. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecelgamal including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""ModNum dataclass.

Element of the finite field of integers modulo a prime.

Instances are immutable: the value is reduced modulo the field
at construction time and every operation returns a new ModNum.
Binary operations are only defined between elements of the same field;
plain ints are promoted to the field of the other operand.
"""

from dataclasses import dataclass
from typing import Optional, Union

from ecelgamal.alias import Integer
from ecelgamal.exceptions import (
    ElGamalTypeError,
    ElGamalValueError,
    FieldMismatchError,
    InvalidFieldError,
)
from ecelgamal.number_theory import legendre_symbol, mod_inv, mod_sqrt
from ecelgamal.utils import HEX_THRESHOLD, hex_string, int_from_integer, int_repr

Operand = Union["ModNum", int]


@dataclass(frozen=True)
class ModNum:
    value: int
    field: int

    def __init__(self, value: Integer, field: Integer) -> None:

        field = int_from_integer(field)
        if field <= 0:
            raise InvalidFieldError(f"invalid field: {field}")
        object.__setattr__(self, "value", int_from_integer(value) % field)
        object.__setattr__(self, "field", field)

    def __str__(self) -> str:
        if self.field > HEX_THRESHOLD:
            return f"{hex_string(self.value)} mod {hex_string(self.field)}"
        return f"{self.value} mod {self.field}"

    def __repr__(self) -> str:
        return f"ModNum({int_repr(self.value)}, {int_repr(self.field)})"

    def __int__(self) -> int:
        return self.value

    def _coerce(self, other: Operand) -> "ModNum":
        if isinstance(other, int):
            return ModNum(other, self.field)
        if not isinstance(other, ModNum):
            raise ElGamalTypeError(f"not a ModNum: {other!r}")
        if other.field != self.field:
            err_msg = "field mismatch: "
            err_msg += f"{int_repr(self.field)} vs {int_repr(other.field)}"
            raise FieldMismatchError(err_msg)
        return other

    def add(self, other: Operand) -> "ModNum":
        other = self._coerce(other)
        return ModNum(self.value + other.value, self.field)

    def mul(self, other: Operand) -> "ModNum":
        other = self._coerce(other)
        return ModNum(self.value * other.value, self.field)

    def additive_inverse(self) -> "ModNum":
        return ModNum(self.field - self.value, self.field)

    def multiplicative_inverse(self) -> "ModNum":
        """Return x such that self * x = 1 (mod field).

        Computed with the Extended Euclidean Algorithm;
        an Error is raised if value and field are not coprime.
        """
        return ModNum(mod_inv(self.value, self.field), self.field)

    def sub(self, other: Operand) -> "ModNum":
        return self.add(self._coerce(other).additive_inverse())

    def div(self, other: Operand) -> "ModNum":
        return self.mul(self._coerce(other).multiplicative_inverse())

    def pow(self, exponent: int) -> "ModNum":
        "Return self^exponent, with self^0 = 1."
        if exponent < 0:
            raise ElGamalValueError(f"negative exponent: {exponent}")
        return ModNum(pow(self.value, exponent, self.field), self.field)

    def legendre(self) -> int:
        """Return the Legendre symbol of self.

        1 for quadratic residues, -1 for non residues, 0 for zero.
        Any other value means that the field is not a prime.
        """
        return legendre_symbol(self.value, self.field)

    def sqrt(self) -> Optional["ModNum"]:
        """Return a square root of self, None if there is none.

        The field must be a prime.
        The other root is the additive inverse of the returned one.
        """
        root = mod_sqrt(self.value, self.field)
        return None if root is None else ModNum(root, self.field)

    __add__ = add
    __radd__ = add
    __sub__ = sub
    __mul__ = mul
    __rmul__ = mul
    __truediv__ = div
    __pow__ = pow

    def __neg__(self) -> "ModNum":
        return self.additive_inverse()

    def __rsub__(self, other: Operand) -> "ModNum":
        return self._coerce(other).sub(self)

    def __rtruediv__(self, other: Operand) -> "ModNum":
        return self._coerce(other).div(self)
