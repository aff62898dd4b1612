#!/usr/bin/env python3

# Copyright (C) 2026 The ecelgamal developers
#
# This file is part of ecelgamal. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecelgamal including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Number theory and modular arithmetic functions.

Implementations based on
https://en.wikibooks.org/wiki/Algorithm_Implementation/Mathematics/Extended_Euclidean_algorithm
and
https://codereview.stackexchange.com/questions/43210/tonelli-shanks-algorithm-implementation-of-prime-modular-square-root/43267

Square roots are returned as Optional[int]:
None means that no root exists,
so that 0 as a legitimate root (of 0) is never ambiguous.
"""

from typing import Optional, Tuple

from ecelgamal.exceptions import ElGamalRuntimeError, ElGamalValueError
from ecelgamal.utils import int_repr

# upper bound on the Tonelli-Shanks refinement steps:
# each step strictly decreases the 2-adic order of the candidate,
# so any prime below 2^1024 terminates well before the bound
SQRT_MAX_ITERATIONS = 1024


def xgcd(a: int, b: int) -> Tuple[int, int, int]:
    """Return (g, x, y) such that a*x + b*y = g = gcd(a, b).

    based on Extended Euclidean Algorithm, see
    https://en.wikibooks.org/wiki/Algorithm_Implementation/Mathematics/Extended_Euclidean_algorithm
    """

    x0, x1, y0, y1 = 0, 1, 1, 0
    while a != 0:
        q, b, a = b // a, a, b % a
        y0, y1 = y1, y0 - q * y1
        x0, x1 = x1, x0 - q * x1
    return b, x0, y0


def mod_inv(a: int, m: int) -> int:
    """Return the inverse of a (mod m). m does not have to be a prime.

    Based on Extended Euclidean Algorithm, see:
    https://en.wikibooks.org/wiki/Algorithm_Implementation/Mathematics/Extended_Euclidean_algorithm
    """

    a %= m
    g, x, _ = xgcd(a, m)
    if g == 1:
        return x % m
    raise ElGamalValueError(f"No inverse for {int_repr(a)} mod {int_repr(m)}")


def legendre_symbol(a: int, p: int) -> int:
    """Compute the Legendre symbol a|p using Euler's criterion.

    p is a prime, a is relatively prime to p (if p divides a,
    then a|p = 0).
    It returns 1 if a has a square root modulo p, -1 otherwise.
    Any other value means that p is not a prime.
    """

    ls = pow(a, p >> 1, p)
    return -1 if ls == p - 1 else ls


def mod_sqrt(a: int, p: int) -> Optional[int]:
    """Return a square root (mod p) of a, None if there is none.

    p must be a prime.

    Solve the equation:
        x^2 = a mod p

    and return x. Note that p - x is also a root.

    If p = 3 (mod 4) the closed form a^((p+1)/4) is used,
    otherwise the Tonelli-Shanks algorithm.
    """

    a %= p

    if p % 4 != 3:
        return tonelli(a, p)

    # root candidate is pow(a, (p + 1) // 4, p)
    r = pow(a, (p >> 2) + 1, p)
    return r if r * r % p == a else None


def tonelli(a: int, p: int) -> Optional[int]:
    """Return a square root (mod p) of a, None if there is none.

    p must be a prime.
    The Tonelli-Shanks algorithm is used.
    """

    a %= p
    if a == 0 or p == 2:
        return a

    # Check solution existence for an odd prime p
    ls = legendre_symbol(a, p)
    if ls == -1:
        return None
    if ls != 1:
        raise ElGamalValueError(f"not a prime: {int_repr(p)}")

    # Factor p-1 on the form q * 2^s (with q odd)
    q, s = p - 1, 0
    while q & 1 == 0:
        s += 1
        q >>= 1
    if s == 1:
        return pow(a, (p + 1) // 4, p)

    # Select a z which is a quadratic non residue modulo p
    z = 2
    while legendre_symbol(z, p) != -1:
        z += 1
    c = pow(z, q, p)
    r = pow(a, (q + 1) // 2, p)
    t = pow(a, q, p)
    for _ in range(SQRT_MAX_ITERATIONS):
        if t == 1:
            return r
        # Find the lowest i such that t^(2^i) = 1
        t2i = t
        for i in range(1, s):
            t2i = t2i * t2i % p
            if t2i == 1:
                break
        else:
            raise ElGamalRuntimeError(f"not a prime: {int_repr(p)}")
        # Update next value to iterate
        b = pow(c, 1 << (s - i - 1), p)
        r = r * b % p
        c = b * b % p
        t = t * c % p
        s = i

    raise ElGamalRuntimeError(f"square root not found in {SQRT_MAX_ITERATIONS} steps")
