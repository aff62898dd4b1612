#!/usr/bin/env python3

# Copyright (C) 2026 The ecelgamal developers
#
# This file is part of ecelgamal. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecelgamal including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Elliptic curve ElGamal encryption scheme.

The plaintext is split in chunks of n bytes,
n being chunk_size(ec), and each chunk,
read as a little-endian integer m,
is encoded as the curve point M whose x-coordinate is
the first valid one in W*m, W*m + 1, ..., W*m + W - 1.

With key pair (q, Q = q*G), each message point M is encrypted as

    C0 = s*G
    C1 = s*Q + M

with a fresh ephemeral scalar s, and decrypted as

    M = C1 - q*C0

m is then recovered as floor(x_M / W).
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Tuple, Union

from ecelgamal.alias import RandRange, String
from ecelgamal.curve import Curve
from ecelgamal.curves import CURVES, CurveName
from ecelgamal.exceptions import (
    DecodeError,
    ElGamalTypeError,
    ElGamalValueError,
    EncodingExhaustedError,
    InvalidPointError,
)
from ecelgamal.mod_num import ModNum
from ecelgamal.point import EllipticPoint, Infinity, Point
from ecelgamal.utils import bytes_from_string, int_repr, secure_randrange

logger = logging.getLogger(__name__)

# x-coordinate headroom for the message encoding:
# up to W candidate x-coordinates are tried for each chunk
# (the failure probability is about 2^-W)
# and the low byte of x is discarded when decoding
W = 256

# smallest field size allowing a chunk of at least one byte
MIN_FIELD = W * W + 1

Ciphertext = List[Tuple[EllipticPoint, EllipticPoint]]

CurveSelector = Union[CurveName, str, Curve]


def chunk_size(ec: Curve) -> int:
    """Return the number of plaintext bytes encoded in each curve point.

    When the bit length of field // W is a multiple of 8, an n-byte chunk
    whose most significant byte is high enough makes W*(m + 1) exceed
    the field: encode_point rejects it with ElGamalValueError,
    even for ordinary UTF-8 text (e.g. "é" with p = 8388617).
    The NIST curves are not affected.
    """
    return (ec.field // W).bit_length() // 8


def split(plaintext: bytes, n: int) -> List[int]:
    "Return the little-endian integers of the n-byte plaintext chunks."

    if n < 1:
        raise ElGamalValueError(f"invalid chunk size: {n}")
    return [
        int.from_bytes(plaintext[i : i + n], byteorder="little", signed=False)
        for i in range(0, len(plaintext), n)
    ]


def encode_point(m: int, ec: Curve) -> Point:
    """Return the curve point encoding the integer m.

    The x-coordinate is the first one, among W*m + counter
    for counter in 0..W-1, that has a valid y-coordinate.
    """

    if m < 0:
        raise ElGamalValueError(f"negative message chunk: {m}")
    if W * (m + 1) > ec.field:
        err_msg = f"message chunk too large: {int_repr(m)}"
        err_msg += f" for field {int_repr(ec.field)}"
        raise ElGamalValueError(err_msg)

    for counter in range(W):
        x = ModNum(W * m + counter, ec.field)
        y = ec.y(x)
        if y is not None:
            if counter:
                logger.debug("message chunk encoded after %d retries", counter)
            return Point(x, y, ec.a, ec.b)

    raise EncodingExhaustedError(f"no valid x-coordinate for {int_repr(m)}: increase W")


def decode_point(M: EllipticPoint, size: Optional[int] = None) -> bytes:
    """Return the little-endian bytes of the integer encoded by M.

    If size is None, the shortest byte representation is returned.
    """

    if isinstance(M, Infinity):
        raise DecodeError("Infinity cannot be decoded")
    if not isinstance(M, Point):
        raise ElGamalTypeError(f"not a point: {M!r}")

    m = M.x.value // W
    if size is None:
        size = (m.bit_length() + 7) // 8
    try:
        return m.to_bytes(size, byteorder="little", signed=False)
    except OverflowError as e:
        raise DecodeError(f"decoded chunk larger than {size} bytes") from e


def gen_keys(
    ec: Curve, randrange: RandRange = secure_randrange
) -> Tuple[int, EllipticPoint]:
    """Return a private/public (int, EllipticPoint) key-pair.

    The private key q is uniformly drawn in [0, p-1],
    the public key is q*G.
    """

    logger.debug("generating keys on a %d-bit field", ec.field.bit_length())
    q = randrange(0, ec.field)
    return q, ec.mult(q, ec.base_point)


def _ephemeral_scalar(ec: Curve, randrange: RandRange) -> int:
    # avoid too small (or too large) scalars
    return randrange(ec.field // (2 * W), ec.field // W)


def encrypt(
    public_key: EllipticPoint,
    ec: Curve,
    plaintext: String,
    randrange: RandRange = secure_randrange,
) -> Ciphertext:
    """Return the ciphertext of plaintext.

    Text strings are UTF-8 encoded.
    The ciphertext is a list of (C0, C1) point pairs,
    one pair for each plaintext chunk, in plaintext order.
    """

    if not ec.is_on_curve(public_key):
        raise InvalidPointError("public key not on curve")

    plaintext = bytes_from_string(plaintext)
    n = chunk_size(ec)
    message_points = [encode_point(m, ec) for m in split(plaintext, n)]
    logger.debug(
        "encrypting %d bytes in %d chunks of %d bytes",
        len(plaintext),
        len(message_points),
        n,
    )

    ciphertext: Ciphertext = []
    for M in message_points:
        s = _ephemeral_scalar(ec, randrange)
        C0 = ec.mult(s, ec.base_point)
        C1 = ec.add(ec.mult(s, public_key), M)
        ciphertext.append((C0, C1))
    return ciphertext


def decrypt_bytes(private_key: int, ec: Curve, ciphertext: Ciphertext) -> bytes:
    """Return the plaintext bytes of the ciphertext.

    All chunks but the last one are exactly chunk_size(ec) bytes long;
    trailing zero bytes of the last chunk are not recoverable.
    """

    n = chunk_size(ec)
    last = len(ciphertext) - 1
    chunks: List[bytes] = []
    for i, (C0, C1) in enumerate(ciphertext):
        # M = C1 - q*C0
        M = ec.add(ec.mult(private_key, ec.negate(C0)), C1)
        chunks.append(decode_point(M, n if i < last else None))
    return b"".join(chunks)


def decrypt(private_key: int, ec: Curve, ciphertext: Ciphertext) -> str:
    """Return the plaintext text of the ciphertext.

    A wrong private key almost surely results in a DecodeError:
    the decrypted bytes are not valid UTF-8.
    """

    plaintext = decrypt_bytes(private_key, ec, ciphertext)
    try:
        return plaintext.decode("utf-8")
    except UnicodeDecodeError as e:
        raise DecodeError("decrypted plaintext is not valid UTF-8") from e


def curve_from_selector(selector: CurveSelector) -> Curve:
    "Return the curve for a CurveName, a curve name, or a custom Curve."

    if isinstance(selector, CurveName):
        return selector.curve
    if isinstance(selector, str):
        if selector not in CURVES:
            raise ElGamalValueError(f"unknown curve: {selector}")
        return CURVES[selector]
    if isinstance(selector, Curve):
        if selector.field <= MIN_FIELD:
            err_msg = f"field too small: {int_repr(selector.field)}"
            err_msg += f" instead of more than {MIN_FIELD}"
            raise ElGamalValueError(err_msg)
        return selector
    raise ElGamalTypeError(f"not a curve selector: {selector!r}")


@dataclass(frozen=True)
class ElGamal:
    """ElGamal key material on a given curve.

    public_key is equal to private_key * curve.base_point.

    On custom curves where the bit length of field // W is a multiple
    of 8, some plaintext chunks cannot be encoded and encryption raises
    ElGamalValueError (see chunk_size).
    """

    curve: Curve
    public_key: EllipticPoint
    private_key: int = field(repr=False)

    @classmethod
    def new(
        cls, selector: CurveSelector, randrange: RandRange = secure_randrange
    ) -> "ElGamal":
        "Return freshly generated key material on the selected curve."
        ec = curve_from_selector(selector)
        private_key, public_key = gen_keys(ec, randrange)
        return cls(ec, public_key, private_key)

    def encrypt(
        self, plaintext: String, randrange: RandRange = secure_randrange
    ) -> Ciphertext:
        return encrypt(self.public_key, self.curve, plaintext, randrange)

    def decrypt(self, ciphertext: Ciphertext) -> str:
        return decrypt(self.private_key, self.curve, ciphertext)
