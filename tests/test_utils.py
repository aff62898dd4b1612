#!/usr/bin/env python3

# Copyright (C) 2026 The ecelgamal developers
#
# This file is part of ecelgamal. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecelgamal including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Tests for the `ecelgamal.utils` module."

# Standard library imports
import secrets

# Third party imports
import pytest

# Library imports
from ecelgamal.exceptions import ElGamalValueError
from ecelgamal.utils import (
    bytes_from_string,
    hex_string,
    int_from_integer,
    int_repr,
    secure_randrange,
)


def test_int_from_integer() -> None:
    for i in (
        secrets.randbits(256 - 8),
        0x0B6CA75B7D3076C561958CCED813797F6D2275C7F42F3856D007D587769A90,
    ):
        assert i == int_from_integer(i)
        assert i == int_from_integer(" " + hex(i).upper())
        assert -i == int_from_integer(hex(-i).upper() + " ")
        assert i == int_from_integer(hex_string(i))
        assert i == int_from_integer(i.to_bytes(32, byteorder="big", signed=False))


def test_hex_string() -> None:
    int_ = 34492435054806958080
    assert hex_string(int_) == "01 DEADBEEF 00000000"
    assert hex_string(hex(int_).lower()) == "01 DEADBEEF 00000000"

    a_str = "01de adbeef00000000"
    assert hex_string(a_str) == "01 DEADBEEF 00000000"
    a_bytes = bytes.fromhex(a_str)
    assert hex_string(a_bytes) == "01 DEADBEEF 00000000"

    # invalid hex-string: odd number of hex digits
    a_str = "1deadbeef00000000"
    with pytest.raises(ValueError, match="non-hexadecimal number found in fromhex"):
        hex_string(a_str)

    int_ = -1
    with pytest.raises(ElGamalValueError, match="negative integer: "):
        hex_string(int_)


def test_int_repr() -> None:
    assert int_repr(0xFFFFFFFF) == "4294967295"
    assert int_repr(0x100000000) == "'01 00000000'"


def test_bytes_from_string() -> None:
    assert bytes_from_string("Hello") == b"Hello"
    assert bytes_from_string("è") == b"\xc3\xa8"
    assert bytes_from_string(b"\xff\x00") == b"\xff\x00"


def test_secure_randrange() -> None:
    for _ in range(100):
        assert 10 <= secure_randrange(10, 13) < 13
    assert secure_randrange(7, 8) == 7

    with pytest.raises(ElGamalValueError, match="empty range: "):
        secure_randrange(5, 5)
