#!/usr/bin/env python3

# Copyright (C) 2026 The ecelgamal developers
#
# This file is part of ecelgamal. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecelgamal including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Exception classes.

The base classes are only meant to discriminate between Exceptions
being raised by ecelgamal from those raised by other codebase.

Users are usually better off just dealing with the regular
ValueError, TypeError, and RuntimeError
from which the ecelgamal versions are derived.
"""


class ElGamalValueError(ValueError):
    pass


class ElGamalTypeError(TypeError):
    pass


class ElGamalRuntimeError(RuntimeError):
    pass


class FieldMismatchError(ElGamalValueError):
    "Operands belong to different prime fields."


class InvalidFieldError(ElGamalValueError):
    "The field modulus is not a positive integer."


class InvalidPointError(ElGamalValueError):
    "The (x, y) coordinates do not satisfy the curve equation."


class EncodingExhaustedError(ElGamalRuntimeError):
    "No curve point found for a message chunk within the retry bound."


class DecodeError(ElGamalValueError):
    "A decrypted point cannot be turned back into text."
