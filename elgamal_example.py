#!/usr/bin/env python3

# Copyright (C) 2026 The ecelgamal developers
#
# This file is part of ecelgamal. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecelgamal including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

from ecelgamal.curves import CurveName
from ecelgamal.elgamal import ElGamal, chunk_size, decrypt, encrypt

keys = ElGamal.new(CurveName.P256)
ec = keys.curve

print("\n*** EC:")
print(ec)

print("\n0. Message to be encrypted")
msg1 = """The main offices are along each wall, the windows
overlooking downtown Chicago.

You have a problem, Mr. Anderson.
You think that you're special."""
print(msg1)

print("\n1. Key generation")
print(f"prvkey:    {hex(keys.private_key).upper()}")
print(f"PubKey: {keys.public_key}")

print(f"\n2. Encrypt message, {chunk_size(ec)} bytes per curve point")
ciphertext = encrypt(keys.public_key, ec, msg1)
for i, (C0, C1) in enumerate(ciphertext):
    print(f" pair#{i}:")
    print(f"    C0: {C0}")
    print(f"    C1: {C1}")

print("\n3. Decrypt message")
msg2 = decrypt(keys.private_key, ec, ciphertext)
print(msg2)
print(msg1 == msg2)

print("\n** Decrypt with another key")
other_keys = ElGamal.new(CurveName.P256)
try:
    print(decrypt(other_keys.private_key, ec, ciphertext) == msg1)
except ValueError as e:
    print(e)
