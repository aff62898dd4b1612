#!/usr/bin/env python3

# Copyright (C) 2026 The ecelgamal developers
#
# This file is part of ecelgamal. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecelgamal including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Named elliptic curves.

* Federal Information Processing Standards Publication 186-4
  (NIST) curves, also included in SEC 2 v.2
  https://nvlpubs.nist.gov/nistpubs/FIPS/NIST.FIPS.186-4.pdf
  http://www.secg.org/sec2-v2.pdf
"""

import json
from enum import Enum
from os import path
from typing import Dict

from ecelgamal.curve import Curve

datadir = path.join(path.dirname(__file__), "data")

# FIPS PUB 186-4
# FEDERAL INFORMATION PROCESSING STANDARDS PUBLICATION
# Digital Signature Standard (DSS)
filename = path.join(datadir, "ec_NIST.json")
with open(filename, "r", encoding="ascii") as file_:
    NIST_params = json.load(file_)
NIST: Dict[str, Curve] = {}
for ec_name, (p, a, b, G) in NIST_params.items():
    NIST[ec_name] = Curve.from_params(p, a, b, G)

CURVES: Dict[str, Curve] = {}
CURVES.update(NIST)


class CurveName(Enum):
    "Selector of the named curves, by field bit-length."

    P256 = "secp256r1"
    P384 = "secp384r1"
    P521 = "secp521r1"

    @property
    def curve(self) -> Curve:
        return CURVES[self.value]


secp256r1 = CURVES["secp256r1"]
secp384r1 = CURVES["secp384r1"]
secp521r1 = CURVES["secp521r1"]
