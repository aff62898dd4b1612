#!/usr/bin/env python3

# Copyright (C) 2026 The ecelgamal developers
#
# This file is part of ecelgamal. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecelgamal including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"__init__ module for the ecelgamal package."

name = "ecelgamal"
__version__ = "2026.10.19"
__author__ = "The ecelgamal developers"
__author_email__ = "devs@ecelgamal.org"
__copyright__ = "Copyright (C) 2026 The ecelgamal developers"
__license__ = "MIT License"
