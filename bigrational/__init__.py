#!/usr/bin/env python3
#
# Copyright 2022 Max Planck Insitute Magdeburg
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
#
#
#
"""bigrational: exact rational arithmetic on arbitrary-precision integers"""

import logging


class DisableLogger():
    """Environment in which logging is disabled"""

    def __enter__(self):
        logging.disable(logging.CRITICAL)

    def __exit__(self, exit_type, exit_value, exit_traceback):
        logging.disable(logging.NOTSET)


from .rational import Rational, InvalidArgument, ZERO, ONE, HALF, QUARTER
from .rational_operations import RationalOperations, INSTANCE as operations
from .interop import (
    FLINT_AVAILABLE,
    as_rational,
    from_fmpq,
    from_fraction,
    from_sympy,
    to_fmpq,
    to_fraction,
    to_sympy,
)

__all__ = [
    'DisableLogger',
    'Rational',
    'InvalidArgument',
    'ZERO',
    'ONE',
    'HALF',
    'QUARTER',
    'RationalOperations',
    'operations',
    'FLINT_AVAILABLE',
    'as_rational',
    'from_fmpq',
    'from_fraction',
    'from_sympy',
    'to_fmpq',
    'to_fraction',
    'to_sympy',
]
