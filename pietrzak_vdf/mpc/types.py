"""Type definitions for multi-precision computing operations."""

from typing import NewType
from gmpy2 import mpz as _mpz

MPZ = NewType("MPZ", _mpz)
