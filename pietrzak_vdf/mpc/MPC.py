from typing import Tuple

import gmpy2
from .abstract.IMPC import IMPC
from .types import MPZ


class MPC(IMPC):
    """Implementation of multi-precision computing operations."""

    @staticmethod
    def mpz(value: int) -> MPZ:
        return gmpy2.mpz(value)

    @staticmethod
    def next_prime(value: MPZ) -> MPZ:
        return gmpy2.next_prime(value)

    @staticmethod
    def is_prime(value: MPZ, reps: int) -> bool:
        return bool(gmpy2.is_prime(value, reps))

    @staticmethod
    def powmod(base: MPZ, exp: MPZ, mod: MPZ) -> MPZ:
        return gmpy2.powmod(base, exp, mod)

    @staticmethod
    def pow(base: MPZ, exp: MPZ) -> MPZ:
        return base**exp

    @staticmethod
    def mod(value: MPZ, modulus: MPZ) -> MPZ:
        return value % modulus  # gmpy2 supports % operator for mpz values

    @staticmethod
    def mulmod(a: MPZ, b: MPZ, modulus: MPZ) -> MPZ:
        return (a * b) % modulus

    @staticmethod
    def divmod(value: MPZ, divisor: MPZ) -> Tuple[MPZ, MPZ]:
        return gmpy2.f_divmod(value, divisor)
