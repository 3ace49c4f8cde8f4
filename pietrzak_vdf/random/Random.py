import secrets
from ..mpc import MPC
from ..mpc.types import MPZ
from .abstract.IRandom import IRandom


class Random(IRandom):
    """Implementation of secure random number generation."""

    @staticmethod
    def get_bits(bit_size: int) -> MPZ:
        return MPC.mpz(secrets.randbits(bit_size))

    @staticmethod
    def get_below(upper: MPZ) -> MPZ:
        if upper <= 0:
            raise ValueError(f"Upper bound must be positive, got {upper}")

        # Rejection sampling over the full bit width of upper
        bit_size = upper.bit_length()
        while True:
            candidate = Random.get_bits(bit_size)
            if candidate < upper:
                return candidate
