from ..mpc import MPC
from ..mpc.types import MPZ
from ..random import Random
from .abstract.IPrimes import IPrimes


class Primes(IPrimes):
    """Implementation of prime number generation."""

    @staticmethod
    def get_prime(bit_size: int) -> MPZ:
        if bit_size < 2:
            raise ValueError(f"Cannot generate a prime of {bit_size} bits")

        top_bit = MPC.mpz(1) << (bit_size - 1)
        while True:
            # Force the top bit so the prime has exactly bit_size bits
            random_num = Random.get_bits(bit_size - 1) | top_bit

            # Get next prime after the random number
            prime = MPC.next_prime(random_num)
            if prime.bit_length() == bit_size:
                return prime
