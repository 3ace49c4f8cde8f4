from ..mpc import MPC
from ..mpc.types import MPZ
from .abstract.IRSA import IRSA
from ..primes import Primes


class RSA(IRSA):
    """RSA group whose order is known through its prime factors (the trapdoor)."""

    def __init__(self, p: MPZ, q: MPZ) -> None:
        """Initialize the group from its two prime factors.

        Args:
            p (MPZ): First prime factor
            q (MPZ): Second prime factor
        """
        self._p = MPC.mpz(p)
        self._q = MPC.mpz(q)

        # Calculate modulus N and Euler's totient
        self._N = self._calculate_N()
        self._phi = self._calculate_phi()

    @staticmethod
    def generate(prime_bit_size: int) -> "RSA":
        """Generate a fresh group from two independent random primes.

        Args:
            prime_bit_size (int): Number of bits of each prime factor.
                                  The modulus has 2 * prime_bit_size bits at most.
        """
        p = Primes.get_prime(prime_bit_size)
        q = Primes.get_prime(prime_bit_size)
        # phi = (p-1)(q-1) only holds for distinct primes
        while q == p:
            q = Primes.get_prime(prime_bit_size)
        return RSA(p, q)

    def get_p(self) -> MPZ:
        return self._p

    def get_q(self) -> MPZ:
        return self._q

    def get_N(self) -> MPZ:
        return self._N

    def get_phi(self) -> MPZ:
        return self._phi

    # Private methods
    # --------------

    def _calculate_N(self) -> MPZ:
        """Calculate the RSA modulus N = p * q."""
        return MPC.mpz(self._p * self._q)

    def _calculate_phi(self) -> MPZ:
        """Calculate Euler's totient φ(N) = (p-1)(q-1)."""
        return MPC.mpz((self._p - 1) * (self._q - 1))
