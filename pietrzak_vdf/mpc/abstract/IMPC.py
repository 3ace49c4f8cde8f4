from abc import ABC, abstractmethod
from typing import Tuple

from ..types import MPZ


class IMPC(ABC):
    """Abstract base class defining the interface for multi-precision computing operations."""

    @staticmethod
    @abstractmethod
    def mpz(value: int) -> MPZ:
        """Convert a Python integer to an mpz.

        Args:
            value (int): Integer value to convert

        Returns:
            mpz: Multi-precision integer
        """

    @staticmethod
    @abstractmethod
    def next_prime(value: MPZ) -> MPZ:
        """Find the next prime number after the given value.

        Args:
            value (mpz): Starting value

        Returns:
            mpz: Next (probable) prime number
        """

    @staticmethod
    @abstractmethod
    def is_prime(value: MPZ, reps: int) -> bool:
        """Run a probabilistic primality test.

        Args:
            value (mpz): Candidate
            reps (int): Number of Miller-Rabin rounds, each one
                        quartering the chance of a false positive

        Returns:
            bool: True if value is a probable prime
        """

    @staticmethod
    @abstractmethod
    def powmod(base: MPZ, exp: MPZ, mod: MPZ) -> MPZ:
        """Compute (base ** exp) % mod efficiently.

        Args:
            base (mpz): Base value
            exp (mpz): Exponent value
            mod (mpz): Modulus value

        Returns:
            mpz: Result of modular exponentiation
        """

    @staticmethod
    @abstractmethod
    def pow(base: MPZ, exp: MPZ) -> MPZ:
        """Compute base ** exp.

        Args:
            base (mpz): Base value
            exp (mpz): Exponent value

        Returns:
            mpz: Result of exponentiation
        """

    @staticmethod
    @abstractmethod
    def mod(value: MPZ, modulus: MPZ) -> MPZ:
        """Compute value % modulus.

        Args:
            value (mpz): Value to reduce
            modulus (mpz): Modulus to reduce by

        Returns:
            mpz: Result of modular reduction
        """

    @staticmethod
    @abstractmethod
    def mulmod(a: MPZ, b: MPZ, modulus: MPZ) -> MPZ:
        """Compute (a * b) % modulus.

        Args:
            a (mpz): First factor
            b (mpz): Second factor
            modulus (mpz): Modulus to reduce by

        Returns:
            mpz: Reduced product
        """

    @staticmethod
    @abstractmethod
    def divmod(value: MPZ, divisor: MPZ) -> Tuple[MPZ, MPZ]:
        """Compute floor quotient and remainder.

        Args:
            value (mpz): Dividend
            divisor (mpz): Divisor, must be non-zero

        Returns:
            Tuple[mpz, mpz]: (value // divisor, value % divisor)
        """
