from abc import ABC, abstractmethod
from ...mpc.types import MPZ


class IRandom(ABC):
    """Abstract base class defining the interface for random number generation."""

    @staticmethod
    @abstractmethod
    def get_bits(bit_size: int) -> MPZ:
        """Get a uniformly random non-negative integer below 2^bit_size.

        Args:
            bit_size (int): Number of random bits.

        Returns:
            MPZ: The random integer
        """

    @staticmethod
    @abstractmethod
    def get_below(upper: MPZ) -> MPZ:
        """Get a uniformly random integer in [0, upper).

        Args:
            upper (MPZ): Exclusive upper bound, must be positive.

        Returns:
            MPZ: The random integer
        """
