from abc import ABC, abstractmethod

from ..Solution import Solution


class IVDF(ABC):
    """Abstract base class defining the interface for a verifiable delay function."""

    @abstractmethod
    def create(self) -> Solution:
        """Create a random instance together with its solution using a trapdoor.

        The proof discloses a factor of the modulus, so such a solution only
        demonstrates correctness to parties allowed to learn the group order.

        Returns:
            Solution: The trapdoor solution
        """

    @abstractmethod
    def solve(self, input_value: bytes) -> Solution:
        """Evaluate the delay function on enc(N) || enc(x) and prove the result.

        Args:
            input_value (bytes): Two equal-width big-endian integers N and x

        Returns:
            Solution: The output y and its proof
        """

    @abstractmethod
    def verify(self, solution: Solution) -> bool:
        """Check a solution.

        Args:
            solution (Solution): The solution to check

        Returns:
            bool: True if the output is the delay function of the input
        """
