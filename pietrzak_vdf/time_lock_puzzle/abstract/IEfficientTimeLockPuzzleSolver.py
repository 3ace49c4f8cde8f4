from abc import ABC, abstractmethod
from ...mpc.types import MPZ
from ...rsa import IRSA
from .ITimeLockPuzzle import ITimeLockPuzzle


class IEfficientTimeLockPuzzleSolver(ABC):
    """Abstract base class defining the interface for an efficient time lock puzzle solver."""

    @staticmethod
    @abstractmethod
    def solve(rsa: IRSA, puzzle: ITimeLockPuzzle) -> MPZ:
        """Solve the time lock puzzle efficiently using RSA private parameters.

        Args:
            rsa (IRSA): The RSA group with its prime factors
            puzzle (ITimeLockPuzzle): The puzzle to solve

        Returns:
            MPZ: The solution y
        """
