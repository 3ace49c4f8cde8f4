from abc import ABC, abstractmethod
from ...mpc.types import MPZ
from .ITimeLockPuzzle import ITimeLockPuzzle


class ISequentialTimeLockPuzzleSolver(ABC):
    """Abstract base class defining the interface for a sequential time lock puzzle solver."""

    @staticmethod
    @abstractmethod
    def solve(puzzle: ITimeLockPuzzle, delta: int) -> MPZ:
        """Solve the time lock puzzle sequentially without the group order.

        Args:
            puzzle (ITimeLockPuzzle): The puzzle to solve
            delta (int): Largest power of two exponent applied in one step

        Returns:
            MPZ: The solution y
        """
