from ..mpc import MPC
from ..mpc.types import MPZ
from ..rsa.RSA import RSA
from .TimeLockPuzzle import TimeLockPuzzle
from .abstract.IEfficientTimeLockPuzzleSolver import IEfficientTimeLockPuzzleSolver


TWO = MPC.mpz(2)


class EfficientTimeLockPuzzleSolver(IEfficientTimeLockPuzzleSolver):
    """Efficient time lock puzzle solver using RSA private parameters."""

    @staticmethod
    def solve(rsa: RSA, puzzle: TimeLockPuzzle) -> MPZ:
        """Solve puzzle quickly using RSA private key.

        Args:
            rsa: RSA instance with private parameters
            puzzle: The puzzle to solve

        Returns:
            The solution y = x^(2^t) mod N
        """
        if rsa.get_N() != puzzle.get_N():
            raise ValueError("The RSA factors do not match the puzzle modulus")

        # Reduce the exponent 2^t modulo phi without ever expanding it
        phi = rsa.get_phi()
        d = MPC.powmod(TWO, puzzle.get_t(), phi)
        return MPC.powmod(puzzle.get_x(), d, puzzle.get_N())
