from ..mpc import MPC
from ..mpc.types import MPZ
from ..protocol_constants import DELTA, TWO_POW_DELTA
from .TimeLockPuzzle import TimeLockPuzzle
from .abstract.ISequentialTimeLockPuzzleSolver import ISequentialTimeLockPuzzleSolver


TWO = MPC.mpz(2)


class SequentialTimeLockPuzzleSolver(ISequentialTimeLockPuzzleSolver):
    """Sequential time lock puzzle solver (slow - does actual sequential squaring)."""

    @staticmethod
    def solve(puzzle: TimeLockPuzzle, delta: int = DELTA) -> MPZ:
        """Solve puzzle by repeated squaring (no private key).

        The t squarings are grouped into exponentiations by 2^delta so that no
        single powmod call receives an exponent of more than delta bits. Each
        of those exponentiations is itself delta sequential squarings, so the
        total work stays t squarings.

        Args:
            puzzle: The puzzle to solve
            delta: Largest power of two exponent applied in one step

        Returns:
            The solution y = x^(2^t) mod N
        """
        if delta < 1:
            raise ValueError(f"delta must be positive, got {delta}")

        x = puzzle.get_x()
        t = puzzle.get_t()
        N = puzzle.get_N()

        if t == 0:
            return x

        chunk_exp = TWO_POW_DELTA if delta == DELTA else MPC.pow(TWO, delta)
        while t >= delta:
            x = MPC.powmod(x, chunk_exp, N)
            t -= delta

        if t == 0:
            return x
        return MPC.powmod(x, MPC.pow(TWO, t), N)
