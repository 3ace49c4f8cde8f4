from ..mpc.types import MPZ
from .abstract.ITimeLockPuzzle import ITimeLockPuzzle


class TimeLockPuzzle(ITimeLockPuzzle):
    """A time lock puzzle: find x^(2^t) mod N."""

    def __init__(self, x: MPZ, t: int, N: MPZ) -> None:
        """Initialize a time lock puzzle.

        Args:
            x (MPZ): The input value
            t (int): The number of squarings, non-negative
            N (MPZ): The modulus
        """
        if t < 0:
            raise ValueError(f"The number of squarings must be non-negative, got t={t}")

        self._x = x
        self._t = t
        self._N = N

    def get_x(self) -> MPZ:
        return self._x

    def get_t(self) -> int:
        return self._t

    def get_N(self) -> MPZ:
        return self._N

    def __repr__(self) -> str:
        return f"<TimeLockPuzzle(t={self._t}, N_bits={self._N.bit_length()})>"
