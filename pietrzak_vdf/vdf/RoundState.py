from ..challenge import FiatShamirChallenge
from ..mpc import MPC
from ..mpc.types import MPZ
from ..time_lock_puzzle import TimeLockPuzzle


class RoundState:
    """The claim y = x^(2^t) mod N carried through the halving rounds."""

    def __init__(self, x: MPZ, y: MPZ, t: int, N: MPZ) -> None:
        self._x = x
        self._y = y
        self._t = t
        self._N = N

    def get_x(self) -> MPZ:
        return self._x

    def get_y(self) -> MPZ:
        return self._y

    def get_t(self) -> int:
        return self._t

    def get_N(self) -> MPZ:
        return self._N

    def is_final(self, delta: int) -> bool:
        return self._t <= delta

    def get_mu_root_puzzle(self) -> TimeLockPuzzle:
        """Puzzle whose solution x^(2^(t/2 - 1)) is the square root of mu."""
        return TimeLockPuzzle(self._x, self._t // 2 - 1, self._N)

    def fold(self, mu_root: MPZ, challenge: FiatShamirChallenge) -> "RoundState":
        """Reduce the claim about t to an equivalent claim about t/2.

        Args:
            mu_root (MPZ): Claimed x^(2^(t/2 - 1)) mod N
            challenge (FiatShamirChallenge): Challenge derivation for this group

        Returns:
            RoundState: The folded claim, with an even t
        """
        N = self._N
        half_t = self._t // 2
        r = challenge.derive(mu_root, self._x, self._y, self._t)

        # we send the root of mu so that mu will certainly be a quadratic residue
        mu = MPC.mulmod(mu_root, mu_root, N)
        x = MPC.mulmod(MPC.powmod(self._x, r, N), mu, N)  # x' = x^r * mu
        y = MPC.mulmod(MPC.powmod(mu, r, N), self._y, N)  # y' = mu^r * y

        if half_t % 2 == 0:
            return RoundState(x, y, half_t, N)

        # Keep t even: one extra squaring of y matches x'^(2^(half_t + 1))
        return RoundState(x, MPC.mulmod(y, y, N), half_t + 1, N)

    def __repr__(self) -> str:
        return f"<RoundState(t={self._t})>"
