import logging
import multiprocessing
from typing import List, Tuple

from ..challenge import FiatShamirChallenge
from ..converters.number_converter import NumberConverter
from ..mpc import MPC
from ..mpc.types import MPZ
from ..protocol_constants import (
    DELTA,
    HASH_NAME,
    MAX_TIME_PARAMETER,
    PRIMALITY_REPS,
    PRIME_BIT_SIZE,
)
from ..random import Random
from ..rsa import RSA
from ..time_lock_puzzle import (
    EfficientTimeLockPuzzleSolver,
    SequentialTimeLockPuzzleSolver,
    TimeLockPuzzle,
)
from ..utils import EnvironmentManager, EnvironmentVariables, SystemSpecs
from .ProofKind import ProofKind
from .RoundState import RoundState
from .Solution import Solution
from .abstract.IVDF import IVDF

logger = logging.getLogger(__name__)

# (time_parameter, delta, prime_bit_size, hash_name)
VDFParams = Tuple[int, int, int, str]


class PietrzakVDF(IVDF):
    """Pietrzak's verifiable delay function over an RSA group.

    solve() computes y = x^(2^T) mod N by T sequential squarings and proves it
    with one group element per halving round. Each round folds the claim about
    t into a claim about t/2 using a Fiat-Shamir challenge, until t <= delta
    and the verifier can check the remaining claim directly.
    """

    def __init__(
        self,
        time_parameter: int,
        delta: int = DELTA,
        prime_bit_size: int = PRIME_BIT_SIZE,
        hash_name: str = HASH_NAME,
    ) -> None:
        """Initialize the VDF.

        Args:
            time_parameter (int): T, the number of squarings; positive and even
            delta (int): Halving stops once the exponent is at most delta
            prime_bit_size (int): Bit size of each prime made by create()
            hash_name (str): hashlib algorithm used for challenges
        """
        if time_parameter <= 0 or time_parameter % 2 != 0:
            raise ValueError(
                f"The time parameter must be positive and even, got T={time_parameter}"
            )
        if time_parameter > MAX_TIME_PARAMETER:
            raise ValueError(
                f"The time parameter must fit in a signed 64-bit integer, got T={time_parameter}"
            )
        if delta < 2:
            # With delta = 1 the halving sticks at t = 2 and never terminates
            raise ValueError(f"delta must be at least 2, got {delta}")
        if prime_bit_size <= 0 or prime_bit_size % 8 != 0:
            raise ValueError(
                f"The prime bit size must be a positive multiple of 8, got {prime_bit_size}"
            )

        self._time_parameter = int(time_parameter)
        self._delta = delta
        self._prime_bit_size = prime_bit_size
        self._hash_name = hash_name

    @staticmethod
    def from_environment() -> "PietrzakVDF":
        """Build a VDF from the VDF_* environment variables and protocol defaults."""
        return PietrzakVDF(
            EnvironmentManager.get_int(EnvironmentVariables.VDF_TIME_PARAMETER),
            delta=EnvironmentManager.get_int(EnvironmentVariables.VDF_DELTA),
            prime_bit_size=EnvironmentManager.get_int(EnvironmentVariables.VDF_PRIME_BIT_SIZE),
        )

    def get_time_parameter(self) -> int:
        return self._time_parameter

    def get_delta(self) -> int:
        return self._delta

    def get_prime_bit_size(self) -> int:
        return self._prime_bit_size

    def get_hash_name(self) -> str:
        return self._hash_name

    def get_num_rounds(self) -> int:
        """Number of halving rounds, i.e. mu roots in a rounds proof."""
        rounds = 0
        t = self._time_parameter
        while t > self._delta:
            half_t = t // 2
            t = half_t if half_t % 2 == 0 else half_t + 1
            rounds += 1
        return rounds

    def create(self) -> Solution:
        rsa = RSA.generate(self._prime_bit_size)
        N = rsa.get_N()
        x = Random.get_below(N)

        puzzle = TimeLockPuzzle(x, self._time_parameter, N)
        y = EfficientTimeLockPuzzleSolver.solve(rsa, puzzle)

        length = self._prime_bit_size // 4
        input_value = NumberConverter.concat(
            NumberConverter.to_bytes(N, length), NumberConverter.to_bytes(x, length)
        )
        output = NumberConverter.to_bytes(y, length)
        proof = NumberConverter.to_bytes(rsa.get_p(), length // 2)

        logger.info("Created trapdoor solution for a %d-bit modulus", N.bit_length())
        return Solution(input_value, output, proof)

    def solve(self, input_value: bytes) -> Solution:
        if len(input_value) % 2 != 0:
            raise ValueError(
                f"Input must hold two equal-width integers, got {len(input_value)} bytes"
            )
        length = len(input_value) // 2
        N = NumberConverter.from_bytes(input_value, 0, length)
        if N == 0:
            raise ValueError("The modulus must be positive")
        x = MPC.mod(NumberConverter.from_bytes(input_value, length, length), N)

        challenge = FiatShamirChallenge(length, self._hash_name)

        # The delay itself: T sequential squarings
        y = SequentialTimeLockPuzzleSolver.solve(
            TimeLockPuzzle(x, self._time_parameter, N), self._delta
        )

        proof = []
        state = RoundState(x, y, self._time_parameter, N)
        while not state.is_final(self._delta):
            mu_root = SequentialTimeLockPuzzleSolver.solve(
                state.get_mu_root_puzzle(), self._delta
            )
            proof.append(NumberConverter.to_bytes(mu_root, length))
            logger.debug("Proved round %d at t=%d", len(proof), state.get_t())
            state = state.fold(mu_root, challenge)

        logger.info(
            "Solved T=%d with a proof of %d rounds", self._time_parameter, len(proof)
        )
        return Solution(
            input_value, NumberConverter.to_bytes(y, length), NumberConverter.concat(*proof)
        )

    def verify(self, solution: Solution) -> bool:
        length = solution.get_length()
        input_value = solution.get_input()

        N = NumberConverter.from_bytes(input_value, 0, length)
        if N == 0:
            logger.debug("Rejected: zero modulus")
            return False
        x = MPC.mod(NumberConverter.from_bytes(input_value, length, length), N)
        y = NumberConverter.from_bytes(solution.get_output())
        if y >= N:
            logger.debug("Rejected: output is not reduced modulo N")
            return False  # y should be minimal

        if solution.get_proof_kind() == ProofKind.FACTOR:
            return self._verify_factor(solution, x, y, N)
        return self._verify_rounds(solution, x, y, N)

    def create_many(self, amount: int) -> List[Solution]:
        """Create amount trapdoor solutions in a process pool."""
        params = [self._get_params() for _ in range(amount)]
        with multiprocessing.Pool(SystemSpecs.get_num_parallel_processes()) as pool:
            return pool.map(PietrzakVDF._create_parallel, params)

    def verify_many(self, solutions: List[Solution]) -> List[bool]:
        """Verify solutions in a process pool, returning verdicts in input order."""
        tasks = [(self._get_params(), solution) for solution in solutions]
        with multiprocessing.Pool(SystemSpecs.get_num_parallel_processes()) as pool:
            return pool.map(PietrzakVDF._verify_parallel, tasks)

    # Private Methods
    # ------------------------------------------------------------------------------

    def _verify_factor(self, solution: Solution, x: MPZ, y: MPZ, N: MPZ) -> bool:
        """Check a proof consisting of one of the two prime factors of N."""
        p = NumberConverter.from_bytes(solution.get_proof())
        if p < 2:
            logger.debug("Rejected: factor proof below 2")
            return False

        q, rem = MPC.divmod(N, p)
        if rem != 0:
            logger.debug("Rejected: factor proof does not divide N")
            return False
        if not (MPC.is_prime(p, PRIMALITY_REPS) and MPC.is_prime(q, PRIMALITY_REPS)):
            logger.debug("Rejected: factors of N are not both prime")
            return False

        puzzle = TimeLockPuzzle(x, self._time_parameter, N)
        return EfficientTimeLockPuzzleSolver.solve(RSA(p, q), puzzle) == y

    def _verify_rounds(self, solution: Solution, x: MPZ, y: MPZ, N: MPZ) -> bool:
        """Replay the halving rounds with the mu roots taken from the proof.

        The proof must hold exactly get_num_rounds() chunks. This is stricter
        than a verifier that reads only the chunks it needs and ignores the
        rest: leftover bytes after the last round are rejected, so each
        solution has one encoding.
        """
        length = solution.get_length()
        proof = solution.get_proof()
        rounds = self.get_num_rounds()
        if len(proof) < rounds * length:
            logger.debug("Rejected: proof has fewer than %d rounds", rounds)
            return False
        if len(proof) > rounds * length:
            logger.debug("Rejected: proof has trailing bytes after %d rounds", rounds)
            return False

        challenge = FiatShamirChallenge(length, self._hash_name)
        state = RoundState(x, y, self._time_parameter, N)
        for mu_root_bytes in solution.get_proof_chunks():
            state = state.fold(NumberConverter.from_bytes(mu_root_bytes), challenge)

        final_puzzle = TimeLockPuzzle(state.get_x(), state.get_t(), N)
        if SequentialTimeLockPuzzleSolver.solve(final_puzzle, self._delta) != state.get_y():
            logger.debug("Rejected: final claim at t=%d does not hold", state.get_t())
            return False
        return True

    def _get_params(self) -> VDFParams:
        return (self._time_parameter, self._delta, self._prime_bit_size, self._hash_name)

    @staticmethod
    def _create_parallel(params: VDFParams) -> Solution:
        """Helper method to create a single solution for multiprocessing."""
        return PietrzakVDF(*params).create()

    @staticmethod
    def _verify_parallel(task: Tuple[VDFParams, Solution]) -> bool:
        """Helper method to verify a single solution for multiprocessing."""
        params, solution = task
        return PietrzakVDF(*params).verify(solution)
