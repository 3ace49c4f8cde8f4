"""Script for solving a VDF input without the trapdoor and proving the result."""

import argparse
import logging
import time

from pietrzak_vdf.converters.number_converter import NumberConverter
from pietrzak_vdf.mpc import MPC
from pietrzak_vdf.utils import EnvironmentManager, EnvironmentVariables
from pietrzak_vdf.vdf import PietrzakVDF


def parse_args() -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Compute y = x^(2^T) mod N by sequential squaring and prove it."
    )
    parser.add_argument(
        "N",
        type=str,
        help="The modulus N (hex string)",
    )
    parser.add_argument(
        "x",
        type=str,
        help="The input value x (hex string)",
    )
    parser.add_argument(
        "--time",
        type=int,
        default=EnvironmentManager.get_int(EnvironmentVariables.VDF_TIME_PARAMETER),
        help="The time parameter T (number of squarings, even)",
    )
    parser.add_argument(
        "--delta",
        type=int,
        default=EnvironmentManager.get_int(EnvironmentVariables.VDF_DELTA),
        help="Halving stops once the exponent is at most delta",
    )
    return parser.parse_args()


def main() -> int:
    """Solve the input, verify the proof and output the solution."""
    args = parse_args()
    logging.basicConfig(level=logging.INFO)

    N = MPC.mpz(int(args.N, 16))
    x = MPC.mpz(int(args.x, 16))
    length = (N.bit_length() + 7) // 8
    input_value = NumberConverter.concat(
        NumberConverter.to_bytes(N, length), NumberConverter.to_bytes(x % N, length)
    )

    vdf = PietrzakVDF(args.time, delta=args.delta)
    print(f"Solving T = {vdf.get_time_parameter()} with {vdf.get_num_rounds()} proof rounds...")
    start_time = time.time()
    solution = vdf.solve(input_value)
    solve_time = time.time() - start_time
    print(f"Solved in {solve_time:.2f} seconds")

    start_time = time.time()
    valid = vdf.verify(solution)
    verify_time = time.time() - start_time
    print(f"Verification: {'Valid' if valid else 'Invalid'} ({verify_time:.4f} seconds)")

    print(f"\ny = {solution.get_output().hex()}")
    print(f"proof = {solution.get_proof().hex()}")
    return 0 if valid else 1


if __name__ == "__main__":
    exit(main())
