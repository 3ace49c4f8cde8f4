"""Main script for generating, verifying and persisting trapdoor VDF solutions."""

import argparse
import logging
import time
from typing import List

from pietrzak_vdf.database.DatabaseService import DatabaseService
from pietrzak_vdf.database.database import initialize_database
from pietrzak_vdf.vdf import PietrzakVDF, Solution


class SolutionService:
    """Service class for managing VDF solution operations."""

    def __init__(self, vdf: PietrzakVDF):
        """
        Initialize the service.

        Args:
            vdf: The VDF used to create and verify solutions
        """
        self.vdf = vdf

    def generate_solutions(self, amount: int) -> List[Solution]:
        print(f"Generating {amount} solutions...")
        start_time = time.time()
        solutions = self.vdf.create_many(amount)
        total_time = time.time() - start_time
        print(f"Solution generation took {total_time:.2f} seconds")
        return solutions

    def verify_solutions(self, solutions: List[Solution]) -> bool:
        print("\nVerifying solutions...")
        start_time = time.time()
        verdicts = self.vdf.verify_many(solutions)
        total_time = time.time() - start_time
        print(f"Verification took {total_time:.2f} seconds")
        return all(verdicts)

    def save_solutions(self, solutions: List[Solution]) -> None:
        print("\nSaving to database...")
        start_time = time.time()
        initialize_database()
        DatabaseService.save_solutions(solutions, self.vdf.get_time_parameter())
        total_time = time.time() - start_time
        print(f"Database save took {total_time:.2f} seconds")


def parse_args() -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Generate trapdoor VDF solutions and save them to the database."
    )
    parser.add_argument(
        "count",
        type=int,
        help="Number of solutions to generate",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    return parser.parse_args()


def main() -> int:
    """Generate solutions, verify them and save them to the database."""
    args = parse_args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    vdf = PietrzakVDF.from_environment()
    print(f"T = {vdf.get_time_parameter()}, delta = {vdf.get_delta()}")
    service = SolutionService(vdf)

    solutions = service.generate_solutions(args.count)

    if not service.verify_solutions(solutions):
        print("Verification failed. Aborting save.")
        return 1

    service.save_solutions(solutions)

    print("\nDone!")
    return 0


if __name__ == "__main__":
    exit(main())
