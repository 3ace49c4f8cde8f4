"""Converter for VDF solutions."""

from typing import Optional

from ..database.entity.SolutionEntity import SolutionEntity
from ..vdf.ProofKind import ProofKind
from ..vdf.Solution import Solution


class SolutionConverter:
    """Converter between Solution and SolutionEntity."""

    @staticmethod
    def to_entity(
        solution: Solution, time_parameter: int, request_id: Optional[str] = None
    ) -> SolutionEntity:
        """Convert a Solution to a SolutionEntity.

        Args:
            solution (Solution): The solution to convert
            time_parameter (int): T of the VDF that produced the solution
            request_id (str): Optional associated request id

        Returns:
            SolutionEntity: The database entity
        """
        proof_kind = solution.get_proof_kind()
        if proof_kind == ProofKind.FACTOR:
            chunks = [solution.get_proof()]
        else:
            chunks = solution.get_proof_chunks()
            if len(chunks) * solution.get_length() != len(solution.get_proof()):
                raise ValueError("The proof is not a whole number of rounds")

        return SolutionEntity(
            time_parameter=str(time_parameter),
            input_hex=solution.get_input().hex(),
            output_hex=solution.get_output().hex(),
            proof=[chunk.hex() for chunk in chunks],
            proof_kind=proof_kind.value,
            request_id=request_id,
        )

    @staticmethod
    def from_entity(entity: SolutionEntity) -> Solution:
        """Convert a SolutionEntity back to a Solution.

        Args:
            entity (SolutionEntity): The stored entity

        Returns:
            Solution: The solution rebuilt from the stored hex strings
        """
        proof = b"".join(bytes.fromhex(chunk) for chunk in entity.proof)
        return Solution(bytes.fromhex(entity.input), bytes.fromhex(entity.output), proof)
