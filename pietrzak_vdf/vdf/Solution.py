from typing import List

from .ProofKind import ProofKind


class Solution:
    """The (input, output, proof) byte strings of a VDF evaluation.

    input is enc(N) || enc(x) with both halves of the same width, output is
    enc(y) at that width, and proof is either a factor of N at half that width
    or a sequence of full-width intermediate values.
    """

    def __init__(self, input_value: bytes, output: bytes, proof: bytes) -> None:
        self._input = bytes(input_value)
        self._output = bytes(output)
        self._proof = bytes(proof)

    def get_input(self) -> bytes:
        return self._input

    def get_output(self) -> bytes:
        return self._output

    def get_proof(self) -> bytes:
        return self._proof

    def get_length(self) -> int:
        """Width in bytes of one group element encoding."""
        if len(self._input) % 2 != 0:
            raise ValueError(
                f"Input must hold two equal-width integers, got {len(self._input)} bytes"
            )
        return len(self._input) // 2

    def get_proof_kind(self) -> ProofKind:
        if len(self._proof) * 2 == self.get_length():
            return ProofKind.FACTOR
        return ProofKind.ROUNDS

    def get_proof_chunks(self) -> List[bytes]:
        """Split a rounds proof into its element-wide chunks.

        Trailing bytes that do not fill a whole chunk are not returned.
        """
        length = self.get_length()
        if length == 0:
            return []
        return [
            self._proof[offset : offset + length]
            for offset in range(0, len(self._proof) - length + 1, length)
        ]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Solution):
            return NotImplemented
        return (
            self._input == other._input
            and self._output == other._output
            and self._proof == other._proof
        )

    def __hash__(self) -> int:
        return hash((self._input, self._output, self._proof))

    def __repr__(self) -> str:
        return (
            f"<Solution(input={len(self._input)}B, output={len(self._output)}B, "
            f"proof={len(self._proof)}B)>"
        )
