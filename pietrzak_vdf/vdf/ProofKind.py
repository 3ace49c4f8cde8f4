from enum import Enum


class ProofKind(Enum):
    """How the proof bytes of a solution are to be read.

    The wire format carries no tag; the kind follows from the proof length.
    """

    FACTOR = "factor"  # one prime factor of N, half an element wide
    ROUNDS = "rounds"  # one mu root per halving round, each an element wide
