"""Pietrzak verifiable delay function module."""

from .PietrzakVDF import PietrzakVDF
from .ProofKind import ProofKind
from .RoundState import RoundState
from .Solution import Solution
from .abstract.IVDF import IVDF

__all__ = ["PietrzakVDF", "ProofKind", "RoundState", "Solution", "IVDF"]
