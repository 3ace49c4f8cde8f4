"""Verifiable delay function over RSA groups with Pietrzak halving proofs."""

from .vdf import PietrzakVDF, ProofKind, Solution

__all__ = ["PietrzakVDF", "ProofKind", "Solution"]
