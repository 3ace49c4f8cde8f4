"""Fiat-Shamir challenge derivation."""

from .FiatShamirChallenge import FiatShamirChallenge

__all__ = ["FiatShamirChallenge"]
