"""Database entity models."""

from .SolutionEntity import SolutionEntity

__all__ = ["SolutionEntity"]
