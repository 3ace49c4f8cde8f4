"""Time lock puzzle module: x^(2^t) mod N with or without the trapdoor."""

from .TimeLockPuzzle import TimeLockPuzzle
from .EfficientTimeLockPuzzleSolver import EfficientTimeLockPuzzleSolver
from .SequentialTimeLockPuzzleSolver import SequentialTimeLockPuzzleSolver

__all__ = [
    "TimeLockPuzzle",
    "EfficientTimeLockPuzzleSolver",
    "SequentialTimeLockPuzzleSolver",
]
