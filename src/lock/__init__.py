"""Lock models, clue parsing, and the exhaustive solver core for digits lock puzzles."""

from .model import Code, Constraint, InvalidArgumentError, NoConstraintsError
from .solver_core import LockSolver
from .parser import ClueFormatError, parse_clue, parse_puzzle

__all__ = [
    "Code",
    "Constraint",
    "InvalidArgumentError",
    "NoConstraintsError",
    "LockSolver",
    "ClueFormatError",
    "parse_clue",
    "parse_puzzle",
]
