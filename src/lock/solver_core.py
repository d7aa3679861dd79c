"""Exhaustive lock solver: scan every candidate code and keep those matching all clues."""

from typing import Any, Iterator, List, Optional, Tuple

from .model import (
    Code,
    Constraint,
    InvalidArgumentError,
    NoConstraintsError,
    format_code,
    to_code,
    to_digits,
    with_leading_zero,
)
from src.utils.trace import Tracer


class LockSolver:
    """
    Holds the puzzle size and the clues added so far.

    Clues are append-only. `solve` rescans the whole code space on every call,
    so it can be called again after more clues are added.
    """

    def __init__(self, size: int):
        if isinstance(size, bool) or not isinstance(size, int) or size <= 0:
            raise InvalidArgumentError("Size must be > 0")
        self.size = size
        self._constraints: List[Constraint] = []

    def __repr__(self) -> str:
        return f"LockSolver(size={self.size}, constraints={len(self._constraints)})"

    @property
    def constraints(self) -> Tuple[Constraint, ...]:
        return tuple(self._constraints)

    def add_constraint(self, pattern: Any, right: int, right_and_in_place: int) -> Constraint:
        digits = to_code(pattern)
        if len(digits) != self.size:
            raise InvalidArgumentError(f"Size of digits must be {self.size}")
        constraint = Constraint(digits, right, right_and_in_place)
        self._constraints.append(constraint)
        return constraint

    def iter_candidates(self) -> Iterator[Code]:
        # Exact integer bound: every code from 00..0 to 99..9.
        for i in range(10 ** self.size):
            yield to_digits(with_leading_zero(i, self.size))

    def is_consistent(self, candidate: Code, tracer: Optional[Tracer] = None) -> bool:
        return all(c.matches(candidate, tracer) for c in self._constraints)

    def solve(self, tracer: Optional[Tracer] = None) -> List[Code]:
        """
        Return every code satisfying all clues, in ascending numeric order.
        An empty list means no code fits; solving with no clues is an error.
        """
        if not self._constraints:
            raise NoConstraintsError("Add at least one constraint before solving")

        results: List[Code] = []
        checked = 0
        for candidate in self.iter_candidates():
            checked += 1
            if self.is_consistent(candidate, tracer):
                results.append(candidate)
                if tracer is not None:
                    tracer.log_solution_found(candidate=format_code(candidate))

        if tracer is not None:
            tracer.log_scan_complete(candidates_checked=checked, solutions=len(results))
        return results
