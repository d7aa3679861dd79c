"""Top-level lock solve interface.

Expose `solve_lock(puzzle)` that accepts either a pre-built LockSolver or a raw
puzzle dictionary compatible with `src.lock.parser.parse_puzzle`.
"""

from typing import Any, List, Optional

from src.lock.model import Code
from src.lock.parser import DEFAULT_SIZE, parse_puzzle
from src.lock.solver_core import LockSolver
from src.utils.trace import Tracer


def solve_lock(
    puzzle: Any, tracer: Optional[Tracer] = None, default_size: int = DEFAULT_SIZE
) -> List[Code]:
    """
    Solve a lock and return every matching code in ascending order.
    Accepts:
      - LockSolver instances (used directly)
      - Raw puzzle dictionaries (parsed via `parse_puzzle`)
    """
    if isinstance(puzzle, LockSolver):
        lock = puzzle
    elif isinstance(puzzle, dict):
        lock = parse_puzzle(puzzle, default_size=default_size)
    else:
        raise TypeError("solve_lock expects a LockSolver instance or puzzle dictionary")

    return lock.solve(tracer)


__all__ = ["solve_lock"]
