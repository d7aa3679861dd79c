"""Clue parser: turn protocol lines and raw puzzle records into a LockSolver.

Supports:
- the console line protocol, one clue per line: "147 1,0" (code, right, in place)
- puzzle records {"id", "size", "clues"} where clues are protocol strings,
  [pattern, right, in_place] triples, or mappings with those keys
"""

from __future__ import annotations

import re
from typing import Any, Dict, List, Tuple

from .model import Code, InvalidArgumentError, to_code, to_digits
from .solver_core import LockSolver

DEFAULT_SIZE = 3
TERMINATOR = "q"

Clue = Tuple[Code, int, int]


class ClueFormatError(InvalidArgumentError):
    """Raised when a clue line does not follow the "<digits> <right>,<in place>" shape."""


def clue_pattern(size: int) -> re.Pattern[str]:
    return re.compile(rf"^([0-9]{{{size}}}) ([0-9]+),([0-9]+)$")


def is_terminator(line: str) -> bool:
    return line.strip().lower() == TERMINATOR


def parse_clue(line: str, size: int = DEFAULT_SIZE) -> Clue:
    match = clue_pattern(size).match(line.strip())
    if not match:
        raise ClueFormatError(f"Clue is not in the expected format: {line.strip()}")
    return to_digits(match.group(1)), int(match.group(2)), int(match.group(3))


def _split_clue_text(text: str) -> List[str]:
    parts = re.split(r"[;\n]", text)
    return [p.strip() for p in parts if p.strip()]


def _as_int(value: Any) -> Any:
    """Parse ASCII digit strings; anything else is left for Constraint to validate."""
    if isinstance(value, str) and value.strip() and all(c in "0123456789" for c in value.strip()):
        return int(value.strip())
    return value


def _coerce_clue(raw: Any, size: int) -> Clue:
    if isinstance(raw, str):
        return parse_clue(raw, size)

    if isinstance(raw, dict):
        try:
            pattern = raw["pattern"]
            right = raw["right"]
            in_place = raw.get("in_place", raw.get("right_and_in_place"))
        except KeyError as e:
            raise InvalidArgumentError(f"Clue mapping is missing {e}") from None
        if in_place is None:
            raise InvalidArgumentError("Clue mapping is missing 'in_place'")
        return to_code(pattern), _as_int(right), _as_int(in_place)

    if isinstance(raw, (list, tuple)) and len(raw) == 3:
        pattern, right, in_place = raw
        return to_code(pattern), _as_int(right), _as_int(in_place)

    raise InvalidArgumentError(f"Unsupported clue: {raw!r}")


def _raw_clues(puzzle_json: Dict[str, Any]) -> List[Any]:
    clues = puzzle_json.get("clues")
    if clues is None:
        return []
    if isinstance(clues, str):
        return _split_clue_text(clues)
    try:
        return list(clues)
    except TypeError:
        raise InvalidArgumentError(f"Clues must be a list or a string, got {type(clues).__name__}") from None


def _infer_size(raw_clues: List[Any], default_size: int) -> int:
    if not raw_clues:
        return default_size
    first = raw_clues[0]
    if isinstance(first, str):
        head = first.strip().split(" ", 1)[0]
        return len(head) if head else default_size
    if isinstance(first, dict):
        first = first.get("pattern")
    elif isinstance(first, (list, tuple)) and len(first) == 3:
        first = first[0]
    try:
        return len(to_code(first))
    except InvalidArgumentError:
        return default_size


def parse_puzzle(puzzle_json: Dict[str, Any], default_size: int = DEFAULT_SIZE) -> LockSolver:
    raw_clues = _raw_clues(puzzle_json)

    size_value = puzzle_json.get("size")
    if size_value is None or size_value == "":
        size = _infer_size(raw_clues, default_size)
    else:
        size = _as_int(size_value)

    solver = LockSolver(size)
    for raw in raw_clues:
        pattern, right, in_place = _coerce_clue(raw, size)
        solver.add_constraint(pattern, right, in_place)
    return solver
