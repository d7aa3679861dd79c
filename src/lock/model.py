"""Lock puzzle data structures: codes, clues as constraints, and error types."""

from dataclasses import dataclass
from typing import Any, Iterable, Optional, Tuple

from src.utils.trace import Tracer

Code = Tuple[int, ...]


class InvalidArgumentError(ValueError):
    """Raised when a size, code, or count fails validation."""


class NoConstraintsError(RuntimeError):
    """Raised when solving a lock that holds no constraints."""


def with_leading_zero(i: int, size: int) -> str:
    if size <= 0:
        raise InvalidArgumentError("Size must be > 0")
    if i < 0 or i >= 10 ** size:
        raise InvalidArgumentError(f"{i} does not fit in {size} digit(s)")
    return f"{i:0{size}d}"


def to_digits(text: str) -> Code:
    """Decompose a digit string such as "064" into (0, 6, 4)."""
    if not text:
        raise InvalidArgumentError("Size of digits must be > 0")
    if not all(c in "0123456789" for c in text):
        raise InvalidArgumentError(f"Not a digit string: {text!r}")
    return tuple(ord(c) - ord("0") for c in text)


def format_code(code: Iterable[int]) -> str:
    return "".join(str(d) for d in code)


def to_code(value: Any) -> Code:
    """
    Coerce a digit string or an iterable of ints into a Code.
    Every digit must be an int in [0, 9]; bools are rejected.
    """
    if value is None:
        raise InvalidArgumentError("Digits can't be None")
    if isinstance(value, str):
        return to_digits(value)
    try:
        digits = tuple(value)
    except TypeError:
        raise InvalidArgumentError(f"Digits must be a sequence, got {type(value).__name__}") from None
    if not digits:
        raise InvalidArgumentError("Size of digits must be > 0")
    for digit in digits:
        if isinstance(digit, bool) or not isinstance(digit, int) or not 0 <= digit <= 9:
            raise InvalidArgumentError("Each digit must be between 0 and 9")
    return digits


def _check_count(number: int, what: str, size: int) -> None:
    if isinstance(number, bool) or not isinstance(number, int) or not 0 <= number <= size:
        raise InvalidArgumentError(f"Number of {what} digits must be between 0 and {size}")


@dataclass(frozen=True)
class Constraint:
    """
    One clue: a tried code plus how many of its digits are right and how many
    are right and in place.

    "Right" is a cross-product count, not a multiset intersection: a value that
    occurs k times in the pattern and m times in the candidate counts k*m.
    """

    pattern: Code
    right: int
    right_and_in_place: int

    def __post_init__(self) -> None:
        pattern = to_code(self.pattern)
        _check_count(self.right, "right", len(pattern))
        _check_count(self.right_and_in_place, "right and in place", len(pattern))
        object.__setattr__(self, "pattern", pattern)

    @property
    def size(self) -> int:
        return len(self.pattern)

    @property
    def description(self) -> str:
        return f"{format_code(self.pattern)} right={self.right} in_place={self.right_and_in_place}"

    def __str__(self) -> str:
        return self.description

    def digits_right(self, candidate: Code) -> int:
        return sum(1 for c in candidate for d in self.pattern if c == d)

    def digits_right_in_place(self, candidate: Code) -> int:
        return sum(1 for c, d in zip(candidate, self.pattern) if c == d)

    def matches(self, candidate: Code, tracer: Optional[Tracer] = None) -> bool:
        if candidate is None:
            raise InvalidArgumentError("Candidate can't be None")
        candidate = to_code(candidate)
        if len(candidate) != len(self.pattern):
            raise InvalidArgumentError(f"Candidate must be of length {len(self.pattern)}")

        right = self.digits_right(candidate)
        in_place = self.digits_right_in_place(candidate)
        ok = right == self.right and in_place == self.right_and_in_place

        if tracer is not None:
            tracer.log_constraint_check(
                constraint_desc=self.description,
                candidate=format_code(candidate),
                digits_right=right,
                digits_in_place=in_place,
                is_valid=ok,
            )
        return ok
