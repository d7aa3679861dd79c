"""CLI entrypoint: read clues interactively or load puzzle files, run solver, and report results."""

import argparse
import csv
import json
import os
import sys
from pathlib import Path
from typing import Iterable, List, Optional

from solver import solve_lock
from src.lock.model import Code, InvalidArgumentError, NoConstraintsError, format_code
from src.lock.parser import (
    DEFAULT_SIZE,
    TERMINATOR,
    ClueFormatError,
    is_terminator,
    parse_clue,
    parse_puzzle,
)
from src.lock.solver_core import LockSolver
from src.lock.loader import load_puzzles
from src.utils.trace import Tracer, get_tracer, reset_tracer

PUZZLE_SUFFIXES = [".json", ".jsonl", ".parquet", ".csv"]


def _default_size() -> int:
    raw = os.environ.get("LOCK_SIZE", "")
    return int(raw) if raw.strip().isdigit() else DEFAULT_SIZE


def parse_args(argv: Optional[List[str]] = None):
    parser = argparse.ArgumentParser(description="Solve digits lock puzzles from clues")
    parser.add_argument(
        "input",
        type=Path,
        nargs="?",
        default=None,
        help="Optional path to puzzle file or directory of puzzles; reads clues from stdin when omitted",
    )
    parser.add_argument("--output", type=Path, default=None, help="Optional path to write solutions CSV")
    parser.add_argument(
        "--size",
        type=int,
        default=_default_size(),
        help="Number of digits in the code (default: $LOCK_SIZE or 3)",
    )
    parser.add_argument(
        "--trace",
        type=Path,
        default=None,
        help="Write solver steps to CSV (a file in interactive mode, a directory in batch mode).",
    )
    return parser.parse_args(argv)


def format_guess(code: Code) -> str:
    return "[" + ", ".join(str(d) for d in code) + "]"


def read_clues(lines: Iterable[str], lock: LockSolver, tracer: Optional[Tracer] = None) -> int:
    """Add clues from `lines` until a terminator line or end of input. Returns clues accepted."""
    accepted = 0
    for line in lines:
        line = line.rstrip("\n")
        if is_terminator(line):
            break
        if not line.strip():
            continue
        try:
            pattern, right, in_place = parse_clue(line, lock.size)
            lock.add_constraint(pattern, right, in_place)
        except ClueFormatError:
            print(f"Clue is not in the expected format: {line.strip()}. Try again...")
            if tracer is not None:
                tracer.log_clue_rejected(line.strip(), "format")
            continue
        except InvalidArgumentError as e:
            print(f"Clue is not valid: {e}. Try again...")
            if tracer is not None:
                tracer.log_clue_rejected(line.strip(), str(e))
            continue
        accepted += 1
    return accepted


def report(guesses: List[Code]) -> None:
    if not guesses:
        print("No result found.")
        return
    print(f"Found {len(guesses)} result(s).")
    for guess in guesses:
        print(f">>> {format_guess(guess)}")


def interactive(size: int, trace_path: Optional[Path] = None) -> int:
    if size <= 0:
        print(f"Size must be > 0, got {size}")
        return 2
    lock = LockSolver(size)
    reset_tracer()
    tracer = get_tracer() if trace_path else None

    print("Welcome to the Digits Lock Puzzle game.")
    print(
        f"Enter your clues in the following format {'d' * size} right,in place. "
        f"Press '{TERMINATOR}' when you are done."
    )
    read_clues(sys.stdin, lock, tracer)

    try:
        guesses = lock.solve(tracer)
    except NoConstraintsError:
        print("No clues entered.")
        guesses = None

    if tracer is not None:
        tracer.to_csv(trace_path)
    if guesses is None:
        return 1
    report(guesses)
    return 0


def write_results_csv(results, output_path: Path):
    with open(output_path, "w", newline="", encoding="utf-8") as f:
        writer = csv.writer(f)
        writer.writerow(["id", "solutions", "steps"])

        for r in results:
            writer.writerow([
                r["id"],
                json.dumps(r["solutions"], separators=(",", ":")),
                r["steps"]
            ])


def solve_batch(puzzles, size: int, trace_dir: Optional[Path] = None) -> list:
    results = []
    for index, puzzle in enumerate(puzzles):
        reset_tracer()
        tracer = get_tracer() if trace_dir else None
        puzzle_id = puzzle.get("id", f"row_{index}")

        try:
            lock = parse_puzzle(puzzle, default_size=size)
            solutions = solve_lock(lock, tracer)
            results.append({
                "id": puzzle_id,
                "solutions": [format_code(code) for code in solutions],
                # The scan is exhaustive, so every code of the lock size is one step.
                "steps": 10 ** lock.size,
            })
        except (InvalidArgumentError, NoConstraintsError) as e:
            print(f"ERROR: Failed to solve puzzle {puzzle_id}: {e}")
            results.append({
                "id": puzzle_id,
                "solutions": [],
                "steps": -1
            })

        if tracer is not None:
            tracer.to_csv(trace_dir / f"{puzzle_id}.csv")
    return results


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)

    if args.input is None:
        return interactive(args.size, args.trace)

    puzzles = []
    if args.input.is_file():
        puzzles = load_puzzles(str(args.input))
    elif args.input.is_dir():
        for file_path in sorted(args.input.iterdir()):
            if file_path.suffix in PUZZLE_SUFFIXES:
                puzzles.extend(load_puzzles(str(file_path)))
    else:
        raise ValueError(f"Input path {args.input} is neither file nor directory")

    results = solve_batch(puzzles, args.size, args.trace)

    if args.output:
        write_results_csv(results, args.output)
    else:
        print(results)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
