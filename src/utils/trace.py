"""Tracing module: logs lock solver steps and writes to CSV."""

import csv
from dataclasses import dataclass, asdict
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional


@dataclass
class TraceStep:
    """A single step in the solving process."""

    timestamp: float
    step_number: int
    action_type: str  # 'constraint_check', 'solution_found', 'scan_complete', 'clue_rejected'
    candidate: Optional[str] = None
    constraint_checked: Optional[str] = None
    digits_right: Optional[int] = None
    digits_in_place: Optional[int] = None
    is_valid: Optional[bool] = None
    reason: Optional[str] = None


class Tracer:
    """Records solver steps for logging and analysis."""

    def __init__(self, enabled: bool = True):
        self.enabled = enabled
        self.steps: List[TraceStep] = []
        self.start_time = datetime.now().timestamp()
        self.step_counter = 0

    def _get_timestamp(self) -> float:
        """Get elapsed time in seconds since tracer creation."""
        return datetime.now().timestamp() - self.start_time

    def _record(self, action_type: str, **fields: Any) -> None:
        if not self.enabled:
            return
        self.step_counter += 1
        self.steps.append(TraceStep(
            timestamp=self._get_timestamp(),
            step_number=self.step_counter,
            action_type=action_type,
            **fields,
        ))

    def log_constraint_check(
        self,
        constraint_desc: str,
        candidate: str,
        digits_right: int,
        digits_in_place: int,
        is_valid: bool,
    ):
        """Log one candidate compared against one clue."""
        self._record(
            'constraint_check',
            candidate=candidate,
            constraint_checked=constraint_desc,
            digits_right=digits_right,
            digits_in_place=digits_in_place,
            is_valid=is_valid,
        )

    def log_solution_found(self, candidate: str):
        """Log a candidate that satisfied every clue."""
        self._record('solution_found', candidate=candidate, is_valid=True)

    def log_scan_complete(self, candidates_checked: int, solutions: int):
        """Log the end of a full scan of the code space."""
        self._record(
            'scan_complete',
            reason=f"Checked {candidates_checked} candidates, found {solutions} solution(s)",
        )

    def log_clue_rejected(self, line: str, reason: str):
        """Log a clue that could not be added."""
        self._record('clue_rejected', constraint_checked=line, is_valid=False, reason=reason)

    def to_csv(self, filepath: Path) -> None:
        """Write trace to CSV file."""
        if not self.steps:
            print("No trace steps to write")
            return

        filepath = Path(filepath)
        filepath.parent.mkdir(parents=True, exist_ok=True)

        fieldnames = [
            'timestamp', 'step_number', 'action_type', 'candidate', 'constraint_checked',
            'digits_right', 'digits_in_place', 'is_valid', 'reason'
        ]

        with open(filepath, 'w', newline='', encoding='utf-8') as f:
            writer = csv.DictWriter(f, fieldnames=fieldnames)
            writer.writeheader()
            for step in self.steps:
                writer.writerow(asdict(step))

        print(f"Trace written to {filepath} ({len(self.steps)} steps)")

    def summary(self) -> Dict[str, Any]:
        """Get a summary of the trace."""
        action_counts = {}
        for step in self.steps:
            action_counts[step.action_type] = action_counts.get(step.action_type, 0) + 1

        candidates = {s.candidate for s in self.steps if s.action_type == 'constraint_check'}
        return {
            'total_steps': len(self.steps),
            'elapsed_time_seconds': self._get_timestamp(),
            'action_counts': action_counts,
            'num_candidates': len(candidates),
            'num_constraint_checks': action_counts.get('constraint_check', 0),
            'num_solutions': action_counts.get('solution_found', 0),
        }


# Global tracer instance
_global_tracer: Optional[Tracer] = None


def get_tracer() -> Tracer:
    """Get or create the global tracer."""
    global _global_tracer
    if _global_tracer is None:
        _global_tracer = Tracer(enabled=True)
    return _global_tracer


def reset_tracer() -> None:
    """Reset the global tracer."""
    global _global_tracer
    _global_tracer = None
