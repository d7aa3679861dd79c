"""Unit tests for the exhaustive lock solver."""

import pytest

from src.lock.model import InvalidArgumentError, NoConstraintsError
from src.lock.solver_core import LockSolver
from src.utils.trace import Tracer


def _make_lock(clues, size=3):
    lock = LockSolver(size)
    for pattern, right, in_place in clues:
        lock.add_constraint(pattern, right, in_place)
    return lock


SCENARIO_A = [
    ((1, 4, 7), 1, 0),
    ((1, 8, 9), 1, 1),
    ((9, 6, 4), 2, 0),
    ((5, 2, 3), 0, 0),
    ((2, 8, 6), 1, 0),
]


def test_size_must_be_positive():
    for size in (-3, 0):
        with pytest.raises(InvalidArgumentError):
            LockSolver(size)
    assert LockSolver(10).size == 10


def test_solve_without_constraints_fails():
    with pytest.raises(NoConstraintsError):
        LockSolver(3).solve()


def test_constraints_must_be_valid():
    lock = LockSolver(3)
    bad = [
        ((0, 1, 2), -1, 1),
        ((0, 1, 2), 0, -1),
        (None, 0, 0),
        ((0, 1, 2), 0, 10),
        ((0, 1, 2, 3), 0, 1),
        ((0, 1), 0, 1),
    ]
    for pattern, right, in_place in bad:
        with pytest.raises(InvalidArgumentError):
            lock.add_constraint(pattern, right, in_place)
    assert lock.constraints == ()

    lock.add_constraint((0, 1, 2), 0, 1)
    assert len(lock.constraints) == 1


def test_single_solution():
    lock = _make_lock(SCENARIO_A)
    assert lock.solve() == [(6, 7, 9)]


def test_multiple_solutions_in_ascending_order():
    lock = _make_lock(SCENARIO_A[1:])
    assert lock.solve() == [(6, 0, 9), (6, 7, 9)]


def test_adding_a_clue_between_solves_narrows_results():
    lock = _make_lock(SCENARIO_A[1:])
    assert len(lock.solve()) == 2
    lock.add_constraint((1, 4, 7), 1, 0)
    assert lock.solve() == [(6, 7, 9)]


def test_solve_is_idempotent():
    lock = _make_lock(SCENARIO_A[1:])
    first = lock.solve()
    second = lock.solve()
    assert first == second
    assert first is not second


def test_no_match_is_an_empty_result():
    lock = _make_lock([((1, 2, 3), 0, 0), ((4, 5, 6), 0, 0), ((7, 8, 9), 0, 0), ((0, 0, 0), 0, 0)])
    assert lock.solve() == []


def test_scan_covers_every_code_including_nines():
    lock = _make_lock([((9,), 1, 1)], size=1)
    assert lock.solve() == [(9,)]


def test_iter_candidates_is_ascending_and_complete():
    candidates = list(LockSolver(2).iter_candidates())
    assert len(candidates) == 100
    assert candidates[0] == (0, 0)
    assert candidates[-1] == (9, 9)
    assert candidates == sorted(candidates)


def test_solve_records_matches_and_scan_when_traced():
    tracer = Tracer()
    lock = _make_lock(SCENARIO_A[1:])
    lock.solve(tracer)

    summary = tracer.summary()
    assert summary["num_candidates"] == 1000
    assert summary["num_solutions"] == 2
    assert [s.candidate for s in tracer.steps if s.action_type == "solution_found"] == ["609", "679"]
    assert tracer.steps[-1].action_type == "scan_complete"
