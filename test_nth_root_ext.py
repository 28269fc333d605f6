"""
Tests for the extended stepper (trace records and work counters).
"""

import pytest

import nth_root_ext
from nth_root_ext import DigitRootExt
from nth_root_min import InvalidDegree, RootOverflow, nth_root


@pytest.fixture
def cube():
    return DigitRootExt(3, 10_218_313)


def test_trace_of_exact_cube(cube):
    assert cube.blocks == 3
    assert cube.trace() == [
        (10, 2, 2, 2, False),
        (218, 1, 21, 957, False),
        (313, 7, 217, 0, True),
    ]
    assert cube.result == 217
    assert cube.ticks == 3


def test_pow_evals_counts_digit_searches(cube):
    cube.run()
    # beta=2 -> 1,2 + failing 3; beta=1 -> 1 + failing 2; beta=7 -> 1..7 + failing 8
    assert cube.pow_evals == 3 + 2 + 8


def test_trace_of_inexact_square():
    dr = DigitRootExt(2, 8)
    assert dr.trace() == [
        (8, 2, 2, 4, False),
        (0, 8, 2, 4, True),
    ]
    assert dr.result == 2
    assert dr.ticks == 2


def test_result_before_done():
    dr = DigitRootExt(2, 312)
    with pytest.raises(RuntimeError):
        _ = dr.result
    assert dr.run() == 17


def test_tick_after_done_is_idempotent():
    dr = DigitRootExt(4, 256)
    dr.run()
    ticks = dr.ticks
    last = dr.tick()
    assert last == dr.tick()
    assert last[2] == 4 and last[4] is True
    assert dr.ticks == ticks


def test_zero_radicand():
    dr = DigitRootExt(5, 0)
    assert dr.trace() == [(0, 0, 0, 0, True)]


def test_validation():
    with pytest.raises(InvalidDegree):
        DigitRootExt(0, 10)
    with pytest.raises(RootOverflow):
        DigitRootExt(2, 2**32)


@pytest.mark.parametrize("degree", [1, 2, 3, 4, 9])
def test_matches_driver(degree):
    for x in range(0, 20_000, 13):
        dr = DigitRootExt(degree, x)
        assert dr.run() == nth_root(degree, x)
        assert dr.ticks <= dr.blocks + 1


def test_other_base_trace_ends_on_same_root():
    dr = DigitRootExt(3, 10_218_313, base=16)
    assert dr.run() == 217
    assert all(0 <= beta < 16 for (_, beta, _, _, _) in dr.trace())


class ZeroGroups:
    """Generator stand-in that claims no groups and yields only zeros."""

    def __init__(self, num, siz, base=10):
        self.blocks = 0

    def next(self):
        return 0


def test_non_convergence_is_an_overflow(monkeypatch):
    monkeypatch.setattr(nth_root_ext, "AlphaGenerator", ZeroGroups)
    dr = DigitRootExt(2, 100)
    assert dr.tick() == (0, 0, 0, 0, False)
    with pytest.raises(RootOverflow, match="no convergence after 1 steps"):
        dr.tick()
