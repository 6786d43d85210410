"""Shared automata for the test suite."""

import pytest

from buchicheck.automaton.buchi import BuchiAutomaton, Transition
from buchicheck.samples import get_sample


@pytest.fixture
def finite_a():
    """Partial automaton for "a occurs finitely often" on words starting a/b.

    p1 is accepting with a b self-loop; both letters lead from p0 into p1 and
    an a read in p1 gets stuck.
    """
    return BuchiAutomaton(
        states=["p0", "p1"],
        alphabet=["a", "b"],
        initial="p0",
        accepting=["p1"],
        transitions=[
            Transition("p0", "a", "p1"),
            Transition("p0", "b", "p1"),
            Transition("p1", "b", "p1"),
        ],
    )


@pytest.fixture
def pure_b():
    return get_sample("pure-b").automaton()


@pytest.fixture
def ab_cycle():
    return get_sample("ab-cycle").automaton()


@pytest.fixture
def baseline():
    return get_sample("baseline").automaton()


@pytest.fixture
def parity():
    """Two states toggled by every a; r0 is accepting."""
    return BuchiAutomaton.from_table(
        initial="r0",
        accepting=["r0"],
        delta={("r0", "a"): "r1", ("r1", "a"): "r0"},
    )
