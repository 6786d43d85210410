"""Compiling an automaton into index-based transition tables."""

from dataclasses import dataclass, field
from typing import Dict, List

from buchicheck.automaton.buchi import BuchiAutomaton
from buchicheck.automaton.transform import STUCK, StateTransform


@dataclass
class TransitionTable:
    """Dense-index view of a Büchi automaton.

    States are numbered in declaration order. Transitions naming undeclared
    states are skipped; for duplicate (state, symbol) pairs the last
    declaration wins.

    Attributes:
        states: Index -> state name.
        index: State name -> index.
        delta: Per-state mapping of symbol to successor index.
        letters: One total transform per alphabet symbol.
    """

    states: List[str] = field(default_factory=list)
    index: Dict[str, int] = field(default_factory=dict)
    delta: List[Dict[str, int]] = field(default_factory=list)
    letters: Dict[str, StateTransform] = field(default_factory=dict)

    @classmethod
    def compile(cls, automaton: BuchiAutomaton) -> "TransitionTable":
        """Build the step table and per-letter transforms."""
        states = list(automaton.states)
        index = {name: i for i, name in enumerate(states)}
        delta: List[Dict[str, int]] = [{} for _ in states]

        for t in automaton.transitions:
            source = index.get(t.source)
            target = index.get(t.target)
            if source is None or target is None:
                continue
            delta[source][t.symbol] = target

        letters: Dict[str, StateTransform] = {}
        for symbol in automaton.alphabet:
            mapped = tuple(row.get(symbol, STUCK) for row in delta)
            letters[symbol] = StateTransform(mapped, symbol)

        return cls(states=states, index=index, delta=delta, letters=letters)

    def step(self, state: int, symbol: str) -> int:
        """Successor of ``state`` on ``symbol``, or STUCK."""
        if state < 0 or state >= len(self.delta):
            return STUCK
        return self.delta[state].get(symbol, STUCK)

    def size(self) -> int:
        return len(self.states)

    def name(self, state: int) -> str:
        return self.states[state]

    def names(self, indices: List[int]) -> List[str]:
        return [self.states[i] for i in indices]
