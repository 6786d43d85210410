"""Deterministic Büchi automaton value type."""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple


@dataclass(frozen=True)
class Transition:
    """A single labelled edge source --symbol--> target."""

    source: str
    symbol: str
    target: str

    def __repr__(self) -> str:
        return f"Transition({self.source} --{self.symbol}--> {self.target})"


@dataclass
class BuchiAutomaton:
    """Deterministic Büchi automaton.

    The declaration order of ``states`` fixes the dense state indices used by
    the checker. ``transitions`` may contain several entries for the same
    (state, symbol) pair; the last one wins.

    Attributes:
        states: State names.
        alphabet: Input symbols.
        initial: Start state.
        accepting: States that must be visited infinitely often.
        transitions: Labelled edges in declaration order.
    """

    states: List[str] = field(default_factory=list)
    alphabet: List[str] = field(default_factory=list)
    initial: str = ""
    accepting: List[str] = field(default_factory=list)
    transitions: List[Transition] = field(default_factory=list)

    @classmethod
    def from_text(cls, source: str) -> "BuchiAutomaton":
        """Build an automaton from the ``states:``/``transitions:`` text format.

        Raises:
            AutomatonFormatError: If the definition does not validate.
        """
        from buchicheck.automaton.text_format import parse_buchi_text
        from buchicheck.exceptions import AutomatonFormatError

        result = parse_buchi_text(source)
        if result.automaton is None:
            raise AutomatonFormatError(result.errors)
        return result.automaton

    @classmethod
    def from_table(
        cls,
        initial: str,
        accepting: List[str],
        delta: Dict[Tuple[str, str], str],
    ) -> "BuchiAutomaton":
        """Build an automaton from a ``(state, symbol) -> state`` mapping.

        States and symbols are collected in first-seen order, starting with
        the initial state.
        """
        states: List[str] = [initial]
        alphabet: List[str] = []
        transitions: List[Transition] = []
        for (source, symbol), target in delta.items():
            for state in (source, target):
                if state not in states:
                    states.append(state)
            if symbol not in alphabet:
                alphabet.append(symbol)
            transitions.append(Transition(source, symbol, target))
        for state in accepting:
            if state not in states:
                states.append(state)
        return cls(
            states=states,
            alphabet=alphabet,
            initial=initial,
            accepting=list(accepting),
            transitions=transitions,
        )

    def is_accepting(self, state: str) -> bool:
        return state in self.accepting

    def target(self, state: str, symbol: str) -> Optional[str]:
        """Return the (last declared) successor of ``state`` on ``symbol``."""
        result = None
        for t in self.transitions:
            if t.source == state and t.symbol == symbol:
                result = t.target
        return result

    def transitions_from(self, state: str) -> List[Transition]:
        return [t for t in self.transitions if t.source == state]

    def size(self) -> int:
        """Return number of states."""
        return len(self.states)
