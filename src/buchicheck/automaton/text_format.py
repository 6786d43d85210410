"""Parser for the plain-text automaton format.

Example::

    states: q0,q1
    alphabet: a,b
    start: q0
    accept: q1
    transitions:
    q0,a->q0
    q0,b->q1
    q1,a->q0
    q1,b->q1

Header keys are case-insensitive; ``initial`` is accepted for ``start`` and
``accepting`` for ``accept``. Every line after ``transitions`` is an edge.
"""

import re
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from buchicheck.automaton.buchi import BuchiAutomaton, Transition

HEADER_KEYS = ("states", "alphabet", "start", "initial", "accept", "accepting")

_LIST_SEPARATOR = re.compile(r"[,\s]+")


@dataclass
class AutomatonParseResult:
    """Parsed automaton, or the list of problems found.

    ``automaton`` is only set when ``errors`` is empty.
    """

    automaton: Optional[BuchiAutomaton] = None
    errors: List[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.automaton is not None


def _read_list(line: str) -> List[str]:
    _, _, value = line.partition(":")
    return [item for item in _LIST_SEPARATOR.split(value.strip()) if item]


def parse_buchi_text(source: str) -> AutomatonParseResult:
    """Parse and validate an automaton definition.

    Args:
        source: Definition text.

    Returns:
        AutomatonParseResult with either an automaton or error messages.
    """
    errors: List[str] = []
    headers: Dict[str, List[str]] = {key: [] for key in HEADER_KEYS}
    transitions: List[Transition] = []
    in_transitions = False

    lines = [line.strip() for line in source.splitlines()]
    for line in lines:
        if not line:
            continue
        lower = line.lower()

        if lower.startswith("transitions"):
            in_transitions = True
            continue

        if not in_transitions:
            for key in HEADER_KEYS:
                if lower.startswith(f"{key}:"):
                    entries = _read_list(line)
                    if not entries:
                        errors.append(f"No entries found for {key}")
                    else:
                        headers[key].extend(entries)
                    break
            continue

        left, arrow, right = line.partition("->")
        if not arrow or not left.strip() or not right.strip():
            errors.append(f'Could not parse transition line: "{line}"')
            continue

        parts = left.split(",")
        origin = parts[0].strip()
        symbol = parts[1].strip() if len(parts) > 1 else ""
        target = right.strip()
        if not origin or not symbol or not target:
            errors.append(f'Incomplete transition: "{line}"')
            continue

        transitions.append(Transition(origin, symbol, target))

    states = headers["states"]
    alphabet = headers["alphabet"]
    starts = headers["start"] or headers["initial"]
    initial = starts[0] if starts else ""
    accepting = headers["accept"] or headers["accepting"]

    if not states:
        errors.append("No states declared")
    if not alphabet:
        errors.append("No alphabet declared")
    if not initial:
        errors.append("No start state declared")
    if not accepting:
        errors.append("No accepting states declared")

    if initial and initial not in states:
        errors.append(f'Start state "{initial}" not in states set')

    for state in accepting:
        if state not in states:
            errors.append(f'Accepting state "{state}" not in states set')

    for t in transitions:
        if t.source not in states:
            errors.append(f"Transition source {t.source} not in states set")
        if t.target not in states:
            errors.append(f"Transition target {t.target} not in states set")
        if alphabet and t.symbol not in alphabet:
            errors.append(f'Transition symbol "{t.symbol}" not in alphabet')

    if errors:
        return AutomatonParseResult(errors=errors)

    return AutomatonParseResult(
        automaton=BuchiAutomaton(
            states=states,
            alphabet=alphabet,
            initial=initial,
            accepting=accepting,
            transitions=transitions,
        )
    )


def to_text(automaton: BuchiAutomaton) -> str:
    """Render an automaton in the text format accepted by parse_buchi_text."""
    lines = [
        f"states: {','.join(automaton.states)}",
        f"alphabet: {','.join(automaton.alphabet)}",
        f"start: {automaton.initial}",
        f"accept: {','.join(automaton.accepting)}",
        "transitions:",
    ]
    lines.extend(f"{t.source},{t.symbol}->{t.target}" for t in automaton.transitions)
    return "\n".join(lines)
