"""Running concrete words and finding the cycle of a repeated loop word."""

from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Tuple

from buchicheck.automaton.transform import STUCK

EMPTY_LOOP_REASON = "Empty loop word; stay in the entry state."
CYCLE_REASON = "Cycle detected while repeating the loop word."

StepFunction = Callable[[int, str], int]


@dataclass
class CycleResult:
    """States visited once per period while the loop word repeats forever.

    Attributes:
        cycle_states: State indices in visiting order, without the repeat.
        reason: How the cycle was obtained.
    """

    cycle_states: List[int]
    reason: str


def run_word(word: str, start: int, step: StepFunction) -> Optional[int]:
    """Read ``word`` from ``start``.

    Returns:
        The state reached, or None if some transition is undefined.
    """
    current = start
    for symbol in word:
        current = step(current, symbol)
        if current == STUCK:
            return None
    return current


def find_periodic_cycle(
    entry_state: int, loop_word: str, step: StepFunction
) -> Optional[CycleResult]:
    """Find the cycle reached by reading ``loop_word`` forever from ``entry_state``.

    The search runs over (state, position in loop word) pairs, since the
    automaton may need several copies of the loop word to close a cycle.
    There are at most ``states * len(loop_word)`` such pairs, so a repeat is
    found unless the run gets stuck first.

    Returns:
        The cycle, or None if the run gets stuck before any pair repeats.
    """
    if not loop_word:
        return CycleResult(cycle_states=[entry_state], reason=EMPTY_LOOP_REASON)

    seen: Dict[Tuple[int, int], int] = {}
    path: List[int] = []
    state = entry_state
    pos = 0

    while (state, pos) not in seen:
        seen[(state, pos)] = len(path)
        path.append(state)

        state = step(state, loop_word[pos])
        if state == STUCK:
            return None
        pos = (pos + 1) % len(loop_word)

    start = seen[(state, pos)]
    return CycleResult(cycle_states=path[start:], reason=CYCLE_REASON)
