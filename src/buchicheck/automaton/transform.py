"""State transforms and their composition algebra.

A state transform is the effect of reading one concrete finite word from
every state of the automaton at once: ``map[q]`` is the state reached from
``q``, or STUCK when some transition on the way is undefined. Transforms are
kept together with one concrete word that realizes them so that a witness can
be replayed later.

Sets of transforms are plain lists deduplicated by their map; when two words
induce the same map the first one seen is kept.
"""

import logging
from collections import deque
from dataclasses import dataclass
from typing import Deque, Iterable, List, Optional, Set, Tuple

from buchicheck.exceptions import ClosureLimitError

logger = logging.getLogger(__name__)

STUCK = -1

StateMap = Tuple[int, ...]


@dataclass(frozen=True)
class StateTransform:
    """Total function over state indices plus a word that realizes it.

    Attributes:
        map: ``map[q]`` is the successor index of ``q`` or STUCK.
        word: A concrete word inducing ``map``.
    """

    map: StateMap
    word: str = ""

    @property
    def key(self) -> StateMap:
        """Deduplication key; the word does not take part."""
        return self.map

    def then(self, other: "StateTransform") -> "StateTransform":
        """Compose: read ``self.word`` first, then ``other.word``."""
        return compose(self, other)


def identity(size: int) -> StateTransform:
    """The transform of the empty word over ``size`` states."""
    return StateTransform(tuple(range(size)), "")


def stuck(size: int, word: str = "") -> StateTransform:
    """A transform that gets stuck from every state."""
    return StateTransform((STUCK,) * size, word)


def compose(a: StateTransform, b: StateTransform) -> StateTransform:
    """Map every state through ``a`` then ``b``; words are concatenated."""
    mapped = tuple(STUCK if target == STUCK else b.map[target] for target in a.map)
    return StateTransform(mapped, a.word + b.word)


def dedupe(items: Iterable[StateTransform]) -> List[StateTransform]:
    """Drop transforms whose map was already seen, keeping order."""
    seen: Set[StateMap] = set()
    out: List[StateTransform] = []
    for item in items:
        if item.key in seen:
            continue
        seen.add(item.key)
        out.append(item)
    return out


def combine(
    left: List[StateTransform], right: List[StateTransform]
) -> List[StateTransform]:
    """All compositions ``l.then(r)``, deduplicated by resulting map."""
    return dedupe(compose(a, b) for a in left for b in right)


def star_closure(
    base: List[StateTransform], size: int, limit: Optional[int] = None
) -> List[StateTransform]:
    """Least set containing the identity and ``base`` closed under ``.then(base)``.

    Runs a worklist to the fixed point. The result is bounded by the number of
    distinct maps over ``size`` states, so the loop always terminates.

    Args:
        base: Transforms of the repeated sub-expression.
        size: Number of automaton states.
        limit: Optional cap on the closure size.

    Raises:
        ClosureLimitError: If ``limit`` is set and the closure outgrows it.
    """
    closure = dedupe([identity(size)] + list(base))
    if limit is not None and len(closure) > limit:
        raise ClosureLimitError(limit)
    seen: Set[StateMap] = {t.key for t in closure}
    queue: Deque[StateTransform] = deque(closure)

    while queue:
        current = queue.popleft()
        for step in base:
            composed = compose(current, step)
            if composed.key in seen:
                continue
            seen.add(composed.key)
            closure.append(composed)
            queue.append(composed)
            if limit is not None and len(closure) > limit:
                raise ClosureLimitError(limit)

    logger.debug("Star closure over %d base transforms: %d maps", len(base), len(closure))
    return closure


def plus_closure(
    base: List[StateTransform], size: int, limit: Optional[int] = None
) -> List[StateTransform]:
    """One or more repetitions: ``base`` followed by its star closure."""
    return combine(base, star_closure(base, size, limit))
