"""Evaluating omega-word expressions into sets of state transforms."""

from typing import Dict, List, Optional

from buchicheck.automaton.transform import (
    StateTransform,
    combine,
    compose,
    dedupe,
    identity,
    plus_closure,
    star_closure,
    stuck,
)
from buchicheck.parser.ast import Concat, Literal, Node, Omega, Plus, Star, Union


class RegexEvaluator:
    """Structural evaluation of an AST against per-letter transforms.

    Each node yields a deduplicated list of transforms, one per distinct
    state map its realizations induce. A new evaluator is built per
    evaluation call; nothing is cached between calls.

    Attributes:
        letters: Transform of each alphabet symbol.
        size: Number of automaton states.
        limit: Optional cap forwarded to star closures.
    """

    def __init__(
        self,
        letters: Dict[str, StateTransform],
        size: int,
        limit: Optional[int] = None,
    ):
        self.letters = letters
        self.size = size
        self.limit = limit

    def evaluate(self, node: Optional[Node]) -> List[StateTransform]:
        """Return the transforms of all realizations of ``node``.

        ``None`` stands for an absent prefix and evaluates to the identity.
        """
        if node is None:
            return [identity(self.size)]

        if isinstance(node, Literal):
            return [self.literal(node.symbol)]

        if isinstance(node, Concat):
            acc = [identity(self.size)]
            for child in node.nodes:
                acc = combine(acc, self.evaluate(child))
            return acc

        if isinstance(node, Union):
            return dedupe(t for child in node.nodes for t in self.evaluate(child))

        if isinstance(node, Star):
            return star_closure(self.evaluate(node.child), self.size, self.limit)

        if isinstance(node, Plus):
            return plus_closure(self.evaluate(node.child), self.size, self.limit)

        if isinstance(node, Omega):
            # Infinite repetition is handled by the cycle search, not here.
            return self.evaluate(node.child)

        raise TypeError(f"Unknown node type: {type(node).__name__}")

    def literal(self, text: str) -> StateTransform:
        """Compose the letters of ``text`` in order.

        A symbol outside the alphabet makes the whole map stuck, but the word
        keeps every character so the run can be replayed.
        """
        current = identity(self.size)
        for symbol in text:
            letter = self.letters.get(symbol)
            if letter is None:
                current = stuck(self.size, current.word + symbol)
            else:
                current = compose(current, letter)
        return current


def evaluate_regex(
    node: Optional[Node],
    letters: Dict[str, StateTransform],
    size: int,
    limit: Optional[int] = None,
) -> List[StateTransform]:
    """Convenience wrapper around RegexEvaluator.evaluate."""
    return RegexEvaluator(letters, size, limit).evaluate(node)
