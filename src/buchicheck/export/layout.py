"""Circular graph layout of an automaton."""

import math
from dataclasses import dataclass
from typing import List, Tuple

from buchicheck.automaton.buchi import BuchiAutomaton


@dataclass(frozen=True)
class GraphNode:
    """A positioned state."""

    id: str
    label: str
    x: float
    y: float
    is_initial: bool = False
    is_accepting: bool = False


@dataclass(frozen=True)
class GraphEdge:
    """A labelled transition between two nodes."""

    id: str
    source: str
    target: str
    label: str


def layout_circular(automaton: BuchiAutomaton) -> Tuple[List[GraphNode], List[GraphEdge]]:
    """Place states evenly on a circle, first state at the top.

    The radius grows with the number of states (at least 160 units).
    """
    count = max(len(automaton.states), 1)
    radius = max(160, count * 28)

    nodes: List[GraphNode] = []
    for i, state in enumerate(automaton.states):
        angle = 2 * math.pi * i / count - math.pi / 2
        nodes.append(
            GraphNode(
                id=state,
                label=state,
                x=radius * math.cos(angle),
                y=radius * math.sin(angle),
                is_initial=state == automaton.initial,
                is_accepting=state in automaton.accepting,
            )
        )

    edges = [
        GraphEdge(
            id=f"e-{i}-{t.source}-{t.target}-{t.symbol}",
            source=t.source,
            target=t.target,
            label=t.symbol,
        )
        for i, t in enumerate(automaton.transitions)
    ]
    return nodes, edges
