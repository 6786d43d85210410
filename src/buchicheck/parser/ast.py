"""AST node definitions for omega-word expressions."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple


class Node(ABC):
    """Base class for all AST nodes."""

    @abstractmethod
    def children(self) -> "List[Node]":
        """Return child nodes."""
        ...

    @abstractmethod
    def __repr__(self) -> str:
        ...

    def walk(self) -> "Iterator[Node]":
        """Yield this node and all descendants in pre-order."""
        stack: "List[Node]" = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children()))


# ============================================================================
# Leaves
# ============================================================================


@dataclass(frozen=True)
class Literal(Node):
    """Single alphabet symbol.

    Attributes:
        symbol: The literal character.
    """

    symbol: str

    def children(self) -> "List[Node]":
        return []

    def __repr__(self) -> str:
        return f"Literal({self.symbol!r})"


# ============================================================================
# Structural nodes
# ============================================================================


@dataclass(frozen=True)
class Concat(Node):
    """Sequence of nodes (juxtaposition).

    Attributes:
        nodes: Nodes in order; always at least two.
    """

    nodes: "Tuple[Node, ...]"

    def children(self) -> "List[Node]":
        return list(self.nodes)

    def __repr__(self) -> str:
        return f"Concat({list(self.nodes)!r})"


@dataclass(frozen=True)
class Union(Node):
    """Alternation (|) between branches.

    Attributes:
        nodes: Branches in source order; always at least two.
    """

    nodes: "Tuple[Node, ...]"

    def children(self) -> "List[Node]":
        return list(self.nodes)

    def __repr__(self) -> str:
        return f"Union({list(self.nodes)!r})"


# ============================================================================
# Postfix operators
# ============================================================================


@dataclass(frozen=True)
class Repeat(Node):
    """Base class for postfix operators.

    Attributes:
        child: The operand.
    """

    child: "Node"

    def children(self) -> "List[Node]":
        return [self.child]

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.child!r})"


@dataclass(frozen=True, repr=False)
class Star(Repeat):
    """Zero or more repetition (*)."""

    pass


@dataclass(frozen=True, repr=False)
class Plus(Repeat):
    """One or more repetition (+)."""

    pass


@dataclass(frozen=True, repr=False)
class Omega(Repeat):
    """Infinite repetition (^w or ^ω).

    Only the trailing loop of an omega-word may carry this operator.
    """

    pass


# ============================================================================
# Helper functions
# ============================================================================


def count_omega(node: Optional[Node]) -> int:
    """Count omega nodes anywhere in the tree."""
    if node is None:
        return 0
    return sum(1 for n in node.walk() if isinstance(n, Omega))


def depth(node: Optional[Node]) -> int:
    """Number of nodes on the longest root-to-leaf path."""
    if node is None:
        return 0
    deepest = 0
    stack = [(node, 1)]
    while stack:
        current, level = stack.pop()
        deepest = max(deepest, level)
        stack.extend((child, level + 1) for child in current.children())
    return deepest


def estimate_complexity(node: Optional[Node]) -> int:
    """Rough size measure of an expression.

    Literals count one, concatenations add up, unions take their widest
    branch, star and plus add one level and omega adds two.
    """
    if node is None:
        return 0
    if isinstance(node, Literal):
        return len(node.symbol)
    if isinstance(node, Concat):
        return sum(estimate_complexity(child) for child in node.nodes)
    if isinstance(node, Union):
        return max(estimate_complexity(child) for child in node.nodes)
    if isinstance(node, Omega):
        return 2 + estimate_complexity(node.child)
    if isinstance(node, Repeat):
        return 1 + estimate_complexity(node.child)
    return 0


def to_source(node: Node) -> str:
    """Serialize an AST back to expression text.

    The output uses ``^w`` for omega and adds parentheses only where they are
    needed for the text to parse back into the same tree.
    """
    if isinstance(node, Literal):
        return node.symbol
    if isinstance(node, Concat):
        return "".join(_wrap(child, (Concat, Union)) for child in node.nodes)
    if isinstance(node, Union):
        return "|".join(_wrap(child, (Union,)) for child in node.nodes)
    if isinstance(node, Repeat):
        operand = _wrap(node.child, (Concat, Union, Omega))
        if isinstance(node, Star):
            return f"{operand}*"
        if isinstance(node, Plus):
            return f"{operand}+"
        return f"{operand}^w"
    raise TypeError(f"Unknown node type: {type(node).__name__}")


def _wrap(node: Node, grouped: tuple) -> str:
    text = to_source(node)
    if isinstance(node, grouped):
        return f"({text})"
    return text
