"""Splitting a parsed expression into prefix and loop."""

from dataclasses import dataclass
from typing import Optional

from buchicheck.exceptions import OmegaPlacementError, ParseError
from buchicheck.parser.ast import Concat, Node, Omega, count_omega
from buchicheck.parser.parser import parse

EMPTY_INPUT_MESSAGE = "Enter a non-empty ω-word (e.g., ab(ba)^w)."
MISSING_OMEGA_MESSAGE = "Add a ^w suffix to mark the infinite loop (e.g., ab(ba)^w)."
MULTIPLE_OMEGA_MESSAGE = "Only one ^w (or ^ω) suffix is allowed."
NOT_TRAILING_MESSAGE = "Place the ^w suffix at the end so the word looks like αβ^w."


@dataclass(frozen=True)
class ParsedOmegaWord:
    """An omega-word split as prefix · omega^ω.

    Attributes:
        prefix: Finite part before the loop, or None.
        omega: The loop body with the omega operator stripped.
        ast: The full tree the parts came from.
    """

    prefix: Optional[Node]
    omega: Node
    ast: Node


@dataclass(frozen=True)
class OmegaParseResult:
    """Outcome of parse_omega_word: either a word or an error message."""

    word: Optional[ParsedOmegaWord] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.word is not None

    @classmethod
    def success(cls, word: ParsedOmegaWord) -> "OmegaParseResult":
        return cls(word=word)

    @classmethod
    def failure(cls, error: str) -> "OmegaParseResult":
        return cls(error=error)


def decompose(ast: Node) -> ParsedOmegaWord:
    """Split an AST around its single trailing omega node.

    Raises:
        OmegaPlacementError: If the omega node is missing, repeated, or not
            the whole tree nor the last element of a top-level concatenation.
    """
    occurrences = count_omega(ast)
    if occurrences == 0:
        raise OmegaPlacementError(MISSING_OMEGA_MESSAGE, OmegaPlacementError.MISSING)
    if occurrences > 1:
        raise OmegaPlacementError(
            MULTIPLE_OMEGA_MESSAGE, OmegaPlacementError.MULTIPLE
        )

    if isinstance(ast, Omega):
        return ParsedOmegaWord(prefix=None, omega=ast.child, ast=ast)

    if isinstance(ast, Concat) and isinstance(ast.nodes[-1], Omega):
        head = ast.nodes[:-1]
        prefix = head[0] if len(head) == 1 else Concat(head)
        return ParsedOmegaWord(prefix=prefix, omega=ast.nodes[-1].child, ast=ast)

    raise OmegaPlacementError(NOT_TRAILING_MESSAGE, OmegaPlacementError.NOT_TRAILING)


def parse_omega_word(raw: str) -> OmegaParseResult:
    """Parse and validate an omega-word such as ``ab(ba)^w``.

    Never raises; syntax and placement errors come back as a failure result
    carrying the diagnostic text.
    """
    text = raw.strip()
    if not text:
        return OmegaParseResult.failure(EMPTY_INPUT_MESSAGE)

    try:
        return OmegaParseResult.success(decompose(parse(text)))
    except ParseError as e:
        return OmegaParseResult.failure(str(e))
