"""Recursive descent parser for omega-word expressions.

Grammar, lowest to highest precedence::

    union   := concat ("|" concat)*
    concat  := repeat+
    repeat  := primary ("*" | "+")* ("^w" | "^ω")?
    primary := literal | "(" union ")"

A literal is any non-whitespace character outside ``()|*+^``. Whitespace
between tokens is ignored. Nothing may follow an omega suffix on the same
operand. Expressions nested deeper than MAX_DEPTH are rejected.
"""

from typing import List

from buchicheck.exceptions import ParseError
from buchicheck.parser.ast import (
    Concat,
    Literal,
    Node,
    Omega,
    Plus,
    Star,
    Union,
    depth,
)

RESERVED = "()|*+^"
OMEGA_MARKERS = ("w", "ω")
MAX_DEPTH = 100
TOO_DEEP_MESSAGE = "Expression is nested too deeply"


class Parser:
    """Single-pass parser with an explicit cursor."""

    def __init__(self, source: str):
        self.source = source
        self.pos = 0
        self.nesting = 0

    def parse(self) -> Node:
        """Parse the whole input.

        Raises:
            ParseError: On any syntax error.
        """
        self._skip_whitespace()
        if self._at_end():
            raise ParseError("Empty expression")

        node = self._parse_union()
        self._skip_whitespace()

        if not self._at_end():
            raise ParseError(f"Unexpected character {self._peek()!r}", self.pos)

        if depth(node) > MAX_DEPTH:
            raise ParseError(TOO_DEEP_MESSAGE)

        return node

    def _parse_union(self) -> Node:
        branches: List[Node] = [self._parse_concat()]
        self._skip_whitespace()

        while self._match("|"):
            branches.append(self._parse_concat())
            self._skip_whitespace()

        if len(branches) == 1:
            return branches[0]
        return Union(tuple(branches))

    def _parse_concat(self) -> Node:
        nodes: List[Node] = []
        self._skip_whitespace()

        while not self._at_end():
            if self._peek() in ")|":
                break
            nodes.append(self._parse_repeat())
            self._skip_whitespace()

        if not nodes:
            raise ParseError("Missing expression before operator", self.pos)

        if len(nodes) == 1:
            return nodes[0]
        return Concat(tuple(nodes))

    def _parse_repeat(self) -> Node:
        node = self._parse_primary()

        while True:
            self._skip_whitespace()
            c = self._peek()

            if c == "*":
                self._advance()
                node = Star(node)
            elif c == "+":
                self._advance()
                node = Plus(node)
            elif c == "^":
                if self._peek(1) not in OMEGA_MARKERS:
                    raise ParseError('Expected "w" or "ω" right after "^"', self.pos)
                self._advance()
                self._advance()
                # The omega suffix closes the operand.
                return Omega(node)
            else:
                return node

    def _parse_primary(self) -> Node:
        self._skip_whitespace()
        c = self._peek()

        if c == "(":
            if self.nesting >= MAX_DEPTH:
                raise ParseError(TOO_DEEP_MESSAGE, self.pos)
            self._advance()
            self.nesting += 1
            node = self._parse_union()
            self.nesting -= 1
            self._skip_whitespace()
            if self._peek() != ")":
                raise ParseError("Missing closing parenthesis", self.pos)
            self._advance()
            return node

        if is_literal_char(c):
            self._advance()
            return Literal(c)

        raise ParseError(f"Unexpected character {c!r}", self.pos)

    # ------------------------------------------------------------------
    # Cursor helpers
    # ------------------------------------------------------------------

    def _peek(self, offset: int = 0) -> str:
        index = self.pos + offset
        if index < len(self.source):
            return self.source[index]
        return ""

    def _advance(self) -> str:
        c = self._peek()
        self.pos += 1
        return c

    def _match(self, expected: str) -> bool:
        if self._peek() != expected:
            return False
        self._advance()
        return True

    def _skip_whitespace(self) -> None:
        while not self._at_end() and self._peek().isspace():
            self.pos += 1

    def _at_end(self) -> bool:
        return self.pos >= len(self.source)


def is_literal_char(c: str) -> bool:
    """Check if a character can appear as a literal symbol."""
    return bool(c) and c not in RESERVED and not c.isspace()


def parse(source: str) -> Node:
    """Parse an expression string into an AST.

    Args:
        source: The expression text, e.g. ``ab(ba)^w``.

    Returns:
        The root node.

    Raises:
        ParseError: If the text is not a well-formed expression.
    """
    return Parser(source).parse()
