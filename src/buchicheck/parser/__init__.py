"""Omega-word expression parsing."""

from buchicheck.parser.ast import (
    Node,
    Literal,
    Concat,
    Union,
    Repeat,
    Star,
    Plus,
    Omega,
    count_omega,
    depth,
    estimate_complexity,
    to_source,
)
from buchicheck.parser.parser import MAX_DEPTH, Parser, parse
from buchicheck.parser.omega_word import (
    OmegaParseResult,
    ParsedOmegaWord,
    decompose,
    parse_omega_word,
)

__all__ = [
    "Node",
    "Literal",
    "Concat",
    "Union",
    "Repeat",
    "Star",
    "Plus",
    "Omega",
    "count_omega",
    "depth",
    "estimate_complexity",
    "to_source",
    "MAX_DEPTH",
    "Parser",
    "parse",
    "OmegaParseResult",
    "ParsedOmegaWord",
    "decompose",
    "parse_omega_word",
]
