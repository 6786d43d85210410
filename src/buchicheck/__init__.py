"""
buchicheck - Membership of omega-words in deterministic Büchi automata.

An omega-word is written as a regular expression whose trailing part is
repeated forever, e.g. ``ab(ba)^w``. The checker decides whether some
realization of the word drives the automaton into a cycle through an
accepting state.

Example usage:
    >>> from buchicheck import check, get_sample
    >>> result = check(get_sample("pure-b").automaton(), "b^w")
    >>> result.is_accepted
    True

For more control:
    >>> from buchicheck import parse_omega_word, evaluate_omega_word
    >>> parsed = parse_omega_word("a(ab)^w")
    >>> verdict = evaluate_omega_word(automaton, parsed.word)
"""

__version__ = "0.1.0"

from buchicheck.automaton.buchi import BuchiAutomaton, Transition
from buchicheck.automaton.text_format import parse_buchi_text
from buchicheck.automaton.checker import AcceptanceChecker, check, evaluate_omega_word
from buchicheck.config import Config
from buchicheck.diagnostics.diagnostics import Diagnostics, Status
from buchicheck.diagnostics.evaluation import EvaluationResult
from buchicheck.parser.omega_word import (
    OmegaParseResult,
    ParsedOmegaWord,
    parse_omega_word,
)
from buchicheck.samples import SAMPLES, Sample, get_sample
from buchicheck.exceptions import (
    AutomatonFormatError,
    BuchiCheckError,
    ClosureLimitError,
    OmegaPlacementError,
    ParseError,
)

__all__ = [
    # Main API
    "check",
    "evaluate_omega_word",
    "parse_omega_word",
    "parse_buchi_text",
    "AcceptanceChecker",
    # Model
    "BuchiAutomaton",
    "Transition",
    "OmegaParseResult",
    "ParsedOmegaWord",
    "Sample",
    "SAMPLES",
    "get_sample",
    # Configuration
    "Config",
    # Diagnostics
    "Diagnostics",
    "Status",
    "EvaluationResult",
    # Exceptions
    "BuchiCheckError",
    "ParseError",
    "OmegaPlacementError",
    "AutomatonFormatError",
    "ClosureLimitError",
    # Version
    "__version__",
]
