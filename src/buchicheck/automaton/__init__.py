"""Automaton module: model, text format and acceptance checking."""

from buchicheck.automaton.buchi import BuchiAutomaton, Transition
from buchicheck.automaton.text_format import AutomatonParseResult, parse_buchi_text
from buchicheck.automaton.transform import STUCK, StateTransform
from buchicheck.automaton.transitions import TransitionTable
from buchicheck.automaton.evaluator import RegexEvaluator, evaluate_regex
from buchicheck.automaton.run import CycleResult, find_periodic_cycle, run_word
from buchicheck.automaton.checker import (
    AcceptanceChecker,
    check,
    evaluate_omega_word,
)

__all__ = [
    "BuchiAutomaton",
    "Transition",
    "AutomatonParseResult",
    "parse_buchi_text",
    "STUCK",
    "StateTransform",
    "TransitionTable",
    "RegexEvaluator",
    "evaluate_regex",
    "CycleResult",
    "find_periodic_cycle",
    "run_word",
    "AcceptanceChecker",
    "check",
    "evaluate_omega_word",
]
