"""Acceptance of ultimately periodic words by deterministic Büchi automata.

A word u·v^ω given as expressions (U, V) is accepted iff some concrete
realization u of U and v of V drive the automaton, from its initial state,
into a periodic cycle that contains an accepting state. Candidate
realizations come from the transform sets of U and V, so at most one word is
tried per distinct state map.
"""

import logging
from typing import List, Optional, Union

from buchicheck.automaton.buchi import BuchiAutomaton
from buchicheck.automaton.evaluator import RegexEvaluator
from buchicheck.automaton.run import CycleResult, find_periodic_cycle, run_word
from buchicheck.automaton.transform import StateTransform
from buchicheck.automaton.transitions import TransitionTable
from buchicheck.config import Config
from buchicheck.diagnostics.diagnostics import Diagnostics
from buchicheck.diagnostics.evaluation import (
    CLOSURE_LIMIT_REASON,
    INITIAL_MISSING_REASON,
    LOOP_STUCK_REASON,
    NO_VALID_RUN_REASON,
    PREFIX_STUCK_REASON,
    TOO_DEEP_REASON,
    EvaluationResult,
)
from buchicheck.exceptions import AutomatonFormatError, ClosureLimitError
from buchicheck.parser.ast import depth
from buchicheck.parser.omega_word import ParsedOmegaWord, parse_omega_word
from buchicheck.parser.parser import MAX_DEPTH

logger = logging.getLogger(__name__)

# Ranking of rejection diagnostics; a higher rank replaces a lower one.
_RANK_PREFIX_STUCK = 0
_RANK_LOOP_STUCK = 1
_RANK_CYCLE = 2


class AcceptanceChecker:
    """Decides membership of omega-words in a deterministic Büchi automaton.

    The checker compiles the automaton once; every call to evaluate builds
    its own transform sets, so one checker may evaluate many words.
    """

    def __init__(self, automaton: BuchiAutomaton, config: Config = None):
        self.automaton = automaton
        self.config = config or Config.default()
        self.table = TransitionTable.compile(automaton)
        self.accepting = {
            self.table.index[s] for s in automaton.accepting if s in self.table.index
        }

    def evaluate(self, word: ParsedOmegaWord) -> EvaluationResult:
        """Evaluate a parsed omega-word.

        Args:
            word: Prefix and loop expressions.

        Returns:
            The verdict with its witness.
        """
        initial = self.table.index.get(self.automaton.initial)
        if initial is None:
            return EvaluationResult.rejected(
                INITIAL_MISSING_REASON, entry_state=self.automaton.initial
            )

        # Trees built by hand skip the parser depth check.
        if max(depth(word.prefix), depth(word.omega)) > MAX_DEPTH:
            return EvaluationResult.rejected(
                TOO_DEEP_REASON, entry_state=self.automaton.initial
            )

        evaluator = RegexEvaluator(
            self.table.letters, self.table.size(), self.config.max_closure_size
        )
        try:
            prefixes = evaluator.evaluate(word.prefix)
            loops = evaluator.evaluate(word.omega)
        except ClosureLimitError as e:
            return EvaluationResult.rejected(
                CLOSURE_LIMIT_REASON.format(error=e),
                entry_state=self.automaton.initial,
            )

        logger.debug(
            "Evaluating %d prefix x %d loop candidates", len(prefixes), len(loops)
        )
        return self._search(initial, prefixes, loops)

    def _search(
        self,
        initial: int,
        prefixes: List[StateTransform],
        loops: List[StateTransform],
    ) -> EvaluationResult:
        best: Optional[EvaluationResult] = None
        best_rank = -1

        for prefix in prefixes:
            entry = run_word(prefix.word, initial, self.table.step)
            if entry is None:
                if best_rank < _RANK_PREFIX_STUCK:
                    best = EvaluationResult.rejected(
                        PREFIX_STUCK_REASON,
                        entry_state=self.automaton.initial,
                        prefix_word=prefix.word,
                    )
                    best_rank = _RANK_PREFIX_STUCK
                continue

            for loop in loops:
                cycle = find_periodic_cycle(entry, loop.word, self.table.step)
                if cycle is None:
                    if best_rank < _RANK_LOOP_STUCK:
                        best = EvaluationResult.rejected(
                            LOOP_STUCK_REASON,
                            entry_state=self.table.name(entry),
                            prefix_word=prefix.word,
                            loop_word=loop.word,
                        )
                        best_rank = _RANK_LOOP_STUCK
                    continue

                result = self._cycle_result(entry, prefix.word, loop.word, cycle)
                if result.accepted:
                    logger.debug(
                        "Accepted via prefix %r and loop %r", prefix.word, loop.word
                    )
                    return result
                if best_rank < _RANK_CYCLE:
                    best = result
                    best_rank = _RANK_CYCLE

        if best is None or best_rank == _RANK_PREFIX_STUCK:
            return EvaluationResult.rejected(
                NO_VALID_RUN_REASON,
                entry_state=self.automaton.initial,
                prefix_word=best.prefix_word if best else "",
            )
        logger.debug("Rejected: %s", best.reason)
        return best

    def _cycle_result(
        self, entry: int, prefix_word: str, loop_word: str, cycle: CycleResult
    ) -> EvaluationResult:
        names = self.table.names(cycle.cycle_states)
        hits = [self.table.name(s) for s in cycle.cycle_states if s in self.accepting]
        entry_name = self.table.name(entry)

        if hits:
            reason = f"{cycle.reason} The cycle visits accepting state {hits[0]}."
        else:
            reason = (
                f"{cycle.reason} After the prefix the run enters {entry_name}; "
                f"the cycle {{{', '.join(names)}}} avoids every accepting state."
            )

        return EvaluationResult(
            accepted=bool(hits),
            cycle=names,
            prefix_word=prefix_word,
            loop_word=loop_word,
            entry_state=entry_name,
            reason=reason,
        )


def evaluate_omega_word(
    automaton: BuchiAutomaton, word: ParsedOmegaWord, config: Config = None
) -> EvaluationResult:
    """Decide whether ``automaton`` accepts ``word``.

    Args:
        automaton: A validated automaton.
        word: The parsed omega-word.
        config: Optional configuration.

    Returns:
        EvaluationResult; never raises for malformed automata.
    """
    return AcceptanceChecker(automaton, config).evaluate(word)


def check(
    automaton: Union[BuchiAutomaton, str], word: str, config: Config = None
) -> Diagnostics:
    """Parse ``word`` and check it against ``automaton``.

    Args:
        automaton: An automaton, or its definition in the text format.
        word: Omega-word expression such as ``ab(ba)^w``.
        config: Optional configuration.

    Returns:
        Diagnostics with status ACCEPTED or REJECTED, or WARNING when the
        automaton or the word could not be parsed.
    """
    word = word.strip()
    if isinstance(automaton, str):
        try:
            automaton = BuchiAutomaton.from_text(automaton)
        except AutomatonFormatError as e:
            return Diagnostics.warning(word, f"Invalid automaton: {e}")

    parsed = parse_omega_word(word)
    if not parsed.ok:
        return Diagnostics.warning(word, parsed.error)

    evaluation = evaluate_omega_word(automaton, parsed.word, config)
    return Diagnostics.from_evaluation(word, evaluation)
