"""Verdict of evaluating an omega-word on a Büchi automaton."""

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Optional

INITIAL_MISSING_REASON = "Initial state is not part of the automaton."
PREFIX_STUCK_REASON = "Prefix causes the run to get stuck."
LOOP_STUCK_REASON = "Loop causes the run to get stuck."
NO_VALID_RUN_REASON = (
    "No valid run for the given ω-word: every prefix gets stuck on a transition."
)
CLOSURE_LIMIT_REASON = "Gave up: {error}."
TOO_DEEP_REASON = "Gave up: the expression is nested too deeply."


@dataclass(frozen=True)
class EvaluationResult:
    """Outcome of the acceptance check, with the witness that decided it.

    Attributes:
        accepted: Whether the word is in the automaton's language.
        cycle: State names of the periodic cycle (empty if none was found).
        prefix_word: Concrete prefix that was run.
        loop_word: Concrete loop word that was repeated.
        entry_state: State reached after the prefix.
        reason: Human-readable explanation.
    """

    accepted: bool
    cycle: List[str] = field(default_factory=list)
    prefix_word: str = ""
    loop_word: str = ""
    entry_state: str = ""
    reason: str = ""

    @classmethod
    def rejected(
        cls,
        reason: str,
        entry_state: str = "",
        prefix_word: str = "",
        loop_word: str = "",
        cycle: Optional[List[str]] = None,
    ) -> "EvaluationResult":
        """Create a rejecting result."""
        return cls(
            accepted=False,
            cycle=list(cycle or []),
            prefix_word=prefix_word,
            loop_word=loop_word,
            entry_state=entry_state,
            reason=reason,
        )

    @property
    def found_cycle(self) -> bool:
        return bool(self.cycle)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def __str__(self) -> str:
        verdict = "accepted" if self.accepted else "rejected"
        cycle = " -> ".join(self.cycle) if self.cycle else "-"
        return (
            f"{verdict}: prefix={self.prefix_word or 'ε'} "
            f"loop={self.loop_word or 'ε'} entry={self.entry_state or '-'} "
            f"cycle={cycle} ({self.reason})"
        )
