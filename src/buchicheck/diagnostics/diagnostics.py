"""Check diagnostics combining parsing and evaluation."""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional

from buchicheck.diagnostics.evaluation import EvaluationResult


class Status(Enum):
    """Outcome of a word check."""

    ACCEPTED = "accepted"
    REJECTED = "rejected"
    WARNING = "warning"


@dataclass(frozen=True)
class Diagnostics:
    """Result of checking one omega-word against one automaton.

    Attributes:
        status: Accepted, rejected, or warning when the input was unusable.
        word: The word with surrounding whitespace removed.
        message: Summary line for display.
        evaluation: The evaluation verdict; None for warnings.
    """

    status: Status
    word: str
    message: str
    evaluation: Optional[EvaluationResult] = None

    @property
    def is_accepted(self) -> bool:
        return self.status == Status.ACCEPTED

    @property
    def is_rejected(self) -> bool:
        return self.status == Status.REJECTED

    @property
    def is_warning(self) -> bool:
        return self.status == Status.WARNING

    @classmethod
    def from_evaluation(cls, word: str, evaluation: EvaluationResult) -> "Diagnostics":
        """Wrap an evaluation verdict."""
        if evaluation.accepted:
            return cls(Status.ACCEPTED, word, f'"{word}" is accepted.', evaluation)
        return cls(Status.REJECTED, word, f'"{word}" is rejected.', evaluation)

    @classmethod
    def warning(cls, word: str, message: str) -> "Diagnostics":
        """Create a result for input that could not be evaluated."""
        return cls(Status.WARNING, word, message)

    def to_dict(self) -> Dict[str, Any]:
        result: Dict[str, Any] = {
            "status": self.status.value,
            "word": self.word,
            "message": self.message,
        }
        if self.evaluation is not None:
            result["evaluation"] = self.evaluation.to_dict()
        return result

    def __str__(self) -> str:
        return f"{self.status.name}: {self.message}"
