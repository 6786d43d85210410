"""Custom exceptions for buchicheck."""

from typing import List


class BuchiCheckError(Exception):
    """Base exception for all buchicheck errors."""

    pass


class ParseError(BuchiCheckError):
    """Raised when an omega-word expression cannot be parsed."""

    def __init__(self, message: str, position: int = -1) -> None:
        self.message = message
        self.position = position
        super().__init__(message)

    def __str__(self) -> str:
        if self.position >= 0:
            return f"{super().__str__()} at position {self.position}"
        return super().__str__()


class OmegaPlacementError(ParseError):
    """Raised when the ^w suffix is missing, repeated or not trailing.

    Attributes:
        kind: One of ``missing``, ``multiple`` or ``not_trailing``.
    """

    MISSING = "missing"
    MULTIPLE = "multiple"
    NOT_TRAILING = "not_trailing"

    def __init__(self, message: str, kind: str) -> None:
        self.kind = kind
        super().__init__(message)


class AutomatonFormatError(BuchiCheckError):
    """Raised when an automaton definition fails validation."""

    def __init__(self, errors: List[str]) -> None:
        self.errors = list(errors)
        super().__init__("; ".join(self.errors) or "Invalid automaton definition")


class ClosureLimitError(BuchiCheckError):
    """Raised when a star closure grows past the configured limit."""

    def __init__(self, limit: int) -> None:
        self.limit = limit
        super().__init__(f"Star closure exceeded {limit} state transforms")
