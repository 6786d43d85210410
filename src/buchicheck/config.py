"""Configuration for omega-word evaluation."""

from dataclasses import dataclass, replace
from typing import Optional


@dataclass(frozen=True)
class Config:
    """Resource knobs for the acceptance checker.

    Attributes:
        max_closure_size: Upper bound on the number of distinct state
            transforms a single star closure may produce. ``None`` means the
            closure runs to its fixed point, which always terminates since
            the number of maps over a finite state set is finite.
    """

    max_closure_size: Optional[int] = None

    def __post_init__(self) -> None:
        if self.max_closure_size is not None and self.max_closure_size < 1:
            raise ValueError("max_closure_size must be a positive integer")

    @classmethod
    def default(cls) -> "Config":
        """Return the default configuration (no closure cap)."""
        return cls()

    def with_limit(self, max_closure_size: Optional[int]) -> "Config":
        """Return a copy with a different closure cap."""
        return replace(self, max_closure_size=max_closure_size)
