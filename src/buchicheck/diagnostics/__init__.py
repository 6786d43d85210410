"""Diagnostics module for buchicheck results."""

from buchicheck.diagnostics.evaluation import EvaluationResult
from buchicheck.diagnostics.diagnostics import Diagnostics, Status

__all__ = [
    "EvaluationResult",
    "Diagnostics",
    "Status",
]
