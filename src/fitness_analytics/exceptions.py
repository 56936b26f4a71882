"""Exception hierarchy for the fitness analytics core.

The engines never raise on degenerate input; these are for callers that
validate records before aggregation.
"""

from __future__ import annotations


class FitnessAnalyticsError(Exception):
    """Base exception for all fitness_analytics errors."""


class InvalidSetError(FitnessAnalyticsError):
    """A set failed validation for its exercise type."""

    def __init__(self, message: str, set_id: str | None = None) -> None:
        super().__init__(message)
        self.set_id = set_id
