"""Shared types for the per-factor matchers."""

from dataclasses import dataclass


class MatchValidationError(ValueError):
    """Raised before scoring when a request, profile or option is malformed.

    ``field`` is a dotted path to the offending value, e.g. ``request.budget``
    or ``candidate_pool[2].rate``.
    """

    def __init__(self, field: str, reason: str):
        self.field = field
        self.reason = reason
        super().__init__(f"{field}: {reason}")

    def to_dict(self) -> dict:
        return {"field": self.field, "reason": self.reason}


@dataclass(frozen=True)
class FactorScore:
    """One factor's 0-1 score plus the sentence used in the explanation.

    ``score`` is None when the input data needed for the factor is absent.
    """

    score: float | None
    detail: str

    @property
    def missing(self) -> bool:
        return self.score is None


def clamp(value: float, low: float = 0.0, high: float = 1.0) -> float:
    return min(high, max(low, value))


def format_amount(value: float) -> str:
    return f"{value:g}"
