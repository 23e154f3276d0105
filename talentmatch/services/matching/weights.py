"""Weight configuration and the weighted combination of factor scores."""

import math

from talentmatch.schemas.matching import MatchWeights, TalentRequest
from talentmatch.services.matching.base import MatchValidationError

FACTORS = ("skills", "budget", "location", "availability", "reputation")

# Keeps every product of weights and multipliers finite
MAX_WEIGHT = 1_000_000.0

# Urgent requests care more about who can start on time
URGENCY_MULTIPLIERS = {
    "low": 1.0,
    "medium": 1.2,
    "high": 1.5,
    "critical": 2.0,
}

PROJECT_TYPE_MULTIPLIERS = {
    "development": {"skills": 1.3, "availability": 0.9},
    "consulting": {"reputation": 1.2},
    "design": {"skills": 1.2},
    "data": {"skills": 1.4, "reputation": 1.1},
    "other": {},
}

# (largest team size in the bracket, multipliers); the last bracket is open-ended
TEAM_SIZE_MULTIPLIERS = [
    (1, {"availability": 1.2}),
    (5, {}),
    (10, {"availability": 0.9}),
    (None, {"availability": 0.8}),
]

INDUSTRY_MULTIPLIERS = {
    "healthcare": {"reputation": 1.4},
    "finance": {"skills": 1.2, "reputation": 1.5},
    "ecommerce": {"skills": 1.2, "availability": 1.1},
    "saas": {"skills": 1.3},
    "startup": {"availability": 1.3, "budget": 0.8},
    "enterprise": {"reputation": 1.4},
}


def validate_weights(weights: MatchWeights, path: str = "weights") -> MatchWeights:
    values = weights.model_dump()
    for name, value in values.items():
        if not math.isfinite(value) or not 0 <= value <= MAX_WEIGHT:
            raise MatchValidationError(f"{path}.{name}", f"weight must be between 0 and {MAX_WEIGHT:g}")
    if sum(values.values()) == 0:
        raise MatchValidationError(path, "at least one weight must be positive")
    return weights


def merge_weights(base: MatchWeights, overrides: dict[str, float] | None) -> MatchWeights:
    """Overlay a partial factor -> weight mapping on top of ``base``."""
    if not overrides:
        return base
    unknown = sorted(set(overrides) - set(FACTORS))
    if unknown:
        raise MatchValidationError(
            f"options.weights.{unknown[0]}",
            f"unknown factor, expected one of: {', '.join(FACTORS)}",
        )
    merged = base.model_copy(update=dict(overrides))
    return validate_weights(merged, path="options.weights")


def _team_size_multipliers(team_size: int) -> dict[str, float]:
    for largest, multipliers in TEAM_SIZE_MULTIPLIERS:
        if largest is None or team_size <= largest:
            return multipliers
    return {}


def request_multipliers(request: TalentRequest) -> dict[str, float]:
    """Combined per-factor multipliers implied by the request's urgency, project type, team size and industry."""
    tables = []
    if request.urgency is not None:
        tables.append({"availability": URGENCY_MULTIPLIERS[request.urgency]})
    if request.project_type is not None:
        tables.append(PROJECT_TYPE_MULTIPLIERS[request.project_type])
    if request.team_size is not None:
        tables.append(_team_size_multipliers(request.team_size))
    if request.industry:
        tables.append(INDUSTRY_MULTIPLIERS.get(request.industry.strip().lower(), {}))

    combined: dict[str, float] = {}
    for table in tables:
        for name, multiplier in table.items():
            combined[name] = combined.get(name, 1.0) * multiplier
    return combined


def adjust_for_request(weights: MatchWeights, request: TalentRequest) -> MatchWeights:
    multipliers = request_multipliers(request)
    if not multipliers:
        return weights
    return weights.model_copy(
        update={name: getattr(weights, name) * multiplier for name, multiplier in multipliers.items()}
    )


def combine(scores: dict[str, float | None], weights: MatchWeights) -> float:
    """
    Normalized weighted mean of the factor scores that are present.

    Missing factors (None) are left out of both the numerator and the
    denominator, so they neither drag the composite down nor inflate it.
    Returns 0.0 when no weighted factor is present.
    """
    numerator = 0.0
    denominator = 0.0
    for name, score in scores.items():
        if score is None:
            continue
        weight = getattr(weights, name)
        numerator += weight * score
        denominator += weight
    if denominator == 0:
        return 0.0
    return numerator / denominator
