import math

import structlog

from talentmatch.schemas.matching import (
    MatchOptions,
    MatchResult,
    MatchWeights,
    TalentProfile,
    TalentRequest,
)
from talentmatch.services.matching.availability import score_availability
from talentmatch.services.matching.base import FactorScore, MatchValidationError
from talentmatch.services.matching.budget import exceeds_budget, score_budget
from talentmatch.services.matching.location import score_location
from talentmatch.services.matching.reputation import MAX_RATING, score_reputation
from talentmatch.services.matching.skills import missing_required_skills, score_skills
from talentmatch.services.matching.weights import (
    FACTORS,
    adjust_for_request,
    combine,
    merge_weights,
    validate_weights,
)

logger = structlog.get_logger()


def _check_finite(field: str, value: float) -> None:
    if not math.isfinite(value):
        raise MatchValidationError(field, "must be a finite number")


def validate_request(request: TalentRequest) -> None:
    budget = request.budget
    _check_finite("request.budget.min", budget.min)
    _check_finite("request.budget.max", budget.max)
    if budget.min < 0:
        raise MatchValidationError("request.budget.min", "budget cannot be negative")
    if budget.min > budget.max:
        raise MatchValidationError(
            "request.budget",
            f"minimum {budget.min:g} is greater than maximum {budget.max:g}",
        )
    _check_finite("request.duration.value", request.duration.value)
    if request.duration.value < 0:
        raise MatchValidationError("request.duration.value", "duration cannot be negative")
    if request.team_size is not None and request.team_size <= 0:
        raise MatchValidationError("request.team_size", "team size must be a positive integer")


def validate_profile(profile: TalentProfile, path: str) -> None:
    rate = profile.rate
    _check_finite(f"{path}.rate.min", rate.min)
    _check_finite(f"{path}.rate.max", rate.max)
    if rate.min < 0:
        raise MatchValidationError(f"{path}.rate.min", "rate cannot be negative")
    if rate.min > rate.max:
        raise MatchValidationError(
            f"{path}.rate",
            f"minimum {rate.min:g} is greater than maximum {rate.max:g}",
        )
    for j, window in enumerate(profile.availability or []):
        if window.end < window.start:
            raise MatchValidationError(f"{path}.availability[{j}]", "window ends before it starts")
    if profile.rating is not None and not 0 <= profile.rating <= MAX_RATING:
        raise MatchValidationError(f"{path}.rating", f"rating must be between 0 and {MAX_RATING:g}")
    if profile.review_count < 0:
        raise MatchValidationError(f"{path}.review_count", "review count cannot be negative")


def validate_options(options: MatchOptions) -> None:
    if options.limit is not None and options.limit <= 0:
        raise MatchValidationError("options.limit", "limit must be a positive integer")
    if not 0 <= options.min_score <= 1:
        raise MatchValidationError("options.min_score", "min_score must be between 0 and 1")


class MatchingEngine:
    """Ranks a candidate pool against a talent request.

    Pure and synchronous: the same request, pool and options always yield
    the same results, and nothing is cached between calls.
    """

    def __init__(self, weights: MatchWeights | None = None, default_limit: int | None = None):
        if default_limit is not None and default_limit <= 0:
            raise MatchValidationError("default_limit", "limit must be a positive integer")
        self.weights = validate_weights(weights or MatchWeights())
        self.default_limit = default_limit

    def resolve_weights(self, request: TalentRequest, options: MatchOptions | None = None) -> MatchWeights:
        """Weights actually used for ``request``: defaults, caller overrides, then request multipliers."""
        options = options or MatchOptions()
        weights = merge_weights(self.weights, options.weights)
        return adjust_for_request(weights, request)

    def find_matches(
        self,
        request: TalentRequest,
        candidate_pool: list[TalentProfile],
        options: MatchOptions | None = None,
    ) -> list[MatchResult]:
        options = options or MatchOptions()
        try:
            validate_request(request)
            validate_options(options)
            for i, profile in enumerate(candidate_pool):
                validate_profile(profile, f"candidate_pool[{i}]")
            weights = self.resolve_weights(request, options)
        except MatchValidationError as e:
            logger.warning("matching_rejected", request_id=request.id, field=e.field, reason=e.reason)
            raise

        unavailable = 0
        missing_skills = 0
        over_budget = 0
        results = []
        for profile in candidate_pool:
            if not profile.is_available:
                unavailable += 1
                continue
            if missing_required_skills(request.required_skills, profile.skills):
                missing_skills += 1
                continue
            if exceeds_budget(request.budget, profile.rate):
                over_budget += 1
                continue
            results.append(self._score_candidate(request, profile, weights))

        below_threshold = sum(1 for r in results if r.score < options.min_score)
        results = [r for r in results if r.score >= options.min_score]
        results.sort(key=lambda r: (-r.score, r.profile_id))

        limit = options.limit if options.limit is not None else self.default_limit
        if limit is not None:
            results = results[:limit]
        for rank, result in enumerate(results, 1):
            result.rank = rank

        logger.info(
            "matching_completed",
            request_id=request.id,
            pool_size=len(candidate_pool),
            unavailable=unavailable,
            missing_required_skills=missing_skills,
            over_budget=over_budget,
            below_min_score=below_threshold,
            returned=len(results),
        )
        return results

    def score_factors(self, request: TalentRequest, profile: TalentProfile) -> dict[str, FactorScore]:
        """Per-factor scores for one candidate, without any hard filtering."""
        return {
            "skills": score_skills(request.required_skills, request.preferred_skills, profile.skills),
            "budget": score_budget(request.budget, profile.rate),
            "location": score_location(
                request.location,
                request.remote_preference,
                profile.location,
                profile.remote_preference,
            ),
            "availability": score_availability(request.start_date, request.duration, profile.availability),
            "reputation": score_reputation(profile.rating, profile.review_count),
        }

    def _score_candidate(
        self, request: TalentRequest, profile: TalentProfile, weights: MatchWeights
    ) -> MatchResult:
        factors = self.score_factors(request, profile)
        score = combine({name: f.score for name, f in factors.items()}, weights)

        return MatchResult(
            profile_id=profile.id,
            score=score,
            breakdown={name: f.score for name, f in factors.items() if not f.missing},
            explanation=" ".join(factors[name].detail for name in FACTORS),
            missing_factors=[name for name in FACTORS if factors[name].missing],
        )
