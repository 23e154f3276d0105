"""Budget fit between the requester's budget band and the candidate's rate band."""

from talentmatch.schemas.matching import BudgetRange, RateRange
from talentmatch.services.matching.base import FactorScore, clamp, format_amount

# Maximum share of the score lost when the rate band sits at the edge of the budget
CENTERING_PENALTY = 0.1


def exceeds_budget(budget: BudgetRange, rate: RateRange) -> bool:
    """True when even the candidate's cheapest rate is above the budget ceiling."""
    return rate.min > budget.max


def _coverage(budget: BudgetRange, rate: RateRange) -> float:
    width = rate.max - rate.min
    if width == 0:
        return 1.0 if budget.min <= rate.min <= budget.max else 0.0
    overlap = min(budget.max, rate.max) - max(budget.min, rate.min)
    return clamp(overlap / width)


def _centering_offset(budget: BudgetRange, rate: RateRange) -> float:
    """Distance between band midpoints relative to the budget half-width (0-1)."""
    offset = abs((rate.min + rate.max) / 2 - (budget.min + budget.max) / 2)
    half_width = (budget.max - budget.min) / 2
    if half_width == 0:
        return 0.0 if offset == 0 else 1.0
    return clamp(offset / half_width)


def score_budget(budget: BudgetRange, rate: RateRange) -> FactorScore:
    rate_text = f"{format_amount(rate.min)}-{format_amount(rate.max)}"
    budget_text = f"{format_amount(budget.min)}-{format_amount(budget.max)} {budget.currency}"

    coverage = _coverage(budget, rate)
    if coverage == 0:
        return FactorScore(score=0.0, detail=f"Rate {rate_text} falls outside the {budget_text} budget.")

    score = coverage * (1 - CENTERING_PENALTY * _centering_offset(budget, rate))

    if coverage == 1:
        detail = f"Rate {rate_text} sits inside the {budget_text} budget."
    else:
        detail = f"Rate {rate_text} partly overlaps the {budget_text} budget ({coverage:.0%} of the band)."
    return FactorScore(score=score, detail=detail)
