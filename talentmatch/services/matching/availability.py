"""Calendar overlap between the requested engagement and the candidate's availability."""

from datetime import date

from talentmatch.schemas.matching import AvailabilityWindow, Duration
from talentmatch.services.matching.base import FactorScore, clamp

DAYS_PER_UNIT = {
    "days": 1,
    "weeks": 7,
    "months": 30,
}


def duration_in_days(duration: Duration) -> float:
    return duration.value * DAYS_PER_UNIT[duration.unit]


def _merge(windows: list[AvailabilityWindow]) -> list[tuple[int, int]]:
    """Merge windows into disjoint half-open day ranges.

    A window's end date is the last available day, so it maps to end + 1.
    """
    spans = sorted((w.start.toordinal(), w.end.toordinal() + 1) for w in windows)
    merged: list[tuple[int, int]] = []
    for start, end in spans:
        if merged and start <= merged[-1][1]:
            merged[-1] = (merged[-1][0], max(merged[-1][1], end))
        else:
            merged.append((start, end))
    return merged


def score_availability(
    start_date: date | None,
    duration: Duration,
    windows: list[AvailabilityWindow] | None,
) -> FactorScore:
    """
    Score how much of [start_date, start_date + duration) the candidate covers.

    Returns a missing score when either side gives no calendar data.
    """
    if start_date is None:
        return FactorScore(score=None, detail="No start date requested, availability not scored.")
    if windows is None:
        return FactorScore(score=None, detail="Candidate availability is unknown.")

    days = duration_in_days(duration)
    spans = _merge(windows)
    start = start_date.toordinal()

    if days == 0:
        available = any(lo <= start < hi for lo, hi in spans)
        if available:
            return FactorScore(score=1.0, detail=f"Available on {start_date.isoformat()}.")
        return FactorScore(score=0.0, detail=f"Not available on {start_date.isoformat()}.")

    end = start + days
    covered = sum(max(0.0, min(hi, end) - max(lo, start)) for lo, hi in spans)
    ratio = clamp(covered / days)

    if ratio == 1:
        detail = f"Available for the full {days:g}-day engagement from {start_date.isoformat()}."
    elif ratio == 0:
        detail = f"No availability during the {days:g}-day engagement from {start_date.isoformat()}."
    else:
        detail = f"Available for {ratio:.0%} of the {days:g}-day engagement from {start_date.isoformat()}."
    return FactorScore(score=ratio, detail=detail)
