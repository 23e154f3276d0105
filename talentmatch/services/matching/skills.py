"""Skill matching: required skills gate the candidate, preferred skills add a bonus."""

from talentmatch.services.matching.base import FactorScore

REQUIRED_SHARE = 0.8
PREFERRED_SHARE = 0.2


def _key(name: str) -> str:
    return name.strip().lower()


def _unique(names: list[str]) -> list[str]:
    """Drop blanks and case-insensitive duplicates, keeping the first spelling."""
    seen = set()
    result = []
    for name in names:
        key = _key(name)
        if not key or key in seen:
            continue
        seen.add(key)
        result.append(name.strip())
    return result


def missing_required_skills(required: list[str], candidate_skills: list[str]) -> list[str]:
    """Return the required skills the candidate does not list (case-insensitive)."""
    have = {_key(s) for s in candidate_skills}
    return [s for s in _unique(required) if _key(s) not in have]


def _coverage(wanted: list[str], have: set[str]) -> tuple[float, list[str]]:
    if not wanted:
        return 1.0, []
    matched = [s for s in wanted if _key(s) in have]
    return len(matched) / len(wanted), matched


def score_skills(
    required: list[str],
    preferred: list[str],
    candidate_skills: list[str],
) -> FactorScore:
    """
    Score skill compatibility.

    Required coverage contributes up to 0.8, preferred coverage up to 0.2.
    An empty list counts as fully covered.
    """
    have = {_key(s) for s in candidate_skills}
    required = _unique(required)
    preferred = _unique(preferred)

    required_coverage, required_hits = _coverage(required, have)
    preferred_coverage, preferred_hits = _coverage(preferred, have)

    score = REQUIRED_SHARE * required_coverage + PREFERRED_SHARE * preferred_coverage

    if not required:
        detail = "No required skills specified"
    elif len(required_hits) == len(required):
        detail = f"Has all {len(required)} required skills ({', '.join(required)})"
    else:
        detail = f"Has {len(required_hits)} of {len(required)} required skills"

    if preferred:
        detail += f"; {len(preferred_hits)} of {len(preferred)} preferred skills"
        if preferred_hits:
            detail += f" ({', '.join(preferred_hits)})"

    return FactorScore(score=score, detail=detail + ".")
