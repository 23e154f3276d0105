"""Location and remote-preference compatibility."""

from talentmatch.services.matching.base import FactorScore

# (requested preference, candidate preference) -> base score
PREFERENCE_SCORES = {
    ("remote", "remote"): 1.0,
    ("remote", "hybrid"): 0.7,
    ("remote", "onsite"): 0.2,
    ("hybrid", "remote"): 0.7,
    ("hybrid", "hybrid"): 0.9,
    ("hybrid", "onsite"): 0.7,
    ("onsite", "remote"): 0.3,
    ("onsite", "hybrid"): 0.7,
    ("onsite", "onsite"): 0.8,
}

SAME_CITY_BONUS = 0.2


def city_of(location: str | None) -> str:
    """Lower-cased city part of a 'City, Country' style location string."""
    if not location:
        return ""
    return location.split(",")[0].strip().lower()


def score_location(
    requested_location: str | None,
    requested_preference: str,
    candidate_location: str | None,
    candidate_preference: str,
) -> FactorScore:
    score = PREFERENCE_SCORES[(requested_preference, candidate_preference)]

    if requested_preference == candidate_preference:
        detail = f"Both sides prefer {requested_preference} work"
    else:
        detail = f"Request prefers {requested_preference} work, candidate prefers {candidate_preference}"

    # City only matters when someone has to show up in person
    if requested_preference != "remote":
        requested_city = city_of(requested_location)
        if requested_city and requested_city == city_of(candidate_location):
            score = min(1.0, score + SAME_CITY_BONUS)
            detail += f", both in {candidate_location.split(',')[0].strip()}"

    return FactorScore(score=score, detail=detail + ".")
