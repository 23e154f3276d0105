from fastapi import Depends

from talentmatch.core.config import Settings, get_settings
from talentmatch.schemas.matching import MatchWeights
from talentmatch.services.matching.engine import MatchingEngine


def default_weights(settings: Settings) -> MatchWeights:
    return MatchWeights(
        skills=settings.MATCH_WEIGHT_SKILLS,
        budget=settings.MATCH_WEIGHT_BUDGET,
        availability=settings.MATCH_WEIGHT_AVAILABILITY,
        location=settings.MATCH_WEIGHT_LOCATION,
        reputation=settings.MATCH_WEIGHT_REPUTATION,
    )


def get_matching_engine(settings: Settings = Depends(get_settings)) -> MatchingEngine:
    """Build the engine per request from settings. Override in tests via dependency_overrides."""
    return MatchingEngine(
        weights=default_weights(settings),
        default_limit=settings.MATCH_DEFAULT_LIMIT,
    )
