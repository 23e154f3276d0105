import structlog
from fastapi import APIRouter, Depends, HTTPException, Request

from talentmatch.core.config import Settings, get_settings
from talentmatch.core.dependencies import get_matching_engine
from talentmatch.core.rate_limit import limiter
from talentmatch.schemas.matching import FindMatchesRequest, MatchResponse, MatchWeights
from talentmatch.services.matching.base import MatchValidationError
from talentmatch.services.matching.engine import MatchingEngine

logger = structlog.get_logger()
router = APIRouter(prefix="/matching", tags=["Matching"])


@router.post("/find", response_model=MatchResponse)
@limiter.limit("30/minute")
async def find_matches(
    request: Request,
    body: FindMatchesRequest,
    engine: MatchingEngine = Depends(get_matching_engine),
    settings: Settings = Depends(get_settings),
):
    """
    Rank a candidate pool against a talent request.
    """
    if len(body.candidates) > settings.MATCH_MAX_POOL_SIZE:
        logger.warning(
            "matching_pool_too_large",
            request_id=body.request.id,
            pool_size=len(body.candidates),
            max_pool_size=settings.MATCH_MAX_POOL_SIZE,
        )
        raise HTTPException(
            status_code=413,
            detail=f"Candidate pool exceeds {settings.MATCH_MAX_POOL_SIZE} profiles",
        )

    try:
        matches = engine.find_matches(body.request, body.candidates, body.options)
        weights = engine.resolve_weights(body.request, body.options)
    except MatchValidationError as e:
        raise HTTPException(status_code=422, detail=e.to_dict())

    return MatchResponse(matches=matches, total=len(matches), weights=weights)


@router.get("/weights", response_model=MatchWeights)
async def get_default_weights(engine: MatchingEngine = Depends(get_matching_engine)):
    return engine.weights
