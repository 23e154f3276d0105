from datetime import date
from typing import Literal

from pydantic import BaseModel, Field

RemotePreference = Literal["remote", "hybrid", "onsite"]
DurationUnit = Literal["days", "weeks", "months"]
Urgency = Literal["low", "medium", "high", "critical"]
ProjectType = Literal["development", "consulting", "design", "data", "other"]


class BudgetRange(BaseModel):
    min: float
    max: float
    currency: str = "USD"


class RateRange(BaseModel):
    min: float
    max: float


class Duration(BaseModel):
    value: float
    unit: DurationUnit = "weeks"


class AvailabilityWindow(BaseModel):
    start: date
    end: date


class TalentRequest(BaseModel):
    id: str
    required_skills: list[str] = []
    preferred_skills: list[str] = []
    budget: BudgetRange
    start_date: date | None = None
    duration: Duration = Duration(value=0)
    location: str | None = None
    remote_preference: RemotePreference = "remote"
    urgency: Urgency | None = None
    project_type: ProjectType | None = None
    team_size: int | None = None
    industry: str | None = None


class TalentProfile(BaseModel):
    id: str
    skills: list[str] = []
    rate: RateRange
    location: str | None = None
    remote_preference: RemotePreference = "remote"
    availability: list[AvailabilityWindow] | None = None
    rating: float | None = None
    review_count: int = 0
    is_available: bool = True


class MatchWeights(BaseModel):
    """Per-factor weights. Combined as a normalized weighted mean."""

    skills: float = 0.35
    budget: float = 0.20
    availability: float = 0.20
    location: float = 0.15
    reputation: float = 0.10


class MatchOptions(BaseModel):
    limit: int | None = None
    weights: dict[str, float] | None = None
    min_score: float = 0.0


class MatchResult(BaseModel):
    profile_id: str
    score: float
    breakdown: dict[str, float]
    explanation: str
    rank: int = 0
    missing_factors: list[str] = []


class FindMatchesRequest(BaseModel):
    request: TalentRequest
    candidates: list[TalentProfile] = Field(default_factory=list)
    options: MatchOptions | None = None


class MatchResponse(BaseModel):
    matches: list[MatchResult]
    total: int
    weights: MatchWeights
