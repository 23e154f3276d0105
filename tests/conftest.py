from datetime import date

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from talentmatch.core.rate_limit import limiter
from talentmatch.main import app
from talentmatch.schemas.matching import TalentProfile, TalentRequest
from talentmatch.services.matching.engine import MatchingEngine


@pytest.fixture()
def engine():
    return MatchingEngine()


@pytest.fixture()
def make_request():
    """Factory for a remote React/TypeScript/Node.js request, budget 80-120, 12 weeks from 2024-03-01."""

    def _make(**overrides) -> TalentRequest:
        data = {
            "id": "req-1",
            "required_skills": ["React", "TypeScript", "Node.js"],
            "preferred_skills": [],
            "budget": {"min": 80, "max": 120, "currency": "USD"},
            "start_date": date(2024, 3, 1),
            "duration": {"value": 12, "unit": "weeks"},
            "location": "Remote",
            "remote_preference": "remote",
        }
        data.update(overrides)
        return TalentRequest.model_validate(data)

    return _make


@pytest.fixture()
def make_profile():
    """Factory for a candidate that passes every hard filter of ``make_request``."""

    def _make(**overrides) -> TalentProfile:
        data = {
            "id": "profile-1",
            "skills": ["React", "TypeScript", "Node.js"],
            "rate": {"min": 90, "max": 110},
            "location": "New York, US",
            "remote_preference": "remote",
            "availability": [{"start": date(2024, 2, 1), "end": date(2024, 6, 1)}],
            "rating": 4.8,
            "review_count": 15,
        }
        data.update(overrides)
        return TalentProfile.model_validate(data)

    return _make


@pytest_asyncio.fixture()
async def client():
    limiter.enabled = False
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()
    limiter.enabled = True
