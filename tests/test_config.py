"""Tests for settings, the engine dependency and startup checks."""

import pytest

from talentmatch import main
from talentmatch.core.config import Settings
from talentmatch.core.dependencies import default_weights, get_matching_engine
from talentmatch.schemas.matching import MatchWeights
from talentmatch.services.matching.base import MatchValidationError


def test_default_weights_match_schema_defaults():
    assert default_weights(Settings()) == MatchWeights()


def test_weights_from_environment(monkeypatch):
    monkeypatch.setenv("MATCH_WEIGHT_SKILLS", "0.5")
    monkeypatch.setenv("MATCH_DEFAULT_LIMIT", "10")
    settings = Settings()

    engine = get_matching_engine(settings)
    assert engine.weights.skills == pytest.approx(0.5)
    assert engine.default_limit == 10


def test_engines_are_independent():
    settings = Settings()
    assert get_matching_engine(settings) is not get_matching_engine(settings)


@pytest.mark.asyncio
async def test_startup_succeeds_with_valid_settings(monkeypatch):
    monkeypatch.setattr(main, "settings", Settings())
    async with main.lifespan(main.app):
        pass


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "overrides, field",
    [
        ({"MATCH_WEIGHT_SKILLS": -1}, "weights.skills"),
        ({"MATCH_DEFAULT_LIMIT": 0}, "default_limit"),
    ],
)
async def test_startup_fails_on_bad_matching_settings(monkeypatch, overrides, field):
    monkeypatch.setattr(main, "settings", Settings(**overrides))
    with pytest.raises(MatchValidationError) as exc:
        async with main.lifespan(main.app):
            pass
    assert exc.value.field == field
