"""Shared fixtures. The OpenAI client is always faked; tests never hit the network."""

import os

# app.main builds a module level app on import
os.environ.setdefault("OPENAI_API_KEY", "test-key")
os.environ.setdefault("LOG_FILE", "")

from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi.testclient import TestClient

from app.core.config import Settings
from app.core.dependencies import get_rng
from app.llm import OpenAIClient, get_llm
from app.main import create_app
from app.schemas import EvaluateRequest, ScenarioRequest
from app.services import ImageServices, SafetyFilter


class FixedRandom:
    """Stands in for random.Random; every randint returns the same offset"""

    def __init__(self, offset=0):
        self.offset = offset
        self.calls = []

    def randint(self, a, b):
        self.calls.append((a, b))
        return self.offset


@pytest.fixture
def settings():
    return Settings(OPENAI_API_KEY="test-key", LOG_FILE="")


@pytest.fixture
def fake_llm():
    llm = MagicMock(spec=OpenAIClient)
    llm.generate_json = AsyncMock(return_value={})
    llm.generate_image = AsyncMock(return_value="https://images.example.com/scene.png")
    return llm


@pytest.fixture
def fixed_rng():
    return FixedRandom(0)


@pytest.fixture
def safety_filter(settings):
    return SafetyFilter.from_settings(settings)


@pytest.fixture
def images(fake_llm):
    return ImageServices(fake_llm)


@pytest.fixture
def app(settings, fake_llm, fixed_rng):
    app = create_app(settings)
    app.dependency_overrides[get_llm] = lambda: fake_llm
    app.dependency_overrides[get_rng] = lambda: fixed_rng
    return app


@pytest.fixture
def client(app):
    return TestClient(app)


@pytest.fixture
def scenario_request():
    return ScenarioRequest(
        month="October",
        round=3,
        stats={"learningScore": 55, "likabilityScore": 48, "studentsRemaining": 20, "classSize": 22},
        usedScenarioIds=["scenario-old-1", "lab-disaster"],
    )


@pytest.fixture
def option_request():
    return EvaluateRequest(
        scenarioId="lab-disaster",
        month="October",
        round=3,
        classSize=20,
        stats={"learningScore": 55, "likabilityScore": 48, "studentsRemaining": 20},
        choice={"type": "option", "optionId": "opt-2"},
    )


@pytest.fixture
def make_custom_request():
    def _make(text, class_size=20):
        return EvaluateRequest(
            scenarioId="phone-chaos",
            month="November",
            round=4,
            classSize=class_size,
            stats={},
            choice={"type": "custom", "customText": text},
        )

    return _make
