"""Shared test fixtures for SpamGuard AI Engine tests."""
import pytest
from fastapi.testclient import TestClient

from src.api.dependencies import get_handler
from src.config.settings import Settings
from src.engine.handler import SpamDetectionHandler
from src.llm.base import BaseClassificationProvider, BaseExplanationProvider
from src.llm.result import Ok
from src.llm.schemas import SpamClassification


class StubClassifier(BaseClassificationProvider):
    """Classification provider returning a canned outcome and recording calls."""

    def __init__(self, outcome=None):
        self.outcome = outcome or Ok(SpamClassification(classification="spam", confidence=97.5))
        self.calls = []

    async def classify(self, text):
        self.calls.append(text)
        return self.outcome

    @property
    def provider_name(self) -> str:
        return "stub_classifier"


class StubExplainer(BaseExplanationProvider):
    """Explanation provider returning a canned outcome and recording calls."""

    def __init__(self, outcome=None):
        self.outcome = outcome or Ok("Contains prize claim language and a premium rate number.")
        self.calls = []

    async def explain(self, text):
        self.calls.append(text)
        return self.outcome

    @property
    def provider_name(self) -> str:
        return "stub_explainer"


@pytest.fixture
def test_settings() -> Settings:
    """Settings with a gateway key and no .env influence."""
    return Settings(_env_file=None, ai_gateway_api_key="test-key")


@pytest.fixture
def unconfigured_settings() -> Settings:
    """Settings without a gateway key."""
    return Settings(_env_file=None, ai_gateway_api_key=None)


@pytest.fixture
def stub_classifier() -> StubClassifier:
    return StubClassifier()


@pytest.fixture
def stub_explainer() -> StubExplainer:
    return StubExplainer()


@pytest.fixture
def handler(test_settings, stub_classifier, stub_explainer) -> SpamDetectionHandler:
    """Handler wired to stub providers."""
    return SpamDetectionHandler(
        settings=test_settings,
        classifier=stub_classifier,
        explainer=stub_explainer,
    )


@pytest.fixture
def client(handler):
    """Test client whose endpoint uses the stubbed handler."""
    from src.main import app

    app.dependency_overrides[get_handler] = lambda: handler
    yield TestClient(app)
    app.dependency_overrides.clear()
