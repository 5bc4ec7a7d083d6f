"""
Test configuration and fixtures for the AccessibilityPro API.

The remote analyzer is never contacted: every test that needs it builds an
AnalyzerClient on top of httpx.MockTransport.
"""
from typing import Generator, List

import httpx
import pytest
from fastapi.testclient import TestClient

from app.features.accessibility.services.client import AnalyzerClient

ANALYZER_BASE_URL = "https://analyzer.test"


@pytest.fixture
def requests_log() -> List[httpx.Request]:
    """Every request the mocked analyzer received, in order."""
    return []


@pytest.fixture
def make_analyzer(requests_log):
    """
    Factory for an AnalyzerClient answered by a mocked analyzer.

    Pass `json` for a JSON body, `content` for a raw body, or `error` to make
    the transport raise instead of answering.
    """
    def factory(json=None, status_code: int = 200, content: bytes = None, error: Exception = None):
        def handler(request: httpx.Request) -> httpx.Response:
            requests_log.append(request)
            if error is not None:
                raise error
            if content is not None:
                return httpx.Response(status_code, content=content)
            return httpx.Response(status_code, json=json)

        return AnalyzerClient(base_url=ANALYZER_BASE_URL, transport=httpx.MockTransport(handler))

    return factory


@pytest.fixture
def sample_payload():
    return {
        "score": 72,
        "issues": [
            {"type": "MISSING_ALT_TEXT", "description": "img missing alt", "element": "<img>"},
            {"type": "LOW_CONTRAST", "description": "Text contrast 2.1:1", "element": "<p class=\"muted\">"},
            {"type": "MISSING_ALT_TEXT", "description": "logo missing alt", "element": "<img src=\"logo.png\">"},
            {"type": "UNKNOWN_CODE", "description": "Something else", "element": "<div>"},
        ],
        "message": "Analysis completed successfully",
    }


@pytest.fixture(scope="session")
def test_app():
    """Create FastAPI test application."""
    from app.main import app

    return app


@pytest.fixture(scope="function")
def client(test_app) -> Generator[TestClient, None, None]:
    """Clean TestClient per test function."""
    with TestClient(test_app) as test_client:
        yield test_client
    test_app.dependency_overrides.clear()
