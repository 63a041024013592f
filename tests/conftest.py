"""Shared fixtures: recorded API payloads and a client wired to a fake transport."""

import json
from pathlib import Path
from unittest.mock import AsyncMock

import pytest

from geckoterminal_client.client import GeckoTerminalClient
from geckoterminal_client.config.value_objects import GeckoTerminalConfig, ValidationMode
from geckoterminal_client.ports.http import HttpResponse

FIXTURES_DIR = Path(__file__).parent / "fixtures"
BASE_URL = "https://api.geckoterminal.com/api/v2"


def load_payload(name: str):
    with open(FIXTURES_DIR / f"{name}.json", encoding="utf-8") as f:
        return json.load(f)


def make_response(body, status_code: int = 200, headers: dict | None = None) -> HttpResponse:
    return HttpResponse(
        status_code=status_code,
        body=body,
        headers=headers or {"Content-Type": "application/json"},
        url=BASE_URL,
    )


@pytest.fixture
def payload():
    """Load a JSON payload from tests/fixtures by name."""
    return load_payload


@pytest.fixture
def http_client():
    """Fake IHttpClient; set ``http_client.get.return_value`` per test."""
    fake = AsyncMock()
    fake.get.return_value = make_response({"data": []})
    return fake


@pytest.fixture
def issues():
    """Collects validation issues reported through the diagnostic callback."""
    return []


@pytest.fixture
def client(http_client, issues):
    return GeckoTerminalClient(
        config=GeckoTerminalConfig(base_url=BASE_URL),
        http_client=http_client,
        on_issue=issues.append,
    )


@pytest.fixture
def strict_client(http_client, issues):
    return GeckoTerminalClient(
        config=GeckoTerminalConfig(base_url=BASE_URL, validation_mode=ValidationMode.STRICT),
        http_client=http_client,
        on_issue=issues.append,
    )


@pytest.fixture
def respond(http_client):
    """Make the fake transport answer with the given body and status."""

    def _respond(body, status_code: int = 200, headers: dict | None = None):
        http_client.get.return_value = make_response(body, status_code, headers)
        return http_client

    return _respond
