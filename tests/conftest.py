"""Pytest fixtures and shared test configuration.

Provides reusable fixtures for unit and integration tests.

Fixtures:
    - client_config: Client configuration pointing at a test host
    - backend: In-memory FastAPI knowledge base server
    - asgi_client: KnowledgeBaseClient routed to the backend via ASGITransport
    - title_field, question_field, file_selection: Page form state
    - list_view, answer_view: Recording views
    - results: Collected on_result notifications
    - user: Simulated NiceGUI user (nicegui.testing.user_plugin)
"""

import httpx
import pytest
from fastapi import FastAPI

from src.client.api_client import KnowledgeBaseClient
from src.client.config import ClientConfig
from src.models.schemas import ActionResult
from src.ui.controller import FileSelection
from tests.fakes import FakeField, RecordingAnswerView, RecordingListView, create_backend

pytest_plugins = ["nicegui.testing.user_plugin"]


@pytest.fixture
def client_config(monkeypatch: pytest.MonkeyPatch) -> ClientConfig:
    """Return configuration for a test host with no timeout."""
    monkeypatch.delenv("API_TIMEOUT", raising=False)
    return ClientConfig(api_base_url="http://test")


@pytest.fixture
def backend() -> FastAPI:
    """Create a fresh in-memory knowledge base server."""
    return create_backend()


@pytest.fixture
def asgi_client(backend: FastAPI, client_config: ClientConfig) -> KnowledgeBaseClient:
    """Create an API client that talks to the in-memory server.

    Args:
        backend: The FastAPI app to route requests to.
        client_config: Test configuration.

    Returns:
        KnowledgeBaseClient using ASGITransport.
    """
    return KnowledgeBaseClient(client_config, transport=httpx.ASGITransport(app=backend))


@pytest.fixture
def title_field() -> FakeField:
    return FakeField()


@pytest.fixture
def question_field() -> FakeField:
    return FakeField()


@pytest.fixture
def file_selection() -> FileSelection:
    return FileSelection()


@pytest.fixture
def list_view() -> RecordingListView:
    return RecordingListView()


@pytest.fixture
def answer_view() -> RecordingAnswerView:
    return RecordingAnswerView()


@pytest.fixture
def results() -> list[ActionResult]:
    """Collect results passed to the controller's on_result callback."""
    return []
