"""Test configuration and fixtures for the MCP RAG tests.

Fixtures are grouped by concern:
- Constants and test data
- Stub document stores and completion models
- OpenAI completion response mocks
- Adapter and orchestrator factories
"""

import json
from collections.abc import Sequence
from contextlib import contextmanager
from pathlib import Path
from unittest.mock import AsyncMock, Mock, patch

import httpx
import pytest
from openai import AsyncOpenAI

from mcprag import (
    ContextCollector,
    DocumentChunk,
    InMemoryDocumentStore,
    OpenAICompletionAdapter,
    Orchestrator,
    Retriever,
    SQLiteDocumentStore,
)

PROJECT_ROOT = Path(__file__).resolve().parent.parent
TEST_DATA_DIR = PROJECT_ROOT / "tests" / "data"


class TestConstants:
    """Shared test values."""

    TEST_API_KEY = "test-key"
    TEST_BASE_URL = "https://llm.test/v1"
    TEST_MODEL = "test-instruct-model"
    TEST_TEMPERATURE = 0.2


class StubDocumentStore:
    """Document store returning a fixed list and recording queries."""

    def __init__(self, documents: Sequence[str] | None = ()) -> None:
        self.documents = documents
        self.queries: list[str] = []

    async def search(self, query: str) -> Sequence[str] | None:
        self.queries.append(query)
        return self.documents


class FailingDocumentStore:
    """Document store whose search always raises."""

    def __init__(self, error: Exception) -> None:
        self.error = error

    async def search(self, query: str) -> list[str]:
        raise self.error


class StubCompletionModel:
    """Completion model returning a fixed answer and recording prompts."""

    def __init__(self, answer: str = "Stub answer") -> None:
        self.answer = answer
        self.prompts: list[str] = []

    async def complete(self, prompt: str) -> str:
        self.prompts.append(prompt)
        return self.answer


def create_mock_completion_response(texts: list[str | None]) -> Mock:
    """Create a mock OpenAI completions response.

    Args:
        texts: Text of each choice, in order.

    Returns:
        Mock object representing an OpenAI completions API response.
    """
    mock_response = Mock()
    mock_response.choices = [Mock(text=text) for text in texts]
    return mock_response


def completion_payload(texts: list[str]) -> dict:
    """Build a JSON completions body as the remote endpoint would return it."""
    return {
        "id": "cmpl-test",
        "object": "text_completion",
        "created": 0,
        "model": TestConstants.TEST_MODEL,
        "choices": [
            {"index": i, "text": text, "finish_reason": "stop", "logprobs": None}
            for i, text in enumerate(texts)
        ],
    }


@pytest.fixture
def stub_store_factory():
    """Factory for stores returning the given documents."""

    def _create_store(documents: Sequence[str] | None = ()) -> StubDocumentStore:
        return StubDocumentStore(documents)

    return _create_store


@pytest.fixture
def stub_model():
    return StubCompletionModel()


@pytest.fixture
def completion_adapter():
    """Adapter with a test key and fixed model/temperature."""
    return OpenAICompletionAdapter(
        api_key=TestConstants.TEST_API_KEY,
        model=TestConstants.TEST_MODEL,
        temperature=TestConstants.TEST_TEMPERATURE,
    )


@pytest.fixture
def completion_mock_factory():
    """Factory patching an adapter's ``client.completions.create``."""

    @contextmanager
    def _mock_completions(  # noqa: ANN202
        adapter, texts: list[str | None] | None = None, side_effect=None
    ):
        with patch.object(
            adapter.client.completions, "create", new_callable=AsyncMock
        ) as mock_create:
            if side_effect is not None:
                mock_create.side_effect = side_effect
            else:
                mock_create.return_value = create_mock_completion_response(
                    texts if texts is not None else ["Test response"]
                )
            yield mock_create

    return _mock_completions


@pytest.fixture
def transport_adapter_factory():
    """Factory for adapters whose HTTP traffic goes to an in-process handler.

    The handler receives each ``httpx.Request`` and returns an
    ``httpx.Response``; captured requests are exposed on ``adapter.requests``.
    """

    def _create_adapter(handler) -> OpenAICompletionAdapter:  # noqa: ANN001
        requests: list[httpx.Request] = []

        def _record(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return handler(request)

        client = AsyncOpenAI(
            api_key=TestConstants.TEST_API_KEY,
            base_url=TestConstants.TEST_BASE_URL,
            max_retries=0,
            http_client=httpx.AsyncClient(transport=httpx.MockTransport(_record)),
        )
        adapter = OpenAICompletionAdapter(
            model=TestConstants.TEST_MODEL,
            temperature=TestConstants.TEST_TEMPERATURE,
            client=client,
        )
        adapter.requests = requests
        return adapter

    return _create_adapter


@pytest.fixture
def json_response():
    """Build an ``httpx.Response`` carrying a JSON body."""

    def _create_response(body: dict, status_code: int = 200) -> httpx.Response:
        return httpx.Response(
            status_code,
            content=json.dumps(body).encode("utf-8"),
            headers={"content-type": "application/json"},
        )

    return _create_response


@pytest.fixture
def orchestrator_factory(stub_model):
    """Factory wiring an orchestrator around a store and model."""

    def _create_orchestrator(store, model=None) -> Orchestrator:  # noqa: ANN001
        return Orchestrator(
            collector=ContextCollector(),
            retriever=Retriever(store),
            model=model if model is not None else stub_model,
        )

    return _create_orchestrator


@pytest.fixture
def sample_documents():
    return [
        "Check the valve seal for leaks before restarting the line.",
        "Pump bearings need fresh grease every 2000 operating hours.",
        "Valve actuators should be exercised quarterly.",
        "Compressor filters are replaced twice a year.",
    ]


@pytest.fixture
def memory_store(sample_documents):
    return InMemoryDocumentStore(sample_documents, limit=10)


@pytest.fixture
def sqlite_store(tmp_path, sample_documents):
    """SQLite store in a temporary directory preloaded with sample documents."""
    store = SQLiteDocumentStore(db_path=tmp_path / "documents.db", limit=10)
    store.add_documents(
        DocumentChunk(content=text, metadata={"source": "sample.txt", "chunk_id": i})
        for i, text in enumerate(sample_documents)
    )
    return store


@pytest.fixture(scope="session")
def sample_document_path():
    """Path to the pump maintenance guide used by ingestion tests."""
    return TEST_DATA_DIR / "pump_maintenance.txt"
