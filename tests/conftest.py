"""
Shared test fixtures.

Provides: a fake embedding client that records every call, and a TestClient wired to it.
"""

import pytest
from fastapi.testclient import TestClient

from app.main import app
from app.repositories.opensearch.base import VectorStoreError
from app.services.embedder.base import EmbeddingProviderError
from app.services.embedder.client import BaseEmbeddingClient, get_embedding_client
from app.services.embedder.models import EmbeddingResult, StoreResult, VectorRecord


class FakeEmbeddingClient(BaseEmbeddingClient):
    """
    In-memory embedding client. Vectors are [len(text), 0.0, ...].
    fail_on_call=n makes the (n+1)-th create_vectors call raise; fail_store makes store_vectors raise.
    """

    def __init__(self, dimension: int = 4, fail_on_call: int | None = None, fail_store: bool = False):
        self.dimension = dimension
        self.fail_on_call = fail_on_call
        self.fail_store = fail_store
        self.embedded_texts: list[str] = []
        self.stored_batches: list[list[VectorRecord]] = []
        self.events: list[tuple[str, object]] = []

    async def create_vectors(self, text: str) -> EmbeddingResult:
        self.events.append(("embed", text))
        if self.fail_on_call is not None and len(self.embedded_texts) == self.fail_on_call:
            raise EmbeddingProviderError("provider unavailable")
        self.embedded_texts.append(text)
        return EmbeddingResult(embeddings=[float(len(text))] + [0.0] * (self.dimension - 1))

    async def store_vectors(self, vectors: list[VectorRecord]) -> StoreResult:
        self.events.append(("store", len(vectors)))
        if self.fail_store:
            raise VectorStoreError("index unavailable")
        self.stored_batches.append(list(vectors))
        return StoreResult(index_name="test-vectors", count=len(vectors), ids=[v.id for v in vectors])


@pytest.fixture
def fake_client() -> FakeEmbeddingClient:
    return FakeEmbeddingClient()


@pytest.fixture
def api_client(fake_client: FakeEmbeddingClient):
    """TestClient with the embedding client dependency replaced by the fake."""
    app.dependency_overrides[get_embedding_client] = lambda: fake_client
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def sample_text() -> str:
    return (
        "This is a sample document with multiple paragraphs.\n"
        "It contains various types of content that we want to split into chunks.\n\n"
        "The first paragraph talks about the importance of text chunking in natural language processing.\n"
        "When working with large documents, it's essential to break them down into manageable pieces.\n\n"
        "The second paragraph discusses different strategies for text splitting.\n"
        "Length-based splitting is one of the most common approaches.\n"
        "It ensures that each chunk doesn't exceed a specified size limit.\n\n"
        "The third paragraph covers the benefits of using a library for text splitting.\n"
        "Well-tested implementations handle separators and overlap consistently.\n"
        "They support various splitting strategies and customization options.\n"
    )


@pytest.fixture
def fake_client_factory():
    """Build fakes with failure injection, e.g. fake_client_factory(fail_on_call=1)."""
    return FakeEmbeddingClient
