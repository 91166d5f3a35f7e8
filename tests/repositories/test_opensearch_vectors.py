"""
Test suite for the OpenSearch vector repository and index manager.

The OpenSearch client and bulk helper are mocked.
"""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from opensearchpy.exceptions import ConnectionError as OSConnectionError

from app.config.indexing.static import resolve_indexing_config
from app.repositories.opensearch.base import VectorStoreError
from app.repositories.opensearch.vectors_repository import bulk_store_vectors, record_to_index_doc
from app.resources.opensearch.index_manager import VECTOR_FIELD_NAME, build_index_body, ensure_vector_index
from app.services.embedder.models import VectorRecord


def _records() -> list[VectorRecord]:
    return [
        VectorRecord(id="chunk_1_0", values=[0.1, 0.2], metadata={"content": "first", "chunkIndex": 0}),
        VectorRecord(id="chunk_1_1", values=[0.3, 0.4], metadata={"content": "second", "chunkIndex": 1}),
    ]


def _indices_client(exists: bool, mapping: dict | None = None) -> MagicMock:
    client = MagicMock()
    client.indices.exists = AsyncMock(return_value=exists)
    client.indices.get_mapping = AsyncMock(return_value=mapping or {})
    client.indices.create = AsyncMock(return_value={"acknowledged": True})
    return client


class TestBulkStoreVectors:
    @pytest.mark.asyncio
    async def test_indexes_records_by_id(self):
        client = MagicMock()
        with patch(
            "app.repositories.opensearch.vectors_repository.async_bulk",
            new=AsyncMock(return_value=(2, [])),
        ) as bulk:
            ids = await bulk_store_vectors("vectors", _records(), client=client)

        assert ids == ["chunk_1_0", "chunk_1_1"]
        actions = bulk.await_args.args[1]
        assert [a["_id"] for a in actions] == ["chunk_1_0", "chunk_1_1"]
        assert all(a["_index"] == "vectors" for a in actions)
        assert actions[0]["_source"][VECTOR_FIELD_NAME] == [0.1, 0.2]

    @pytest.mark.asyncio
    async def test_any_failed_item_raises(self):
        failed = [{"index": {"_id": "chunk_1_1", "error": {"type": "mapper_parsing_exception"}}}]
        with patch(
            "app.repositories.opensearch.vectors_repository.async_bulk",
            new=AsyncMock(return_value=(1, failed)),
        ):
            with pytest.raises(VectorStoreError):
                await bulk_store_vectors("vectors", _records(), client=MagicMock())

    @pytest.mark.asyncio
    async def test_client_error_is_translated(self):
        with patch(
            "app.repositories.opensearch.vectors_repository.async_bulk",
            new=AsyncMock(side_effect=OSConnectionError("N/A", "connection refused", Exception("refused"))),
        ):
            with pytest.raises(VectorStoreError) as exc_info:
                await bulk_store_vectors("vectors", _records(), client=MagicMock())

        assert "refused" not in str(exc_info.value)

    @pytest.mark.asyncio
    async def test_empty_input_skips_request(self):
        with patch("app.repositories.opensearch.vectors_repository.async_bulk", new=AsyncMock()) as bulk:
            assert await bulk_store_vectors("vectors", [], client=MagicMock()) == []

        bulk.assert_not_awaited()

    def test_index_doc_keeps_metadata_and_content(self):
        doc = record_to_index_doc(_records()[0])

        assert doc["vector_id"] == "chunk_1_0"
        assert doc["content"] == "first"
        assert doc["metadata"] == {"content": "first", "chunkIndex": 0}


class TestEnsureVectorIndex:
    @pytest.mark.asyncio
    async def test_creates_missing_index(self):
        client = _indices_client(exists=False)
        config = resolve_indexing_config("cosine_default")

        created = await ensure_vector_index("vectors", 4, config, client=client)

        assert created is True
        body = client.indices.create.await_args.kwargs["body"]
        vector_field = body["mappings"]["properties"][VECTOR_FIELD_NAME]
        assert vector_field["dimension"] == 4
        assert vector_field["method"]["space_type"] == "cosinesimil"

    @pytest.mark.asyncio
    async def test_existing_index_with_same_dimension_is_kept(self):
        mapping = {"vectors": {"mappings": {"properties": {VECTOR_FIELD_NAME: {"dimension": 4}}}}}
        client = _indices_client(exists=True, mapping=mapping)

        created = await ensure_vector_index("vectors", 4, resolve_indexing_config("cosine_default"), client=client)

        assert created is False
        client.indices.create.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_dimension_mismatch_raises_without_dropping_index(self):
        mapping = {"vectors": {"mappings": {"properties": {VECTOR_FIELD_NAME: {"dimension": 8}}}}}
        client = _indices_client(exists=True, mapping=mapping)

        with pytest.raises(VectorStoreError):
            await ensure_vector_index("vectors", 4, resolve_indexing_config("cosine_default"), client=client)

        client.indices.create.assert_not_awaited()
        client.indices.delete.assert_not_called()

    @pytest.mark.asyncio
    async def test_unreachable_cluster_raises_store_error(self):
        client = MagicMock()
        client.indices.exists = AsyncMock(side_effect=OSConnectionError("N/A", "refused", Exception("refused")))

        with pytest.raises(VectorStoreError):
            await ensure_vector_index("vectors", 4, resolve_indexing_config("l2_knn"), client=client)

    @pytest.mark.parametrize(
        ("profile", "space_type"),
        [("cosine_default", "cosinesimil"), ("l2_default", "l2"), ("dot_product_knn", "innerproduct")],
    )
    def test_space_type_follows_similarity(self, profile, space_type):
        body = build_index_body(16, resolve_indexing_config(profile))

        assert body["mappings"]["properties"][VECTOR_FIELD_NAME]["method"]["space_type"] == space_type
        assert body["settings"]["index"]["knn"] is True


class TestClientKwargs:
    def test_auth_only_with_username(self):
        from app.resources.opensearch.client import build_client_kwargs

        base = {"host": "https://search:9200", "use_ssl": True, "verify_certs": True, "timeout": 10}

        assert "http_auth" not in build_client_kwargs({**base, "username": ""})
        kwargs = build_client_kwargs({**base, "username": "admin", "password": "secret"})
        assert kwargs["http_auth"] == ("admin", "secret")
        assert kwargs["hosts"] == ["https://search:9200"]
        assert "ssl_show_warn" not in kwargs
