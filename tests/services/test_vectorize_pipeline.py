"""
Test suite for the vectorize pipeline.

Uses the in-memory fake embedding client from conftest; no network calls.
"""

import pytest

from app.config.chunking.models import ChunkingConfig
from app.services.vectorize.pipeline import VectorizeError, run_vectorize_pipeline

THREE_CHUNKS = ChunkingConfig(strategy="simple", chunk_size=4)
THREE_CHUNK_TEXT = "aaaabbbbcc"


class TestWithoutChunking:
    @pytest.mark.asyncio
    async def test_one_embedding_and_one_store_call(self, fake_client):
        data = await run_vectorize_pipeline("hello world", None, fake_client)

        assert fake_client.events == [("embed", "hello world"), ("store", 1)]
        assert data.embedding == [11.0, 0.0, 0.0, 0.0]
        assert data.chunks is None
        assert data.vectors_stored == 1

    @pytest.mark.asyncio
    async def test_record_has_single_id_and_text_metadata(self, fake_client):
        await run_vectorize_pipeline("hello world", None, fake_client)

        (record,) = fake_client.stored_batches[0]
        assert record.id.startswith("single_")
        assert record.values == [11.0, 0.0, 0.0, 0.0]
        assert record.metadata == {"content": "hello world", "originalTextLength": 11}

    @pytest.mark.asyncio
    async def test_empty_text_makes_no_calls(self, fake_client):
        with pytest.raises(ValueError):
            await run_vectorize_pipeline("", None, fake_client)

        assert fake_client.events == []

    @pytest.mark.asyncio
    async def test_whitespace_only_text_makes_no_calls(self, fake_client):
        with pytest.raises(ValueError):
            await run_vectorize_pipeline(" " * 500, ChunkingConfig(chunk_size=100, chunk_overlap=10), fake_client)

        assert fake_client.events == []


class TestWithChunking:
    @pytest.mark.asyncio
    async def test_embeds_each_chunk_in_order_then_stores_once(self, fake_client):
        await run_vectorize_pipeline(THREE_CHUNK_TEXT, THREE_CHUNKS, fake_client)

        assert fake_client.events == [
            ("embed", "aaaa"),
            ("embed", "bbbb"),
            ("embed", "cc"),
            ("store", 3),
        ]

    @pytest.mark.asyncio
    async def test_records_carry_chunk_metadata(self, fake_client):
        await run_vectorize_pipeline(THREE_CHUNK_TEXT, THREE_CHUNKS, fake_client)

        records = fake_client.stored_batches[0]
        assert [r.metadata for r in records] == [
            {"content": "aaaa", "chunkIndex": 0, "totalChunks": 3, "originalTextLength": 10},
            {"content": "bbbb", "chunkIndex": 1, "totalChunks": 3, "originalTextLength": 10},
            {"content": "cc", "chunkIndex": 2, "totalChunks": 3, "originalTextLength": 10},
        ]
        assert len({r.id for r in records}) == 3
        assert all(r.id.startswith("chunk_") and r.id.endswith(f"_{i}") for i, r in enumerate(records))

    @pytest.mark.asyncio
    async def test_response_chunks_have_positions(self, fake_client):
        data = await run_vectorize_pipeline(THREE_CHUNK_TEXT, THREE_CHUNKS, fake_client)

        assert data.embedding is None
        assert data.vectors_stored == 3
        assert [c.id for c in data.chunks] == ["chunk_0", "chunk_1", "chunk_2"]
        assert [c.embedding[0] for c in data.chunks] == [4.0, 4.0, 2.0]
        assert [(c.metadata.start_index, c.metadata.end_index) for c in data.chunks] == [(0, 4), (4, 8), (8, 10)]
        assert all(c.metadata.total_chunks == 3 for c in data.chunks)

    @pytest.mark.asyncio
    async def test_short_text_is_one_chunk(self, fake_client):
        config = ChunkingConfig(strategy="recursive", chunk_size=1000, chunk_overlap=200)

        data = await run_vectorize_pipeline("hello world", config, fake_client)

        assert [c.content for c in data.chunks] == ["hello world"]
        assert fake_client.events == [("embed", "hello world"), ("store", 1)]


class TestFailures:
    @pytest.mark.asyncio
    async def test_embedding_failure_on_second_chunk_skips_store(self, fake_client_factory):
        client = fake_client_factory(fail_on_call=1)

        with pytest.raises(VectorizeError):
            await run_vectorize_pipeline(THREE_CHUNK_TEXT, THREE_CHUNKS, client)

        assert client.events == [("embed", "aaaa"), ("embed", "bbbb")]
        assert client.stored_batches == []

    @pytest.mark.asyncio
    async def test_store_failure_aborts_after_all_embeddings(self, fake_client_factory):
        client = fake_client_factory(fail_store=True)

        with pytest.raises(VectorizeError):
            await run_vectorize_pipeline(THREE_CHUNK_TEXT, THREE_CHUNKS, client)

        assert client.embedded_texts == ["aaaa", "bbbb", "cc"]
        assert client.events[-1] == ("store", 3)

    @pytest.mark.asyncio
    async def test_failure_message_does_not_name_the_chunk(self, fake_client_factory):
        client = fake_client_factory(fail_on_call=2)

        with pytest.raises(VectorizeError) as exc_info:
            await run_vectorize_pipeline(THREE_CHUNK_TEXT, THREE_CHUNKS, client)

        assert "2" not in str(exc_info.value)
        assert "cc" not in str(exc_info.value)

    @pytest.mark.asyncio
    async def test_single_text_embedding_failure_skips_store(self, fake_client_factory):
        client = fake_client_factory(fail_on_call=0)

        with pytest.raises(VectorizeError):
            await run_vectorize_pipeline("hello world", None, client)

        assert client.stored_batches == []
        assert client.events == [("embed", "hello world")]
