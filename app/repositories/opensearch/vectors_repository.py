"""
Bulk-write vector records into the OpenSearch index. The record id is the document _id.
The write is all-or-nothing from the caller's view: any failed item raises VectorStoreError.
"""

from typing import Any

from opensearchpy import AsyncOpenSearch
from opensearchpy.exceptions import OpenSearchException
from opensearchpy.helpers import async_bulk

from app.config.logging import get_logger
from app.repositories.opensearch.base import VectorStoreError, translate_opensearch_error
from app.resources.opensearch.client import get_opensearch_client
from app.resources.opensearch.index_manager import VECTOR_FIELD_NAME
from app.services.embedder.models import VectorRecord

logger = get_logger(__name__)


def record_to_index_doc(record: VectorRecord) -> dict[str, Any]:
    """Map one vector record to its OpenSearch document."""
    return {
        VECTOR_FIELD_NAME: record.values,
        "vector_id": record.id,
        "content": record.metadata.get("content", ""),
        "metadata": record.metadata,
    }


def _build_actions(index_name: str, records: list[VectorRecord]) -> list[dict[str, Any]]:
    return [
        {"_op_type": "index", "_index": index_name, "_id": r.id, "_source": record_to_index_doc(r)}
        for r in records
    ]


async def bulk_store_vectors(
    index_name: str,
    records: list[VectorRecord],
    *,
    client: AsyncOpenSearch | None = None,
) -> list[str]:
    """Index all records in one bulk request. Returns the stored ids in input order."""
    if not records:
        return []
    if client is None:
        client = get_opensearch_client()

    logger.info("Bulk indexing starting", extra={"index_name": index_name, "records_count": len(records)})
    try:
        success, failed = await async_bulk(
            client,
            _build_actions(index_name, records),
            raise_on_error=False,
            raise_on_exception=False,
            request_timeout=60,
        )
    except OpenSearchException as e:
        raise translate_opensearch_error(e, "bulk index vectors") from e

    if failed:
        failed_ids = [item.get("index", {}).get("_id", "unknown") for item in failed]
        logger.error(
            "Bulk index had failures",
            extra={"index_name": index_name, "success": success, "failed_ids": failed_ids[:10]},
        )
        raise VectorStoreError(f"{len(failed)} of {len(records)} vectors failed to index")

    logger.info("Bulk indexing completed", extra={"index_name": index_name, "success": success})
    return [r.id for r in records]
