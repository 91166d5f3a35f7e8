"""
Create the OpenSearch k-NN index that holds vector records.
Similarity and HNSW parameters come from the indexing profile; dimension from the first vector stored.
"""

from typing import Any

from opensearchpy import AsyncOpenSearch
from opensearchpy.exceptions import OpenSearchException, RequestError

from app.config.indexing.models import IndexingConfig
from app.config.logging import get_logger
from app.repositories.opensearch.base import VectorStoreError, translate_opensearch_error
from app.resources.opensearch.client import get_opensearch_client

logger = get_logger(__name__)

SIMILARITY_TO_SPACE_TYPE = {
    "cosine": "cosinesimil",
    "l2": "l2",
    "dot_product": "innerproduct",
}

VECTOR_FIELD_NAME = "vector"


def build_index_body(dimension: int, config: IndexingConfig) -> dict[str, Any]:
    """Index settings and mappings: one knn_vector field plus record id, content and opaque metadata."""
    hnsw = config.hnsw_config
    return {
        "settings": {
            "index": {
                "knn": True,
                "number_of_shards": config.index_settings.get("number_of_shards", 1),
                "number_of_replicas": config.index_settings.get("number_of_replicas", 1),
            }
        },
        "mappings": {
            "properties": {
                VECTOR_FIELD_NAME: {
                    "type": "knn_vector",
                    "dimension": dimension,
                    "method": {
                        "name": "hnsw",
                        "space_type": SIMILARITY_TO_SPACE_TYPE[config.similarity],
                        "engine": config.engine,
                        "parameters": {"ef_construction": hnsw.ef_construction, "m": hnsw.m},
                    },
                },
                "vector_id": {"type": "keyword"},
                "content": {"type": "text"},
                "metadata": {"type": "object", "enabled": False},
            }
        },
    }


async def _existing_dimension(client: AsyncOpenSearch, index_name: str) -> int | None:
    mapping = await client.indices.get_mapping(index=index_name)
    properties = mapping.get(index_name, {}).get("mappings", {}).get("properties", {})
    return properties.get(VECTOR_FIELD_NAME, {}).get("dimension")


async def ensure_vector_index(
    index_name: str,
    dimension: int,
    config: IndexingConfig,
    client: AsyncOpenSearch | None = None,
) -> bool:
    """
    Create the index if it does not exist. Returns True if it was created.
    An existing index with a different vector dimension is never dropped; VectorStoreError is raised.
    """
    if client is None:
        client = get_opensearch_client()
    try:
        if await client.indices.exists(index=index_name):
            existing = await _existing_dimension(client, index_name)
            if existing is not None and existing != dimension:
                logger.error(
                    "Vector dimension does not match index",
                    extra={"index_name": index_name, "index_dimension": existing, "vector_dimension": dimension},
                )
                raise VectorStoreError(
                    f"Index {index_name!r} expects dimension {existing}, got {dimension}"
                )
            return False
        await client.indices.create(index=index_name, body=build_index_body(dimension, config))
    except RequestError as e:
        # Another request created the index between exists() and create()
        if getattr(e, "error", None) == "resource_already_exists_exception":
            return False
        raise translate_opensearch_error(e, "create index") from e
    except OpenSearchException as e:
        raise translate_opensearch_error(e, "ensure index") from e
    logger.info(
        "Index created",
        extra={"index_name": index_name, "dimension": dimension, "similarity": config.similarity},
    )
    return True
