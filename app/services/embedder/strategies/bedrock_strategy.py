"""Amazon Bedrock embedding strategy."""

import asyncio
import json
from typing import Any

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from app.config.embedding.models import EmbeddingConfig
from app.config.settings import get_settings
from app.services.embedder.base import BaseEmbeddingStrategy, EmbeddingProviderError


def _extract_embedding(payload: dict[str, Any]) -> list[float] | None:
    """Titan v1 returns 'embedding'; v2 may return 'embeddingsByType' instead."""
    emb = payload.get("embedding")
    if emb is None:
        by_type = payload.get("embeddingsByType") or {}
        emb = by_type.get("float")
    if not emb:
        return None
    return [float(x) for x in emb]


class BedrockEmbeddingStrategy(BaseEmbeddingStrategy):
    """
    Amazon Bedrock embeddings (amazon.titan-embed-text-v1, amazon.titan-embed-text-v2:0).
    Uses IAM credentials from the environment. Region from config.region or settings.aws_region.
    boto3 is blocking, so each invoke_model call runs in a worker thread.
    """

    name = "bedrock"

    def __init__(self) -> None:
        self._client = None
        self._region: str | None = None

    def _get_client(self, region: str | None):
        if self._client is None or self._region != region:
            self._client = boto3.client("bedrock-runtime", region_name=region)
            self._region = region
        return self._client

    def _invoke(self, client, text: str, config: EmbeddingConfig) -> list[float]:
        body: dict[str, Any] = {"inputText": text}
        if config.dimensions is not None:
            body["dimensions"] = config.dimensions
        try:
            response = client.invoke_model(
                modelId=config.model,
                contentType="application/json",
                accept="application/json",
                body=json.dumps(body),
            )
            payload = json.loads(response["body"].read().decode("utf-8"))
        except (ClientError, BotoCoreError) as e:
            raise EmbeddingProviderError(f"Bedrock invoke_model failed: {type(e).__name__}", cause=e) from e
        emb = _extract_embedding(payload)
        if emb is None:
            raise EmbeddingProviderError("Bedrock response contained no embedding")
        return emb

    async def embed(self, texts: list[str], config: EmbeddingConfig) -> list[list[float]]:
        if not texts:
            return []
        client = self._get_client(config.region or get_settings().aws_region or None)
        results: list[list[float]] = []
        for text in texts:
            results.append(await asyncio.to_thread(self._invoke, client, text, config))
        return results
