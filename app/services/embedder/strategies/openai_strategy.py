"""OpenAI Embedding API strategy."""

from openai import AsyncOpenAI, OpenAIError

from app.config.embedding.models import EmbeddingConfig
from app.config.settings import get_settings
from app.services.embedder.base import BaseEmbeddingStrategy, EmbeddingProviderError


class OpenAIEmbeddingStrategy(BaseEmbeddingStrategy):
    """
    OpenAI Embeddings API (text-embedding-3-small, text-embedding-3-large, ada-002).
    API key from config.api_key or settings.openai_api_key.
    """

    name = "openai"

    def __init__(self) -> None:
        self._client: AsyncOpenAI | None = None
        self._api_key: str | None = None

    def _get_client(self, api_key: str) -> AsyncOpenAI:
        if self._client is None or self._api_key != api_key:
            self._client = AsyncOpenAI(api_key=api_key)
            self._api_key = api_key
        return self._client

    async def embed(self, texts: list[str], config: EmbeddingConfig) -> list[list[float]]:
        if not texts:
            return []
        api_key = config.api_key or get_settings().openai_api_key or None
        if not api_key:
            raise EmbeddingProviderError("OpenAI API key is required (set in config or OPENAI_API_KEY)")
        client = self._get_client(api_key)
        kwargs = {}
        if config.dimensions is not None:
            kwargs["dimensions"] = config.dimensions
        try:
            response = await client.embeddings.create(model=config.model, input=texts, **kwargs)
        except OpenAIError as e:
            raise EmbeddingProviderError(f"OpenAI embeddings request failed: {type(e).__name__}", cause=e) from e
        by_index = {e.index: e.embedding for e in response.data}
        if len(by_index) != len(texts):
            raise EmbeddingProviderError(
                f"OpenAI returned {len(by_index)} embeddings for {len(texts)} inputs"
            )
        return [by_index[i] for i in range(len(texts))]
