# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2025-11-14
# Updated: 2026-10-19
# Description: SolarEmbedder
# -----------------------------------------------------------------------------
from typing import Any, Dict, Optional

import httpx
import numpy as np

from config.Config import Config
from embedding.EmbeddingService import EmbeddingService
from pipeline.Outcome import Outcome
from utility.logging_utils import get_class_logger


class SolarEmbedder(EmbeddingService):
    """
    Best-effort embedding client for the Upstage Solar embeddings endpoint.

    One POST {model, input} per item. Transport errors, non-2xx responses
    and malformed payloads come back as an absent Outcome and are logged;
    embed() never raises, so one failing item cannot abort its siblings.
    """

    def __init__(
            self,
            cfg: Config,
            *,
            http_client: Optional[httpx.AsyncClient] = None,
            timeout_seconds: float = 0.0,
            out_dtype: str = "float32",
            logger=None,
    ):
        self.cfg = cfg
        self.url = cfg.embedding_url
        self.model = cfg.embedding_model
        self.out_dtype = out_dtype
        self.logger = logger or get_class_logger(self.__class__)

        if http_client is not None:
            self.client = http_client
        elif timeout_seconds > 0:
            self.client = httpx.AsyncClient(timeout=timeout_seconds)
        else:
            # Keep the httpx transport default timeout
            self.client = httpx.AsyncClient()

        self.logger.info("Solar embedder initialised (model=%s, url=%s, dtype=%s)",
                         self.model, self.url, self.out_dtype)

    def _headers(self) -> Dict[str, str]:
        return {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self.cfg.embedding_api_key}",
        }

    def _to_vector(self, payload: Any) -> np.ndarray:
        """Pull data[0].embedding out of the response body."""
        embedding = payload["data"][0]["embedding"]
        dtype = np.float16 if self.out_dtype == "float16" else np.float32
        arr = np.asarray(embedding, dtype=dtype)
        if arr.ndim != 1 or arr.size == 0:
            raise ValueError(f"expected a non-empty 1-d vector, got shape {arr.shape}")
        return arr

    async def embed(self, text: str) -> Outcome[np.ndarray]:
        body = {"model": self.model, "input": text}

        try:
            resp = await self.client.post(self.url, json=body, headers=self._headers())
        except httpx.HTTPError as e:
            self.logger.error("Error fetching embedding: %s", e)
            return Outcome.absent(f"embedding transport error: {e}")

        if not resp.is_success:
            self.logger.error("Failed to fetch embedding. Status code: %d", resp.status_code)
            return Outcome.absent(f"embedding status {resp.status_code}")

        try:
            vector = self._to_vector(resp.json())
        except (ValueError, KeyError, IndexError, TypeError) as e:
            self.logger.error("Unexpected embedding response format: %s", e)
            return Outcome.absent(f"embedding response malformed: {e}")

        self.logger.debug("Embedding ok (dim=%d, input_chars=%d)", vector.shape[0], len(text))
        return Outcome.of(vector)

    async def aclose(self) -> None:
        await self.client.aclose()
