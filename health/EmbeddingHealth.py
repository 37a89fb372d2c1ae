# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2025-11-06
# Updated: 2026-10-19
# Description: EmbeddingHealth
# -----------------------------------------------------------------------------
import time
import logging
from typing import Optional

from embedding.EmbeddingService import EmbeddingService
from utility.logging_utils import get_logger


class EmbeddingHealth:
    """
    Smoke test for the embedding endpoint.

    Verifies:
      - The embedding call returns a vector
      - The vector dimension matches the expected dimension (if provided)
    """

    def __init__(
        self,
        embedder: EmbeddingService,
        expected_dim: Optional[int] = None,
        logger: Optional[logging.Logger] = None,
    ):
        self.embedder = embedder
        self.expected_dim = expected_dim
        self.logger = logger or get_logger(__name__)
        self.last_dim: Optional[int] = None

    async def run(self) -> bool:
        test_text = "Embedding healthcheck"
        self.logger.info("Running embedding healthcheck")

        start = time.time()
        outcome = await self.embedder.embed(test_text)
        elapsed_ms = (time.time() - start) * 1000.0

        if outcome.is_absent:
            self.logger.error("Embedding healthcheck FAILED: %s", outcome.reason)
            return False

        dim = int(outcome.value.shape[0])
        self.last_dim = dim
        self.logger.info("Embedding call succeeded in %.1f ms. Returned dimension: %d", elapsed_ms, dim)

        if self.expected_dim is not None and dim != self.expected_dim:
            self.logger.warning("Dimension mismatch: expected %d, got %d.", self.expected_dim, dim)
            return False

        self.logger.info("Embedding healthcheck PASSED.")
        return True
