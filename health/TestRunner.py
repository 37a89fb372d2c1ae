# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2025-11-07
# Updated: 2026-10-19
# Description: TestRunner
# -----------------------------------------------------------------------------

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from health.EmbeddingHealth import EmbeddingHealth
from utility.logging_utils import get_class_logger
from vectorstore.StorageService import StorageService


class TestRunner:
    """
    Orchestrates all smoke tests and reports a consolidated result.

    Tests included:
      - completion_health (chat completion round-trip)
      - embedding_health  (one embedding call)
      - storage_health    (Supabase client creation, no RPC write)
    """

    __test__ = False  # not a pytest test class

    def __init__(
        self,
        *,
        chat_client: Any,
        embedder: Any,
        store: StorageService,
        expected_dim: Optional[int] = None,
        logger: Optional[logging.Logger] = None,
    ):
        self.chat_client = chat_client
        self.store = store
        self.embedding_health = EmbeddingHealth(embedder, expected_dim=expected_dim)
        self.logger = logger or get_class_logger(self.__class__)

        self.logger.info("Initialising SmokeTestRunner")

    # -------------------------------------------------------------------------
    async def run_all(self) -> Dict[str, bool]:
        self.logger.info("Starting smoke test suite")

        results: Dict[str, bool] = {}

        try:
            results["completion_health"] = await self.chat_client.healthcheck()
        except Exception as e:
            self.logger.exception("Completion healthcheck raised an exception: %s", e)
            results["completion_health"] = False
        self._log_result("CompletionHealth", results["completion_health"])

        try:
            results["embedding_health"] = await self.embedding_health.run()
        except Exception as e:
            self.logger.exception("EmbeddingHealth.run() raised an exception: %s", e)
            results["embedding_health"] = False
        self._log_result("EmbeddingHealth", results["embedding_health"])

        try:
            results["storage_health"] = await self.store.test_connection()
        except Exception as e:
            self.logger.exception("Storage test_connection() raised an exception: %s", e)
            results["storage_health"] = False
        self._log_result("StorageHealth", results["storage_health"])

        self._log_summary(results)
        return results

    # -------------------------------------------------------------------------
    def _log_result(self, name: str, ok: bool) -> None:
        if ok:
            self.logger.info("%s: PASS", name)
        else:
            self.logger.error("%s: FAIL", name)

    def _log_summary(self, results: Dict[str, bool]) -> None:
        total = len(results)
        passed = sum(1 for v in results.values() if v)
        failed = total - passed

        self.logger.info("Smoke test summary: %d total, %d passed, %d failed", total, passed, failed)

        for name, ok in results.items():
            status = "PASS" if ok else "FAIL"
            self.logger.info("  %s: %s", name, status)
