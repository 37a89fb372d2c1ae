# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2025-12-21
# Updated: 2026-10-19
# Description: ListIngestService.py
# -----------------------------------------------------------------------------
from __future__ import annotations

import asyncio
import logging
import time
from typing import Any, List

from embedding.EmbeddingService import EmbeddingService
from extractor.ListItemExtractor import ListItemExtractor
from pipeline.Outcome import Outcome
from utility.logging_utils import get_class_logger
from vectorstore.StorageService import StorageService


class ListIngestService:
    """
    Owns the ingest pipeline for one completion:
      - extract numbered list items
      - fan out one branch per item: embed -> store
      - join all branches and return one Outcome per item, in item order

    Branches are independent. A failed embedding skips storage for that
    item only, and nothing in one branch cancels another.
    """

    def __init__(
        self,
        *,
        extractor: ListItemExtractor,
        embedder: EmbeddingService,
        store: StorageService,
        logger: logging.Logger | None = None,
    ) -> None:
        self.extractor = extractor
        self.embedder = embedder
        self.store = store
        self.logger = logger or get_class_logger(self.__class__)

    async def ingest(self, raw_text: str) -> List[Outcome[Any]]:
        items = self.extractor.extract(raw_text)
        if not items:
            return []

        start = time.time()
        self.logger.info("Ingest start: items=%d", len(items))

        settled = await asyncio.gather(
            *(self._process_item(i, item) for i, item in enumerate(items)),
            return_exceptions=True,
        )

        results: List[Outcome[Any]] = []
        for i, res in enumerate(settled):
            if isinstance(res, BaseException):
                # embed/store absorb their own failures; this is a bug in the branch itself
                self.logger.error("Item %d branch raised: %s", i, res, exc_info=res)
                results.append(Outcome.absent(f"branch raised: {res}"))
            else:
                results.append(res)

        stored = sum(1 for r in results if r.present)
        self.logger.info(
            "Ingest complete: %d/%d items stored (%.1f ms)",
            stored,
            len(results),
            (time.time() - start) * 1000.0,
        )
        return results

    async def _process_item(self, index: int, item: str) -> Outcome[Any]:
        embedded = await self.embedder.embed(item)
        if embedded.is_absent:
            self.logger.warning("Item %d not embedded, skipping storage: %s", index, embedded.reason)
            return Outcome.absent(embedded.reason or "no embedding")

        stored = await self.store.store(embedded.value)
        if stored.is_absent:
            self.logger.warning("Item %d embedded but not stored: %s", index, stored.reason)
        return stored
