# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2025-12-27
# Updated: 2026-10-19
# Description: ListChatService.py
# -----------------------------------------------------------------------------
import logging
from typing import Any, List

import settings
from chat.CompletionService import CompletionService, Message
from pipeline.Outcome import Outcome
from services.ListIngestService import ListIngestService
from utility.logging_utils import get_class_logger


class ListChatService:
    """
    Chat entry point:
        - asks the completion service for a numbered list under a pinned system prompt
        - hands the first choice's text to ListIngestService
        - returns one Outcome per extracted item

    Completion failures propagate: without a completion there is nothing to ingest.
    """

    def __init__(
        self,
        *,
        chat_client: CompletionService,
        ingest_service: ListIngestService,
        system_prompt: str = settings.SYSTEM_PROMPT,
        logger: logging.Logger | None = None,
    ) -> None:
        self.chat_client = chat_client
        self.ingest_service = ingest_service
        self.system_prompt = system_prompt
        self.logger = logger or get_class_logger(self.__class__)

    @staticmethod
    def _first_choice_text(resp: Any) -> str:
        choices = getattr(resp, "choices", None) or []
        if not choices:
            return ""
        message = getattr(choices[0], "message", None)
        return (getattr(message, "content", None) or "") if message is not None else ""

    async def handle(self, query: str) -> List[Outcome[Any]]:
        self.logger.info("handle: query='%s' (start)", query[:120])

        messages: List[Message] = [
            {"role": "system", "content": self.system_prompt},
            {"role": "user", "content": query},
        ]
        resp = await self.chat_client.complete(messages)

        text = self._first_choice_text(resp)
        self.logger.info("handle: completion_chars=%d model=%s", len(text), getattr(resp, "model", None))

        results = await self.ingest_service.ingest(text)
        self.logger.info("handle: results=%d (done)", len(results))
        return results
