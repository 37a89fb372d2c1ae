# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2025-12-20
# Updated: 2026-10-19
# Description: AppContainer.py
# -----------------------------------------------------------------------------
import settings
from chat.OpenAIChat import OpenAIChat
from config.Config import Config
from embedding.SolarEmbedder import SolarEmbedder
from extractor.ListItemExtractor import ListItemExtractor
from health.TestRunner import TestRunner
from services.HealthService import HealthService
from services.ListChatService import ListChatService
from services.ListIngestService import ListIngestService
from utility.logging_utils import get_class_logger
from vectorstore.SupabaseVectorStore import SupabaseVectorStore


class AppContainer:
    """
    Owns heavy object instantiation and application wiring.
    Singleton instances are provided via FastAPI dependencies.
    """

    def __init__(self, cfg: Config | None = None) -> None:
        # Configuration
        self.cfg = cfg or Config.from_env()
        self.logger = get_class_logger(self.__class__)
        self.logger.info("Building app container: %s", self.cfg.summary())

        # Upstream capabilities
        self.openai_chat = OpenAIChat(cfg=self.cfg)
        self.embedder = SolarEmbedder(
            cfg=self.cfg,
            timeout_seconds=settings.EMBEDDING_TIMEOUT_SECONDS,
        )
        self.store = SupabaseVectorStore(cfg=self.cfg)

        # Ingest pipeline
        self.extractor = ListItemExtractor()
        self.ingest_service = ListIngestService(
            extractor=self.extractor,
            embedder=self.embedder,
            store=self.store,
        )

        # Return a singleton ListChatService instance
        self.chat_service = ListChatService(
            chat_client=self.openai_chat,
            ingest_service=self.ingest_service,
        )

        # Smoke tests / health
        self.test_runner = TestRunner(
            chat_client=self.openai_chat,
            embedder=self.embedder,
            store=self.store,
        )
        self.health_service = HealthService(test_runner=self.test_runner)

    async def aclose(self) -> None:
        await self.embedder.aclose()
        await self.openai_chat.aclose()
        await self.store.aclose()
