# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2025-11-22
# Updated: 2026-10-19
# Description: test_live_pipeline_integration.py
# -----------------------------------------------------------------------------
import asyncio
import os

import pytest

from chat.OpenAIChat import OpenAIChat
from config.Config import Config
from embedding.SolarEmbedder import SolarEmbedder


def _skip_if_missing(env_names):
    missing = [name for name in env_names if not os.getenv(name)]
    if missing:
        pytest.skip(f"Missing env vars: {', '.join(missing)}")


def _all_env_vars():
    return Config.COMPLETION_ENV_VARS + Config.EMBEDDING_ENV_VARS + Config.SUPABASE_ENV_VARS


@pytest.mark.integration
def test_completion_returns_numbered_list():
    """
    Integration test:
      - ask the live completion endpoint under the pinned system prompt
      - verify the answer is a numbered list
    """
    _skip_if_missing(_all_env_vars())

    import settings

    chat = OpenAIChat(cfg=Config.from_env())
    out = asyncio.run(chat.simple_chat(
        user_text="Negligence claims against municipalities",
        system_text=settings.SYSTEM_PROMPT,
    ))

    assert "1. " in out["answer"]


@pytest.mark.integration
def test_live_embedding_has_a_dimension():
    _skip_if_missing(_all_env_vars())

    async def _run():
        embedder = SolarEmbedder(Config.from_env())
        try:
            return await embedder.embed("Duty of care owed by landlords")
        finally:
            await embedder.aclose()

    outcome = asyncio.run(_run())

    assert outcome.present, outcome.reason
    assert outcome.value.shape[0] > 0
