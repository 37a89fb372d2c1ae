# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2025-11-08
# Updated: 2026-10-19
# Description: Config
# -----------------------------------------------------------------------------

import os
from dataclasses import dataclass
from dotenv import load_dotenv, find_dotenv

# Load .env once globally
load_dotenv(find_dotenv(usecwd=True), override=False)


@dataclass(frozen=True)
class Config:
    # Completion (Groq, OpenAI-compatible endpoint)
    completion_api_key: str
    completion_base_url: str
    completion_model: str

    # Embeddings (Upstage Solar)
    embedding_api_key: str
    embedding_url: str
    embedding_model: str

    # Supabase (vector persistence via RPC)
    supabase_url: str
    supabase_key: str
    supabase_rpc_name: str

    # ---- Single source of truth: field_name -> ENV VAR NAME ----
    ENV_VARS = {
        # Completion
        "completion_api_key": "GROQ_API_KEY",
        "completion_base_url": "GROQ_BASE_URL",
        "completion_model": "GROQ_CHAT_MODEL",

        # Embeddings
        "embedding_api_key": "AIYER_KEY",
        "embedding_url": "EMBEDDING_URL",
        "embedding_model": "EMBEDDING_MODEL",

        # Supabase
        "supabase_url": "SUPABASE_URL",
        "supabase_key": "SUPABASE_ANON_KEY",
        "supabase_rpc_name": "SUPABASE_RPC_NAME",
    }

    # Pinned values used when the env var is not set
    DEFAULTS = {
        "completion_base_url": "https://api.groq.com/openai/v1",
        "completion_model": "llama3-8b-8192",
        "embedding_url": "https://api.upstage.ai/v1/solar/embeddings",
        "embedding_model": "solar-embedding-1-large-query",
        "supabase_rpc_name": "cmon",
    }

    # Convenient *groups* for use in tests / health checks
    COMPLETION_ENV_VARS = ("GROQ_API_KEY",)
    EMBEDDING_ENV_VARS = ("AIYER_KEY",)
    SUPABASE_ENV_VARS = ("SUPABASE_URL", "SUPABASE_ANON_KEY")

    @staticmethod
    def from_env() -> "Config":
        """Build Config object from environment variables."""
        kwargs = {
            field_name: (os.getenv(env_name) or Config.DEFAULTS.get(field_name, "")).strip()
            for field_name, env_name in Config.ENV_VARS.items()
        }
        return Config(**kwargs)

    def __post_init__(self):
        """Fail fast if any required config is missing."""
        missing_fields = [k for k, v in self.__dict__.items() if not v]

        if missing_fields:
            missing_env_vars = [self.ENV_VARS[f] for f in missing_fields]
            raise ValueError(f"Missing required environment variables: {missing_env_vars}")

    def summary(self) -> dict:
        """Return a safe, non-sensitive summary for logging."""
        return {
            "completion_base_url": self.completion_base_url,
            "completion_model": self.completion_model,
            "embedding_url": self.embedding_url,
            "embedding_model": self.embedding_model,
            "supabase_url": self.supabase_url,
            "supabase_rpc_name": self.supabase_rpc_name,
        }
