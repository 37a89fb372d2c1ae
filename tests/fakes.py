# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-10-19
# Description: fakes.py - in-memory stand-ins for the upstream capabilities
# -----------------------------------------------------------------------------
import asyncio
from types import SimpleNamespace
from typing import Any, Dict, List, Optional

import numpy as np

from config.Config import Config
from pipeline.Outcome import Outcome


def make_cfg(**overrides: str) -> Config:
    values = {
        "completion_api_key": "test-groq-key",
        "completion_base_url": "https://completion.test/v1",
        "completion_model": "test-model",
        "embedding_api_key": "test-embed-key",
        "embedding_url": "https://embed.test/v1/embeddings",
        "embedding_model": "test-embedding-model",
        "supabase_url": "https://supabase.test",
        "supabase_key": "test-anon-key",
        "supabase_rpc_name": "cmon",
    }
    values.update(overrides)
    return Config(**values)


def completion(text: Optional[str], model: str = "test-model") -> Any:
    """Mimic the shape of an OpenAI ChatCompletion object."""
    if text is None:
        return SimpleNamespace(choices=[], model=model)
    message = SimpleNamespace(role="assistant", content=text)
    return SimpleNamespace(choices=[SimpleNamespace(index=0, message=message)], model=model)


class FakeCompletion:
    def __init__(self, text: Optional[str] = None, exc: Optional[Exception] = None):
        self.text = text
        self.exc = exc
        self.calls: List[List[Dict[str, str]]] = []

    async def complete(self, messages):
        self.calls.append(messages)
        if self.exc is not None:
            raise self.exc
        return completion(self.text)

    async def healthcheck(self) -> bool:
        return self.exc is None


class FakeEmbedder:
    """Returns a vector per known text; unknown texts are absent."""

    def __init__(self, vectors: Dict[str, List[float]], raise_for: Optional[str] = None):
        self.vectors = vectors
        self.raise_for = raise_for
        self.calls: List[str] = []

    async def embed(self, text: str) -> Outcome[np.ndarray]:
        self.calls.append(text)
        await asyncio.sleep(0)
        if text == self.raise_for:
            raise RuntimeError(f"boom for {text}")
        if text not in self.vectors:
            return Outcome.absent(f"no vector for {text!r}")
        return Outcome.of(np.asarray(self.vectors[text], dtype=np.float32))


class FakeStore:
    """Maps the first vector component to a stored id; unknown keys fail."""

    def __init__(self, ids: Dict[float, Any], healthy: bool = True):
        self.ids = ids
        self.healthy = healthy
        self.calls: List[np.ndarray] = []

    async def test_connection(self) -> bool:
        return self.healthy

    async def store(self, vector: np.ndarray) -> Outcome[Any]:
        self.calls.append(vector)
        await asyncio.sleep(0)
        key = float(vector[0])
        if key not in self.ids:
            return Outcome.absent(f"rpc error for {key}")
        return Outcome.of(self.ids[key])
