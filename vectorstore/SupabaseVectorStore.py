# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2025-11-16
# Updated: 2026-10-19
# Description: SupabaseVectorStore
# -----------------------------------------------------------------------------
import asyncio
from typing import Any, List, Optional

import numpy as np
from supabase import AsyncClient, acreate_client

from config.Config import Config
from pipeline.Outcome import Outcome
from utility.logging_utils import get_class_logger
from vectorstore.StorageService import StorageService


def _extract_error(resp: Any) -> Optional[Any]:
    """
    Normalise the error indicator across SDK response objects and the
    dict-style responses returned by test doubles.
    """
    if isinstance(resp, dict):
        return resp.get("error")
    return getattr(resp, "error", None)


def _extract_data(resp: Any) -> Any:
    if isinstance(resp, dict):
        return resp.get("data")
    return getattr(resp, "data", None)


class SupabaseVectorStore(StorageService):
    """
    Persists one embedding per call through a Supabase RPC.

    The RPC receives the vector as its single named parameter
    (input_vector). Whatever it returns in `data` is passed back to the
    caller untouched. Any failure is logged and comes back as an absent
    Outcome.
    """

    def __init__(self, cfg: Config, *, client: Optional[AsyncClient] = None, logger=None) -> None:
        self.cfg = cfg
        self.rpc_name = cfg.supabase_rpc_name
        self.logger = logger or get_class_logger(self.__class__)

        self._client = client
        self._client_lock = asyncio.Lock()

        self.logger.info("Supabase vector store configured (url=%s, rpc=%s)",
                         self.cfg.supabase_url, self.rpc_name)

    async def _get_client(self) -> AsyncClient:
        if self._client is not None:
            return self._client

        # Concurrent item branches share one lazily created client
        async with self._client_lock:
            if self._client is None:
                self.logger.info("Creating Supabase async client (url=%s)", self.cfg.supabase_url)
                self._client = await acreate_client(self.cfg.supabase_url, self.cfg.supabase_key)
        return self._client

    async def test_connection(self) -> bool:
        """
        Reachability check only: builds the client without calling the RPC,
        so health checks never write vectors.
        """
        try:
            await self._get_client()
            return True
        except Exception as e:
            self.logger.error("Supabase connection failed: %s", e)
            return False

    @staticmethod
    def _to_param(vector: Any) -> List[float]:
        if isinstance(vector, np.ndarray):
            return vector.astype(float).tolist()
        return [float(x) for x in vector]

    async def store(self, vector: np.ndarray) -> Outcome[Any]:
        try:
            client = await self._get_client()
            resp = await client.rpc(self.rpc_name, {"input_vector": self._to_param(vector)}).execute()
        except Exception as e:
            self.logger.error("Error in Supabase request: %s", e)
            return Outcome.absent(f"storage request failed: {e}")

        error = _extract_error(resp)
        if error:
            self.logger.error("Error storing embedding in Supabase: %s", error)
            return Outcome.absent(f"storage rpc error: {error}")

        data = _extract_data(resp)
        self.logger.debug("Stored embedding via rpc '%s' (result=%r)", self.rpc_name, data)
        return Outcome.of(data)

    async def aclose(self) -> None:
        """Closes the PostgREST HTTP session behind the RPC calls, if a client was built."""
        client, self._client = self._client, None
        if client is None:
            return
        await client.postgrest.aclose()
        self.logger.info("Supabase client closed")
