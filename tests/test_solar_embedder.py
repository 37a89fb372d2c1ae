# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2025-11-14
# Updated: 2026-10-19
# Description: test_solar_embedder.py
# -----------------------------------------------------------------------------
import asyncio
import json

import httpx
import numpy as np

from embedding.SolarEmbedder import SolarEmbedder
from fakes import make_cfg


def _embedder(handler) -> SolarEmbedder:
    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return SolarEmbedder(make_cfg(), http_client=client)


def test_embed_posts_model_and_input_with_bearer_token():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["url"] = str(request.url)
        seen["auth"] = request.headers.get("Authorization")
        seen["body"] = json.loads(request.content)
        return httpx.Response(200, json={"data": [{"embedding": [0.1, 0.2, 0.3]}]})

    outcome = asyncio.run(_embedder(handler).embed("Alpha case"))

    assert outcome.present
    np.testing.assert_allclose(outcome.value, [0.1, 0.2, 0.3], rtol=1e-6)
    assert outcome.value.dtype == np.float32
    assert seen["url"] == "https://embed.test/v1/embeddings"
    assert seen["auth"] == "Bearer test-embed-key"
    assert seen["body"] == {"model": "test-embedding-model", "input": "Alpha case"}


def test_non_success_status_is_absent():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(429, json={"error": "rate limited"})

    outcome = asyncio.run(_embedder(handler).embed("Beta case"))

    assert outcome.is_absent
    assert outcome.value is None
    assert "429" in outcome.reason


def test_transport_error_is_absent_not_raised():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    outcome = asyncio.run(_embedder(handler).embed("Beta case"))

    assert outcome.is_absent
    assert "transport" in outcome.reason


def test_malformed_payload_is_absent():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"data": []})

    outcome = asyncio.run(_embedder(handler).embed("Gamma case"))

    assert outcome.is_absent
    assert "malformed" in outcome.reason


def test_empty_vector_is_absent():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"data": [{"embedding": []}]})

    assert asyncio.run(_embedder(handler).embed("Delta case")).is_absent
