# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2025-12-20
# Updated: 2026-10-19
# Description: test_chat_router.py
# -----------------------------------------------------------------------------
import json
from types import SimpleNamespace

import httpx
import pytest
from starlette.testclient import TestClient

import settings
from api.dependencies import get_chat_service
from api.main import app
from chat.OpenAIChat import OpenAIChat
from embedding.SolarEmbedder import SolarEmbedder
from extractor.ListItemExtractor import ListItemExtractor
from fakes import FakeCompletion, completion, make_cfg
from services.ListChatService import ListChatService
from services.ListIngestService import ListIngestService
from vectorstore.SupabaseVectorStore import SupabaseVectorStore


class _FakeCompletions:
    def __init__(self, text=None, exc=None):
        self.text = text
        self.exc = exc
        self.requests = []

    async def create(self, **params):
        self.requests.append(params)
        if self.exc is not None:
            raise self.exc
        return completion(self.text)


class _FakeSdk:
    """Stands in for openai.AsyncOpenAI."""

    def __init__(self, completions: _FakeCompletions):
        self.chat = SimpleNamespace(completions=completions)

    async def close(self):
        pass


class _RpcCall:
    def __init__(self, data):
        self.data = data

    async def execute(self):
        return SimpleNamespace(data=self.data)


class _FakeSupabase:
    def __init__(self):
        self.calls = []

    def rpc(self, fn, params):
        self.calls.append((fn, params))
        return _RpcCall("id-1")


def _embedding_handler(request: httpx.Request) -> httpx.Response:
    body = json.loads(request.content)
    if body["input"] == "Alpha case":
        return httpx.Response(200, json={"data": [{"embedding": [0.5, 0.5, 0.5]}]})
    return httpx.Response(500, json={"error": "embedding backend down"})


def _build_chat_service(completions: _FakeCompletions, supabase: _FakeSupabase) -> ListChatService:
    cfg = make_cfg()
    chat = OpenAIChat(cfg=cfg, client=_FakeSdk(completions))
    embedder = SolarEmbedder(
        cfg,
        http_client=httpx.AsyncClient(transport=httpx.MockTransport(_embedding_handler)),
    )
    store = SupabaseVectorStore(cfg, client=supabase)
    ingest = ListIngestService(extractor=ListItemExtractor(), embedder=embedder, store=store)
    return ListChatService(chat_client=chat, ingest_service=ingest)


@pytest.fixture
def client():
    yield TestClient(app)
    app.dependency_overrides.clear()


def test_end_to_end_partial_success(client):
    completions = _FakeCompletions(text="1. Alpha case\n2. Beta case")
    supabase = _FakeSupabase()
    svc = _build_chat_service(completions, supabase)
    app.dependency_overrides[get_chat_service] = lambda: svc

    resp = client.post("/chat", json={"message": "test query"})

    assert resp.status_code == 200, resp.text
    assert resp.json() == {"results": ["id-1", None]}

    # only the successfully embedded item reached storage
    assert len(supabase.calls) == 1
    fn, params = supabase.calls[0]
    assert fn == "cmon"
    assert params == {"input_vector": [0.5, 0.5, 0.5]}

    sent = completions.requests[0]
    assert sent["model"] == "test-model"
    assert sent["messages"][1] == {"role": "user", "content": "test query"}


def test_completion_failure_returns_structured_500(client):
    completions = _FakeCompletions(exc=RuntimeError("connection reset by peer"))
    supabase = _FakeSupabase()
    app.dependency_overrides[get_chat_service] = lambda: _build_chat_service(completions, supabase)

    resp = client.post("/chat", json={"message": "test query"})

    assert resp.status_code == 500
    assert resp.json() == {
        "error": "Failed to get chat completion",
        "details": "connection reset by peer",
    }
    assert supabase.calls == []


@pytest.mark.parametrize("body", [{}, {"message": None}, {"message": "   "}])
def test_missing_message_uses_default_prompt(client, body):
    chat = FakeCompletion(text="no list in this answer")
    svc = ListChatService(
        chat_client=chat,
        ingest_service=ListIngestService(
            extractor=ListItemExtractor(),
            embedder=None,
            store=None,
        ),
    )
    app.dependency_overrides[get_chat_service] = lambda: svc

    resp = client.post("/chat", json=body)

    assert resp.status_code == 200
    assert resp.json() == {"results": []}
    assert chat.calls[0][1]["content"] == settings.DEFAULT_MESSAGE


@pytest.mark.parametrize(
    "kwargs",
    [
        {},
        {"content": b"not json", "headers": {"Content-Type": "application/json"}},
        {"json": {"message": 123}},
        {"json": ["1. Alpha case"]},
    ],
    ids=["no-body", "invalid-json", "non-string-message", "non-object-body"],
)
def test_bad_request_body_returns_structured_500(client, kwargs):
    chat = FakeCompletion(text="1. Alpha case")
    svc = ListChatService(
        chat_client=chat,
        ingest_service=ListIngestService(
            extractor=ListItemExtractor(),
            embedder=None,
            store=None,
        ),
    )
    app.dependency_overrides[get_chat_service] = lambda: svc

    resp = client.post("/chat", **kwargs)

    assert resp.status_code == 500, resp.text
    body = resp.json()
    assert set(body) == {"error", "details"}
    assert body["error"] == "Failed to get chat completion"
    assert body["details"]
    assert chat.calls == []
