# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2025-11-22
# Updated: 2026-10-19
# Description: OpenAIChat
# -----------------------------------------------------------------------------
from dataclasses import dataclass
from typing import Dict, Any, List, Optional

from openai import AsyncOpenAI

from chat.CompletionService import CompletionService, Message
from utility.logging_utils import get_class_logger


@dataclass
class OpenAIChat(CompletionService):
    """
        Async chat wrapper for any OpenAI-compatible completion endpoint
        (Groq by default).

        Expected Config fields:
          cfg.completion_api_key: str
          cfg.completion_base_url: str  (e.g. "https://api.groq.com/openai/v1")
          cfg.completion_model: str     (e.g. "llama3-8b-8192")
    """

    cfg: Any
    logger: Any = None
    client: Any = None

    def __post_init__(self) -> None:
        self.logger = self.logger or get_class_logger(self.__class__)

        if not getattr(self.cfg, "completion_api_key", None):
            raise ValueError("Config is missing completion_api_key")

        self.model = getattr(self.cfg, "completion_model", None)
        if not self.model:
            raise ValueError("Config missing completion_model.")

        self.client = self.client or AsyncOpenAI(
            api_key=self.cfg.completion_api_key,
            base_url=getattr(self.cfg, "completion_base_url", None) or None,
        )

        self.logger.info("OpenAIChat initialised (base_url=%s, model=%s)",
                         getattr(self.cfg, "completion_base_url", None), self.model)

    async def complete(
            self,
            messages: List[Message],
            temperature: Optional[float] = None,
            max_tokens: Optional[int] = None,
            extra_params: Optional[Dict[str, Any]] = None,
    ) -> Any:
        if not messages:
            raise ValueError("messages must be non-empty.")

        params: Dict[str, Any] = {
            "model": self.model,
            "messages": messages,
        }
        if temperature is not None:
            params["temperature"] = temperature
        if max_tokens is not None:
            params["max_tokens"] = max_tokens
        if extra_params:
            params.update(extra_params)

        self.logger.debug("Chat request: model=%s temp=%s max_tokens=%s", self.model, temperature, max_tokens)

        resp = await self.client.chat.completions.create(**params)

        self.logger.debug("Raw ChatCompletion response: %r", resp)
        return resp

    async def simple_chat(
            self,
            user_text: str,
            system_text: Optional[str] = None,
            **kwargs: Any,
    ) -> dict:
        messages: List[Message] = []
        if system_text:
            messages.append({"role": "system", "content": system_text})
        messages.append({"role": "user", "content": user_text})

        resp = await self.complete(messages, **kwargs)

        try:
            content = resp.choices[0].message.content or ""
        except (AttributeError, IndexError, TypeError) as e:
            self.logger.error("Unexpected chat response format: %s", e, exc_info=True)
            raise RuntimeError(f"Unexpected chat response format: {e}")

        self.logger.info("Chat answer generated (model=%s)", getattr(resp, "model", None))
        self.logger.debug("Token usage: %r", getattr(resp, "usage", None))

        return {
            "answer": content,
            "usage": getattr(resp, "usage", None),
            "model": getattr(resp, "model", None),
        }

    async def healthcheck(self) -> bool:
        try:
            out = await self.simple_chat("Say OK if you can read this.", max_tokens=5, temperature=0.0)
            return bool(out["answer"].strip())
        except Exception as e:
            self.logger.warning("Chat healthcheck failed: %s", e)
            return False

    async def aclose(self) -> None:
        await self.client.close()
