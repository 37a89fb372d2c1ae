# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-10-19
# Description: RepeatedQueryAggregator.py
# -----------------------------------------------------------------------------
from __future__ import annotations

import logging
from functools import partial
from typing import Any, Callable, Dict, List, Optional

import requests

import settings
from utility.logging_utils import get_class_logger

Message = Dict[str, str]  # {"role": "user"|"assistant", "content": "..."}
PostFn = Callable[[str, Dict[str, Any]], Dict[str, Any]]

EMPTY_AGGREGATE_MESSAGE = "No results were stored for this query."


def post_json(
    path: str,
    payload: Dict[str, Any],
    *,
    base_url: Optional[str] = None,
) -> Dict[str, Any]:
    """
    POST to the CASELIST API. Failures come back as {"error": ...}
    instead of raising, so callers can branch on the body.
    """
    url = f"{(base_url or settings.API_BASE_URL).rstrip('/')}{path}"
    try:
        r = requests.post(url, json=payload, timeout=settings.UI_TIMEOUT_SECONDS)
        if not r.ok:
            return {"error": f"HTTP {r.status_code}: {r.text}"}
        return r.json()
    except requests.exceptions.RequestException as e:
        return {"error": f"RequestException: {e}"}


def format_aggregate(items: List[str]) -> str:
    if not items:
        return EMPTY_AGGREGATE_MESSAGE
    return "\n".join(f"{i}. {item}" for i, item in enumerate(items, start=1))


class AggregationError(RuntimeError):
    """One of the repeated /chat calls failed; the turn is abandoned."""


class RepeatedQueryAggregator:
    """
    Sends the same message to POST /chat a fixed number of times, one call
    after another, and merges the string results into one ordered set.

    A single completion can miss items, so repeating the query and
    deduplicating raises recall for a bounded amount of extra latency.
    """

    def __init__(
        self,
        *,
        post: Optional[PostFn] = None,
        base_url: Optional[str] = None,
        repeat_count: int = settings.REPEAT_COUNT,
        logger: logging.Logger | None = None,
    ) -> None:
        if repeat_count < 1:
            raise ValueError("repeat_count must be >= 1")
        self.post = post or partial(post_json, base_url=base_url)
        self.repeat_count = repeat_count
        self.logger = logger or get_class_logger(self.__class__)

    def collect(self, message: str) -> List[str]:
        """
        Runs every call in sequence and returns unique string results in
        first-seen order. Raises AggregationError on the first failed call.
        """
        seen: Dict[str, None] = {}

        for attempt in range(1, self.repeat_count + 1):
            out = self.post("/chat", {"message": message})

            if not isinstance(out, dict):
                out = {"error": f"unexpected response: {out!r}"}
            if "error" in out:
                detail = out.get("details") or out["error"]
                self.logger.error("Call %d/%d failed: %s", attempt, self.repeat_count, detail)
                raise AggregationError(str(detail))

            results = out.get("results") or []
            for r in results:
                if isinstance(r, str):
                    seen.setdefault(r, None)

            self.logger.info(
                "Call %d/%d ok: results=%d unique_so_far=%d",
                attempt, self.repeat_count, len(results), len(seen),
            )

        return list(seen)

    def run_turn(self, message: str, transcript: Optional[List[Message]] = None) -> List[Message]:
        """
        Appends the user message plus exactly one reply: the merged results,
        or a single error message if any call failed.
        """
        transcript = list(transcript or [])
        transcript.append({"role": "user", "content": message})

        try:
            items = self.collect(message)
        except AggregationError as e:
            transcript.append({"role": "assistant", "content": f"Error: failed to fetch results ({e})"})
            return transcript

        transcript.append({"role": "assistant", "content": format_aggregate(items)})
        return transcript
