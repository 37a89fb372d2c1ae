# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2025-12-28
# Updated: 2026-10-19
# Description: api/schemas/chat.py
# -----------------------------------------------------------------------------
from __future__ import annotations

from typing import Any, List, Optional
from pydantic import BaseModel, Field


class ChatRequest(BaseModel):
    # Missing or blank -> settings.DEFAULT_MESSAGE
    message: Optional[str] = None


class ChatResponse(BaseModel):
    # One slot per extracted list item: the storage RPC result, or null
    results: List[Any] = Field(default_factory=list)


class ChatErrorResponse(BaseModel):
    error: str
    details: str
