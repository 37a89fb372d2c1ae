# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2025-12-07
# Updated: 2026-10-19
# Description: health.py
# -----------------------------------------------------------------------------
from typing import Dict

from pydantic import BaseModel


class HealthResponse(BaseModel):
    status: str
    message: str


class SmokeTestSummary(BaseModel):
    total: int
    passed: int
    failed: int


class DeepHealthResponse(BaseModel):
    status: str
    # completion_health / embedding_health / storage_health -> pass flag
    results: Dict[str, bool]
    summary: SmokeTestSummary
