# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2025-12-20
# Updated: 2026-10-19
# Description: HealthService.py
# -----------------------------------------------------------------------------
from dataclasses import dataclass

from api.schemas.health import DeepHealthResponse, SmokeTestSummary
from health.TestRunner import TestRunner


@dataclass
class HealthService:
    """
    Wraps TestRunner, which runs smoke tests against the completion,
    embedding and storage capabilities.
    Returns DeepHealthResponse for API layer
    """

    test_runner: TestRunner

    async def deep_health(self) -> DeepHealthResponse:
        results = await self.test_runner.run_all()

        total = len(results)
        passed = sum(1 for ok in results.values() if ok)
        failed = total - passed

        return DeepHealthResponse(
            status="ok" if failed == 0 else "error",
            results=results,
            summary=SmokeTestSummary(total=total, passed=passed, failed=failed),
        )
