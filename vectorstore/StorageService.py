# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-10-19
# Description: StorageService
# -----------------------------------------------------------------------------

from typing import Any, Protocol, runtime_checkable

import numpy as np

from pipeline.Outcome import Outcome


@runtime_checkable
class StorageService(Protocol):
    async def test_connection(self) -> bool:
        ...

    async def store(self, vector: np.ndarray) -> Outcome[Any]:
        ...
