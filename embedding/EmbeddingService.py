# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-10-19
# Description: EmbeddingService
# -----------------------------------------------------------------------------

from typing import Protocol, runtime_checkable

import numpy as np

from pipeline.Outcome import Outcome


@runtime_checkable
class EmbeddingService(Protocol):
    async def embed(self, text: str) -> Outcome[np.ndarray]:
        ...
