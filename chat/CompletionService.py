# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-10-19
# Description: CompletionService
# -----------------------------------------------------------------------------

from typing import Any, Dict, List, Protocol, runtime_checkable

Message = Dict[str, str]  # {"role": "system"|"user"|"assistant", "content": "..."}


@runtime_checkable
class CompletionService(Protocol):
    async def complete(self, messages: List[Message]) -> Any:
        """Return a chat completion object exposing choices[0].message.content."""
        ...
