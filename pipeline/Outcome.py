# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-10-19
# Description: Outcome
# -----------------------------------------------------------------------------
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, List, Optional, Sequence, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Outcome(Generic[T]):
    """
    Result of one best-effort upstream call.

    Either carries a value, or is absent and carries the reason the
    upstream step produced nothing. Absent outcomes are not errors for
    the pipeline; the reason is kept for logs and debugging only.
    """

    value: Optional[T] = None
    reason: Optional[str] = None
    present: bool = False

    @classmethod
    def of(cls, value: T) -> "Outcome[T]":
        return cls(value=value, present=True)

    @classmethod
    def absent(cls, reason: str) -> "Outcome[T]":
        return cls(reason=reason, present=False)

    @property
    def is_absent(self) -> bool:
        return not self.present

    def to_json(self) -> Any:
        """Serialized form of one slot: the stored value, or None when absent."""
        return self.value if self.present else None


def to_json_results(outcomes: Sequence[Outcome[Any]]) -> List[Any]:
    return [o.to_json() for o in outcomes]
