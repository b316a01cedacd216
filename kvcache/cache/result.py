"""Tagged result of a cache lookup."""

import enum
from dataclasses import dataclass
from typing import Optional

from kvcache.core.exceptions import CacheError


class CacheStatus(str, enum.Enum):
    """Outcome of a cache lookup."""

    HIT = "hit"
    MISS = "miss"
    ERROR = "error"


@dataclass(frozen=True)
class CacheResult:
    """
    Value, absence or failure of a single lookup.

    Unlike ``CacheClient.get``, which answers ``None`` both for a missing
    key and for an unreachable service, this keeps the cases apart.
    """

    status: CacheStatus
    value: Optional[str] = None
    error: Optional[CacheError] = None

    @classmethod
    def hit(cls, value: str) -> "CacheResult":
        return cls(status=CacheStatus.HIT, value=value)

    @classmethod
    def miss(cls) -> "CacheResult":
        return cls(status=CacheStatus.MISS)

    @classmethod
    def failed(cls, error: CacheError) -> "CacheResult":
        return cls(status=CacheStatus.ERROR, error=error)

    @property
    def found(self) -> bool:
        """Whether the key was present."""
        return self.status is CacheStatus.HIT
