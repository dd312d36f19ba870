import logging
import time
from collections.abc import Callable
from typing import Generic, TypeVar

from until_wall.request import RenderRequest, cache_key

logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_MAX_SIZE: int = 200
DEFAULT_TTL_SECONDS: float = 60 * 60


class RenderCache(Generic[T]):
    """Bounded in-memory store for rendered output keyed by request.

    Entries expire after ``ttl`` seconds; when full, the oldest entry is evicted.
    Keys do not include "today", callers that render relative to the current
    date should keep the TTL below a day.
    """

    def __init__(
        self,
        max_size: int = DEFAULT_MAX_SIZE,
        ttl: float = DEFAULT_TTL_SECONDS,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.MAX_SIZE = max_size
        self.TTL = ttl
        self._clock = clock
        self._entries: dict[str, tuple[float, T]] = {}

    def __len__(self) -> int:
        return len(self._entries)

    def get(self, request: RenderRequest) -> T | None:
        key = cache_key(request)
        entry = self._entries.get(key)
        if entry is None:
            return None
        stored_at, value = entry
        if self._clock() - stored_at > self.TTL:
            del self._entries[key]
            return None
        return value

    def set(self, request: RenderRequest, value: T) -> None:
        key = cache_key(request)
        if key not in self._entries and len(self._entries) >= self.MAX_SIZE:
            oldest = min(self._entries, key=lambda k: self._entries[k][0])
            logger.debug("Render cache full, evicting %s", oldest)
            del self._entries[oldest]
        self._entries[key] = (self._clock(), value)

    def get_or_render(self, request: RenderRequest, render: Callable[[RenderRequest], T]) -> T:
        value = self.get(request)
        if value is None:
            value = render(request)
            self.set(request, value)
        return value

    def clear(self) -> None:
        self._entries.clear()
