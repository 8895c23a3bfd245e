"""In-Process TTL Cache — read-through memoization keyed by (owner, endpoint).

Invariants:
    - An entry is usable iff clock() < expires_at; a stale entry reads as a miss
    - Keys are "{owner}:{endpoint}"; clear_user(owner) touches only that owner's keys
    - At most one producer call in flight per key: concurrent misses await the same future
    - A producer failure propagates unchanged to every waiter and nothing is cached
    - A cancelled producer does not cancel its waiters: one of them retries as the new caller
    - clear/clear_user/clear_all also forget in-flight calls; a call that finishes
      after being forgotten answers its own waiters but stores nothing
    - No await separates a map read from the dependent write of the same key,
      so the dict needs no lock on a single event loop
    - Contents are never persisted; a process restart starts empty

Design Decisions:
    - Explicit instance owned by the lifespan (app.state.cache), never a module global
    - Sweeper is an asyncio task started/stopped with the app; it only ever
      removes stale entries, reads already ignore them
    - Clock is injectable (monotonic seconds) so TTL behaviour is testable without sleeping
"""

import asyncio
import contextlib
import logging
import time
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_TTL_SECONDS = 30 * 60
DEFAULT_SWEEP_INTERVAL_SECONDS = 60 * 60


@dataclass
class CacheEntry:
    value: Any
    expires_at: float


class _LeaderCancelled(Exception):
    """Set on a shared call whose producing task was cancelled; waiters retry."""


def _fail(future: asyncio.Future, exc: BaseException) -> None:
    future.set_exception(exc)
    # mark retrieved; waiters still receive it when they await
    future.exception()


class TTLCache:
    """Owner-scoped TTL cache with single-flight misses and a periodic sweeper."""

    def __init__(
        self,
        default_ttl: float = DEFAULT_TTL_SECONDS,
        clock: Callable[[], float] = time.monotonic,
    ):
        self._entries: dict[str, CacheEntry] = {}
        self._inflight: dict[str, asyncio.Future] = {}
        self._default_ttl = default_ttl
        self._clock = clock
        self._sweeper: asyncio.Task | None = None

    def __len__(self) -> int:
        return len(self._entries)

    @staticmethod
    def cache_key(owner: object, endpoint: str) -> str:
        return f"{owner}:{endpoint}"

    async def get_cached_or_fetch(
        self,
        owner: object,
        endpoint: str,
        producer: Callable[[], Awaitable[T]],
        ttl: float | None = None,
    ) -> T:
        """Return the live cached value, or run producer once and cache its result."""
        key = self.cache_key(owner, endpoint)
        while True:
            entry = self._entries.get(key)
            if entry is not None and self._clock() < entry.expires_at:
                return entry.value

            inflight = self._inflight.get(key)
            if inflight is None:
                return await self._fetch(key, producer, ttl)
            try:
                # shield: a cancelled waiter must not cancel the shared call
                return await asyncio.shield(inflight)
            except _LeaderCancelled:
                continue

    async def _fetch(
        self, key: str, producer: Callable[[], Awaitable[T]], ttl: float | None,
    ) -> T:
        future: asyncio.Future = asyncio.get_running_loop().create_future()
        self._inflight[key] = future
        try:
            value = await producer()
        except asyncio.CancelledError:
            self._release(key, future)
            _fail(future, _LeaderCancelled())
            raise
        except Exception as exc:
            self._release(key, future)
            _fail(future, exc)
            raise

        # an invalidation during the call unregistered it; the value is stale
        if self._release(key, future):
            lifetime = self._default_ttl if ttl is None else ttl
            self._entries[key] = CacheEntry(value, self._clock() + lifetime)
        future.set_result(value)
        return value

    def _release(self, key: str, future: asyncio.Future) -> bool:
        """Unregister future. False when it was no longer the in-flight call for key."""
        if self._inflight.get(key) is not future:
            return False
        del self._inflight[key]
        return True

    def clear(self, owner: object, endpoint: str) -> None:
        """Drop one (owner, endpoint) entry and forget any call in flight for it."""
        key = self.cache_key(owner, endpoint)
        self._entries.pop(key, None)
        self._inflight.pop(key, None)

    def clear_user(self, owner: object) -> int:
        """Drop every entry belonging to owner. Returns the number removed."""
        prefix = f"{owner}:"
        doomed = [key for key in self._entries if key.startswith(prefix)]
        for key in doomed:
            del self._entries[key]
        for key in [key for key in self._inflight if key.startswith(prefix)]:
            del self._inflight[key]
        return len(doomed)

    def clear_all(self) -> None:
        self._entries.clear()
        self._inflight.clear()

    def cleanup_expired(self) -> int:
        """Remove stale entries (full scan). Returns the number removed."""
        now = self._clock()
        stale = [key for key, entry in self._entries.items() if entry.expires_at <= now]
        for key in stale:
            del self._entries[key]
        return len(stale)

    def stats(self) -> dict:
        return {"size": len(self._entries), "keys": list(self._entries)}

    # ─── Background sweeper ──────────────────────────────────────

    @property
    def sweeper_running(self) -> bool:
        return self._sweeper is not None and not self._sweeper.done()

    def start_sweeper(
        self, interval_seconds: float = DEFAULT_SWEEP_INTERVAL_SECONDS,
    ) -> None:
        """Schedule cleanup_expired() every interval on the running loop."""
        if self.sweeper_running:
            return
        self._sweeper = asyncio.get_running_loop().create_task(
            self._sweep_forever(interval_seconds), name="ttl-cache-sweeper",
        )

    async def stop_sweeper(self) -> None:
        """Cancel the sweeper task and wait for it to finish."""
        task, self._sweeper = self._sweeper, None
        if task is None:
            return
        task.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await task

    async def _sweep_forever(self, interval_seconds: float) -> None:
        while True:
            await asyncio.sleep(interval_seconds)
            removed = self.cleanup_expired()
            logger.info(
                "Cache cleanup completed",
                extra={"cache_removed": removed, "cache_size": len(self._entries)},
            )
