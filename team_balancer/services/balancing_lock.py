"""Balancing Lock: serializes query -> decide -> act balancing steps per cohort.

Invariants:
    - At most one balancing operation per cohort key runs at a time in this process
    - Locks are created lazily and reused for the life of the process
    - Released on every exit path (async context manager)

Design Decisions:
    - asyncio.Lock keyed by cohort, not by team: join and merge decisions read
      counts of ALL teams, so a per-team lock would still let two decisions
      act on the same stale snapshot
    - In-process only: multi-worker deployments must route one cohort's events
      to a single consumer (ADR: no distributed lock dependency)
"""

import asyncio
import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

logger = logging.getLogger(__name__)

DEFAULT_COHORT_KEY = "default"


class BalancingLock:
    """Keyed asyncio locks guarding team balancing decisions."""

    def __init__(self):
        self._locks: dict[str, asyncio.Lock] = {}

    def _lock_for(self, key: str) -> asyncio.Lock:
        lock = self._locks.get(key)
        if lock is None:
            lock = asyncio.Lock()
            self._locks[key] = lock
        return lock

    def is_locked(self, key: str = DEFAULT_COHORT_KEY) -> bool:
        lock = self._locks.get(key)
        return lock is not None and lock.locked()

    @asynccontextmanager
    async def hold(self, key: str = DEFAULT_COHORT_KEY) -> AsyncIterator[None]:
        lock = self._lock_for(key)
        if lock.locked():
            logger.debug(f"Waiting for balancing lock '{key}'")
        async with lock:
            yield
