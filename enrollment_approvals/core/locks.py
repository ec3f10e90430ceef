"""Per-offer mutual exclusion for capacity decisions.

Approvals for the same offer must read the approved count and write the new
state without another approval in between. Inside one process this registry
hands out one lock per offer id; across processes the ``SELECT ... FOR UPDATE``
on the offer row (PostgreSQL) does the same job.
"""
from __future__ import annotations

import threading
import weakref
from contextlib import contextmanager
from typing import Hashable, Iterator, Optional


class LockTimeoutError(Exception):
    """Raised when an offer lock could not be acquired in time."""

    def __init__(self, key: Hashable, timeout: float):
        super().__init__(f"Tempo esgotado aguardando o bloqueio da oferta {key} ({timeout:g}s)")
        self.key = key
        self.timeout = timeout


class OfferLockRegistry:
    def __init__(self) -> None:
        self._guard = threading.Lock()
        # entrada some quando ninguém mais segura nem espera o lock da oferta
        self._locks: weakref.WeakValueDictionary[Hashable, threading.Lock] = weakref.WeakValueDictionary()

    def _lock_for(self, key: Hashable) -> threading.Lock:
        with self._guard:
            lock = self._locks.get(key)
            if lock is None:
                lock = self._locks[key] = threading.Lock()
            return lock

    @contextmanager
    def hold(self, key: Hashable, timeout: Optional[float] = None) -> Iterator[None]:
        """Hold the lock for ``key``; ``timeout=None`` waits forever."""
        lock = self._lock_for(key)
        acquired = lock.acquire(timeout=-1 if timeout is None else timeout)
        if not acquired:
            raise LockTimeoutError(key, timeout or 0)
        try:
            yield
        finally:
            lock.release()

    def __len__(self) -> int:
        with self._guard:
            return len(self._locks)

    def locked(self, key: Hashable) -> bool:
        with self._guard:
            lock = self._locks.get(key)
        return bool(lock and lock.locked())


# registro compartilhado pelo processo (todas as requisições)
offer_locks = OfferLockRegistry()
