"""Per-user serialisation of cart mutations and checkout.

One lock per user id, created on demand and dropped once nobody holds or
waits for it. The guard is process-wide; across worker processes the
aggregate version check on save is what rejects a stale cart.
"""

import threading
from contextlib import contextmanager

import structlog

from storefront.exceptions import ConflictError

logger = structlog.get_logger(__name__)


class CartGuard:
    def __init__(self, timeout: float = 5.0):
        self.timeout = timeout
        self._registry_lock = threading.Lock()
        # user id -> [lock, number of holders and waiters]
        self._locks: dict[str, list] = {}

    @contextmanager
    def hold(self, user_id):
        """Hold the user's cart lock for the duration of the block.

        Raises ``ConflictError`` if the lock is not acquired within ``timeout``
        seconds. Nothing runs inside the block in that case.
        """
        key = str(user_id)
        with self._registry_lock:
            entry = self._locks.setdefault(key, [threading.Lock(), 0])
            entry[1] += 1
        lock = entry[0]

        try:
            if not lock.acquire(timeout=self.timeout):
                logger.warning("Cart lock timed out", user_id=key, timeout=self.timeout)
                raise ConflictError()
            try:
                yield
            finally:
                lock.release()
        finally:
            with self._registry_lock:
                entry[1] -= 1
                if entry[1] == 0:
                    del self._locks[key]

    def __len__(self):
        with self._registry_lock:
            return len(self._locks)
