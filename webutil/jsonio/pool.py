"""Pool of reusable scratch buffers for JSON decoding."""

from __future__ import annotations

import threading
from collections.abc import Iterator
from contextlib import contextmanager

from webutil.core.config import settings


class BufferPool:
    """Thread-safe pool of reusable bytearray buffers.

    A buffer handed out by acquire() is owned by the caller until the
    context exits. It is cleared and returned to the pool on every exit
    path, including exceptions.

    Usage:
        with pool.acquire() as buf:
            buf.extend(chunk)
    """

    def __init__(self, max_idle: int | None = None) -> None:
        self.max_idle = settings.json.pool_max_idle if max_idle is None else max_idle
        self._idle: list[bytearray] = []
        self._lock = threading.Lock()

    def get(self) -> bytearray:
        """Take an empty buffer from the pool, allocating one if none is idle."""
        with self._lock:
            if self._idle:
                return self._idle.pop()
        return bytearray()

    def put(self, buf: bytearray) -> None:
        """Clear buf and return it to the pool."""
        buf.clear()
        with self._lock:
            if len(self._idle) < self.max_idle:
                self._idle.append(buf)

    @contextmanager
    def acquire(self) -> Iterator[bytearray]:
        """Lend a buffer for the duration of the with block."""
        buf = self.get()
        try:
            yield buf
        finally:
            self.put(buf)

    @property
    def idle(self) -> int:
        """Number of buffers waiting in the pool."""
        with self._lock:
            return len(self._idle)


default_pool = BufferPool()
