# mpesa_statement/controllers/result_store.py
from __future__ import annotations

import logging
import threading
import time
import uuid
from collections import OrderedDict
from dataclasses import dataclass
from typing import Callable, Dict, Mapping, Optional

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class _Entry:
    files: Dict[str, bytes]
    expires_at: float


class StatementResultStore:
    """
    Short-lived holding area for rendered files awaiting a second download request.

    Bounded two ways: entries expire `ttl_seconds` after `put`, and at most
    `max_entries` are kept (oldest evicted first). Tokens are random, so one
    caller cannot guess another caller's files.
    """

    def __init__(
        self,
        max_entries: int = 32,
        ttl_seconds: float = 600.0,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if max_entries < 1:
            raise ValueError("max_entries must be at least 1")
        if ttl_seconds <= 0:
            raise ValueError("ttl_seconds must be positive")
        self.max_entries = max_entries
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._entries: "OrderedDict[str, _Entry]" = OrderedDict()
        self._lock = threading.Lock()

    def put(self, files: Mapping[str, bytes]) -> str:
        """Store a kind → bytes mapping; return the token that retrieves it."""
        token = uuid.uuid4().hex
        with self._lock:
            self._evict_expired_locked()
            self._entries[token] = _Entry(
                files=dict(files), expires_at=self._clock() + self.ttl_seconds
            )
            while len(self._entries) > self.max_entries:
                evicted, _ = self._entries.popitem(last=False)
                log.debug("Evicted result %s (store full)", evicted)
        return token

    def get(self, token: str, kind: str) -> Optional[bytes]:
        """The stored file, or None for unknown, expired or missing kinds."""
        with self._lock:
            entry = self._entries.get(token)
            if entry is None:
                return None
            if entry.expires_at <= self._clock():
                del self._entries[token]
                log.debug("Evicted result %s (expired)", token)
                return None
            return entry.files.get(kind)

    def discard(self, token: str) -> bool:
        with self._lock:
            return self._entries.pop(token, None) is not None

    def evict_expired(self) -> int:
        with self._lock:
            return self._evict_expired_locked()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def _evict_expired_locked(self) -> int:
        now = self._clock()
        expired = [t for t, e in self._entries.items() if e.expires_at <= now]
        for token in expired:
            del self._entries[token]
        if expired:
            log.debug("Evicted %d expired results", len(expired))
        return len(expired)
