"""API key sources and round-robin rotation."""

from __future__ import annotations

import threading
from collections.abc import Iterable

from .logging import get_logger

logger = get_logger("keys")


class KeyRing:
    """Resolve the key for each request attempt.

    Priority: override key, then the round-robin pool, then the legacy key.
    The attempt counter advances on every call to ``next_key``, including
    attempts that end up without a key.
    """

    def __init__(
        self,
        pool: Iterable[str] = (),
        *,
        override_key: str | None = None,
        legacy_key: str | None = None,
    ) -> None:
        self._pool = tuple(key for key in pool if key)
        self._override_key = override_key or None
        self._legacy_key = legacy_key or None
        self._request_number = 0
        self._lock = threading.Lock()
        logger.info("api_keys_loaded", extra={"extra": {"pool_size": len(self._pool)}})

    @property
    def pool_size(self) -> int:
        return len(self._pool)

    @property
    def request_number(self) -> int:
        return self._request_number

    def has_key(self) -> bool:
        return bool(self._override_key or self._pool or self._legacy_key)

    def set_override_key(self, key: str | None) -> None:
        self._override_key = key or None

    def _advance(self) -> int:
        with self._lock:
            number = self._request_number
            self._request_number += 1
            return number

    def next_key(self) -> str | None:
        number = self._advance()
        if self._override_key:
            logger.info("api_key_selected", extra={"extra": {"source": "override"}})
            return self._override_key
        if self._pool:
            index = number % len(self._pool)
            logger.info("api_key_selected", extra={"extra": {"source": "pool", "index": index}})
            return self._pool[index]
        if self._legacy_key:
            logger.info("api_key_selected", extra={"extra": {"source": "legacy"}})
            return self._legacy_key
        return None
