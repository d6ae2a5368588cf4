"""
Cache Store Module

This module implements the expiration-aware storage engine.

Every entry is stored with an absolute deadline computed at insertion
time. Nothing sweeps the store in the background: an entry whose
deadline has passed is only removed when it is next read with get(),
or when it is invalidated or overwritten.
"""

import logging
from dataclasses import dataclass
from datetime import timedelta
from typing import Optional, Dict, Any, Union

from ..config.settings import settings
from .clock import Clock, system_clock

logger = logging.getLogger(__name__)

TTL = Union[int, float, timedelta]


@dataclass
class Entry:
    """
    A single cached value.

    Attributes:
        key: The key the entry is stored under
        value: The stored payload
        expires_at: Absolute deadline on the cache's clock
    """
    key: str
    value: str
    expires_at: float

    def is_expired(self, now: float) -> bool:
        """An entry is expired from its deadline onwards."""
        return now >= self.expires_at


def ttl_seconds(ttl: TTL) -> float:
    """
    Normalize a time-to-live into seconds.

    Accepts seconds as int/float or a timedelta. Negative durations
    are clamped to 0, which makes the entry expire immediately.
    """
    if isinstance(ttl, timedelta):
        ttl = ttl.total_seconds()
    return max(float(ttl), 0.0)


class Cache:
    """
    In-memory key-value cache with per-entry expiration.

    Operations:
    - insert: Store or overwrite a key with a time-to-live
    - get: Retrieve a value, lazily evicting it if expired
    - invalidate: Remove a key whether or not it has expired

    Internal Storage:
        Uses a dict for O(1) operations.
        Format: key -> Entry(key, value, expires_at)

    Attributes:
        clock: Callable returning the current time in seconds
        default_ttl: TTL used by insert() when none is given
    """

    def __init__(self, clock: Optional[Clock] = None, default_ttl: Optional[TTL] = None):
        """
        Initialize the cache.

        Args:
            clock: Time source (default: time.monotonic)
            default_ttl: Default time-to-live (default from settings.DEFAULT_TTL)
        """
        self.clock = clock if clock is not None else system_clock
        self.default_ttl = ttl_seconds(
            default_ttl if default_ttl is not None else settings.DEFAULT_TTL
        )

        self._store: Dict[str, Entry] = {}

    def insert(self, key: str, value: str, ttl: Optional[TTL] = None) -> None:
        """
        Insert or overwrite a key-value pair.

        Args:
            key: The key to store
            value: The value to associate with the key
            ttl: Time-to-live in seconds or as a timedelta.
                 0 (or negative) means the entry is already expired.

        An existing entry for the key is replaced entirely, value and
        deadline both.
        """
        seconds = self.default_ttl if ttl is None else ttl_seconds(ttl)
        self._store[key] = Entry(key=key, value=value, expires_at=self.clock() + seconds)

    def get(self, key: str) -> Optional[str]:
        """
        Retrieve the value for a given key.

        Args:
            key: The key to look up

        Returns:
            The value if found and not expired, None otherwise.
            An expired entry is removed from the store before returning.
        """
        entry = self._store.get(key)
        if entry is None:
            return None

        if entry.is_expired(self.clock()):
            # Lazy expiration
            del self._store[key]
            logger.debug(f"Evicted expired key {key!r}")
            return None

        return entry.value

    def invalidate(self, key: str) -> None:
        """
        Remove any entry for a key, expired or not.

        Invalidating a missing key does nothing.
        """
        if self._store.pop(key, None) is not None:
            logger.debug(f"Invalidated key {key!r}")

    def size(self) -> int:
        """
        Get the current number of keys in the store.

        Note: This includes expired keys that haven't been read since
        they expired.
        """
        return len(self._store)

    def clear(self) -> None:
        """Remove all keys from the store."""
        self._store.clear()

    def get_stats(self) -> Dict[str, Any]:
        """
        Get statistics about the store without evicting anything.

        Returns:
            Dictionary containing:
            - total_keys: Total keys in store
            - expired_keys: Count of expired (but not yet evicted) keys
            - active_keys: Count of non-expired keys
        """
        now = self.clock()
        total = len(self._store)
        expired = sum(1 for entry in self._store.values() if entry.is_expired(now))

        return {
            "total_keys": total,
            "expired_keys": expired,
            "active_keys": total - expired,
        }
