"""
Memory Cache: In-Process TTL Key-Value Cache

A small in-memory cache mapping string keys to string values, where
every entry expires after its time-to-live. Expired entries are
removed lazily, on the next read.
"""

from .cache.store import Cache

__version__ = "1.0.0"

__all__ = ["Cache"]
