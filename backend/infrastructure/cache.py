"""
Cache abstraction for key-value storage.

Besides plain keys, the cache keeps capped JSON lists (newest first), which
back the payment sync log.
"""
from abc import ABC, abstractmethod
from typing import Optional, Any, List
import json


class Cache(ABC):
    """Abstract cache interface."""

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        """Get value by key. Returns None if not found or expired."""
        pass

    @abstractmethod
    def set(self, key: str, value: str, ttl: Optional[int] = 3600) -> None:
        """Set value with TTL in seconds. ttl=None keeps the key forever."""
        pass

    @abstractmethod
    def delete(self, key: str) -> None:
        """Delete key."""
        pass

    @abstractmethod
    def push_capped(self, key: str, value: str, limit: int) -> None:
        """Prepend value to the list at key, keeping only the first `limit` items."""
        pass

    @abstractmethod
    def get_list(self, key: str) -> List[str]:
        """Get the list at key, newest first. Missing key reads as empty."""
        pass

    def exists(self, key: str) -> bool:
        return self.get(key) is not None

    def get_json(self, key: str) -> Optional[Any]:
        """Get and deserialize JSON value."""
        value = self.get(key)
        if value is None:
            return None
        return json.loads(value)

    def set_json(self, key: str, value: Any, ttl: Optional[int] = 3600) -> None:
        """Serialize and set JSON value."""
        self.set(key, json.dumps(value, ensure_ascii=False), ttl=ttl)

    def push_json(self, key: str, value: Any, limit: int) -> None:
        self.push_capped(key, json.dumps(value, ensure_ascii=False), limit)

    def get_json_list(self, key: str) -> List[Any]:
        return [json.loads(item) for item in self.get_list(key)]


class RedisCache(Cache):
    """Redis cache implementation."""

    def __init__(self, redis_url: str):
        import redis
        self._client = redis.from_url(redis_url, decode_responses=True)

    def get(self, key: str) -> Optional[str]:
        return self._client.get(key)

    def set(self, key: str, value: str, ttl: Optional[int] = 3600) -> None:
        if ttl:
            self._client.setex(key, ttl, value)
        else:
            self._client.set(key, value)

    def delete(self, key: str) -> None:
        self._client.delete(key)

    def exists(self, key: str) -> bool:
        return bool(self._client.exists(key))

    def push_capped(self, key: str, value: str, limit: int) -> None:
        pipe = self._client.pipeline()
        pipe.lpush(key, value)
        pipe.ltrim(key, 0, limit - 1)
        pipe.execute()

    def get_list(self, key: str) -> List[str]:
        return self._client.lrange(key, 0, -1)


class FakeCache(Cache):
    """
    In-memory cache for testing.
    Expiry is checked against a manual clock moved with advance_clock().
    """

    def __init__(self):
        self._store: dict[str, tuple[str, int]] = {}  # key -> (value, expiry_unix)
        self._lists: dict[str, List[str]] = {}
        self._clock_unix: int = 1740994200

    def get(self, key: str) -> Optional[str]:
        if key not in self._store:
            return None

        value, expiry = self._store[key]
        if expiry > 0 and self._clock_unix >= expiry:
            del self._store[key]
            return None

        return value

    def set(self, key: str, value: str, ttl: Optional[int] = 3600) -> None:
        expiry = self._clock_unix + ttl if ttl else 0
        self._store[key] = (value, expiry)

    def delete(self, key: str) -> None:
        self._store.pop(key, None)
        self._lists.pop(key, None)

    def push_capped(self, key: str, value: str, limit: int) -> None:
        items = self._lists.setdefault(key, [])
        items.insert(0, value)
        del items[limit:]

    def get_list(self, key: str) -> List[str]:
        return list(self._lists.get(key, []))

    def clear(self) -> None:
        """Clear all keys (for test cleanup)."""
        self._store.clear()
        self._lists.clear()

    def advance_clock(self, seconds: int) -> None:
        """Advance fake clock."""
        self._clock_unix += seconds
