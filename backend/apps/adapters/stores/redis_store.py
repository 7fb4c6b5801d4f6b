# apps/adapters/stores/redis_store.py
"""
Redis Subscriber Store

Keeps subscribers in a single Redis set. The client owns a connection
pool: each command checks out a connection and returns it when the
command completes, so no connection outlives a request.
"""
import logging
from contextlib import contextmanager
from typing import Optional, Set

import redis

from apps.domain.models import StoreConnectivityError

logger = logging.getLogger(__name__)

DEFAULT_KEY = "emails"


class RedisSubscriberStore:
    """
    Subscriber store backed by a Redis set

    SADD reports how many members were actually added, which gives an
    atomic insert-if-absent without a separate membership query.
    """

    def __init__(self, client: redis.Redis, key: str = DEFAULT_KEY):
        """
        Initialize Redis store

        Args:
            client: Configured redis-py client (shared, pooled)
            key: Name of the Redis set holding subscriber emails
        """
        self._client = client
        self.key = key

    @classmethod
    def from_url(
        cls,
        url: str,
        key: str = DEFAULT_KEY,
        socket_timeout: Optional[float] = 5.0,
        socket_connect_timeout: Optional[float] = 5.0,
        health_check_interval: int = 30,
    ) -> "RedisSubscriberStore":
        """
        Build a store from a redis:// or rediss:// URL

        The client connects lazily, so this does not touch the network.
        """
        client = redis.Redis.from_url(
            url,
            decode_responses=True,
            socket_timeout=socket_timeout,
            socket_connect_timeout=socket_connect_timeout,
            health_check_interval=health_check_interval,
        )
        return cls(client=client, key=key)

    @contextmanager
    def _command(self, name: str):
        """Translate redis-py failures into StoreConnectivityError"""
        try:
            yield
        except redis.exceptions.RedisError as e:
            logger.error(f"Redis {name} on '{self.key}' failed: {e}")
            raise StoreConnectivityError(f"Subscriber store {name} failed") from e

    def add(self, email: str) -> bool:
        with self._command("SADD"):
            added = self._client.sadd(self.key, email)
        return added == 1

    def contains(self, email: str) -> bool:
        with self._command("SISMEMBER"):
            return bool(self._client.sismember(self.key, email))

    def count(self) -> int:
        with self._command("SCARD"):
            return int(self._client.scard(self.key))

    def members(self) -> Set[str]:
        with self._command("SMEMBERS"):
            return set(self._client.smembers(self.key))

    def ping(self) -> bool:
        with self._command("PING"):
            return bool(self._client.ping())

    def close(self):
        """Release pooled connections"""
        self._client.close()
