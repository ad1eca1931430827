"""Redis connection service for managing Redis client lifecycle and health checks."""

from typing import Any

import redis.asyncio as redis_async
from loguru import logger
from redis.asyncio.retry import Retry
from redis.backoff import ExponentialBackoff

from bff_books.runtime.config.config_data import RedisConfig
from bff_books.runtime.context import get_config


class RedisService:
    """Service for managing the Redis connection used for pub/sub.

    The client connects lazily on first command, so a Redis outage at startup
    never keeps the API from serving requests.
    """

    def __init__(self, redis_config: RedisConfig | None = None):
        logger.info("Setting up Redis service")
        redis_config = redis_config or get_config().redis

        self._enabled = redis_config.enabled
        self._client: redis_async.Redis | None = None
        self._connection_string = redis_config.connection_string

        if not self._enabled:
            logger.info("Redis is disabled, service will not connect")
            return

        logger.info(
            "Initializing Redis client with connection string: {}",
            redis_config.sanitized_connection_string,
        )

        retry = Retry(
            ExponentialBackoff(base=1, cap=10),
            retries=redis_config.retries,
        )

        self._client = redis_async.from_url(
            self._connection_string,
            encoding="utf-8",
            decode_responses=redis_config.decode_responses,
            encoding_errors="replace",
            max_connections=redis_config.max_connections,
            socket_timeout=redis_config.socket_timeout,
            socket_connect_timeout=redis_config.socket_connect_timeout,
            socket_keepalive=True,
            health_check_interval=30,
            retry=retry,
            client_name="bff_books",
        )

        logger.info(
            "Redis client initialized",
            max_connections=redis_config.max_connections,
            socket_timeout=redis_config.socket_timeout,
        )

    def get_client(self) -> redis_async.Redis | None:
        """Get the Redis async client instance.

        Returns:
            Redis async client if enabled, None otherwise.
        """
        if not self._enabled:
            logger.debug("Redis is disabled, returning None")
            return None

        return self._client

    async def health_check(self) -> bool:
        """Perform a health check on the Redis connection.

        Returns:
            True if Redis is healthy and reachable, False otherwise.
        """
        if not self._enabled or not self._client:
            logger.debug("Redis is disabled, health check skipped")
            return False

        try:
            await self._client.ping()
            return True
        except Exception as e:
            logger.error(
                "Redis health check failed",
                error_type=type(e).__name__,
                error_message=str(e),
            )
            return False

    async def get_info(self) -> dict[str, Any] | None:
        """Get Redis server information for monitoring.

        Returns:
            Dictionary with Redis server info, or None if not available.
        """
        if not self._enabled or not self._client:
            return None

        try:
            info = await self._client.info()
            return {
                "version": info.get("redis_version"),
                "uptime_seconds": info.get("uptime_in_seconds"),
                "connected_clients": info.get("connected_clients"),
                "used_memory_human": info.get("used_memory_human"),
            }
        except Exception as e:
            logger.error(
                "Failed to get Redis info",
                error_type=type(e).__name__,
                error_message=str(e),
            )
            return None

    async def close(self) -> None:
        """Close the Redis connection and clean up resources."""
        if self._client:
            try:
                logger.info("Closing Redis connection")
                await self._client.aclose()
                logger.info("Redis connection closed successfully")
            except Exception as e:
                logger.error(
                    "Error closing Redis connection",
                    error_type=type(e).__name__,
                    error_message=str(e),
                )
            finally:
                self._client = None

    @property
    def is_enabled(self) -> bool:
        """Check if Redis service is enabled."""
        return self._enabled
