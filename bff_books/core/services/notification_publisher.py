"""Best-effort publishing of book events to Redis pub/sub."""

from typing import Protocol

from loguru import logger

from bff_books.entities.book import BookResponse


class RedisClientProvider(Protocol):
    def get_client(self): ...


class NotificationPublisher:
    """Publish newly created books on a Redis channel.

    Delivery is at-most-once: a single attempt is made and any failure is
    logged, never raised, so book creation always succeeds on its own terms.
    """

    def __init__(self, redis_service: RedisClientProvider, channel: str):
        self._redis_service = redis_service
        self._channel = channel

    @property
    def channel(self) -> str:
        return self._channel

    async def publish(self, book: BookResponse) -> bool:
        """Send ``book`` to the channel.

        Returns:
            True if Redis accepted the message, False if it was dropped.
        """
        try:
            client = self._redis_service.get_client()
            if client is None:
                logger.warning(
                    "Redis unavailable, dropping notification for book {}", book.id
                )
                return False

            receivers = await client.publish(self._channel, book.to_message())
            logger.debug(
                "Published book {} to channel {} ({} receivers)",
                book.id,
                self._channel,
                receivers,
            )
            return True
        except Exception:
            logger.exception("Push Notification Error")
            return False
