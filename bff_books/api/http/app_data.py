from dataclasses import dataclass

from bff_books.core.services import (
    BookMetrics,
    BookService,
    NotificationPublisher,
    RedisService,
)
from bff_books.core.storage import BookStore
from bff_books.runtime.config.config_data import ConfigData


@dataclass
class ApplicationDependencies:
    book_store: BookStore
    book_service: BookService
    redis_service: RedisService
    publisher: NotificationPublisher
    metrics: BookMetrics


def build_dependencies(
    config: ConfigData, redis_service: RedisService | None = None
) -> ApplicationDependencies:
    """Wire the application's services around a fresh, empty store."""
    book_store = BookStore()
    redis_service = redis_service or RedisService(config.redis)
    return ApplicationDependencies(
        book_store=book_store,
        book_service=BookService(book_store),
        redis_service=redis_service,
        publisher=NotificationPublisher(redis_service, config.redis.channel),
        metrics=BookMetrics(),
    )
