from .book_service import BookService
from .metrics import BookMetrics
from .notification_publisher import NotificationPublisher
from .redis_service import RedisService

__all__ = [
    "BookMetrics",
    "BookService",
    "NotificationPublisher",
    "RedisService",
]
