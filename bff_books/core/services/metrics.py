"""Prometheus metrics for the book API."""

from prometheus_client import CONTENT_TYPE_LATEST, CollectorRegistry, Counter, Histogram
from prometheus_client import generate_latest

_LABELS = {"ControllerName": "BookController", "ServiceName": "BookService"}


class BookMetrics:
    """Request/error counters and a request timer.

    Each instance owns its registry so several applications (tests, mostly)
    can live in one process without duplicate registration errors.
    """

    def __init__(self, registry: CollectorRegistry | None = None):
        self.registry = registry or CollectorRegistry()
        self._requests = Counter(
            "request_count",
            "Requests handled by the book API",
            list(_LABELS),
            registry=self.registry,
        )
        self._errors = Counter(
            "error_count",
            "Failures handled by the book API",
            list(_LABELS),
            registry=self.registry,
        )
        self.request_duration = Histogram(
            "http_server_requests_seconds",
            "HTTP request duration",
            ["method", "route", "status"],
            registry=self.registry,
        )
        self.request_count = self._requests.labels(**_LABELS)
        self.error_count = self._errors.labels(**_LABELS)

    def record_request(self) -> None:
        self.request_count.inc()

    def record_error(self) -> None:
        self.error_count.inc()

    def observe(self, method: str, route: str, status: int, seconds: float) -> None:
        self.request_duration.labels(method, route, str(status)).observe(seconds)

    def render(self) -> tuple[bytes, str]:
        """Prometheus text exposition and its content type."""
        return generate_latest(self.registry), CONTENT_TYPE_LATEST
