"""FastAPI dependency implementations."""

from fastapi import Request

from bff_books.api.http.app_data import ApplicationDependencies
from bff_books.core.services import BookMetrics, BookService, NotificationPublisher


def get_app_dependencies(request: Request) -> ApplicationDependencies:
    return request.app.state.app_dependencies


def get_book_service(request: Request) -> BookService:
    """Get the Book service instance."""
    app_deps: ApplicationDependencies = request.app.state.app_dependencies
    return app_deps.book_service


def get_publisher(request: Request) -> NotificationPublisher:
    """Get the notification publisher instance."""
    app_deps: ApplicationDependencies = request.app.state.app_dependencies
    return app_deps.publisher


def get_metrics(request: Request) -> BookMetrics:
    """Get the metrics instance."""
    app_deps: ApplicationDependencies = request.app.state.app_dependencies
    return app_deps.metrics
