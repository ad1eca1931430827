"""Book API router."""

from uuid import UUID

from fastapi import APIRouter, Depends
from loguru import logger

from bff_books.api.http.deps import get_book_service, get_metrics, get_publisher
from bff_books.core.services import BookMetrics, BookService, NotificationPublisher
from bff_books.entities.book import BookResponse, CreateBookCommand

router = APIRouter(prefix="/api/v1/books", tags=["books"])


@router.get("", response_model=list[BookResponse], include_in_schema=False)
@router.get("/", response_model=list[BookResponse])
def list_books(
    service: BookService = Depends(get_book_service),
    metrics: BookMetrics = Depends(get_metrics),
) -> list[BookResponse]:
    """List all books."""
    metrics.record_request()
    logger.info("Get book list")
    return [BookResponse.from_book(book) for book in service.get_books()]


@router.get("/{book_id}", response_model=BookResponse)
def get_book(
    book_id: UUID,
    service: BookService = Depends(get_book_service),
    metrics: BookMetrics = Depends(get_metrics),
) -> BookResponse:
    """Get a book by ID."""
    metrics.record_request()
    logger.info("Find book by id {}", book_id)
    return BookResponse.from_book(service.get_by_id(book_id))


@router.post("", response_model=BookResponse, include_in_schema=False)
@router.post("/", response_model=BookResponse)
async def create_book(
    command: CreateBookCommand,
    service: BookService = Depends(get_book_service),
    publisher: NotificationPublisher = Depends(get_publisher),
    metrics: BookMetrics = Depends(get_metrics),
) -> BookResponse:
    """Create a book and announce it on the notification channel."""
    metrics.record_request()
    logger.info("Create books")
    response = BookResponse.from_book(service.create(command))
    await publisher.publish(response)
    return response
