"""Books backend-for-frontend microservice."""

__version__ = "0.1.0"
