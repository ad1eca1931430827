"""Pydantic models for parsing the config.yaml configuration file.

This module contains Pydantic models that correspond to the structure of config.yaml.
These models handle validation and type conversion of the YAML configuration data.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field, computed_field


class AppConfig(BaseModel):
    """Application configuration model."""

    environment: Literal["development", "production", "test"] = Field(
        default="development", description="Application environment"
    )
    title: str = Field(default="Books BFF", description="OpenAPI title")
    host: str = Field(default="localhost", description="Application host")
    port: int = Field(default=8000, description="Application port")


class ApiConfig(BaseModel):
    """Book API behaviour switches."""

    strict_not_found: bool = Field(
        default=False,
        description=(
            "Answer missing books with 404 instead of the generic 500 error response"
        ),
    )


class RedisConfig(BaseModel):
    """Redis pub/sub configuration model."""

    enabled: bool = Field(default=True, description="Enable Redis service")
    host: str = Field(default="localhost", description="Redis host")
    port: int = Field(default=6379, description="Redis port")
    db: int = Field(default=0, description="Redis logical database")
    url: str | None = Field(
        default=None, description="Redis connection URL, overrides host/port/db"
    )
    password: str | None = Field(
        default=None, description="Password for Redis authentication"
    )
    channel: str = Field(
        default="books", description="Channel new books are published on"
    )
    decode_responses: bool = Field(
        default=True, description="Decode Redis responses to strings"
    )
    max_connections: int = Field(default=10, description="Connection pool size")
    socket_timeout: float = Field(default=5.0, description="Socket timeout in seconds")
    socket_connect_timeout: float = Field(
        default=2.0, description="Socket connect timeout in seconds"
    )
    retries: int = Field(
        default=0, description="Retries per command, 0 means a single attempt"
    )

    @computed_field
    @property
    def connection_string(self) -> str:
        """Construct the Redis connection string with password if provided."""
        url = self.url or f"redis://{self.host}:{self.port}/{self.db}"
        if self.password:
            if "@" in url:
                # URL already has auth info
                return url
            parts = url.split("://", 1)
            if len(parts) == 2:
                scheme, rest = parts
                return f"{scheme}://:{self.password}@{rest}"
        return url

    @property
    def sanitized_connection_string(self) -> str:
        """Connection string safe to write to logs."""
        if self.password:
            return self.connection_string.replace(self.password, "***")
        return self.connection_string


class LoggingConfig(BaseModel):
    """Logging configuration model."""

    level: str = Field(default="INFO", description="Logging level")
    format: Literal["json", "plain"] = Field(default="json", description="Log format")
    file: str | None = Field(default=None, description="Log file path")
    max_size_mb: int = Field(default=10, description="Maximum log file size in MB")
    backup_count: int = Field(
        default=5, description="Number of backup log files to keep"
    )


class MetricsConfig(BaseModel):
    """Prometheus metrics configuration."""

    enabled: bool = Field(default=True, description="Expose the /metrics endpoint")


class ConfigData(BaseModel):
    """Root configuration model that matches the config.yaml structure."""

    app: AppConfig = Field(
        default_factory=AppConfig, description="Application configuration"
    )
    api: ApiConfig = Field(default_factory=ApiConfig, description="Book API settings")
    redis: RedisConfig = Field(
        default_factory=RedisConfig, description="Redis configuration"
    )
    logging: LoggingConfig = Field(
        default_factory=LoggingConfig, description="Logging configuration"
    )
    metrics: MetricsConfig = Field(
        default_factory=MetricsConfig, description="Metrics configuration"
    )
