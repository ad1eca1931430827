from .config_data import (
    ApiConfig,
    AppConfig,
    ConfigData,
    LoggingConfig,
    MetricsConfig,
    RedisConfig,
)
from .config_template import load_templated_yaml, substitute_env_vars

__all__ = [
    "ApiConfig",
    "AppConfig",
    "ConfigData",
    "LoggingConfig",
    "MetricsConfig",
    "RedisConfig",
    "load_templated_yaml",
    "substitute_env_vars",
]
