"""Configuration domain exports."""

from .config_scaffold_builder import (
    DEFAULT_CONFIG_FILENAME,
    build_placeholder_configuration,
    write_placeholder_configuration,
)
from .loader import ConfigurationError, load_configuration
from .runtime_settings import (
    DEFAULT_ENDPOINT_URL,
    DEFAULT_ENV,
    SUPPORTED_ENVS,
    ConfigErrorKind,
    Configuration,
)

__all__ = [
    "Configuration",
    "ConfigErrorKind",
    "ConfigurationError",
    "load_configuration",
    "DEFAULT_CONFIG_FILENAME",
    "DEFAULT_ENDPOINT_URL",
    "DEFAULT_ENV",
    "SUPPORTED_ENVS",
    "build_placeholder_configuration",
    "write_placeholder_configuration",
]
