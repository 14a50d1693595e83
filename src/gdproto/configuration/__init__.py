"""Configuration domain exports."""

from .config_scaffold_builder import (
    DEFAULT_CONFIG_FILENAME,
    build_placeholder_configuration,
    write_placeholder_configuration,
)
from .loader import DEFAULT_EXTENSION_NAME, ConfigurationError, load_configuration
from .runtime_settings import Configuration, GenerationSettings, ResolutionSettings

__all__ = [
    "Configuration",
    "GenerationSettings",
    "ResolutionSettings",
    "ConfigurationError",
    "load_configuration",
    "DEFAULT_CONFIG_FILENAME",
    "DEFAULT_EXTENSION_NAME",
    "build_placeholder_configuration",
    "write_placeholder_configuration",
]
