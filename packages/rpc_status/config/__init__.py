"""Public API for status boundary configuration."""

from .loader import load_settings
from .models import (
    DEFAULT_CONFIG_PATH,
    DEFAULT_MAX_UNWRAP_DEPTH,
    ConverterSettings,
    LoggingSettings,
    StatusSettings,
)

__all__ = [
    "DEFAULT_CONFIG_PATH",
    "DEFAULT_MAX_UNWRAP_DEPTH",
    "ConverterSettings",
    "LoggingSettings",
    "StatusSettings",
    "load_settings",
]
