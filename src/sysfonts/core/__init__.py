"""Core components for system font fallback."""

from .config import AppConfig, FontConfig
from .exceptions import (
    ConfigurationError,
    SysFontsError,
    UnknownPresetError,
    UnknownRegionError,
    UnknownStyleError,
    ValidationError,
)

__all__ = [
    "AppConfig",
    "ConfigurationError",
    "FontConfig",
    "SysFontsError",
    "UnknownPresetError",
    "UnknownRegionError",
    "UnknownStyleError",
    "ValidationError",
]
