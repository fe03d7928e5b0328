"""Custom exceptions for the system font fallback library."""

from typing import Any


class SysFontsError(Exception):
    """Base exception for all sysfonts errors."""

    def __init__(self, message: str, details: Any | None = None):
        super().__init__(message)
        self.details = details


class ConfigurationError(SysFontsError):
    """Exception raised for configuration errors."""


class ValidationError(SysFontsError):
    """Exception raised for input validation errors."""


class UnknownRegionError(ValidationError):
    """Exception raised when a region name does not match any known region."""

    def __init__(self, region: Any):
        super().__init__(f"Unknown font region: {region!r}", details={"region": region})


class UnknownPresetError(ValidationError):
    """Exception raised when a preset name does not match any known preset."""

    def __init__(self, preset: Any):
        super().__init__(f"Unknown font preset: {preset!r}", details={"preset": preset})


class UnknownStyleError(ValidationError):
    """Exception raised when a style name is neither sans nor serif."""

    def __init__(self, style: Any):
        super().__init__(f"Unknown font style: {style!r}", details={"style": style})


class InvalidLogLevelError(ConfigurationError, ValueError):
    """
    Exception raised for log level names the logging module does not know.

    Also a ValueError so pydantic validators report it as a field error.
    """

    def __init__(self, level: str):
        super().__init__(f"Invalid log level: {level}", details={"log_level": level})
