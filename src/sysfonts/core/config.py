"""Configuration management for the system font fallback library."""

import logging
from pathlib import Path

import yaml
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .exceptions import ConfigurationError, InvalidLogLevelError

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET")


class FontConfig(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="SYSFONTS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )
    """Font resolution configuration."""

    default_style: str = Field("sans", description="Style used when none is given (sans, serif)")
    default_region: str | None = Field(
        None, description="Region used when none is given; None derives it from the locale"
    )
    extra_font_dirs: list[Path] = Field(
        default_factory=list, description="Directories scanned before the platform font dirs"
    )
    use_fontconfig: bool = Field(True, description="Ask fc-match for families on Linux")
    fontconfig_timeout: float = Field(5.0, gt=0.0, description="fc-match timeout in seconds")
    locale_env_vars: list[str] = Field(
        ["LANG", "LC_ALL", "LC_CTYPE"], description="Environment variables logged by the CLI"
    )

    @field_validator("default_style")
    @classmethod
    def validate_default_style(cls, v):
        v = v.lower()
        if v not in ("sans", "serif"):
            raise ValueError("default_style must be 'sans' or 'serif'")
        return v

    @field_validator("extra_font_dirs")
    @classmethod
    def expand_font_dirs(cls, v):
        """Expand ``~`` in configured font directories."""
        return [Path(p).expanduser() for p in v]


class AppConfig(BaseSettings):
    """Main application configuration that loads from multiple sources."""

    model_config = SettingsConfigDict(
        env_prefix="APP_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    log_level: str = Field("INFO", description="Application log level")
    log_format: str = Field(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s", description="Log format"
    )

    fonts: FontConfig = Field(default_factory=FontConfig)

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v):
        v = v.upper()
        if v not in _LOG_LEVELS:
            raise InvalidLogLevelError(v)
        return v

    def configure_logging(self) -> None:
        """Apply ``log_level`` and ``log_format`` to the root logger."""
        logging.basicConfig(level=getattr(logging, self.log_level), format=self.log_format)

    @classmethod
    def load_from_env(cls, env_file: str | Path | None = ".env") -> "AppConfig":
        """Load configuration from environment variables and .env file."""
        if env_file:
            env_file = Path(env_file)
            if env_file.exists():
                return cls(_env_file=env_file)
        return cls()


def load_config_from_yaml(config_path: str | Path, config_class: type) -> BaseSettings:
    """Load configuration from YAML file."""
    config_path = Path(config_path)

    if not config_path.exists():
        raise ConfigurationError(f"Configuration file not found: {config_path}")

    try:
        with open(config_path) as f:
            config_data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in {config_path}: {e}") from e

    if config_data is None:
        raise ConfigurationError(f"Empty configuration file: {config_path}")
    if not isinstance(config_data, dict):
        raise ConfigurationError(f"Configuration must be a mapping: {config_path}")

    try:
        # YAML-based configs must not pick up values from .env
        class TempConfig(config_class):
            model_config = SettingsConfigDict(
                env_file=None,
                case_sensitive=False,
                extra="ignore",
            )

        return TempConfig(**config_data)
    except Exception as e:
        raise ConfigurationError(f"Failed to load configuration: {e}", details=config_data) from e


def _add_yaml_methods():
    """Add YAML loading methods to configuration classes."""

    @classmethod
    def from_yaml(cls, config_path: str | Path):
        """Load configuration from YAML file."""
        return load_config_from_yaml(config_path, cls)

    for config_class in [FontConfig, AppConfig]:
        config_class.from_yaml = from_yaml


_add_yaml_methods()
