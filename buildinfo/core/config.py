"""
buildinfo: Package Settings

This module provides the settings that govern the buildinfo package
itself (logging and environment ingestion). It loads configuration from
environment variables (optionally via a .env file), with strongly typed
access via Pydantic BaseSettings.

These settings are distinct from :class:`buildinfo.client.ClientConfiguration`,
which holds the build/client properties gathered at runtime.

Key responsibilities:
- Load and validate package settings from environment variables
- Provide a typed logging configuration object
- Expose a cached global settings accessor for convenience

External dependencies:
- pydantic: Data validation and settings management
- pydantic-settings: Environment variable integration for settings
- python-dotenv: Optional .env loading for local development

Thread safety: Thread-safe (settings are immutable after initial load)

Status: Development
Version: v0.1.0
"""

# ============================================================================
# Imports
# ============================================================================

from __future__ import annotations

from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from dotenv import load_dotenv

# ============================================================================
# Data Models
# ============================================================================


class LoggingConfig(BaseModel):
    """Logging configuration for buildinfo.

    Attributes:
        level: Log level name (e.g. "INFO", "DEBUG").
        file: Optional path to a log file. When omitted only the console
            handler is attached.
    """

    level: str = "INFO"
    file: Optional[str] = None


class BuildInfoSettings(BaseSettings):
    """Package settings loaded from environment variables.

    Environment variables:

    - LOG_LEVEL / LOG_FILE for logging
    - BUILDINFO_ENV_PREFIX for the prefix that selects client properties
      out of the process environment (see :mod:`buildinfo.client.ingest`)
    """

    model_config = SettingsConfigDict(
        env_prefix="",
        case_sensitive=False,
    )

    # Logging
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    log_file: Optional[str] = Field(default=None, alias="LOG_FILE")

    # Ingestion
    env_prefix: str = Field(default="buildInfo.", alias="BUILDINFO_ENV_PREFIX")

    @property
    def logging(self) -> LoggingConfig:
        """Return the logging configuration."""

        return LoggingConfig(level=self.log_level, file=self.log_file)


# ============================================================================
# Public API
# ============================================================================


def load_config(env_file: Optional[Path] = None) -> BuildInfoSettings:
    """Load buildinfo settings.

    For local development this function will attempt to load a `.env` file
    from the current working directory if one is present. Environment
    variables always take precedence over values from `.env`.

    Args:
        env_file: Optional explicit path to a `.env` file. If omitted,
            the function will look for `.env` in the current working
            directory.

    Returns:
        A fully populated :class:`BuildInfoSettings` instance.

    Raises:
        FileNotFoundError: If an explicit ``env_file`` is provided but
            does not exist.
    """

    if env_file is not None:
        if not env_file.exists():
            msg = f"Environment file not found: {env_file}"
            raise FileNotFoundError(msg)
        # An explicit env_file wins over values already in the environment.
        load_dotenv(env_file, override=True)
    else:
        default_env = Path(".env")
        if default_env.exists():
            load_dotenv(default_env)

    return BuildInfoSettings()  # type: ignore[call-arg]


_global_config: Optional[BuildInfoSettings] = None


def get_config() -> BuildInfoSettings:
    """Return the global buildinfo settings singleton.

    The settings are loaded on first access and cached for subsequent
    calls.

    Returns:
        A cached :class:`BuildInfoSettings` instance.
    """

    global _global_config
    if _global_config is None:
        _global_config = load_config()
    return _global_config
