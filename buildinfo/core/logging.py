"""
buildinfo: Logging Setup

This module provides centralised logging configuration and helper
functions for obtaining namespaced loggers.

Key responsibilities:
- Configure root logging handlers and formats
- Provide a helper to obtain module-specific loggers

Importing buildinfo never configures logging or reads settings; only an
explicit setup_logging() call does.

External dependencies:
- logging: Python standard library logging framework

Thread safety: Thread-safe (logging module is process-global and
thread-safe under normal usage)

Status: Development
Version: v0.1.0
"""

# ============================================================================
# Imports
# ============================================================================

from __future__ import annotations

import logging
import sys
from typing import Optional

from buildinfo.core.config import BuildInfoSettings, get_config

logging.getLogger("buildinfo").addHandler(logging.NullHandler())

# ============================================================================
# Public API
# ============================================================================


def setup_logging(config: Optional[BuildInfoSettings] = None) -> None:
    """Configure application-wide logging.

    This function initialises the root logger and the ``buildinfo``
    namespace logger. It is idempotent: calling it multiple times will not
    attach duplicate handlers.

    A console handler is always attached; a file handler is added only
    when ``LOG_FILE`` is configured.

    Args:
        config: Optional settings object. If omitted, the global settings
            will be loaded via :func:`get_config`.
    """

    if config is None:
        config = get_config()

    root_logger = logging.getLogger()

    # Avoid attaching duplicate handlers if setup_logging is called again.
    if root_logger.handlers:
        return

    log_level = getattr(logging, config.log_level.upper(), logging.INFO)

    formatter = logging.Formatter(
        fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if config.log_file:
        file_handler = logging.FileHandler(config.log_file)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    root_logger.setLevel(log_level)

    buildinfo_logger = logging.getLogger("buildinfo")
    buildinfo_logger.setLevel(log_level)


def get_logger(name: str) -> logging.Logger:
    """Return a namespaced logger for the given module.

    Handlers are not configured here; applications call
    :func:`setup_logging` explicitly. Until then records reach only the
    handlers the host application has installed.

    Args:
        name: Module-level ``__name__`` or any descriptive logger name.

    Returns:
        A :class:`logging.Logger` instance under the ``buildinfo``
        namespace.
    """

    if name == "buildinfo" or name.startswith("buildinfo."):
        return logging.getLogger(name)
    return logging.getLogger(f"buildinfo.{name}")
