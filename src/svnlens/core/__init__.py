"""Core module exports."""

from svnlens.core.errors import ConfigError, ErrorCode, SvnLensError
from svnlens.core.logging import configure_logging

__all__ = [
    # Errors
    "ErrorCode",
    "SvnLensError",
    "ConfigError",
    # Logging
    "configure_logging",
]
