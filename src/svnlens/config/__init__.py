"""Config module exports."""

from svnlens.config.loader import SvnLensSettings, load_config
from svnlens.config.models import (
    LoggingConfig,
    LogOutputConfig,
    SessionConfig,
    SvnLensConfig,
)

__all__ = [
    "load_config",
    "SvnLensConfig",
    "SvnLensSettings",
    "LoggingConfig",
    "LogOutputConfig",
    "SessionConfig",
]
