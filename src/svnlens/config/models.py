"""Pydantic configuration models with env var support.

Configuration Hierarchy (highest to lowest precedence):
1. Direct kwargs to load_config()
2. Environment variables (SVNLENS__SECTION__KEY)
3. Explicit YAML file passed to load_config()
4. Global YAML (~/.config/svnlens/config.yaml)
5. Built-in defaults (this file)

Environment Variable Format:
    SVNLENS__<SECTION>__<KEY>=<VALUE>

Examples:
    SVNLENS__LOGGING__LEVEL=DEBUG
    SVNLENS__SESSION__USERNAME=railsmonk
    SVNLENS__SESSION__SVNLOOK_PATH=/opt/subversion/bin/svnlook
"""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class LogOutputConfig(BaseModel):
    """Single logging output configuration."""

    format: Literal["json", "console"] = "console"
    destination: str = "stderr"  # stderr, stdout, or absolute file path
    level: LogLevel | None = None  # Inherits from parent if None

    @field_validator("destination")
    @classmethod
    def validate_destination(cls, v: str) -> str:
        if v in ("stderr", "stdout"):
            return v
        path = Path(v).expanduser()
        if not path.is_absolute():
            raise ValueError(f"File destination must be absolute path: {v}")
        return str(path)


class LoggingConfig(BaseModel):
    """Logging configuration.

    Env vars:
        SVNLENS__LOGGING__LEVEL: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """

    level: LogLevel = Field(
        default="WARNING",
        description="Root log level. DEBUG logs every repository query.",
    )
    outputs: list[LogOutputConfig] = Field(default_factory=lambda: [LogOutputConfig()])


class SessionConfig(BaseModel):
    """Repository session configuration.

    Env vars:
        SVNLENS__SESSION__USERNAME: Default username for authenticated repositories
        SVNLENS__SESSION__PASSWORD: Default password
        SVNLENS__SESSION__SVNLOOK_PATH: svnlook executable used for diffs
        SVNLENS__SESSION__SVNLOOK_TIMEOUT_SEC: Kill svnlook after this many seconds
    """

    username: str | None = None
    password: str | None = Field(
        default=None,
        description="Prefer the environment over YAML for secrets.",
    )
    svnlook_path: str = Field(
        default="svnlook",
        description="svnlook executable. Only needed for diffs of local repositories.",
    )
    svnlook_timeout_sec: float | None = Field(
        default=None,
        description="Timeout for a single svnlook diff run. None waits indefinitely.",
    )

    @field_validator("svnlook_timeout_sec")
    @classmethod
    def validate_timeout(cls, v: float | None) -> float | None:
        if v is not None and v <= 0:
            raise ValueError(f"Timeout must be positive, got {v}")
        return v


class SvnLensConfig(BaseModel):
    """Root configuration for svnlens."""

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    session: SessionConfig = Field(default_factory=SessionConfig)
