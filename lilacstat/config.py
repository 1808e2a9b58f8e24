"""Runtime configuration — env-driven, one settings object per invocation.

Centralized config using pydantic-settings for environment variable
support. Reads from a .env file and LILACSTAT_* environment variables.
The defaults describe a layout relative to the working directory; a cron
job normally exports absolute paths.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class StatusConfig(BaseSettings):
    """Paths and knobs for a lilacstat run.

    All settings can be overridden via LILACSTAT_* environment variables
    or a .env file in the working directory.

    Examples
    --------
    Override via environment::

        export LILACSTAT_PACKAGES_DIR=/home/build/archlinuxcn
        export LILACSTAT_BUILD_LOG_PATH=/home/lilac/.lilac/build.log
        export LILACSTAT_LOG_LEVEL=DEBUG
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="LILACSTAT_",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Inputs
    packages_dir: Path = Path("archlinuxcn")
    metadata_name: str = "lilac.yaml"
    build_log_path: Path = Path(".lilac/build.log")
    capture_dir: Path = Path(".lilac/log")

    # Outputs
    html_dir: Path = Path("public_html/log")
    checkpoint_path: Path = Path(".config/log/timestamp")
    index_path: Path = Path("public_html/build-log.json")

    # Published result history per package
    history_length: int = Field(default=10, ge=1)

    log_level: str = "INFO"
