"""Runtime configuration — env-driven via pydantic-settings.

Reads from a .env file and BUILDOUTLINE_* environment variables.
"""

from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict


class OutlineConfig(BaseSettings):
    """Defaults for rendering and processor lifetime.

    Examples
    --------
    Override via environment::

        export BUILDOUTLINE_LOG_LEVEL=DEBUG
        export BUILDOUTLINE_INCLUDE_DIAGNOSTICS=true
        export BUILDOUTLINE_INDENT_UNIT="    "
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="BUILDOUTLINE_",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: str = "INFO"

    # Rendering
    include_diagnostics: bool = False
    indent_unit: str = "\t"
    line_break: str = "\n"

    # Processor lifetime
    remove_file_on_dispose: bool = False


# Module-level singleton — import as `from buildoutline.config import config`
config = OutlineConfig()
