"""Build configuration: env-driven.

Centralized settings using pydantic-settings. Reads from a .env file and
RUNTIME_OVERRIDES_* environment variables; CLI options take precedence.
"""

from __future__ import annotations

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class BuildSettings(BaseSettings):
    """Build settings with environment variable overrides.

    Examples
    --------
    Override via environment::

        export RUNTIME_OVERRIDES_BUILD_DIR=/var/cache/runtime-builds
        export RUNTIME_OVERRIDES_LOG_LEVEL=DEBUG
        export RUNTIME_OVERRIDES_FEATURES='["evm-tracing"]'
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="RUNTIME_OVERRIDES_",
        env_file_encoding="utf-8",
    )

    # Locations
    build_dir: Path = Path("build")
    output_dir: Path = Path("overridden-runtimes")

    # Build
    default_target: str = "main"
    features: list[str] = ["evm-tracing"]

    # External tools
    git_executable: str = "git"
    cargo_executable: str = "cargo"
    subwasm_executable: str = "subwasm"

    # Observability
    log_level: str = "INFO"


# Module-level singleton: import as `from runtime_overrides.config import settings`
settings = BuildSettings()
