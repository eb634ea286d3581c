"""runtime-overrides data models: Pydantic v2, frozen."""

from runtime_overrides.models.build import (
    DEFAULT_BUILD_ROOT,
    DEFAULT_OUTPUT_ROOT,
    DEFAULT_TARGET,
    BuildReport,
    BuildRequest,
    OutputPaths,
    RuntimeDigest,
)
from runtime_overrides.models.runtimes import GITHUB_ORGANISATION, Runtime

__all__ = [
    # runtimes
    "GITHUB_ORGANISATION",
    "Runtime",
    # build
    "DEFAULT_BUILD_ROOT",
    "DEFAULT_OUTPUT_ROOT",
    "DEFAULT_TARGET",
    "BuildReport",
    "BuildRequest",
    "OutputPaths",
    "RuntimeDigest",
]
