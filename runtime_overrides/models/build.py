"""Build request, output layout and report models.

Every path produced by a build is derived from the request by string
formatting alone, so the same (runtime, target) pair always maps to the
same files.
"""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from runtime_overrides.models.runtimes import Runtime

DEFAULT_TARGET = "main"
DEFAULT_BUILD_ROOT = Path("build")
DEFAULT_OUTPUT_ROOT = Path("overridden-runtimes")

RuntimeDigest = dict[str, Any]


class BuildRequest(BaseModel):
    """What to build: a runtime at a branch, tag or commit.

    The target is passed to ``git checkout`` untouched.
    """

    model_config = ConfigDict(frozen=True)

    runtime: Runtime
    target: str = DEFAULT_TARGET

    @property
    def artifact_name(self) -> str:
        """``<runtime>-<target>-tracing-runtime``."""
        return f"{self.runtime.lowercase_name}-{self.target}-tracing-runtime"


class OutputPaths(BaseModel):
    """Filesystem locations touched by a single build."""

    model_config = ConfigDict(frozen=True)

    source_dir: Path
    toolchain_output: Path
    wasms_dir: Path
    digests_dir: Path
    wasm_path: Path
    digest_path: Path

    @classmethod
    def for_request(
        cls,
        request: BuildRequest,
        *,
        build_root: Path = DEFAULT_BUILD_ROOT,
        output_root: Path = DEFAULT_OUTPUT_ROOT,
    ) -> OutputPaths:
        """Compute every path for *request* under the given roots.

        Layout::

            {build_root}/{repository}/
            {output_root}/{runtime}/wasms/{name}.compact.compressed.wasm
            {output_root}/{runtime}/digests/{name}.json
        """
        runtime = request.runtime
        lower = runtime.lowercase_name
        name = request.artifact_name

        source_dir = Path(build_root) / runtime.repository
        wasms_dir = Path(output_root) / lower / "wasms"
        digests_dir = Path(output_root) / lower / "digests"

        return cls(
            source_dir=source_dir,
            toolchain_output=(
                source_dir
                / "target"
                / "release"
                / "wbuild"
                / runtime.package
                / f"{lower}_runtime.compact.compressed.wasm"
            ),
            wasms_dir=wasms_dir,
            digests_dir=digests_dir,
            wasm_path=wasms_dir / f"{name}.compact.compressed.wasm",
            digest_path=digests_dir / f"{name}.json",
        )


class BuildReport(BaseModel):
    """Outcome of a successful build, shown to the user at the end of a run."""

    model_config = ConfigDict(frozen=True)

    request: BuildRequest
    wasm_path: Path
    digest_path: Path
    content_address: str  # "sha256:<hex>" of the relocated wasm
    size_bytes: int
    completed_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc)
    )
