"""Override builder: the linear coordinator for a single runtime build.

Wires a GitClient, Toolchain and RuntimeInfoExtractor into the fixed
sequence: acquire source -> build -> relocate -> digest -> report.
Any failure aborts the run; partially created directories, moved files
and half-built source trees are left as they are.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

from runtime_overrides.config import BuildSettings
from runtime_overrides.core.digest import (
    RuntimeInfoExtractor,
    SubwasmExtractor,
    emit_digest,
)
from runtime_overrides.core.hasher import content_address
from runtime_overrides.core.relocation import relocate_artifact
from runtime_overrides.core.source import GitClient, SubprocessGit, acquire_source
from runtime_overrides.core.toolchain import (
    DEFAULT_FEATURES,
    CargoToolchain,
    Toolchain,
    build_runtime,
)
from runtime_overrides.models.build import (
    DEFAULT_BUILD_ROOT,
    DEFAULT_OUTPUT_ROOT,
    BuildReport,
    BuildRequest,
    OutputPaths,
)

logger = logging.getLogger(__name__)


class OverrideBuilder:
    """Builds a tracing runtime and its digest.

    Parameters
    ----------
    git:
        Version-control backend used to acquire the source.
    toolchain:
        Build backend used to compile the runtime.
    extractor:
        Metadata backend used to produce the runtime digest.
    build_root:
        Directory holding the cloned repositories.
    output_root:
        Root of the ``<runtime>/wasms`` and ``<runtime>/digests`` tree.
    features:
        Cargo features enabled for the release build.
    """

    def __init__(
        self,
        git: GitClient | None = None,
        toolchain: Toolchain | None = None,
        extractor: RuntimeInfoExtractor | None = None,
        *,
        build_root: Path = DEFAULT_BUILD_ROOT,
        output_root: Path = DEFAULT_OUTPUT_ROOT,
        features: Sequence[str] = DEFAULT_FEATURES,
    ) -> None:
        self.git = git or SubprocessGit()
        self.toolchain = toolchain or CargoToolchain()
        self.extractor = extractor or SubwasmExtractor()
        self.build_root = Path(build_root)
        self.output_root = Path(output_root)
        self.features = tuple(features)

    @classmethod
    def from_settings(
        cls,
        settings: BuildSettings,
        *,
        build_root: Path | None = None,
        output_root: Path | None = None,
    ) -> OverrideBuilder:
        """Create a builder using the executables and roots from *settings*."""
        return cls(
            SubprocessGit(settings.git_executable),
            CargoToolchain(settings.cargo_executable),
            SubwasmExtractor(settings.subwasm_executable),
            build_root=build_root or settings.build_dir,
            output_root=output_root or settings.output_dir,
            features=settings.features,
        )

    def paths_for(self, request: BuildRequest) -> OutputPaths:
        """Compute every path the build of *request* will touch."""
        return OutputPaths.for_request(
            request, build_root=self.build_root, output_root=self.output_root
        )

    def build(self, request: BuildRequest) -> BuildReport:
        """Run the full build for *request* and report where the outputs went."""
        paths = self.paths_for(request)
        logger.info(
            "Building %s at %s", request.runtime.canonical_name, request.target
        )

        acquire_source(self.git, request, paths)
        build_runtime(self.toolchain, request, paths, self.features)
        wasm_path = relocate_artifact(paths)
        digest_path = emit_digest(self.extractor, paths)

        return BuildReport(
            request=request,
            wasm_path=wasm_path,
            digest_path=digest_path,
            content_address=content_address(wasm_path),
            size_bytes=wasm_path.stat().st_size,
        )
