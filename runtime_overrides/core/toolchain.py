"""Build invocation: clean the runtime package, then build it in release mode.

Defines the ``Toolchain`` Protocol and the default ``CargoToolchain``.
Both steps run with the working directory set to the source tree, so the
manifest path is the runtime's in-repository path.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path
from typing import Protocol, runtime_checkable

from runtime_overrides.core.process import run_command, working_directory
from runtime_overrides.models.build import BuildRequest, OutputPaths

logger = logging.getLogger(__name__)

DEFAULT_FEATURES: tuple[str, ...] = ("evm-tracing",)


@runtime_checkable
class Toolchain(Protocol):
    """Protocol for build toolchains. Paths are relative to the current directory."""

    def clean_package(self, manifest: Path, package: str) -> None:
        ...

    def build_release(self, manifest: Path, features: Sequence[str]) -> None:
        ...


class CargoToolchain:
    """``Toolchain`` backed by ``cargo``."""

    def __init__(self, executable: str = "cargo") -> None:
        self.executable = executable

    def clean_package(self, manifest: Path, package: str) -> None:
        run_command([
            self.executable,
            "clean",
            "--release",
            "--manifest-path",
            str(manifest),
            "-p",
            package,
        ])

    def build_release(self, manifest: Path, features: Sequence[str]) -> None:
        argv = [
            self.executable,
            "build",
            "--release",
            "--manifest-path",
            str(manifest),
        ]
        if features:
            argv += ["--features", ",".join(features)]
        run_command(argv)


def build_runtime(
    toolchain: Toolchain,
    request: BuildRequest,
    paths: OutputPaths,
    features: Sequence[str] = DEFAULT_FEATURES,
) -> Path:
    """Clean and rebuild the runtime crate inside ``paths.source_dir``.

    Returns the path where the toolchain is expected to leave the wasm.
    Whether the file actually exists is checked at relocation.
    """
    runtime = request.runtime
    logger.info(
        "Building %s (%s) with features %s",
        runtime.package,
        request.target,
        ", ".join(features) or "<none>",
    )
    with working_directory(paths.source_dir):
        toolchain.clean_package(runtime.manifest, runtime.package)
        toolchain.build_release(runtime.manifest, features)
    return paths.toolchain_output
