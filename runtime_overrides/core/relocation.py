"""Artifact relocation: move the built wasm into the overrides tree."""

from __future__ import annotations

import logging
import shutil
from pathlib import Path

from runtime_overrides.core.errors import ArtifactMissingError
from runtime_overrides.models.build import OutputPaths

logger = logging.getLogger(__name__)


def prepare_output_dirs(paths: OutputPaths) -> None:
    """Create the wasms and digests directories if they are missing."""
    for directory in (paths.wasms_dir, paths.digests_dir):
        if not directory.exists():
            logger.debug("Creating %s", directory)
        directory.mkdir(parents=True, exist_ok=True)


def relocate_artifact(paths: OutputPaths) -> Path:
    """Move the toolchain's wasm to ``paths.wasm_path``.

    An existing file at the destination is replaced.

    Raises
    ------
    ArtifactMissingError
        If the toolchain output does not exist.
    """
    source = paths.toolchain_output
    if not source.is_file():
        raise ArtifactMissingError(
            f"Expected build output not found: {source}"
        )

    prepare_output_dirs(paths)
    # Targets such as ``release/v1`` nest the file below wasms_dir.
    paths.wasm_path.parent.mkdir(parents=True, exist_ok=True)
    shutil.move(str(source), str(paths.wasm_path))
    logger.info("Moved %s to %s", source, paths.wasm_path)
    return paths.wasm_path
