"""Runtime digest extraction and emission.

The digest is whatever the extractor reports about a compiled runtime
(metadata version, core version, proposal hashes, ...). It is written out
as-is; nothing here reads its fields.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Protocol, runtime_checkable

from runtime_overrides.core.errors import CommandError, DigestExtractionError
from runtime_overrides.core.process import run_command
from runtime_overrides.models.build import OutputPaths, RuntimeDigest

logger = logging.getLogger(__name__)


@runtime_checkable
class RuntimeInfoExtractor(Protocol):
    """Protocol for runtime metadata backends."""

    def extract(self, wasm_path: Path) -> RuntimeDigest:
        """Return a JSON-serializable description of the runtime at *wasm_path*."""
        ...


class SubwasmExtractor:
    """Extractor backed by the ``subwasm`` CLI (``subwasm info --json``).

    Parameters
    ----------
    executable:
        Name or path of the subwasm binary.
    """

    def __init__(self, executable: str = "subwasm") -> None:
        self.executable = executable

    def extract(self, wasm_path: Path) -> RuntimeDigest:
        try:
            result = run_command(
                [self.executable, "info", "--json", str(wasm_path)],
                capture_output=True,
            )
        except CommandError as exc:
            raise DigestExtractionError(
                f"subwasm could not read {wasm_path}"
            ) from exc

        try:
            info = json.loads(result.stdout)
        except json.JSONDecodeError as exc:
            raise DigestExtractionError(
                f"subwasm returned invalid JSON for {wasm_path}: {exc}"
            ) from exc

        if not isinstance(info, dict):
            raise DigestExtractionError(
                f"subwasm returned {type(info).__name__}, expected an object"
            )
        return info


def emit_digest(extractor: RuntimeInfoExtractor, paths: OutputPaths) -> Path:
    """Extract the digest of ``paths.wasm_path`` and write it to ``paths.digest_path``."""
    info = extractor.extract(paths.wasm_path)
    paths.digest_path.parent.mkdir(parents=True, exist_ok=True)
    paths.digest_path.write_text(json.dumps(info, indent=2) + "\n", encoding="utf-8")
    logger.info("Wrote runtime digest to %s", paths.digest_path)
    return paths.digest_path
