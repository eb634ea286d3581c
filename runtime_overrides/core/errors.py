"""Exception hierarchy for the build pipeline.

Nothing in ``runtime_overrides.core`` catches these; they propagate to the
CLI, which reports them and exits non-zero.
"""

from __future__ import annotations

from collections.abc import Sequence


class RuntimeOverridesError(RuntimeError):
    """Base class for every failure raised by the build pipeline."""


class CommandError(RuntimeOverridesError):
    """Raised when an external command cannot be spawned or exits non-zero."""

    def __init__(
        self,
        argv: Sequence[str],
        *,
        returncode: int | None = None,
        reason: str = "",
    ) -> None:
        self.argv = list(argv)
        self.returncode = returncode
        self.reason = reason
        command = " ".join(self.argv)
        if returncode is not None:
            message = f"Command `{command}` exited with status {returncode}"
        else:
            message = f"Command `{command}` could not be started"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class ArtifactMissingError(RuntimeOverridesError):
    """Raised when the toolchain did not leave a wasm at the expected path."""


class DigestExtractionError(RuntimeOverridesError):
    """Raised when runtime metadata cannot be extracted from a wasm."""
