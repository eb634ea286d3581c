"""Runtime registry: the closed set of chains that can be built.

Each runtime lives in one of two upstream repositories of the
darwinia-network organisation. Mainnet runtimes (Darwinia, Crab) sit under
``runtime/`` in ``darwinia``; testnet runtimes (Pangoro, Pangolin) sit
under ``node/runtime/`` in ``darwinia-common``.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path

GITHUB_ORGANISATION = "https://github.com/darwinia-network"


class Runtime(str, Enum):
    """Supported chain runtimes. Values are the canonical display names."""

    DARWINIA = "Darwinia"
    CRAB = "Crab"
    PANGORO = "Pangoro"
    PANGOLIN = "Pangolin"

    @classmethod
    def parse(cls, value: str) -> Runtime:
        """Resolve a runtime from a case-insensitive name.

        Raises ``ValueError`` if *value* names no known runtime.
        """
        wanted = value.strip().lower()
        for runtime in cls:
            if runtime.value.lower() == wanted:
                return runtime
        choices = ", ".join(r.value for r in cls)
        raise ValueError(f"Unknown runtime {value!r} (expected one of: {choices})")

    @property
    def canonical_name(self) -> str:
        return self.value

    @property
    def lowercase_name(self) -> str:
        return self.value.lower()

    @property
    def is_mainnet(self) -> bool:
        return self in (Runtime.DARWINIA, Runtime.CRAB)

    @property
    def repository(self) -> str:
        """Name of the GitHub repository that hosts this runtime."""
        return "darwinia" if self.is_mainnet else "darwinia-common"

    @property
    def github(self) -> str:
        """Clone URL of the hosting repository."""
        return f"{GITHUB_ORGANISATION}/{self.repository}"

    @property
    def path(self) -> Path:
        """Sub-path of the runtime crate inside the repository."""
        base = Path("runtime") if self.is_mainnet else Path("node/runtime")
        return base / self.lowercase_name

    @property
    def manifest(self) -> Path:
        return self.path / "Cargo.toml"

    @property
    def package(self) -> str:
        """Cargo package name of the runtime crate."""
        return f"{self.lowercase_name}-runtime"
