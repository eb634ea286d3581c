"""Shared test fixtures for runtime-overrides."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import Any

import pytest

from runtime_overrides.core.builder import OverrideBuilder
from runtime_overrides.models.build import BuildRequest, OutputPaths
from runtime_overrides.models.runtimes import Runtime


# ---------------------------------------------------------------------------
# Recording stubs for the external collaborators
# ---------------------------------------------------------------------------


class RecordingGit:
    """GitClient stub that records calls; ``clone`` creates the directory."""

    def __init__(self) -> None:
        self.calls: list[tuple[Any, ...]] = []

    def clone(self, url: str, dest: Path) -> None:
        self.calls.append(("clone", url, Path(dest)))
        Path(dest).mkdir(parents=True)

    def fetch_all(self, repo_dir: Path) -> None:
        self.calls.append(("fetch_all", Path(repo_dir)))

    def checkout(self, repo_dir: Path, target: str) -> None:
        self.calls.append(("checkout", Path(repo_dir), target))

    @property
    def names(self) -> list[str]:
        return [c[0] for c in self.calls]


class RecordingToolchain:
    """Toolchain stub that records calls and the cwd they ran in.

    When *produce* is true, ``build_release`` writes the wasm where cargo
    would leave it (relative to the current directory).
    """

    def __init__(self, produce: bool = True, payload: bytes = b"\0asm-test") -> None:
        self.produce = produce
        self.payload = payload
        self.calls: list[tuple[Any, ...]] = []
        self.cwds: list[Path] = []

    def clean_package(self, manifest: Path, package: str) -> None:
        self.calls.append(("clean_package", Path(manifest), package))
        self.cwds.append(Path.cwd())

    def build_release(self, manifest: Path, features: Sequence[str]) -> None:
        self.calls.append(("build_release", Path(manifest), tuple(features)))
        self.cwds.append(Path.cwd())
        if self.produce:
            package_dir = Path.cwd() / "target" / "release" / "wbuild"
            # manifest is "<...>/<lower>/Cargo.toml"
            lower = Path(manifest).parent.name
            out = package_dir / f"{lower}-runtime" / f"{lower}_runtime.compact.compressed.wasm"
            out.parent.mkdir(parents=True, exist_ok=True)
            out.write_bytes(self.payload)


class StubExtractor:
    """RuntimeInfoExtractor stub returning a fixed record."""

    def __init__(self, info: dict[str, Any] | None = None) -> None:
        self.info = info if info is not None else {
            "size": 9,
            "core_version": "pangolin-5ab5",
            "metadata_version": 14,
        }
        self.seen: list[Path] = []

    def extract(self, wasm_path: Path) -> dict[str, Any]:
        self.seen.append(Path(wasm_path))
        return self.info


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def workspace(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run the test from an empty temporary directory."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def git() -> RecordingGit:
    return RecordingGit()


@pytest.fixture
def toolchain() -> RecordingToolchain:
    return RecordingToolchain()


@pytest.fixture
def extractor() -> StubExtractor:
    return StubExtractor()


@pytest.fixture
def request_pangolin() -> BuildRequest:
    """Provide the Pangolin v1.2.3 build request used across tests."""
    return BuildRequest(runtime=Runtime.PANGOLIN, target="v1.2.3")


@pytest.fixture
def paths_pangolin(request_pangolin: BuildRequest) -> OutputPaths:
    return OutputPaths.for_request(request_pangolin)


@pytest.fixture
def builder(
    workspace: Path,
    git: RecordingGit,
    toolchain: RecordingToolchain,
    extractor: StubExtractor,
) -> OverrideBuilder:
    """Provide an OverrideBuilder wired to the recording stubs."""
    return OverrideBuilder(git, toolchain, extractor)
