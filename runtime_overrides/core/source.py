"""Source acquisition: clone once, then fetch and check out the target.

Defines the ``GitClient`` Protocol and the default ``SubprocessGit``
backend that shells out to the ``git`` executable.

The clone directory's existence is the only signal that the source has
been acquired; a half-finished clone is not detected.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Protocol, runtime_checkable

from runtime_overrides.core.process import run_command
from runtime_overrides.models.build import BuildRequest, OutputPaths

logger = logging.getLogger(__name__)


@runtime_checkable
class GitClient(Protocol):
    """Protocol for version-control backends. Every call blocks."""

    def clone(self, url: str, dest: Path) -> None:
        ...

    def fetch_all(self, repo_dir: Path) -> None:
        ...

    def checkout(self, repo_dir: Path, target: str) -> None:
        ...


class SubprocessGit:
    """``GitClient`` backed by the ``git`` command-line client.

    Parameters
    ----------
    executable:
        Name or path of the git binary.
    """

    def __init__(self, executable: str = "git") -> None:
        self.executable = executable

    def clone(self, url: str, dest: Path) -> None:
        run_command([self.executable, "clone", url, str(dest)])

    def fetch_all(self, repo_dir: Path) -> None:
        run_command([self.executable, "fetch", "--all"], cwd=repo_dir)

    def checkout(self, repo_dir: Path, target: str) -> None:
        run_command([self.executable, "checkout", target], cwd=repo_dir)


def acquire_source(
    git: GitClient, request: BuildRequest, paths: OutputPaths
) -> Path:
    """Make ``paths.source_dir`` a checkout of ``request.target``.

    Clones the runtime's repository if the directory is absent, then
    always fetches every remote and checks out the target.

    Returns the source directory.
    """
    source_dir = paths.source_dir

    if source_dir.exists():
        logger.info("Reusing existing clone at %s", source_dir)
    else:
        source_dir.parent.mkdir(parents=True, exist_ok=True)
        logger.info("Cloning %s into %s", request.runtime.github, source_dir)
        git.clone(request.runtime.github, source_dir)

    git.fetch_all(source_dir)
    git.checkout(source_dir, request.target)
    return source_dir
