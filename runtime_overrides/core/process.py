"""Blocking subprocess execution and scoped working-directory changes.

Commands inherit the terminal's stderr so build progress stays visible.
There is no timeout: a hung ``cargo`` hangs the run.
"""

from __future__ import annotations

import logging
import os
import subprocess
from collections.abc import Iterator, Sequence
from contextlib import contextmanager
from pathlib import Path

from runtime_overrides.core.errors import CommandError

logger = logging.getLogger(__name__)


def run_command(
    argv: Sequence[str],
    *,
    cwd: Path | None = None,
    capture_output: bool = False,
) -> subprocess.CompletedProcess[str]:
    """Run *argv* to completion and return the finished process.

    Parameters
    ----------
    argv:
        Program and arguments. The program is looked up on ``PATH``.
    cwd:
        Directory to run in; defaults to the current working directory.
    capture_output:
        Capture stdout as text instead of passing it through.

    Raises
    ------
    CommandError
        If the program cannot be spawned, or exits with a non-zero status.
    """
    args = [str(a) for a in argv]
    logger.info("Running: %s", " ".join(args))
    try:
        result = subprocess.run(
            args,
            cwd=cwd,
            stdout=subprocess.PIPE if capture_output else None,
            text=True,
        )
    except OSError as exc:
        raise CommandError(args, reason=str(exc)) from exc

    if result.returncode != 0:
        raise CommandError(args, returncode=result.returncode)
    return result


@contextmanager
def working_directory(path: Path) -> Iterator[Path]:
    """Change into *path* for the duration of the block.

    The previous directory is restored on every exit path, including
    exceptions raised inside the block.
    """
    previous = Path.cwd()
    os.chdir(path)
    logger.debug("Entered %s", path)
    try:
        yield Path(path)
    finally:
        os.chdir(previous)
        logger.debug("Returned to %s", previous)
