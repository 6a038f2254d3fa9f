"""Runs the package manager inside a freshly generated project."""

from __future__ import annotations

import logging
from pathlib import Path
import subprocess

from anybackend.cli._types import PackageManager

logger = logging.getLogger(__name__)


def install_dependencies(project_dir: Path, manager: PackageManager) -> None:
    """
    Install the project's dependencies, streaming the installer's output.

    Blocks until the installer exits. Standard streams are inherited so progress
    shows up live in the terminal.

    Raises:
        subprocess.CalledProcessError: The installer exited non-zero.
        FileNotFoundError: The installer executable is not on PATH.
    """
    if manager is PackageManager.SKIP:
        logger.debug("Dependency installation skipped")
        return

    logger.debug("Running %s in %s", " ".join(manager.command), project_dir)
    subprocess.run(manager.command, cwd=str(project_dir), check=True)
