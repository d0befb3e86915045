"""Post-emit steps that turn the emitted tree into a working workspace.

Fail-fast, in order: ``git init``, write ``.gitignore``, ``npm install``.
The ignore file is written after ``git init`` and the write is idempotent,
so rerunning the step leaves the same post-condition.
"""

from __future__ import annotations

from pathlib import Path

import structlog

from create_clean_arch.config.models import ToolsConfig
from create_clean_arch.domain.layout import GITIGNORE_CONTENT, GITIGNORE_FILE
from create_clean_arch.infrastructure.filesystem import write_text_file
from create_clean_arch.infrastructure.tools import ToolRunner

logger = structlog.get_logger(__name__)

STEP_GIT = "git"
STEP_INSTALL = "install"


def write_gitignore(root_dir: Path) -> str:
    """Write the workspace ``.gitignore``. Returns its relative path."""
    write_text_file(root_dir, root_dir / GITIGNORE_FILE, GITIGNORE_CONTENT)
    return GITIGNORE_FILE


def bootstrap_workspace(
    root_dir: Path,
    *,
    runner: ToolRunner,
    tools: ToolsConfig | None = None,
    created: list[str] | None = None,
) -> None:
    """Initialise git, write ``.gitignore`` and install dependencies.

    Appends ``.gitignore`` to *created* once written so callers can report
    the tree even when ``npm install`` fails afterwards.

    Raises:
        ExternalToolFailure: with step ``git`` or ``install``.
        IOFailure: if ``.gitignore`` cannot be written.
    """
    tools = tools or ToolsConfig()

    logger.debug("step_started", step=STEP_GIT)
    runner.run(STEP_GIT, [tools.git, "init"], root_dir)
    path = write_gitignore(root_dir)
    if created is not None:
        created.append(path)
    logger.debug("gitignore_written", path=path)

    logger.debug("step_started", step=STEP_INSTALL)
    runner.run(STEP_INSTALL, [tools.npm, *tools.install_args], root_dir)
    logger.debug("step_finished", step=STEP_INSTALL)
