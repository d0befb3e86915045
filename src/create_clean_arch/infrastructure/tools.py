"""Subprocess runner for the external tools (git, npm).

Commands run with ``cwd`` set to the project root; the scaffolder never
changes its own working directory. Standard streams are inherited so the
user sees tool progress live.
"""

from __future__ import annotations

import logging
import subprocess
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import IO, Any

from create_clean_arch.domain.errors import ExternalToolFailure

logger = logging.getLogger(__name__)


class ToolRunner:
    """Run external commands rooted at a directory, raising on failure.

    Args:
        stdout: Where child standard output goes. ``None`` inherits the
            parent's stream; pass ``sys.stderr`` to keep stdout clean for
            machine-readable output.
    """

    def __init__(self, *, stdout: IO[Any] | None = None) -> None:
        self._stdout = stdout

    def run(self, step: str, argv: Sequence[str], cwd: Path) -> None:
        """Run *argv* in *cwd*.

        Raises:
            ExternalToolFailure: if the executable cannot be started or
                exits non-zero. ``step`` names the failed step.
        """
        logger.debug("Running %s step: %s (cwd=%s)", step, " ".join(argv), cwd)
        try:
            subprocess.run(list(argv), cwd=cwd, stdout=self._stdout, check=True)
        except FileNotFoundError as exc:
            msg = f"{step}: executable not found: {argv[0]}"
            raise ExternalToolFailure(step, msg, command=list(argv)) from exc
        except subprocess.CalledProcessError as exc:
            msg = f"{step}: '{' '.join(argv)}' exited with status {exc.returncode}"
            raise ExternalToolFailure(
                step, msg, command=list(argv), returncode=exc.returncode
            ) from exc
        except OSError as exc:
            msg = f"{step}: cannot run {argv[0]}: {exc.strerror or exc}"
            raise ExternalToolFailure(step, msg, command=list(argv)) from exc


def stdout_for(json_output: bool) -> IO[Any] | None:
    """Child stdout target: stderr when stdout carries a JSON document."""
    return sys.stderr if json_output else None
