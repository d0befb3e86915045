"""Scaffolding error taxonomy.

Raised by the domain and infrastructure layers, converted exactly once
into a :class:`~create_clean_arch.services.result.ServiceError` by the
service layer. Each subclass carries a stable ``code`` used in JSON output.
"""

from __future__ import annotations

from typing import Any


class ScaffoldError(Exception):
    """Base class for every failure the scaffolder surfaces to the user."""

    code = "SCAFFOLD_ERROR"

    def __init__(self, message: str, **detail: Any) -> None:
        super().__init__(message)
        self.message = message
        self.detail = detail


class InvalidName(ScaffoldError):
    """The project name is empty or contains characters outside ``[a-z0-9-]``."""

    code = "INVALID_NAME"


class TargetExists(ScaffoldError):
    """The project directory is already present on disk."""

    code = "TARGET_EXISTS"


class IOFailure(ScaffoldError):
    """The filesystem rejected a directory create or file write."""

    code = "IO_FAILURE"


class ExternalToolFailure(ScaffoldError):
    """``git init`` or ``npm install`` exited non-zero or could not start."""

    code = "EXTERNAL_TOOL_FAILURE"

    def __init__(self, step: str, message: str, **detail: Any) -> None:
        super().__init__(message, step=step, **detail)
        self.step = step
