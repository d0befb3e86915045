"""ScaffoldService: name -> layout plan -> tree on disk -> working workspace."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import structlog

from create_clean_arch.domain.errors import ScaffoldError
from create_clean_arch.domain.layout import LAYOUT_PLAN, PackageSpec, validate_plan
from create_clean_arch.domain.names import normalise
from create_clean_arch.infrastructure.emitter import WorkspaceEmitter
from create_clean_arch.infrastructure.tools import ToolRunner, stdout_for
from create_clean_arch.services.bootstrap import bootstrap_workspace
from create_clean_arch.services.result import ServiceError, ServiceResult

if TYPE_CHECKING:
    from collections.abc import Sequence

    from create_clean_arch.config.settings import ScaffoldSettings

logger = structlog.get_logger(__name__)

OP_CREATE = "create_project"


class ScaffoldService:
    """Creates one clean-architecture workspace per call.

    Errors are not recovered: the first failure ends the operation and is
    returned as a failed :class:`ServiceResult`. Anything already written
    stays on disk and is listed in ``data["files_created"]``.
    """

    def __init__(
        self,
        settings: ScaffoldSettings,
        *,
        runner: ToolRunner | None = None,
        plan: Sequence[PackageSpec] = LAYOUT_PLAN,
    ) -> None:
        self._settings = settings
        self._runner = runner or ToolRunner(stdout=stdout_for(settings.json_output))
        self._plan = plan

    def create_project(self, raw_name: str) -> ServiceResult:
        """Scaffold a workspace named after *raw_name* in the parent directory."""
        try:
            name = normalise(raw_name)
        except ScaffoldError as exc:
            return self._failure(exc, {})
        logger.debug("name_normalised", raw=raw_name, project=name)

        validate_plan(self._plan)
        root_dir = self._settings.parent_dir.resolve() / name
        emitter = WorkspaceEmitter(root_dir)
        data: dict[str, Any] = {
            "name": name,
            "path": str(root_dir),
            "files_created": emitter.created,
        }

        # Every event logged below, including stdlib records from the emitter
        # and tool runner, carries the project and root.
        with structlog.contextvars.bound_contextvars(project=name, root=str(root_dir)):
            try:
                emitter.emit(self._plan, name)
                logger.debug("workspace_emitted", entries=len(emitter.created))
                bootstrap_workspace(
                    root_dir,
                    runner=self._runner,
                    tools=self._settings.tools,
                    created=emitter.created,
                )
            except ScaffoldError as exc:
                return self._failure(exc, data)
            logger.debug("project_created")

        data["packages"] = [str(spec.name) for spec in self._plan]
        data["next_steps"] = [f"cd {name}", "npm run build"]
        return ServiceResult(ok=True, op=OP_CREATE, data=data)

    @staticmethod
    def _failure(exc: ScaffoldError, data: dict[str, Any]) -> ServiceResult:
        logger.debug("create_project_failed", code=exc.code, detail=exc.detail)
        return ServiceResult(
            ok=False,
            op=OP_CREATE,
            data=data,
            error=ServiceError.from_exception(exc),
        )
