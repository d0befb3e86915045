"""Walk the layout plan and materialise the workspace tree on disk.

Creation order is fixed: root directory, root manifests, ``packages/``,
then each package in plan order (directory, ``src/``, ``tests/``,
manifests, empty ``src/index.ts``, ``src/<subdir>/``).

There is no cleanup on failure. A partially written tree stays on disk
for inspection and the error propagates.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

from create_clean_arch.domain.errors import IOFailure, TargetExists
from create_clean_arch.domain.layout import (
    COMPILER_CONFIG_FILE,
    INDEX_FILE,
    MANIFEST_FILE,
    PACKAGES_DIR,
    SOURCE_DIR,
    TESTS_DIR,
    PackageSpec,
)
from create_clean_arch.domain.manifests import (
    compiler_config,
    package_manifest,
    render_manifest,
    root_manifest,
)
from create_clean_arch.infrastructure.filesystem import make_directory, write_text_file

logger = logging.getLogger(__name__)


class WorkspaceEmitter:
    """Writes one workspace rooted at ``root_dir``.

    Tracks every created path (relative to the root, POSIX separators) in
    creation order so callers can report what was produced, including on
    failure.
    """

    def __init__(self, root_dir: Path) -> None:
        self.root_dir = root_dir
        self.created: list[str] = []

    def emit(self, plan: Sequence[PackageSpec], project: str) -> list[str]:
        """Write the full tree for *project*. Returns the created paths.

        Raises:
            TargetExists: if ``root_dir`` is already present. Nothing is written.
            IOFailure: if any directory or file cannot be created, including a
                missing parent directory (only the root itself is created).
        """
        if self.root_dir.exists():
            msg = f"Target directory already exists: {self.root_dir}"
            raise TargetExists(msg, path=str(self.root_dir))

        try:
            self.root_dir.mkdir()
        except FileExistsError as exc:
            msg = f"Target directory already exists: {self.root_dir}"
            raise TargetExists(msg, path=str(self.root_dir)) from exc
        except OSError as exc:
            msg = f"Cannot create directory {self.root_dir}: {exc.strerror or exc}"
            raise IOFailure(msg, path=str(self.root_dir)) from exc
        logger.debug("Created project root %s", self.root_dir)

        tsconfig = render_manifest(compiler_config())
        self._file(Path(MANIFEST_FILE), render_manifest(root_manifest(project)))
        self._file(Path(COMPILER_CONFIG_FILE), tsconfig)
        self._dir(Path(PACKAGES_DIR))

        for spec in plan:
            self._emit_package(spec, project, tsconfig)
        return list(self.created)

    def _emit_package(self, spec: PackageSpec, project: str, tsconfig: str) -> None:
        pkg = Path(PACKAGES_DIR) / spec.name
        src = pkg / SOURCE_DIR
        self._dir(pkg)
        self._dir(src)
        self._dir(pkg / TESTS_DIR)

        manifest = package_manifest(
            project,
            spec.name,
            spec.runtime_deps(project),
            spec.build_deps,
        )
        self._file(pkg / MANIFEST_FILE, render_manifest(manifest))
        self._file(pkg / COMPILER_CONFIG_FILE, tsconfig)
        self._file(src / INDEX_FILE, "")

        for subdir in spec.subdirs:
            self._dir(src / subdir)
        logger.debug("Emitted package %s", manifest.name)

    def _dir(self, relative: Path) -> None:
        make_directory(self.root_dir, self.root_dir / relative)
        self.created.append(f"{relative.as_posix()}/")

    def _file(self, relative: Path, content: str) -> None:
        write_text_file(self.root_dir, self.root_dir / relative, content)
        self.created.append(relative.as_posix())


def emit(plan: Sequence[PackageSpec], project: str, root_dir: Path) -> list[str]:
    """Materialise *plan* for *project* under *root_dir*. See :class:`WorkspaceEmitter`."""
    return WorkspaceEmitter(root_dir).emit(plan, project)
