"""The fixed clean-architecture layout: packages, edges and directory shape.

The plan is dependency ordered: a package appears after every workspace
package it depends on, so ``npm install`` and ``npm run build --workspaces``
resolve layers inner to outer.

INVARIANT: every intra-workspace dependency names an earlier package.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import StrEnum

from create_clean_arch.domain.manifests import scoped_name

WORKSPACE_DEP_RANGE = "^1.0.0"
PACKAGES_DIR = "packages"
SOURCE_DIR = "src"
TESTS_DIR = "tests"
INDEX_FILE = "index.ts"
MANIFEST_FILE = "package.json"
COMPILER_CONFIG_FILE = "tsconfig.json"
GITIGNORE_FILE = ".gitignore"
GITIGNORE_CONTENT = "node_modules/\ndist/\n.env\n"


class Layer(StrEnum):
    """The five clean-architecture roles, inner to outer."""

    DOMAIN = "domain"
    CORE = "core"
    INFRASTRUCTURE = "infrastructure"
    IOC = "ioc"
    PRESENTATION = "presentation"


@dataclass(frozen=True)
class PackageSpec:
    """One workspace package.

    Attributes:
        name: Package identifier, also the directory under ``packages/``.
        workspace_deps: Earlier packages this one depends on.
        external_deps: Third-party runtime dependencies and version ranges.
        build_deps: devDependencies added on top of the baseline.
        subdirs: Directories created under ``src/``, in order.
    """

    name: Layer
    workspace_deps: tuple[Layer, ...] = ()
    external_deps: dict[str, str] = field(default_factory=dict)
    build_deps: dict[str, str] = field(default_factory=dict)
    subdirs: tuple[str, ...] = ()

    def runtime_deps(self, project: str) -> dict[str, str]:
        """Resolve ``dependencies`` for *project*: workspace packages first."""
        deps = {scoped_name(project, dep): WORKSPACE_DEP_RANGE for dep in self.workspace_deps}
        deps.update(self.external_deps)
        return deps


LAYOUT_PLAN: tuple[PackageSpec, ...] = (
    PackageSpec(
        name=Layer.DOMAIN,
        subdirs=("entities", "value-objects", "interfaces"),
    ),
    PackageSpec(
        name=Layer.CORE,
        workspace_deps=(Layer.DOMAIN,),
        subdirs=("use-cases", "interfaces"),
    ),
    PackageSpec(
        name=Layer.INFRASTRUCTURE,
        workspace_deps=(Layer.DOMAIN, Layer.CORE),
        subdirs=("repositories", "services"),
    ),
    PackageSpec(
        name=Layer.IOC,
        workspace_deps=(Layer.DOMAIN, Layer.CORE, Layer.INFRASTRUCTURE),
        external_deps={"inversify": "^6.0.0"},
        subdirs=("containers", "modules"),
    ),
    PackageSpec(
        name=Layer.PRESENTATION,
        workspace_deps=(Layer.DOMAIN, Layer.CORE, Layer.INFRASTRUCTURE, Layer.IOC),
        external_deps={"express": "^4.18.2"},
        build_deps={"@types/express": "^4.17.17", "ts-node-dev": "^2.0.0"},
        subdirs=("controllers", "middlewares", "routes"),
    ),
)


def validate_plan(plan: Sequence[PackageSpec]) -> None:
    """Check that *plan* is dependency ordered with unique package names.

    Raises:
        ValueError: on a duplicate package or a dependency on a package that
            does not precede it.
    """
    seen: set[str] = set()
    for spec in plan:
        if spec.name in seen:
            msg = f"Duplicate package in layout plan: {spec.name}"
            raise ValueError(msg)
        for dep in spec.workspace_deps:
            if dep not in seen:
                msg = f"Package {spec.name!r} depends on {dep!r}, which does not precede it"
                raise ValueError(msg)
        seen.add(spec.name)
