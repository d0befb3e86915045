"""Manifest models and the canonical JSON writer.

Three producers build fresh pydantic models: the workspace root
``package.json``, a per-package ``package.json`` and ``tsconfig.json``.
Key order is the model field order (dict fields keep insertion order) and
all serialisation goes through :func:`render_manifest`, so indentation and
ordering are properties of the writer rather than of construction sites.
"""

from __future__ import annotations

import json
from collections.abc import Mapping

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel

MANIFEST_VERSION = "1.0.0"
WORKSPACE_GLOB = "packages/*"
ENTRY_POINT = "src/index.ts"

# Always present in every package's devDependencies.
BASELINE_BUILD_DEPS: dict[str, str] = {
    "typescript": "^5.0.0",
    "@types/node": "^20.0.0",
    "jest": "^29.0.0",
    "@types/jest": "^29.0.0",
}


class RootManifest(BaseModel):
    """Workspace root ``package.json``."""

    model_config = {"frozen": True}

    name: str
    version: str = MANIFEST_VERSION
    private: bool = True
    workspaces: list[str] = Field(default_factory=lambda: [WORKSPACE_GLOB])
    scripts: dict[str, str] = Field(
        default_factory=lambda: {
            "build": "npm run build --workspaces",
            "test": "npm run test --workspaces",
        }
    )


class PackageManifest(BaseModel):
    """Per-package ``package.json`` under ``packages/<pkg>/``."""

    model_config = {"frozen": True, "populate_by_name": True}

    name: str
    version: str = MANIFEST_VERSION
    main: str = ENTRY_POINT
    types: str = ENTRY_POINT
    scripts: dict[str, str] = Field(default_factory=lambda: {"build": "tsc", "test": "jest"})
    dependencies: dict[str, str] = Field(default_factory=dict)
    dev_dependencies: dict[str, str] = Field(default_factory=dict, alias="devDependencies")


class CompilerOptions(BaseModel):
    """``compilerOptions`` block, serialised with camelCase keys."""

    model_config = {"frozen": True, "alias_generator": to_camel, "populate_by_name": True}

    target: str = "ES2020"
    module: str = "commonjs"
    lib: list[str] = Field(default_factory=lambda: ["ES2020"])
    declaration: bool = True
    source_map: bool = True
    out_dir: str = "./dist"
    strict: bool = True
    module_resolution: str = "node"
    base_url: str = "./"
    es_module_interop: bool = True
    experimental_decorators: bool = True
    emit_decorator_metadata: bool = True
    skip_lib_check: bool = True
    force_consistent_casing_in_file_names: bool = True


class CompilerConfig(BaseModel):
    """``tsconfig.json`` emitted at the root and in every package."""

    model_config = {"frozen": True, "alias_generator": to_camel, "populate_by_name": True}

    compiler_options: CompilerOptions = Field(default_factory=CompilerOptions)
    exclude: list[str] = Field(default_factory=lambda: ["node_modules", "dist"])


def scoped_name(project: str, package_id: str) -> str:
    """Return the workspace-scoped npm name ``@<project>/<package_id>``."""
    return f"@{project}/{package_id}"


def root_manifest(project: str) -> RootManifest:
    """Build the workspace root manifest for *project*."""
    return RootManifest(name=project)


def package_manifest(
    project: str,
    package_id: str,
    runtime_deps: Mapping[str, str],
    build_deps: Mapping[str, str],
) -> PackageManifest:
    """Build the manifest of one workspace package.

    ``devDependencies`` starts with :data:`BASELINE_BUILD_DEPS`; per-package
    build deps are appended after it. On a key collision the baseline range
    is kept.
    """
    dev_deps = dict(BASELINE_BUILD_DEPS)
    for key, version in build_deps.items():
        dev_deps.setdefault(key, version)
    return PackageManifest(
        name=scoped_name(project, package_id),
        dependencies=dict(runtime_deps),
        dev_dependencies=dev_deps,
    )


def compiler_config() -> CompilerConfig:
    """Build the fixed ``tsconfig.json`` model."""
    return CompilerConfig()


def render_manifest(manifest: BaseModel) -> str:
    """Serialise *manifest* as two-space-indented JSON with a trailing newline."""
    payload = manifest.model_dump(mode="json", by_alias=True)
    return json.dumps(payload, indent=2, ensure_ascii=False) + "\n"
