"""Pydantic configuration sections with code-baked defaults.

Sparse TOML contract: defaults live here, ``create-clean-arch.toml`` only
holds overrides.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class ToolsConfig(BaseModel):
    """[tools] section: executables for the post-emit steps."""

    model_config = {"frozen": True}

    git: str = "git"
    npm: str = "npm"
    install_args: list[str] = Field(default_factory=lambda: ["install"])
