"""The ``create-clean-arch`` command."""

from __future__ import annotations

import contextlib
import sys
from pathlib import Path

import click

from create_clean_arch import __version__
from create_clean_arch.commands._base import ScaffoldCommand
from create_clean_arch.commands._context import AppContext
from create_clean_arch.config.settings import ScaffoldSettings
from create_clean_arch.domain.names import validate_name

_EXAMPLES = """\
  create-clean-arch
  create-clean-arch --name "My App"
  create-clean-arch --no-interact --name billing --directory ~/src
  create-clean-arch --json --no-interact --name demo"""


def _prompt_name(value: str) -> str:
    """value_proc for the name prompt: reject and re-ask on invalid input."""
    value = value.strip()
    verdict = validate_name(value)
    if verdict is not True:
        raise click.UsageError(str(verdict))
    return value


def _ask_name(*, err: bool) -> str:
    """Prompt for the project name.

    With *err* set the prompt, rejection messages and the echoed answer all
    go to stderr, so stdout carries nothing but the result document.
    """
    redirect = contextlib.redirect_stdout(sys.stderr) if err else contextlib.nullcontext()
    with redirect:
        return click.prompt("Project name", value_proc=_prompt_name, err=err)


@click.command("create-clean-arch", cls=ScaffoldCommand, examples=_EXAMPLES)
@click.version_option(version=__version__, prog_name="create-clean-arch")
@click.option("--name", default=None, help="Project name (skips the prompt).")
@click.option(
    "-d",
    "--directory",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    default=None,
    help="Parent directory for the project (default: current directory).",
)
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Minimal output.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug info.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("--no-interact", is_flag=True, help="Non-interactive mode (no prompts).")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
def cli(
    name: str | None,
    directory: Path | None,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    no_interact: bool,
    config_path: str | None,
) -> None:
    """Create a Node.js workspace laid out as a Clean Architecture monorepo.

    Generates domain, core, infrastructure, ioc and presentation packages,
    initialises git and installs dependencies.
    """
    settings = ScaffoldSettings.from_cli(
        config_path=config_path,
        parent_dir=directory,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
        no_interact=no_interact,
    )
    app = AppContext(settings)

    if name is None:
        name = "" if settings.no_interact else _ask_name(err=settings.json_output)

    from create_clean_arch.services.scaffold import ScaffoldService

    app.emit(ScaffoldService(settings).create_project(name))
