"""Rich renderers for ServiceResult.

Each renderer writes to a StringIO-backed Console; the caller extracts the
text via ``get_output(console)``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.text import Text

from create_clean_arch.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from create_clean_arch.services.result import ServiceResult


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal, which is
    the case inside Click's CliRunner and piped output.
    """
    console = create_console()
    if result.ok:
        _render_created(result, console, verbose=verbose)
    else:
        _render_error(result, console)
    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op}: {msg}"
    return f"OK: {result.op}"


def _field(console: Console, key: str, value: Any) -> None:
    k = Text(f"  {key}: ", style="cca.key")
    style = {"name": "cca.name", "path": "cca.path"}.get(key, "")
    console.print(k, Text(str(value), style=style), sep="", soft_wrap=True)


def _render_created(result: ServiceResult, console: Console, *, verbose: bool) -> None:
    console.print(Text("OK", style="cca.ok"), Text(f"  {result.op}", style="cca.op"), sep="")
    data = result.data
    for key in ("name", "path"):
        if key in data:
            _field(console, key, data[key])
    if data.get("packages"):
        _field(console, "packages", ", ".join(data["packages"]))

    if verbose and data.get("files_created"):
        console.print(Text("  files_created:", style="cca.key"))
        for path in data["files_created"]:
            console.print(f"    {path}", style="cca.path")

    steps = data.get("next_steps") or []
    if steps:
        console.print()
        console.print(Text("  Next steps:", style="cca.step"))
        for step in steps:
            console.print(f"    {step}")


def _render_error(result: ServiceResult, console: Console) -> None:
    """One line. The structured detail is in JSON output and the debug log."""
    err = result.error
    msg = err.message if err else "Unknown error"
    console.print(
        Text("ERROR", style="cca.error"),
        Text(f"  {result.op}: ", style="cca.op"),
        Text(msg),
        sep="",
        soft_wrap=True,
    )