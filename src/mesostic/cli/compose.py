"""
CLI: ``mesostic compose`` — print a mesostic built from a file or stdin.
"""

from __future__ import annotations

import json
from pathlib import Path

import typer

from mesostic.cli.utils import err_console, read_source
from mesostic.core.result import Err, Ok
from mesostic.engine import compose


def compose_command(
    spine: str = typer.Argument(..., help="Spine to spell down the page."),
    source: Path | None = typer.Argument(
        None,
        exists=True,
        allow_dash=True,
        dir_okay=False,
        readable=True,
        help="Source text file (reads stdin when omitted or '-').",
    ),
    align: bool = typer.Option(True, "--align/--no-align", help="Line spine letters up on one axis."),
    as_json: bool = typer.Option(False, "--json", help="Print the full result as JSON."),
) -> None:
    """Compose a mesostic of SPINE from SOURCE."""
    text = read_source(source)

    match compose(text, spine):
        case Ok(mesostic):
            if as_json:
                typer.echo(json.dumps(mesostic.to_dict(), indent=2))
            else:
                typer.echo(mesostic.render(align=align))
        case Err(error):
            if as_json:
                typer.echo(json.dumps(error.to_dict(), indent=2))
            else:
                err_console.print(f"[red]{error.code}[/red]: {error.message}", highlight=False)
            raise typer.Exit(code=1)
