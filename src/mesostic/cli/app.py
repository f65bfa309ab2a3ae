"""
Root Typer application for the mesostic CLI.

    mesostic compose SPINE [SOURCE]   print a mesostic
    mesostic serve                    run the HTTP API
    mesostic --version
"""

from __future__ import annotations

import typer
from typer import Typer

from mesostic.cli.compose import compose_command
from mesostic.cli.serve import serve_command

app = Typer(
    name="mesostic",
    help="mesostic — compose mesostics from source text and a spine.",
    rich_markup_mode="rich",
)


# ── Version callback ─────────────────────────────────────────────────────


def _version_callback(value: bool) -> None:
    if value:
        from mesostic import __version__

        typer.echo(f"mesostic {__version__}")
        raise typer.Exit()


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version: bool | None = typer.Option(  # noqa: UP007
        None,
        "--version",
        "-V",
        help="Show version and exit.",
        callback=_version_callback,
        is_eager=True,
    ),
) -> None:
    """mesostic CLI: compose mesostics and serve the API."""
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())


app.command("compose")(compose_command)
app.command("serve")(serve_command)
