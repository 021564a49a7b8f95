"""Entry point of the `vatapi` command."""

from __future__ import annotations

from typing import Annotated

import typer

from cli import __version__
from cli import config_commands
from cli.context import get_state
from cli.lookup_commands import calculate_app, ip_app, rates_app, vat_app
from core.logging import configure_logging

app = typer.Typer(
    name="vatapi",
    invoke_without_command=True,
    help="VAT API CLI - European VAT validation from your terminal",
    pretty_exceptions_show_locals=False,
)

app.add_typer(config_commands.app, name="config")
app.add_typer(vat_app, name="vat")
app.add_typer(rates_app, name="rates")
app.add_typer(ip_app, name="ip")
app.add_typer(calculate_app, name="calculate")


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(__version__)
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    version: Annotated[
        bool | None,
        typer.Option("--version", "-V", callback=_version_callback, is_eager=True, help="Show version"),
    ] = None,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log HTTP requests to stderr")] = False,
) -> None:
    """VAT API CLI - European VAT validation from your terminal."""

    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()

    state = get_state(ctx)
    configure_logging("DEBUG" if verbose else state.settings.log_level)


def run() -> None:
    app()


if __name__ == "__main__":
    run()
