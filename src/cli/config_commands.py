"""`vatapi config`: store and inspect the API key."""

from __future__ import annotations

from typing import Annotated

import typer
from rich.text import Text

from cli.context import command_errors, get_state
from cli.ui_components import console, print_success
from core.config import API_KEY, mask_api_key
from core.errors import UsageError

app = typer.Typer(no_args_is_help=True, help="Manage CLI configuration")


@app.command("set")
def set_config(
    ctx: typer.Context,
    api_key: Annotated[str | None, typer.Option("--api-key", help="VAT API key")] = None,
) -> None:
    """Set configuration values."""

    state = get_state(ctx)
    with command_errors():
        if not api_key:
            raise UsageError("No options provided. Use --api-key")
        state.store.set(API_KEY, api_key)
        print_success(console, "API key set")


@app.command("show")
def show_config(ctx: typer.Context) -> None:
    """Show current configuration."""

    state = get_state(ctx)
    with command_errors():
        api_key = state.api_key
        console.print(Text("\nVAT API CLI Configuration\n", style="bold"))
        if api_key:
            value = Text(mask_api_key(api_key), style="green")
            if state.settings.api_key:
                value.append(" (from VATAPI_API_KEY)", style="dim")
        else:
            value = Text("not set", style="red")
        console.print(Text.assemble("API Key:     ", value), soft_wrap=True)
        console.print(Text.assemble("Config file: ", (str(state.store.path), "dim")), soft_wrap=True)
        console.print()


@app.command("clear")
def clear_config(ctx: typer.Context) -> None:
    """Reset every configuration value to its default."""

    state = get_state(ctx)
    with command_errors():
        state.store.clear()
        print_success(console, "Configuration cleared")
