"""Authenticated commands: `vat`, `rates`, `ip` and `calculate`.

Every command follows the same path: check the credential, call the API with
the spinner running, then render JSON, a table or a labeled report.
"""

from __future__ import annotations

from typing import Annotated

import typer

from cli.context import command_errors, get_state
from cli.ui_components import console, print_json, print_report, print_table
from core.errors import UsageError
from core.services.reports import (
    COUNTRY_RATE_COLUMNS,
    calculation_report,
    country_rates_report,
    extract_country_list,
    ip_rates_report,
    validation_report,
)

JsonFlag = Annotated[bool, typer.Option("--json", help="Output as JSON")]

vat_app = typer.Typer(no_args_is_help=True, help="VAT number operations")
rates_app = typer.Typer(no_args_is_help=True, help="VAT rate operations")
ip_app = typer.Typer(no_args_is_help=True, help="IP-based VAT lookup")
calculate_app = typer.Typer(no_args_is_help=True, help="Calculate VAT amounts")


@vat_app.command("validate")
def validate_vat(
    ctx: typer.Context,
    vat_number: Annotated[str, typer.Argument(metavar="VAT-NUMBER", help="VAT number, e.g. GB123456789")],
    as_json: JsonFlag = False,
) -> None:
    """Validate a VAT number (e.g. GB123456789)."""

    state = get_state(ctx)
    with command_errors():
        state.require_auth()
        payload = state.fetch(
            f"Validating VAT number {vat_number}...",
            lambda service: service.validate_vat_number(vat_number),
        )
        if as_json:
            print_json(payload)
            return
        print_report(console, validation_report(payload, vat_number))


@rates_app.command("country")
def country_rates(
    ctx: typer.Context,
    country_code: Annotated[str, typer.Argument(metavar="COUNTRY-CODE", help="Country code, e.g. GB, DE, FR")],
    as_json: JsonFlag = False,
) -> None:
    """Get VAT rates for a country (e.g. GB, DE, FR)."""

    state = get_state(ctx)
    with command_errors():
        state.require_auth()
        payload = state.fetch(
            f"Fetching rates for {country_code}...",
            lambda service: service.get_country_rates(country_code),
        )
        if as_json:
            print_json(payload)
            return
        print_report(console, country_rates_report(payload, country_code))


@rates_app.command("all")
def all_rates(ctx: typer.Context, as_json: JsonFlag = False) -> None:
    """Get VAT rates for all EU countries."""

    state = get_state(ctx)
    with command_errors():
        state.require_auth()
        payload = state.fetch("Fetching all country rates...", lambda service: service.get_all_country_rates())
        if as_json:
            print_json(payload)
            return
        countries = extract_country_list(payload)
        if not isinstance(countries, list):
            print_json(payload)
            return
        rows = [row if isinstance(row, dict) else {} for row in countries]
        print_table(console, rows, COUNTRY_RATE_COLUMNS)


@ip_app.command("lookup")
def ip_lookup(
    ctx: typer.Context,
    ip_address: Annotated[
        str | None,
        typer.Argument(metavar="[IP-ADDRESS]", help="IP address (defaults to your IP)"),
    ] = None,
    as_json: JsonFlag = False,
) -> None:
    """Get VAT rates based on IP address (defaults to your IP)."""

    state = get_state(ctx)
    with command_errors():
        state.require_auth()
        payload = state.fetch("Looking up VAT rates by IP...", lambda service: service.get_rates_by_ip(ip_address))
        if as_json:
            print_json(payload)
            return
        print_report(console, ip_rates_report(payload, ip_address))


@calculate_app.command("vat")
def calculate_vat(
    ctx: typer.Context,
    price: Annotated[str | None, typer.Option("--price", help="Price amount")] = None,
    country: Annotated[str | None, typer.Option("--country", help="Country code (e.g. GB, DE)")] = None,
    rate: Annotated[str | None, typer.Option("--rate", help="VAT rate (overrides country default)")] = None,
    as_json: JsonFlag = False,
) -> None:
    """Calculate VAT for a price."""

    state = get_state(ctx)
    with command_errors():
        state.require_auth()
        if not price:
            raise UsageError("--price is required")
        payload = state.fetch(
            "Calculating VAT...",
            lambda service: service.calculate_vat(country_code=country, price=price, vat_rate=rate),
        )
        if as_json:
            print_json(payload)
            return
        print_report(console, calculation_report(payload, price))
